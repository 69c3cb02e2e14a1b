"""Small helpers: SIP numbers, base64, hex/binary strings, URL encoding, WELL512, ECDH/ECDSA and MD5."""

__version__ = "0.1.0"