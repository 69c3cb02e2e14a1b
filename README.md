# utilkit

Small helpers written in plain Python that need nothing outside the standard library.

## Modules

- `utilkit.sip_utils`
  - `extract_number_from_uri(uri)`: returns the user part of a URI such as `sip:1000@host`. It returns `""` when no `@` follows the start.
  - `clean_number(number)`: keeps only digits, `*`, `#` and `+`.
- `utilkit.base64codec`
  - `b64encode(data, alphabet)` and `b64decode(text, alphabet)`, using `Alphabet.BASIC` (`+/`) or `Alphabet.FSAFE` (`-,`).
  - Decoding stops at the first `=` or at the first character outside the standard base64 set.
- `utilkit.bin2str`
  - `hex_string_to_int` and `int_to_hex_string`. The hex output is upper case, padded to an even length, and negative values are taken as 32-bit.
  - `bin_string_to_int` and `int_to_bin_string`. The binary output is zero-padded to a multiple of 7 digits.
  - `hex_string_to_buf` and `buf_to_hex_string`.
  - `hex_string_clean_to_buf(text)`: strips `0x`, line breaks and non-hex characters. It raises `ValueError` when an odd number of hex digits remains.
- `utilkit.urlencode`
  - `urlencode(text, limit)`: leaves letters, digits and `-_.!~*'();/?:@&=+$,#` as they are.
  - `urlencode_all(text, limit)`: leaves only letters, digits and `-_.` as they are.
  - `urldecode(text, limit)`: returns bytes.
  - `limit` is the output size including a terminator, so at most `limit - 1` characters come back. When it is `None`, the output is unlimited.
- `utilkit.utilities`
  - `file_write_time(path)`: returns the last modification time as a UTC `datetime`. It raises `OSError` when the file cannot be read.
- `utilkit.well512`
  - `Well512(state, index)` is the WELL512 generator over sixteen 32-bit words.
  - `Well512.seeded(rng)` fills the state from a `random.Random`.
  - `next_value()` returns the next value, and the object is also an endless iterator.
  - `state` and `index` are read-only properties.
- `utilkit.unicode`
  - `utf8_to_ansi(data, encoding)`: re-encodes UTF-8 bytes into a code page. It defaults to the system's preferred encoding and replaces characters it cannot map.
- `utilkit.ecc_curves`
  - The curves `SECP128R1`, `SECP192R1`, `SECP256R1` (the default) and `SECP384R1`, and `curve_by_size(size)`.
  - `Point`, where `(0, 0)` is the point at infinity.
  - `point_add`, `point_double`, `point_multiply`, `mod_sqrt`, `compress_point` and `decompress_point`.
- `utilkit.ecc`
  - `make_key(curve)` returns a `KeyPair` holding a compressed `public_key` and a big-endian `private_key`.
  - `shared_secret(public_key, private_key, curve)` performs ECDH.
  - `sign(private_key, message_hash, curve)` produces a signature of `r || s`.
  - `verify(public_key, message_hash, signature, curve)` returns `True` or `False`.
  - Failures raise `EccError`, and arguments of the wrong length raise `ValueError`.
- `utilkit.md5`
  - `Md5(data)` is an incremental hasher with `update`, `digest`, `hexdigest` and `copy`.
  - `md_string(text)` returns the hex digest of text up to its first NUL.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Examples

    from utilkit.base64codec import Alphabet, b64encode, b64decode
    text = b64encode(b"hello", Alphabet.FSAFE)
    assert b64decode(text, Alphabet.FSAFE) == b"hello"

    from utilkit.sip_utils import extract_number_from_uri
    extract_number_from_uri("sip:1000@example.com")   # "1000"

    from utilkit.md5 import md_string
    md_string("abc")   # "900150983cd24fb0d6963f7d28e17f72"

    import hashlib
    from utilkit.ecc import make_key, sign, verify
    keys = make_key()
    digest = hashlib.sha256(b"message").digest()
    signature = sign(keys.private_key, digest)
    assert verify(keys.public_key, digest, signature)

    from utilkit.well512 import Well512
    rng = Well512.seeded()
    values = [rng.next_value() for _ in range(4)]

## What it does not do

- There is no command-line tool. Everything is used as a library.
- Nothing here reads version resources embedded in executables.
- Nothing here works with system tray icons or window messages.
- The elliptic-curve code is plain integer arithmetic and is not constant-time. Use it where side-channel resistance does not matter.