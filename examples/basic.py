"""Blob basics: parsing, encoding variants, and dual-mode deserialization."""

import json

from blob import Blob, DecodeError, UrlSafeNoPadBlob
from blob.serde import dumps, require_blob

DATA = bytes([0x1, 0x2, 0x3, 0x4, 0x5])

my_blob = Blob(DATA)
print(my_blob)
assert my_blob == DATA

# Blobs double as binary writers.
my_blob.write(b"Testing")
print(my_blob)

# The encoding is part of the type.
token = UrlSafeNoPadBlob(b"\xfb\xff")
print(f"url-safe: {token}, standard: {token.copy().with_config(Blob)}")

# Deserialization accepts base-64 text or raw byte values.
payload = json.loads('{"text": "AQIDBAU=", "raw": [1, 2, 3, 4, 5]}')
assert require_blob(payload["text"], field_name="text") == require_blob(payload["raw"], field_name="raw")
print(dumps({"blob": Blob.deserialize(payload["raw"])}))

try:
    Blob.from_str("not-valid-base64!!")
except DecodeError as exc:
    print(f"rejected: {exc}")
