"""
Optional compact binary encoding for parsed records.

Requires the `encode` extra (`pip install bio-apis[encode]`). Nothing in the
library uses this internally; it exists for callers that want to persist
records they already fetched.

Usage:
    blob = encode_record(entry)
    entry_again = decode_record(PdbEntry, blob)
    assert entry_again == entry
"""

from typing import TypeVar

import msgpack
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from bio_apis.exceptions import DecodeError

M = TypeVar("M", bound=BaseModel)


def encode_record(record: BaseModel) -> bytes:
    """Encode a record as msgpack bytes."""
    return msgpack.packb(record.model_dump(mode="json", by_alias=True), use_bin_type=True)


def decode_record(model_cls: type[M], data: bytes) -> M:
    """
    Decode msgpack bytes produced by encode_record.

    Raises:
        DecodeError: If data is not msgpack or doesn't match model_cls
    """
    try:
        payload = msgpack.unpackb(data, raw=False)
    except (msgpack.UnpackException, ValueError, TypeError) as e:
        raise DecodeError(f"Invalid msgpack data: {e}") from e

    try:
        return model_cls.model_validate(payload)
    except PydanticValidationError as e:
        raise DecodeError(f"Encoded data is not a valid {model_cls.__name__}: {e.error_count()} error(s)") from e
