"""Public entry point: validate, estimate, allocate, generate"""

from typing import Optional, Union

from safeslug.core.errors import AllocationFailureError, InvalidInputError
from safeslug.core.estimate import estimate_size
from safeslug.core.generate import SlugBuffer, generate
from safeslug.core.models import SlugOptions
from safeslug.core.translit import TransliterationTable, default_table
from safeslug.core.utf8 import validate_utf8


def _as_bytes(text: Union[bytes, bytearray, memoryview, str, None]) -> bytes:
    """Coerce input to bytes; lone surrogates in a str survive to be rejected by validation."""
    if text is None:
        raise InvalidInputError("Input is None")
    if isinstance(text, str):
        return text.encode("utf-8", "surrogatepass")
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise InvalidInputError(f"Expected bytes or str, got {type(text).__name__}")


def slugify(
    text: Union[bytes, bytearray, memoryview, str],
    options: Optional[SlugOptions] = None,
    table: Optional[TransliterationTable] = None,
    ) -> str:
    """Convert UTF-8 input to a slug, or raise a SlugError subclass.

    The whole input is validated before anything is generated: a single
    malformed, overlong, surrogate or non-character sequence anywhere rejects
    it with InvalidEncodingError.
    """
    data = _as_bytes(text)
    if not data:
        raise InvalidInputError("Input is empty")
    if b"\x00" in data:
        raise InvalidInputError(f"Input contains a NUL byte at {data.index(0)}")
    validate_utf8(data)

    opts = options or SlugOptions()
    if table is None:
        table = default_table()
    capacity = estimate_size(data, opts, table)
    try:
        buffer = SlugBuffer(capacity)
    except MemoryError as e:
        raise AllocationFailureError(f"Could not allocate {capacity} byte slug buffer") from e
    return generate(data, opts, table, buffer).decode("utf-8")
