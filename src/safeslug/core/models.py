"""Value types shared by the decoder, both slug passes, and the entry point"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SlugErrorKind(str, Enum):
    """Classification of a failed conversion"""
    invalid_input = "invalid_input"
    invalid_encoding = "invalid_encoding"
    empty_result = "empty_result"
    buffer_capacity = "buffer_capacity"
    allocation_failure = "allocation_failure"


@dataclass(frozen=True)
class DecodeResult:
    """One decoded UTF-8 sequence."""
    codepoint: int
    consumed:  int      # bytes taken from the input, 1-4
    valid:     bool


class SlugOptions(BaseModel):
    """Per-call conversion options; immutable once built."""
    model_config = ConfigDict(frozen=True)

    separator:     str  = Field(default="-", min_length=1, max_length=1, description="Single ASCII separator byte")
    max_length:    int  = Field(default=0, ge=0, description="Max output bytes; 0 = unbounded")
    preserve_case: bool = Field(default=False, description="Keep case and raw non-ASCII bytes")

    @field_validator("separator")
    @classmethod
    def _printable_non_alnum(cls, value: str) -> str:
        if not (0x20 <= ord(value) < 0x7F) or value.isalnum():
            raise ValueError("separator must be a printable, non-alphanumeric ASCII character")
        return value

    @property
    def separator_byte(self) -> int:
        return ord(self.separator)
