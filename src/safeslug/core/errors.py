"""Exception hierarchy for slug conversion failures"""

from safeslug.core.models import SlugErrorKind


class SlugError(ValueError):
    """Base class; `kind` identifies the failure without isinstance checks."""
    kind: SlugErrorKind


class InvalidInputError(SlugError):
    kind = SlugErrorKind.invalid_input


class InvalidEncodingError(SlugError):
    kind = SlugErrorKind.invalid_encoding

    def __init__(self, position: int, reason: str):
        super().__init__(f"Invalid UTF-8 at byte {position}: {reason}")
        self.position = position
        self.reason = reason


class EmptyResultError(SlugError):
    kind = SlugErrorKind.empty_result


class BufferCapacityError(SlugError):
    """Generator tried to write past the estimated capacity (an internal defect)."""
    kind = SlugErrorKind.buffer_capacity


class AllocationFailureError(SlugError):
    kind = SlugErrorKind.allocation_failure
