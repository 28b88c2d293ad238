"""Second pass: write the slug into a buffer sized by the estimator"""

from safeslug.core.classify import SEPARATOR, Piece, classify
from safeslug.core.errors import BufferCapacityError, EmptyResultError
from safeslug.core.models import SlugOptions
from safeslug.core.translit import TransliterationTable
from safeslug.core.utf8 import iter_codepoints


class SlugBuffer:
    """Fixed-capacity output buffer; writes past capacity raise instead of growing."""

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._data = bytearray(capacity)
        self._length = 0

    def __len__(self) -> int:
        return self._length

    @property
    def last(self) -> int | None:
        return self._data[self._length - 1] if self._length else None

    def write(self, chunk: bytes) -> None:
        end = self._length + len(chunk)
        if end > self.capacity:
            raise BufferCapacityError(
                f"Slug generator overran estimated capacity ({end} > {self.capacity})"
            )
        self._data[self._length:end] = chunk
        self._length = end

    def pop(self) -> None:
        if self._length:
            self._length -= 1

    def getvalue(self) -> bytes:
        return bytes(self._data[:self._length])


class _Writer:
    """Applies separator collapsing and max_length on top of a SlugBuffer."""

    def __init__(self, buffer: SlugBuffer, options: SlugOptions):
        self.buffer = buffer
        self.separator = options.separator_byte
        self.limit = options.max_length
        self.done = False

    @property
    def room(self) -> int | None:
        return None if not self.limit else self.limit - len(self.buffer)

    def separator_request(self) -> None:
        if self.room == 0 or len(self.buffer) == 0 or self.buffer.last == self.separator:
            return
        self.buffer.write(bytes((self.separator,)))

    def piece(self, piece: Piece) -> None:
        room = self.room
        if room is None or len(piece.data) <= room:
            self.buffer.write(piece.data)
        elif piece.splittable:
            # Replacement text may be cut partway through at the limit.
            self.buffer.write(piece.data[:room])
        else:
            # Never split a raw UTF-8 sequence; stop instead.
            self.done = True


def generate(
    data: bytes,
    options: SlugOptions,
    table: TransliterationTable,
    buffer: SlugBuffer,
    ) -> bytes:
    """Write the slug for validated `data` into `buffer` and return its bytes.

    Raises EmptyResultError when nothing sluggable remains, and
    BufferCapacityError if the estimate was too small.
    """
    writer = _Writer(buffer, options)
    for codepoint, raw in iter_codepoints(data):
        if writer.room == 0:
            break
        for step in classify(codepoint, raw, options, table):
            if step is SEPARATOR:
                writer.separator_request()
            else:
                writer.piece(step)
            if writer.done or writer.room == 0:
                break
        if writer.done:
            break

    if buffer.last == writer.separator:
        buffer.pop()
    if not len(buffer):
        raise EmptyResultError("Input produced no slug characters")
    return buffer.getvalue()
