"""Per-codepoint output policy shared by the size estimator and the generator.

Both passes call `classify` and apply the same separator-collapsing rule, so
a change to the policy lands in one place and the estimate stays exact.
"""

from typing import NamedTuple, Union

from safeslug.core.models import SlugOptions
from safeslug.core.translit import TransliterationTable
from safeslug.core.utils.ascii import is_alnum, is_separator_like, to_lower


class Piece(NamedTuple):
    """Output bytes for one step; splittable pieces may be cut by max_length."""
    data:       bytes
    splittable: bool = True


class _Separator:
    __slots__ = ()

    def __repr__(self) -> str:
        return "SEPARATOR"


SEPARATOR = _Separator()

Step = Union[Piece, _Separator]


def _fold(data: bytes, options: SlugOptions) -> bytes:
    return data if options.preserve_case else bytes(to_lower(b) for b in data)


def _replacement_steps(text: str, options: SlugOptions) -> tuple[Step, ...]:
    """Re-read replacement text with the ASCII rules: alnum runs and separator requests."""
    steps: list[Step] = []
    run = bytearray()
    for b in text.encode("ascii"):
        if is_alnum(b):
            run.append(b)
            continue
        if run:
            steps.append(Piece(_fold(bytes(run), options)))
            run.clear()
        if is_separator_like(b):
            steps.append(SEPARATOR)
    if run:
        steps.append(Piece(_fold(bytes(run), options)))
    return tuple(steps)


def classify(
    codepoint: int,
    raw: bytes,
    options: SlugOptions,
    table: TransliterationTable,
    ) -> tuple[Step, ...]:
    """Return the output steps for one decoded codepoint (raw = its UTF-8 bytes)."""
    if codepoint < 0x80:
        if is_alnum(codepoint):
            return (Piece(_fold(raw, options)),)
        replacement = table.lookup(codepoint)
        if replacement is not None:
            return _replacement_steps(replacement, options)
        if is_separator_like(codepoint):
            return (SEPARATOR,)
        return ()

    if options.preserve_case:
        return (Piece(raw, splittable=False),)
    replacement = table.lookup(codepoint)
    if replacement is not None:
        return _replacement_steps(replacement, options)
    return ()
