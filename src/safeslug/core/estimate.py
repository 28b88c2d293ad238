"""First pass: exact output size for (input, options) without writing anything"""

from safeslug.core.classify import SEPARATOR, classify
from safeslug.core.models import SlugOptions
from safeslug.core.translit import TransliterationTable
from safeslug.core.utf8 import iter_codepoints


def estimate_size(data: bytes, options: SlugOptions, table: TransliterationTable) -> int:
    """Return the number of bytes the generator writes before max_length and trailing trim.

    `data` must already be validated. max_length is not applied here, so the
    result is an upper bound for truncated output and exact otherwise.
    """
    size = 0
    after_separator = True      # nothing written yet: a separator would be leading
    for codepoint, raw in iter_codepoints(data):
        for step in classify(codepoint, raw, options, table):
            if step is SEPARATOR:
                if not after_separator:
                    size += 1
                    after_separator = True
            else:
                size += len(step.data)
                after_separator = False
    return size
