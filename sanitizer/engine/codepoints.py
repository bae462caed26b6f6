# sanitizer/engine/codepoints.py

"""Code point iteration with UTF-16 offsets.

Python strings are sequences of code points, but callers address text by
UTF-16 code unit (the unit their UI layer counts in). Strings may also carry
explicit surrogate halves, e.g. text decoded with ``surrogatepass``; a
well-formed high/low pair is treated as the single code point it encodes.
"""

from typing import Iterator, NamedTuple

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF
BMP_MAX = 0xFFFF


class CodePointUnit(NamedTuple):
    """A single logical character of the input.

    Attributes:
        offset: Starting UTF-16 code unit index in the original text
        code_point: Decoded code point (a lone surrogate keeps its own value)
        chars: The slice of the original string holding this character
    """

    offset: int
    code_point: int
    chars: str


def iter_code_points(text: str) -> Iterator[CodePointUnit]:
    """Yields each code point of ``text`` with its UTF-16 offset."""
    offset = 0
    i = 0
    length = len(text)

    while i < length:
        code_point = ord(text[i])
        width = 1

        if HIGH_SURROGATE_START <= code_point <= HIGH_SURROGATE_END and i + 1 < length:
            low = ord(text[i + 1])
            if LOW_SURROGATE_START <= low <= LOW_SURROGATE_END:
                code_point = (
                    0x10000
                    + ((code_point - HIGH_SURROGATE_START) << 10)
                    + (low - LOW_SURROGATE_START)
                )
                width = 2

        yield CodePointUnit(offset, code_point, text[i : i + width])

        offset += 2 if code_point > BMP_MAX else 1
        i += width


def utf16_length(text: str) -> int:
    """Returns the length of ``text`` in UTF-16 code units."""
    return sum(2 if ord(ch) > BMP_MAX else 1 for ch in text)
