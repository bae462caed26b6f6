# sanitizer/core/definitions.py

"""Category and pattern name constants for invisible character detection."""


class InvisibleCategory:
    """Constants naming the categories of invisible code points."""

    # Explicit code point sets
    ZERO_WIDTH = "ZERO_WIDTH"
    BIDI_CONTROLS = "BIDI_CONTROLS"
    MATH_OPERATORS = "MATH_OPERATORS"
    HYPHENATION = "HYPHENATION"
    VARIATION_SELECTORS = "VARIATION_SELECTORS"
    FORMAT_CONTROLS = "FORMAT_CONTROLS"
    SHORTHAND = "SHORTHAND"

    # Contiguous ranges
    TAG_CHARACTERS = "TAG_CHARACTERS"
    IVS_CHARACTERS = "IVS_CHARACTERS"

    EXPLICIT = (
        ZERO_WIDTH,
        BIDI_CONTROLS,
        MATH_OPERATORS,
        HYPHENATION,
        VARIATION_SELECTORS,
        FORMAT_CONTROLS,
        SHORTHAND,
    )
    RANGES = (TAG_CHARACTERS, IVS_CHARACTERS)
    ALL = EXPLICIT + RANGES


class PatternName:
    """Constants naming the formatting patterns and cleaning counters."""

    MARKDOWN_HEADERS = "markdownHeaders"
    MARKDOWN_BOLD = "markdownBold"
    REPEATING_CHARS = "repeatingChars"
    FORMATTING_LINES = "formattingLines"
    EXTRA_WHITESPACE = "extraWhitespace"
    EXCESS_NEWLINES = "excessNewlines"

    # Counter only; backed by the word-exchange engine, not a pattern
    WORD_EXCHANGES = "wordExchanges"

    # Patterns toggled by a cleaning option, in application order
    OPTIONAL = (
        MARKDOWN_HEADERS,
        MARKDOWN_BOLD,
        REPEATING_CHARS,
        FORMATTING_LINES,
        EXTRA_WHITESPACE,
    )
    # Keys reported under additional cleaning
    COUNTERS = OPTIONAL + (WORD_EXCHANGES,)
    # Patterns the pattern table must define
    REQUIRED = OPTIONAL + (EXCESS_NEWLINES,)
