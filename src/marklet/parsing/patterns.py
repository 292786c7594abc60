"""Shared line and inline patterns.

Block patterns are matched against the line after trim(). Inline patterns are
anchored at the tokenizer cursor via ``pattern.match(text, pos)``, so none of
them carries a ``^``.

Digits are ASCII-only on purpose: ``\\d`` would also accept other Unicode
decimal digits as ordered-list numbers.
"""

import re

# =============================================================================
# Whitespace
# =============================================================================

# Whitespace removed by trim() and matched between a marker and its text:
# ASCII whitespace, Unicode space separators, U+2028, U+2029 and the byte-order
# mark. U+001C..U+001F and U+0085 are not whitespace here.
_UNICODE_SPACES = (0x00A0, 0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000)

WHITESPACE = "\t\n\v\f\r " + "".join(map(chr, _UNICODE_SPACES)) + chr(0xFEFF)

_SPACE = "[" + re.escape(WHITESPACE) + "]"

# Any character except a line terminator
_TEXT = "[^" + re.escape("\n\r" + chr(0x2028) + chr(0x2029)) + "]"


def trim(line: str) -> str:
    """Strip WHITESPACE from both ends of line."""
    return line.strip(WHITESPACE)


# =============================================================================
# Block patterns
# =============================================================================

FENCE_MARKER = "```"

BLOCK_QUOTE_MARKER = ">"

HEADING = re.compile(r"^(#{1,6})" + _SPACE + "+(" + _TEXT + "+)$")

THEMATIC_BREAK = re.compile(r"^(-{3,}|\*{3,}|_{3,})$")

ORDERED_ITEM = re.compile(r"^[0-9]+\." + _SPACE + "+(" + _TEXT + "+)$")

UNORDERED_ITEM = re.compile(r"^[-*+]" + _SPACE + "+(" + _TEXT + "+)$")

# =============================================================================
# Inline patterns
# =============================================================================

IMAGE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")

LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

CODE_SPAN = re.compile(r"`([^`]+)`")

STRONG = re.compile(r"(\*\*|__)([^*_]+)\1")

EMPHASIS = re.compile(r"([*_])([^*_]+)\1")

STRIKETHROUGH = re.compile(r"~~([^~]+)~~")

# Characters at which an inline rule could start
INLINE_SPECIAL = re.compile(r"[`*_~!\[]")
