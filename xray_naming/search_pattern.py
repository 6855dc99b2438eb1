"""
Wildcard pattern matching.
Owns: Deciding whether a host value is recognized by a glob pattern.

Supported tokens:
- '*' matches zero or more characters
- '?' matches exactly one character
Everything else matches literally.
"""

from typing import Optional

GLOB = "*"
SINGLE = "?"


def is_wildcard_glob(pattern: str) -> bool:
    """True when the pattern is made only of '*' tokens."""
    return bool(pattern) and pattern.strip(GLOB) == ""


def _lower_each(value: str) -> str:
    """Lowercase one character at a time, keeping the string length."""
    return "".join(c if len(c.lower()) != 1 else c.lower() for c in value)


def wildcard_match(
    pattern: Optional[str],
    text: Optional[str],
    case_insensitive: bool = True,
) -> bool:
    """
    Match text against a glob pattern.

    A None pattern matches everything. An empty pattern matches only
    empty text. A None text never matches a real pattern.

    Uses backtracking over the most recent '*', which keeps the worst
    case at O(len(pattern) * len(text)).
    """
    if pattern is None:
        return True
    if text is None:
        return False
    if not pattern:
        return not text
    if is_wildcard_glob(pattern):
        return True

    if case_insensitive:
        pattern = _lower_each(pattern)
        text = _lower_each(text)

    p = t = 0
    star = -1
    star_text = 0
    p_len, t_len = len(pattern), len(text)

    while t < t_len:
        if p < p_len and (pattern[p] == SINGLE or pattern[p] == text[t]):
            p += 1
            t += 1
        elif p < p_len and pattern[p] == GLOB:
            star = p
            star_text = t
            p += 1
        elif star != -1:
            # Let the last '*' absorb one more character and retry
            p = star + 1
            star_text += 1
            t = star_text
        else:
            return False

    # Only trailing '*' may remain
    while p < p_len and pattern[p] == GLOB:
        p += 1

    return p == p_len
