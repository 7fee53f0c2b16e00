"""Normalizers applied to customer fields after validation."""

import re

# Portuguese linking words kept in lower case after the first word
LINKING_WORDS = frozenset({"de", "da", "do", "das", "dos", "e"})

_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: str | None) -> str | None:
    """
    Title-case a person's name.

    Every word is lower-cased and gets an upper-case first letter, except
    linking words after the first position, which stay lower-case.

    Args:
        name: Raw name

    Returns:
        Normalized name; ``None`` or blank input is returned as given
    """
    if name is None or not name.strip():
        return name

    words = name.strip().lower().split()
    normalized = []
    for position, word in enumerate(words):
        if position > 0 and word in LINKING_WORDS:
            normalized.append(word)
        else:
            normalized.append(_capitalize_first(word))
    return " ".join(normalized)


def _capitalize_first(word: str) -> str:
    first = word[0].upper()
    # "ß".upper() is "SS"; keep letters without a single-character upper case
    if len(first) != 1:
        first = word[0]
    return first + word[1:]


def normalize_email(email: str) -> str:
    return email.strip().lower()


def collapse_whitespace(value: str) -> str:
    """Trim and collapse internal whitespace runs into single spaces."""
    return _WHITESPACE.sub(" ", value.strip())
