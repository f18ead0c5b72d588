"""Splitting of text lines into fields and indexable words."""

import re

WORD_DELIMITERS = " ,.;:-/'\""

_LEADING_LETTERS = re.compile(r"[A-Za-z]*")


def split_fields(line, delimiters):
    """Split ``line`` at every character found in ``delimiters``.

    Adjacent delimiters produce empty fields, and the result always holds
    at least one field.
    """
    fields = []
    current = []
    for char in line:
        if char in delimiters:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    fields.append("".join(current))
    return fields


def split_words(line):
    """Return the words of ``line`` in order.

    Each field is cut at its first character that is not an ASCII letter;
    fields left empty are dropped.
    """
    words = []
    for field in split_fields(line, WORD_DELIMITERS):
        word = _LEADING_LETTERS.match(field).group()
        if word:
            words.append(word)
    return words