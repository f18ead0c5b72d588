"""Word index kept as a list ordered from the last word to the first."""

from bisect import bisect_left, insort

from indexador.entry import WordEntry


class WordList:
    """Case-insensitive word index iterated in descending alphabetical order."""

    def __init__(self):
        self._keys = []
        self._entries = {}

    def insert(self, word, line):
        """Record an occurrence of ``word`` on ``line``."""
        key = word.lower()
        entry = self._entries.get(key)
        if entry is not None:
            entry.add_occurrence(line)
            return
        self._entries[key] = WordEntry(word, [line])
        insort(self._keys, key)

    def find(self, word):
        """Return the entry for ``word``, ignoring case, or None."""
        key = word.lower()
        position = bisect_left(self._keys, key)
        if position < len(self._keys) and self._keys[position] == key:
            return self._entries[key]
        return None

    def __iter__(self):
        return (self._entries[key] for key in reversed(self._keys))

    def __len__(self):
        return len(self._keys)

    def render(self):
        """Return the report of every entry, or a notice when empty."""
        if not self._keys:
            return "Lista vazia\n"
        return "".join(entry.describe() for entry in self)