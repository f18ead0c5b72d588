"""Word index kept as an unbalanced binary search tree."""

from dataclasses import dataclass

from indexador.entry import WordEntry


@dataclass
class _Node:
    key: str
    entry: WordEntry
    left: "_Node | None" = None
    right: "_Node | None" = None


class WordTree:
    """Case-insensitive word index iterated in ascending alphabetical order."""

    def __init__(self):
        self._root = None
        self._size = 0

    def insert(self, word, line):
        """Record an occurrence of ``word`` on ``line``."""
        key = word.lower()
        if self._root is None:
            self._root = _Node(key, WordEntry(word, [line]))
            self._size = 1
            return
        node = self._root
        while True:
            if key == node.key:
                node.entry.add_occurrence(line)
                return
            side = "left" if key < node.key else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, _Node(key, WordEntry(word, [line])))
                self._size += 1
                return
            node = child

    def find(self, word):
        """Return the entry for ``word``, ignoring case, or None."""
        key = word.lower()
        node = self._root
        while node is not None:
            if key == node.key:
                return node.entry
            node = node.left if key < node.key else node.right
        return None

    def __iter__(self):
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.entry
            node = node.right

    def __len__(self):
        return self._size

    def render(self):
        """Return the report of every entry in order, or a notice when empty."""
        if self._root is None:
            return "Arvore vazia\n"
        return "".join(entry.describe() for entry in self)