"""Reading word lists and writing the serialized trie and BK-tree."""

import random

from textrecovery.bk_tree import BKTree
from textrecovery.trie import Trie


def transform_word(s):
    """Drop newline and carriage-return characters and lowercase ASCII capitals."""
    return "".join(c.lower() if "A" <= c <= "Z" else c for c in s if c not in "\r\n")


def is_valid_word(s):
    """Return True if ``s`` holds only lowercase English letters (a-z)."""
    return all("a" <= c <= "z" for c in s)


class TreeBuilder:
    """Collects words from a word list and builds trees from them."""

    def __init__(self, words=None):
        self.words = list(words) if words is not None else []

    def read_wordlist(self, path):
        """Append the valid words of the file at ``path``, one per line.

        Raises OSError if the file cannot be opened.
        """
        try:
            file = open(path, "rb")
        except OSError as exc:
            raise OSError(f"could not open file {path}") from exc
        with file:
            for raw in file:
                word = transform_word(raw.decode("latin-1"))
                if is_valid_word(word):
                    self.words.append(word)

    def build_trie(self, path):
        """Build a trie of the words and write it to ``path``."""
        trie = Trie()
        for word in self.words:
            trie.insert(word)
        with self._open_output(path) as file:
            trie.serialize(file)

    def build_bk_tree(self, path, rng=None):
        """Shuffle the words, build a BK-tree of them and write it to ``path``.

        Shuffling keeps the tree balanced; ``rng`` is a ``random.Random``
        to use instead of a freshly seeded one.
        """
        (rng or random.Random()).shuffle(self.words)
        tree = BKTree()
        for word in self.words:
            tree.insert(word)
        with self._open_output(path) as file:
            tree.serialize(file)

    @staticmethod
    def _open_output(path):
        try:
            return open(path, "wb")
        except OSError as exc:
            raise OSError(f"could not create/open file {path}") from exc