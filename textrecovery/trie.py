"""Prefix tree over the English alphabet with wildcard pattern matching."""

import string
import sys

WILDCARD = "*"
"""Pattern character that matches any single letter."""

_LETTERS = string.ascii_lowercase


def _letter_key(c):
    """Return the lowercase letter for ``c``, or None if it is not an ASCII letter."""
    if len(c) == 1 and c.isascii() and c.isalpha():
        return c.lower()
    return None


def _read_exact(stream, size):
    data = stream.read(size)
    if len(data) != size:
        raise ValueError("truncated trie data")
    return data


class TrieNode:
    """A single trie node; children are keyed by lowercase letter."""

    __slots__ = ("is_end_of_word", "children")

    def __init__(self):
        self.is_end_of_word = False
        self.children = {}

    @property
    def number_of_children(self):
        """Number of existing children."""
        return len(self.children)

    def has_child(self, c):
        """Return True if a child exists for letter ``c`` (case-insensitive)."""
        key = _letter_key(c)
        return key is not None and key in self.children

    def child(self, c):
        """Return the child for letter ``c`` (case-insensitive), or None."""
        key = _letter_key(c)
        return None if key is None else self.children.get(key)

    def create_child(self, c):
        """Create a child for letter ``c`` unless it exists; return that child.

        Raises ValueError if ``c`` is not an English letter.
        """
        key = _letter_key(c)
        if key is None:
            raise ValueError(f"invalid trie character {c!r}")
        node = self.children.get(key)
        if node is None:
            node = self.children[key] = TrieNode()
        return node

    def sorted_children(self):
        """Yield ``(letter, child)`` pairs in alphabetical order."""
        for letter in _LETTERS:
            node = self.children.get(letter)
            if node is not None:
                yield letter, node


class Trie:
    """A set of words stored as a prefix tree."""

    def __init__(self):
        self.root = TrieNode()

    def _walk(self, chars):
        node = self.root
        for c in chars:
            node = node.child(c)
            if node is None:
                return None
        return node

    def insert(self, word):
        """Insert ``word``; raises ValueError if it holds a non-letter."""
        node = self.root
        for c in word:
            node = node.create_child(c)
        node.is_end_of_word = True

    def search(self, word):
        """Return True if ``word`` is stored in the trie."""
        node = self._walk(word)
        return node is not None and node.is_end_of_word

    def __contains__(self, word):
        return self.search(word)

    def starts_with(self, prefix):
        """Return True if the trie holds a path for ``prefix``."""
        return self._walk(prefix) is not None

    def valid_endings(self, text, start_pos=0):
        """Return the positions in ``text`` where a word starting at ``start_pos`` ends.

        For the text "themanran" and a trie holding "the" and "them",
        starting at 0 this gives [3, 4].
        """
        if start_pos < 0:
            raise ValueError("start position must not be negative")
        endings = []
        node = self.root
        for i, c in enumerate(text[start_pos:], start=start_pos):
            node = node.child(c)
            if node is None:
                break
            if node.is_end_of_word:
                endings.append(i + 1)
        return endings

    def _iter_matches(self, pattern, index, node, current):
        if index == len(pattern):
            if node.is_end_of_word:
                yield current
            return
        ch = pattern[index]
        if ch == WILDCARD:
            for letter, child in node.sorted_children():
                yield from self._iter_matches(pattern, index + 1, child, current + letter)
            return
        if _letter_key(ch) is None:
            return
        child = node.child(ch)
        if child is not None:
            yield from self._iter_matches(pattern, index + 1, child, current + ch)

    def match_pattern(self, pattern):
        """Return True if any word matches ``pattern`` (``*`` matches one letter)."""
        return any(True for _ in self._iter_matches(pattern, 0, self.root, ""))

    def collect_matches(self, pattern):
        """Return all words matching ``pattern``, in alphabetical order."""
        return list(self._iter_matches(pattern, 0, self.root, ""))

    def words(self):
        """Yield every stored word in alphabetical order."""
        pending = [(self.root, "")]
        while pending:
            node, prefix = pending.pop()
            if node.is_end_of_word:
                yield prefix
            pending.extend(
                (child, prefix + letter)
                for letter, child in reversed(list(node.sorted_children()))
            )

    def print_words(self, file=None):
        """Print every stored word, one per line, to ``file`` (stdout by default)."""
        out = sys.stdout if file is None else file
        for word in self.words():
            print(word, file=out)

    def serialize(self, stream):
        """Write the trie to a binary stream."""
        self._serialize_node(stream, self.root)

    def _serialize_node(self, stream, node):
        stream.write(bytes((1 if node.is_end_of_word else 0, node.number_of_children & 0xFF)))
        for letter, child in node.sorted_children():
            stream.write(letter.encode("ascii"))
            self._serialize_node(stream, child)

    def deserialize(self, stream):
        """Load a trie from a binary stream into this one."""
        self._deserialize_node(stream, self.root)

    def _deserialize_node(self, stream, node):
        is_end, count = _read_exact(stream, 2)
        node.is_end_of_word = bool(is_end)
        for _ in range(count):
            letter = _read_exact(stream, 1).decode("latin-1")
            self._deserialize_node(stream, node.create_child(letter))