"""BK-tree for approximate word lookup by edit distance."""

import struct

from textrecovery.edit_distance import edit_distance

_UINT32 = struct.Struct("<I")
_UINT16 = struct.Struct("<H")


def _read_exact(stream, size):
    data = stream.read(size)
    if len(data) != size:
        raise ValueError("truncated BK-tree data")
    return data


class BKTreeNode:
    """A node holding one word and its children keyed by edit distance."""

    __slots__ = ("word", "children")

    def __init__(self, word=""):
        self.word = word
        self.children = {}

    def has_child(self, distance):
        """Return True if a child exists at ``distance``."""
        return distance in self.children

    def child(self, distance):
        """Return the child at ``distance``, or None."""
        return self.children.get(distance)

    def add_child(self, distance, word):
        """Add a child holding ``word`` at ``distance`` unless one is already there."""
        if distance not in self.children:
            self.children[distance] = BKTreeNode(word)

    def insert(self, word):
        """Insert ``word`` into the subtree rooted at this node."""
        node = self
        while True:
            distance = edit_distance(word, node.word)
            next_node = node.children.get(distance)
            if next_node is None:
                node.add_child(distance, word)
                return
            node = next_node

    def find(self, query, tolerance):
        """Return all words in this subtree within ``tolerance`` of ``query``."""
        if tolerance < 0:
            raise ValueError("tolerance must not be negative")
        results = []
        pending = [self]
        while pending:
            node = pending.pop()
            distance = edit_distance(query, node.word)
            if distance <= tolerance:
                results.append(node.word)
            low, high = distance - tolerance, distance + tolerance
            pending.extend(
                child for dist, child in node.children.items() if low <= dist <= high
            )
        return results

    def serialize(self, stream):
        """Write this subtree to a binary stream."""
        encoded = self.word.encode("utf-8")
        stream.write(_UINT32.pack(len(encoded)))
        stream.write(encoded)
        stream.write(_UINT32.pack(len(self.children)))
        for distance, child in self.children.items():
            stream.write(_UINT16.pack(distance & 0xFFFF))
            child.serialize(stream)

    def deserialize(self, stream):
        """Replace this subtree with one read from a binary stream."""
        self._load(stream, _read_exact(stream, _UINT32.size))

    def _load(self, stream, length_header):
        (word_len,) = _UINT32.unpack(length_header)
        self.word = _read_exact(stream, word_len).decode("utf-8")
        (num_children,) = _UINT32.unpack(_read_exact(stream, _UINT32.size))
        self.children = {}
        for _ in range(num_children):
            (distance,) = _UINT16.unpack(_read_exact(stream, _UINT16.size))
            child = BKTreeNode()
            child.deserialize(stream)
            self.children[distance] = child


class BKTree:
    """A BK-tree of words; an empty tree has no root."""

    def __init__(self):
        self.root = None

    def insert(self, word):
        """Insert ``word`` into the tree."""
        if self.root is None:
            self.root = BKTreeNode(word)
        else:
            self.root.insert(word)

    def find(self, query, tolerance=2):
        """Return all words within ``tolerance`` edits of ``query``."""
        if self.root is None:
            if tolerance < 0:
                raise ValueError("tolerance must not be negative")
            return []
        return self.root.find(query, tolerance)

    def serialize(self, stream):
        """Write the tree to a binary stream; an empty tree writes nothing."""
        if self.root is not None:
            self.root.serialize(stream)

    def deserialize(self, stream):
        """Replace the tree with one read from a binary stream."""
        header = stream.read(_UINT32.size)
        if not header:
            self.root = None
            return
        if len(header) != _UINT32.size:
            raise ValueError("truncated BK-tree data")
        root = BKTreeNode()
        root._load(stream, header)
        self.root = root