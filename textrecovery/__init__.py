"""Trie, BK-tree, edit distance and word context counts for restoring damaged text."""

__version__ = "1.0.0"