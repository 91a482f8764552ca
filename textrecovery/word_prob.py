"""Counts of the words seen before and after other words."""

_UINT64_MASK = (1 << 64) - 1


def _check_value(value):
    if value < 0:
        raise ValueError("count value must not be negative")
    return value & _UINT64_MASK


class WordProb:
    """Counts of the words seen before and after one particular word.

    Counts are unsigned 64-bit values and wrap around on overflow.
    """

    __slots__ = ("before", "after")

    def __init__(self):
        self.before = {}
        self.after = {}

    def has_before_word(self, word):
        """Return True if ``word`` is in the before collection."""
        return word in self.before

    def has_after_word(self, word):
        """Return True if ``word`` is in the after collection."""
        return word in self.after

    def add_before_word(self, word, value=1):
        """Add ``word`` to the before collection with count ``value`` unless present."""
        value = _check_value(value)
        self.before.setdefault(word, value)

    def add_after_word(self, word, value=1):
        """Add ``word`` to the after collection with count ``value`` unless present."""
        value = _check_value(value)
        self.after.setdefault(word, value)

    def before_word_count(self, word):
        """Return how often ``word`` appeared before; raises KeyError if unknown."""
        try:
            return self.before[word]
        except KeyError:
            raise KeyError(f"no before word {word!r}") from None

    def after_word_count(self, word):
        """Return how often ``word`` appeared after; raises KeyError if unknown."""
        try:
            return self.after[word]
        except KeyError:
            raise KeyError(f"no after word {word!r}") from None

    def increase_before_word_count(self, word, value=1):
        """Add ``value`` to the before count of ``word`` if it is present."""
        value = _check_value(value)
        if word in self.before:
            self.before[word] = (self.before[word] + value) & _UINT64_MASK

    def increase_after_word_count(self, word, value=1):
        """Add ``value`` to the after count of ``word`` if it is present."""
        value = _check_value(value)
        if word in self.after:
            self.after[word] = (self.after[word] + value) & _UINT64_MASK


class WordContextAnalyzer:
    """Tracks, for each word, how often other words appear before and after it."""

    def __init__(self):
        self.context_map = {}

    def has_word(self, word):
        """Return True if ``word`` is in the context map."""
        return word in self.context_map

    def __contains__(self, word):
        return self.has_word(word)

    def has_before_word(self, word, before_word):
        """Return True if ``before_word`` is recorded before ``word``."""
        prob = self.context_map.get(word)
        return prob is not None and prob.has_before_word(before_word)

    def has_after_word(self, word, after_word):
        """Return True if ``after_word`` is recorded after ``word``."""
        prob = self.context_map.get(word)
        return prob is not None and prob.has_after_word(after_word)

    def add_word(self, word):
        """Add ``word`` to the context map unless present; return its counts."""
        prob = self.context_map.get(word)
        if prob is None:
            prob = self.context_map[word] = WordProb()
        return prob

    def add_before_word(self, word, before_word, value=1):
        """Record ``before_word`` before ``word`` with count ``value`` unless present."""
        _check_value(value)
        self.add_word(word).add_before_word(before_word, value)

    def add_after_word(self, word, after_word, value=1):
        """Record ``after_word`` after ``word`` with count ``value`` unless present."""
        _check_value(value)
        self.add_word(word).add_after_word(after_word, value)

    def _prob(self, word):
        try:
            return self.context_map[word]
        except KeyError:
            raise KeyError(f"unknown word {word!r}") from None

    def before_word_count(self, word, before_word):
        """Return how often ``before_word`` appeared before ``word``.

        Raises KeyError if either word is unknown.
        """
        return self._prob(word).before_word_count(before_word)

    def after_word_count(self, word, after_word):
        """Return how often ``after_word`` appeared after ``word``.

        Raises KeyError if either word is unknown.
        """
        return self._prob(word).after_word_count(after_word)

    def increase_before_word_count(self, word, before_word, value=1):
        """Add ``value`` to the count of ``before_word`` before ``word`` if recorded."""
        _check_value(value)
        if self.has_before_word(word, before_word):
            self.context_map[word].increase_before_word_count(before_word, value)

    def increase_after_word_count(self, word, after_word, value=1):
        """Add ``value`` to the count of ``after_word`` after ``word`` if recorded."""
        _check_value(value)
        if self.has_after_word(word, after_word):
            self.context_map[word].increase_after_word_count(after_word, value)