"""Damerau-Levenshtein edit distance over lowercase letters with a wildcard."""

ALPHABET_SIZE = 27
"""Size of the alphabet: the letters a-z plus the wildcard."""

WILDCARD = "*"
"""Character that matches any other character at no cost."""


def char_to_index(c):
    """Return the alphabet index of ``c``, or -1 if it is not a valid character."""
    if len(c) == 1 and "a" <= c <= "z":
        return ord(c) - ord("a")
    if c == WILDCARD:
        return ALPHABET_SIZE - 1
    return -1


def _indices(s):
    indices = []
    for c in s:
        index = char_to_index(c)
        if index < 0:
            raise ValueError(f"invalid character {c!r} in {s!r}")
        indices.append(index)
    return indices


def edit_distance(a, b):
    """Return the Damerau-Levenshtein distance between ``a`` and ``b``.

    Only lowercase letters and the wildcard are accepted; a wildcard on
    either side matches any character.  Raises ValueError otherwise.
    """
    a_indices = _indices(a)
    b_indices = _indices(b)
    len_a, len_b = len(a), len(b)
    maxdist = len_a + len_b

    # Last row in which each alphabet character was seen in ``a``.
    last_row = [0] * ALPHABET_SIZE

    d = [[0] * (len_b + 2) for _ in range(len_a + 2)]
    d[0][0] = maxdist
    for i in range(1, len_a + 2):
        d[i][0] = maxdist
        d[i][1] = i - 1
    for j in range(1, len_b + 2):
        d[0][j] = maxdist
        d[1][j] = j - 1

    for i, (char_a, index_a) in enumerate(zip(a, a_indices), start=1):
        last_match_col = 0
        for j, (char_b, index_b) in enumerate(zip(b, b_indices), start=1):
            k = last_row[index_b]
            col = last_match_col

            if char_a == char_b or char_a == WILDCARD or char_b == WILDCARD:
                cost = 0
                last_match_col = j
            else:
                cost = 1

            d[i + 1][j + 1] = min(
                d[i][j] + cost,  # substitution
                d[i + 1][j] + 1,  # insertion
                d[i][j + 1] + 1,  # deletion
                d[k][col] + (i - k - 1) + 1 + (j - col - 1),  # transposition
            )
        last_row[index_a] = i

    return d[len_a + 1][len_b + 1]