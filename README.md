# textrecovery

Building blocks for restoring damaged English text:

- `textrecovery.trie.Trie`: a word trie over the letters a–z, used to split
  run-together text and to match patterns where `*` stands for any one letter;
- `textrecovery.bk_tree.BKTree`: a BK-tree for finding the words that lie
  within a given Damerau-Levenshtein distance of a query;
- `textrecovery.edit_distance.edit_distance`: that distance, where `*` on
  either side matches any letter at no cost;
- `textrecovery.word_prob.WordContextAnalyzer`: counts of the words seen
  before and after each word;
- the `prepare-data` command, which turns a word list into a serialized trie
  and BK-tree.

The package has no dependencies beyond the standard library and needs Python
3.10 or later.

## Installation

```
pip install .
```

For the tests, install the `test` extra and run `pytest`:

```
pip install .[test]
pytest
```

## Preparing dictionary files

`prepare-data` reads a word list with one word per line. Carriage returns are
removed, the capitals A–Z are lowered, and any line that then holds anything
other than the letters a–z is skipped. From the remaining words it writes a
serialized trie, a serialized BK-tree, or both:

```
prepare-data -w wordlist.txt -t trie.dat
prepare-data -w wordlist.txt -b bktree.dat
prepare-data -w wordlist.txt -t trie.dat -b bktree.dat
prepare-data --help
```

Options:

- `-w`, `--wordlist`: the input word list (always required)
- `-t`, `--build-trie`: the output file for the trie
- `-b`, `--build-bktree`: the output file for the BK-tree
- `-h`, `--help`: print the usage text and exit

If `-h` or `--help` is not the first word, the command line must hold at
least four words: two options, each followed by its value. An option's value
must not itself be an option name. The short and the long form of the same
option cannot both be given. Errors are reported on standard error and the
command exits with status 1. Otherwise it exits with status 0. The usage text
also goes to standard error.

Before the words go into the BK-tree they are shuffled in random order, which
keeps the tree balanced. The same word list can therefore give BK-tree files
that differ from one run to the next.

The command can also be called from Python: `textrecovery.prepare_data.main(argv)`
takes the arguments without the program name and returns the exit status.
Inside a program, `textrecovery.tree_builder.TreeBuilder` does the same work.
It has `read_wordlist(path)`, `build_trie(path)` and `build_bk_tree(path, rng=None)`,
and `rng` may be a `random.Random` to make the shuffle repeatable.

## Using the structures

```python
from textrecovery.trie import Trie
from textrecovery.bk_tree import BKTree
from textrecovery.edit_distance import edit_distance

trie = Trie()
for word in ("the", "them", "man", "ran"):
    trie.insert(word)

trie.search("them")                 # True
"man" in trie                       # True
trie.starts_with("ma")              # True
trie.valid_endings("themanran", 0)  # [3, 4]
trie.match_pattern("r*n")           # True
trie.collect_matches("*an")         # ['man', 'ran']
list(trie.words())                  # ['man', 'ran', 'the', 'them']
trie.print_words()                  # one word per line to stdout

tree = BKTree()
for word in ("book", "books", "cake", "boo"):
    tree.insert(word)
tree.find("bok", 1)                 # words within distance 1 (default tolerance 2)

edit_distance("ab", "ba")           # 1, a transposition
edit_distance("c*t", "cat")         # 0, since '*' matches any letter
```

`edit_distance` and the BK-tree accept only the lowercase letters a–z and
`*`. Any other character raises `ValueError`. Trie lookups ignore case, and
inserting a character that is not a letter raises `ValueError`.

Both trees have `serialize(stream)` and `deserialize(stream)`, which write to
and read from binary streams such as files opened in `"wb"` and `"rb"` mode.
These are the formats that `prepare-data` writes. Data that ends too early
raises `ValueError`.

### Word context counts

```python
from textrecovery.word_prob import WordContextAnalyzer

ctx = WordContextAnalyzer()
ctx.add_before_word("cat", "the")             # "the" seen once before "cat"
ctx.increase_before_word_count("cat", "the", 2)
ctx.before_word_count("cat", "the")           # 3
ctx.has_after_word("cat", "sat")              # False
```

`add_before_word` and `add_after_word` only add a word that is not recorded
yet. The `increase_*` methods only change counts that already exist. Asking
for the count of an unknown word raises `KeyError`, and a negative value
raises `ValueError`. Counts are unsigned 64-bit values and wrap around on
overflow. `textrecovery.word_prob.WordProb` holds the two count tables of a
single word.

## What the package does not do

It gives the dictionary structures and the `prepare-data` command only. There
is no command that takes damaged text and restores it, and nothing yet joins
the trie, the BK-tree and the context counts into such a step. The word
context counts are kept in memory only. They cannot be saved to a file, and no
command gathers them from a body of text.