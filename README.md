# fuzzycoll

Collections for fuzzy string search. They find every string in a collection
that lies within a given edit distance of a query.

A plain scan computes the edit distance to every candidate. The structures
here skip most of that work by discarding candidates that cannot be within
the allowed distance:

- **BK-tree** (`fuzzycoll.bk.BkTree`): a metric tree. It uses the triangle
  inequality to skip whole subtrees.
- **Levenshtein automaton** (`fuzzycoll.automata.LevenshteinAutomata`): a
  deterministic automaton that accepts the strings within `max_edits` of the
  query. It walks a sorted list of choices.
- **SymSpell** (`fuzzycoll.symspell.SymSpell`): indexes deletion variants of
  the prefix of each inserted term for fast lookup.
- **Linear scan** (`fuzzycoll.basic.fuzzy_search`): the simple baseline.

`fuzzycoll.distance.levenshtein` gives the edit distance, counted in
characters.

## Installation

```
pip install fuzzycoll
```

The package has no runtime dependencies.

## Usage

### Linear scan

`fuzzy_search(query, choices, max_edits, edit_distance)` returns the matching
choices in their original order.

```python
from fuzzycoll.basic import fuzzy_search
from fuzzycoll.distance import levenshtein

choices = ["food", "good", "flood", "fold", "apple"]
print(fuzzy_search("food", choices, 2, levenshtein))
```

### BK-tree

`BkTree.insert` ignores terms that are already in the tree.
`BkTree.fuzzy_search(query, max_edits)` returns an iterator. It yields the
matching terms lazily, in breadth-first order.

```python
from fuzzycoll.bk import BkTree
from fuzzycoll.distance import levenshtein

tree = BkTree(levenshtein)
for word in ["food", "good", "flood", "fold", "apple"]:
    tree.insert(word)

print(list(tree.fuzzy_search("food", 2)))
```

### Levenshtein automaton

The choices must be sorted. The matches come back in the same order.
`max_edits` must not be negative, otherwise `ValueError` is raised.

```python
from fuzzycoll.automata import LevenshteinAutomata

choices = sorted(["food", "good", "flood", "fold", "apple"])
automaton = LevenshteinAutomata("food", 2)
print(automaton.fuzzy_search(choices))
```

The automaton is built from two lower-level pieces you can also use directly:

- `fuzzycoll.nfa.Nfa(query, max_edits)` is the nondeterministic automaton.
  `Nfa.to_dfa()` turns it into a deterministic one.
- `fuzzycoll.dfa.Dfa` has `next_valid_string(string)`. It returns the smallest
  accepted string that is not less than `string`, or `None`.

### SymSpell

```python
from fuzzycoll.distance import levenshtein
from fuzzycoll.symspell import SymSpell

sym = SymSpell(levenshtein, 2)
for word in ["food", "good", "flood", "fold", "apple"]:
    sym.insert(word)

print(sym.fuzzy_search("food"))
```

If the query itself was inserted, it comes first in the result.

`prefix_length` defaults to `max_edits + 1`. It must be greater than
`max_edits`, otherwise `ValueError` is raised.

The deletion index is `fuzzycoll.dictionary.Dictionary(max_edits,
prefix_length)`. It has these methods:

- `insert(term)`
- `contains_term(term)`
- `get_suggestions(candidate)`, which returns the terms a deletion variant came
  from, in insertion order.

## What it does not do

This is a library only. It has no command-line tool, and it does not save
its indexes to disk. Every structure lives in memory and is rebuilt by
inserting the terms again.

## Running the tests

```
pip install -e ".[test]"
pytest
```