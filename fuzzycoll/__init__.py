"""Fuzzy string search: linear scan, BK-tree, Levenshtein automaton and SymSpell."""

__version__ = "0.1.0"