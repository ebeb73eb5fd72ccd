"""Exceptions raised while loading keyword dictionaries."""


class DictionaryError(ValueError):
    """A stopword or IDF dictionary is unusable (empty, or a non-positive IDF average)."""
