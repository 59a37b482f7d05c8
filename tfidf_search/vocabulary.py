"""Global term-to-dimension mapping shared by all vectors."""


class Vocabulary:
    """Assigns dense integer dimensions to terms in first-seen order.

    The mapping only grows: a term keeps its dimension for the lifetime
    of the vocabulary and nothing is ever removed or renumbered.
    """

    def __init__(self):
        self._index = {}

    def observe(self, terms):
        """Add unseen terms; return True if the vocabulary grew."""
        grew = False
        for term in terms:
            if term not in self._index:
                self._index[term] = len(self._index)
                grew = True
        return grew

    def get(self, term, default=None):
        return self._index.get(term, default)

    def terms(self):
        """Terms ordered by dimension."""
        return list(self._index)

    def __contains__(self, term):
        return term in self._index

    def __len__(self):
        return len(self._index)
