"""Exception hierarchy for the TF-IDF search engine."""


class SearchEngineError(Exception):
    """Base class for recoverable engine failures."""


class IndexWriteError(SearchEngineError):
    """A document could not be tokenized or persisted during insert.

    The engine state is unchanged when this is raised.
    """


class IndexReadError(SearchEngineError):
    """Stored state could not be read during a rebuild or a search."""


class EngineClosedError(SearchEngineError):
    """The engine was used after close()."""


class DimensionMismatchError(ValueError):
    """Two vectors of different lengths were compared.

    Unreachable while the vector cache invariants hold, so this signals a
    programming error rather than bad input.
    """
