"""Raw-text storage backends for the document store."""

import logging

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Append-only list of raw document texts.

    A text's index in the list is its document id. Subclasses backed by
    real storage override append, get and close and raise OSError on
    failure; the corpus translates those into index errors.
    """

    def __init__(self):
        self._texts = []
        self.closed = False

    def append(self, text):
        """Store text and return its index."""
        self._texts.append(text)
        return len(self._texts) - 1

    def get(self, index):
        return self._texts[index]

    def __len__(self):
        return len(self._texts)

    def close(self):
        """Drop stored texts. Safe to call more than once."""
        if self.closed:
            return
        logger.debug("Releasing %d stored texts", len(self._texts))
        self._texts = []
        self.closed = True
