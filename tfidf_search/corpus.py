"""Append-only document store with corpus statistics for TF-IDF."""

import logging

from tfidf_search.exceptions import IndexReadError, IndexWriteError
from tfidf_search.storage import MemoryStorage
from tfidf_search.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class Corpus:
    """Stores documents and keeps the statistics needed for TF-IDF.

    Each document is a dict with keys:
        id, length, term_freq

    The raw text lives in the storage backend under the same id. A
    document's id is its position in ``documents``.
    """

    def __init__(self, tokenizer=None, storage=None):
        self.tokenizer = tokenizer or Tokenizer()
        self.storage = storage if storage is not None else MemoryStorage()
        self.documents = []
        self.n = 0
        self.df = {}  # term -> document frequency

    def add_document(self, text):
        """Tokenize and persist text, then record its statistics.

        Tokenizing and persisting both happen before any statistic
        changes, so a failure in either leaves the corpus untouched.

        The storage backend must hold exactly one text per recorded
        document; if it does not (for instance after it returned the
        wrong id for an append) every later insert is refused and the
        corpus has to be discarded.

        Returns:
            The new document id.

        Raises:
            IndexWriteError: if tokenization or storage fails.
        """
        try:
            term_freq, length = self.tokenizer.tokenize(text)
        except Exception as err:
            raise IndexWriteError("failed to tokenize document: %s" % err) from err

        doc_id = len(self.documents)
        if len(self.storage) != doc_id:
            raise IndexWriteError(
                "storage holds %d texts for %d documents"
                % (len(self.storage), doc_id)
            )
        try:
            stored_id = self.storage.append(text)
        except OSError as err:
            raise IndexWriteError(
                "failed to store document %d: %s" % (doc_id, err)
            ) from err
        if stored_id != doc_id:
            raise IndexWriteError(
                "storage assigned id %d, expected %d" % (stored_id, doc_id)
            )

        self.documents.append({
            "id": doc_id,
            "length": length,
            "term_freq": term_freq,
        })
        for term in term_freq:
            self.df[term] = self.df.get(term, 0) + 1
        self.n += 1
        logger.debug(
            "Stored document %d (%d tokens, %d distinct terms)",
            doc_id, length, len(term_freq),
        )
        return doc_id

    def build_index(self):
        """Recompute N and df(t) from the stored term-frequency maps."""
        self.n = len(self.documents)
        self.df = {}
        for doc in self.documents:
            for term in doc["term_freq"]:
                self.df[term] = self.df.get(term, 0) + 1

    def doc_frequency(self, term):
        """Number of documents containing term."""
        return self.df.get(term, 0)

    def total_docs(self):
        return self.n

    def get_document(self, doc_id):
        """Look up a document by ID."""
        return self.documents[doc_id]

    def text(self, doc_id):
        """Read the original text of a document from storage."""
        try:
            return self.storage.get(doc_id)
        except (OSError, LookupError) as err:
            raise IndexReadError(
                "failed to read document %d: %s" % (doc_id, err)
            ) from err

    def texts(self):
        """All original texts in insertion order."""
        return [self.text(doc["id"]) for doc in self.documents]

    def __len__(self):
        return len(self.documents)
