"""In-memory TF-IDF search engine with a lazily rebuilt vector cache."""

import logging
import threading

from tfidf_search.corpus import Corpus
from tfidf_search.exceptions import EngineClosedError, IndexWriteError
from tfidf_search.ranker import SimilarityRanker
from tfidf_search.tfidf_scorer import TFIDFScorer
from tfidf_search.vector_cache import VectorCache
from tfidf_search.vocabulary import Vocabulary

logger = logging.getLogger(__name__)


class SearchEngine:
    """Vector-space search over an append-only set of documents.

    Inserts update the vocabulary and corpus statistics immediately and
    mark the vector cache dirty; the first search afterwards rebuilds
    every document vector before scoring. One reentrant lock serializes
    all operations, so no caller observes a half-applied insert or a
    half-rebuilt cache.

    After close() every operation other than close() raises
    EngineClosedError.

    Usage::

        with SearchEngine() as engine:
            engine.insert("the cat sat")
            engine.insert("the dog sat")
            hits = engine.search("cat sat", limit=1)
    """

    def __init__(self, tokenizer=None, storage=None):
        self.corpus = Corpus(tokenizer=tokenizer, storage=storage)
        self.vocabulary = Vocabulary()
        self.scorer = TFIDFScorer(self.corpus, self.vocabulary)
        self.cache = VectorCache(self.corpus, self.vocabulary, self.scorer)
        self.ranker = SimilarityRanker()
        self._lock = threading.RLock()
        self._closed = False

    def _check_open(self):
        if self._closed:
            raise EngineClosedError("search engine is closed")

    def insert(self, text):
        """Add a document and return its id.

        Raises:
            IndexWriteError: if the text could not be tokenized or
                stored. Nothing is added in that case.
        """
        with self._lock:
            self._check_open()
            try:
                doc_id = self.corpus.add_document(text)
            except IndexWriteError:
                logger.warning("Insert failed, engine state unchanged", exc_info=True)
                raise
            terms = self.corpus.get_document(doc_id)["term_freq"]
            if self.vocabulary.observe(terms):
                logger.debug("Vocabulary grew to %d terms", len(self.vocabulary))
            # new document changes N and df, so every weight may move
            self.cache.mark_dirty()
            return doc_id

    def search(self, query, limit=None):
        """Rank stored documents by cosine similarity to query.

        Args:
            query: Query text, tokenized like a document.
            limit: Maximum number of hits. None returns every document,
                zero or negative returns none.

        Returns:
            List of SearchHit(text, similarity), best first.

        Raises:
            IndexReadError: if the query cannot be tokenized or a
                result text cannot be read.
        """
        with self._lock:
            self._check_open()
            if limit is not None and limit <= 0:
                return []
            self.cache.ensure_fresh()
            query_vector = self.scorer.query_vector(query)
            if query_vector is None:
                logger.debug("No known terms in query %r", query)
                return []
            return self.ranker.rank(
                query_vector, self.cache.vectors, self.corpus.text, limit=limit
            )

    def all_documents(self):
        """Original texts of every document, in insertion order."""
        with self._lock:
            self._check_open()
            return self.corpus.texts()

    def vocabulary_size(self):
        with self._lock:
            self._check_open()
            return len(self.vocabulary)

    def doc_frequency(self, term):
        with self._lock:
            self._check_open()
            return self.corpus.doc_frequency(term)

    def total_docs(self):
        with self._lock:
            self._check_open()
            return self.corpus.total_docs()

    def document_vector(self, doc_id):
        """Cached vector for doc_id, rebuilding the cache first if dirty."""
        with self._lock:
            self._check_open()
            self.cache.ensure_fresh()
            return list(self.cache.get(doc_id))

    def close(self):
        """Release the storage backend. Safe to call more than once."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self.corpus.storage.close()
            logger.info("Closed search engine with %d documents", len(self.corpus))

    @property
    def closed(self):
        return self._closed

    def __len__(self):
        return len(self.corpus)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
