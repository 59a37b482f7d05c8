"""Lazily rebuilt cache of document TF-IDF vectors."""

import enum
import logging

logger = logging.getLogger(__name__)


class CacheState(enum.Enum):
    CLEAN = "clean"
    DIRTY = "dirty"


class VectorCache:
    """Maps doc id -> dense TF-IDF vector, rebuilt wholesale when dirty.

    IDF is a corpus-wide statistic, so one insert can change the weight
    of every term in every document. Instead of patching vectors the
    cache is marked dirty and every vector is recomputed on the next
    read. All cached vectors therefore share one dimension and one
    statistics snapshot.
    """

    def __init__(self, corpus, vocabulary, scorer):
        self.corpus = corpus
        self.vocabulary = vocabulary
        self.scorer = scorer
        self.vectors = {}
        self.dimension = 0
        self.state = CacheState.CLEAN

    @property
    def dirty(self):
        return self.state is CacheState.DIRTY

    def mark_dirty(self):
        self.state = CacheState.DIRTY

    def ensure_fresh(self):
        """Rebuild every vector if the cache is dirty.

        The new vectors are built aside and swapped in only when all of
        them succeed; on failure the cache stays dirty.

        Returns:
            True if a rebuild happened.
        """
        if self.state is CacheState.CLEAN:
            return False

        dimension = len(self.vocabulary)
        vectors = {
            doc["id"]: self.scorer.document_vector(doc)
            for doc in self.corpus.documents
        }

        self.vectors = vectors
        self.dimension = dimension
        self.state = CacheState.CLEAN
        logger.info(
            "Rebuilt %d document vectors at dimension %d", len(vectors), dimension
        )
        return True

    def get(self, doc_id):
        return self.vectors[doc_id]

    def __len__(self):
        return len(self.vectors)
