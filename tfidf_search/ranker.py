"""Exhaustive cosine-similarity ranking of cached document vectors."""

import logging
from collections import namedtuple

from tfidf_search.math_utils import cosine_similarity

logger = logging.getLogger(__name__)


class SearchHit(namedtuple("SearchHit", ["text", "similarity"])):
    """A ranked result: original document text and its raw score."""

    __slots__ = ()

    def __str__(self):
        return "SearchHit{text='%s', similarity=%.4f}" % (self.text, self.similarity)


class SimilarityRanker:
    """Scores a query vector against every document vector.

    Results are ordered by descending similarity. Equal scores keep
    insertion order, earliest document first.
    """

    def score(self, query_vector, vectors):
        """Return [(doc_id, similarity)] in doc id order."""
        return [
            (doc_id, cosine_similarity(query_vector, vectors[doc_id]))
            for doc_id in sorted(vectors)
        ]

    def rank(self, query_vector, vectors, text_for, limit=None):
        """Rank documents against query_vector.

        Args:
            query_vector: Dense query vector.
            vectors: Dict of doc_id -> dense vector, same dimension as
                the query.
            text_for: Callable mapping a doc id to its original text.
            limit: Maximum number of hits; None means unbounded and
                any value <= 0 yields no hits.

        Returns:
            List of SearchHit, highest similarity first.
        """
        if limit is not None and limit <= 0:
            return []
        scored = self.score(query_vector, vectors)
        # list.sort is stable, so ties stay in doc id order
        scored.sort(key=lambda x: x[1], reverse=True)
        if limit is not None:
            scored = scored[:limit]
        logger.debug("Ranked %d documents, returning %d", len(vectors), len(scored))
        return [SearchHit(text_for(doc_id), sim) for doc_id, sim in scored]
