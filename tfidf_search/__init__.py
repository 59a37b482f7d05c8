"""TF-IDF Search - in-memory vector-space retrieval with cosine ranking."""

from tfidf_search.exceptions import (
    SearchEngineError,
    IndexWriteError,
    IndexReadError,
    EngineClosedError,
    DimensionMismatchError,
)
from tfidf_search.math_utils import (
    dot_product,
    scale_to_unit_max,
    cosine_similarity,
)
from tfidf_search.tokenizer import Tokenizer
from tfidf_search.storage import MemoryStorage
from tfidf_search.vocabulary import Vocabulary
from tfidf_search.corpus import Corpus
from tfidf_search.tfidf_scorer import TFIDFScorer
from tfidf_search.vector_cache import CacheState, VectorCache
from tfidf_search.ranker import SearchHit, SimilarityRanker
from tfidf_search.engine import SearchEngine

__all__ = [
    "SearchEngineError",
    "IndexWriteError",
    "IndexReadError",
    "EngineClosedError",
    "DimensionMismatchError",
    "dot_product",
    "scale_to_unit_max",
    "cosine_similarity",
    "Tokenizer",
    "MemoryStorage",
    "Vocabulary",
    "Corpus",
    "TFIDFScorer",
    "CacheState",
    "VectorCache",
    "SearchHit",
    "SimilarityRanker",
    "SearchEngine",
]
