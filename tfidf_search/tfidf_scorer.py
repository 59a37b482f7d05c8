"""TF-IDF weighting of documents and queries into dense vectors."""

import math

from tfidf_search.exceptions import IndexReadError


class TFIDFScorer:
    """Builds dense TF-IDF vectors over a shared vocabulary.

    Vectors have one entry per vocabulary term, indexed by the term's
    dimension, so every vector built against the same vocabulary and
    statistics snapshot is directly comparable.
    """

    def __init__(self, corpus, vocabulary):
        self.corpus = corpus
        self.vocabulary = vocabulary

    def tf(self, term, term_freq, length):
        """Length-normalized term frequency.

        TF(t, d) = f(t, d) / |d|, 0 for an empty document.
        """
        if length == 0:
            return 0.0
        return term_freq.get(term, 0) / length

    def idf(self, term):
        """Smoothed IDF, strictly positive for any term in the corpus.

        IDF(t) = ln(N / (df(t) + 1)) + 1
        """
        n = self.corpus.total_docs()
        df_t = self.corpus.doc_frequency(term)
        return math.log(n / (df_t + 1)) + 1.0

    def vector(self, term_freq, length):
        """Dense TF-IDF vector at the current vocabulary size.

        Terms outside the vocabulary are ignored.
        """
        vec = [0.0] * len(self.vocabulary)
        for term in term_freq:
            dim = self.vocabulary.get(term)
            if dim is None:
                continue
            vec[dim] = self.tf(term, term_freq, length) * self.idf(term)
        return vec

    def document_vector(self, doc):
        return self.vector(doc["term_freq"], doc["length"])

    def query_vector(self, text):
        """Vector for a transient query, or None if no term is known.

        The query is tokenized like a document but never touches the
        vocabulary or the corpus statistics.

        Raises:
            IndexReadError: if the tokenizer fails on the query.
        """
        try:
            term_freq, length = self.corpus.tokenizer.tokenize(text)
        except Exception as err:
            raise IndexReadError("failed to tokenize query: %s" % err) from err
        if not any(term in self.vocabulary for term in term_freq):
            return None
        return self.vector(term_freq, length)
