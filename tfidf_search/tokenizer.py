"""Simple tokenizer producing term-frequency maps."""

import re


class Tokenizer:
    """Lowercase and split on runs of non-word characters.

    Tokens longer than ``max_token_length`` and any term in ``stop_words``
    are dropped before counting.
    """

    _SPLIT_PATTERN = re.compile(r"[\W_]+")

    def __init__(self, stop_words=None, max_token_length=255):
        self.stop_words = frozenset(stop_words or ())
        self.max_token_length = max_token_length

    def split(self, text):
        """Return list of lowercase word tokens in text order."""
        lowered = text.lower()
        tokens = self._SPLIT_PATTERN.split(lowered)
        return [
            t for t in tokens
            if t and len(t) <= self.max_token_length and t not in self.stop_words
        ]

    def tokenize(self, text):
        """Return (term_freq, total_tokens) for text.

        term_freq preserves the order in which terms first occur.
        """
        tokens = self.split(text)
        term_freq = {}
        for token in tokens:
            term_freq[token] = term_freq.get(token, 0) + 1
        return term_freq, len(tokens)
