import re
from collections import Counter

import numpy as np
import pandas as pd

DEFAULT_STOPWORDS = frozenset([
    'the', 'and', 'is', 'in', 'to', 'of', 'a', 'for', 'on', 'with', 'as', 'by', 'at', 'from'
])


class TextVectorizer:
    """
    Bag-of-words count matrix for the multinomial model.

    Tokens are runs of letters; the vocabulary keeps the max_features most
    common tokens seen during fit.
    """

    def __init__(self, max_features=1000, stopwords=None, lowercase=True):
        self.max_features = max_features
        self.stopwords = DEFAULT_STOPWORDS if stopwords is None else frozenset(stopwords)
        self.lowercase = lowercase
        self.vocab = None

    def clean_text(self, text):
        text = str(text)
        if self.lowercase:
            text = text.lower()
        text = re.sub(r'[^A-Za-z\s]', '', text)
        return [t for t in text.split() if t not in self.stopwords]

    @staticmethod
    def _as_docs(docs):
        if isinstance(docs, pd.Series):
            return docs.astype(str).tolist()
        if isinstance(docs, str):
            raise TypeError("Expected a sequence of documents, got a single string.")
        return [str(doc) for doc in docs]

    def fit(self, docs):
        vocab = Counter()
        for doc in self._as_docs(docs):
            vocab.update(self.clean_text(doc))
        # most_common keeps first-seen order among equal counts
        self.vocab = {word: idx for idx, (word, _) in enumerate(vocab.most_common(self.max_features))}
        return self

    def transform(self, docs):
        if self.vocab is None:
            raise ValueError("TextVectorizer must be fitted before transform.")
        docs = self._as_docs(docs)
        features = np.zeros((len(docs), len(self.vocab)), dtype=int)
        for i, doc in enumerate(docs):
            for t in self.clean_text(doc):
                idx = self.vocab.get(t)
                if idx is not None:
                    features[i, idx] += 1
        return features

    def fit_transform(self, docs):
        docs = self._as_docs(docs)
        return self.fit(docs).transform(docs)

    def get_feature_names(self):
        if self.vocab is None:
            raise ValueError("TextVectorizer must be fitted before get_feature_names.")
        return sorted(self.vocab, key=self.vocab.get)
