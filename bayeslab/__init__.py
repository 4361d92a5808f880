"""
Naive Bayes classifiers for count and continuous features.
"""
from .naive_bayes import (
    MultinomialNB,
    GaussianNB,
    multinomial,
    gaussian
)
from .text import TextVectorizer

__version__ = '0.1.0'

__all__ = [
    'MultinomialNB',
    'GaussianNB',
    'multinomial',
    'gaussian',
    'TextVectorizer'
]
