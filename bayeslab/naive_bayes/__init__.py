"""Naive Bayes module: multinomial and Gaussian classifiers."""

from ._naive_bayes import MultinomialNB, GaussianNB, multinomial, gaussian

__all__ = ['MultinomialNB', 'GaussianNB', 'multinomial', 'gaussian']
