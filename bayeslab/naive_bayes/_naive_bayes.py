import warnings
from abc import abstractmethod

import numpy as np

from ..base import BaseClassifier
from ..common.utils import (
    check_labels,
    check_matrix,
    check_vector,
    is_real_number,
    is_vector_like,
    log_sum_exp,
    safe_indexing,
    unique_labels,
)

LOG_2PI = np.log(2.0 * np.pi)
GAUSSIAN_DENSITIES = ('compat', 'normal')


def _first_argmax(jll):
    """
    Row-wise argmax where the first maximum wins and only a strictly greater
    score replaces the running maximum.
    """
    scores = np.where(np.isnan(jll), -np.inf, jll)
    idx = np.argmax(scores, axis=1)
    # a NaN in the leading column is never beaten by a strict comparison
    idx[np.isnan(jll[:, 0])] = 0
    return idx


def _freeze(*arrays):
    for arr in arrays:
        arr.flags.writeable = False


class _BaseNB(BaseClassifier):
    """Shared prediction surface of the naive Bayes families."""

    def __init__(self, verbose=False):
        self.verbose = verbose
        self.n_samples_ = None
        self.n_features_ = None
        self.classes_ = None
        self.n_classes_ = None
        self.class_log_prior_ = None
        self.prior_ = None

    @abstractmethod
    def _joint_log_likelihood(self, X):
        raise NotImplementedError("Subclasses must implement _joint_log_likelihood.")

    def _fit_class_indices(self, X, y):
        """Validate the training data and return it with the row indices of every class."""
        X = check_matrix(X, name="X")
        y = check_labels(y, X.shape[0])
        classes = unique_labels(y)
        n_samples = X.shape[0]
        class_log_prior = np.empty(len(classes), dtype=np.float64)
        class_ids = []
        for i, c in enumerate(classes):
            ids = np.flatnonzero(y == c)
            with np.errstate(divide='ignore'):
                class_log_prior[i] = np.log(ids.size / n_samples)
            class_ids.append(ids)
        return X, classes, class_log_prior, class_ids

    def _set_fitted(self, X, classes, class_log_prior):
        _freeze(classes, class_log_prior)
        self.n_samples_, self.n_features_ = X.shape
        self.classes_ = classes
        self.n_classes_ = len(classes)
        self.class_log_prior_ = class_log_prior
        self.prior_ = dict(zip(classes.tolist(), class_log_prior.tolist()))
        if self.verbose:
            print(f"{type(self).__name__} fitted on {self.n_samples_} samples, "
                  f"{self.n_features_} features, {self.n_classes_} classes")

    def _check_fitted(self):
        if self.classes_ is None:
            raise ValueError("Model must be fitted before making predictions.")

    def _check_n_features(self, n_features):
        if n_features != self.n_features_:
            raise ValueError(
                f"X has {n_features} features, but {type(self).__name__} was fitted with {self.n_features_} features.")

    def _validate_batch(self, X):
        self._check_fitted()
        X = check_matrix(X, name="X")
        self._check_n_features(X.shape[1])
        return X

    def _validate_one(self, x):
        self._check_fitted()
        x = check_vector(x, name="x")
        self._check_n_features(x.shape[0])
        return x[np.newaxis, :]

    def joint_log_likelihood(self, X):
        """
        Unnormalized log-likelihood of every row of X under every class.

        Parameters:
            X (np.ndarray): Feature matrix (n_samples, n_features)
        Returns:
            np.ndarray: Log-likelihoods (n_samples, n_classes), columns in classes_ order
        """
        return self._joint_log_likelihood(self._validate_batch(X))

    def predict_one(self, x):
        """
        Predict the class label of a single observation of shape (n_features,).
        """
        jll = self._joint_log_likelihood(self._validate_one(x))
        return self.classes_[_first_argmax(jll)[0]]

    def predict_batch(self, X):
        """
        Predict class labels for every row of X, in row order.
        """
        jll = self._joint_log_likelihood(self._validate_batch(X))
        return self.classes_[_first_argmax(jll)]

    def predict(self, X):
        """
        Predict class labels for samples in X.
        Parameters:
            X (np.ndarray): Feature matrix (n_samples, n_features) or one observation (n_features,)
        Returns:
            np.ndarray of labels (n_samples,) for a matrix, a single label for an observation
        """
        if is_vector_like(X):
            return self.predict_one(X)
        return self.predict_batch(X)

    @staticmethod
    def _normalize(jll):
        return jll - log_sum_exp(jll, axis=1)[:, np.newaxis]

    def predict_log_proba(self, X):
        """
        Return normalized log-probabilities for each class for input X.
        """
        if is_vector_like(X):
            return self._normalize(self._joint_log_likelihood(self._validate_one(X)))[0]
        return self._normalize(self._joint_log_likelihood(self._validate_batch(X)))

    def predict_proba_one(self, x):
        jll = self._joint_log_likelihood(self._validate_one(x))
        return np.exp(self._normalize(jll))[0]

    def predict_proba_batch(self, X):
        jll = self._joint_log_likelihood(self._validate_batch(X))
        return np.exp(self._normalize(jll))

    def predict_proba(self, X):
        """
        Return probabilities for each class for input X.
        Parameters:
            X (np.ndarray): Feature matrix (n_samples, n_features) or one observation (n_features,)
        Returns:
            np.ndarray: Probabilities (n_samples, n_classes), or (n_classes,) for one observation
        """
        if is_vector_like(X):
            return self.predict_proba_one(X)
        return self.predict_proba_batch(X)


class MultinomialNB(_BaseNB):
    def __init__(self, alpha=1.0, verbose=False):
        """
        Initialize MultinomialNB.
        Parameters:
            alpha (float): Laplace smoothing parameter, strictly positive.
            verbose (bool): Whether to print a summary after fitting.
        """
        super().__init__(verbose=verbose)
        self.alpha = alpha
        self.cprob_ = None

    def _check_alpha(self):
        if not is_real_number(self.alpha):
            raise TypeError(f"alpha must be a real number, got {type(self.alpha)}")
        if not (self.alpha > 0 and np.isfinite(self.alpha)):
            raise ValueError(f"alpha must be strictly positive and finite, got {self.alpha}")

    def fit(self, X, y):
        """
        Fit the model using training data.
        Parameters:
            X (np.ndarray): Count matrix (n_samples, n_features), non-negative
            y (np.ndarray): Target vector (n_samples,)
        Raises:
            ValueError: If X is empty, has negative entries, or does not match y.
        """
        self._check_alpha()
        X, classes, class_log_prior, class_ids = self._fit_class_indices(X, y)
        if np.any(X < 0):
            raise ValueError("Negative values in data passed to MultinomialNB (input X)")
        n_features = X.shape[1]
        # cprob[j, i] = log P(feature j | class i), smoothed
        cprob = np.empty((n_features, len(classes)), dtype=np.float64)
        for i, ids in enumerate(class_ids):
            counts = safe_indexing(X, rows=ids).sum(axis=0)
            total_count = counts.sum()
            cprob[:, i] = np.log(counts + self.alpha) - np.log(total_count + n_features * self.alpha)

        _freeze(cprob)
        self.cprob_ = cprob
        self._set_fitted(X, classes, class_log_prior)
        return self

    def _joint_log_likelihood(self, X):
        if np.isfinite(self.cprob_).all():
            return self.class_log_prior_ + X @ self.cprob_
        # zero counts contribute nothing, even against a non-finite entry
        jll = np.tile(self.class_log_prior_, (X.shape[0], 1))
        for j in range(self.n_features_):
            col = X[:, j]
            nonzero = col != 0
            jll[nonzero] += col[nonzero, np.newaxis] * self.cprob_[j]
        return jll


class GaussianNB(_BaseNB):
    def __init__(self, density='compat', verbose=False):
        """
        Initialize GaussianNB.
        Parameters:
            density (str): 'compat' scores features with the linear residual form
                -0.5*log(2*pi)*sigma - 0.5*(x - mu)/sigma; 'normal' uses the
                normal log-density.
            verbose (bool): Whether to print a summary after fitting.
        """
        if density not in GAUSSIAN_DENSITIES:
            raise ValueError(f"Unknown density: {density}. Choose from {GAUSSIAN_DENSITIES}.")
        super().__init__(verbose=verbose)
        self.density = density
        self.mu_ = None  # mean
        self.sigma_ = None  # sample standard deviation

    def fit(self, X, y):
        """
        Fit the model using training data.
        Parameters:
            X (np.ndarray): Feature matrix (n_samples, n_features)
            y (np.ndarray): Target vector (n_samples,)
        Raises:
            ValueError: If X is empty or does not match y.
        """
        if self.density not in GAUSSIAN_DENSITIES:
            raise ValueError(f"Unknown density: {self.density}. Choose from {GAUSSIAN_DENSITIES}.")
        X, classes, class_log_prior, class_ids = self._fit_class_indices(X, y)
        mu = np.empty((X.shape[1], len(classes)), dtype=np.float64)
        sigma = np.empty_like(mu)
        degenerate = []
        for i, ids in enumerate(class_ids):
            X_c = safe_indexing(X, rows=ids)
            mu[:, i] = X_c.mean(axis=0)
            with warnings.catch_warnings():
                warnings.simplefilter('ignore', RuntimeWarning)
                sigma[:, i] = X_c.std(axis=0, ddof=1)
            if ids.size <= 1:
                degenerate.append(classes[i])
        if degenerate:
            warnings.warn(
                f"Classes {degenerate} have fewer than two training samples; "
                "their standard deviations are NaN.", RuntimeWarning, stacklevel=2)

        _freeze(mu, sigma)
        self.mu_ = mu
        self.sigma_ = sigma
        self._set_fitted(X, classes, class_log_prior)
        return self

    def _log_density(self, X, mu, sigma):
        """
        Per-feature log-density terms for one class, shape (n_samples, n_features).
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            if self.density == 'normal':
                z = (X - mu) / sigma
                return -0.5 * LOG_2PI - np.log(sigma) - 0.5 * z ** 2
            return -0.5 * LOG_2PI * sigma - 0.5 * (X - mu) / sigma

    def _joint_log_likelihood(self, X):
        log_probs = []
        for idx in range(self.n_classes_):
            log_likelihood = self._log_density(X, self.mu_[:, idx], self.sigma_[:, idx]).sum(axis=1)
            log_probs.append(self.class_log_prior_[idx] + log_likelihood)
        return np.vstack(log_probs).T  # shape (n_samples, n_classes)


def multinomial(x, y, alpha=1.0):
    """
    Fit a multinomial naive Bayes model.

    :param x: count matrix (n_samples, n_features) or array-of-arrays
    :param y: vector of class memberships
    :param alpha: Laplace smoothing parameter
    :return: fitted MultinomialNB
    """
    return MultinomialNB(alpha=alpha).fit(x, y)


def gaussian(x, y, density='compat'):
    """
    Fit a Gaussian naive Bayes model.

    :param x: design matrix (n_samples, n_features) or array-of-arrays
    :param y: vector of class memberships
    :param density: 'compat' or 'normal', see GaussianNB
    :return: fitted GaussianNB
    """
    return GaussianNB(density=density).fit(x, y)
