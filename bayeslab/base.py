# pylint: disable=missing-docstring
from abc import abstractmethod
from typing import Any, TypeVar
import numpy as np

from bayeslab.common.utils import is_array_like

# Define a type variable that's used correctly
T = TypeVar("T", bound="BaseEstimator")


# pylint: disable=invalid-name line-too-long
class BaseEstimator:
    @abstractmethod
    def fit(self: T, X: np.ndarray, y: np.ndarray) -> T:
        """
        :param X: numpy array of shape (N, d) with N being the number of samples and d being the number of feature dimensions
        :param y: numpy array of shape (N,) holding one class label per sample
        :return: the fitted estimator
        """
        raise NotImplementedError

    def get_params(self, mode: str = "all") -> Any:
        """
        Get parameters for this estimator.

        :param mode: Specifies which parameters to return. Options are:
            - "all": Return all parameters.
            - "fitted": Return only fitted parameters (attributes ending in an underscore).
            - "hyper": Return only constructor settings (e.g., smoothing strength).
        :return: Dictionary of parameter names mapped to their values.
        """
        if mode == "all":
            return dict(self.__dict__)
        if mode == "fitted":
            return {k: v for k, v in self.__dict__.items() if k.endswith("_") and not k.startswith("_")}
        if mode == "hyper":
            return {k: v for k, v in self.__dict__.items() if not k.endswith("_") and not k.startswith("_")}

        raise ValueError(
            f"Invalid mode '{mode}'. Choose from 'all', 'fitted', or 'hyper'."
        )

    def set_params(self: T, **params) -> T:
        """Set the constructor parameters of this estimator."""
        hyper = self.get_params(mode="hyper")
        for param, value in params.items():
            if param not in hyper:
                raise ValueError(f"Invalid parameter {param}")
            setattr(self, param, value)
        return self


class BaseClassifier(BaseEstimator):
    @abstractmethod
    def predict(self, X: np.ndarray) -> Any:
        """
        :param X: np array of shape (N, d), or a single observation of shape (d,)
        :return:
        """
        raise NotImplementedError

    def score(self, X: Any, y: Any) -> float:
        """
        Mean accuracy of the predictions for X against the labels y.

        :param X: numpy array of shape (N, d) with N being the number of samples and d being the number of feature dimensions
        :param y: array-like of shape (N,) with the true class label of every sample
        :return: accuracy in [0, 1]
        """
        if not is_array_like(X):
            raise TypeError(f"X must be a matrix or array of test data, got {type(X)}")
        if not is_array_like(y):
            raise TypeError(f"y must be an array of labels for the test data, got {type(y)}")

        y_true = np.asarray(y, dtype=object).ravel()
        y_pred = np.asarray(self.predict(X), dtype=object).ravel()
        if y_pred.shape[0] != y_true.shape[0]:
            raise ValueError(
                f"Got {y_pred.shape[0]} predictions for {y_true.shape[0]} labels.")
        if y_true.shape[0] == 0:
            raise ValueError("Cannot score an empty set of labels.")

        return float(np.mean(y_pred == y_true))
