import numbers

import numpy as np
import pandas as pd


def is_array_like(obj):
    """True for sequences the estimators accept as data: arrays, lists, tuples and pandas objects."""
    if isinstance(obj, (str, bytes)):
        return False
    return isinstance(obj, (np.ndarray, pd.DataFrame, pd.Series, list, tuple))


def is_matrix_like(obj):
    """True for a 2D numpy array, a DataFrame, or a non-empty array-of-arrays."""
    if isinstance(obj, pd.DataFrame):
        return True
    if isinstance(obj, np.ndarray):
        return obj.ndim == 2
    if isinstance(obj, (list, tuple)):
        return len(obj) > 0 and all(is_array_like(row) and not isinstance(row, pd.DataFrame) for row in obj)
    return False


def is_vector_like(obj):
    """True for a single observation: a Series, a 1D array, or a flat list of numbers."""
    if isinstance(obj, pd.Series):
        return True
    if isinstance(obj, np.ndarray):
        return obj.ndim == 1
    if isinstance(obj, (list, tuple)):
        return not any(is_array_like(v) for v in obj)
    return False


def is_real_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def check_matrix(x, name="x"):
    """Convert a matrix or array-of-arrays into a 2D float ndarray."""
    if not is_matrix_like(x):
        raise TypeError(
            f"{name} must be a matrix or an array-of-arrays. Got {type(x)} instead.")
    if isinstance(x, pd.DataFrame):
        x = x.to_numpy()
    try:
        x = np.asarray(x, dtype=np.float64)
    except ValueError as exc:
        raise ValueError(f"{name} must be a rectangular numeric matrix: {exc}") from exc
    if x.ndim != 2:
        raise ValueError(
            f"{name} must be 2D (n_samples, n_features), got shape {x.shape}")
    if x.shape[0] == 0 or x.shape[1] == 0:
        raise ValueError(f"{name} must not be empty, got shape {x.shape}")
    return x


def check_vector(v, name="x"):
    """Convert a single observation into a 1D float ndarray."""
    if not is_array_like(v) or isinstance(v, pd.DataFrame):
        raise TypeError(f"{name} must be a single observation. Got {type(v)} instead.")
    if isinstance(v, pd.Series):
        v = v.to_numpy()
    v = np.asarray(v, dtype=np.float64)
    if v.ndim != 1:
        raise ValueError(f"{name} must be 1D (n_features,), got shape {v.shape}")
    return v


def check_labels(y, n_samples, name="y"):
    """Convert a label vector into a 1D ndarray of length n_samples."""
    if not is_array_like(y) or isinstance(y, pd.DataFrame):
        raise TypeError(f"{name} must be array-like. Got {type(y)} instead.")
    if isinstance(y, pd.Series):
        y = y.to_numpy()
    labels = y
    y = np.asarray(labels)
    if y.dtype.kind in "US" and not isinstance(labels, np.ndarray):
        # numpy would coerce mixed labels such as [1, "a"] to strings
        if not all(isinstance(v, (str, bytes)) for v in np.ravel(np.asarray(labels, dtype=object))):
            y = np.asarray(labels, dtype=object)
    if y.ndim == 2 and y.shape[1] == 1:
        y = y.ravel()
    if y.ndim != 1:
        raise ValueError(f"{name} must be 1D (n_samples,), got shape {y.shape}")
    if y.shape[0] != n_samples:
        raise ValueError(
            f"x and {name} must have the same number of samples. Got {n_samples} and {y.shape[0]}")
    return y


def safe_indexing(input_feats, rows=None, cols=None):
    """
    Gather a sub-matrix by row and column index lists. A None selector keeps the whole axis.
    """
    if isinstance(input_feats, pd.DataFrame):
        input_feats = input_feats.to_numpy()
    elif isinstance(input_feats, pd.Series):
        return input_feats.iloc[rows].to_numpy() if rows is not None else input_feats.to_numpy()
    elif not isinstance(input_feats, np.ndarray):
        raise TypeError(f"Input data must be a pandas DataFrame, Series, or a numpy ndarray. Got {type(input_feats)} instead.")
    if input_feats.ndim == 1:
        return input_feats if rows is None else input_feats[rows]
    out = input_feats if rows is None else input_feats[np.asarray(rows, dtype=np.intp)]
    if cols is not None:
        out = out[:, np.asarray(cols, dtype=np.intp)]
    return out


def unique_labels(y):
    """Distinct labels of y, sorted when the labels share an ordering, else in first-seen order."""
    y = np.asarray(y)
    if y.dtype != object:
        return np.unique(y)
    labels = pd.unique(y)
    try:
        return np.array(sorted(labels), dtype=object)
    except TypeError:
        # mixed types such as 1 and "a" have no common ordering
        return labels


def log_sum_exp(a, axis=-1):
    """
    Stable log(sum(exp(a))) along an axis, shifting by the maximum first.
    """
    a = np.asarray(a, dtype=np.float64)
    a_max = np.max(a, axis=axis, keepdims=True)
    with np.errstate(invalid="ignore", over="ignore", divide="ignore"):
        out = a_max + np.log(np.sum(np.exp(a - a_max), axis=axis, keepdims=True))
    return np.squeeze(out, axis=axis)
