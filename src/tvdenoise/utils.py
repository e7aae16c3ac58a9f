"""Validation helpers and common quantities for 1D Total Variation."""
import numpy as np


class InvalidInput(ValueError):
    """Custom Exception for a signal that can not be denoised."""

    pass


class InvalidParameter(ValueError):
    """Custom Exception for an invalid regularization parameter."""

    pass


def validate_signal(signal):
    """Return the signal as a 1D floating point array.

    float32 and float64 arrays keep their dtype, other real types are
    promoted to float64.

    Raises
    ------
    InvalidInput
        If the signal is empty, not 1D or not real valued.
    """
    y = np.asarray(signal)
    if y.ndim != 1:
        raise InvalidInput(f"signal should be 1D, but has shape {y.shape}")
    if y.size == 0:
        raise InvalidInput("signal should have at least one value.")
    if np.iscomplexobj(y):
        raise InvalidInput("signal should be real valued.")
    if y.dtype not in (np.float32, np.float64):
        y = y.astype(np.float64)
    return y


def validate_lambda(lmbd):
    """Return the regularization parameter as a float.

    Raises
    ------
    InvalidParameter
        If lambda is negative, NaN or infinite.
    """
    try:
        lmbd = float(lmbd)
    except (TypeError, ValueError) as e:
        raise InvalidParameter(f"lambda should be a real scalar, got {lmbd!r}") from e
    if not np.isfinite(lmbd):
        raise InvalidParameter(f"lambda should be finite, got {lmbd}")
    if lmbd < 0:
        raise InvalidParameter(f"lambda should be non-negative, got {lmbd}")
    return lmbd


def total_variation(x, axis=0):
    """Compute the sum of absolute differences of consecutive values."""
    return np.sum(np.abs(np.diff(x, axis=axis)), axis=axis)


def lambda_max(y, axis=0):
    """Compute the smallest lambda for which the solution is constant.

    For any lambda above this value, the denoised signal is the mean of the
    input. It is the largest absolute partial sum of the centered signal.

    Parameters
    ----------
    y: np.ndarray
        Input data.
    axis: int, default 0
        Axis along which the signal runs.

    Returns
    -------
    float or np.ndarray
        The critical value, one per signal.
    """
    y = np.asarray(y, dtype=np.float64)
    if y.shape[axis] < 2:
        return np.zeros(np.delete(y.shape, axis)) if y.ndim > 1 else 0.0
    centered = y - np.mean(y, axis=axis, keepdims=True)
    partial = np.cumsum(centered, axis=axis)
    partial = np.delete(partial, -1, axis=axis)
    return np.max(np.abs(partial), axis=axis)
