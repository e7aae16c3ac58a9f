"""
Dispatch of the 1D Total Variation solvers.

See Also
--------
tvdenoise.solvers
"""
import logging

import numba as nb
import numpy as np

from .solvers import denoise_condat, denoise_tautstring, solve_condat, solve_tautstring
from .utils import InvalidInput, InvalidParameter

logger = logging.getLogger("tvdenoise")

METHODS = {"condat": denoise_condat, "tautstring": denoise_tautstring}


def get_method(method):
    """Return the solver registered under ``method``.

    A callable is returned as is, it should take a 1D signal and a lambda.
    """
    if callable(method):
        return method
    try:
        return METHODS[method]
    except KeyError as e:
        raise ValueError(f"Unknown method: {method}") from e


def denoise(signal, lmbd, method="condat"):
    """Denoise a 1D signal with a Total Variation penalty.

    Parameters
    ----------
    signal: array_like
        1D input data.
    lmbd: float
        Regularization parameter.
    method: str or callable, default "condat"
        Algorithm to use, "condat" or "tautstring".

    Returns
    -------
    np.ndarray
        Output data.
    """
    return get_method(method)(signal, lmbd)


@nb.njit(parallel=True)
def _condat_columns(y, lmbds, x):
    for i in nb.prange(y.shape[1]):
        if lmbds[i] == 0:
            x[:, i] = y[:, i]
        else:
            solve_condat(y[:, i], lmbds[i], x[:, i])
    return x


@nb.njit(parallel=True)
def _tautstring_columns(y, lmbds, x):
    for i in nb.prange(y.shape[1]):
        if lmbds[i] == 0:
            x[:, i] = y[:, i]
        else:
            solve_tautstring(y[:, i], lmbds[i], x[:, i])
    return x


COLUMN_SOLVERS = {denoise_condat: _condat_columns, denoise_tautstring: _tautstring_columns}


def _denoise_columns(flat, lmbds, solver):
    if flat.dtype not in (np.float32, np.float64):
        flat = flat.astype(np.float64)
    ret = np.empty(flat.shape, dtype=flat.dtype)
    if solver in COLUMN_SOLVERS:
        return COLUMN_SOLVERS[solver](flat, lmbds, ret)
    for i in range(flat.shape[1]):
        ret[:, i] = solver(flat[:, i], lmbds[i])
    return ret


def prox_tv1d(data, lmbd, method="condat"):
    """Proximity operator for Total Variation in 1D, along the first axis.

    Every column is denoised independently.

    Parameters
    ----------
    data: array_like
        Input data, the first axis being the one to regularize. Extra
        dimensions are flattened. Complex data is processed on the real and
        imaginary parts separately.
    lmbd: float or np.ndarray
        Regularization parameter, either a scalar or one value per column.
    method: str or callable, default "condat"
        Algorithm to use, "condat" or "tautstring".

    Returns
    -------
    np.ndarray
        Output data, same shape as the input.

    Raises
    ------
    InvalidInput
        If the data is empty.
    InvalidParameter
        If the number of lambda values does not match the number of columns,
        or if a lambda is negative or not finite.

    Notes
    -----
    With the "condat" and "tautstring" methods, the columns are processed in
    parallel by a compiled loop. Other callables are applied column by column.
    """
    solver = get_method(method)
    data = np.asarray(data)
    if data.ndim == 0 or data.size == 0:
        raise InvalidInput(f"data should be a non-empty array, got shape {data.shape}")
    flat = data.reshape(data.shape[0], -1)

    lmbds = np.asarray(lmbd, dtype=np.float64)
    if lmbds.ndim == 0:
        lmbds = np.full(flat.shape[1], lmbds)
    elif lmbds.shape != (flat.shape[1],):
        raise InvalidParameter(
            f"lambda should be a scalar or have {flat.shape[1]} values, "
            f"but has shape {lmbds.shape}"
        )
    if not np.all(np.isfinite(lmbds)) or np.any(lmbds < 0):
        raise InvalidParameter(f"lambda should be finite and non-negative, got {lmbds}")
    logger.debug(
        "prox tv1d with %s on %d signals of %d samples",
        getattr(solver, "__name__", solver),
        flat.shape[1],
        flat.shape[0],
    )

    if np.iscomplexobj(flat):
        ret = np.zeros_like(flat)
        ret.real = _denoise_columns(flat.real, lmbds, solver)
        ret.imag = _denoise_columns(flat.imag, lmbds, solver)
    else:
        ret = _denoise_columns(flat, lmbds, solver)
    return ret.reshape(data.shape)
