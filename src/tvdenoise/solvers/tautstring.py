"""
Taut String algorithm for 1D Total Variation denoising.

The denoised signal is the derivative of the shortest path (the taut string)
running inside the corridor defined by the running sum of the input, shifted
by plus and minus lambda. The path is built by maintaining the lower hull of
the upper boundary and the upper hull of the lower boundary at the same time.

References
----------
.. [1] Davies, P. L., & Kovac, A. (2001). Local extremes, runs, strings and
   multiresolution. The Annals of Statistics, 29(1), 1-65.
.. [2] Condat, L. (2013). A direct algorithm for 1D total variation denoising.
   IEEE Signal Processing Letters, 20(11), 1054-1057.
"""
import logging

import numba as nb
import numpy as np

from ..utils import validate_lambda, validate_signal

logger = logging.getLogger("tvdenoise")


@nb.njit
def solve_tautstring(y, lmbd, x):
    """Taut String algorithm.

    Parameters
    ----------
    y: np.ndarray
        Input data, must have at least one value.
    lmbd: float
        Regularization parameter.
    x: np.ndarray
        Return value, same length as y.

    Returns
    -------
    np.ndarray
        Output data.

    Notes
    -----
    The input is not validated, use `denoise_tautstring` for that.
    The working arrays are running sums kept in float64: for long signals or
    large values the precision degrades, this is not detected.
    """
    width = len(y) + 1

    # merged stack of confirmed breakpoints, and the two hull fronts.
    index = np.zeros(width, dtype=np.int64)
    index_low = np.zeros(width, dtype=np.int64)
    index_up = np.zeros(width, dtype=np.int64)
    slope_low = np.zeros(width, dtype=np.float64)
    slope_up = np.zeros(width, dtype=np.float64)
    z = np.zeros(width, dtype=np.float64)

    y_low = np.zeros(width, dtype=np.float64)
    y_up = np.zeros(width, dtype=np.float64)
    y_low[1] = y[0] - lmbd
    y_up[1] = y[0] + lmbd
    for i in range(2, width):
        y_low[i] = y_low[i - 1] + y[i - 1]
        y_up[i] = y_up[i - 1] + y[i - 1]
    # close the corridor at the end.
    y_low[width - 1] += lmbd
    y_up[width - 1] -= lmbd

    slope_low[0] = np.inf
    slope_up[0] = -np.inf
    z[0] = y_low[0]

    s_low = c_low = 0
    s_up = c_up = 0
    c = 0
    for i in range(1, width):
        c_low += 1
        c_up += 1
        index_low[c_low] = i
        index_up[c_up] = i

        slope_low[c_low] = y_low[i] - y_low[i - 1]
        while c_low > s_low + 1 and slope_low[c_low - 1] <= slope_low[c_low]:
            c_low -= 1
            index_low[c_low] = i
            if c_low > s_low + 1:
                slope_low[c_low] = (y_low[i] - y_low[index_low[c_low - 1]]) / (
                    i - index_low[c_low - 1]
                )
            else:
                slope_low[c_low] = (y_low[i] - z[c]) / (i - index[c])

        slope_up[c_up] = y_up[i] - y_up[i - 1]
        while c_up > s_up + 1 and slope_up[c_up - 1] >= slope_up[c_up]:
            c_up -= 1
            index_up[c_up] = i
            if c_up > s_up + 1:
                slope_up[c_up] = (y_up[i] - y_up[index_up[c_up - 1]]) / (
                    i - index_up[c_up - 1]
                )
            else:
                slope_up[c_up] = (y_up[i] - z[c]) / (i - index[c])

        # the fronts crossed: the pending point of the other front is confirmed.
        while (
            c_low == s_low + 1
            and c_up > s_up + 1
            and slope_low[c_low] >= slope_up[s_up + 1]
        ):
            c += 1
            s_up += 1
            index[c] = index_up[s_up]
            z[c] = y_up[index[c]]
            index_low[s_low] = index[c]
            slope_low[c_low] = (y_low[i] - z[c]) / (i - index[c])
        while (
            c_up == s_up + 1
            and c_low > s_low + 1
            and slope_up[c_up] <= slope_low[s_low + 1]
        ):
            c += 1
            s_low += 1
            index[c] = index_low[s_low]
            z[c] = y_low[index[c]]
            index_up[s_up] = index[c]
            slope_up[c_up] = (y_up[i] - z[c]) / (i - index[c])

    for k in range(1, c_low - s_low + 1):
        index[c + k] = index_low[s_low + k]
        z[c + k] = y_low[index[c + k]]
    c += c_low - s_low

    for k in range(1, c + 1):
        x[index[k - 1] : index[k]] = (z[k] - z[k - 1]) / (index[k] - index[k - 1])
    return x


def denoise_tautstring(signal, lmbd):
    """Denoise a 1D signal with the Taut String algorithm.

    A lambda of 0 returns a copy of the input. As lambda increases the output
    gets flatter, and above `lambda_max(signal)` every value is the mean of
    the input.

    Parameters
    ----------
    signal: array_like
        1D input data, with at least one value.
    lmbd: float
        Non-negative regularization parameter.

    Returns
    -------
    np.ndarray
        Piecewise constant output, same length and dtype as the input.

    Raises
    ------
    InvalidInput
        If the signal is empty or not 1D.
    InvalidParameter
        If lambda is negative or not finite.

    See Also
    --------
    tvdenoise.solvers.condat.denoise_condat
    """
    y = validate_signal(signal)
    lmbd = validate_lambda(lmbd)
    if lmbd == 0:
        return y.copy()
    logger.debug("taut string on %d samples, lambda=%g", len(y), lmbd)
    return solve_tautstring(y, lmbd, np.empty_like(y))
