"""
Condat's direct algorithm for 1D Total Variation denoising.

References
----------
.. [1] Condat, L. (2013). A direct algorithm for 1D total variation denoising.
   IEEE Signal Processing Letters, 20(11), 1054-1057.
"""
import logging

import numba as nb
import numpy as np

from ..utils import validate_lambda, validate_signal

logger = logging.getLogger("tvdenoise")


@nb.njit
def solve_condat(y, lmbd, x):
    """Condat's algorithm.

    The signal is scanned once. The current segment keeps the range of values
    it may take, and the accumulated slack of the scanned samples against
    this range. When the slack overflows, the segment is closed at the last
    position where the range was tight, and a new segment starts after it.

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
    The input is not validated, use `denoise_condat` for that.
    """
    N = len(y)
    twolambda = 2 * lmbd
    minlambda = -lmbd

    scan = segment_start = 0
    # last positions where umin == lambda and umax == -lambda.
    kminus = kplus = 0
    umin = lmbd
    umax = minlambda
    lower = y[0] - lmbd
    upper = y[0] + lmbd
    while scan < N:
        if scan == N - 1:
            if umin < 0:
                # lower bound too high: negative jump.
                x[segment_start : kminus + 1] = lower
                segment_start = scan = kminus = kminus + 1
                lower = y[kminus]
                umin = lmbd
                umax = lower + umin - upper
            elif umax > 0:
                # upper bound too low: positive jump.
                x[segment_start : kplus + 1] = upper
                segment_start = scan = kplus = kplus + 1
                upper = y[kplus]
                umax = minlambda
                umin = upper + umax - lower
            else:
                lower += umin / (scan - segment_start + 1)
                x[segment_start:] = lower
                scan = N
        else:
            umin += y[scan + 1] - lower
            umax += y[scan + 1] - upper
            if umin < minlambda:
                x[segment_start : kminus + 1] = lower
                segment_start = scan = kminus = kplus = kminus + 1
                lower = y[kplus]
                upper = lower + twolambda
                umin = lmbd
                umax = minlambda
            elif umax > lmbd:
                x[segment_start : kplus + 1] = upper
                segment_start = scan = kminus = kplus = kplus + 1
                upper = y[kplus]
                lower = upper - twolambda
                umin = lmbd
                umax = minlambda
            else:
                scan += 1
                if umin >= lmbd:
                    kminus = scan
                    lower += (umin - lmbd) / (kminus - segment_start + 1)
                    umin = lmbd
                if umax <= minlambda:
                    kplus = scan
                    upper += (umax + lmbd) / (kplus - segment_start + 1)
                    umax = minlambda
    return x


def denoise_condat(signal, lmbd):
    """Denoise a 1D signal with Condat's direct algorithm.

    Runs in a single pass, with constant memory besides the output.

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
    """
    y = validate_signal(signal)
    lmbd = validate_lambda(lmbd)
    if lmbd == 0:
        return y.copy()
    logger.debug("condat on %d samples, lambda=%g", len(y), lmbd)
    return solve_condat(y, lmbd, np.empty_like(y))
