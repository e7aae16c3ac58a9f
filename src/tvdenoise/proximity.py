"""Proximity Operators."""
import logging

import numpy as np
from modopt.opt.proximity import ProximityParent

from .denoise import get_method, prox_tv1d
from .utils import lambda_max, total_variation

logger = logging.getLogger("tvdenoise")


class ProxTV1d(ProximityParent):
    """Proximity operator for Total Variation 1D, applied along the first axis.

    The operator can be used as the proximal step of the ModOpt optimisation
    algorithms (e.g. ForwardBackward, POGM).

    Parameters
    ----------
    lambda_tv: float
        Regularization parameter.
    lambda_max: float, default None
        If given, ``lambda_tv`` is relative to this value, see
        `ProxTV1d.get_lambda_max`.
    method: str or callable, default "condat"
        Algorithm use to compute the proximity operator. Available are:
        'condat', 'tautstring'.
        If callable, it should take a 1D signal and a lambda and return the
        denoised signal.
    """

    def __init__(self, lambda_tv, lambda_max=None, method="condat"):
        self.lambda_tv = lambda_tv
        self.lambda_max = lambda_max
        self.method = get_method(method)

    @property
    def l_reg(self):
        """Regularization parameter."""
        if self.lambda_max is None:
            return self.lambda_tv
        return self.lambda_tv * self.lambda_max

    def op(self, data, extra_factor=1.0):
        """Proximity operator for Total Variation 1D.

        Parameters
        ----------
        data: np.ndarray
            Input data.
        extra_factor: float, default 1.0
            Scaling of the regularization parameter (e.g. the step size).

        Returns
        -------
        np.ndarray
            Output data.
        """
        lmbd = extra_factor * np.asarray(self.l_reg, dtype=np.float64)
        logger.debug("ProxTV1d.op on shape %s", np.shape(data))
        return prox_tv1d(data, lmbd, method=self.method)

    def cost(self, *args, **kwargs):
        """Cost function for Total Variation 1D."""
        data = np.asarray(args[0])
        tv = total_variation(data.reshape(data.shape[0], -1), axis=0)
        return np.sum(np.asarray(self.l_reg) * tv)

    @classmethod
    def get_lambda_max(cls, y):
        """Compute the maximum value of the regularization parameter.

        Above this value, every column of the result is constant.

        Parameters
        ----------
        y: np.ndarray
            Input data.

        Returns
        -------
        float
            Maximum value of the regularization parameter.
        """
        y = np.asarray(y)
        flat = y.reshape(y.shape[0], -1)
        if np.iscomplexobj(flat):
            return max(np.max(lambda_max(flat.real)), np.max(lambda_max(flat.imag)))
        return np.max(lambda_max(flat))
