"""Exact solvers for 1D Total Variation denoising."""

from .solvers import denoise_condat, denoise_tautstring
from .denoise import METHODS, denoise, prox_tv1d
from .proximity import ProxTV1d
from .utils import InvalidInput, InvalidParameter, lambda_max, total_variation

__all__ = [
    "METHODS",
    "InvalidInput",
    "InvalidParameter",
    "ProxTV1d",
    "denoise",
    "denoise_condat",
    "denoise_tautstring",
    "lambda_max",
    "prox_tv1d",
    "total_variation",
]
