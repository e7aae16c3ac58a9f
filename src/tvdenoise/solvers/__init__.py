"""Exact solvers for 1D Total Variation denoising."""

from .condat import denoise_condat, solve_condat
from .tautstring import denoise_tautstring, solve_tautstring

__all__ = [
    "denoise_condat",
    "denoise_tautstring",
    "solve_condat",
    "solve_tautstring",
]
