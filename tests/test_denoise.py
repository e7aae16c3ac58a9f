#!/usr/bin/env python3
import numpy as np
import numpy.testing as npt

import pytest

from tvdenoise import (
    METHODS,
    InvalidInput,
    InvalidParameter,
    denoise,
    denoise_condat,
    denoise_tautstring,
    lambda_max,
    prox_tv1d,
    total_variation,
)

SMALL = [1.0, 2.1, 5.2, 8.2, 1.4, 5.2, 6.2, 10.1]


def test_registry():
    assert METHODS["condat"] is denoise_condat
    assert METHODS["tautstring"] is denoise_tautstring


@pytest.mark.parametrize("method", ["condat", "tautstring"])
def test_denoise_dispatch(method):
    npt.assert_allclose(denoise(SMALL, 3.0, method=method), METHODS[method](SMALL, 3.0))


def test_denoise_callable():
    npt.assert_array_equal(denoise(SMALL, 3.0, method=lambda y, lmbd: y), SMALL)


def test_unknown_method():
    with pytest.raises(ValueError, match="Unknown method"):
        denoise(SMALL, 1.0, method="chambolle")


@pytest.mark.parametrize("method", ["condat", "tautstring"])
def test_prox_columns(method):
    data = np.random.default_rng(0).standard_normal((50, 4))
    ret = prox_tv1d(data, 0.5, method=method)
    assert ret.shape == data.shape
    for i in range(data.shape[1]):
        npt.assert_allclose(ret[:, i], denoise_condat(data[:, i], 0.5), atol=1e-8)


def test_prox_per_column_lambda():
    data = np.random.default_rng(1).standard_normal((30, 3))
    lmbds = np.array([0.0, 1.0, 100.0])
    ret = prox_tv1d(data, lmbds)
    npt.assert_array_equal(ret[:, 0], data[:, 0])
    npt.assert_allclose(ret[:, 1], denoise_condat(data[:, 1], 1.0))
    npt.assert_allclose(ret[:, 2], np.mean(data[:, 2]), atol=1e-10)


def test_prox_1d_and_nd():
    rng = np.random.default_rng(2)
    signal = rng.standard_normal(40)
    npt.assert_allclose(prox_tv1d(signal, 0.3), denoise_condat(signal, 0.3))

    volume = rng.standard_normal((20, 3, 4))
    ret = prox_tv1d(volume, 0.3)
    assert ret.shape == volume.shape
    npt.assert_allclose(ret[:, 1, 2], denoise_condat(volume[:, 1, 2], 0.3))


def test_prox_complex():
    rng = np.random.default_rng(3)
    data = rng.standard_normal((25, 2)) + 1j * rng.standard_normal((25, 2))
    ret = prox_tv1d(data, 0.4)
    assert np.iscomplexobj(ret)
    npt.assert_allclose(ret.real, prox_tv1d(data.real, 0.4))
    npt.assert_allclose(ret.imag, prox_tv1d(data.imag, 0.4))


def test_prox_int_data():
    ret = prox_tv1d(np.array([[1, 4], [5, 0], [2, 2]]), 0.0)
    assert ret.dtype == np.float64
    npt.assert_array_equal(ret, [[1, 4], [5, 0], [2, 2]])


def test_prox_wrong_lambda_shape():
    with pytest.raises(InvalidParameter):
        prox_tv1d(np.ones((10, 3)), [1.0, 2.0])


def test_prox_negative_lambda():
    with pytest.raises(InvalidParameter):
        prox_tv1d(np.ones((10, 3)), [1.0, -2.0, 1.0])


def test_prox_empty():
    with pytest.raises(InvalidInput):
        prox_tv1d(np.ones((0, 3)), 1.0)


def test_total_variation():
    assert total_variation(np.array(SMALL)) == pytest.approx(22.7)
    npt.assert_allclose(total_variation(np.array([[0, 1], [2, 1], [1, 1]])), [3, 0])


def test_lambda_max():
    assert lambda_max(SMALL) == pytest.approx(6.75)
    assert lambda_max([4.0]) == 0.0
    npt.assert_allclose(lambda_max(np.array([[0.0, 1.0], [4.0, 1.0]])), [2.0, 0.0])


@pytest.mark.parametrize("method", ["condat", "tautstring"])
def test_prox_compiled_columns_match_loop(method):
    data = np.random.default_rng(4).standard_normal((60, 16))
    lmbds = np.linspace(0.0, 2.0, 16)
    solver = METHODS[method]
    ret = prox_tv1d(data, lmbds, method=method)
    ret_loop = prox_tv1d(data, lmbds, method=lambda y, lmbd: solver(y, lmbd))
    npt.assert_allclose(ret, ret_loop, atol=1e-10)


def test_prox_float32():
    data = np.random.default_rng(5).standard_normal((20, 3)).astype(np.float32)
    ret = prox_tv1d(data, 0.5)
    assert ret.dtype == np.float32
    npt.assert_allclose(ret[:, 0], denoise_condat(data[:, 0], 0.5), atol=1e-6)
