"""Unit tests for the NumPy tensor boundary."""

from __future__ import annotations

import numpy as np
import pytest

from strand.dtypes import Float64, Int64
from strand.errors import UnsupportedTypeError
from strand.tensor import tensor_dtype, tensor_values, to_tensor


class TestTensorDtype:
    @pytest.mark.parametrize("np_dtype", ["int8", "int32", "int64", "uint16", "uint64"])
    def test_integers(self, np_dtype: str) -> None:
        assert tensor_dtype(np.zeros(2, dtype=np_dtype)) is Int64

    @pytest.mark.parametrize("np_dtype", ["float16", "float32", "float64"])
    def test_floats(self, np_dtype: str) -> None:
        assert tensor_dtype(np.zeros(2, dtype=np_dtype)) is Float64

    @pytest.mark.parametrize("np_dtype", ["bool", "complex128", "datetime64[D]", "U3"])
    def test_unsupported(self, np_dtype: str) -> None:
        with pytest.raises(UnsupportedTypeError, match="tensor dtype"):
            tensor_dtype(np.zeros(2, dtype=np_dtype))


class TestTensorValues:
    def test_flattens_in_c_order(self) -> None:
        assert tensor_values(np.array([[1, 2], [3, 4]])) == [1, 2, 3, 4]

    def test_values_are_python_scalars(self) -> None:
        values = tensor_values(np.array([1.5, 2.5], dtype="float32"))
        assert all(type(v) is float for v in values)

    def test_unsigned_beyond_int64_rejected(self) -> None:
        tensor = np.array([1, 2**63], dtype="uint64")
        with pytest.raises(UnsupportedTypeError, match="64-bit range"):
            tensor_values(tensor)

    def test_unsigned_within_int64(self) -> None:
        assert tensor_values(np.array([0, 2**63 - 1], dtype="uint64")) == [0, 2**63 - 1]


class TestToTensor:
    def test_options_pass_through(self) -> None:
        tensor = to_tensor([1, 2, 3], dtype="float32")
        assert tensor.dtype == np.float32

    def test_nulls_become_nan_for_float(self) -> None:
        tensor = to_tensor([1.0, None], dtype="float64")
        assert np.isnan(tensor[1])
