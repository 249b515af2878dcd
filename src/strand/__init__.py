"""Strand: typed, nullable series over interchangeable dataframe engines."""

from importlib.metadata import version as _version

__version__: str = _version("strand-series")

from strand._protocols import SeriesBackendProtocol
from strand.config import (
    available_backends,
    get_backend,
    get_default_backend,
    register_backend,
    reset_default_backend,
    set_default_backend,
    using_backend,
)
from strand.dtypes import (
    Bool,
    Date,
    Datetime,
    Float64,
    FloatType,
    Int64,
    IntegerType,
    NumericType,
    TemporalType,
    Utf8,
    dtype_name,
    parse_dtype,
    promote,
)
from strand.errors import (
    BackendError,
    BoundsError,
    DtypeIneligibleError,
    DtypeMismatchError,
    EmptyTypeError,
    SamplingError,
    StrandError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from strand.inference import infer_dtype
from strand.series import Series, ValueCounts, from_list, from_tensor

__all__ = [
    # Series
    "Series",
    "ValueCounts",
    "from_list",
    "from_tensor",
    "infer_dtype",
    # Dtypes
    "Bool",
    "Date",
    "Datetime",
    "Float64",
    "Int64",
    "Utf8",
    "NumericType",
    "IntegerType",
    "FloatType",
    "TemporalType",
    "dtype_name",
    "parse_dtype",
    "promote",
    # Backends
    "SeriesBackendProtocol",
    "available_backends",
    "get_backend",
    "get_default_backend",
    "register_backend",
    "reset_default_backend",
    "set_default_backend",
    "using_backend",
    # Errors
    "StrandError",
    "TypeMismatchError",
    "EmptyTypeError",
    "UnsupportedTypeError",
    "DtypeIneligibleError",
    "DtypeMismatchError",
    "BoundsError",
    "SamplingError",
    "BackendError",
]
