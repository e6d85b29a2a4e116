# -------------------------------------
# Column type tags
# -------------------------------------
"""
The closed set of column types.

Each member carries everything the operators need to know about its type:
the numpy buffer dtype, the missing-value sentinel, how a Python value is
checked before it is stored, and how a text field is parsed or written.
Operators dispatch through these properties instead of comparing tag
characters, so adding a member means filling in every table below.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any

import numpy as np

from .config import MISS_CHAR, MISS_INT, MISS_REAL
from .errors import ConstructionError, DTypeMismatchError

_INT32_MIN = int(np.iinfo(np.int32).min)
_INT32_MAX = int(np.iinfo(np.int32).max)

# atoi/atof accept a numeric prefix and ignore the rest of the field
_atoi_re = re.compile(r"^\s*([+-]?\d+)")
_atof_re = re.compile(
    r"""
    ^\s*
    (
        [+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | [+-]?(?:inf(?:inity)?|nan)
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


class DType(Enum):
    INT = "I"
    REAL = "D"
    CHAR = "C"

    @classmethod
    def from_tag(cls, tag: Any) -> DType:
        """Resolve a tag character (or a DType) to a member."""
        if isinstance(tag, DType):
            return tag
        try:
            return cls(tag)
        except ValueError:
            raise ConstructionError(
                f"dtype must be 'I' (int) or 'D' (double) or 'C' (char), got {tag!r}"
            ) from None

    @property
    def tag(self) -> str:
        return self.value

    @property
    def np_dtype(self) -> np.dtype:
        return _NP_DTYPES[self]

    @property
    def missing(self) -> Any:
        return _MISSING[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    def check_value(self, value: Any) -> Any:
        """Return value as the Python scalar stored in this type, or raise."""
        return _CHECKERS[self](value)

    def parse_field(self, field: str) -> Any:
        """Parse one text field the way atoi/atof/first-char would."""
        return _PARSERS[self](field)

    def format_field(self, value: Any) -> str:
        """Format one stored value for delimited text output."""
        return _FORMATTERS[self](value)


def parse_dtypes(dtypes: Any, n_col: int) -> list[DType]:
    """
    Turn a tag string ("IDC") or a sequence of tags into DType members.

    Raises:
        ConstructionError: If fewer than n_col tags are given or a tag is unknown
    """
    tags = list(dtypes)
    if len(tags) < n_col:
        raise ConstructionError(f"{len(tags)} dtypes given for {n_col} columns")
    return [DType.from_tag(t) for t in tags[:n_col]]


def dtype_string(dtypes: list[DType]) -> str:
    return "".join(d.tag for d in dtypes)


# -------------------------------------
# Value checks
# -------------------------------------

def _check_int(value: Any) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer, float, np.floating)):
        raise DTypeMismatchError(f"value {value!r} is not an integer")
    if isinstance(value, (float, np.floating)):
        if not float(value).is_integer():
            raise DTypeMismatchError(f"value {value!r} is not an integer")
    v = int(value)
    if v < _INT32_MIN or v > _INT32_MAX:
        raise DTypeMismatchError(f"value {v} does not fit a 32-bit integer column")
    return v


def _check_real(value: Any) -> float:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise DTypeMismatchError(f"value {value!r} is not a real number")
    return float(value)


def _check_char(value: Any) -> str:
    if isinstance(value, (bytes, np.bytes_)) and len(value) == 1:
        value = value.decode("latin-1")
    if not isinstance(value, str) or len(value) != 1:
        raise DTypeMismatchError(f"value {value!r} is not a single character")
    return value


# -------------------------------------
# Text parsing / formatting
# -------------------------------------

def _parse_int(field: str) -> int:
    m = _atoi_re.match(field)
    if not m:
        return 0
    return _check_int(int(m.group(1)))


def _parse_real(field: str) -> float:
    m = _atof_re.match(field)
    if not m:
        return 0.0
    return float(m.group(1))


def _parse_char(field: str) -> str:
    return field[0] if field else MISS_CHAR


def _format_int(value: Any) -> str:
    return str(int(value))


def _format_real(value: Any) -> str:
    return repr(float(value))


def _format_char(value: Any) -> str:
    # numpy stores NUL as "", an empty field would vanish on read
    return str(value) or "\x00"


_NP_DTYPES = {
    DType.INT: np.dtype(np.int32),
    DType.REAL: np.dtype(np.float64),
    DType.CHAR: np.dtype("<U1"),
}

_MISSING = {
    DType.INT: MISS_INT,
    DType.REAL: MISS_REAL,
    DType.CHAR: MISS_CHAR,
}

_LABELS = {
    DType.INT: "integer",
    DType.REAL: "double",
    DType.CHAR: "char",
}

_CHECKERS = {
    DType.INT: _check_int,
    DType.REAL: _check_real,
    DType.CHAR: _check_char,
}

_PARSERS = {
    DType.INT: _parse_int,
    DType.REAL: _parse_real,
    DType.CHAR: _parse_char,
}

_FORMATTERS = {
    DType.INT: _format_int,
    DType.REAL: _format_real,
    DType.CHAR: _format_char,
}
