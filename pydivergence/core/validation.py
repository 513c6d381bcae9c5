"""
Input validation utilities for pydivergence.

These validators follow the "fail fast, fail loud" principle: they raise
immediately with a clear message instead of repairing the input.

Design principles:
    - No silent reshaping (a 1D input is never promoted to a table)
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydivergence.core.exceptions import InvalidInputError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Integer counts are promoted before any arithmetic so that products of
    large margins cannot overflow.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        InvalidInputError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError, OverflowError) as e:
        raise InvalidInputError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        # Python ints beyond the int64 range land here; they are still counts
        if result.size and all(
            isinstance(v, numbers.Integral) and not isinstance(v, bool)
            for v in result.flat
        ):
            return result.astype(np.float64)
        raise InvalidInputError(
            f"{name}: converted to object dtype, indicating ragged or non-numeric data"
        )

    # bool is not np.number, so True/False tables are rejected here too
    if not np.issubdtype(result.dtype, np.number):
        raise InvalidInputError(
            f"{name}: non-numeric dtype {result.dtype}, expected counts"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise InvalidInputError(f"{name}: complex dtype, expected counts")

    return result.astype(np.float64)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is a two-way table.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: number of rows and columns must be greater than 1 "
            f"(expected 2D table, got {array.ndim}D with shape {array.shape})",
            shape=array.shape,
        )


def check_shape(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify the table has a usable, nonempty shape.

    Raises:
        InvalidInputError: If any axis has zero length
    """
    if array.size == 0 or not all(math.isfinite(d) for d in array.shape):
        raise InvalidInputError(
            f"{name}: invalid number of rows or columns, got shape {array.shape}"
        )


def check_nonnegative_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every entry is finite and >= 0.

    Raises:
        InvalidInputError: If any entry is NaN, Inf or negative
    """
    finite = np.isfinite(array)
    if not np.all(finite) or np.any(array[finite] < 0):
        n_nonfinite = int(np.sum(~finite))
        n_negative = int(np.sum(array[finite] < 0))
        raise InvalidInputError(
            f"{name}: all entries must be nonnegative and finite "
            f"({n_negative} negative, {n_nonfinite} non-finite)"
        )


def check_integral(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every entry is a whole number.

    Raises:
        InvalidInputError: If any entry has a fractional part
    """
    if np.any(array != np.floor(array)):
        raise InvalidInputError(
            f"{name}: entries must be integer counts, continuous input is not supported"
        )


def check_positive_total(array: NDArray[np.floating[Any]], name: str) -> float:
    """
    Verify the grand total is positive.

    Returns:
        The grand total n

    Raises:
        InvalidInputError: If all entries are zero
    """
    total = float(array.sum())
    if total <= 0:
        raise InvalidInputError(f"{name}: at least one entry must be positive")
    return total


def check_min_shape(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify the table has at least two rows and two columns.

    Raises:
        DimensionError: If either margin has a single category
    """
    nrows, ncols = array.shape
    if nrows < 2 or ncols < 2:
        raise DimensionError(
            f"{name}: number of rows and columns must be greater than 1, "
            f"got {nrows}x{ncols}",
            shape=array.shape,
        )


def check_consistent_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Validate a real, finite scalar parameter.

    Returns:
        value as float

    Raises:
        InvalidInputError: If value is not a real finite number
    """
    if isinstance(value, (bool, np.bool_)):
        raise InvalidInputError(f"{name}: expected a real number, got {value!r}")
    try:
        result = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            f"{name}: expected a real number, got {value!r}"
        ) from e
    if not math.isfinite(result):
        raise InvalidInputError(f"{name}: must be finite, got {result}")
    return result


def validate_table(table: ArrayLike, name: str = "table") -> NDArray[np.floating[Any]]:
    """
    Run the full contingency-table validation chain.

    Returns:
        A float64 copy of the table (check_array always copies via astype)
    """
    arr = check_array(table, name)
    check_2d(arr, name)
    check_shape(arr, name)
    check_nonnegative_finite(arr, name)
    check_integral(arr, name)
    check_positive_total(arr, name)
    check_min_shape(arr, name)
    return arr
