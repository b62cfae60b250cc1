"""
Weight-type helpers.

A graph's weight type is a numpy integer or floating dtype. Weights are cast
through that dtype on insertion and kept as plain Python scalars, so
arithmetic in the algorithms never overflows or wraps.
"""

from typing import Union
import math

import numpy as np

from errors import WeightError

Weight = Union[int, float]
DTypeLike = Union[str, type, np.dtype]


def weight_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Normalise ``dtype`` and reject anything that is not an integer or float type.
    """
    resolved = np.dtype(dtype)
    if not (np.issubdtype(resolved, np.integer) or np.issubdtype(resolved, np.floating)):
        raise ValueError(f"weight dtype must be an integer or floating type, got {resolved}")
    return resolved


def cast_weight(dtype: np.dtype, value: Weight) -> Weight:
    """
    Cast ``value`` through ``dtype`` (integers truncate toward zero).

    Raises WeightError for NaN, and for values an integer dtype cannot hold
    (infinities included).
    """
    if not isinstance(value, (int, np.integer)):
        try:
            value = float(value)
        except (TypeError, ValueError) as e:
            raise WeightError(value, dtype, "not a number") from e
        if math.isnan(value):
            raise WeightError(value, dtype, "NaN is not a valid weight")
    if np.issubdtype(dtype, np.integer):
        if isinstance(value, float) and math.isinf(value):
            raise WeightError(value, dtype, "integer weights cannot be infinite")
        truncated = int(value)
        limits = np.iinfo(dtype)
        if not limits.min <= truncated <= limits.max:
            raise WeightError(value, dtype, f"outside [{limits.min}, {limits.max}]")
        return truncated
    try:
        return dtype.type(value).item()
    except (OverflowError, ValueError) as e:
        raise WeightError(value, dtype, str(e)) from e


def add_weights(dtype: np.dtype, a: Weight, b: Weight) -> Weight:
    """
    ``a + b`` rounded the way ``dtype`` arithmetic rounds it.

    Floating sums are computed in the dtype itself, so a float32 graph gets
    float32 distances. Integer sums stay exact Python ints.
    """
    if np.issubdtype(dtype, np.floating):
        return (dtype.type(a) + dtype.type(b)).item()
    return a + b


def infinity_value(dtype: DTypeLike) -> Weight:
    """
    Sentinel for "no finite distance known".

    The dtype's infinity when it has one, otherwise its maximum value.
    """
    resolved = weight_dtype(dtype)
    if np.issubdtype(resolved, np.floating):
        return float("inf")
    return int(np.iinfo(resolved).max)


def zero_value(dtype: DTypeLike) -> Weight:
    return weight_dtype(dtype).type(0).item()


def format_weight(value: Weight) -> str:
    # %g mirrors default stream output for doubles: 2.0 -> "2", 0.1 -> "0.1"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)
