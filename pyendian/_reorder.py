# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

r"""
Conversion between the native byte order of the codec and the byte order requested by the caller.
The conversion is either the identity or a full reversal of the buffer; partial (word-wise) swapping
for mixed-endian layouts is not supported.

>>> native = Endianness.LITTLE
>>> to_output_order(b"\x0b\x00\x00\x00", 4, Endianness.BIG, native).hex()
'0000000b'
>>> from_input_order(b"\x00\x00\x00\x0b", Endianness.BIG, native).hex()
'0b000000'
>>> to_output_order(b"\x0b\x00\x00\x00", 4, Endianness.NATIVE, native).hex()
'0b000000'
"""

from __future__ import annotations
import typing

import numpy
from numpy.typing import NDArray

from ._error import SizeMismatchError
from ._endianness import Endianness, native_endianness
from .native import Byte


BytesLike = typing.Union[bytes, bytearray, memoryview, NDArray[Byte]]


def to_output_order(
    native_bytes: BytesLike,
    size: int,
    endianness: Endianness,
    native: typing.Optional[Endianness] = None,
) -> bytes:
    """
    Takes the first ``size`` bytes of a native-order sequence and arranges them in the requested byte order.
    The bytes are returned unchanged if the requested order is :attr:`Endianness.NATIVE`
    or if it matches the native order; otherwise they are reversed.

    :param native: The native byte order of the codec that produced the bytes.
        Defaults to :func:`native_endianness`.

    :raises: :class:`SizeMismatchError` if fewer than ``size`` bytes are supplied.
    """
    arr = as_byte_array(native_bytes)
    if len(arr) < size:
        raise SizeMismatchError(f"native {size}-byte value", size, len(arr))
    arr = arr[:size]
    if _must_reverse(endianness, native):
        arr = arr[::-1]
    return arr.tobytes()


def from_input_order(
    buf: BytesLike,
    endianness: Endianness,
    native: typing.Optional[Endianness] = None,
) -> bytes:
    """
    The inverse of :func:`to_output_order`: given a buffer in the specified byte order,
    returns the same value laid out in the native order, suitable for the native codec.
    Byte ``k`` of the input ends up at position ``len(buf) - 1 - k`` unless the orders match,
    in which case the bytes are copied positionally.
    """
    arr = as_byte_array(buf)
    if _must_reverse(endianness, native):
        arr = arr[::-1]
    return arr.tobytes()


def _must_reverse(endianness: Endianness, native: typing.Optional[Endianness]) -> bool:
    native_order = native if native is not None else native_endianness()
    return endianness.resolve(native_order) is not native_order


def as_byte_array(data: BytesLike) -> NDArray[Byte]:
    """
    A flat uint8 view of any contiguous buffer; its size is the number of bytes regardless of the item format.
    """
    if isinstance(data, numpy.ndarray):
        if data.dtype != Byte or data.ndim != 1:
            raise ValueError(f"Expected a flat array of {Byte.__name__}, got {data.dtype} of shape {data.shape}")
        return data
    return numpy.frombuffer(data, dtype=Byte)


def _unittest_reorder_identity_and_reversal() -> None:
    data = bytes(range(1, 9))
    for native in (Endianness.LITTLE, Endianness.BIG):
        foreign = Endianness.BIG if native is Endianness.LITTLE else Endianness.LITTLE
        assert to_output_order(data, 8, native, native) == data
        assert to_output_order(data, 8, Endianness.NATIVE, native) == data
        assert to_output_order(data, 8, foreign, native) == data[::-1]
        assert from_input_order(data, native, native) == data
        assert from_input_order(data, Endianness.NATIVE, native) == data
        assert from_input_order(data, foreign, native) == data[::-1]
        assert from_input_order(to_output_order(data, 8, foreign, native), foreign, native) == data


def _unittest_reorder_truncates_to_size() -> None:
    from pytest import raises

    data = bytearray(b"\x01\x02\x03\x04\xAA\xBB")
    assert to_output_order(data, 4, Endianness.LITTLE, Endianness.LITTLE) == b"\x01\x02\x03\x04"
    assert to_output_order(memoryview(data), 4, Endianness.BIG, Endianness.LITTLE) == b"\x04\x03\x02\x01"
    with raises(SizeMismatchError):
        to_output_order(data, 8, Endianness.BIG)
    with raises(ValueError):
        from_input_order(numpy.zeros(4, dtype=numpy.uint16), Endianness.BIG)
