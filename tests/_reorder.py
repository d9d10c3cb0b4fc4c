# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

import random

import numpy
import pytest

import pyendian
from pyendian import Endianness, to_output_order, from_input_order


def _unittest_reorder_defaults_to_host() -> None:
    host = pyendian.native_endianness()
    data = bytes(range(4))
    assert to_output_order(data, 4, host) == data
    assert from_input_order(data, host) == data
    foreign = Endianness.BIG if host is Endianness.LITTLE else Endianness.LITTLE
    assert to_output_order(data, 4, foreign) == data[::-1]
    assert from_input_order(data, foreign) == data[::-1]


def _unittest_reorder_is_involutive() -> None:
    for _ in range(100):
        size = random.choice((4, 8))
        data = bytes(random.getrandbits(8) for _ in range(size))
        for native in (Endianness.LITTLE, Endianness.BIG):
            for e in Endianness:
                out = to_output_order(data, size, e, native)
                assert len(out) == size
                assert from_input_order(out, e, native) == data


def _unittest_reorder_position_mapping() -> None:
    data = bytes([10, 20, 30, 40, 50, 60, 70, 80])
    out = from_input_order(data, Endianness.BIG, Endianness.LITTLE)
    for k, b in enumerate(data):
        assert out[len(data) - 1 - k] == b


def _unittest_reorder_numpy_input() -> None:
    arr = numpy.arange(8, dtype=numpy.uint8)
    assert to_output_order(arr, 8, Endianness.BIG, Endianness.LITTLE) == bytes(range(7, -1, -1))
    assert to_output_order(arr, 4, Endianness.LITTLE, Endianness.LITTLE) == bytes(range(4))
    with pytest.raises(ValueError):
        to_output_order(arr.reshape(2, 4), 4, Endianness.BIG)
    with pytest.raises(pyendian.SizeMismatchError):
        to_output_order(arr, 9, Endianness.BIG)


def _unittest_reorder_requires_concrete_native_order() -> None:
    with pytest.raises(ValueError):
        to_output_order(bytes(4), 4, Endianness.BIG, Endianness.NATIVE)
    with pytest.raises(ValueError):
        from_input_order(bytes(4), Endianness.NATIVE, Endianness.NATIVE)
