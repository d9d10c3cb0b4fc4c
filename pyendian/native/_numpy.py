# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

from __future__ import annotations
import sys
import math
import logging

import numpy

from ._codec import NativeCodec
from ._rational import round_rational, BINARY32, BINARY64


Byte = numpy.uint8
"""
We must use uint8 instead of ubyte because uint8 is platform-invariant whereas (u)byte is platform-dependent.
"""

_logger = logging.getLogger(__name__)


class NumpyNativeCodec(NativeCodec):
    """
    The default native codec. NumPy dtypes without an explicit byte order use the byte order of the host,
    which makes ``tobytes()`` and ``frombuffer()`` the native encoder and decoder.

    Signed integers are masked to the width of the kind and stored through the unsigned dtype of the same size,
    which yields the two's complement representation for negative values and wraps around out-of-range values.

    >>> codec = NumpyNativeCodec()
    >>> codec.decode_int32(codec.encode_int32(-11))
    -11
    >>> codec.decode_int32(codec.encode_int32(2**31))  # Out of range, wraps around.
    -2147483648
    >>> codec.decode_float(codec.encode_float_from_rational(1, 3))
    0.3333333432674408
    """

    def __init__(self) -> None:
        _logger.debug("%r: host byte order is %s", self, sys.byteorder)

    def encode_int32(self, value: int) -> bytes:
        return numpy.array(int(value) & 0xFFFF_FFFF, dtype=numpy.uint32).tobytes()

    def decode_int32(self, data: bytes) -> int:
        return int(numpy.frombuffer(data, dtype=numpy.int32, count=1)[0])

    def encode_int64(self, value: int) -> bytes:
        return numpy.array(int(value) & 0xFFFF_FFFF_FFFF_FFFF, dtype=numpy.uint64).tobytes()

    def decode_int64(self, data: bytes) -> int:
        return int(numpy.frombuffer(data, dtype=numpy.int64, count=1)[0])

    def encode_float(self, value: float) -> bytes:
        value = float(value)
        if math.isfinite(value) and value != 0.0:  # Zero is kept as is to preserve its sign.
            # Rounding is done here rather than by NumPy so that overflow yields infinity without a RuntimeWarning.
            value = round_rational(*value.as_integer_ratio(), BINARY32)
        return numpy.float32(value).tobytes()

    def encode_float_from_rational(self, numerator: int, denominator: int) -> bytes:
        return numpy.float32(round_rational(numerator, denominator, BINARY32)).tobytes()

    def decode_float(self, data: bytes) -> float:
        return float(numpy.frombuffer(data, dtype=numpy.float32, count=1)[0])

    def encode_double(self, value: float) -> bytes:
        return numpy.float64(value).tobytes()

    def encode_double_from_rational(self, numerator: int, denominator: int) -> bytes:
        return numpy.float64(round_rational(numerator, denominator, BINARY64)).tobytes()

    def decode_double(self, data: bytes) -> float:
        return float(numpy.frombuffer(data, dtype=numpy.float64, count=1)[0])


def _unittest_numpy_codec_native_layout() -> None:
    codec = NumpyNativeCodec()
    one = codec.encode_int32(1)
    assert len(one) == 4
    assert one == (1).to_bytes(4, sys.byteorder)
    assert codec.encode_int64(-2) == (-2).to_bytes(8, sys.byteorder, signed=True)
    assert codec.decode_int64(codec.encode_int64(-(2**63))) == -(2**63)
    assert codec.decode_int64(codec.encode_int64(2**64 + 5)) == 5
    assert len(codec.encode_float(1.0)) == 4
    assert len(codec.encode_double(1.0)) == 8


def _unittest_numpy_codec_float() -> None:
    codec = NumpyNativeCodec()
    assert codec.decode_float(codec.encode_float(0.1)) == float(numpy.float32(0.1))
    assert codec.decode_float(codec.encode_float(1e300)) == math.inf
    assert codec.decode_float(codec.encode_float(-1e300)) == -math.inf
    assert codec.decode_float(codec.encode_float(-math.inf)) == -math.inf
    assert math.isnan(codec.decode_float(codec.encode_float(math.nan)))
    assert codec.decode_double(codec.encode_double(0.1)) == 0.1
    assert codec.decode_double(codec.encode_double_from_rational(1, 10)) == 0.1
