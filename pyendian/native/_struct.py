# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

from __future__ import annotations
import math
import struct

from ._codec import NativeCodec
from ._rational import round_rational, BINARY32, BINARY64


class StructNativeCodec(NativeCodec):
    """
    An alternative native codec built on the standard :mod:`struct` module using the ``=`` prefix
    (native byte order, standard sizes, no alignment). It produces the same bytes as the NumPy codec;
    it is mostly useful where NumPy arrays are not wanted in the call path.
    """

    def encode_int32(self, value: int) -> bytes:
        return struct.pack("=I", int(value) & 0xFFFF_FFFF)

    def decode_int32(self, data: bytes) -> int:
        (out,) = struct.unpack("=i", data)
        assert isinstance(out, int)
        return out

    def encode_int64(self, value: int) -> bytes:
        return struct.pack("=Q", int(value) & 0xFFFF_FFFF_FFFF_FFFF)

    def decode_int64(self, data: bytes) -> int:
        (out,) = struct.unpack("=q", data)
        assert isinstance(out, int)
        return out

    def encode_float(self, value: float) -> bytes:
        value = float(value)
        if math.isfinite(value) and value != 0.0:  # Zero is kept as is to preserve its sign.
            value = round_rational(*value.as_integer_ratio(), BINARY32)
        return struct.pack("=f", value)  # Exactly representable by now, or not finite.

    def encode_float_from_rational(self, numerator: int, denominator: int) -> bytes:
        return struct.pack("=f", round_rational(numerator, denominator, BINARY32))

    def decode_float(self, data: bytes) -> float:
        (out,) = struct.unpack("=f", data)
        assert isinstance(out, float)
        return out

    def encode_double(self, value: float) -> bytes:
        return struct.pack("=d", value)

    def encode_double_from_rational(self, numerator: int, denominator: int) -> bytes:
        return struct.pack("=d", round_rational(numerator, denominator, BINARY64))

    def decode_double(self, data: bytes) -> float:
        (out,) = struct.unpack("=d", data)
        assert isinstance(out, float)
        return out


def _unittest_struct_codec_matches_numpy() -> None:
    from ._numpy import NumpyNativeCodec

    a, b = StructNativeCodec(), NumpyNativeCodec()
    for x in (0, 1, -1, 11, 2**31 - 1, -(2**31), 2**40):
        assert a.encode_int32(x) == b.encode_int32(x)
        assert a.encode_int64(x) == b.encode_int64(x)
    for f in (0.0, -0.0, 1.5, 1e-40, 3.4e38, 1e39, math.inf):
        assert a.encode_float(f) == b.encode_float(f)
        assert a.encode_double(f) == b.encode_double(f)
    assert a.encode_float_from_rational(2, 3) == b.encode_float_from_rational(2, 3)
    assert a.encode_double_from_rational(-2, 3) == b.encode_double_from_rational(-2, 3)
