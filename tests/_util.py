# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

import typing
import random

import pyendian
import pyendian.native


class ByteSwappingCodec(pyendian.native.NativeCodec):
    """
    Wraps a real codec and reverses every buffer it produces or consumes.
    This emulates a machine whose native byte order is the opposite of the host's,
    which allows testing the foreign-order paths on any platform.
    """

    def __init__(self, inner: pyendian.native.NativeCodec) -> None:
        self._inner = inner

    def encode_int32(self, value: int) -> bytes:
        return self._inner.encode_int32(value)[::-1]

    def decode_int32(self, data: bytes) -> int:
        return self._inner.decode_int32(data[::-1])

    def encode_int64(self, value: int) -> bytes:
        return self._inner.encode_int64(value)[::-1]

    def decode_int64(self, data: bytes) -> int:
        return self._inner.decode_int64(data[::-1])

    def encode_float(self, value: float) -> bytes:
        return self._inner.encode_float(value)[::-1]

    def encode_float_from_rational(self, numerator: int, denominator: int) -> bytes:
        return self._inner.encode_float_from_rational(numerator, denominator)[::-1]

    def decode_float(self, data: bytes) -> float:
        return self._inner.decode_float(data[::-1])

    def encode_double(self, value: float) -> bytes:
        return self._inner.encode_double(value)[::-1]

    def encode_double_from_rational(self, numerator: int, denominator: int) -> bytes:
        return self._inner.encode_double_from_rational(numerator, denominator)[::-1]

    def decode_double(self, data: bytes) -> float:
        return self._inner.decode_double(data[::-1])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


def make_signed_samples(bit_length: int, count: int = 1000) -> typing.List[int]:
    """
    Range boundaries and their neighbors followed by uniformly distributed random values.
    """
    lo, hi = -(2 ** (bit_length - 1)), 2 ** (bit_length - 1) - 1
    out = [lo, lo + 1, -256, -255, -1, 0, 1, 11, 255, 256, hi - 1, hi]
    out += [random.randint(lo, hi) for _ in range(count)]
    return out
