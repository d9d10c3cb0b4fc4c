# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

from __future__ import annotations
import abc


class NativeCodec(abc.ABC):
    """
    The native codec converts scalar values to and from fixed-width byte sequences laid out in the
    native byte order of the codec, which is normally (but not necessarily) the byte order of the host.
    It knows nothing about the byte order requested by the caller; that is handled by the reorderer on top of it.

    Integer encoders accept any int and truncate it to the width of the kind (two's complement wrap-around).
    Rational encoders round to the nearest representable value, ties to even,
    and raise :class:`ZeroDivisionError` if the denominator is zero.
    Decoders may assume that the length of the input is correct; the caller validates it.
    """

    @abc.abstractmethod
    def encode_int32(self, value: int) -> bytes:
        raise NotImplementedError

    @abc.abstractmethod
    def decode_int32(self, data: bytes) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def encode_int64(self, value: int) -> bytes:
        raise NotImplementedError

    @abc.abstractmethod
    def decode_int64(self, data: bytes) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def encode_float(self, value: float) -> bytes:
        """Single precision; values outside of the representable range become infinities."""
        raise NotImplementedError

    @abc.abstractmethod
    def encode_float_from_rational(self, numerator: int, denominator: int) -> bytes:
        raise NotImplementedError

    @abc.abstractmethod
    def decode_float(self, data: bytes) -> float:
        raise NotImplementedError

    @abc.abstractmethod
    def encode_double(self, value: float) -> bytes:
        raise NotImplementedError

    @abc.abstractmethod
    def encode_double_from_rational(self, numerator: int, denominator: int) -> bytes:
        raise NotImplementedError

    @abc.abstractmethod
    def decode_double(self, data: bytes) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
