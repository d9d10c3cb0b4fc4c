# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

from __future__ import annotations
import numbers
import typing
import logging
import dataclasses

from ._error import SizeMismatchError
from ._endianness import Endianness, detect
from ._reorder import BytesLike, as_byte_array, to_output_order, from_input_order
from .native import NativeCodec, NumpyNativeCodec


EndiannessLike = typing.Union[Endianness, str]

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ScalarKind:
    """
    A fixed-width numeric kind. The width is the exact size of every buffer of this kind.
    """

    name: str
    width: int


INT32 = ScalarKind("int32", 4)
INT64 = ScalarKind("int64", 8)
FLOAT32 = ScalarKind("float", 4)
FLOAT64 = ScalarKind("double", 8)


class ScalarCodec:
    """
    Packs and unpacks fixed-width scalars in the byte order chosen by the caller.
    The bit-level work is delegated to the native codec; this class only enforces the buffer sizes
    and brings the bytes into the requested order.

    The byte order argument of every method is optional; if not given, the default of the instance is used,
    which is big-endian (network byte order) unless configured otherwise.
    Strings such as ``"little"`` or ``"<"`` are accepted as well, see :meth:`Endianness.parse`.

    >>> sc = ScalarCodec()
    >>> sc.pack_int32(11).hex()
    '0000000b'
    >>> sc.pack_int32(11, Endianness.LITTLE).hex()
    '0b000000'
    >>> sc.unpack_int32(bytes.fromhex('0b000000'), "little")
    11
    >>> ScalarCodec(default_endianness="little").pack_int64(-2).hex()
    'feffffffffffffff'
    >>> sc.unpack_double(bytes(7))
    Traceback (most recent call last):
    ...
    pyendian._error.SizeMismatchError: double requires a buffer of exactly 8 bytes, got 7

    Signed integers outside of the range of the kind are not rejected; they are truncated by the native codec,
    so it is up to the caller to ensure that the value fits.
    The rational methods round to the nearest representable value with ties to even;
    a zero denominator raises :class:`ZeroDivisionError`.
    """

    def __init__(
        self,
        codec: typing.Optional[NativeCodec] = None,
        default_endianness: EndiannessLike = Endianness.BIG,
    ) -> None:
        self._codec = codec if codec is not None else NumpyNativeCodec()
        self._default_endianness = Endianness.parse(default_endianness)
        self._native: typing.Optional[Endianness] = None

    @property
    def codec(self) -> NativeCodec:
        return self._codec

    @property
    def default_endianness(self) -> Endianness:
        return self._default_endianness

    @property
    def native_endianness(self) -> Endianness:
        """
        The native byte order of the codec, detected on first access.
        Concurrent first accesses may run the detection more than once, which is harmless.
        """
        if self._native is None:
            self._native = detect(self._codec)
            _logger.debug("%r: native byte order detected: %s", self, self._native.value)
        return self._native

    # Signed integers.
    def pack_int32(self, value: int, endianness: typing.Optional[EndiannessLike] = None) -> bytes:
        return self._pack(INT32, self._codec.encode_int32(value), endianness)

    def unpack_int32(self, buf: BytesLike, endianness: typing.Optional[EndiannessLike] = None) -> int:
        return self._codec.decode_int32(self._unpack(INT32, buf, endianness))

    def pack_int64(self, value: int, endianness: typing.Optional[EndiannessLike] = None) -> bytes:
        return self._pack(INT64, self._codec.encode_int64(value), endianness)

    def unpack_int64(self, buf: BytesLike, endianness: typing.Optional[EndiannessLike] = None) -> int:
        return self._codec.decode_int64(self._unpack(INT64, buf, endianness))

    # Single precision.
    def pack_float(self, value: float, endianness: typing.Optional[EndiannessLike] = None) -> bytes:
        return self._pack(FLOAT32, self._codec.encode_float(value), endianness)

    def pack_float_rat(
        self, numerator: int, denominator: int, endianness: typing.Optional[EndiannessLike] = None
    ) -> bytes:
        return self._pack(FLOAT32, self._codec.encode_float_from_rational(numerator, denominator), endianness)

    def pack_float_rational(
        self, value: numbers.Rational, endianness: typing.Optional[EndiannessLike] = None
    ) -> bytes:
        """Like :meth:`pack_float_rat` but accepts a :class:`fractions.Fraction` or any other rational."""
        numerator, denominator = _decompose(value)
        return self.pack_float_rat(numerator, denominator, endianness)

    def unpack_float(self, buf: BytesLike, endianness: typing.Optional[EndiannessLike] = None) -> float:
        return self._codec.decode_float(self._unpack(FLOAT32, buf, endianness))

    # Double precision.
    def pack_double(self, value: float, endianness: typing.Optional[EndiannessLike] = None) -> bytes:
        return self._pack(FLOAT64, self._codec.encode_double(value), endianness)

    def pack_double_rat(
        self, numerator: int, denominator: int, endianness: typing.Optional[EndiannessLike] = None
    ) -> bytes:
        return self._pack(FLOAT64, self._codec.encode_double_from_rational(numerator, denominator), endianness)

    def pack_double_rational(
        self, value: numbers.Rational, endianness: typing.Optional[EndiannessLike] = None
    ) -> bytes:
        """Like :meth:`pack_double_rat` but accepts a :class:`fractions.Fraction` or any other rational."""
        numerator, denominator = _decompose(value)
        return self.pack_double_rat(numerator, denominator, endianness)

    def unpack_double(self, buf: BytesLike, endianness: typing.Optional[EndiannessLike] = None) -> float:
        return self._codec.decode_double(self._unpack(FLOAT64, buf, endianness))

    #
    # Private methods.
    #
    def _pack(self, kind: ScalarKind, native_bytes: bytes, endianness: typing.Optional[EndiannessLike]) -> bytes:
        out = to_output_order(native_bytes, kind.width, self._resolve(endianness), self.native_endianness)
        assert len(out) == kind.width
        return out

    def _unpack(self, kind: ScalarKind, buf: BytesLike, endianness: typing.Optional[EndiannessLike]) -> bytes:
        arr = as_byte_array(buf)  # The length of a memoryview is counted in items, not bytes.
        if arr.size != kind.width:
            raise SizeMismatchError(kind.name, kind.width, arr.size)
        return from_input_order(arr, self._resolve(endianness), self.native_endianness)

    def _resolve(self, endianness: typing.Optional[EndiannessLike]) -> Endianness:
        return self._default_endianness if endianness is None else Endianness.parse(endianness)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(codec={self._codec!r}, default_endianness={self._default_endianness.value!r})"


def _decompose(value: numbers.Rational) -> typing.Tuple[int, int]:
    if not isinstance(value, numbers.Rational):
        raise TypeError(f"Expected a rational number, got {type(value).__name__}")
    return int(value.numerator), int(value.denominator)


_default = ScalarCodec()
"""
The module-level functions delegate to this instance: default native codec, big-endian unless specified.
"""

pack_int32 = _default.pack_int32
unpack_int32 = _default.unpack_int32
pack_int64 = _default.pack_int64
unpack_int64 = _default.unpack_int64
pack_float = _default.pack_float
pack_float_rat = _default.pack_float_rat
pack_float_rational = _default.pack_float_rational
unpack_float = _default.unpack_float
pack_double = _default.pack_double
pack_double_rat = _default.pack_double_rat
pack_double_rational = _default.pack_double_rational
unpack_double = _default.unpack_double


def _unittest_scalar_kinds() -> None:
    from pytest import raises

    sc = ScalarCodec()
    assert len(sc.pack_int32(0)) == 4
    assert len(sc.pack_int64(0)) == 8
    assert len(sc.pack_float(0.0)) == 4
    assert len(sc.pack_double(0.0)) == 8
    for n in (3, 5):
        with raises(SizeMismatchError) as ex_info:
            sc.unpack_int32(bytes(n))
        assert (ex_info.value.expected, ex_info.value.actual) == (4, n)
    with raises(SizeMismatchError):
        sc.unpack_float(bytes(8))
    with raises(SizeMismatchError):
        sc.unpack_int64(bytes(4))
    with raises(TypeError):
        sc.pack_float_rational(0.5)  # type: ignore
    assert sc.default_endianness is Endianness.BIG
    assert "NumpyNativeCodec" in repr(sc)
