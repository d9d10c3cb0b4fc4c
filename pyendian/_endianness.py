# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

from __future__ import annotations
import enum
import typing
import logging
import functools

from ._error import EndiannessDetectionError
from .native import NativeCodec, NumpyNativeCodec


_logger = logging.getLogger(__name__)


class Endianness(enum.Enum):
    """
    Byte order of a fixed-width buffer.
    The values match the spelling used by :data:`sys.byteorder` and :meth:`int.to_bytes`.

    :attr:`NATIVE` is not a byte order of its own; it means "leave the bytes as the native codec produced them".
    It is resolved into one of the two concrete orders only when a decision about reordering has to be made.
    """

    NATIVE = "native"
    LITTLE = "little"
    BIG = "big"

    @staticmethod
    def parse(value: typing.Union[Endianness, str]) -> Endianness:
        """
        Accepts a member, a member name or value in any case, or a byte order character
        as used by :mod:`struct` and NumPy dtypes.

        >>> Endianness.parse("BIG")
        <Endianness.BIG: 'big'>
        >>> Endianness.parse("<")
        <Endianness.LITTLE: 'little'>
        >>> Endianness.parse("!")  # Network byte order.
        <Endianness.BIG: 'big'>
        >>> Endianness.parse("middle")
        Traceback (most recent call last):
        ...
        ValueError: Unknown endianness: 'middle'
        """
        if isinstance(value, Endianness):
            return value
        if isinstance(value, str):
            try:
                return _BYTE_ORDER_CHARACTERS[value]
            except KeyError:
                pass
            try:
                return Endianness(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown endianness: {value!r}")

    def resolve(self, native: Endianness) -> Endianness:
        """
        Returns the concrete byte order: :attr:`NATIVE` is replaced with the supplied native order,
        other members are returned as-is.

        >>> Endianness.NATIVE.resolve(Endianness.BIG)
        <Endianness.BIG: 'big'>
        >>> Endianness.LITTLE.resolve(Endianness.BIG)
        <Endianness.LITTLE: 'little'>
        """
        if native is Endianness.NATIVE:
            raise ValueError("The native byte order must be concrete")
        return native if self is Endianness.NATIVE else self


_BYTE_ORDER_CHARACTERS = {
    "<": Endianness.LITTLE,
    ">": Endianness.BIG,
    "!": Endianness.BIG,
    "=": Endianness.NATIVE,
    "@": Endianness.NATIVE,
}


def detect(codec: NativeCodec) -> Endianness:
    """
    Determines the native byte order of the codec by encoding the integer 1 and looking at the first byte.
    A little-endian codec places the least significant byte first, a big-endian codec places it last.
    The result is never :attr:`Endianness.NATIVE`.

    This function has no side effects, so it is safe to invoke it concurrently.

    :raises: :class:`EndiannessDetectionError` if the byte pattern makes no sense, meaning that the codec is broken.
    """
    pattern = bytes(codec.encode_int32(1))
    if len(pattern) == 4:
        if pattern == b"\x01\x00\x00\x00":
            return Endianness.LITTLE
        if pattern == b"\x00\x00\x00\x01":
            return Endianness.BIG
    raise EndiannessDetectionError(f"{codec!r} encoded int32 1 as {pattern.hex()!r}; this pattern is invalid")


@functools.lru_cache(maxsize=None)
def native_endianness() -> Endianness:
    """
    The byte order of the running machine as reported by the default native codec.
    It is computed once per process because it cannot change at runtime.
    """
    out = detect(NumpyNativeCodec())
    _logger.debug("Native byte order: %s", out.value)
    return out


def _unittest_detect() -> None:
    import sys
    from pytest import raises

    assert native_endianness() is detect(NumpyNativeCodec())
    assert native_endianness() is native_endianness()
    assert native_endianness().value == sys.byteorder

    class Broken(NumpyNativeCodec):
        def encode_int32(self, value: int) -> bytes:
            return b"\x02\x00\x00\x00"

    with raises(EndiannessDetectionError):
        detect(Broken())

    class Short(NumpyNativeCodec):
        def encode_int32(self, value: int) -> bytes:
            return b"\x01"

    with raises(EndiannessDetectionError):
        detect(Short())
