# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

import sys
import threading

import pytest

import pyendian
from pyendian import Endianness
from ._util import ByteSwappingCodec


def _unittest_detection_stable() -> None:
    first = pyendian.native_endianness()
    assert first in (Endianness.LITTLE, Endianness.BIG)
    assert first.value == sys.byteorder
    for _ in range(100):
        assert pyendian.native_endianness() is first
        assert pyendian.detect(pyendian.NumpyNativeCodec()) is first
        assert pyendian.detect(pyendian.StructNativeCodec()) is first


def _unittest_detection_concurrent() -> None:
    sc = pyendian.ScalarCodec()
    results = []

    def run() -> None:
        results.append(sc.native_endianness)

    threads = [threading.Thread(target=run) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [pyendian.native_endianness()] * 8


def _unittest_detection_of_foreign_codec() -> None:
    host = pyendian.native_endianness()
    swapped = pyendian.detect(ByteSwappingCodec(pyendian.NumpyNativeCodec()))
    assert {host, swapped} == {Endianness.LITTLE, Endianness.BIG}


def _unittest_detection_failure() -> None:
    class Garbage(pyendian.NumpyNativeCodec):
        def encode_int32(self, value: int) -> bytes:
            return b"\x00\x01\x00\x00"  # Neither little nor big.

    with pytest.raises(pyendian.EndiannessDetectionError):
        pyendian.detect(Garbage())

    sc = pyendian.ScalarCodec(Garbage())
    with pytest.raises(pyendian.EndiannessDetectionError):
        sc.pack_int64(1)
    # Not a caller error, so it must not be caught as one.
    assert not issubclass(pyendian.EndiannessDetectionError, pyendian.EndianError)


def _unittest_parse() -> None:
    assert Endianness.parse(Endianness.BIG) is Endianness.BIG
    assert Endianness.parse("little") is Endianness.LITTLE
    assert Endianness.parse(" Native ") is Endianness.NATIVE
    assert Endianness.parse("=") is Endianness.NATIVE
    assert Endianness.parse("@") is Endianness.NATIVE
    assert Endianness.parse(sys.byteorder) is pyendian.native_endianness()
    for bad in ("", "middle", "<>", 1, None):
        with pytest.raises(ValueError):
            Endianness.parse(bad)  # type: ignore


def _unittest_resolve() -> None:
    for native in (Endianness.LITTLE, Endianness.BIG):
        assert Endianness.NATIVE.resolve(native) is native
        assert Endianness.BIG.resolve(native) is Endianness.BIG
        assert Endianness.LITTLE.resolve(native) is Endianness.LITTLE
    with pytest.raises(ValueError):
        Endianness.BIG.resolve(Endianness.NATIVE)
