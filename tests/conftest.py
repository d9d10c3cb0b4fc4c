# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

import logging

import pytest

import pyendian
from ._util import ByteSwappingCodec


_logger = logging.getLogger(__name__)


@pytest.fixture(params=["numpy", "struct", "byte-swapping"])  # type: ignore
def scalar_codec(request: pytest.FixtureRequest) -> pyendian.ScalarCodec:
    """
    A scalar codec over each of the native codecs, including one that pretends to be foreign-endian.
    """
    native = {
        "numpy": pyendian.NumpyNativeCodec,
        "struct": pyendian.StructNativeCodec,
        "byte-swapping": lambda: ByteSwappingCodec(pyendian.NumpyNativeCodec()),
    }[request.param]()
    out = pyendian.ScalarCodec(native)
    _logger.info("Testing %r; its native byte order is %s", out, out.native_endianness.value)
    return out
