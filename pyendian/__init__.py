# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

r"""
PyEndian converts signed 32/64-bit integers, single and double precision floats, and exact rational numbers
to and from fixed-width byte sequences in the byte order chosen by the caller.

>>> import pyendian
>>> pyendian.pack_int32(11).hex()  # Big-endian (network byte order) is the default.
'0000000b'
>>> pyendian.pack_int32(11, pyendian.Endianness.LITTLE).hex()
'0b000000'
>>> pyendian.unpack_int32(b"\x0b\x00\x00\x00", pyendian.Endianness.LITTLE)
11
>>> pyendian.unpack_float(pyendian.pack_float_rat(1, 3))
0.3333333432674408

The bit-level encoding is delegated to a native codec (see :mod:`pyendian.native`);
this package takes care of the byte order and the size of the buffers.


Log level override
++++++++++++++++++

The environment variable ``PYENDIAN_LOGLEVEL`` can be set to one of the following values to override
the library log level:

- ``CRITICAL``
- ``FATAL``
- ``ERROR``
- ``WARNING``
- ``INFO``
- ``DEBUG``
"""

import os as _os


from ._version import __version__ as __version__

__version_info__ = tuple(map(int, __version__.split(".")[:3]))
__license__ = "MIT"


_log_level_from_env = _os.environ.get("PYENDIAN_LOGLEVEL")
if _log_level_from_env is not None:
    import logging as _logging

    _logging.basicConfig(
        format="%(asctime)s %(process)5d %(levelname)-8s %(name)s: %(message)s", level=_log_level_from_env
    )
    _logging.getLogger(__name__).setLevel(_log_level_from_env)
    _logging.getLogger(__name__).info("Log config from env var; level: %r", _log_level_from_env)


# The submodules are imported in the order of their interdependency.
from ._error import EndianError as EndianError
from ._error import SizeMismatchError as SizeMismatchError
from ._error import EndiannessDetectionError as EndiannessDetectionError

import pyendian.native as native  # pylint: disable=R0402,C0413  # noqa
from .native import NativeCodec as NativeCodec
from .native import NumpyNativeCodec as NumpyNativeCodec
from .native import StructNativeCodec as StructNativeCodec

from ._endianness import Endianness as Endianness
from ._endianness import detect as detect
from ._endianness import native_endianness as native_endianness

from ._reorder import to_output_order as to_output_order
from ._reorder import from_input_order as from_input_order

from ._scalar import ScalarKind as ScalarKind
from ._scalar import ScalarCodec as ScalarCodec
from ._scalar import INT32 as INT32
from ._scalar import INT64 as INT64
from ._scalar import FLOAT32 as FLOAT32
from ._scalar import FLOAT64 as FLOAT64
from ._scalar import pack_int32 as pack_int32
from ._scalar import unpack_int32 as unpack_int32
from ._scalar import pack_int64 as pack_int64
from ._scalar import unpack_int64 as unpack_int64
from ._scalar import pack_float as pack_float
from ._scalar import pack_float_rat as pack_float_rat
from ._scalar import pack_float_rational as pack_float_rational
from ._scalar import unpack_float as unpack_float
from ._scalar import pack_double as pack_double
from ._scalar import pack_double_rat as pack_double_rat
from ._scalar import pack_double_rational as pack_double_rational
from ._scalar import unpack_double as unpack_double
