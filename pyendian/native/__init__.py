# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

"""
Native numeric codecs: the bit-level encoders and decoders that operate in the byte order of the machine.
The rest of the library treats them as an opaque capability and only deals with reordering the bytes.

:class:`NumpyNativeCodec` is the default. A custom codec can be supplied by implementing :class:`NativeCodec`.
"""

from ._codec import NativeCodec as NativeCodec

from ._numpy import NumpyNativeCodec as NumpyNativeCodec
from ._numpy import Byte as Byte

from ._struct import StructNativeCodec as StructNativeCodec

from ._rational import BinaryFormat as BinaryFormat
from ._rational import BINARY32 as BINARY32
from ._rational import BINARY64 as BINARY64
from ._rational import round_rational as round_rational
