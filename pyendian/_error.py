# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.


class EndianError(ValueError):
    """
    This is the root exception class for errors caused by the data supplied by the caller,
    such as a buffer of the wrong size passed to an unpacking function.

    Environment inconsistencies, like a broken native codec, are reported using :class:`EndiannessDetectionError`
    which is intentionally not a member of this hierarchy.
    """


class SizeMismatchError(EndianError):
    """
    An unpacking operation was given a buffer whose length does not match the fixed width of the numeric kind.
    Nothing is decoded in this case.
    """

    def __init__(self, kind: str, expected: int, actual: int) -> None:
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(f"{kind} requires a buffer of exactly {expected} bytes, got {actual}")


class EndiannessDetectionError(RuntimeError):
    """
    The native codec encoded the integer 1 into a byte pattern that is neither little- nor big-endian.
    This means that the codec itself is broken; the condition is not recoverable.
    """
