# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Exceptions raised throughout chromaform.

Every validation error derives from ``ValueError`` so that callers catching
the builtin keep working.
"""


class ColorError(ValueError):
    """Base exception for all chromaform validation errors."""


class UnknownFormatError(ColorError):
    """Raised when an input's shape matches none of the supported formats."""


class InvalidColorError(ColorError):
    """
    Raised when an input has a recognised format but malformed content:
    bad hex digits, out-of-range channels, or an unknown color name.
    """


class UnsupportedOptionError(ColorError):
    """
    Raised when an enum-like argument (delta E method, harmony, format hint,
    gradient space, ...) names a value the library does not support.
    """

    def __init__(self, kind: str, value: object):
        super().__init__(f"Unsupported {kind}: {value}")
        self.kind = kind
        self.value = value
