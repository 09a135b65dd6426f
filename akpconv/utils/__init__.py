"""Utility functions for akpconv."""

from akpconv.utils.validation import (
    AkpError,
    CorruptedChunkError,
    InvalidAprgSignatureError,
    InvalidChunkSizeError,
    InvalidKeyRangeError,
    InvalidParameterValueError,
    InvalidRiffHeaderError,
    InvalidVelocityRangeError,
    MissingRequiredChunkError,
    TruncatedDataError,
)

__all__ = [
    "AkpError",
    "CorruptedChunkError",
    "InvalidAprgSignatureError",
    "InvalidChunkSizeError",
    "InvalidKeyRangeError",
    "InvalidParameterValueError",
    "InvalidRiffHeaderError",
    "InvalidVelocityRangeError",
    "MissingRequiredChunkError",
    "TruncatedDataError",
]
