"""
Codec Errors

Exception hierarchy shared by the codec modules. Every error derives from
ValueError so callers that treat invalid input as a ValueError keep working.
"""

from typing import Optional


class CodecError(ValueError):
    """Base class for all codec failures."""


class InvalidLengthError(CodecError):
    """Raised when Base64 input length is not a multiple of 4."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Base64 input length must be a multiple of 4, got {length}"
        )


class InvalidCharacterError(CodecError):
    """
    Raised when Base64 input contains a symbol outside the alphabet,
    misplaced padding, or too much padding.
    """

    def __init__(self, position: int, character: Optional[str] = None,
                 reason: str = "invalid Base64 character"):
        self.position = position
        self.character = character
        self.reason = reason
        if character is None:
            message = f"{reason} at position {position}"
        else:
            message = f"{reason} {character!r} at position {position}"
        super().__init__(message)


class MessageTooLongError(CodecError):
    """Raised when an MD5 message bit length does not fit in 64 bits."""

    def __init__(self, byte_length: int):
        self.byte_length = byte_length
        super().__init__(
            f"Message of {byte_length} bytes exceeds the 64-bit length field"
        )
