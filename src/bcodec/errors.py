"""
Exceptions raised while decoding Bencoded data.
"""
from enum import IntEnum


class ErrorKind(IntEnum):
    """Reasons a decode can fail."""
    NEGATIVE_LEN = 1   # byte string length starts with '-'
    UNEXPECTED = 2     # byte or end of input that breaks the grammar
    UTF8_ERROR = 3     # numeric token is not valid text


class BencodeDecodeError(Exception):
    """
    Custom exception for Bencode decoding errors.

    ``position`` is the byte index at which the fault was detected and is
    always part of the message.
    """
    kind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.message = message
        self.position = position

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r}, position={self.position})"


class NegativeLengthError(BencodeDecodeError):
    """A byte string length was negative, e.g. ``-3:dog``."""
    kind = ErrorKind.NEGATIVE_LEN


class UnexpectedTokenError(BencodeDecodeError):
    """An unexpected byte, or the end of input, was found while parsing."""
    kind = ErrorKind.UNEXPECTED


class NonUtf8Error(BencodeDecodeError):
    """A length or integer token could not be read as text."""
    kind = ErrorKind.UTF8_ERROR
