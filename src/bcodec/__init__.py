"""
Bencode package for encoding and decoding BitTorrent data.
"""
from .decoder import DEFAULT_MAX_DEPTH, BencodeDecoder, decode, parse
from .encoder import encode, serialize
from .errors import (
    BencodeDecodeError,
    ErrorKind,
    NegativeLengthError,
    NonUtf8Error,
    UnexpectedTokenError,
)
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType, from_python

__all__ = [
    'decode', 'parse', 'encode', 'serialize', 'from_python',
    'BencodeDecoder', 'DEFAULT_MAX_DEPTH',
    'BencodeType', 'BencodeInt', 'BencodeString', 'BencodeList', 'BencodeDict',
    'BencodeDecodeError', 'NegativeLengthError', 'UnexpectedTokenError', 'NonUtf8Error',
    'ErrorKind',
]
