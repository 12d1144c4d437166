"""
Bencode decoder for BitTorrent metainfo and tracker responses.
"""
import logging
import re

from .errors import (
    BencodeDecodeError,
    NegativeLengthError,
    NonUtf8Error,
    UnexpectedTokenError,
)
from .structure import INT64_MAX, INT64_MIN, BencodeDict, BencodeInt, BencodeList, BencodeString

logger = logging.getLogger(__name__)

# Lists and dicts nested deeper than this are rejected
DEFAULT_MAX_DEPTH = 256

_DIGITS = re.compile(r"[0-9]+")
_INT64_DIGITS = len(str(INT64_MAX))


class BencodeDecoder:
    """
    Decodes Bencoded byte strings into Bencode types.

    The cursor ``i`` only moves forward. ``decode()`` reads one element and
    leaves the cursor just past it, so callers can tell where it ended.
    """
    def __init__(self, data: bytes, max_depth: int = DEFAULT_MAX_DEPTH):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Cannot decode object of type {type(data)}, expected bytes")
        self.data = bytes(data)
        self.i = 0  # cursor index
        self.max_depth = max_depth
        self._depth = 0

    def decode(self):
        """Decodes a single element starting at the cursor."""
        return self._parse_value()

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _peek(self):
        if self.i >= len(self.data):
            raise UnexpectedTokenError(f"Unexpected end of input at index {self.i}", self.i)
        return self.data[self.i:self.i+1]

    def _consume(self, n=1):
        """Moves cursor forward by n bytes and returns the consumed chunk."""
        chunk = self.data[self.i:self.i+n]
        self.i += n
        return chunk

    def _expect(self, token: bytes):
        ch = self._peek()
        if ch != token:
            raise UnexpectedTokenError(
                f"Unexpected character at index {self.i}. Expected {token!r} found {ch!r}",
                self.i,
            )
        return self._consume(1)

    def _read_until(self, terminator: bytes, what: str, start: int) -> bytes:
        """Returns the bytes up to (not including) terminator and stops on it."""
        end = self.data.find(terminator, self.i)
        if end == -1:
            raise UnexpectedTokenError(
                f"Missing {terminator!r} after {what} at index {start}", len(self.data)
            )
        return self._consume(end - self.i)

    @staticmethod
    def _to_text(token: bytes, start: int, what: str) -> str:
        try:
            return token.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise NonUtf8Error(f"Non UTF8 encoded {what} at index {start}. {exc}", start) from exc

    def _enter(self):
        self._depth += 1
        if self._depth > self.max_depth:
            raise UnexpectedTokenError(
                f"Nesting deeper than {self.max_depth} levels at index {self.i}", self.i
            )

    # --------------------------
    # Parsing functions
    # --------------------------

    def _parse_value(self):
        ch = self._peek()

        if ch == b'i':
            return self._parse_int()

        # Bencode strings start with length; '-' can only be a negative length
        if ch.isdigit() or ch == b'-':
            return BencodeString(self._parse_string())

        if ch == b'l':
            return self._parse_list()

        if ch == b'd':
            return self._parse_dict()

        raise UnexpectedTokenError(f"Unexpected value type at index {self.i}: {ch!r}", self.i)

    def _parse_int(self):
        """Parses an integer from the Bencoded data."""
        start = self.i
        self._expect(b'i')

        negative = self._peek() == b'-'
        if negative:
            self._consume(1)

        digits = self._read_until(b'e', "integer", start)
        if len(digits) > 1 and digits[:1] == b'0':
            raise UnexpectedTokenError(f"Leading 0 while parsing integer at index {start}", start)
        if negative and digits == b'0':
            raise UnexpectedTokenError(f"Negative 0 while parsing integer at index {start}", start)

        text = self._to_text(digits, start, "integer value")
        if not _DIGITS.fullmatch(text):
            raise UnexpectedTokenError(f"Invalid integer format at index {start}: {text!r}", start)

        num = int(text) if len(text) <= _INT64_DIGITS else 2 ** 64
        if negative:
            num = -num
        if not INT64_MIN <= num <= INT64_MAX:
            raise UnexpectedTokenError(f"Integer out of 64-bit range at index {start}", start)

        self._expect(b'e')
        return BencodeInt(num)

    def _parse_string(self) -> bytes:
        """Parses a byte string from the Bencoded data and returns its payload."""
        start = self.i
        if self._peek() == b'-':
            raise NegativeLengthError(f"Negative string len at index {start}", start)

        # read length until ':'
        token = self._read_until(b':', "string length", start)
        text = self._to_text(token, start, "string length")
        if not _DIGITS.fullmatch(text):
            raise UnexpectedTokenError(f"Invalid string length at index {start}: {text!r}", start)
        if len(text) > 1 and text[0] == "0":
            raise UnexpectedTokenError(f"Leading 0 in string length at index {start}", start)

        self._expect(b':')
        remaining = len(self.data) - self.i
        if len(text) > len(str(remaining)) or int(text) > remaining:
            raise UnexpectedTokenError(
                f"String at index {start} declares {text} bytes but only {remaining} remain",
                start,
            )
        return self._consume(int(text))

    def _parse_list(self):
        """Parses a list from the Bencoded data."""
        self._expect(b'l')
        self._enter()
        items = []

        while self._peek() != b'e':
            items.append(self._parse_value())

        self._consume(1)  # skip 'e'
        self._depth -= 1
        return BencodeList(items)

    def _parse_dict(self):
        """Parses a dictionary from the Bencoded data."""
        self._expect(b'd')
        self._enter()
        obj = {}

        while self._peek() != b'e':
            # keys MUST be strings
            ch = self._peek()
            if not (ch.isdigit() or ch == b'-'):
                raise UnexpectedTokenError(
                    f"Dictionary key at index {self.i} must be a byte string, found {ch!r}",
                    self.i,
                )
            key = self._parse_string()
            # later duplicates overwrite earlier ones
            obj[key] = self._parse_value()

        self._consume(1)  # skip 'e'
        self._depth -= 1
        return BencodeDict(obj)


def decode(data: bytes, *, strict: bool = True, max_depth: int = DEFAULT_MAX_DEPTH):
    """
    Convenience function to decode Bencoded data.

    With ``strict`` (the default) the input must hold exactly one element;
    trailing bytes are rejected.
    """
    decoder = BencodeDecoder(data, max_depth=max_depth)
    try:
        result = decoder.decode()
        if strict and decoder.i != len(decoder.data):
            raise UnexpectedTokenError(f"Trailing data at index {decoder.i}", decoder.i)
    except BencodeDecodeError as exc:
        logger.debug("Rejected bencoded input (%d bytes): %s", len(decoder.data), exc)
        raise
    return result


parse = decode
