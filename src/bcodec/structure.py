"""
Data structures for representing Bencoded types.
"""
from types import MappingProxyType

__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "BencodeType",
    "BencodeInt",
    "BencodeString",
    "BencodeList",
    "BencodeDict",
    "from_python",
]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class BencodeType:
    """Base class for all Bencode data types."""

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.value == other.value

    def serialize(self) -> bytes:
        """Returns the canonical bencoded bytes of this value."""
        from .encoder import encode
        return encode(self)

    def to_python(self):
        """Unwraps the value into plain ints, bytes, lists and dicts."""
        raise NotImplementedError


class BencodeInt(BencodeType):
    """Represents a Bencoded integer (signed 64-bit)."""
    def __init__(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("BencodeInt requires an integer.")
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"BencodeInt value {value} does not fit in 64 bits.")
        self.value = value

    def __hash__(self):
        return hash((BencodeInt, self.value))

    def __repr__(self):
        return f"BencodeInt({self.value})"

    def to_python(self):
        return self.value


class BencodeString(BencodeType):
    """Represents a Bencoded byte string."""
    def __init__(self, value: bytes):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError("BencodeString requires bytes.")
        self.value = bytes(value)

    def __hash__(self):
        return hash((BencodeString, self.value))

    def __repr__(self):
        return f"BencodeString({self.value!r})"

    def to_python(self):
        return self.value


class BencodeList(BencodeType):
    """Represents a Bencoded list."""
    __hash__ = None

    def __init__(self, value: list):
        if not isinstance(value, list):
            raise TypeError("BencodeList requires a list.")
        for item in value:
            if not isinstance(item, BencodeType):
                raise TypeError("BencodeList items must be Bencode types.")
        self.value = value

    def __len__(self):
        return len(self.value)

    def __iter__(self):
        return iter(self.value)

    def __getitem__(self, index):
        return self.value[index]

    def __repr__(self):
        return f"BencodeList({self.value!r})"

    def to_python(self):
        return [item.to_python() for item in self.value]


class BencodeDict(BencodeType):
    """
    Represents a Bencoded dictionary.

    Keys are kept unique and in ascending byte order at all times, so
    iteration, equality and encoding always see the canonical order.
    The ``value`` attribute is a read-only view; use item assignment
    and deletion on the dict itself to change it.
    """
    __hash__ = None

    def __init__(self, value: dict):
        if not isinstance(value, dict):
            raise TypeError("BencodeDict requires a dict.")
        for k, v in value.items():
            self._check_entry(k, v)
        self._data = {bytes(k): value[k] for k in sorted(value, key=bytes)}

    @staticmethod
    def _check_entry(key, val):
        # keys must be bytes (bencode requirement)
        if not isinstance(key, (bytes, bytearray)):
            raise TypeError("BencodeDict keys must be bytes.")
        if not isinstance(val, BencodeType):
            raise TypeError("BencodeDict values must be Bencode types.")

    @property
    def value(self):
        return MappingProxyType(self._data)

    def __setitem__(self, key, val):
        self._check_entry(key, val)
        key = bytes(key)
        if key in self._data or not self._data or key > next(reversed(self._data)):
            self._data[key] = val
            return
        self._data[key] = val
        self._data = {k: self._data[k] for k in sorted(self._data)}

    def __delitem__(self, key):
        del self._data[key]

    def __getitem__(self, key):
        return self._data[key]

    def __contains__(self, key):
        return key in self._data

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __eq__(self, other):
        if not isinstance(other, BencodeDict):
            return NotImplemented
        return self._data == other._data

    def get(self, key, default=None):
        return self._data.get(key, default)

    def keys(self):
        return self._data.keys()

    def items(self):
        return self._data.items()

    def __repr__(self):
        return f"BencodeDict({self._data!r})"

    def to_python(self):
        return {k: v.to_python() for k, v in self._data.items()}


def from_python(obj) -> BencodeType:
    """
    Builds a Bencode value tree from plain Python objects.

    str values and keys are stored as their UTF-8 bytes; tuples become lists.
    Existing Bencode types are passed through unchanged.
    """
    if isinstance(obj, BencodeType):
        return obj

    if isinstance(obj, int):
        return BencodeInt(obj)

    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BencodeString(obj)

    if isinstance(obj, str):
        return BencodeString(obj.encode())

    if isinstance(obj, (list, tuple)):
        return BencodeList([from_python(x) for x in obj])

    if isinstance(obj, dict):
        out = {}
        for key, val in obj.items():
            if isinstance(key, str):
                key = key.encode()
            elif not isinstance(key, (bytes, bytearray)):
                raise TypeError(f"Cannot use {type(key)} as a bencode dict key")
            out[bytes(key)] = from_python(val)
        return BencodeDict(out)

    raise TypeError(f"Cannot bencode object of type {type(obj)}")
