"""
Bencode encoder for BitTorrent metainfo and tracker responses.
"""
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, from_python


def encode(obj) -> bytes:
    """
    Encodes a BencodeType into canonical bencoded bytes.

    Plain Python objects are converted with ``from_python`` first, which
    raises TypeError/ValueError for anything bencode cannot represent.
    """
    if isinstance(obj, BencodeInt):
        return encode_int(obj.value)

    if isinstance(obj, BencodeString):
        return encode_bytes(obj.value)

    if isinstance(obj, BencodeList):
        return encode_list(obj.value)

    if isinstance(obj, BencodeDict):
        return encode_dict(obj)

    return encode(from_python(obj))


# ------------------------------------------------------------
#   Encoding primitives
# ------------------------------------------------------------

def encode_int(n: int) -> bytes:
    """Encodes an integer to bencoded bytes (e.g., i123e)."""
    return f"i{n}e".encode()


def encode_bytes(b: bytes) -> bytes:
    """Encodes bytes to bencoded bytes (e.g., 4:spam)."""
    return str(len(b)).encode() + b":" + b


def encode_list(lst: list) -> bytes:
    """Encodes a list to bencoded bytes (e.g., l4:spame)."""
    encoded_items = b''.join(encode(x) for x in lst)
    return b"l" + encoded_items + b"e"


def encode_dict(d: BencodeDict) -> bytes:
    """Encodes a dictionary to bencoded bytes (e.g., d3:cow3:moo4:spam4:eggse)."""
    if not isinstance(d, BencodeDict):
        d = from_python(d)

    # BencodeDict already iterates in ascending key order
    parts = [b"d"]
    for key, value in d.items():
        parts.append(encode_bytes(key))
        parts.append(encode(value))
    parts.append(b"e")
    return b"".join(parts)


serialize = encode
