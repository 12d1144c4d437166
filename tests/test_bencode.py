from bcodec import decode, encode, parse, serialize
from bcodec.structure import BencodeInt, BencodeString, BencodeList, BencodeDict


def test_int():
    print("Testing integer decoding...")
    obj = decode(b"i42e")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeInt)
    assert obj.value == 42

    print("Testing integer encoding...")
    enc = encode(obj)
    print("Re-encoded:", enc)
    assert enc == b"i42e"


def test_boundary_int():
    assert decode(b"i36e") == BencodeInt(36)
    assert BencodeInt(13).serialize() == b"i13e"
    assert BencodeInt(13).serialize() == bytes([105, 49, 51, 101])


def test_string():
    print("Testing string decoding...")
    obj = decode(b"4:spam")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeString)
    assert obj.value == b"spam"

    print("Testing string encoding...")
    assert encode(obj) == b"4:spam"


def test_list():
    print("Testing list decoding...")
    obj = decode(b"l4:spami3ee")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeList)
    assert len(obj.value) == 2
    assert obj.value == [BencodeString(b"spam"), BencodeInt(3)]


def test_dict():
    print("Testing dictionary decoding & encoding...")
    obj = decode(b"d3:cow3:mooe")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeDict)
    assert obj.value[b"cow"].value == b"moo"
    enc = encode(obj)
    print("Re-encoded:", enc)
    assert enc == b"d3:cow3:mooe"


def test_dict_reencodes_in_key_order():
    obj = decode(b"d4:spam3:dog3:cati36ee")
    assert list(obj.value) == [b"cat", b"spam"]
    assert encode(obj) == b"d3:cati36e4:spam3:doge"


def test_empty_containers():
    assert decode(b"le") == BencodeList([])
    assert decode(b"de") == BencodeDict({})
    assert decode(b"0:") == BencodeString(b"")


def test_roundtrip_torrent_like_document():
    raw = (
        b"d8:announce30:http://tracker.example.com/ann"
        b"4:infod6:lengthi12345e4:name8:file.txt"
        b"12:piece lengthi16384e6:pieces20:" + b"\x00\xff" * 10 + b"e"
        b"4:listli-1ei0eli1eeee"
    )
    obj = decode(raw)
    assert encode(obj) == raw
    assert decode(encode(obj)) == obj
    assert obj[b"info"][b"pieces"].value == b"\x00\xff" * 10


def test_parse_and_serialize_aliases():
    obj = parse(b"l1:ai1ee")
    assert serialize(obj) == b"l1:ai1ee"
