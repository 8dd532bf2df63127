import random
import zlib

import pytest

from pixelsprite.stbcompress import adler32, compress, format_words, main


def _int(chunk):
    return int.from_bytes(chunk, "big")


def _decompress(blob):
    """Decode a compressed stream; returns (data, stored_adler, stored_length, consumed)."""
    assert blob[:2] == b"\x57\xbc"
    assert blob[2:8] == bytes(6)
    length = _int(blob[8:12])
    out = bytearray()
    i = 16
    while True:
        op = blob[i]
        dist = n = 0
        if op >= 0x80:
            dist, n = blob[i + 1] + 1, op - 0x80 + 1
            i += 2
        elif op >= 0x40:
            dist, n = _int(blob[i:i + 2]) - 0x4000 + 1, blob[i + 2] + 1
            i += 3
        elif op >= 0x20:
            n = op - 0x20 + 1
            out += blob[i + 1:i + 1 + n]
            i += 1 + n
            continue
        elif op >= 0x18:
            dist, n = _int(blob[i:i + 3]) - 0x180000 + 1, blob[i + 3] + 1
            i += 4
        elif op >= 0x10:
            dist, n = _int(blob[i:i + 3]) - 0x100000 + 1, _int(blob[i + 3:i + 5]) + 1
            i += 5
        elif op >= 0x08:
            n = _int(blob[i:i + 2]) - 0x0800 + 1
            out += blob[i + 2:i + 2 + n]
            i += 2 + n
            continue
        elif op == 0x07:
            n = _int(blob[i + 1:i + 3]) + 1
            out += blob[i + 3:i + 3 + n]
            i += 3 + n
            continue
        elif op == 0x06:
            dist, n = _int(blob[i + 1:i + 4]) + 1, blob[i + 4] + 1
            i += 5
        elif op == 0x05:
            assert blob[i + 1] == 0xFA
            return bytes(out), _int(blob[i + 2:i + 6]), length, i + 6
        elif op == 0x04:
            dist, n = _int(blob[i + 1:i + 4]) + 1, _int(blob[i + 4:i + 6]) + 1
            i += 6
        else:
            raise AssertionError(f"bad opcode {op:#x}")
        for _ in range(n):
            out.append(out[-dist])


def _random_bytes(seed, n):
    return random.Random(seed).randbytes(n)


def test_adler32_empty_keeps_seed():
    assert adler32(1, b"") == 1


def test_adler32_known_value():
    assert adler32(1, b"Wikipedia") == 0x11E60398


@pytest.mark.parametrize("size", [1, 100, 5552, 5553, 20000])
def test_adler32_matches_zlib(size):
    data = _random_bytes(size, size)
    assert adler32(1, data) == zlib.adler32(data)


def test_adler32_chains():
    a, b = _random_bytes(1, 7000), _random_bytes(2, 9000)
    assert adler32(adler32(1, a), b) == adler32(1, a + b)


def test_compress_empty_stream():
    expected = bytes.fromhex("57bc0000" "00000000" "00000000" "00040000" "05fa" "00000001")
    assert compress(b"") == expected


def test_header_and_trailer():
    data = b"hello world, hello world, hello world!"
    blob = compress(data)
    assert blob[:16] == b"\x57\xbc" + bytes(6) + len(data).to_bytes(4, "big") + (0x40000).to_bytes(4, "big")
    assert blob[-6:-4] == b"\x05\xfa"
    assert _int(blob[-4:]) == adler32(1, data)


PAYLOADS = {
    "tiny": b"abc",
    "just_over_hash_window": b"0123456789abcdef",
    "text": b"the quick brown fox jumps over the lazy dog " * 40,
    "zeros": bytes(100000),
    "short_period": b"abc" * 1000,
    "random_literals_2k": _random_bytes(3, 3000),
    "random_literals_70k": _random_bytes(4, 70000),
    "far_short_match": (lambda blk: blk + _random_bytes(6, 20000) + blk)(_random_bytes(5, 100)),
    "far_long_match": (lambda blk: blk + _random_bytes(8, 20000) + blk)(_random_bytes(7, 600)),
    "mid_match": (lambda blk: blk + _random_bytes(10, 1000) + blk)(_random_bytes(9, 50)),
}


@pytest.mark.parametrize("name", sorted(PAYLOADS))
def test_round_trip(name):
    data = PAYLOADS[name]
    blob = compress(data)
    decoded, stored_adler, stored_length, consumed = _decompress(blob)
    assert decoded == data
    assert stored_length == len(data)
    assert stored_adler == zlib.adler32(data)
    assert consumed == len(blob)


def test_repetitive_data_shrinks():
    data = b"a" * 10000
    assert len(compress(data)) < len(data) // 10


def test_random_data_is_not_shortened_much():
    data = _random_bytes(11, 4000)
    assert len(compress(data)) >= len(data)


def test_format_words_pins_layout():
    assert format_words(b"\x01\x02\x03\x04\x05") == "5\n8/4\n0x04030201,0x00000005,\n"


def test_format_words_structure():
    blob = compress(PAYLOADS["text"])
    lines = format_words(blob).split("\n")
    assert lines[0] == str(len(blob))
    assert lines[1] == f"{(len(blob) + 3) // 4 * 4}/4"
    words = lines[2].rstrip(",").split(",")
    assert len(words) == (len(blob) + 3) // 4
    assert all(w.startswith("0x") and len(w) == 10 for w in words)
    assert lines[3] == ""


def test_main_prints_compressed_words(tmp_path, capsys):
    data = PAYLOADS["text"]
    path = tmp_path / "input.bin"
    path.write_bytes(data)
    assert main([str(path), "Symbol"]) == 0
    assert capsys.readouterr().out == format_words(compress(data))


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.bin"
    assert main([str(missing)]) == 1
    assert capsys.readouterr().err == f"Error opening or reading file: '{missing}'\n"


def test_main_without_arguments_shows_syntax(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Syntax: ")
    assert "<inputfile> <symbolname> <outputfile>" in out