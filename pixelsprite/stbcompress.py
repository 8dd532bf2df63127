"""LZ-style compressor producing the stb_compress stream format, plus a word-dump command."""

from __future__ import annotations

import os
import sys
from itertools import accumulate
from typing import Iterator, Optional, Sequence

_ADLER_MOD = 65521
_ADLER_BLOCK = 5552
_WINDOW = 0x40000
_HASH_SIZE = 32768
_MAX_MATCH = 65536
_MAX_LITERAL_RUN = 65536
_MASK32 = 0xFFFFFFFF


def adler32(adler: int, data: bytes) -> int:
    """Continue an Adler-32 checksum ``adler`` over ``data``."""
    s1 = adler & 0xFFFF
    s2 = (adler >> 16) & 0xFFFF
    data = bytes(data)
    remaining = len(data)
    pos = 0
    block = remaining % _ADLER_BLOCK
    while remaining:
        chunk = data[pos:pos + block]
        if chunk:
            running = list(accumulate(chunk))
            s2 += s1 * len(chunk) + sum(running)
            s1 += running[-1]
        s1 %= _ADLER_MOD
        s2 %= _ADLER_MOD
        pos += block
        remaining -= block
        block = _ADLER_BLOCK
    return (s2 << 16) + s1


def _put(out: bytearray, value: int, size: int) -> None:
    out += (value & ((1 << (8 * size)) - 1)).to_bytes(size, "big")


def _out_literals(out: bytearray, literals: bytes) -> None:
    for offset in range(0, len(literals), _MAX_LITERAL_RUN):
        run = literals[offset:offset + _MAX_LITERAL_RUN]
        count = len(run)
        if count <= 32:
            _put(out, 0x000020 + count - 1, 1)
        elif count <= 2048:
            _put(out, 0x000800 + count - 1, 2)
        else:
            _put(out, 0x070000 + count - 1, 3)
        out += run


def _not_crap(best: int, dist: int) -> bool:
    return (
        (best > 2 and dist <= 0x00100)
        or (best > 5 and dist <= 0x04000)
        or (best > 7 and dist <= 0x80000)
    )


def _hash_step(h: int, c: int, d: int) -> int:
    return ((h << 14) + (h >> 18) + (c << 7) + d) & _MASK32


def _match_length(data: bytes, a: int, b: int, limit: int) -> int:
    n = 0
    while n < limit and data[a + n] == data[b + n]:
        n += 1
    return n


def compress(data: bytes) -> bytes:
    """Compress ``data`` into a self-describing stream with an Adler-32 trailer."""
    data = bytes(data)
    length = len(data)
    if length > _MASK32:
        raise ValueError("input too large for a 32-bit length field")

    out = bytearray(b"\x57\xbc")
    _put(out, 0, 2)
    _put(out, 0, 4)  # high half of a 64-bit length
    _put(out, length, 4)
    _put(out, _WINDOW, 4)

    mask = _HASH_SIZE - 1
    chash = [-1] * _HASH_SIZE
    q = 0
    lit_start = 0

    def scramble(h: int) -> int:
        return (h + (h >> 16)) & mask

    # Stop short of the end so hashing never reads past it.
    while q < length and q + 12 < length:
        match_max = length - q if q + _MAX_MATCH > length else _MAX_MATCH
        best = 2
        dist = 0

        def consider(t: int, skip_known: bool) -> None:
            nonlocal best, dist
            if t < 0:
                return
            d = q - t
            if skip_known and dist == d:
                return
            m = _match_length(data, t, q, match_max)
            if m > best and d <= _WINDOW and (m > 9 or _not_crap(m, d)):
                best, dist = m, d

        h = (data[q] << 14) + (data[q + 1] << 7) + data[q + 2]
        h1 = scramble(h)
        consider(chash[h1], False)
        h = _hash_step(h, data[q + 3], data[q + 4])
        h2 = scramble(h)
        h = _hash_step(h, data[q + 5], data[q + 6])
        consider(chash[h2], True)
        h = _hash_step(h, data[q + 7], data[q + 8])
        h3 = scramble(h)
        h = _hash_step(h, data[q + 9], data[q + 10])
        consider(chash[h3], True)
        h = _hash_step(h, data[q + 11], data[q + 12])
        h4 = scramble(h)
        consider(chash[h4], True)

        chash[h1] = chash[h2] = chash[h3] = chash[h4] = q

        if best < 3:
            q += 1
            continue

        if best <= 0x80 and dist <= 0x100:
            _out_literals(out, data[lit_start:q])
            q += best
            lit_start = q
            _put(out, 0x80 + best - 1, 1)
            _put(out, dist - 1, 1)
        elif best > 5 and best <= 0x100 and dist <= 0x4000:
            _out_literals(out, data[lit_start:q])
            q += best
            lit_start = q
            _put(out, 0x4000 + dist - 1, 2)
            _put(out, best - 1, 1)
        elif best > 7 and best <= 0x100 and dist <= 0x80000:
            _out_literals(out, data[lit_start:q])
            q += best
            lit_start = q
            _put(out, 0x180000 + dist - 1, 3)
            _put(out, best - 1, 1)
        elif best > 8 and best <= 0x10000 and dist <= 0x80000:
            _out_literals(out, data[lit_start:q])
            q += best
            lit_start = q
            _put(out, 0x100000 + dist - 1, 3)
            _put(out, best - 1, 2)
        elif best > 9 and dist <= 0x1000000:
            best = min(best, _MAX_MATCH)
            _out_literals(out, data[lit_start:q])
            q += best
            lit_start = q
            if best <= 0x100:
                _put(out, 0x06, 1)
                _put(out, dist - 1, 3)
                _put(out, best - 1, 1)
            else:
                _put(out, 0x04, 1)
                _put(out, dist - 1, 3)
                _put(out, best - 1, 2)
        else:
            q += 1

    q = max(q, length)
    running_adler = adler32(1, data[:q])
    _out_literals(out, data[lit_start:length])
    _put(out, 0x05FA, 2)
    _put(out, running_adler, 4)
    return bytes(out)


def _words(compressed: bytes) -> Iterator[int]:
    for offset in range(0, len(compressed), 4):
        yield int.from_bytes(compressed[offset:offset + 4].ljust(4, b"\x00"), "little")


def format_words(compressed: bytes) -> str:
    """Size line, padded-size line and the data as little-endian 32-bit hex words."""
    size = len(compressed)
    padded = (size + 3) // 4 * 4
    words = "".join(f"0x{word:08x}," for word in _words(compressed))
    return f"{size}\n{padded}/4\n{words}\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compress the named file and print it as a word list."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "stbcompress"
        print(f"Syntax: {prog} <inputfile> <symbolname> <outputfile>")
        return 0

    filename = args[0]
    try:
        with open(filename, "rb") as handle:
            data = handle.read()
    except OSError:
        sys.stderr.write(f"Error opening or reading file: '{filename}'\n")
        return 1

    sys.stdout.write(format_words(compress(data)))
    return 0