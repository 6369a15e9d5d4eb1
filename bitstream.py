import io
import struct
from typing import List, Tuple
from errors import TruncatedHeader, InvalidSymbolCount

# Container layout:
# k(u8)                     number of distinct symbols, 1..255
# k * (symbol(u8) len(u8))  code-length table, producer order
# payload                   packed codewords, MSB-first, zero-padded
COUNT_FMT = "<B"
COUNT_SIZE = struct.calcsize(COUNT_FMT)

ENTRY_FMT = "<BB"
ENTRY_SIZE = struct.calcsize(ENTRY_FMT)

# CR is never coded, so at most 255 distinct symbols reach the table
MAX_SYMBOLS = 255

def header_size(k: int) -> int:
    return COUNT_SIZE + k * ENTRY_SIZE

def write_header(f, entries: List[Tuple[int, int]]):
    k = len(entries)
    if not (1 <= k <= MAX_SYMBOLS):
        raise InvalidSymbolCount(f"symbol count out of range: {k}")
    f.write(struct.pack(COUNT_FMT, k))
    for sym, L in entries:
        if not (0 <= sym <= 255): raise ValueError("symbol out of range")
        if not (1 <= L <= 255): raise ValueError("codelen out of range")
        f.write(struct.pack(ENTRY_FMT, sym, L))

def read_header(f) -> List[Tuple[int, int]]:
    data = f.read(COUNT_SIZE)
    if len(data) != COUNT_SIZE:
        raise TruncatedHeader("Malformed stream: missing symbol count")
    (k,) = struct.unpack(COUNT_FMT, data)
    if k == 0:
        raise InvalidSymbolCount("symbol count is zero")
    body = f.read(k * ENTRY_SIZE)
    if len(body) != k * ENTRY_SIZE:
        raise TruncatedHeader(
            f"Malformed stream: header needs {header_size(k)} bytes, got {COUNT_SIZE + len(body)}")
    return [(int(s), int(L)) for s, L in struct.iter_unpack(ENTRY_FMT, body)]

def serialize_header(entries: List[Tuple[int, int]]) -> bytes:
    f = io.BytesIO()
    write_header(f, entries)
    return f.getvalue()

def parse_header(data: bytes):
    """
    Returns:
      entries: list of (symbol, code_len) in stored order
      offset: index of the first payload byte
    """
    f = io.BytesIO(data)
    entries = read_header(f)
    return entries, f.tell()
