from typing import Dict, Tuple
from errors import UnterminatedPayload, CorruptPayload
from symbols import TERMINATOR

class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)

    def write_code(self, code: int, length: int):
        """Write 'length' bits of code (MSB-first)."""
        for i in range(length - 1, -1, -1):
            bit = (code >> i) & 1
            self._cur = (self._cur << 1) | bit
            self._nbits += 1
            if self._nbits == 8:
                self._buf.append(self._cur)
                self._cur = 0
                self._nbits = 0

    @property
    def bits_written(self) -> int:
        return len(self._buf) * 8 + self._nbits

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)

class BitReader:
    def __init__(self, data: bytes):
        self.data = data
        self.i = 0
        self.bit = 0  # bit index in current byte (0..7), MSB-first

    def read_bit(self) -> int:
        if self.i >= len(self.data):
            raise EOFError("Unexpected end of bitstream")
        b = (self.data[self.i] >> (7 - self.bit)) & 1
        self.bit += 1
        if self.bit == 8:
            self.bit = 0
            self.i += 1
        return b

def pack_symbols(data: bytes, codes: Dict[int, Tuple[int, int]]) -> bytes:
    """
    Input: terminator-appended message, sym -> (code_int, code_len)
    Output: payload bytes, zero-padded to a byte boundary
    """
    bw = BitWriter()
    for sym in data:
        code, L = codes[sym]
        bw.write_code(code, L)
    return bw.finish()

def unpack_symbols(payload: bytes, table: Dict[Tuple[int, int], int]) -> bytes:
    """
    Decode symbols until the terminator; padding after it is ignored.
    table: (code_len, code_int) -> sym
    Output: decoded bytes, terminator excluded
    """
    max_len = max(L for L, _ in table)
    br = BitReader(payload)
    out = bytearray()
    code, L = 0, 0
    while True:
        try:
            b = br.read_bit()
        except EOFError:
            raise UnterminatedPayload(
                f"payload ended after {len(out)} symbols without a terminator") from None
        code = (code << 1) | b
        L += 1
        sym = table.get((L, code))
        if sym is None:
            if L >= max_len:
                raise CorruptPayload(f"no codeword matches bit prefix at byte {br.i}")
            continue
        if sym == TERMINATOR:
            return bytes(out)
        out.append(sym)
        code, L = 0, 0
