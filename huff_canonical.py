from __future__ import annotations
import heapq
from dataclasses import dataclass
from typing import Dict, Tuple, List, Optional
from errors import InvalidSymbolCount, InvalidCodeTable
from symbols import TERMINATOR

Symbol = int  # byte value 0..255

MAX_CODE_LEN = 255  # one header byte

@dataclass
class _Node:
    freq: int
    order: int  # heap tie-break: symbol for leaves, 256 + merge index for internal nodes
    sym: Optional[Symbol] = None
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    depth: int = 0

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other):  # for heapq
        return (self.freq, self.order) < (other.freq, other.order)

def build_tree(freqs: Dict[Symbol, int]) -> _Node:
    """
    Greedy Huffman merge. Equal weights pop leaves first, by ascending symbol,
    then internal nodes in creation order. The first popped node is the "0" child.
    """
    if not freqs:
        raise InvalidSymbolCount("cannot build a code for an empty alphabet")
    pq = [_Node(freq=f, order=s, sym=s) for s, f in freqs.items()]
    heapq.heapify(pq)
    merges = 0
    while len(pq) > 1:
        a = heapq.heappop(pq)
        b = heapq.heappop(pq)
        heapq.heappush(pq, _Node(freq=a.freq + b.freq, order=256 + merges, left=a, right=b))
        merges += 1
    return pq[0]

def _collect_lengths(node: _Node, depth: int, out: Dict[Symbol, int]):
    if node.is_leaf:
        # single-symbol alphabet: root leaf still needs one bit
        node.depth = max(1, depth)
        out[node.sym] = node.depth
        return
    node.depth = depth
    _collect_lengths(node.left, depth + 1, out)
    _collect_lengths(node.right, depth + 1, out)

def collect_lengths(root: _Node) -> Dict[Symbol, int]:
    lengths: Dict[Symbol, int] = {}
    _collect_lengths(root, 0, lengths)
    return lengths

def build_code_lengths(freqs: Dict[Symbol, int]) -> Dict[Symbol, int]:
    """Code length per symbol, keyed in the same order as `freqs`."""
    lengths = collect_lengths(build_tree(freqs))
    return {s: lengths[s] for s in freqs}

def canonical_order(lengths: Dict[Symbol, int]) -> List[Tuple[Symbol, int]]:
    """(symbol, code_len) pairs sorted by (code_len, symbol)."""
    return sorted(lengths.items(), key=lambda kv: (kv[1], kv[0]))

def canonical_codes_from_lengths(lengths: Dict[Symbol, int]) -> Dict[Symbol, Tuple[int, int]]:
    """
    Return mapping: sym -> (code_int, code_len), canonical Huffman.
    Codes of one length count up with the symbol; moving to a longer length
    shifts the running code left by the length difference.
    """
    items = canonical_order(lengths)
    out: Dict[Symbol, Tuple[int, int]] = {}
    if not items:
        return out
    code = 0
    prev_len = items[0][1]
    for sym, L in items:
        code <<= (L - prev_len)
        out[sym] = (code, L)
        code += 1
        prev_len = L
    return out

def build_decode_table(codes: Dict[Symbol, Tuple[int, int]]) -> Dict[Tuple[int, int], Symbol]:
    """(code_len, code_int) -> sym, for growing-prefix lookup."""
    return {(L, code): sym for sym, (code, L) in codes.items()}

def validate_code_lengths(entries: List[Tuple[Symbol, int]]) -> Dict[Symbol, int]:
    """
    Check a (symbol, code_len) table read from a header and return it as a dict.
    Raises InvalidCodeTable on duplicates, bad lengths, a missing terminator or
    a Kraft sum that is not exactly 1 (k > 1) or exceeds 1/2 (k == 1).
    """
    lengths: Dict[Symbol, int] = {}
    for sym, L in entries:
        if not (0 <= sym <= 255):
            raise InvalidCodeTable(f"symbol out of range: {sym}")
        if not (1 <= L <= MAX_CODE_LEN):
            raise InvalidCodeTable(f"code length out of range for symbol {sym}: {L}")
        if sym in lengths:
            raise InvalidCodeTable(f"duplicate symbol in table: {sym}")
        lengths[sym] = L
    if TERMINATOR not in lengths:
        raise InvalidCodeTable("terminator symbol missing from table")

    # Kraft sum scaled by 2**max_len, exact in integers
    max_len = max(lengths.values())
    budget = 1 << max_len
    used = sum(1 << (max_len - L) for L in lengths.values())
    if len(lengths) == 1:
        if lengths[TERMINATOR] != 1:
            raise InvalidCodeTable("single-symbol table must use a 1-bit code")
    elif used != budget:
        kind = "over-subscribed" if used > budget else "incomplete"
        raise InvalidCodeTable(f"code lengths are {kind} (Kraft sum {used}/{budget})")
    return lengths
