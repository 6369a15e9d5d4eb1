from symbols import prepare_message, count_frequencies
from huff_canonical import (build_tree, collect_lengths, canonical_codes_from_lengths,
                            build_decode_table, validate_code_lengths)
from bitpack import pack_symbols, unpack_symbols
from bitstream import serialize_header, parse_header

def encode(message: bytes):
    """
    Returns:
      entries: list of (symbol, code_len) in frequency-table order
      payload_bytes: packed codewords
      meta: freqs, root (merge tree), codes (sym -> (code_int, code_len))
    """
    data = prepare_message(message)
    freqs = count_frequencies(data)
    root = build_tree(freqs)
    lengths = collect_lengths(root)
    codes = canonical_codes_from_lengths(lengths)
    payload_bytes = pack_symbols(data, codes)

    entries = [(sym, lengths[sym]) for sym in freqs]
    meta = dict(freqs=freqs, root=root, codes=codes, n_symbols=len(data))
    return entries, payload_bytes, meta

def decode(entries, payload_bytes: bytes) -> bytes:
    """Rebuild the canonical code from (symbol, code_len) pairs and unpack the payload."""
    lengths = validate_code_lengths(entries)
    codes = canonical_codes_from_lengths(lengths)
    return unpack_symbols(payload_bytes, build_decode_table(codes))

def compress(message: bytes) -> bytes:
    entries, payload_bytes, _ = encode(message)
    return serialize_header(entries) + payload_bytes

def decompress(data: bytes) -> bytes:
    entries, offset = parse_header(data)
    return decode(entries, data[offset:])
