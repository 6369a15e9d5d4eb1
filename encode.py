import argparse, os, sys
from codec import encode
from bitstream import serialize_header
from huff_canonical import collect_lengths
from errors import HuffmanFormatError
from metrics import entropy_bits, mean_code_length, compression_ratio
from treeviz import tree_to_dot, codes_to_dot, code_table_text

def _write_text(path, text):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)

def main(argv=None):
    ap = argparse.ArgumentParser(description="canonical Huffman encoder")
    ap.add_argument("--input", required=True, help="path to plain input file")
    ap.add_argument("--output", required=True, help="path to .huf")
    ap.add_argument("--graph", help="write a Graphviz .gv of the code here")
    ap.add_argument("--graph-kind", choices=["canonical", "tree"], default="canonical",
                    help="canonical code trie (default) or the merge tree before canonicalization")
    ap.add_argument("--codes", help="write the symbol/length/codeword table here")
    ap.add_argument("--quiet", action="store_true")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        message = f.read()

    try:
        entries, payload_bytes, meta = encode(message)
    except HuffmanFormatError as e:
        print(f"[encode] error: {e}", file=sys.stderr)
        return 1
    header = serialize_header(entries)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(header)
        f.write(payload_bytes)

    if args.graph:
        if args.graph_kind == "tree":
            _write_text(args.graph, tree_to_dot(meta["root"]))
        else:
            _write_text(args.graph, codes_to_dot(meta["codes"]))
    if args.codes:
        _write_text(args.codes, code_table_text(meta["codes"]))

    if not args.quiet:
        freqs = meta["freqs"]
        lengths = collect_lengths(meta["root"])
        total = len(header) + len(payload_bytes)
        print(f"[encode] wrote {args.output}")
        print(f"[encode] symbols={len(entries)} header={len(header)}B payload={len(payload_bytes)}B")
        print(f"[encode] entropy={entropy_bits(freqs):.4f} bits/sym, mean_len={mean_code_length(freqs, lengths):.4f} bits/sym")
        print(f"[encode] ratio={compression_ratio(len(message), total):.3f}")
        if args.graph:
            print(f"[encode] graph ({args.graph_kind}) -> {args.graph}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
