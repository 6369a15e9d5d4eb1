import argparse, os, sys
from bitstream import parse_header
from codec import decode
from huff_canonical import validate_code_lengths, canonical_codes_from_lengths
from errors import HuffmanFormatError
from treeviz import codes_to_dot, code_table_text

def main(argv=None):
    ap = argparse.ArgumentParser(description="canonical Huffman decoder")
    ap.add_argument("--input", required=True, help="path to .huf")
    ap.add_argument("--output", required=True, help="path to decoded output")
    ap.add_argument("--graph", help="write a Graphviz .gv of the canonical code here")
    ap.add_argument("--codes", help="write the symbol/length/codeword table here")
    ap.add_argument("--quiet", action="store_true")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()

    try:
        entries, offset = parse_header(data)
        message = decode(entries, data[offset:])
    except HuffmanFormatError as e:
        print(f"[decode] error: {e}", file=sys.stderr)
        return 1

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(message)

    if args.graph or args.codes:
        codes = canonical_codes_from_lengths(validate_code_lengths(entries))
        for path, text in ((args.graph, codes_to_dot), (args.codes, code_table_text)):
            if path:
                os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
                with open(path, "w", encoding="utf-8") as f:
                    f.write(text(codes))

    if not args.quiet:
        print(f"[decode] wrote {args.output} bytes={len(message)} symbols={len(entries)}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
