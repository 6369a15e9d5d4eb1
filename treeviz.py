"""
Graphviz DOT / plain-text dumps of a code, for eyeballing.

tree_to_dot   the merge tree as built (before canonicalization)
codes_to_dot  the canonical code drawn as a binary trie
Edges are labelled with the bit they consume; 0 goes left.
"""
from typing import Dict, Tuple, List
from symbols import TERMINATOR

_NAMED = {
    TERMINATOR: "EOF",
    ord("\n"): "NewLine",
    ord("\\"): "BackSlash",
    ord("'"): "SingleQuote",
    ord('"'): "Quote",
}

def symbol_label(sym: int) -> str:
    if sym in _NAMED:
        return _NAMED[sym]
    if 0x21 <= sym <= 0x7E:
        return chr(sym)
    return f"0x{sym:02x}"

def _leaf_line(node_id: str, sym: int) -> str:
    return f'  {node_id} [shape=box, label="{symbol_label(sym)}"];'

def tree_to_dot(root) -> str:
    lines = ["digraph G {", '  Root [label="Root"];']

    def walk(node, node_id):
        for bit, child in (("0", node.left), ("1", node.right)):
            child_id = f"{node_id}_{bit}"
            if child.is_leaf:
                lines.append(_leaf_line(child_id, child.sym))
            else:
                lines.append(f'  {child_id} [label="{child.freq}"];')
                walk(child, child_id)
            lines.append(f'  {node_id} -> {child_id} [label="{bit}"];')

    if root.is_leaf:
        # lone symbol still spends one bit
        lines.append(_leaf_line("Root_0", root.sym))
        lines.append('  Root -> Root_0 [label="0"];')
    else:
        walk(root, "Root")
    lines.append("}")
    return "\n".join(lines) + "\n"

def codes_to_dot(codes: Dict[int, Tuple[int, int]]) -> str:
    lines = ["digraph G {", '  Root [label="Root"];']
    seen = set()
    for sym, bits in _bit_strings(codes):
        parent = "Root"
        for i, bit in enumerate(bits):
            node_id = f"{parent}_{bit}"
            if node_id not in seen:
                seen.add(node_id)
                if i == len(bits) - 1:
                    lines.append(_leaf_line(node_id, sym))
                else:
                    lines.append(f'  {node_id} [label=""];')
                lines.append(f'  {parent} -> {node_id} [label="{bit}"];')
            parent = node_id
    lines.append("}")
    return "\n".join(lines) + "\n"

def _bit_strings(codes: Dict[int, Tuple[int, int]]) -> List[Tuple[int, str]]:
    items = sorted(codes.items(), key=lambda kv: (kv[1][1], kv[0]))
    return [(sym, format(code, f"0{L}b")) for sym, (code, L) in items]

def code_table_text(codes: Dict[int, Tuple[int, int]]) -> str:
    """One line per symbol in canonical order: label, length, codeword."""
    rows = [f"{symbol_label(sym)}\t{len(bits)}\t{bits}" for sym, bits in _bit_strings(codes)]
    return "\n".join(rows) + "\n"
