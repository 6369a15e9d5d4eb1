from fractions import Fraction
import numpy as np

def _weights(freqs: dict):
    syms = np.array(list(freqs.keys()), dtype=np.int64)
    counts = np.array(list(freqs.values()), dtype=np.float64)
    return syms, counts

def entropy_bits(freqs: dict) -> float:
    """Shannon entropy of the symbol distribution, in bits per symbol."""
    _, counts = _weights(freqs)
    p = counts / counts.sum()
    return float(-np.sum(p * np.log2(p)))

def mean_code_length(freqs: dict, lengths: dict) -> float:
    syms, counts = _weights(freqs)
    L = np.array([lengths[int(s)] for s in syms], dtype=np.float64)
    return float(np.sum(counts * L) / counts.sum())

def kraft_sum(lengths: dict) -> Fraction:
    # exact; float sums drift once lengths get long
    return sum((Fraction(1, 2 ** L) for L in lengths.values()), Fraction(0))

def compression_ratio(raw_size: int, packed_size: int) -> float:
    if packed_size == 0:
        return float("inf")
    return float(raw_size) / float(packed_size)
