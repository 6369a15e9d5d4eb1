import numpy as np
from typing import Dict
from errors import ReservedByteInInput

# Reserved end-of-message marker, appended once to every message
TERMINATOR = 0
# Carriage returns are never coded
CR = 13

def normalize_message(message: bytes) -> bytes:
    """Drop CR bytes. Applied on the way in, so decoded output is CR-free too."""
    arr = np.frombuffer(bytes(message), dtype=np.uint8)
    return arr[arr != CR].tobytes()

def prepare_message(message: bytes) -> bytes:
    """
    Input: raw message bytes
    Output: CR-free message with TERMINATOR appended
    """
    data = normalize_message(message)
    arr = np.frombuffer(data, dtype=np.uint8)
    hits = np.flatnonzero(arr == TERMINATOR)
    if hits.size:
        raise ReservedByteInInput(f"terminator byte 0x{TERMINATOR:02x} found at offset {int(hits[0])}")
    return data + bytes([TERMINATOR])

def count_frequencies(data: bytes) -> Dict[int, int]:
    """
    Count each byte value. Keys come out in ascending symbol order,
    which is also the order the header is written in.
    """
    arr = np.frombuffer(bytes(data), dtype=np.uint8)
    counts = np.bincount(arr, minlength=256)
    return {int(s): int(counts[s]) for s in np.flatnonzero(counts)}
