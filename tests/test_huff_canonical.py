import random
import pytest
from fractions import Fraction
from huff_canonical import (build_tree, collect_lengths, build_code_lengths, canonical_order,
                            canonical_codes_from_lengths, build_decode_table, validate_code_lengths)
from metrics import kraft_sum
from errors import InvalidSymbolCount, InvalidCodeTable


def _bits(codes):
	return {s: format(c, f"0{L}b") for s, (c, L) in codes.items()}


def _random_freqs(rng, k):
	syms = rng.sample([s for s in range(256) if s != 13], k)
	return {s: rng.randint(1, 1000) for s in syms}


def test_tree_shape_for_ab():
	root = build_tree({0: 1, 97: 1, 98: 1})
	assert root.freq == 3
	assert root.left.is_leaf and root.left.sym == 98
	assert root.right.left.sym == 0
	assert root.right.right.sym == 97


def test_single_symbol_gets_length_one():
	root = build_tree({0: 1})
	assert root.is_leaf
	assert collect_lengths(root) == {0: 1}
	assert canonical_codes_from_lengths({0: 1}) == {0: (0, 1)}


def test_empty_alphabet_rejected():
	with pytest.raises(InvalidSymbolCount):
		build_tree({})


def test_canonical_codes_for_ab():
	lengths = build_code_lengths({0: 1, 97: 1, 98: 1})
	assert lengths == {0: 2, 97: 2, 98: 1}
	assert canonical_order(lengths) == [(98, 1), (0, 2), (97, 2)]
	assert _bits(canonical_codes_from_lengths(lengths)) == {98: "0", 0: "10", 97: "11"}


def test_length_jump_shifts_code():
	codes = canonical_codes_from_lengths({1: 1, 2: 3, 3: 3, 4: 3, 5: 3})
	assert _bits(codes) == {1: "0", 2: "100", 3: "101", 4: "110", 5: "111"}


@pytest.mark.parametrize("seed", range(20))
def test_kraft_equality(seed):
	rng = random.Random(seed)
	freqs = _random_freqs(rng, rng.randint(2, 255))
	assert kraft_sum(build_code_lengths(freqs)) == 1


def test_kraft_single_symbol():
	assert kraft_sum(build_code_lengths({0: 5})) == Fraction(1, 2)


@pytest.mark.parametrize("seed", range(10))
def test_prefix_free_and_symbol_monotone(seed):
	rng = random.Random(seed)
	freqs = _random_freqs(rng, rng.randint(2, 120))
	codes = canonical_codes_from_lengths(build_code_lengths(freqs))
	bits = _bits(codes)
	words = sorted(bits.values())
	for a, b in zip(words, words[1:]):
		assert not b.startswith(a)
	for a, (ca, la) in codes.items():
		for b, (cb, lb) in codes.items():
			if la == lb and a < b:
				assert ca < cb
			if la < lb:
				assert ca < (cb >> (lb - la))


def test_deep_tree_from_fibonacci_weights():
	fib = [1, 1]
	while len(fib) < 30:
		fib.append(fib[-1] + fib[-2])
	freqs = {s: f for s, f in zip(range(100, 130), fib)}
	lengths = build_code_lengths(freqs)
	assert max(lengths.values()) == 29
	assert kraft_sum(lengths) == 1


def test_insertion_order_does_not_change_codes():
	freqs = {0: 3, 10: 3, 65: 3, 66: 3, 200: 3, 7: 1}
	reordered = dict(reversed(list(freqs.items())))
	a = canonical_codes_from_lengths(build_code_lengths(freqs))
	b = canonical_codes_from_lengths(build_code_lengths(reordered))
	assert a == b


def test_decode_table_inverts_codes():
	codes = canonical_codes_from_lengths({0: 2, 97: 2, 98: 1})
	assert build_decode_table(codes) == {(1, 0): 98, (2, 2): 0, (2, 3): 97}


def test_validate_accepts_good_table():
	assert validate_code_lengths([(97, 2), (0, 2), (98, 1)]) == {97: 2, 0: 2, 98: 1}
	assert validate_code_lengths([(0, 1)]) == {0: 1}


@pytest.mark.parametrize("entries", [
	[(0, 1), (0, 1)],              # duplicate symbol
	[(97, 1), (98, 1)],            # no terminator
	[(0, 1), (97, 1), (98, 1)],    # over-subscribed
	[(0, 1), (97, 2)],             # incomplete
	[(0, 0), (97, 1)],             # zero length
	[(0, 2)],                      # lone symbol must be 1 bit
])
def test_validate_rejects_bad_tables(entries):
	with pytest.raises(InvalidCodeTable):
		validate_code_lengths(entries)
