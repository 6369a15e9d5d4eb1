import pytest
from symbols import TERMINATOR, CR, normalize_message, prepare_message, count_frequencies
from errors import ReservedByteInInput


def test_prepare_appends_terminator():
	assert prepare_message(b"abc") == b"abc\x00"


def test_prepare_empty_message():
	assert prepare_message(b"") == bytes([TERMINATOR])


def test_cr_bytes_are_dropped():
	assert normalize_message(b"a\r\nb\r") == b"a\nb"
	assert prepare_message(b"\r\r") == b"\x00"


def test_terminator_in_input_is_rejected():
	with pytest.raises(ReservedByteInInput):
		prepare_message(b"ab\x00c")


def test_count_frequencies_sorted_by_symbol():
	freqs = count_frequencies(b"cabca\x00")
	assert freqs == {0: 1, 97: 2, 98: 1, 99: 2}
	assert list(freqs) == [0, 97, 98, 99]
	assert all(type(k) is int and type(v) is int for k, v in freqs.items())


def test_count_frequencies_never_sees_cr_after_prepare():
	freqs = count_frequencies(prepare_message(b"x\r\ny"))
	assert CR not in freqs
	assert freqs[TERMINATOR] == 1
