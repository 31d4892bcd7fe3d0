from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from grel.functions import slice as gslice
from grel.functions.fn_slice import normalize_bounds
from grel.sequences import FieldsList, JsonArray

INDICES = [-1000, -6, -5, -3, -1, 0, 1, 2, 4, 5, 6, 1000]


@pytest.mark.parametrize('args,expected', [
    (('profound', 3), 'found'),
    (('profound', 2, 4), 'of'),
    (('profound', 0, -1), 'profoun'),
    (('profound', -5), 'found'),
    (('profound', -5, -3), 'fo'),
    (('profound', 4, 2), ''),
    (('profound', 100), ''),
    (('profound', -100), 'profound'),
    (('', 0), ''),
    (('', -1, 1), ''),
])
def test_slice_strings(args, expected):
    assert gslice(*args) == expected


@pytest.mark.parametrize('args,expected', [
    (([1, 2, 3, 4, 5], -2), [4, 5]),
    (([1, 2, 3], 5, 1), []),
    (([1, 2, 3], 1, -5), []),
    (([1, 2, 3], 0, 2), [1, 2]),
    (([], 0), []),
])
def test_slice_lists(args, expected):
    assert gslice(*args) == expected


def test_slice_none_subject():
    assert gslice(None, 1) is None
    assert gslice(None, 1, 2) is None


@pytest.mark.parametrize('bad', [None, 'a', '1', [1], True, 1j])
def test_slice_non_numeric_from(bad):
    assert gslice('profound', bad) is None
    assert gslice([1, 2, 3], bad, 2) is None


@pytest.mark.parametrize('bad', ['a', '2', [2], False, 2j])
def test_slice_non_numeric_to(bad):
    assert gslice('profound', 1, bad) is None
    assert gslice([1, 2, 3], 0, bad) is None


def test_slice_absent_to():
    assert gslice('profound', 2, None) == 'ofound'
    assert gslice('profound', 2) == 'ofound'


@pytest.mark.parametrize('frm,to,expected', [
    (1.9, None, 'rofound'),
    (-1.9, None, 'd'),
    (2.5, 4.99, 'of'),
    (0, -1.5, 'profoun'),
    (np.int64(2), np.int32(4), 'of'),
    (np.float32(2.7), None, 'ofound'),
    (Decimal('2.9'), Decimal('4'), 'of'),
    (Fraction(7, 2), None, 'found'),
    (float('nan'), 3, 'pro'),
    (float('-inf'), float('inf'), 'profound'),
    (float('inf'), None, ''),
])
def test_slice_numeric_truncation(frm, to, expected):
    assert gslice('profound', frm, to) == expected


def test_slice_textual_fallback():
    assert gslice(123456, 1, 3) == '23'
    assert gslice(12.5, -2) == '.5'
    assert gslice({'a': 1}, 0, 1) == '{'
    assert gslice(np.array(42), 0) == '42'


def test_slice_code_points():
    assert gslice('héllo wörld', 1, 4) == 'éll'
    assert gslice('a\U0001F600b', 1, 2) == '\U0001F600'


def test_slice_tuple():
    result = gslice((1, 2, 3, 4), 1, 3)
    assert result == (2, 3)
    assert isinstance(result, tuple)
    assert gslice((), 0) == ()


def test_slice_ndarray():
    data = np.arange(6)
    result = gslice(data, -4, -1)
    assert isinstance(result, np.ndarray)
    assert result.tolist() == [2, 3, 4]
    result[0] = 100
    assert data.tolist() == [0, 1, 2, 3, 4, 5]


def test_slice_ndarray_rows():
    data = np.arange(6).reshape((3, 2))
    assert gslice(data, 1).tolist() == [[2, 3], [4, 5]]


def test_slice_range():
    assert gslice(range(10), 7) == [7, 8, 9]


def test_slice_fields_list():
    fl = FieldsList(['a', 'b', 'c', 'd'])
    result = gslice(fl, 1, -1)
    assert isinstance(result, FieldsList)
    assert result == FieldsList(['b', 'c'])


def test_slice_fields_list_delegates():
    calls = []

    class Recorder(FieldsList):
        def get_sub_list(self, start, end):
            calls.append((start, end))
            return super().get_sub_list(start, end)

    gslice(Recorder([1, 2, 3]), -2, 10)
    assert calls == [(1, 3)]


def test_slice_json_array():
    node = JsonArray([{'x': 1}, 2, 'three', None])
    result = gslice(node, 1)
    assert result == [2, 'three', None]
    assert type(result) is list


def test_slice_does_not_mutate():
    data = [[1], [2], [3]]
    result = gslice(data, 0, 2)
    assert result == [[1], [2]]
    assert result is not data
    result.append(4)
    assert data == [[1], [2], [3]]
    # Elements are shared, not copied
    assert result[0] is data[0]


@pytest.mark.parametrize('subject', [
    [1, 2, 3, 4, 5],
    (1, 2, 3, 4, 5),
    JsonArray([1, 2, 3, 4, 5]),
    range(1, 6),
])
def test_result_length(subject):
    n = 5
    for frm in INDICES:
        for to in INDICES:
            start = frm + n if frm < 0 else frm
            start = min(n, max(0, start))
            end = to + n if to < 0 else to
            end = min(n, max(start, end))
            result = gslice(subject, frm, to)
            assert len(result) == end - start
            assert 0 <= len(result) <= n


@pytest.mark.parametrize('subject', ['abcde', [1, 2, 3, 4, 5]])
def test_double_slice(subject):
    for k in range(len(subject) + 1):
        once = gslice(subject, 0, k)
        assert gslice(once, 0, k) == once


@pytest.mark.parametrize('subject', ['abcde', [1, 2, 3, 4, 5]])
def test_negative_index_equivalence(subject):
    n = len(subject)
    for m in range(1, n + 1):
        assert gslice(subject, -m) == gslice(subject, n - m)
    # -0 is 0, so it keeps the whole subject
    assert gslice(subject, -0) == subject


@pytest.mark.parametrize('subject', ['abcde', [1, 2, 3, 4, 5]])
def test_saturation(subject):
    assert gslice(subject, -1000) == subject
    assert gslice(subject, 0) == subject
    assert len(gslice(subject, 1000)) == 0


@pytest.mark.parametrize('subject', [
    [], (), JsonArray([]), FieldsList([]), np.array([]),
])
def test_empty_sequences_stay_sequences(subject):
    result = gslice(subject, 0)
    assert not isinstance(result, str)
    assert len(result) == 0


def test_slice_strings_stay_strings():
    assert gslice('abc', 5) == ''
    assert isinstance(gslice('abc', 0, 0), str)


@pytest.mark.parametrize('length,start,end,expected', [
    (5, 0, None, (0, 5)),
    (5, -2, None, (3, 5)),
    (5, 5, 1, (5, 5)),
    (5, 2, -4, (2, 2)),
    (5, -10, -10, (0, 0)),
    (5, 10, 20, (5, 5)),
    (0, 3, -3, (0, 0)),
])
def test_normalize_bounds(length, start, end, expected):
    assert normalize_bounds(length, start, end) == expected


def test_slice_huge_indices():
    assert gslice('profound', Decimal('1E+999999999')) == ''
    assert gslice('profound', Decimal('-1E+999999999')) == 'profound'
    assert gslice('profound', 2, Decimal('1E+999999999')) == 'ofound'
    assert gslice([1, 2, 3], Fraction(-10 ** 5000, 3)) == [1, 2, 3]


def test_slice_large_sequence_in_place():
    assert gslice(range(10 ** 18), 0, 2) == [0, 1]
    assert gslice(range(10 ** 18), -2) == [10 ** 18 - 2, 10 ** 18 - 1]


def test_slice_custom_sequence_reads_only_the_range():
    from collections.abc import Sequence

    reads = []

    class Squares(Sequence):
        def __len__(self):
            return 1000

        def __getitem__(self, i):
            reads.append(i)
            return i * i

    assert gslice(Squares(), 3, 6) == [9, 16, 25]
    assert reads == [3, 4, 5]
