import math

import pytest

from polyats.numarray import NumArray
from polyats.tcomplex import TComplex


def test_new_array_is_zero_and_undefined():
    arr = NumArray(3)
    assert len(arr) == 3
    assert list(arr) == [0, 0, 0]
    assert [arr.is_defined(i) for i in range(3)] == [False, False, False]


@pytest.mark.parametrize("size", [0, -2])
def test_empty_array(size):
    arr = NumArray(size)
    assert len(arr) == 0
    assert str(arr) == "[]"


def test_push_back_fills_first_undefined_slot():
    arr = NumArray(2)
    arr[1] = 5.0
    arr.push_back(7.0)
    assert list(arr) == [7.0, 5.0]
    arr.push_back(9.0)
    assert list(arr) == [7.0, 5.0]
    assert arr.is_defined(0) and arr.is_defined(1)


def test_str_formats():
    arr = NumArray(3)
    arr.read("1.5 2 3")
    assert str(arr) == "[1.5, 2, 3]"
    carr = NumArray(2)
    carr.read(["1+2i", "3"], TComplex.parse)
    assert str(carr) == "[1+2i, 3]"


def test_read_marks_all_defined():
    arr = NumArray(3)
    arr.read("4 5 6")
    assert list(arr) == [4.0, 5.0, 6.0]
    assert all(arr.is_defined(i) for i in range(3))


def test_read_too_few_tokens():
    arr = NumArray(3)
    with pytest.raises(ValueError):
        arr.read("1 2")


def test_index_errors():
    arr = NumArray(2)
    with pytest.raises(IndexError):
        arr[2]
    with pytest.raises(IndexError):
        arr[5] = 1.0
    assert len(arr) == 2
    assert list(arr) == [0, 0]
    assert [arr.is_defined(i) for i in range(2)] == [False, False]


def test_mean_and_deviation_of_constant():
    arr = NumArray(4)
    arr.read("3 3 3 3")
    assert arr.arithmetic_mean() == 3
    assert arr.root_mean_square_deviation() == 0


def test_mean_value():
    arr = NumArray(4)
    arr.read("1 2 3 4")
    assert arr.arithmetic_mean() == 2.5


def test_mean_of_empty_raises():
    with pytest.raises(ValueError):
        NumArray(0).arithmetic_mean()


def test_deviation_single_value_is_zero():
    arr = NumArray(1)
    arr.read("42")
    assert arr.root_mean_square_deviation() == 0


def test_deviation_shift_and_scale():
    base = NumArray(5)
    base.read("1 4 2 8 5")
    shifted = NumArray(5)
    shifted.read([str(v + 10) for v in base])
    scaled = NumArray(5)
    scaled.read([str(v * 2) for v in base])
    dev = base.root_mean_square_deviation()
    assert math.isclose(shifted.root_mean_square_deviation(), dev)
    assert math.isclose(scaled.root_mean_square_deviation(), 2 * dev)


def test_complex_mean_of_conjugates_is_real():
    arr = NumArray(2)
    arr.read("1+2i 1-2i", TComplex.parse)
    assert arr.arithmetic_mean() == TComplex(1)


def test_resize_grow_and_shrink():
    arr = NumArray(2)
    arr.read("7 8")
    arr.resize(4)
    assert list(arr) == [7.0, 8.0, 0, 0]
    assert [arr.is_defined(i) for i in range(4)] == [True, True, False, False]
    arr.push_back(9.0)
    assert arr[2] == 9.0
    arr.resize(1)
    assert list(arr) == [7.0]
    arr.resize(0)
    assert len(arr) == 0


def test_resize_from_empty():
    arr = NumArray(0)
    arr.resize(2)
    assert list(arr) == [0, 0]
    arr.push_back(1.0)
    assert list(arr) == [1.0, 0]


def test_sort_ascending_and_descending():
    values = [5.0, -1.0, 3.0, 3.0, 0.5]
    arr = NumArray(len(values))
    arr.read([str(v) for v in values])
    arr.sort(True)
    assert list(arr) == sorted(values)
    arr.sort(False)
    assert list(arr) == sorted(values, reverse=True)


def test_sort_complex_by_magnitude():
    arr = NumArray(4)
    arr.read("3+4i 1 0-2i 1+1i", TComplex.parse)
    arr.sort(True)
    magnitudes = [v.magnitude() for v in arr]
    assert magnitudes == sorted(magnitudes)
    arr.sort(False)
    magnitudes = [v.magnitude() for v in arr]
    assert magnitudes == sorted(magnitudes, reverse=True)