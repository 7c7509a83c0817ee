"""Tests for tuple and list copiers."""

from collections import namedtuple

import pytest

from graphcopy import ElementCopyError, Shape, ShapeMismatchError, ShapeNotSupportedError
from graphcopy.copiers import DynamicSequenceCopier, FixedArrayCopier

Point = namedtuple("Point", ["x", "y"])


class Stack(list):
    """List subclass with an __init__ the copier must not call."""

    def __init__(self, name):
        super().__init__()
        self.name = name


@pytest.fixture
def tuple_copier():
    return FixedArrayCopier()


@pytest.fixture
def list_copier():
    return DynamicSequenceCopier()


def test_tuple_items_are_copied(tuple_copier, tracker, dispatcher):
    original = ([1, 2], {"k": [3]}, "s")
    copied = tuple_copier.copy(original, tracker, dispatcher)

    assert copied == original
    assert copied[0] is not original[0]
    assert copied[1]["k"] is not original[1]["k"]


def test_tuple_elements_are_independent(tuple_copier, tracker, dispatcher):
    original = ([0], [0], [0], [3])
    copied = tuple_copier.copy(original, tracker, dispatcher)

    copied[3][0] = 4

    assert original[3][0] == 3


def test_named_tuple_class_is_kept(tuple_copier, tracker, dispatcher):
    copied = tuple_copier.copy(Point([1], 2), tracker, dispatcher)

    assert type(copied) is Point
    assert copied.x == [1]
    assert copied.y == 2


def test_empty_tuple(tuple_copier, tracker, dispatcher):
    assert tuple_copier.copy((), tracker, dispatcher) == ()


def test_tuple_failure_reports_index(tuple_copier, tracker, dispatcher):
    with pytest.raises(ElementCopyError, match="index 2") as info:
        tuple_copier.copy((1, 2, print), tracker, dispatcher)

    assert info.value.index == 2
    assert isinstance(info.value.cause, ShapeNotSupportedError)
    assert info.value.__cause__ is info.value.cause


def test_tuple_copier_rejects_lists(tuple_copier, tracker, dispatcher):
    with pytest.raises(ShapeMismatchError) as info:
        tuple_copier.copy([1], tracker, dispatcher)

    assert info.value.expected is Shape.FIXED_ARRAY
    assert info.value.actual is Shape.DYNAMIC_SEQUENCE


def test_list_is_new_and_equal(list_copier, tracker, dispatcher):
    original = [0, 0, 0, 0, [4]]
    copied = list_copier.copy(original, tracker, dispatcher)

    assert copied == original
    assert copied is not original
    assert copied[4] is not original[4]


def test_list_keeps_none_slots(list_copier, tracker, dispatcher):
    assert list_copier.copy([None, 1, None], tracker, dispatcher) == [None, 1, None]


def test_list_subclass_is_kept_without_init(list_copier, tracker, dispatcher):
    original = Stack("jobs")
    original.extend([1, [2]])

    copied = list_copier.copy(original, tracker, dispatcher)

    assert type(copied) is Stack
    assert list(copied) == [1, [2]]
    assert not hasattr(copied, "name")


def test_list_failure_reports_first_failing_index(list_copier, tracker, dispatcher):
    with pytest.raises(ElementCopyError) as info:
        list_copier.copy([1, len, print], tracker, dispatcher)

    assert info.value.index == 1


def test_list_copier_rejects_tuples(list_copier, tracker, dispatcher):
    with pytest.raises(ShapeMismatchError):
        list_copier.copy((1,), tracker, dispatcher)
