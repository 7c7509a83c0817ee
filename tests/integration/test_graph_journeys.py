"""End-to-end copy scenarios over realistic value graphs."""

from dataclasses import dataclass, field

import pytest
from hypothesis import given
from hypothesis import strategies as st

from graphcopy import (
    CopyError,
    KeyCollisionWarning,
    Ref,
    ShapeNotSupportedError,
    copy,
    must_copy,
)


@dataclass
class Sample:
    _a: int
    mapping: dict[int, int]
    number: int
    array: tuple[int, int, int, int]
    sequence: list[int]


def new_sample() -> Sample:
    sample = Sample(_a=121, mapping={}, number=0, array=(0, 0, 0, 0), sequence=[0] * 10)
    sample.mapping[2] = 2
    sample.array = (0, 0, 0, 3)
    sample.sequence[4] = 4
    return sample


@dataclass
class Team:
    name: str
    lead: Ref["Person"]
    reviewer: Ref["Person"]


@dataclass
class Person:
    name: str
    skills: list[str] = field(default_factory=list)


@dataclass
class Task:
    title: str
    next: Ref["Task"] = field(default_factory=Ref)
    _cache: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Tag:
    label: str
    _source: str = ""


def test_copy_is_independent_of_original():
    original = new_sample()
    copied = must_copy(original)

    copied.mapping[2] = 3
    copied.array = copied.array[:3] + (4,)
    original.sequence[4] = 5

    assert original.mapping[2] == 2
    assert original.array[3] == 3
    assert copied.sequence[4] == 4
    assert copied._a == 0
    assert copied.number == original.number


def test_shared_target_stays_shared():
    person = Ref(Person("ada", ["review"]))
    team = Team(name="core", lead=person, reviewer=person)

    copied = copy(team)

    assert copied.lead is copied.reviewer
    assert copied.lead is not person
    copied.lead.get().skills.append("lead")
    assert copied.reviewer.get().skills == ["review", "lead"]
    assert person.get().skills == ["review"]


def test_cyclic_chain_is_reproduced():
    first, second, third = Task("first"), Task("second"), Task("third")
    head = Ref(first)
    first.next = Ref(second)
    second.next = Ref(third)
    third.next = head

    copied = copy(head)

    node = copied
    titles = []
    for _ in range(4):
        titles.append(node.get().title)
        node = node.get().next
    assert titles == ["first", "second", "third", "first"]
    assert node is copied.get().next
    assert copied.get().next.get().next.get().next is copied


def test_null_reference_field():
    copied = copy(Task("alone"))

    assert copied.next.is_null
    assert copied.title == "alone"


def test_private_fields_are_reset():
    original = Task("cached", _cache={"hits": 3})
    copied = copy(original)

    assert copied._cache == {}
    assert original._cache == {"hits": 3}


def test_unsupported_value_deep_inside_graph():
    graph = {"tasks": [Task("ok"), Task("bad", next=Ref(lambda: None))]}

    with pytest.raises(CopyError) as info:
        copy(graph)

    error = info.value
    path = []
    while getattr(error, "cause", None) is not None:
        path.append(type(error).__name__)
        error = error.cause
    assert path == ["EntryCopyError", "ElementCopyError", "FieldCopyError", "ReferenceCopyError"]
    assert isinstance(error, ShapeNotSupportedError)


def test_colliding_keys_do_not_raise():
    original = {Tag("x", "a"): 1, Tag("x", "b"): 2, Tag("y"): 3}

    with pytest.warns(KeyCollisionWarning) as record:
        copied = copy(original)

    assert len(copied) <= len(original)
    assert copied[Tag("y")] == 3
    assert record[0].filename == __file__


json_like = st.recursive(
    st.none()
    | st.booleans()
    | st.integers()
    | st.floats(allow_nan=False)
    | st.text(max_size=5),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=3), children, max_size=4)
    | st.lists(children, max_size=3).map(tuple),
    max_leaves=25,
)


def _mutable_ids(value, found=None):
    found = set() if found is None else found
    if isinstance(value, (list, dict)):
        found.add(id(value))
    if isinstance(value, dict):
        for item in value.values():
            _mutable_ids(item, found)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _mutable_ids(item, found)
    return found


@given(json_like)
def test_copy_equals_original_and_shares_no_containers(value):
    copied = copy(value)

    assert copied == value
    assert not (_mutable_ids(value) & _mutable_ids(copied))
