from typing import TypeVar

import pytest

from jsonmapper.core.models.typeref import TypeReference

T = TypeVar("T")


@pytest.mark.ut
def test_subscripted_instance():
    assert TypeReference[list[int]]().type == list[int]


@pytest.mark.ut
def test_explicit_argument():
    assert TypeReference(dict[str, int]).type == dict[str, int]


@pytest.mark.ut
def test_subclass_reference():
    class Ids(TypeReference[list[int]]):
        pass

    class MoreIds(Ids):
        pass

    assert Ids().type == list[int]
    assert MoreIds().type == list[int]


@pytest.mark.ut
def test_missing_argument_raises():
    with pytest.raises(TypeError):
        TypeReference().type


@pytest.mark.ut
def test_unbound_type_variable_raises():
    class Open(TypeReference[T]):
        pass

    with pytest.raises(TypeError):
        Open().type
