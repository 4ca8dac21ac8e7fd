import pytest

from quanlyvattu.models import Material
from quanlyvattu.stack import MaterialStack


def _material(i):
    return Material(f"vt-{i:07d}", f"m{i}", "cai", i)


def test_lifo_order():
    stack = MaterialStack()
    items = [_material(i) for i in range(5)]
    for item in items:
        stack.push(item)
    assert [stack.pop() for _ in range(5)] == list(reversed(items))
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = MaterialStack()
    assert stack.peek() is None
    item = _material(1)
    stack.push(item)
    assert stack.peek() is item
    assert len(stack) == 1


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        MaterialStack().pop()


def test_default_capacity_is_500():
    stack = MaterialStack()
    for i in range(500):
        stack.push(i)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(500)
    assert len(stack) == 500


def test_custom_capacity():
    stack = MaterialStack(capacity=2)
    stack.push(1)
    assert not stack.is_full()
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(3)