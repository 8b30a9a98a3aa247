import pytest

from stackkit.array_stack import ArrayStack


def test_example_from_source():
    s = ArrayStack()
    for value in (6, 7, 3):
        s.push(value)
    assert s.peek() == 3
    assert len(s) == 3
    assert s.pop() == 3
    assert len(s) == 2
    assert s.peek() == 7


def test_second_example_from_source():
    st = ArrayStack(5)
    st.push(10)
    st.push(20)
    st.push(30)
    assert st.peek() == 30
    st.pop()
    assert st.peek() == 20
    st.pop()
    assert st.peek() == 10
    st.pop()
    assert st.is_empty() is True
    with pytest.raises(IndexError):
        st.peek()


def test_fills_to_capacity_then_overflows():
    st = ArrayStack(3)
    for value in range(3):
        st.push(value)
    assert len(st) == st.capacity
    with pytest.raises(OverflowError):
        st.push(99)
    assert len(st) == 3


def test_pop_empty_raises():
    st = ArrayStack(2)
    with pytest.raises(IndexError):
        st.pop()


def test_lifo_order():
    st = ArrayStack(10)
    items = list("abcdef")
    for item in items:
        st.push(item)
    assert st.is_empty() is False
    assert [st.pop() for _ in items] == items[::-1]
    assert st.is_empty() is True


def test_default_capacity_and_bad_capacity():
    assert ArrayStack().capacity == 1000
    with pytest.raises(ValueError):
        ArrayStack(0)