import pytest

from stackkit.algorithms import (
    delete_middle,
    insert_at_bottom,
    is_valid_parenthesis,
    reverse_stack,
    reverse_string,
    sort_stack,
)


def test_reverse_string_example():
    assert reverse_string("Anurag") == "garunA"


@pytest.mark.parametrize("text", ["", "a", "abc", "racecar", "hello world"])
def test_reverse_string_round_trip(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


def test_delete_middle_odd():
    stack = [1, 2, 3, 4, 5]
    delete_middle(stack)
    assert stack == [1, 2, 4, 5]


def test_delete_middle_even():
    stack = [1, 2, 3, 4]
    delete_middle(stack)
    assert stack == [1, 3, 4]


def test_delete_middle_single():
    stack = [7]
    delete_middle(stack)
    assert stack == []


def test_delete_middle_empty_raises():
    with pytest.raises(IndexError):
        delete_middle([])


@pytest.mark.parametrize("text", ["{[()]}", "", "()[]{}", "(([]){})"])
def test_balanced(text):
    assert is_valid_parenthesis(text) is True


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "{{}", "(a)", "a"])
def test_unbalanced(text):
    assert is_valid_parenthesis(text) is False


def test_insert_at_bottom():
    stack = [1, 2, 3]
    insert_at_bottom(stack, 4)
    assert stack == [4, 1, 2, 3]
    assert stack[-1] == 3


def test_insert_at_bottom_empty():
    stack = []
    insert_at_bottom(stack, 9)
    assert stack == [9]


def test_reverse_stack():
    stack = [1, 2, 3, 4, 5]
    reverse_stack(stack)
    assert stack == [5, 4, 3, 2, 1]
    reverse_stack(stack)
    assert stack == [1, 2, 3, 4, 5]


def test_sort_stack_top_is_largest():
    stack = [3, 5, 1, 4, 2]
    sort_stack(stack)
    assert stack == [1, 2, 3, 4, 5]
    assert stack.pop() == 5


def test_sort_stack_keeps_duplicates():
    stack = [2, 2, 1, 3, 1]
    sort_stack(stack)
    assert stack == [1, 1, 2, 2, 3]