import pytest

from dsakit.stacks import (
    QueueUsingStacks,
    Stack,
    StackUsingQueues,
    check_redundant_parentheses,
    is_balanced,
    next_greater_elements,
    smallest_nine_zero_multiple,
)

ITEMS = ["2", "5", "7", "8", "3", "9"]


def test_stack_is_last_in_first_out():
    stack = Stack()
    for item in ITEMS:
        stack.push(item)
    assert len(stack) == len(ITEMS)
    assert stack.peek() == ITEMS[-1]
    assert [stack.pop() for _ in ITEMS] == ITEMS[::-1]
    assert len(stack) == 0


def test_empty_stack_raises():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_queue_using_stacks_is_first_in_first_out():
    queue = QueueUsingStacks()
    for item in ["23", "24", "45"]:
        queue.enqueue(item)
    assert queue.dequeue() == "23"
    queue.enqueue("99")
    assert [queue.dequeue() for _ in range(len(queue))] == ["24", "45", "99"]


def test_empty_queue_raises():
    with pytest.raises(IndexError):
        QueueUsingStacks().dequeue()


def test_stack_using_queues_is_last_in_first_out():
    stack = StackUsingQueues()
    stack.push("2")
    stack.push("5")
    assert stack.pop() == "5"
    for item in ITEMS:
        stack.push(item)
    assert len(stack) == len(ITEMS) + 1
    assert [stack.pop() for _ in range(len(stack))] == ITEMS[::-1] + ["2"]


def test_empty_stack_using_queues_raises():
    with pytest.raises(IndexError):
        StackUsingQueues().pop()


def test_balanced_source_example():
    assert is_balanced("{()[]}")


@pytest.mark.parametrize("text", ["{(])}", "(", ")", "(()", "]["])
def test_unbalanced_inputs(text):
    assert not is_balanced(text)


@pytest.mark.parametrize("inner", ["", "()", "{[]}", "a+(b*c)"])
def test_wrapping_keeps_balance(inner):
    assert is_balanced(inner)
    for opener, closer in ["()", "[]", "{}"]:
        assert is_balanced(opener + inner + closer)


def test_redundant_source_example():
    assert check_redundant_parentheses("(((a+b)+c))")


@pytest.mark.parametrize("expr", ["(a+b", "a+b)"])
def test_redundant_check_rejects_unbalanced(expr):
    with pytest.raises(ValueError):
        check_redundant_parentheses(expr)


@pytest.mark.parametrize(
    "values", [[2, 4, 8, 3, 20], [5, 4, 3, 2, 1], [1, 3, 2, 4, 2, 5], []]
)
def test_next_greater_elements_invariants(values):
    result = next_greater_elements(values)
    assert len(result) == len(values)
    for index, (value, greater) in enumerate(zip(values, result)):
        later = values[index + 1:]
        if greater is None:
            assert all(other <= value for other in later)
        else:
            position = next(i for i, other in enumerate(later) if other > value)
            assert later[position] == greater


def test_last_element_has_no_greater():
    assert next_greater_elements([2, 4, 8, 3, 20])[-1] is None


@pytest.mark.parametrize("num", [1, 2, 3, 7, 9, 12, 111])
def test_nine_zero_multiple_properties(num):
    result = smallest_nine_zero_multiple(num)
    assert result > 0
    assert result % num == 0
    assert set(str(result)) <= {"9", "0"}
    assert str(result).startswith("9")


def test_nine_divides_itself():
    assert smallest_nine_zero_multiple(9) == 9


@pytest.mark.parametrize("num", [0, -4])
def test_nine_zero_multiple_rejects_non_positive(num):
    with pytest.raises(ValueError):
        smallest_nine_zero_multiple(num)