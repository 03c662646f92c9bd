import pytest

from dsalgo.stacks import ArrayStack, LinkedStack, balanced_parentheses


def _stack(kind, values=()):
    stack = ArrayStack(1) if kind == "array" else LinkedStack()
    for value in values:
        stack.push(value)
    return stack


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_lifo_order(kind):
    stack = _stack(kind, (3, 6, 9))
    assert len(stack) == 3
    assert stack.peek() == 9
    assert [stack.pop() for _ in range(3)] == [9, 6, 3]
    assert stack.is_empty()


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_empty_stack_raises(kind):
    stack = _stack(kind)
    assert stack.is_empty()
    for operation in (stack.pop, stack.peek):
        with pytest.raises(IndexError, match="Stack is empty"):
            operation()


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_grows_past_initial_capacity(kind):
    values = list(range(50))
    stack = _stack(kind, values)
    assert len(stack) == 50
    assert [stack.pop() for _ in values] == values[::-1]


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_peek_does_not_remove(kind):
    stack = _stack(kind, (5,))
    assert stack.peek() == 5
    assert len(stack) == 1
    assert stack.pop() == 5


@pytest.mark.parametrize("capacity", [0, -3])
def test_array_stack_rejects_bad_capacity(capacity):
    with pytest.raises(ValueError):
        ArrayStack(capacity)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", True),
        ("()", True),
        ("(())()", True),
        ("(a(b)c)", True),
        ("(()", False),
        ("((", False),
        (")(", False),
        ("())", True),
    ],
)
def test_balanced_parentheses(text, expected):
    assert balanced_parentheses(text) is expected