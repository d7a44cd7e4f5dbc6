import pytest

from dsalgo.stacks import ArrayStack, LinkedStack, StackOverflowError, StackUnderflowError


@pytest.fixture
def full_array_stack():
    stack = ArrayStack(5)
    for value in (10, 20, 30, 40, 50):
        stack.push(value)
    return stack


def test_array_stack_push_onto_full_raises(full_array_stack):
    assert full_array_stack.is_full()
    with pytest.raises(StackOverflowError, match="Stack Overflow!"):
        full_array_stack.push(60)
    assert len(full_array_stack) == 5


def test_array_stack_slots_top_down(full_array_stack):
    assert full_array_stack.slots() == [50, 40, 30, 20, 10]


def test_array_stack_peek(full_array_stack):
    assert full_array_stack.peek() == 50


def test_array_stack_pops_in_reverse(full_array_stack):
    popped = []
    while full_array_stack:
        popped.append(full_array_stack.pop())
    assert popped == [50, 40, 30, 20, 10]


def test_array_stack_pop_empty_raises(full_array_stack):
    while full_array_stack:
        full_array_stack.pop()
    with pytest.raises(StackUnderflowError, match="Stack Underflow!"):
        full_array_stack.pop()


def test_array_stack_peek_empty_raises():
    with pytest.raises(StackUnderflowError, match="Stack is empty!"):
        ArrayStack(3).peek()


def test_array_stack_unused_slots_are_zero():
    stack = ArrayStack(4)
    stack.push(7)
    stack.push(9)
    assert stack.slots() == [0, 0, 9, 7]
    stack.pop()
    assert stack.slots() == [0, 0, 0, 7]


def test_linked_stack_peek_and_pop_order():
    stack = LinkedStack()
    for value in (10, 20, 30):
        stack.push(value)
    assert stack.peek() == 30
    seen = []
    while stack:
        seen.append(stack.peek())
        stack.pop()
    assert seen == [30, 20, 10]


def test_linked_stack_pop_empty_raises():
    stack = LinkedStack()
    stack.push(10)
    stack.pop()
    with pytest.raises(StackUnderflowError, match="Cannot pop from an empty stack"):
        stack.pop()


def test_linked_stack_peek_empty_raises():
    with pytest.raises(StackUnderflowError, match="Cannot peek on an empty stack"):
        LinkedStack().peek()


def test_linked_stack_length_tracks_pushes_and_pops():
    stack = LinkedStack()
    for value in range(6):
        stack.push(value)
    assert len(stack) == 6
    assert stack.pop() == 5
    assert len(stack) == 5