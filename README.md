# stackkit

Small, dependency-free stack and queue structures, plus a handful of classic
stack algorithms that work on plain Python lists.

## Installation

```
pip install stackkit
```

## What is inside

| Module                  | Contents                                                    |
|-------------------------|-------------------------------------------------------------|
| `stackkit.array_stack`  | `ArrayStack`: a stack with a fixed capacity                 |
| `stackkit.array_queue`  | `ArrayQueue`: a circular queue with a fixed capacity        |
| `stackkit.nstack`       | `NStack`: several stacks sharing one fixed pool of slots    |
| `stackkit.algorithms`   | reversing, sorting and checking things with stacks          |

### ArrayStack

```python
from stackkit.array_stack import ArrayStack

stack = ArrayStack(5)   # capacity defaults to 1000
stack.push(10)
stack.push(20)
stack.push(30)
stack.peek()      # 30
stack.pop()       # 30
len(stack)        # 2
stack.is_empty()  # False
stack.capacity    # 5
```

`push` on a full stack raises `OverflowError`; `pop` and `peek` on an empty
stack raise `IndexError`. A capacity below 1 raises `ValueError`.

### ArrayQueue

```python
from stackkit.array_queue import ArrayQueue

queue = ArrayQueue(6)   # capacity defaults to 16
for value in (4, 14, 24, 34):
    queue.push(value)
queue.top()   # 4
queue.pop()   # 4
queue.top()   # 14
len(queue)    # 3
```

The queue wraps around its fixed storage. `push` on a full queue raises
`OverflowError`; `pop` and `top` on an empty queue raise `IndexError`.
A capacity below 1 raises `ValueError`.

### NStack

`NStack(stacks, capacity)` keeps several stacks in a single pool of
`capacity` slots, handing free slots to whichever stack needs one. Stacks are
numbered from 1.

```python
from stackkit.nstack import NStack

stacks = NStack(3, 10)
stacks.push(10, 1)
stacks.push(20, 1)
stacks.push(30, 2)
stacks.pop(1)     # 20
stacks.pop(2)     # 30
stacks.stacks     # 3
stacks.capacity   # 10
```

- `push` raises `OverflowError` when every slot is in use.
- `pop` raises `IndexError` when the chosen stack is empty.
- Both raise `IndexError` for a stack number outside `1..stacks`.
- Fewer than one stack, or a capacity below 1, raises `ValueError`.

### Algorithms

The functions take a Python list used as a stack, with the top at the end,
and change it in place.

```python
from stackkit.algorithms import (
    delete_middle,
    insert_at_bottom,
    is_valid_parenthesis,
    reverse_stack,
    reverse_string,
    sort_stack,
)

reverse_string("Anurag")          # "garunA"
is_valid_parenthesis("{[()]}")    # True
is_valid_parenthesis("(a)")       # False: only brackets are allowed

stack = [1, 2, 3, 4, 5]
delete_middle(stack)              # stack is now [1, 2, 4, 5]

stack = [1, 2, 3]
insert_at_bottom(stack, 4)        # stack is now [4, 1, 2, 3]

stack = [1, 2, 3, 4, 5]
reverse_stack(stack)              # stack is now [5, 4, 3, 2, 1]

stack = [3, 5, 1, 4, 2]
sort_stack(stack)                 # stack is now [1, 2, 3, 4, 5], largest on top
```

`delete_middle` removes the element `len(stack) // 2` places below the top
and raises `IndexError` on an empty list.

## What it does not do

stackkit is a library only: it has no command-line program, and none of its
structures grow beyond the capacity they are created with or are safe to share
between threads without your own locking.

## Running the tests

```
pip install -e ".[test]"
pytest
```