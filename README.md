# linkstack

This package provides a few small container types. It has no dependencies.

- `CircularQueue` (`linkstack.circular_queue`) is a first-in, first-out queue with a fixed capacity. It stores its values in a ring buffer.
- `BoundedStack` (`linkstack.bounded_stack`) is a last-in, first-out stack with a fixed capacity. It can drop every value below a threshold or every value above one, and the remaining values keep their order.
- `DynamicStack` (`linkstack.dynamic_stack`) is a last-in, first-out stack with no size limit. It is built from linked nodes.
- `SinglyLinkedList` (`linkstack.linked_list`) is a list that you can append to, iterate over and reverse in place.
- `DoublyLinkedList` (`linkstack.linked_list`) is a list that you can iterate over in either direction. Each value is held in a `DoublyNode`, and you can unlink a node that you hold a reference to.

The package is a library only. It has no command-line tool, and none of the containers prints anything. Errors are raised as exceptions.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Circular queue

```python
from linkstack.circular_queue import CircularQueue, QueueOverflowError

queue = CircularQueue(4)     # the default capacity is 4
for value in (3, 5, 7, 2):
    queue.enqueue(value)

queue.is_full()      # True
queue.dequeue()      # 3
queue.peek()         # 5
list(queue)          # [5, 7, 2], front to rear
len(queue)           # 3

queue.enqueue(1)
try:
    queue.enqueue(10)
except QueueOverflowError:
    ...
```

- `dequeue` and `peek` on an empty queue raise `QueueUnderflowError`.
- `QueueOverflowError` and `QueueUnderflowError` are both subclasses of `IndexError`.
- A capacity below 1 raises `ValueError`.
- The `capacity` property returns the number of slots.

### Bounded stack

```python
from linkstack.bounded_stack import BoundedStack, StackOverflowError

stack = BoundedStack(4)   # the default capacity is 4
stack.push(3)
stack.push(4)
stack.push(2)

stack.remove_upper(3)   # keep only values <= 3
stack.peek()            # 2
list(stack)             # [2, 3], top to bottom
len(stack)              # 2
```

- `remove_lower(threshold)` keeps only the values that are `>= threshold`.
- `push` on a full stack raises `StackOverflowError`.
- `pop` and `peek` on an empty stack raise `StackUnderflowError`, which is defined in `linkstack.dynamic_stack`.
- `is_empty()`, `is_full()` and the `capacity` property are also available.
- A capacity below 1 raises `ValueError`.

### Dynamic stack

```python
from linkstack.dynamic_stack import DynamicStack, StackUnderflowError

stack = DynamicStack()
stack.push(2)
stack.peek()      # 2
stack.pop()       # 2
stack.is_empty()  # True
```

- `pop` and `peek` on an empty stack raise `StackUnderflowError`, a subclass of `IndexError`.
- Iterating over the stack yields its values from top to bottom.

### Linked lists

```python
from linkstack.linked_list import SinglyLinkedList, DoublyLinkedList, DoublyNode

singly = SinglyLinkedList([1, 2, 3])
singly.append(4)
singly.reverse()
singly.render()              # "4 3 2 1"
SinglyLinkedList().render()  # "Empty list"

doubly = DoublyLinkedList()
nodes = [DoublyNode(v) for v in (1, 2, 3, 4)]
for node in nodes:
    doubly.append_node(node)

doubly.remove_node(nodes[1])
list(doubly)                 # [1, 3, 4]
list(reversed(doubly))       # [4, 3, 1]
doubly.render(reverse=True)  # "4 3 1"
DoublyLinkedList().render()  # "Empty List"
```

- `DoublyLinkedList.append(value)` creates a new node and returns it.
- `head` and `tail` give the first and last nodes. Each node has `value`, `prev` and `next`.
- A node can belong to only one list at a time:
  - `append_node` raises `ValueError` if the node is already in a list.
  - `remove_node` raises `ValueError` if the node is not in this list.
  - After a node has been removed, you can append it again.