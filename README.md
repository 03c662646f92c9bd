# dsalgo

Classic data structures and algorithms written in plain Python with no
third-party dependencies. It is meant for studying how these structures work
and for comparing the simple sorting algorithms against each other.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                | Contents |
|-----------------------|----------|
| `dsalgo.search`       | `binary_search` for ascending sequences and `reverse_binary_search` for descending ones; both return the index or `None` |
| `dsalgo.sorting`      | In-place `selection_sort`, `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort_last_pivot`, `quick_sort` (random pivot), `counting_sort`, and `random_vector` to build test data |
| `dsalgo.hashtable`    | `HashTable`, a separate-chaining map from integer keys to strings |
| `dsalgo.bst`          | `BinarySearchTree` (no duplicates) and `balanced_from_sorted` |
| `dsalgo.avl`          | `AVLTree`, a self-balancing tree that keeps duplicates |
| `dsalgo.lists`        | `ArrayList`, `LinkedList` and `DoublyLinkedList` |
| `dsalgo.ordered_list` | `OrderedList`, a list that keeps its values in ascending order |
| `dsalgo.deques`       | `ArrayDeque` (circular array) and `LinkedDeque` (doubly linked) |
| `dsalgo.queues`       | `ArrayQueue` (fixed capacity), `LinkedQueue` and `BinaryHeap` (a min-heap) |
| `dsalgo.stacks`       | `ArrayStack`, `LinkedStack` and `balanced_parentheses` |

## Examples

Searching:

```python
from dsalgo.search import binary_search, reverse_binary_search

binary_search([1, 3, 5, 7, 9], 7)          # 3
reverse_binary_search([9, 7, 5, 3, 1], 7)  # 1
binary_search([1, 3, 5], 4)                # None
```

Sorting (every function sorts the list it is given in place):

```python
import random
from dsalgo.sorting import merge_sort, quick_sort, random_vector

values = random_vector(20, rng=random.Random(1))
merge_sort(values)

other = [5, 2, 9, 1]
quick_sort(other, rng=random.Random(7))
```

Trees:

```python
from dsalgo.avl import AVLTree
from dsalgo.bst import BinarySearchTree, balanced_from_sorted

tree = BinarySearchTree([50, 30, 45, 32, 10, 90, 55])
print(45 in tree, tree.min(), tree.max(), len(tree), tree.height())
print(tree.preorder(), tree.inorder(), tree.postorder(), tree.level_order())
tree.remove(45)

balanced = balanced_from_sorted(range(1, 11))
print(balanced.level_order())

avl = AVLTree([20, 8, 1, 9, 19, 11])
print(avl.level_order(), avl.is_avl())
```

A hash table:

```python
from dsalgo.hashtable import HashTable

table = HashTable(4)
table.put(1, "one")
table.put(2, "two")
print(table.get(1), len(table), table.load_factor())
table.remove(2)
```

Lists:

```python
from dsalgo.lists import DoublyLinkedList
from dsalgo.ordered_list import OrderedList

items = DoublyLinkedList()
items.add(1)
items.add(3)
items.insert(2, 1)
items.reverse()
print(list(items), list(reversed(items)))

ordered = OrderedList()
for value in (5, 1, 3):
    ordered.add(value)
print(list(ordered))  # [1, 3, 5]
```

Queues, deques, stacks and the heap:

```python
from dsalgo.deques import ArrayDeque
from dsalgo.queues import ArrayQueue, BinaryHeap
from dsalgo.stacks import LinkedStack, balanced_parentheses

queue = ArrayQueue(3)
queue.enqueue(10)
queue.enqueue(20)
print(queue.dequeue(), queue.front())

deque = ArrayDeque(2)
deque.push_front(1)
deque.push_rear(2)
print(deque.pop_rear())

heap = BinaryHeap()
for value in (5, 3, 8, 1, 2):
    heap.add(value)
print(heap.poll())  # 1

stack = LinkedStack()
stack.push(1)
print(stack.peek())
print(balanced_parentheses("(a(b)c)"))
```

## Errors

Operations that cannot succeed raise instead of returning a sentinel value:

- reading from an empty stack, queue, deque or heap, or using an index outside
  a list, raises `IndexError`;
- `ArrayQueue.enqueue` on a full queue raises `OverflowError`;
- `HashTable.get` and `HashTable.remove` raise `KeyError` for a missing key;
- `min()` and `max()` of an empty tree, `counting_sort` of an empty list,
  `OrderedList.set` with a value that would break the order, and a capacity or
  size of zero or less raise `ValueError`.

## Commands

The package installs a few small programs:

```
dsalgo-sort-bench       # times each sorting algorithm on copies of the same random data
dsalgo-hashtable-demo   # fills, queries and shrinks a small hash table
dsalgo-bst-demo         # builds a binary search tree and walks it in every order
dsalgo-avl-demo         # builds an AVL tree and prints it level by level
dsalgo-heap-demo        # adds to and polls from a min-heap
```

`dsalgo-sort-bench` takes `--size N` (default 100000), `--unsorted` to start
from unsorted data instead of sorted data, and `--seed S` for repeatable data.
The quadratic sorts are slow at the default size, so a smaller `--size` is
handy for a quick run:

```
dsalgo-sort-bench --size 2000 --unsorted --seed 1
```