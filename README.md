# chainlist

A small singly linked list of integers. Values can be added at the front, at
the back, at any position or in sorted order. They can be read or removed by
position, searched for, sorted in place, and the list can be copied.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from chainlist.linked_list import LinkedList

items = LinkedList([34])
items.insert_first(4)
items.append(11)
items.insert(1, 44)          # 4 44 34 11

items.first()                # 4
items.last()                 # 11
items[2]                     # 34
items.find(34)               # 2
items.find(99)               # -1, not present

items.pop_first()            # 4
items.pop_last()             # 11
items.pop(0)                 # 44

items.sort()
items.insert_sorted(20)      # keeps ascending order: 20 34
ordered = items.sorted_copy()  # new sorted list; the original stays as it is
clone = items.copy()
items == clone               # True, lists compare by their values

len(items)                   # 2
list(items)                  # [20, 34]
repr(items)                  # 'LinkedList([20, 34])'
print(items)
# <LISTA>
# { 20 }{ 34 }

items.clear()                # empties the list
```

A position outside the list raises `IndexError`, and reading or removing from
an empty list raises `IndexError` as well. To insert, a position from 0 up to
and including the length of the list is valid. Negative positions are never
accepted; they do not count from the end.

`sort()` reorders the values held by the existing nodes rather than relinking
them. `insert_sorted(value)` places the value before the first element that is
not smaller than it, so it keeps an ascending list ascending.

### Nodes

The nodes can be reached as well. The properties `head` and `tail` give the
first and last `chainlist.node.Node` (or `None` for an empty list), and
`node_at(position)` returns the node at a position, raising `IndexError` when
there is none. A `Node` has a `value` and a `next` link; `str(node)` gives
`{ value }`, and `chainlist.node.format_node(node)` gives the same text, or
`[NULL]` for `None`.

## Demo

A short walk through the operations, printed to standard output:

```
chainlist-demo
```

The same can be run from code with `chainlist.demo.run_demo(out)`, which
writes the transcript to any text stream.