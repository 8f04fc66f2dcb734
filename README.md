# streamkit

Small list types whose element equality is a function you choose, together with pull-style suppliers and a one-shot stream built on a supplier.

## Installation

```
pip install .
```

To also install what the tests need:

```
pip install ".[test]"
```

## Array

`streamkit.array.Array` is a list backed by a Python list. Membership, search and removal go through the equality function passed as `equals` (by default `operator.eq`). A negative `capacity` raises `ValueError`.

```python
from streamkit.array import Array, map_array

arr = Array(lambda a, b: a == b, 0)
arr.push(1)       # insert at the front
arr.add(2)        # append at the back
arr.contains(2)   # True
arr.index_of(2)   # 1
str(arr)          # "[1, 2]"
len(arr)          # 2
```

Other operations: `remove`, `last_index_of`, `first`, `last`, `clear`, `is_empty`, `sub_list`, `sub_slice`, `add_all`, `remove_all`, `retain_all`, `clone`, `to_list`, `for_each`, `iterator`, indexing with `[]`, iteration and `==`.

Indexing, `first`, `last` and out-of-bounds ranges for `sub_list`/`sub_slice` raise `IndexError`; negative indices are not accepted.

`filter` and `map_array` push each result to the front, so their output is in reverse order:

```python
arr = Array()
for n in (1, 2, 3, 4):
    arr.add(n)
arr.filter(lambda x: x % 2 == 0).to_list()   # [4, 2]
map_array(arr, str).to_list()                # ["4", "3", "2", "1"]
```

The abstract base `streamkit.array.List` describes the operations shared by both list types.

## Linked

`streamkit.linked.Linked` is a doubly linked list with the same equality-driven operations; its links are `Node` objects.

```python
from streamkit.linked import Linked

items = Linked(lambda a, b: a == b)
items.add("a")
items.push("b")
items[0]            # "b"
items.last()        # "a"
items.remove("a")   # True
```

`Linked.sub_list(start, stop)` returns the selected elements in reverse order.

## Suppliers and iterators

A `streamkit.supplier.Supplier` gives values on demand through `has_next()` and `next()`, and is also a Python iterable.

```python
from streamkit.iterator import ArrayIterator

for value in ArrayIterator([1, 2, 3]):
    print(value)
```

`ArrayIterator.next()` raises `IndexError` once the sequence is exhausted.

`SocketSupplier(conn, read_func)` calls `read_func(conn)` to get each chunk. It reads one chunk ahead; an exception raised by `read_func` is stored in its `error` attribute, after which `has_next()` returns `False`.

## Streams

`streamkit.stream.of(*values)` builds an `IteratorStream` over the given values. A stream can be consumed once with `for_each` or `reduce`; `filter` returns a new stream over the matching values. `reduce` returns `None` when there are no values.

```python
from streamkit.stream import of

total = of(1, 2, 3, 4).filter(lambda x: x > 1).reduce(lambda a, b: a + b)   # 9
```

Streams have no mapping operation.

## Running the tests

```
pytest
```