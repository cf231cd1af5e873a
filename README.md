# algopractice

A collection of classic algorithms, small data structures and design-pattern
examples, written as plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algopractice.sorting` | `insertion_sort`, `bucket_sort` (values in `[0, 1)`), `counting_sort` (non-negative integers), `merge_sort`, `quick_sort`, `shell_sort` return sorted copies; `heap_sort` sorts in place, with `max_heapify` and `build_max_heap` |
| `algopractice.searching` | `binary_search`, `find_pivot` and `pivoted_binary_search` for rotated sorted sequences; each returns an index or `None` |
| `algopractice.fifo` | `Queue`, a first-in first-out queue raising `EmptyQueueError` on `peek` or `dequeue` while empty |
| `algopractice.graphs` | `Graph` (directed or undirected, weighted edges) with `bfs`, `dfs`, `neighbours`, `adjacency_lines`; `topological_sort` over an adjacency matrix |
| `algopractice.puzzles` | `max_yearly_profit`, `longest_dup_substring`, `k_closest`, `add_binary`, `top_k_frequent`, `heap_walkthrough` |
| `algopractice.matrix` | `determinant`, `cofactor_matrix`, `adjoint`, `inverse` (raising `SingularMatrixError`), `strip_zero_lines` |
| `algopractice.practice` | `BinarySearchTree` with `preorder`/`inorder`, `matching_positions`, `maze_path_length`, `classify_triangle` |
| `algopractice.chat` | Mediator example: `ChatRoom` and `Person` |
| `algopractice.observer` | Observer example: `Observer`, `Observable`, `SaferObservable`, `Person`, `ConsolePersonObserver`, `TrafficAdministration` |
| `algopractice.proxy` | Proxy example: `Pingable`, `Pong`, `RemotePong`, `try_it` |
| `algopractice.adapter` | Adapter example: `Point`, `Line`, `VectorRectangle`, `line_to_points`, `LineToPointAdapter`, `LineToPointCachingAdapter`, `rasterize` |
| `algopractice.textui` | Facade example: `Size`, `Point`, `TextBuffer`, `Viewport`, `Area`, `MenuBar`, `MenuBarBuilder`, `MenuItem` |

## Examples

```python
from algopractice.sorting import merge_sort
from algopractice.searching import pivoted_binary_search
from algopractice.puzzles import add_binary
from algopractice.chat import ChatRoom, Person

print(merge_sort([5, 2, 9, 1]))                    # [1, 2, 5, 9]
print(pivoted_binary_search([3, 4, 5, 1, 2], 1))   # 3
print(add_binary("11", "1"))                       # 100

room = ChatRoom()
john, jane = Person("John"), Person("Jane")
room.join(john)
room.join(jane)
john.say("hi room")
print(jane.chat_log)                               # ['John: "hi room"']
```

`Person.receive` also prints each message it gets, prefixed with the
receiver's chat session name.

## Commands

Print traversals of the sample five-vertex graph (breadth-first order and
adjacency lists of the directed graph, depth-first and breadth-first order of
the undirected one, depth-first order of the weighted one) and a topological
order of a sample six-vertex acyclic graph:

```
algopractice-graph
```

Send three pings through `RemotePong` and print each reply. The service URL
defaults to `http://localhost:64959/` and may be given as an argument:

```
algopractice-ping
algopractice-ping http://localhost:8000/
```

## What it does not do

- No ping service is included: `algopractice-ping` needs an HTTP service that
  answers `GET /api/values/<message>`.
- Nothing is drawn on screen. `rasterize` and the line adapters only return
  lists of points, and `textui` keeps text in buffers and answers
  character lookups through viewports; there is no window or renderer.