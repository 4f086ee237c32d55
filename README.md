# structkit

Classic data structures and algorithms with small, Pythonic interfaces and
no runtime dependencies.

| Module | What it holds |
| --- | --- |
| `structkit.polynomial` | `Term`, `Polynomial`: addition of polynomials in decreasing order of exponent, multiplication, `insert_ordered`, `merge_like_terms`, `parse_terms` |
| `structkit.bivariate` | `BivariateTerm`, `BivariatePolynomial`: addition of polynomials in `x` and `y`, `parse_terms` |
| `structkit.expressions` | `infix_to_postfix`, `infix_to_prefix`, `evaluate_postfix`, `evaluate_prefix` (single-digit operands, integer arithmetic), `brackets_balanced`, `ExpressionError` |
| `structkit.sorting` | `partition`, `quicksort`, `selection_sort` |
| `structkit.sparse` | `Triplet`, `SparseMatrix` (`from_dense`, `transpose`, `+`, `to_rows`, `format`), `is_sparse` |
| `structkit.scheduling` | `Process`, `ProcessResult`, `ScheduleReport`, `sort_by_arrival`, `fcfs`, `sjf`, `priority_schedule`, `round_robin`, `format_report` |
| `structkit.gantt` | `GanttSlot`, `GanttSchedule` and the same four schedulers, recording every run slice |
| `structkit.timesharing` | `Task`, `TaskQueue`, `random_tasks`, `simulate` (a generator of `(tick, task)` pairs) |
| `structkit.queues` | `CircularDeque`, `LinkedQueue` (with `reverse`), `StackQueue`, `PriorityQueue`, `LevelPriorityQueue`, `QueueFullError`, `QueueEmptyError` |
| `structkit.customers` | `Customer`, `CustomerQueue` with `waiting_time` lookup |
| `structkit.stacks` | `LinkedStack` (with `reverse`), `FrontStack`, `QueueStack`, `StackFullError`, `StackEmptyError` |
| `structkit.doubly_linked` | `DoublyLinkedList`: insertion and deletion at either end or by key, in-place `reverse` |
| `structkit.trees` | `Node`, `LevelOrderTree` (`insert`, `delete`, `level_order`), iterative `inorder`, `preorder`, `postorder` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from structkit.expressions import infix_to_postfix, evaluate_postfix

postfix = infix_to_postfix("2+3*4")
print(postfix)                     # 234*+
print(evaluate_postfix(postfix))   # 14
```

```python
from structkit.polynomial import Polynomial, Term

p = Polynomial([Term(3, 2), Term(2, 1)])
q = Polynomial([Term(1, 1), Term(5, 0)])
print(p + q)   # 3.00x^2 + 3.00x^1 + 5.00x^0
print(p * q)
```

```python
from structkit.queues import CircularDeque, QueueEmptyError

dq = CircularDeque(10)
dq.insert_rear(1)
dq.insert_front(0)
print(list(dq))     # [0, 1]
dq.delete_front()
dq.delete_rear()
try:
    dq.delete_front()
except QueueEmptyError:
    print("empty")
```

```python
from structkit.sparse import SparseMatrix, is_sparse

dense = [[0, 0, 3], [4, 0, 0], [0, 0, 0]]
if is_sparse(dense):
    matrix = SparseMatrix.from_dense(dense)
    print(matrix.format())
    print(matrix.transpose().format())
```

```python
from structkit.scheduling import Process, round_robin, format_report

report = round_robin([Process(1, 0, 5), Process(2, 1, 3)], quantum=2)
print(format_report(report))
```

Full and empty conditions raise exceptions (`QueueFullError`,
`QueueEmptyError`, `StackFullError`, `StackEmptyError`); malformed or
undefined expressions raise `ExpressionError`; lookups of missing keys raise
`KeyError`.

## Command-line tools

Every tool takes its input as command-line arguments; `--help` lists them.

```
structkit-polynomial "3 2 2 1" "1 1 5 0"          # coeff exp pairs: sum and product
structkit-bivariate "2 2 1 1 0 3" "4 2 1 1 1 0"   # coeff xexp yexp triples: sum
structkit-expressions "(2+3)*4"                   # postfix, prefix and value
structkit-scheduling --arrival 0 1 2 --burst 5 3 1 --priority 2 1 3 --quantum 2
structkit-gantt rr 1:0:5 2:1:3 3:2:1 --quantum 2  # fcfs, sjf, priority or rr
structkit-timesharing --count 10 --seed 1         # random tasks, then each slice run
structkit-customers 1:Ann:4 2:Bob:6 --wait 2      # queue and waiting times
```

## What it does not do

The tools are one-shot commands: none of them offers an interactive menu or
reads values at prompts, and nothing is stored between runs. The stacks,
queues, linked list, trees, sorting and sparse-matrix modules are library
code only and have no command of their own.