# dsakit

A compact collection of classic data structures and algorithms in plain
Python, with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.recursion` | head, tail, tree, indirect and nested recursion; `sum_natural`, `factorial`, `power`, `fast_power`; Taylor series for e^x (`taylor_exp`, `taylor_exp_iter`, `taylor_exp_horner`); Fibonacci (`fibonacci`, `fibonacci_iter`, `fibonacci_memo`, `fibonacci_series`); `ncr`, `ncr_factorial`; Tower of Hanoi moves (`hanoi_moves`) |
| `dsakit.strings` | `to_upper`, `to_lower`, `count_letters` (returns `LetterCounts`), `is_valid_password`, `reverse_string`, `is_palindrome`, `duplicate_letters`, `duplicate_letters_bitwise`, `is_anagram`, `permutations` |
| `dsakit.array_adt` | `ArrayADT`, a fixed-capacity array with insertion, deletion, linear and binary search (`SortOrder`), shifts, rotations, merge, union, intersection and difference |
| `dsakit.array_problems` | `resized`, `index_sum_grid`, missing elements, duplicates, pairs with a given sum, `min_max` |
| `dsakit.matrix_checks` | `is_diagonal`, `is_lower_triangular`, `is_upper_triangular`, `is_symmetric`, `is_tridiagonal`, `is_toeplitz` |
| `dsakit.matrices` | space-saving square matrices built on `PackedMatrix`: `DiagonalMatrix`, `LowerTriangularMatrix`, `UpperTriangularMatrix`, `SymmetricMatrix`, `TridiagonalMatrix`, `ToeplitzMatrix` |
| `dsakit.linked_list` | singly linked `LinkedList` of `Node`s plus `has_loop`, `intersection`, `merge_nodes` and `merge_k` |
| `dsakit.doubly_linked_list` | `DoublyLinkedList` |
| `dsakit.circular_lists` | `CircularLinkedList` and `CircularDoublyLinkedList` |
| `dsakit.stacks` | `ArrayStack` (fixed capacity) and `LinkedStack` (unbounded) |
| `dsakit.expressions` | `is_balanced`, `infix_to_postfix`, `infix_to_prefix`, `evaluate` for single-digit operands |
| `dsakit.queues` | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `TwoStackQueue` |
| `dsakit.binary_tree` | `TreeNode` with `inorder`, `preorder`, `postorder`, `level_order`, `count`, `count_leaves`, `count_internal`, `height` |
| `dsakit.bst` | `BinarySearchTree`, which can also be rebuilt with `from_preorder` or `from_postorder` |
| `dsakit.avl` | self-balancing `AVLTree` of `AVLNode`s |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dsakit.recursion import factorial, fibonacci, ncr, hanoi_moves
from dsakit.strings import is_anagram, is_palindrome
from dsakit.expressions import is_balanced, evaluate
from dsakit.linked_list import LinkedList
from dsakit.matrices import LowerTriangularMatrix
from dsakit.avl import AVLTree

factorial(5)                  # 120
fibonacci(10)                 # 55
ncr(6, 2)                     # 15
moves = list(hanoi_moves(3))  # the 7 (from_tower, to_tower) moves for three disks

is_anagram("decimal", "medical")   # True
is_palindrome("madam")             # True

is_balanced("{[(a+b+(c+d)*e)+f]*g}")  # True
evaluate("3*5+6/2-4")                 # 14

numbers = LinkedList([1, 2, 3, 4, 5, 6])
numbers.reverse()
list(numbers)                 # [6, 5, 4, 3, 2, 1]

lower = LowerTriangularMatrix(3)
lower[2, 0] = 4
lower[0, 2]                   # 0; writing a non-zero value there raises ValueError

tree = AVLTree([30, 40, 35, 20, 10])
tree.inorder()                # [10, 20, 30, 35, 40]
35 in tree                    # True
```

## Errors

Errors are reported as exceptions:

- `ArrayADT` raises `ArrayFullError` when it has no free capacity, and
  `IndexError` or `ValueError` for bad indexes or unsorted input.
- `ArrayStack` raises `StackOverflow` when full; both stacks raise
  `StackUnderflow` when popped or read while empty.
- `ArrayQueue` and `CircularQueue` raise `QueueFull`; every queue raises
  `QueueEmpty` when dequeued while empty.
- Packed matrices raise `IndexError` for cells outside the matrix.

## Command line

Installing the package provides one command, which prints the moves that
solve the Tower of Hanoi:

```
dsakit-hanoi 3
```

Without a number of disks it asks for one on standard input.