"""
Three ways to sum the integers 1..n.

- ``sum_to_n_a``: closed form, O(1) time and space. Python ints do not
  overflow, so the result is exact for any n.
- ``sum_to_n_b``: running total, O(n) time, O(1) space.
- ``sum_to_n_c``: recursion, O(n) time and O(n) stack. Only terminates
  for n >= 1; n <= 0 never reaches the base case and ends in
  ``RecursionError``, as does any n deeper than ``sys.getrecursionlimit()``.

Prefer the formula; the loop reads most plainly; avoid recursion for large n.
"""


def sum_to_n_a(n: int) -> int:
    return n * (n + 1) // 2


def sum_to_n_b(n: int) -> int:
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_to_n_c(n: int) -> int:
    if n == 1:
        return 1
    return n + sum_to_n_c(n - 1)


if __name__ == "__main__":
    print(sum_to_n_a(5))
    print(sum_to_n_b(6))
    print(sum_to_n_c(7))
