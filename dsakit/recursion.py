"""Classic recursive definitions, computed without deep recursion."""


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) = 0 and fib(1) = 1.

    As in the recursive definition, any ``n`` below 2 is returned unchanged.
    """
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def power(a: int, b: int) -> int:
    """Return ``a`` raised to the non-negative integer ``b``."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    base = a
    while b:
        if b & 1:
            result *= base
        base *= base
        b >>= 1
    return result