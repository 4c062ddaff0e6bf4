"""Command-line front end: each command reads whitespace-separated input and prints a result."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Sequence

from dsakit import arrays, heaps, matrix, recursion, stacks, text, trees

Handler = Callable[[str], str]

_COMMANDS: dict[str, Handler] = {}


def _command(name: str) -> Callable[[Handler], Handler]:
    def register(handler: Handler) -> Handler:
        _COMMANDS[name] = handler
        return handler

    return register


class _Tokens:
    """Pulls whitespace-separated words and integers from input text."""

    def __init__(self, source: str) -> None:
        self._words = iter(source.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def integers(self, count: int) -> list[int]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.integer() for _ in range(count)]

    def counted(self) -> list[int]:
        """Read a count followed by that many integers."""
        return self.integers(self.integer())

    def matrix(self, rows: int, columns: int) -> list[list[int]]:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must be non-negative")
        return [self.integers(columns) for _ in range(rows)]


def _line(values: Iterable[int]) -> str:
    return " ".join(map(str, values)) + "\n"


def _trailing(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values) + "\n"


def _rows(values: Iterable[Iterable[int]]) -> str:
    return "".join(_line(row) for row in values)


@_command("reverse")
def _reverse(source: str) -> str:
    return _line(arrays.reverse(_Tokens(source).counted()))


@_command("insert")
def _insert(source: str) -> str:
    tokens = _Tokens(source)
    values = tokens.counted()
    pos = tokens.integer()
    x = tokens.integer()
    return _line(arrays.insert_at(values, pos, x))


@_command("delete")
def _delete(source: str) -> str:
    tokens = _Tokens(source)
    values = tokens.counted()
    return _line(arrays.delete_at(values, tokens.integer()))


@_command("search")
def _search(source: str) -> str:
    tokens = _Tokens(source)
    values = tokens.counted()
    result = arrays.linear_search(values, tokens.integer())
    found = "Not Found" if result.index is None else f"Found at index {result.index}"
    return f"{found}\nComparisons = {result.comparisons}\n"


@_command("merge")
def _merge(source: str) -> str:
    tokens = _Tokens(source)
    first = tokens.counted()
    second = tokens.counted()
    return _line(arrays.merge_sorted(first, second))


@_command("unique")
def _unique(source: str) -> str:
    tokens = _Tokens(source)
    count = tokens.integer()
    if count <= 0:
        return ""
    return _line(arrays.unique_sorted(tokens.integers(count)))


@_command("frequency")
def _frequency(source: str) -> str:
    counts = arrays.frequencies(_Tokens(source).counted())
    return "".join(f"{value}:{count} " for value, count in counts.items())


@_command("minmax")
def _minmax(source: str) -> str:
    tokens = _Tokens(source)
    count = tokens.integer()
    if count <= 0:
        return ""
    low, high = arrays.min_max(tokens.integers(count))
    return f"Max: {high}\nMin: {low}\n"


@_command("rotate")
def _rotate(source: str) -> str:
    tokens = _Tokens(source)
    values = tokens.counted()
    return _line(arrays.rotate_right(values, tokens.integer()))


@_command("closest-pair")
def _closest_pair(source: str) -> str:
    tokens = _Tokens(source)
    count = tokens.integer()
    if count < 2:
        return ""
    return _line(arrays.closest_to_zero_pair(tokens.integers(count)))


@_command("zero-sum")
def _zero_sum(source: str) -> str:
    return f"{arrays.count_zero_sum_subarrays(_Tokens(source).counted())}\n"


@_command("mirror")
def _mirror(source: str) -> str:
    return text.reverse_text(_Tokens(source).word()) + "\n"


@_command("palindrome")
def _palindrome(source: str) -> str:
    word = _Tokens(source).word()
    verdict = "YES" if text.is_palindrome(word) else "NO"
    return f"{verdict}\n"


@_command("fib")
def _fib(source: str) -> str:
    return f"{recursion.fib(_Tokens(source).integer())}\n"


@_command("power")
def _power(source: str) -> str:
    tokens = _Tokens(source)
    a = tokens.integer()
    b = tokens.integer()
    return f"{recursion.power(a, b)}\n"


@_command("matrix-add")
def _matrix_add(source: str) -> str:
    tokens = _Tokens(source)
    m = tokens.integer()
    n = tokens.integer()
    first = tokens.matrix(m, n)
    second = tokens.matrix(m, n)
    return _rows(matrix.add(first, second))


@_command("symmetric")
def _symmetric(source: str) -> str:
    tokens = _Tokens(source)
    m = tokens.integer()
    n = tokens.integer()
    result = matrix.is_symmetric(tokens.matrix(m, n))
    return "Symmetric Matrix\n" if result else "Not a Symmetric Matrix\n"


@_command("spiral")
def _spiral(source: str) -> str:
    tokens = _Tokens(source)
    r = tokens.integer()
    c = tokens.integer()
    return _line(matrix.spiral(tokens.matrix(r, c)))


@_command("identity")
def _identity(source: str) -> str:
    tokens = _Tokens(source)
    n = tokens.integer()
    result = matrix.is_identity(tokens.matrix(n, n))
    return "Identity Matrix\n" if result else "Not an Identity Matrix\n"


@_command("diagonal")
def _diagonal(source: str) -> str:
    tokens = _Tokens(source)
    m = tokens.integer()
    n = tokens.integer()
    return f"{matrix.diagonal_sum(tokens.matrix(m, n))}\n"


@_command("infix")
def _infix(source: str) -> str:
    return stacks.infix_to_postfix(_Tokens(source).word()) + "\n"


@_command("postfix")
def _postfix(source: str) -> str:
    return f"{stacks.evaluate_postfix(source)}\n"


@_command("heap-sort")
def _heap_sort(source: str) -> str:
    return _line(heaps.heap_sort(_Tokens(source).counted()))


@_command("tree-inorder")
def _tree_inorder(source: str) -> str:
    root = trees.build_level_order(_Tokens(source).counted())
    return _trailing(trees.inorder(root))


@_command("tree-traversals")
def _tree_traversals(source: str) -> str:
    root = trees.build_level_order(_Tokens(source).counted())
    return (
        _trailing(trees.inorder(root))
        + _trailing(trees.preorder(root))
        + _trailing(trees.postorder(root))
    )


@_command("tree-height")
def _tree_height(source: str) -> str:
    return f"{trees.height(trees.build_level_order(_Tokens(source).counted()))}\n"


@_command("tree-leaves")
def _tree_leaves(source: str) -> str:
    root = trees.build_level_order(_Tokens(source).counted())
    return f"{trees.count_leaves(root)}\n"


@_command("level-order")
def _level_order(source: str) -> str:
    root = trees.build_level_order(_Tokens(source).counted())
    return _trailing(trees.level_order(root))


@_command("vertical-order")
def _vertical_order(source: str) -> str:
    root = trees.build_level_order(_Tokens(source).counted())
    return "".join(_trailing(column) for column in trees.vertical_order(root))


@_command("bst-inorder")
def _bst_inorder(source: str) -> str:
    return _trailing(trees.BinarySearchTree(_Tokens(source).counted()))


@_command("bst-search")
def _bst_search(source: str) -> str:
    tokens = _Tokens(source)
    tree = trees.BinarySearchTree(tokens.counted())
    node = tree.search(tokens.integer())
    return "Not Found\n" if node is None else f"Found: {node.value}\n"


def run(name: str, text: str) -> str:
    """Run the command called ``name`` on input ``text`` and return its output."""
    try:
        handler = _COMMANDS[name]
    except KeyError:
        raise ValueError(f"unknown command {name!r}") from None
    return handler(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Read standard input, run the chosen command and print its output."""
    parser = argparse.ArgumentParser(
        prog="dsakit",
        description="Run a data-structure exercise on input read from standard input.",
    )
    parser.add_argument("command", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)
    try:
        output = run(args.command, sys.stdin.read())
    except (ValueError, IndexError, ZeroDivisionError) as error:
        print(f"dsakit: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0