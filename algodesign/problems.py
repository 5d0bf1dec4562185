"""Text-input front ends for the six algorithm problems."""

from __future__ import annotations

from .algorithms import count_paths, longest_slope, max_product, max_profit, quick_select


class InputError(ValueError):
    """Raised when a problem's input text is malformed or out of range."""


class _Tokens:
    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def integer(self, message: str) -> int:
        token = next(self._tokens, None)
        if token is None:
            raise InputError(message)
        try:
            return int(token)
        except ValueError:
            raise InputError(message) from None

    def integers(self, count: int, message: str) -> list[int]:
        return [self.integer(message) for _ in range(count)]


def _parse_int(text: str, message: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InputError(message) from None


def solve_kth_smallest(text: str) -> int:
    """Input: n, then n integers, then k. Returns the k-th smallest integer."""
    tokens = _Tokens(text)
    n = tokens.integer("invalid input: check the count n")
    if n < 0:
        raise InputError("invalid input: check the count n")
    nums = tokens.integers(n, "invalid input: check the integer sequence")
    k = tokens.integer("invalid input: check the value of k")
    if not 1 <= k <= n:
        raise InputError("k out of range: make sure 1 <= k <= n")
    return quick_select(nums, k)


def solve_selection(text: str) -> int:
    """Input: n and k, then n integers, with 1 <= k < n <= 100."""
    tokens = _Tokens(text)
    message = "enter n and k so that 1 <= k < n <= 100"
    n = tokens.integer(message)
    k = tokens.integer(message)
    if k < 1 or k >= n or n > 100:
        raise InputError(message)
    nums = tokens.integers(n, "enter a valid integer array")
    return quick_select(nums, k)


def solve_digit_split(text: str) -> int:
    """Input: a line "x y" and a line of x digits; y multiplication signs are placed."""
    lines = [line for line in text.strip().split("\n") if line]
    if len(lines) < 2:
        raise InputError("enter two lines: 'x y' and then the digit string")
    params = [part for part in lines[0].split(" ") if part]
    if len(params) != 2:
        raise InputError("the first line must hold two integers x and y")
    x = _parse_int(params[0], "x and y must be valid integers")
    y = _parse_int(params[1], "x and y must be valid integers")
    if x < 1 or y < 0 or y >= x:
        raise InputError(
            f"invalid parameters: x must be >= 1 and 0 <= y < x (x={x}, y={y})"
        )
    digits = lines[1].strip()
    if len(digits) != x:
        raise InputError(
            f"the digit string should have length {x}, but has {len(digits)}"
        )
    return max_product(digits, y)


def solve_ski(text: str) -> int:
    """Input: rows and cols, then the height grid. Returns the longest slope."""
    tokens = _Tokens(text)
    rows = tokens.integer("invalid input: check rows and cols")
    cols = tokens.integer("invalid input: check rows and cols")
    if rows < 0 or cols < 0:
        raise InputError("rows and cols cannot be negative")
    grid = [tokens.integers(cols, "invalid input: check the height grid") for _ in range(rows)]
    if cols == 0:
        return 0
    return longest_slope(grid)


def solve_pawn_paths(text: str) -> int:
    """Input: "n m horse_x horse_y", single-space separated, each in 0..20."""
    parts = text.split(" ")
    if len(parts) != 4:
        raise InputError("invalid input: enter n m horse_x horse_y")
    labels = ("n", "m", "horse x coordinate", "horse y coordinate")
    values = []
    for label, part in zip(labels, parts):
        message = f"invalid {label}: must be an integer between 0 and 20"
        value = _parse_int(part, message)
        if not 0 <= value <= 20:
            raise InputError(message)
        values.append(value)
    n, m, horse_x, horse_y = values
    return count_paths(n, m, horse_x, horse_y)


def solve_job_assignment(text: str) -> int:
    """Input: n m, then n "difficulty profit" pairs, then m worker abilities."""
    tokens = _Tokens(text)
    n = tokens.integer("invalid input: expected 'n m'")
    m = tokens.integer("invalid input: expected 'n m'")
    if n < 0 or m < 0:
        raise InputError("invalid input: expected 'n m'")
    difficulty: list[int] = []
    profit: list[int] = []
    for _ in range(n):
        pair = tokens.integers(2, "invalid input: expected 'difficulty[i] profit[i]'")
        difficulty.append(pair[0])
        profit.append(pair[1])
    workers = tokens.integers(m, "invalid input: expected 'worker[i]'")
    return max_profit(difficulty, profit, workers)