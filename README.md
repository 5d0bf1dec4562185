# algodesign

Six classic algorithm-design exercises. Each one is available as a plain
function and also as a solver that takes text and returns the answer. The
solvers check their input the way a problem judge would.

| Problem | Technique | Solver | Command name |
| --- | --- | --- | --- |
| k-th smallest element | divide and conquer (quickselect) | `solve_kth_smallest` | `kth` |
| selection problem | divide and conquer (quickselect) | `solve_selection` | `select` |
| digit-string split, maximum product | dynamic programming | `solve_digit_split` | `digits` |
| skiing, longest downhill path | dynamic programming | `solve_ski` | `ski` |
| pawn paths blocked by a knight | dynamic programming | `solve_pawn_paths` | `pawn` |
| assigning jobs for maximum profit | greedy | `solve_job_assignment` | `jobs` |

## Installation

```
pip install .
```

Use `pip install .[test]` to install pytest as well.

## Command line

Installing the package provides the `algodesign` command. It takes a problem
name and, optionally, an input file. Without a file, or with `-`, it reads
standard input:

```
algodesign --help
algodesign ski grid.txt
echo "6 6 3 3" | algodesign pawn
```

The command prints the answer and exits with status 0. If the input is
invalid or the file cannot be read, it prints `error: ...` to standard error
and exits with status 1.

## Using the solvers

Every solver in `algodesign.problems` takes the problem input as text. It
returns the answer as an integer. If the input is malformed or out of range,
it raises `InputError`, which is a subclass of `ValueError`.

```python
from algodesign.problems import InputError, solve_pawn_paths, solve_ski

print(solve_pawn_paths("6 6 3 3"))   # 6

grid = """5 5
1 2 3 4 5
16 17 18 19 6
15 24 25 20 7
14 23 22 21 8
13 12 11 10 9"""
print(solve_ski(grid))               # 25

try:
    solve_pawn_paths("30 6 3 3")
except InputError as err:
    print(err)   # invalid n: must be an integer between 0 and 20
```

### Input formats

- **k-th smallest** (`kth`): `n`, then `n` integers, then `k`, all separated
  by whitespace. `k` must satisfy `1 <= k <= n`.
- **Selection** (`select`): `n k`, then `n` integers. Requires
  `1 <= k < n <= 100`.
- **Digit split** (`digits`): two lines. The first line holds `x y`. The
  second line holds a digit string of exactly `x` characters. `y`
  multiplication signs are placed between the digits. Requires `x >= 1` and
  `0 <= y < x`. The answer is the largest product that can be made.
- **Ski** (`ski`): `rows cols`, then the grid of heights row by row. The answer
  is the length of the longest path that goes strictly downhill between
  neighbouring cells.
- **Pawn paths** (`pawn`): `n m hx hy` on one line, separated by single
  spaces. Each value is from 0 to 20. A pawn moves from `(0, 0)` to `(n, m)`
  and may only go down or right. It may not enter the knight's square
  `(hx, hy)` or any square the knight attacks. The answer is the number of
  such paths.
- **Job assignment** (`jobs`): `n m`, then `n` pairs `difficulty profit`, then
  `m` worker abilities. The difficulties, the profits and the abilities are
  each sorted on their own. Each worker then earns the profit at the position
  of the hardest difficulty that is not above the worker's ability.

## Using the algorithms directly

`algodesign.algorithms` contains the algorithms without any input parsing:

```python
from algodesign.algorithms import count_paths, max_product, quick_select

print(max_product("1231", 2))        # 62  (1 * 2 * 31)
print(count_paths(6, 6, 3, 3))       # 6
print(quick_select([7, 2, 9, 4], 2)) # 4
```

The module also provides `longest_slope`, `in_horse_control` and
`max_profit`. `quick_select` and `max_profit` raise `ValueError` when their
arguments are inconsistent: `k` is out of range, or the difficulty and profit
lists have different lengths.

## What it does not do

The package has no graphical interface. Problems are solved through the
functions above or through the `algodesign` command only.