# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a
small fixed set of operations. The `push-swap` command prints the
sequence of operations that, applied to the input on stack `a`, leaves
`a` sorted in ascending order (smallest on top) and `b` empty.

## Operations

| Name  | Effect                                           |
|-------|--------------------------------------------------|
| `sa`  | swap the top two elements of `a`                 |
| `sb`  | swap the top two elements of `b`                 |
| `ss`  | `sa` and `sb` together                           |
| `pa`  | move the top of `b` onto `a`                     |
| `pb`  | move the top of `a` onto `b`                     |
| `ra`  | rotate `a` up: the top goes to the bottom        |
| `rb`  | rotate `b` up                                    |
| `rr`  | `ra` and `rb` together                           |
| `rra` | rotate `a` down: the bottom goes to the top      |
| `rrb` | rotate `b` down                                  |
| `rrr` | `rra` and `rrb` together                         |

## Command line

Pass the numbers as separate arguments, or as one space-separated string:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

Each operation is printed on its own line on standard output. Input
that is already sorted produces no output, and so does an empty or
missing argument list.

Every number must be an optional `+` or `-` followed by digits only.
If an argument is not of that form, lies outside the 32-bit signed
range (-2147483648 to 2147483647), or repeats an earlier number, the
command prints `Error` on standard output and exits with status 1.

## Library use

```python
from pushswap.sorter import push_swap, is_sorted
from pushswap.parsing import parse_arguments, InputError
from pushswap.stack import Stacks

ops = push_swap([3, 2, 1])          # list of Operation members, in order
[str(op) for op in ops]             # e.g. ["sa", "rra"]
is_sorted([1, 2, 3])                # True

values = parse_arguments(["5", "-2", "+7"])   # [5, -2, 7]
try:
    parse_arguments(["1", "2", "2"])
except InputError:
    ...                             # duplicate number
```

- `pushswap.sorter`: `push_swap(values)` returns the operations that sort
  `values` (raising `InputError` on duplicates); `sort_three(stacks)` and
  `sort_stacks(stacks)` apply the strategy to a `Stacks` object;
  `is_sorted(values)` checks for non-decreasing order.
- `pushswap.stack`: `Stacks(a, b)` holds both stacks top first, with one
  method per operation (`sa`, `pb`, `rra`, ...). Each method returns
  whether it was applied; an operation that would change nothing (too few
  elements) is skipped and not recorded. Applied operations are collected
  in `Stacks.operations`. `Operation` is the enum of operation names.
- `pushswap.parsing`: `parse_arguments(args)`, `has_syntax_error(text)`,
  `parse_long(text)` and the `InputError` exception.
- `pushswap.textutils`: small string helpers with C-library semantics
  (`atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
  `strchr`, `strrchr`).
- `pushswap.formatting`: `format_printf(fmt, *args)` supports `%c %s %d
  %i %u %x %X %p %%`; `print_formatted(fmt, *args)` writes the result to
  standard output and returns its length.

## What it does not do

There is no command that reads a list of operations and checks whether
it sorts a given input. To verify a sequence by hand, create a `Stacks`
object and call its methods in order.

## Tests

```
pip install -e ".[test]"
pytest
```