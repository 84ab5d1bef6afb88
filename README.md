# dsadrills

A small set of classic programming drills, usable as a library or from the
command line:

- `dsadrills.patterns`: star, number and letter patterns (squares,
  triangles, pyramids, diamonds, Floyd's triangle and more)
- `dsadrills.hashing`: frequency tables, with lookups
- `dsadrills.recursion`: Fibonacci, sums, counting, palindromes and reversal
- `dsadrills.sorting`: bubble sort and insertion sort

## Installation

```
pip install .
```

## Library use

```python
from dsadrills.patterns import pyramid, render, PATTERNS
from dsadrills.hashing import frequency_table
from dsadrills.recursion import fibonacci, sum_to, is_palindrome, reverse_in_place
from dsadrills.sorting import bubble_sort, insertion_sort

print(pyramid(3), end="")
print(render("floyd_triangle", 4), end="")
frequency_table([1, 2, 1, 3, 2])    # {1: 2, 2: 2, 3: 1}
fibonacci(10)                       # 55
sum_to(4)                           # 10
is_palindrome("madam")              # True
bubble_sort([5, 2, 4, 1])           # [1, 2, 4, 5]
insertion_sort([5, 2, 4, 1])        # [1, 2, 4, 5]
```

### Patterns

Every pattern function takes a size `n` and returns the whole pattern as a
string, one newline-terminated row per line, with padding spaces kept:
`square`, `right_triangle`, `number_triangle`, `repeated_number_triangle`,
`inverted_triangle`, `inverted_number_triangle`, `pyramid`,
`inverted_pyramid`, `diamond`, `half_diamond`, `number_crown`,
`floyd_triangle`, `letter_triangle`, `inverted_letter_triangle`,
`repeated_letter_triangle`, `letter_pyramid`, `reverse_letter_triangle` and
`hollow_diamond`.

`PATTERNS` maps each of these names to its function, and `render(name, n)`
looks a pattern up by name, raising `ValueError` for an unknown name.
`reverse_letter_triangle` raises `ValueError` when a row would need a
character below code point 0.

### Hashing

`frequency_table(values)` returns a dict from each distinct value to its
count, with keys in ascending order.

### Recursion

- `fibonacci(n)`: the n-th Fibonacci number; n of 1 or less is returned as is.
- `sum_to(n)`: 1 + 2 + ... + n; raises `ValueError` for negative n.
- `repeat_name(name, n)`: a list holding `name` n times.
- `count_up(n)` / `count_down(n)`: the numbers 1..n rising or falling.
- `is_palindrome(text)`: whether text reads the same both ways.
- `reverse_in_place(items)`: reverses a mutable sequence in place.

### Sorting

`bubble_sort(items)` and `insertion_sort(items)` each return a new sorted
list and leave the input untouched. Bubble sort stops early once a pass
makes no swap.

## Command line

Each command reads whitespace-separated input from standard input.

- `dsadrills-patterns PATTERN` reads a count of cases, then one size per
  case, and prints the named pattern for each size. `PATTERN` is one of the
  names in `PATTERNS`.
- `dsadrills-hashing` reads a count and that many integers, prints each
  distinct value as `value->count` in ascending order, then reads a number of
  queries and prints the count of each queried value (0 if never seen).
- `dsadrills-recursion DRILL` runs one drill, where `DRILL` is one of:
  - `fibonacci`: reads n, prints the n-th Fibonacci number;
  - `sum`: reads n, prints `The sum of n number is : <sum>`;
  - `name`: reads n, prints the text given by `--name` (default `Hello`)
    n times;
  - `count-up` / `count-down`: reads n, prints 1..n one per line, rising or
    falling;
  - `palindrome`: reads a word (default `madam`), prints `1` or `0`;
  - `reverse`: reads n and n integers, prints them reversed.
- `dsadrills-sorting [--algorithm {bubble,insertion}]` reads a count and
  that many integers and prints them sorted (bubble sort by default).

For example:

```
echo "2 3 4" | dsadrills-patterns pyramid
echo "5 1 2 1 3 2 2 1 4" | dsadrills-hashing
echo "10" | dsadrills-recursion fibonacci
echo "4 5 2 4 1" | dsadrills-sorting --algorithm insertion
```

Run any command with `--help` for its options.

## Running the tests

```
pip install .[test]
pytest
```