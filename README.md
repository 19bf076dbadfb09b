# pragemastik

A problem set for a programming contest, as a Python package. Every problem
lives in its own module and provides:

- a solver that takes the problem's input as Python values and returns the answer;
- `is_valid(...)`, which checks an input against the problem's constraints;
- `generate_cases(rng)`, which yields the problem's test inputs, drawing from a
  `random.Random` instance;
- `run(text)`, which reads the problem's input text and returns the text a
  correct submission prints.

Some problems also have a slower reference solver (`*_naive`, or
`press_one_by_digits`) for cross-checking. The two problems that accept more
than one correct answer have a `score(test_input, test_output, contestant_output)`
function that returns a `pragemastik.verdict.Verdict`.

The package needs nothing beyond the standard library.

## Problems

| Module | Problem | Solver |
| --- | --- | --- |
| `belah_bilangan` | Belah Bilangan | `split_count` |
| `cari_ganjil` | Cari Ganjil | `find_odd_multiple`, `score` |
| `kepulauan` | Kepulauan | `island_costs` |
| `piramid` | Piramid | `pyramid_sum`, `pyramid_sum_naive` |
| `tekan_satu` | Tekan Satu | `press_one`, `press_one_by_digits` |
| `jarak_benteng` | Jarak Benteng | `min_fort_distance` |
| `kotak_pensil` | Kotak Pensil | `longest_zero_run` |
| `closest_cell` | Closest Cell 2 | `ClosestCell`, `process` |
| `hari_tersibuk` | Hari Tersibuk | `busiest_days`, `busiest_days_naive` |
| `hitung_jajargenjang` | Hitung Jajargenjang 1 | `count_parallelograms` |
| `jembatan_layang` | Jembatan Layang | `bridge_products`, `bridge_products_naive` |
| `jenga` | Bermain Jenga | `winner` |
| `maksimalkan_xor` | Maksimalkan XOR | `maximize_xor` |
| `membuat_permutasi` | Membuat Permutasi | `count_permutation_pairs`, `count_permutation_pairs_naive` |
| `mengisi_pohon` | Mengisi Pohon | `fill_tree`, `score` |
| `pertahanan_ganesha` | Pertahanan Ganesha | `count_safe_removals` |
| `menjadi_pustakawan` | Menjadi Pustakawan | `Library`, `process` |
| `perayaan_ketiga` | Perayaan Ketiga | `third_smallest_area`, `convex_hull` |
| `sepasang_bintang` | Sepasang Bintang | `count_star_pairs`, `count_star_pairs_naive` |
| `taman_bilangan` | Taman Bilangan | `min_garden_walk`, `min_garden_walk_naive` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the solvers

```python
from pragemastik.tekan_satu import press_one
from pragemastik.kotak_pensil import longest_zero_run
from pragemastik.jarak_benteng import min_fort_distance

press_one(3)                                         # 3
longest_zero_run(["1001", "0011", "1000", "0101"])   # 3
min_fort_distance([9, 1, 6, 7, 2], [4, 10, 4, 8, 3]) # 1
```

Solving a whole input file works the same way for every problem:

```python
from pathlib import Path
from pragemastik import piramid

print(piramid.run(Path("piramid.in").read_text()), end="")
```

Test inputs are reproducible when the random generator is seeded:

```python
import random
from pragemastik import belah_bilangan

for case in belah_bilangan.generate_cases(random.Random(2022)):
    print(case)
```

## Command line

The `pragemastik` command has two subcommands.

`solve` reads a problem's input from standard input and writes the answer to
standard output. Problem names are the module names with hyphens, for example
`tekan-satu` or `menjadi-pustakawan`:

```
pragemastik solve piramid < piramid.in
```

`score` judges a contestant's output for `cari-ganjil` or `mengisi-pohon`.
It takes the test input file, the judge's output file and the contestant's
output file, and prints `AC` or `WA`. It exits with status 1 if the test
input or the judge's output cannot be read as expected:

```
pragemastik score mengisi-pohon case.in case.out contestant.out
```

`pragemastik --help` lists the subcommands and their arguments.

## What it does not do

The package does not compile, run or time submissions; `score` only compares
output files that already exist. It does not write test inputs to files or
bundle them for a judging system; `generate_cases` yields them as Python
values. `Verdict.exit_code()` gives the exit status (42 or 43) a judge's
validator reports, but the command itself prints the verdict and exits with 0.