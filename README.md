# rustdrill

Helpers for working through a set of small Rust exercises, together with
reference solutions to many of those exercises written as ordinary Python
functions and classes.

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH`, only if you want
  `RustAnalyzerProject.get_sysroot_src` to ask it for the toolchain location

## Installation

```
pip install .
```

## rust-analyzer project file

`rustdrill.project.RustAnalyzerProject` builds a `rust-project.json` so that
rust-analyzer treats every exercise file as its own crate (edition 2021, with
the `test` cfg set so it works inside `#[test]` blocks).

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # RUST_SRC_PATH, or `rustc --print sysroot`
project.exercises_to_json("exercises")
if project.crates:
    project.write_to_disk("rust-project.json")
```

`add_path(path)` adds a single crate when the text after the first dot of the
path is `rs`; `to_dict()` returns the data that `write_to_disk` serialises.

## Status lines

`rustdrill.ui.warn(message)` and `rustdrill.ui.success(message)` print a red
or green line prefixed by a symbol and return its plain text. When the
`NO_EMOJI` environment variable is set, `use_emoji()` is false and plain
symbols (`!`, `✓`) replace the emoji.

## Reference solutions

The `rustdrill.drills` package holds one module per topic:

- `strings` – `trim_me`, `compose_me`, `replace_me`, `is_a_color_word`
- `vecs` – `array_and_vec`, `vec_loop`, `vec_map`
- `conditions` – `bigger`, `foo_if_fizz`
- `errors` – `generate_nametag_text`, `total_cost`, `spend_tokens`,
  `PositiveNonzeroInteger`, `parse_pos_nonzero`
- `quizzes` – `calculate_price_of_apples`, `transformer` with `Command`,
  `ReportCard`
- `hashmaps` – `fruit_basket`, `fill_fruit_basket`, `build_scores_table`
- `iterators` – `capitalize_first`, `divide`, `result_with_list`,
  `list_of_results`, `factorial`, progress counting functions
- `options` – `maybe_icecream`
- `structs` – `ColorClassicStruct`, `ColorTupleStruct`, `Order`, `Package`
- `traits` – `append_bar`, `Licensed`, `compare_license_types`, `some_func`
- `smart_pointers` – `Cons` lists, `Cow` with `abs_all`, `Shared` handles,
  `offset_sums`
- `threads` – `run_timed_jobs`, `count_jobs`, `receive_all`
- `enums` – `Message` and `MachineState.process`
- `basics` – `Wrapper`, `sale_price`, `is_even`, `Rectangle`

```python
from rustdrill.drills.iterators import divide, NotDivisibleError

divide(81, 9)        # 9
divide(81, 6)        # raises NotDivisibleError
```

## What this package does not do

There is no command-line program: the package does not compile, run, test
or lint exercises, does not track which exercises are done, has no watch
mode, and does not read an exercise list or print hints. It provides the
library pieces above only.

## Tests

```
pip install ".[test]"
pytest
```