# rustlings

A Python library for working with a set of small Rust exercises: it reads the
exercise list, compiles and runs each exercise with the Rust toolchain, tells
whether an exercise still carries its `// I AM NOT DONE` marker, and writes a
`rust-project.json` so rust-analyzer understands the exercise files. It also
ships worked solutions to many of the exercises as ordinary Python modules,
and a small number-guessing game.

## Requirements

- Python 3.11 or later
- For compiling and running exercises: `rustc` on your `PATH`. Clippy
  exercises also need `cargo`.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## The exercise list

`info.toml` lists the exercises in the order they are meant to be done:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "Remove the I AM NOT DONE comment to move on."
```

`mode` is one of `compile`, `test` or `clippy` (see `rustlings.exercise.Mode`).

## Working with exercises

```python
from rustlings.exercise import ExerciseError, load_exercises

exercises = load_exercises("info.toml")
exercise = exercises[0]

state = exercise.state()
if state.done():
    print(f"{exercise} looks done")
else:
    for line in state.context:
        marker = ">" if line.important else " "
        print(f"{marker}{line.number:>3} | {line.line}")

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except ExerciseError as err:
    print(err.output.stderr)
```

- `Exercise.compile()` runs `rustc` (with `--test` in `test` mode) and
  returns a `CompiledExercise`. In `clippy` mode it writes
  `./exercises/clippy/Cargo.toml`, builds the file, runs `cargo clean` and
  then `cargo clippy` with warnings denied. On failure it raises
  `ExerciseError`, whose `output` holds the captured `stdout` and `stderr`.
- The binary is written to `./temp_<pid>_<thread>` in the current directory;
  closing the `CompiledExercise` (or leaving its `with` block) removes it.
- `CompiledExercise.run()` runs the binary (with `--show-output` in `test`
  mode) and returns an `ExerciseOutput`, or raises `ExerciseError`.
- `Exercise.state()` returns a `State`: done when no `I AM NOT DONE` comment is
  left, otherwise pending with the marker line and up to two lines on either
  side. `Exercise.looks_done()` is a shortcut; it compiles nothing.

## rust-analyzer support

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()        # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json()      # one crate per .rs file under ./exercises
project.write_to_disk()          # ./rust-project.json
```

## Status messages

`rustlings.ui.warn(message)` and `rustlings.ui.success(message)` print a red
or green line. Set the `NO_EMOJI` environment variable to get plain `!` and
`✓` markers instead of emoji.

## Worked solutions

The `rustlings.solutions` package holds solutions as plain Python:

- `quizzes`: apple pricing, a string transformer, report cards
- `basics`: `bigger`, `foo_if_fizz`, `is_even`, `sale_price`, `square`
- `conversions`: parsing `"name,age"` into a `Person`, building a `Color`
- `errors`: nametags, token costs, positive nonzero integers
- `iterators`: capitalising words, checked division, factorial, counting
- `hashmaps`: fruit baskets and a football scores table
- `messages`: a state changed by `Move`, `Echo`, `ChangeColor` and `Quit`
- `traits`: `append_bar`, licensing information
- `sequences`, `strings`: lists and string helpers
- `containers`: `maybe_icecream`, `Wrapper`, a cons list, a copy-on-write `Cow`
- `adder`, `shapes`: small arithmetic helpers, `Guess`, `Rectangle`

## Guessing game

```
rustlings-guess
```

Picks a number from 1 to 100 and reads guesses from standard input, saying
after each one whether it was too small or too big.

## What this package does not do

There is no `rustlings` command. Nothing here verifies the whole exercise list
in order, watches files for changes, lists exercises with their progress,
prints hints, or resets an exercise; those steps are left to your own code
built on `rustlings.exercise`.