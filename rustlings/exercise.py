"""Exercises: compiling, running and checking whether they look done."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from rustlings.ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary file name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring any error."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str

    @classmethod
    def _from_process(cls, result: subprocess.CompletedProcess) -> ExerciseOutput:
        return cls(
            stdout=result.stdout.decode("utf-8", errors="replace"),
            stderr=result.stderr.decode("utf-8", errors="replace"),
        )


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Done when context is None, otherwise pending with the lines around the marker."""

    context: tuple[ContextLine, ...] | None = None

    def done(self) -> bool:
        return self.context is None


class ExerciseError(Exception):
    """A compile or run step failed; carries the captured output."""

    def __init__(self, output: ExerciseOutput):
        super().__init__(output.stderr or output.stdout)
        self.output = output


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise):
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        return self.exercise.run()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _run(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def _rustc_args(self, target: str, *, test: bool = False) -> list[str]:
        head = ["rustc", "--test"] if test else ["rustc"]
        return [*head, str(self.path), "-o", target, *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS]

    def _clippy(self, target: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        message = (
            "Failed to write Clippy Cargo.toml file."
            if no_emoji()
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml)
        except OSError as err:
            raise RuntimeError(message) from err
        # Build an executable too so clippy exercises can be run afterwards.
        try:
            _run(self._rustc_args(target))
        except OSError as err:
            raise RuntimeError("Failed to compile!") from err
        try:
            _run(["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS])
        except OSError as err:
            raise RuntimeError("Failed to run 'cargo clean'") from err
        return _run(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise ExerciseError with the output on failure."""
        target = temp_file()
        try:
            if self.mode is Mode.COMPILE:
                result = _run(self._rustc_args(target))
            elif self.mode is Mode.TEST:
                result = _run(self._rustc_args(target, test=True))
            else:
                result = self._clippy(target)
        except OSError as err:
            raise RuntimeError("Failed to run 'compile' command.") from err

        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseError(ExerciseOutput._from_process(result))

    def run(self) -> ExerciseOutput:
        """Run the compiled binary; raise ExerciseError with the output on failure."""
        arg = "--show-output" if self.mode is Mode.TEST else ""
        try:
            result = _run([temp_file(), arg])
        except OSError as err:
            raise RuntimeError("Failed to run 'run' command") from err
        output = ExerciseOutput._from_process(result)
        if result.returncode != 0:
            raise ExerciseError(output)
        return output

    def state(self) -> State:
        """Return Done, or Pending with the lines around the marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")

        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        context = tuple(
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines)
            if low <= i <= high
        )
        return State(context)

    def looks_done(self) -> bool:
        """Whether the marker has been removed; it does not compile anything."""
        return self.state().done()

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [
        Exercise(name=item["name"], path=item["path"], mode=item["mode"], hint=item["hint"])
        for item in data["exercises"]
    ]