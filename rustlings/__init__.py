"""Load, compile, run and check small Rust exercises, with worked solutions."""

__version__ = "5.5.1"