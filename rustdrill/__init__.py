"""Reference solutions to Rust exercises, rust-analyzer project generation and status output."""

__version__ = "5.4.1"