"""Rename a Cargo release binary to embed a name, the host OS and the version."""

__version__ = "0.1.0"
