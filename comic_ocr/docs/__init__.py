"""Plain-text output for recognized pages."""

from .txt import output_path_for, write_txt

__all__ = [
    "output_path_for",
    "write_txt",
]
