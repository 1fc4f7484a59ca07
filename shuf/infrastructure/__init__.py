from .line_sources import (
    STDIN_MARKER,
    lines_from_arguments,
    lines_from_file,
    lines_from_range,
    open_input,
    parse_range,
    parse_unsigned,
    read_lines,
    resolve,
)

__all__ = [
    "STDIN_MARKER",
    "lines_from_arguments",
    "lines_from_file",
    "lines_from_range",
    "open_input",
    "parse_range",
    "parse_unsigned",
    "read_lines",
    "resolve",
]
