from collections.abc import Iterable

from passlist.schemas import Record


DEFAULT_PASSWORD_START_COLUMN = 35
HEADER_NAME = "NAME"
HEADER_PASSWORD = "PASSWORD"


def dot_padding(name: str, password_start_column: int = DEFAULT_PASSWORD_START_COLUMN) -> str:
    # One space before and one after the dots.
    dots_count = (password_start_column - 2) - len(name)
    return "." * max(dots_count, 0)


def format_line(name: str, password: str, password_start_column: int = DEFAULT_PASSWORD_START_COLUMN) -> str:
    dots = dot_padding(name, password_start_column)
    if not dots:
        return f"{name} {password}\n"
    return f"{name} {dots} {password}\n"


def render(records: Iterable[Record], password_start_column: int = DEFAULT_PASSWORD_START_COLUMN) -> str:
    """Render the complete password list: header line, blank line, one line per record."""
    lines = [format_line(HEADER_NAME, HEADER_PASSWORD, password_start_column), "\n"]
    lines.extend(format_line(record.name, record.password, password_start_column) for record in records)
    return "".join(lines)
