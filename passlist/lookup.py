import logging
from pathlib import Path
import re

from passlist.errors import InputNotFoundError, InputReadError, PasslistError


logger = logging.getLogger(__name__)

# Entry lines have a name of five or more characters before the first space.
ENTRY_LINE = re.compile(r"^.{5,} ")


def build_pattern(term: str) -> re.Pattern[str]:
    # A bare domain label must be followed by a TLD.
    source = term if "." in term else f"{term}(.)[a-z]{{2,5}}"
    try:
        return re.compile(source)
    except re.error as exc:
        raise PasslistError(f"invalid search pattern {term!r}: {exc}") from exc


def _read_lines(password_file: Path) -> list[str]:
    if not password_file.is_file():
        raise InputNotFoundError(f"password file not found: {password_file}")
    try:
        with password_file.open("r", encoding="utf-8") as infile:
            return infile.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"cannot read password file {password_file}: {exc}") from exc


def lookup(password_file: Path, term: str) -> list[str]:
    pattern = build_pattern(term)
    matches: list[str] = []
    for line in _read_lines(password_file):
        fields = line.split()
        if fields and pattern.search(fields[0]):
            matches.append(line)
    logger.info("lookup finished", extra={"term": term, "matches": len(matches)})
    return matches


def list_entries(password_file: Path) -> list[str]:
    return [line for line in _read_lines(password_file) if ENTRY_LINE.search(line)]
