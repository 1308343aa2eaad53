import logging
from pathlib import Path

from passlist.errors import InputNotFoundError, InputReadError, MalformedRecordError, UnrecognizedSchemaError
from passlist.keys import derive_key
from passlist.schemas import CHROMIUM, CHROMIUM_HEADER, FIREFOX, FIREFOX_HEADER, MalformedRow, Record


logger = logging.getLogger(__name__)

# schema -> (name field, password field), zero-based
FIELD_POSITIONS: dict[str, tuple[int, int]] = {
    CHROMIUM: (0, 3),
    FIREFOX: (0, 2),
}

SCHEME_PREFIXES = ("https://", "http://")


def normalize_header(line: str) -> str:
    for char in ("\r", "\n", '"', " "):
        line = line.replace(char, "")
    return line.lower()


KNOWN_HEADERS: dict[str, str] = {
    normalize_header(CHROMIUM_HEADER): CHROMIUM,
    normalize_header(FIREFOX_HEADER): FIREFOX,
}


def detect_schema(header_line: str) -> str:
    schema = KNOWN_HEADERS.get(normalize_header(header_line))
    if schema is None:
        raise UnrecognizedSchemaError(f"unrecognized CSV header: {header_line.strip()[:80]!r}")
    return schema


def sniff_schema(path: Path) -> str | None:
    try:
        with path.open("r", encoding="utf-8-sig") as infile:
            first_line = infile.readline()
    except (OSError, UnicodeDecodeError):
        return None
    return KNOWN_HEADERS.get(normalize_header(first_line))


def strip_quotes(value: str) -> str:
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def strip_scheme(name: str) -> str:
    for prefix in SCHEME_PREFIXES:
        if name.startswith(prefix):
            return name[len(prefix):]
    return name


def parse_line(line: str, schema: str, record_index: int) -> Record:
    # Every comma splits, quoted or not.
    name_pos, password_pos = FIELD_POSITIONS[schema]
    fields = line.rstrip("\r\n").split(",")
    if len(fields) <= max(name_pos, password_pos):
        raise MalformedRecordError(
            record_index,
            f"expected at least {password_pos + 1} fields for {schema}, got {len(fields)}",
        )

    name = strip_scheme(strip_quotes(fields[name_pos]))
    password = strip_quotes(fields[password_pos])
    return Record(
        name=name,
        password=password,
        sort_key=derive_key(name),
        original_index=record_index,
    )


def parse_lines(lines: list[str], schema: str) -> tuple[list[Record], list[MalformedRow]]:
    records: list[Record] = []
    skipped: list[MalformedRow] = []

    for index, line in enumerate(lines, start=1):
        if not line.rstrip("\r\n"):
            continue
        try:
            records.append(parse_line(line, schema, index))
        except MalformedRecordError as exc:
            logger.warning("skipping malformed row", extra={"record_index": index, "reason": exc.reason})
            skipped.append(MalformedRow(index, line, exc.reason))

    return records, skipped


def read_records(input_path: Path) -> tuple[str, list[Record], list[MalformedRow]]:
    if not input_path.is_file():
        raise InputNotFoundError(f"input file not found: {input_path}")

    try:
        with input_path.open("r", encoding="utf-8-sig", newline="") as infile:
            lines = infile.read().split("\n")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"cannot read input file {input_path}: {exc}") from exc
    if lines and lines[-1] == "":
        lines.pop()

    if not lines:
        raise UnrecognizedSchemaError(f"input file is empty: {input_path}")

    schema = detect_schema(lines[0])
    records, skipped = parse_lines(lines[1:], schema)
    logger.info(
        "records read",
        extra={"input_path": str(input_path), "schema": schema, "records": len(records), "skipped": len(skipped)},
    )
    return schema, records, skipped
