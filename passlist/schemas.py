from dataclasses import dataclass, field
from pathlib import Path


CHROMIUM = "chromium"
FIREFOX = "firefox"

CHROMIUM_HEADER = "name,url,username,password,note"
FIREFOX_HEADER = (
    '"url","username","password","httpRealm","formActionOrigin",'
    '"guid","timeCreated","timeLastUsed","timePasswordChanged"'
)


@dataclass(frozen=True)
class Record:
    name: str
    password: str
    sort_key: str
    original_index: int


@dataclass(frozen=True)
class MalformedRow:
    record_index: int
    raw_line: str = field(repr=False)
    reason: str


@dataclass(frozen=True)
class LocatedInput:
    path: Path
    schema: str | None
    explicit: bool


@dataclass(frozen=True)
class ConversionResult:
    input_path: str
    output_path: str
    schema: str
    total_rows: int
    written_records: int
    skipped_rows: tuple[MalformedRow, ...]
