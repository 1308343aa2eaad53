import logging
from pathlib import Path
import re

from passlist.errors import InputNotFoundError
from passlist.record_reader import sniff_schema
from passlist.schemas import LocatedInput


logger = logging.getLogger(__name__)

PREFIX_SEPARATORS = re.compile(r"[- _]")


def scan_directory(search_dir: Path) -> LocatedInput | None:
    if not search_dir.is_dir():
        return None

    candidates = sorted(
        path for path in search_dir.iterdir() if path.is_file() and path.suffix.lower() == ".csv"
    )
    for path in candidates:
        schema = sniff_schema(path)
        if schema is not None:
            logger.info("password export found", extra={"input_path": str(path), "schema": schema})
            return LocatedInput(path=path, schema=schema, explicit=False)
    return None


def locate_input(candidate: str | None, search_dir: Path) -> LocatedInput:
    # A named file that exists wins; otherwise scan search_dir for a known export.
    if candidate:
        path = Path(candidate)
        if path.is_file():
            return LocatedInput(path=path, schema=sniff_schema(path), explicit=True)
        logger.warning("named input file missing, scanning directory", extra={"input_path": candidate})

    located = scan_directory(search_dir)
    if located is None:
        raise InputNotFoundError(f"no browser password export found in {search_dir}")
    return located


def default_output_name(input_path: Path) -> str:
    prefix = PREFIX_SEPARATORS.split(input_path.stem, maxsplit=1)[0].lower()
    return f"{prefix}-passwords.txt"


def resolve_output_path(located: LocatedInput, output_file: str | None, default_output_file: str) -> Path:
    if output_file:
        return Path(output_file)
    if located.explicit:
        return Path(default_output_name(located.path))
    return Path(default_output_file)
