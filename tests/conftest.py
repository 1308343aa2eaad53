from collections.abc import Callable
from pathlib import Path

import pytest

from passlist.config import Settings
from passlist.pipeline import ConverterRunner
from passlist.schemas import CHROMIUM_HEADER, FIREFOX_HEADER


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        app_name="passlist",
        log_level="INFO",
        input_file=None,
        output_file=None,
        default_output_file="vivaldi-passwords.txt",
        search_dir=str(tmp_path),
        password_start_column=35,
        password_file=str(tmp_path / "vivaldi-passwords.txt"),
    )


@pytest.fixture()
def runner(test_settings: Settings) -> ConverterRunner:
    return ConverterRunner(test_settings)


@pytest.fixture()
def write_export(tmp_path: Path) -> Callable[..., Path]:
    def _write(rows: list[str], *, header: str = CHROMIUM_HEADER, name: str = "Vivaldi-Passwörter.csv") -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8") as outfile:
            outfile.write(header + "\n")
            for row in rows:
                outfile.write(row + "\n")
        return path

    return _write


@pytest.fixture()
def firefox_header() -> str:
    return FIREFOX_HEADER
