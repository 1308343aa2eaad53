import logging
import os
from collections.abc import Callable
from pathlib import Path
import tempfile
import time
from typing import TypeVar

from passlist.config import Settings
from passlist.errors import OutputWriteError
from passlist.formatter import render
from passlist.keys import sort_records
from passlist.record_reader import read_records
from passlist.schemas import ConversionResult


logger = logging.getLogger(__name__)
T = TypeVar("T")


def write_text_atomic(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` so that the file is either complete or absent."""
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as outfile:
            tmp_name = outfile.name
            outfile.write(text)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputWriteError(f"cannot write output file {path}: {exc}") from exc


class ConverterRunner:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def run(
        self,
        *,
        input_path: Path,
        output_path: Path,
        password_start_column: int | None = None,
    ) -> ConversionResult:
        start_column = password_start_column or self.settings.password_start_column
        logger.info("conversion started", extra={"input_path": str(input_path), "output_path": str(output_path)})

        # Everything is materialised before the first byte is written.
        schema, records, skipped = self._run_step("read", lambda: read_records(input_path))
        ordered = self._run_step("sort", lambda: sort_records(records))
        text = self._run_step("render", lambda: render(ordered, start_column))
        self._run_step("write", lambda: write_text_atomic(output_path, text))

        result = ConversionResult(
            input_path=str(input_path),
            output_path=str(output_path),
            schema=schema,
            total_rows=len(records) + len(skipped),
            written_records=len(ordered),
            skipped_rows=tuple(skipped),
        )
        logger.info(
            "conversion finished",
            extra={"schema": schema, "records": result.written_records, "skipped": len(result.skipped_rows)},
        )
        return result

    def _run_step(self, step_name: str, fn: Callable[[], T]) -> T:
        started = time.perf_counter()
        try:
            result = fn()
        except Exception:
            logger.error("step failed", extra={"step_name": step_name})
            raise
        duration_ms = (time.perf_counter() - started) * 1000
        logger.debug("step finished", extra={"step_name": step_name, "duration_ms": round(duration_ms, 3)})
        return result
