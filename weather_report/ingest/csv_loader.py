"""Load daily weather observations from a headed, comma-separated file."""

import logging
import math
import re
from datetime import date
from pathlib import Path
from typing import TextIO

from weather_report.models.record import WeatherRecord

logger = logging.getLogger(__name__)

FIELD_COUNT = 4

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
_INT_RE = re.compile(r"^[+-]?\d+$", re.ASCII)
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)


class WeatherDataError(Exception):
    """Raised when the observations file has malformed content."""

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        line_number: int | None = None,
        line: str = "",
    ):
        self.path = path
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"{path}, line {line_number}: {message}"
        elif path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


def parse_weather_data(
    file_path: str | Path, skip_malformed: bool = False
) -> list[WeatherRecord]:
    """Parse every data row of the file into a WeatherRecord, in file order.

    The first line is a header and is discarded without being checked.
    A malformed row raises WeatherDataError unless skip_malformed is set,
    in which case it is logged and dropped. Undecodable text is always a
    WeatherDataError. OSError from opening or reading the file propagates
    unchanged.
    """
    path = Path(file_path)
    try:
        with open(path, encoding="utf-8") as f:
            records, skipped = _read_rows(f, path, skip_malformed)
    except UnicodeDecodeError as e:
        raise WeatherDataError(f"file is not valid UTF-8: {e}", path=path) from e

    if skipped:
        logger.warning("Skipped %d malformed rows in %s", skipped, path)
    logger.info("Loaded %d records from %s", len(records), path)
    return records


def _read_rows(
    f: TextIO, path: Path, skip_malformed: bool
) -> tuple[list[WeatherRecord], int]:
    records: list[WeatherRecord] = []
    skipped = 0

    header = f.readline()
    if not header:
        logger.warning("No header found in %s, file is empty", path)
        return records, skipped
    logger.debug("Skipping header: %s", header.rstrip("\r\n"))

    for line_number, raw in enumerate(f, start=2):
        line = raw.rstrip("\r\n")
        try:
            records.append(parse_row(line))
        except ValueError as e:
            if not skip_malformed:
                raise WeatherDataError(
                    str(e), path=path, line_number=line_number, line=line
                ) from e
            skipped += 1
            logger.warning(
                "Skipping malformed row %d in %s: %s", line_number, path, e
            )
    return records, skipped


def parse_row(line: str) -> WeatherRecord:
    """Parse one `date,temperature,humidity,precipitation` line.

    Raises ValueError describing the first field that fails.
    """
    parts = line.split(",")
    if len(parts) != FIELD_COUNT:
        raise ValueError(
            f"expected {FIELD_COUNT} fields, got {len(parts)}: {line!r}"
        )
    date_str, temp_str, humidity_str, precip_str = (p.strip() for p in parts)
    return WeatherRecord(
        date=_parse_date(date_str),
        temperature=_parse_float(temp_str, "temperature"),
        humidity=_parse_int(humidity_str, "humidity"),
        precipitation=_parse_float(precip_str, "precipitation"),
    )


def _parse_date(s: str) -> date:
    if not _DATE_RE.match(s):
        raise ValueError(f"invalid date {s!r}, expected YYYY-MM-DD")
    try:
        return date.fromisoformat(s)
    except ValueError:
        raise ValueError(f"invalid date {s!r}") from None


def _parse_float(s: str, name: str) -> float:
    if not _FLOAT_RE.match(s):
        raise ValueError(f"invalid {name} {s!r}")
    value = float(s)
    # overflow, e.g. 1e999
    if not math.isfinite(value):
        raise ValueError(f"invalid {name} {s!r}, must be a finite number")
    return value


def _parse_int(s: str, name: str) -> int:
    if not _INT_RE.match(s):
        raise ValueError(f"invalid {name} {s!r}")
    return int(s)
