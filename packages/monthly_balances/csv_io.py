"""File collaborators: read raw input records, write report lines.

Input is a headerless, comma-delimited UTF-8 file. Each line is decoded and
split on ``,`` independently, with no quoting rules, so one damaged line can
never swallow or abort the lines after it. Blank lines and lines that are not
valid UTF-8 are dropped; every other line becomes one raw tuple of field
strings for :func:`monthly_balances.parser.parse_transactions` to validate.
Neither function retries: I/O failures surface immediately as
:class:`~monthly_balances.errors.ResourceUnavailableError`.
"""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from .errors import ResourceUnavailableError
from .logging_setup import get_logger

logger = get_logger("monthly_balances.csv_io")

DELIMITER = ","


def _decode_line(raw: bytes, lineno: int) -> str | None:
    # A BOM is only meaningful at the start of the file.
    encoding = "utf-8-sig" if lineno == 1 else "utf-8"
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        logger.debug("skipping line %d: not valid UTF-8 (%s)", lineno, exc.reason)
        return None


def read_records(csv_path: str | PathLike[str]) -> list[tuple[str, ...]]:
    """Return every non-blank, decodable line of ``csv_path`` as a tuple of fields."""

    p = Path(csv_path)
    records: list[tuple[str, ...]] = []
    try:
        with p.open("rb") as f:
            for lineno, raw in enumerate(f, start=1):
                text = _decode_line(raw.rstrip(b"\r\n"), lineno)
                if text is None or not text.strip():
                    continue
                records.append(tuple(text.split(DELIMITER)))
    except FileNotFoundError as exc:
        raise ResourceUnavailableError(p, "input", "file not found") from exc
    except IsADirectoryError as exc:
        raise ResourceUnavailableError(p, "input", "is a directory") from exc
    except PermissionError as exc:
        raise ResourceUnavailableError(p, "input", "permission denied") from exc
    except OSError as exc:
        raise ResourceUnavailableError(p, "input", exc.strerror or str(exc)) from exc
    logger.debug("read %d records from %s", len(records), p)
    return records


def write_lines(csv_path: str | PathLike[str], lines: Iterable[str]) -> int:
    """Create or truncate ``csv_path`` and write ``lines`` verbatim.

    Returns the number of lines written.
    """

    p = Path(csv_path)
    written = 0
    try:
        with p.open("w", encoding="utf-8", newline="") as f:
            for line in lines:
                f.write(line)
                written += 1
    except PermissionError as exc:
        raise ResourceUnavailableError(p, "output", "permission denied") from exc
    except OSError as exc:
        raise ResourceUnavailableError(p, "output", exc.strerror or str(exc)) from exc
    logger.debug("wrote %d lines to %s", written, p)
    return written


__all__ = ["read_records", "write_lines"]
