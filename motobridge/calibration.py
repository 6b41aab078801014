"""Robot calibration data read from the controller's RBCALIB.DAT file.

Each calibration record in the file relates a master robot group to a
slave group, and gives the slave's position and orientation relative to
the master. Positions are stored in micrometres and angles in 0.0001
degree units, as used by the controller.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Mapping

__all__ = ["CalibrationData", "CalibrationParseError", "CalibrationStore", "parse_calibration"]

_RECORD_MARKER = "//RBCALIB"
_MAX_GROUP_FLAGS = 32
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class CalibrationParseError(ValueError):
    """Raised when calibration file content cannot be parsed."""


@dataclass(frozen=True)
class CalibrationData:
    """One calibration record.

    ``master_group`` and ``slave_group`` are zero-based group indices, or
    None when the record flags no group.
    """

    master_group: int | None
    slave_group: int | None
    pos_uow: tuple[int, int, int]
    ang_uow: tuple[int, int, int]


def _next_line(lines: Iterator[str], section: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise CalibrationParseError(f"calibration data truncated before {section}") from None


def _field(line: str, section: str) -> str:
    parts = line.split()
    if len(parts) < 2:
        raise CalibrationParseError(f"failed to parse robot calibration data ({section})")
    return parts[1]


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _file_number(line: str) -> int:
    value = _field(line, "RBCALIB")
    try:
        number = int(value)
    except ValueError:
        raise CalibrationParseError(f"invalid calibration file number: {value!r}") from None
    if number < 1:
        raise CalibrationParseError(f"invalid calibration file number: {number}")
    return number - 1  # file numbers in the file are one-based


def _flagged_group(line: str, section: str) -> int | None:
    flags = _field(line, section).split(",")[:_MAX_GROUP_FLAGS]
    return next((index for index, flag in enumerate(flags) if _leading_int(flag) == 1), None)


def _offsets(line: str) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    parts = _field(line, "SRANG").split(",")
    if len(parts) < 6:
        raise CalibrationParseError("failed to parse robot calibration data (SRANG)")
    try:
        values = [float(part) for part in parts[:6]]
    except ValueError:
        raise CalibrationParseError("failed to parse robot calibration data (SRANG)") from None
    pos = tuple(int(v * 1000) for v in values[:3])
    ang = tuple(int(v * 10000) for v in values[3:])
    return pos, ang  # type: ignore[return-value]


def parse_calibration(text: str) -> dict[int, CalibrationData]:
    """Parse RBCALIB.DAT content into records keyed by zero-based file number.

    Parsing stops at the first line that does not start a calibration record.
    """
    lines = iter(text.splitlines())
    files: dict[int, CalibrationData] = {}

    for header in lines:
        if _RECORD_MARKER not in header:
            break
        file_no = _file_number(header)

        _next_line(lines, "MTOOL")
        master = _flagged_group(_next_line(lines, "MGROUP"), "MGROUP")
        for section in ("MPULSE", "MRBC1", "MRBC2", "MRBC3", "STOOL"):
            _next_line(lines, section)

        slave = _flagged_group(_next_line(lines, "SGROUP"), "SGROUP")
        for section in ("SPULSE", "SSTC1", "SSTC2", "SSTC3"):
            _next_line(lines, section)

        pos, ang = _offsets(_next_line(lines, "SRANG"))
        files[file_no] = CalibrationData(master, slave, pos, ang)

    return files


class CalibrationStore:
    """Cached calibration records, looked up by zero-based file number."""

    def __init__(self, files: Mapping[int, CalibrationData]) -> None:
        self._files = dict(files)

    @classmethod
    def from_text(cls, text: str) -> "CalibrationStore":
        """Build a store from RBCALIB.DAT content."""
        return cls(parse_calibration(text))

    def get(self, file_no: int) -> CalibrationData:
        """Return the record for ``file_no``; raise KeyError if there is none."""
        try:
            return self._files[file_no]
        except KeyError:
            raise KeyError(f"no calibration data for file {file_no}") from None