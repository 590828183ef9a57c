"""Report line formatting and the report file on disk."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..exceptions import ReportError, ValidationError
from .models import TrackMetadata, WpmResult

logger = logging.getLogger(__name__)


def _single_line(value, field: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"Track {field} is missing or not text: {value!r}")
    return value.replace("\n", " ", 1).replace("\r", " ", 1)


def format_report_line(metadata: TrackMetadata, result: WpmResult) -> str:
    """Serialize one accepted track.

    Example:
        ``182 WPM 0.12 rp Artist - Song Peaks: 310.00, 295.50, ...``
    """
    name = _single_line(metadata.name, "name")
    artist = _single_line(metadata.artist, "artist")
    peaks = ", ".join(f"{peak:.2f}" for peak in result.peaks)
    return f"{result.average} WPM {result.repeats:g} rp {artist} - {name} Peaks: {peaks}"


class ReportFile:
    """Append-only text report, rewritten once after deduplication."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def truncate(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("", encoding="utf-8")
        except OSError as e:
            raise ReportError(f"Cannot reset report {self.path}: {e}") from e

    def append(self, lines: Iterable[str]) -> bool:
        """Append lines; failures are logged and reported as False."""
        payload = "".join(f"{line}\n" for line in lines)
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            logger.error(f"Error writing to {self.path}: {e}")
            return False
        return True

    def read_lines(self) -> List[str]:
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReportError(f"Cannot read report {self.path}: {e}") from e
        return content.split("\n")

    def rewrite(self, lines: Iterable[str]) -> None:
        try:
            self.path.write_text("\n".join(lines), encoding="utf-8")
        except OSError as e:
            raise ReportError(f"Cannot rewrite report {self.path}: {e}") from e
