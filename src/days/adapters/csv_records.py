"""CSV file record storage adapter."""

import csv
import io
import logging
import os
import tempfile
from pathlib import Path

from days.core.events import Row

logger = logging.getLogger(__name__)

FIELDNAMES = ["date", "category", "description"]


class CsvRecordFile:
    """
    CSV-backed record storage with a date,category,description header.

    Implements RecordFile protocol. Fields containing commas or quotes are
    quoted by the csv module.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.exists()

    def read_rows(self) -> list[Row]:
        """Read all records. A missing file reads as empty."""
        if not self.path.exists():
            logger.debug(f"{self.path} does not exist yet, treating as empty")
            return []

        with self.path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            return [
                Row(
                    date=record.get("date") or "",
                    category=record.get("category") or "",
                    description=record.get("description") or "",
                )
                for record in reader
            ]

    def append_row(self, row: Row) -> None:
        """
        Append one record, writing the header first if the file is new.

        The record is encoded before the file is opened and written in a
        single call, so an unencodable field leaves the file untouched. A
        file whose last line lacks a newline gets one before the record.
        """
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=FIELDNAMES, lineterminator="\n")
        size = self.path.stat().st_size if self.path.exists() else 0
        if size == 0:
            writer.writeheader()
        writer.writerow(_to_record(row))
        data = buffer.getvalue().encode("utf-8")

        with self.path.open("a+b") as f:
            if size > 0:
                f.seek(-1, os.SEEK_END)
                if f.read(1) != b"\n":
                    data = b"\n" + data
            f.write(data)

    def write_rows(self, rows: list[Row]) -> None:
        """
        Replace the file content.

        Writes to a temporary file next to the original and moves it into
        place only once it is complete, so a failure leaves the original
        untouched.
        """
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".events-", suffix=".csv")
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=FIELDNAMES, lineterminator="\n")
                writer.writeheader()
                for row in rows:
                    writer.writerow(_to_record(row))
                f.flush()
                os.fsync(f.fileno())
            if self.path.exists():
                os.chmod(tmp_path, self.path.stat().st_mode)
            os.replace(tmp_path, self.path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def create(self) -> None:
        """Create an empty file holding only the header."""
        with self.path.open("w", newline="", encoding="utf-8") as f:
            csv.DictWriter(f, fieldnames=FIELDNAMES, lineterminator="\n").writeheader()


def _to_record(row: Row) -> dict[str, str]:
    return {"date": row.date, "category": row.category, "description": row.description}
