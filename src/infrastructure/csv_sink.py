"""CSV output for matched records."""

import csv
import io
from pathlib import Path
from typing import Optional

import aiofiles
from aiofiles.threadpool.text import AsyncTextIOWrapper
from loguru import logger

from domain.models import RECORD_HEADER, MatchedRecord


class CsvRecordSink:
    """Appends matched records to a CSV file, one flushed row per write.

    Opening the sink truncates any existing file and writes the header row.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.rows_written = 0
        self._file: Optional[AsyncTextIOWrapper] = None

    def _format_row(self, values) -> str:
        buf = io.StringIO()
        writer = csv.writer(
            buf,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator="\n",
        )
        writer.writerow(values)
        return buf.getvalue()

    async def open(self) -> None:
        if self._file is not None:
            return
        if self.path.parent and not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)

        self._file = await aiofiles.open(self.path, mode="w", encoding="utf-8", newline="")
        await self._file.write(self._format_row(RECORD_HEADER))
        await self._file.flush()
        logger.debug(f"Opened CSV output: {self.path}")

    async def write(self, record: MatchedRecord) -> None:
        if self._file is None:
            raise RuntimeError(f"CSV sink for {self.path} is not open")

        await self._file.write(self._format_row(record.to_row()))
        await self._file.flush()
        self.rows_written += 1

    async def close(self) -> None:
        if self._file is not None:
            await self._file.close()
            self._file = None
            logger.debug(f"Closed CSV output: {self.path} ({self.rows_written} rows)")

    async def __aenter__(self) -> "CsvRecordSink":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
