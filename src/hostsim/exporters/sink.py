"""
JSON Lines sink: durable file output mirrored to an observation stream.

The output file is opened once and held until the sink is closed. Each record
is written unbuffered and fsync'ed before it is echoed to the stream, so a line
that shows up on stdout is already on disk.
"""

import logging
import os
import sys
from pathlib import Path
from typing import BinaryIO, TextIO

from ..errors import FileAcquisitionError, FlushError, WriteError

logger = logging.getLogger(__name__)


class JsonLinesSink:
    """Persist encoded records to a file and mirror them to a text stream."""

    def __init__(
        self,
        output_path: str | Path,
        append: bool = False,
        stream: TextIO | None = None,
    ):
        """Initialize sink. The file is not touched until open()."""
        self.output_path = Path(output_path)
        self.append = append
        self.stream = stream
        self._file: BinaryIO | None = None
        self.bytes_written = 0

    def open(self) -> "JsonLinesSink":
        """Acquire the output file handle (truncating unless append is set)."""
        if self._file is not None:
            return self
        # Unbuffered: a record that fails to persist is never retried at close.
        mode = "ab" if self.append else "wb"
        try:
            self._file = open(self.output_path, mode, buffering=0)
        except OSError as exc:
            raise FileAcquisitionError(f"Cannot open {self.output_path}: {exc}") from exc
        logger.info("Writing samples to %s (mode=%s)", self.output_path, mode[0])
        return self

    def _write_all(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = self._file.write(view)
            view = view[written:]

    def _discard_partial(self, offset: int) -> None:
        try:
            self._file.truncate(offset)
        except (OSError, ValueError) as exc:
            logger.warning("Could not remove partial record from %s: %s", self.output_path, exc)

    def emit(self, line: str) -> int:
        """Write one record durably, then mirror it. Returns bytes written to the file."""
        if self._file is None:
            raise WriteError(f"Sink for {self.output_path} is not open")

        record = line + "\n"
        data = record.encode("utf-8")
        try:
            offset = self._file.tell()
        except (OSError, ValueError) as exc:
            raise WriteError(f"Cannot write to {self.output_path}: {exc}") from exc

        try:
            self._write_all(data)
        except (OSError, ValueError) as exc:
            self._discard_partial(offset)
            raise WriteError(f"Cannot write to {self.output_path}: {exc}") from exc

        try:
            os.fsync(self._file.fileno())
        except OSError as exc:
            raise FlushError(f"Cannot flush {self.output_path}: {exc}") from exc

        stream = self.stream or sys.stdout
        try:
            stream.write(record)
            stream.flush()
        except (OSError, ValueError) as exc:
            raise WriteError(f"Cannot write to observation stream: {exc}") from exc

        self.bytes_written += len(data)
        return len(data)

    def close(self) -> None:
        """Release the file handle."""
        if self._file is None:
            return
        file, self._file = self._file, None
        try:
            file.close()
        except (OSError, ValueError) as exc:
            raise FlushError(f"Cannot close {self.output_path}: {exc}") from exc

    @property
    def closed(self) -> bool:
        return self._file is None

    def __enter__(self) -> "JsonLinesSink":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.close()
        except FlushError as close_exc:
            if exc is None:
                raise
            # keep the error already propagating
            logger.warning("%s", close_exc)
