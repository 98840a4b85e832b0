"""Closeable Parquet file sink built on PyArrow."""

import logging
import os
from pathlib import Path
from typing import Optional

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .closeable_interface import Closeable

logger = logging.getLogger(__name__)


class ParquetSink(Closeable):
    """Append DataFrame blocks to a single Parquet file.

    The underlying ParquetWriter is opened on the first non-empty block and
    finalized by close(), so a sink can be handed to a ResourceLedger right
    after construction.
    """

    def __init__(self, output_path: str, compression: str = "snappy"):
        """Initialize the sink.

        Args:
            output_path: Path where the Parquet file will be written
            compression: Compression codec to use (snappy, gzip, zstd, etc.)
        """
        self.output_path = str(output_path)
        self.compression = compression
        self._writer: Optional[pq.ParquetWriter] = None
        self._schema: Optional[pa.Schema] = None
        self._num_blocks = 0
        self._total_rows = 0
        self._closed = False

        Path(self.output_path).parent.mkdir(parents=True, exist_ok=True)

    @property
    def closed(self) -> bool:
        return self._closed

    def write_block(self, df: pd.DataFrame) -> None:
        """Write a DataFrame block as a row group.

        Args:
            df: pandas DataFrame containing the data block to write

        Raises:
            RuntimeError: If the sink is already closed
            ValueError: If DataFrame schema doesn't match previous blocks
        """
        if self._closed:
            raise RuntimeError(f"Sink for {self.output_path} is closed")

        if df.empty:
            logger.warning("Received empty DataFrame block, skipping...")
            return

        table = pa.Table.from_pandas(df, preserve_index=False)

        if self._writer is None:
            self._schema = table.schema
            self._writer = pq.ParquetWriter(
                self.output_path,
                self._schema,
                compression=self.compression,
            )
            logger.debug(f"Opened ParquetWriter for {self.output_path}")

        if not table.schema.equals(self._schema):
            raise ValueError(
                f"DataFrame schema mismatch. Expected {self._schema}, got {table.schema}"
            )

        self._writer.write_table(table)
        self._num_blocks += 1
        self._total_rows += len(df)

    def stats(self) -> dict:
        """Return write statistics for this sink."""
        file_size = os.path.getsize(self.output_path) if os.path.exists(self.output_path) else 0
        return {
            "file_path": self.output_path,
            "file_size_bytes": file_size,
            "num_rows": self._total_rows,
            "num_blocks": self._num_blocks,
            "compression": self.compression,
            "closed": self._closed,
        }

    def close(self) -> None:
        """Finalize the Parquet file. Safe to call more than once."""
        if self._closed:
            return
        if self._writer is not None:
            try:
                self._writer.close()
            finally:
                self._writer = None
            logger.info(f"Closed {self.output_path}: {self._total_rows:,} rows in {self._num_blocks} blocks")
        self._closed = True
