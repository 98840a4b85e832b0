"""Tests for parquet_sink module."""

import tempfile
from pathlib import Path

import pandas as pd
import pyarrow.parquet as pq
import pytest

from closeable_ledger import ResourceLedger
from closeable_ledger.parquet_sink import ParquetSink


def test_write_multiple_blocks():
    """Test writing multiple DataFrame blocks."""
    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = Path(tmpdir) / "test.parquet"

        df1 = pd.DataFrame({"id": [1, 2], "name": ["Alice", "Bob"]})
        df2 = pd.DataFrame({"id": [3, 4], "name": ["Charlie", "David"]})

        sink = ParquetSink(str(output_path))
        sink.write_block(df1)
        sink.write_block(df2)
        sink.close()

        stats = sink.stats()
        assert stats["num_rows"] == 4
        assert stats["num_blocks"] == 2
        assert stats["closed"] is True
        assert stats["file_size_bytes"] > 0
        assert pq.ParquetFile(str(output_path)).metadata.num_rows == 4


def test_sinks_closed_by_ledger():
    """Test that a ledger finalizes every sink it tracks."""
    with tempfile.TemporaryDirectory() as tmpdir:
        df = pd.DataFrame({"id": [1, 2, 3], "value": ["a", "b", "c"]})

        with ResourceLedger() as ledger:
            first = ledger.add(ParquetSink(str(Path(tmpdir) / "a.parquet")))
            second = ledger.add(ParquetSink(str(Path(tmpdir) / "b.parquet")))
            first.write_block(df)
            second.write_block(df)

        assert first.closed
        assert second.closed
        assert pq.ParquetFile(str(Path(tmpdir) / "a.parquet")).metadata.num_rows == 3
        assert pq.ParquetFile(str(Path(tmpdir) / "b.parquet")).metadata.num_rows == 3


def test_schema_validation():
    """Test that schema mismatch raises error."""
    with tempfile.TemporaryDirectory() as tmpdir:
        df1 = pd.DataFrame({"id": [1, 2], "name": ["Alice", "Bob"]})
        df2 = pd.DataFrame({"id": [3, 4], "age": [25, 30]})

        with ParquetSink(str(Path(tmpdir) / "test.parquet")) as sink:
            sink.write_block(df1)
            with pytest.raises(ValueError, match="schema mismatch"):
                sink.write_block(df2)


def test_write_after_close():
    """Test that writing to a closed sink raises error."""
    with tempfile.TemporaryDirectory() as tmpdir:
        sink = ParquetSink(str(Path(tmpdir) / "test.parquet"))
        sink.close()

        with pytest.raises(RuntimeError, match="is closed"):
            sink.write_block(pd.DataFrame({"id": [1]}))


def test_empty_dataframe_block():
    """Test that empty DataFrame blocks are skipped."""
    with tempfile.TemporaryDirectory() as tmpdir:
        sink = ParquetSink(str(Path(tmpdir) / "test.parquet"))
        sink.write_block(pd.DataFrame({"id": [1, 2]}))
        sink.write_block(pd.DataFrame({"id": []}))
        sink.close()

        assert sink.stats()["num_blocks"] == 1


def test_close_is_idempotent():
    """Test that closing twice is harmless and no file is created without data."""
    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = Path(tmpdir) / "nested" / "test.parquet"
        sink = ParquetSink(str(output_path))

        sink.close()
        sink.close()

        assert sink.closed
        assert output_path.parent.exists()
        assert not output_path.exists()


def test_failed_writer_close_leaves_sink_open():
    """Test that a failing ParquetWriter.close() isn't reported as closed."""
    with tempfile.TemporaryDirectory() as tmpdir:
        sink = ParquetSink(str(Path(tmpdir) / "test.parquet"))
        sink.write_block(pd.DataFrame({"id": [1, 2]}))

        real_writer = sink._writer

        class FailingWriter:
            def close(self):
                raise OSError("disk full")

        sink._writer = FailingWriter()

        with pytest.raises(OSError, match="disk full"):
            sink.close()

        assert sink.closed is False
        assert sink.stats()["closed"] is False
        assert sink._writer is None

        real_writer.close()
