"""Demo entry point: several Parquet sinks managed by one ResourceLedger."""

import logging
import sys
import time
from pathlib import Path
from typing import List

from .config import DemoConfig, get_demo_config
from .data_generator import DataGenerator
from .ledger import ResourceLedger
from .parquet_sink import ParquetSink

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def print_summary(sinks: List[ParquetSink], elapsed: float):
    """Print per-sink statistics.

    Args:
        sinks: Sinks opened during the run
        elapsed: Wall-clock time of the run in seconds
    """
    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)

    for sink in sinks:
        stats = sink.stats()
        print(f"\n{stats['file_path']}:")
        print(f"  Rows: {stats['num_rows']:,}")
        print(f"  Blocks (row groups): {stats['num_blocks']}")
        print(f"  File size: {stats['file_size_bytes']:,} bytes")
        print(f"  Compression: {stats['compression']}")
        print(f"  Closed: {stats['closed']}")

    print(f"\nTotal time: {elapsed:.2f} seconds")
    print("\n" + "=" * 80)


def run(config: DemoConfig) -> List[ParquetSink]:
    """Write config.num_records rows to each of config.num_sinks files.

    All sinks are registered with a single ledger. The first sink is closed
    and forgotten as soon as it is complete; the others are closed in reverse
    order when the ledger exits, including when writing fails part way.

    Returns:
        The sinks, all closed
    """
    output_dir = Path(config.output_dir)
    generator = DataGenerator()
    sinks: List[ParquetSink] = []

    with ResourceLedger() as ledger:
        for i in range(config.num_sinks):
            path = output_dir / f"part-{i:03d}.parquet"
            sinks.append(ledger.add(ParquetSink(str(path), compression=config.compression)))
        logger.info(f"Opened {len(ledger)} sinks in {output_dir}")

        for index, sink in enumerate(sinks):
            for df_block in generator.generate_dataframe_blocks(
                config.num_records, config.block_size
            ):
                sink.write_block(df_block)

            if index == 0:
                logger.info(f"First sink complete, releasing {sink.output_path} early")
                ledger.close_and_forget(sink)

        logger.info(f"Closing remaining {len(ledger)} sinks")

    return sinks


def main():
    """Main execution function."""
    logger.info("Starting closeable-ledger demo")
    logger.info("=" * 80)

    try:
        config = get_demo_config()
        setup_logging(config.verbose)

        logger.info(f"Output directory: {config.output_dir}")
        logger.info(f"Number of sinks: {config.num_sinks}")
        logger.info(f"Records per sink: {config.num_records:,}")
        logger.info(f"Block size: {config.block_size:,}")

        start_time = time.time()
        sinks = run(config)
        elapsed = time.time() - start_time

        print_summary(sinks, elapsed)

        logger.info("Execution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
