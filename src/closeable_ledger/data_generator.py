"""Generate fake data blocks using Faker library."""

import logging
from typing import Dict, Generator, List

import pandas as pd
from faker import Faker

logger = logging.getLogger(__name__)

COLUMNS = ["id", "name", "email", "city", "country", "job", "company"]


class DataGenerator:
    """Generate fake tabular data for the demo sinks."""

    def __init__(self, seed: int = 42):
        """Initialize the data generator.

        Args:
            seed: Random seed for reproducibility
        """
        self.faker = Faker()
        Faker.seed(seed)

    def generate_records(self, num_records: int, start_id: int = 0) -> Dict[str, List]:
        """Generate fake records column by column.

        Args:
            num_records: Number of records to generate
            start_id: Value of the first id column entry

        Returns:
            Dictionary with column names as keys and lists of values
        """
        data: Dict[str, List] = {column: [] for column in COLUMNS}

        for i in range(num_records):
            data["id"].append(start_id + i)
            data["name"].append(self.faker.name())
            data["email"].append(self.faker.email())
            data["city"].append(self.faker.city())
            data["country"].append(self.faker.country())
            data["job"].append(self.faker.job())
            data["company"].append(self.faker.company())

        logger.debug(f"Generated {num_records:,} records starting at id {start_id}")
        return data

    def create_dataframe(self, data: Dict[str, List]) -> pd.DataFrame:
        """Convert generated data to pandas DataFrame."""
        return pd.DataFrame(data, columns=COLUMNS)

    def generate_dataframe_blocks(
        self, total_records: int, block_size: int
    ) -> Generator[pd.DataFrame, None, None]:
        """Yield DataFrame blocks until total_records have been produced.

        Args:
            total_records: Total number of records to generate
            block_size: Number of records per block

        Yields:
            pandas DataFrame blocks
        """
        if block_size < 1:
            raise ValueError(f"block_size must be at least 1, got {block_size}")

        num_blocks = (total_records + block_size - 1) // block_size
        current_id = 0

        for block_num in range(num_blocks):
            records_in_block = min(block_size, total_records - current_id)
            logger.debug(
                f"Generating block {block_num + 1}/{num_blocks} "
                f"({records_in_block:,} records)"
            )
            data = self.generate_records(records_in_block, start_id=current_id)
            current_id += records_in_block
            yield self.create_dataframe(data)
