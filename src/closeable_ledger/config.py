"""Configuration management for the demo application."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _positive_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


@dataclass
class DemoConfig:
    """Demo configuration parameters."""

    output_dir: str
    num_sinks: int
    num_records: int
    block_size: int
    compression: str
    verbose: bool

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Load demo configuration from environment variables.

        Raises:
            ValueError: If a numeric variable is not a positive integer
        """
        return cls(
            output_dir=os.getenv("OUTPUT_DIR", "./output"),
            num_sinks=_positive_int("NUM_SINKS", "3"),
            num_records=_positive_int("NUM_RECORDS", "1000"),
            block_size=_positive_int("BLOCK_SIZE", "250"),
            compression=os.getenv("COMPRESSION", "snappy"),
            verbose=os.getenv("VERBOSE", "false").lower() == "true",
        )


def get_demo_config() -> DemoConfig:
    """Get demo configuration."""
    return DemoConfig.from_env()
