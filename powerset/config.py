"""Configuration for the power-set generator and its demo driver."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class PowerSetConfig:
    """Constants shared by the generator, formatter and CLI."""

    # Number of elements the generator accepts
    expected_size: int = 3

    # First line of the printed report
    header: str = "Power set:"

    # Input used when the CLI is run without --input
    demo_input: Tuple[int, ...] = (1, 2, 3)

    @property
    def max_mask(self) -> int:
        """Exclusive upper bound of the inclusion masks (2 ** expected_size)."""
        return 1 << self.expected_size


# Global configuration instance
POWERSET_CONFIG = PowerSetConfig()
