"""powerset: power-set generation for a three-element integer set.

Primary API:
    generate() - Return all subsets in binary counting order of inclusion masks
    format_subset() - Render one subset as ``{ v1 v2 ... }``
    render_power_set() - Render the full printed report

Example:
    from powerset import generate, render_power_set

    subsets = generate([1, 2, 3])
    print(render_power_set(subsets))
"""

from __future__ import annotations

from powerset import cli, logging
from powerset._version import __version__
from powerset.config import POWERSET_CONFIG, PowerSetConfig
from powerset.formatting import format_subset, power_set_to_dict, render_power_set
from powerset.generator import (
    INVALID_SIZE_MESSAGE,
    generate,
    invalid_size_message,
    subset_for_mask,
)
from powerset.io import load_elements

__all__ = [
    # Version
    "__version__",
    # Core
    "generate",
    "subset_for_mask",
    "INVALID_SIZE_MESSAGE",
    "invalid_size_message",
    # Output
    "format_subset",
    "render_power_set",
    "power_set_to_dict",
    # Input
    "load_elements",
    # Configuration
    "PowerSetConfig",
    "POWERSET_CONFIG",
    # Utilities
    "cli",
    "logging",
]
