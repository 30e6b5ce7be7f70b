"""Loading power-set input sequences from YAML or JSON files.

Two document shapes are accepted::

    [4, 5, 6]

    elements: [4, 5, 6]

JSON is a subset of YAML, so ``.json`` files go through the same parser.
Only the element types are checked here; the generator owns the size check.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Union

import yaml

from powerset.logging import get_logger

logger = get_logger(__name__)


def parse_elements_yaml(yaml_str: str) -> List[int]:
    """Parse a YAML string into a list of integers.

    Raises:
        ValueError: If the document is not a list of integers or a mapping with
            an ``elements`` list of integers.
    """
    data: Any = yaml.safe_load(yaml_str)
    if isinstance(data, dict):
        if "elements" not in data:
            raise ValueError("Input mapping must contain an 'elements' key")
        data = data["elements"]
    if not isinstance(data, list):
        raise ValueError("Input must be a list of integers")

    for index, value in enumerate(data):
        # bool is an int subclass; `true` in YAML is not an element
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(
                f"Element at position {index} must be an integer, got {value!r}"
            )
    return list(data)


def load_elements(path: Union[str, Path]) -> List[int]:
    """Read the input sequence from ``path``.

    Args:
        path: YAML or JSON file.

    Returns:
        List of integers in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the contents have the wrong shape.
        yaml.YAMLError: If the file is not valid YAML.
    """
    p = Path(path)
    logger.debug(f"Loading input elements from: {p}")
    text = p.read_text(encoding="utf-8")
    try:
        elements = parse_elements_yaml(text)
    except ValueError as e:
        raise ValueError(f"{p}: {e}") from e
    logger.debug(f"Loaded {len(elements)} elements from {p}")
    return elements
