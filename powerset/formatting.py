"""Text and JSON renderings of a computed power set."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from powerset.config import POWERSET_CONFIG


def format_subset(subset: Sequence[int]) -> str:
    """Return ``subset`` as a brace-delimited, space-separated string.

    Examples:
        [] -> "{ }"; [1, 3] -> "{ 1 3 }".
    """
    return "{ " + "".join(f"{value} " for value in subset) + "}"


def render_power_set(
    subsets: Sequence[Sequence[int]], header: Optional[str] = None
) -> str:
    """Return the header line followed by one formatted line per subset.

    Args:
        subsets: Subsets in the order they should be printed.
        header: First line; defaults to ``POWERSET_CONFIG.header``.

    Returns:
        Newline-joined report without a trailing newline.
    """
    lines = [POWERSET_CONFIG.header if header is None else header]
    lines.extend(format_subset(subset) for subset in subsets)
    return "\n".join(lines)


def power_set_to_dict(
    elements: Sequence[int], subsets: Sequence[Sequence[int]]
) -> Dict[str, Any]:
    """Return a JSON-serializable mapping of the input and its subsets."""
    result: Dict[str, List[Any]] = {
        "input": list(elements),
        "subsets": [list(subset) for subset in subsets],
    }
    return result
