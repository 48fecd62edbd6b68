"""
Index specifications for addressing qubits.

A gate's targets (and controls) may be given as:

- a single integer, ``3``
- a sequence of integers, ``[0, 2, 5]``
- a pattern string of comma-separated integers and inclusive ranges,
  ``"0-2,5"``
- a sequence of pattern strings, ``["0-2", "5"]`` (joined with commas)

All forms normalize to an ascending tuple of distinct indices.
"""

import re
from numbers import Integral
from typing import List, Sequence, Tuple, Union

from .errors import IndexSpecError

IndexSpec = Union[int, str, Sequence[int], Sequence[str]]

_TOKEN = re.compile(r"^(\d+)(?:\s*-\s*(\d+))?$")


def _is_index(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _expand_pattern(text: str) -> List[int]:
    """Expand ``"0-2,5"`` into ``[0, 1, 2, 5]`` in the order written."""
    indices = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            # Trailing or doubled commas are tolerated
            continue
        match = _TOKEN.match(part)
        if match is None:
            raise IndexSpecError(f"Malformed index token {part!r} in {text!r}")
        start = int(match.group(1))
        if match.group(2) is None:
            indices.append(start)
            continue
        end = int(match.group(2))
        if end < start:
            raise IndexSpecError(f"Range {part!r} ends before it starts")
        indices.extend(range(start, end + 1))
    return indices


def parse_indices(spec: IndexSpec) -> Tuple[int, ...]:
    """
    Normalize an index specification to a sorted tuple.

    Args:
        spec: int, pattern string, or sequence of ints or pattern strings

    Returns:
        Ascending tuple of qubit indices

    Raises:
        IndexSpecError: If the specification is malformed, empty, negative,
                        or names the same index twice
    """
    if _is_index(spec):
        indices = [int(spec)]
    elif isinstance(spec, str):
        indices = _expand_pattern(spec)
    elif isinstance(spec, (list, tuple)):
        if all(_is_index(item) for item in spec):
            indices = [int(item) for item in spec]
        elif all(isinstance(item, str) for item in spec):
            indices = _expand_pattern(",".join(spec))
        else:
            raise IndexSpecError(
                "Index lists must hold only integers or only pattern strings"
            )
    else:
        raise IndexSpecError(
            f"Index specification must be an int, str, or list, got {type(spec).__name__}"
        )

    if not indices:
        raise IndexSpecError(f"Index specification {spec!r} selects no qubits")
    if any(i < 0 for i in indices):
        raise IndexSpecError(f"Qubit indices must be non-negative, got {spec!r}")
    if len(indices) != len(set(indices)):
        raise IndexSpecError(f"The same qubit cannot occur twice in {spec!r}")

    if any(b < a for a, b in zip(indices, indices[1:])):
        indices.sort()
    return tuple(indices)
