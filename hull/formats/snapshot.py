"""
Grid Hull - Snapshot Format

Serializable form of a session: the set flag of every cell as a string of
'0'/'1' characters in column-major order (outer x, inner y), plus the
optional seed coordinate.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple


class MalformedSnapshotError(ValueError):
    """Raised when snapshot data cannot be applied to a grid."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed snapshot: {reason}")


def encode_bitfield(flags: Iterable[bool]) -> str:
    """
    Encode set flags as a '0'/'1' string.

    Example:
        >>> encode_bitfield([True, False, True])
        '101'
    """
    return "".join("1" if flag else "0" for flag in flags)


def decode_bitfield(bits: str) -> List[bool]:
    """
    Decode a '0'/'1' string. Any character other than '1' is unset.

    Example:
        >>> decode_bitfield("10x1")
        [True, False, False, True]
    """
    return [ch == "1" for ch in bits]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_cell_flag(item: Any) -> bool:
    """
    Parse one entry of a list-form bitfield: a bool or a '0'/'1' character.

    Example:
        >>> [_parse_cell_flag(item) for item in (True, "0", "1", False)]
        [True, False, True, False]
    """
    if isinstance(item, bool):
        return item
    if item in ("0", "1"):
        return item == "1"
    raise MalformedSnapshotError(f"invalid cell flag {item!r}")


@dataclass(frozen=True)
class Snapshot:
    """Cell set flags and seed for one grid."""

    width: int
    height: int
    cells: str
    seed: Optional[Tuple[int, int]] = None

    @property
    def is_complete(self) -> bool:
        """True when the bitfield has exactly one entry per cell."""
        return len(self.cells) == self.width * self.height

    def flags(self) -> List[bool]:
        return decode_bitfield(self.cells)

    def to_dict(self) -> Dict[str, Any]:
        seed = {"x": self.seed[0], "y": self.seed[1]} if self.seed is not None else None
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells,
            "seed": seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Snapshot":
        """
        Build a snapshot from its dictionary form.

        Width and height may be omitted; the bitfield is then checked
        against the grid it is restored into.

        Raises:
            MalformedSnapshotError: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise MalformedSnapshotError(f"expected an object, got {type(data).__name__}")

        cells = data.get("cells", "")
        if isinstance(cells, list):
            cells = encode_bitfield(_parse_cell_flag(item) for item in cells)
        if not isinstance(cells, str):
            raise MalformedSnapshotError("'cells' must be a string or list of flags")

        width = data.get("width", 0)
        height = data.get("height", 0)
        if not isinstance(width, int) or not isinstance(height, int):
            raise MalformedSnapshotError("'width' and 'height' must be integers")

        seed = data.get("seed")
        if seed is not None:
            try:
                x, y = seed["x"], seed["y"]
            except (KeyError, TypeError) as e:
                raise MalformedSnapshotError(f"invalid seed {seed!r}") from e
            if not _is_int(x) or not _is_int(y):
                raise MalformedSnapshotError(f"seed coordinates must be integers, got {seed!r}")
            seed = (x, y)

        return cls(width=width, height=height, cells=cells, seed=seed)
