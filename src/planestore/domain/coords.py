"""Multi-axis coordinates addressing image planes within a dataset.

A `Coords` maps axis names (``"time"``, ``"channel"``, ``"z"``, ...) to
non-negative integer indices. Axes that are absent are *unset*: they carry no
position at all, which is different from a position of ``0``.

Coords serve two roles:

* **storage keys**: a fully specified coordinate identifies one image plane;
* **query patterns**: a partially specified coordinate acts as a wildcard
  over every axis it does not mention (see `Coords.matches`).

Coords are immutable. Use `Coords.builder()` (or `coords.copy()` for a builder
pre-filled with an existing coordinate) to assemble new ones.

Example:
    ```py
    >>> coords = Coords.builder().z(2).channel(0).build()
    >>> coords.get_position_at("z")
    2
    >>> coords.matches(Coords.of(channel=0))
    True
    ```
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .errors import MalformedCoordsError

# Standard axis names
TIME = "time"
CHANNEL = "channel"
Z = "z"
STAGE_POSITION = "position"


def _get_no_position() -> "_NoPositionType":
    # Factory used by pickle to retrieve the one true instance.
    return NO_POSITION


@dataclass(frozen=True)
class _NoPositionType:
    """Sentinel returned for axes a coordinate does not carry.

    This is distinct from ``0`` (a real index) and from ``None``.
    """

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "NO_POSITION"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_no_position, ())


# Singleton instance
NO_POSITION = _NoPositionType()

type Position = int | _NoPositionType


def _validate(axis: object, index: object) -> None:
    if not isinstance(axis, str) or not axis:
        raise MalformedCoordsError(axis, index)
    # bool is an int subclass but never a meaningful index
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise MalformedCoordsError(axis, index)


class Coords:
    """Immutable mapping of axis names to non-negative indices.

    Two coords are equal iff they carry exactly the same (axis, index) pairs;
    their hash follows the same rule so coords can be used as dict keys.
    """

    __slots__ = ("_positions", "_hash")

    def __init__(self, positions: Mapping[str, int] | None = None) -> None:
        positions = dict(positions or {})
        for axis, index in positions.items():
            _validate(axis, index)
        self._positions: Mapping[str, int] = MappingProxyType(positions)
        self._hash = hash(frozenset(positions.items()))

    # --- Construction ---

    @staticmethod
    def builder() -> CoordsBuilder:
        """Return a new, empty builder."""
        return CoordsBuilder()

    @classmethod
    def of(cls, **positions: int) -> Coords:
        """Shorthand for building coords from keyword arguments.

        Example:
            ``Coords.of(z=2, channel=0)``
        """
        return cls(positions)

    def copy(self) -> CoordsBuilder:
        """Return a builder pre-filled with this coordinate's positions."""
        return CoordsBuilder(self._positions)

    def position(self, axis: str, index: int) -> Coords:
        """Return new coords with ``axis`` set to ``index``."""
        return self.copy().position(axis, index).build()

    def offset(self, axis: str, delta: int) -> Coords:
        """Return new coords with ``axis`` shifted by ``delta``.

        Raises:
            KeyError: If ``axis`` is not set on these coords.
            MalformedCoordsError: If the shifted index would be negative.
        """
        if axis not in self._positions:
            raise KeyError(axis)
        return self.position(axis, self._positions[axis] + delta)

    # --- Queries ---

    def get_position_at(self, axis: str) -> Position:
        """Return the index for ``axis``, or ``NO_POSITION`` when unset."""
        return self._positions.get(axis, NO_POSITION)

    def get_axes(self) -> frozenset[str]:
        """Return the names of all axes set on these coords."""
        return frozenset(self._positions)

    def as_dict(self) -> dict[str, int]:
        """Return a plain (mutable) copy of the axis -> index mapping."""
        return dict(self._positions)

    def matches(self, pattern: Coords) -> bool:
        """Return True if these coords satisfy ``pattern``.

        Every axis present in ``pattern`` must be present here with an equal
        index; axes absent from ``pattern`` are wildcards. An empty pattern
        therefore matches every coordinate.
        """
        positions = self._positions
        return all(
            positions.get(axis, NO_POSITION) == index
            for axis, index in pattern._positions.items()
        )

    def is_subspace_of(self, other: Coords) -> bool:
        """Return True if these coords, used as a pattern, match ``other``."""
        return other.matches(self)

    # --- Dunder ---

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._positions)

    def __contains__(self, axis: object) -> bool:
        return axis in self._positions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coords):
            return NotImplemented
        return self._positions == other._positions

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return ", ".join(f"{axis}={self._positions[axis]}" for axis in sorted(self))

    def __repr__(self) -> str:
        return f"Coords({self})"


class CoordsBuilder:
    """Accumulate (axis, index) pairs and produce an immutable `Coords`.

    The builder is mutable and returns itself from every setter so calls can
    be chained. Calling `build` does not reset it; each call yields an
    independent `Coords` snapshot.
    """

    def __init__(self, positions: Mapping[str, int] | None = None) -> None:
        self._positions: dict[str, int] = dict(positions or {})

    def position(self, axis: str, index: int) -> CoordsBuilder:
        """Set ``axis`` to ``index``.

        Raises:
            MalformedCoordsError: If ``index`` is negative or not an integer,
                or if ``axis`` is not a non-empty string.
        """
        _validate(axis, index)
        self._positions[axis] = index
        return self

    def time(self, index: int) -> CoordsBuilder:
        return self.position(TIME, index)

    def channel(self, index: int) -> CoordsBuilder:
        return self.position(CHANNEL, index)

    def z(self, index: int) -> CoordsBuilder:  # pylint: disable=invalid-name
        return self.position(Z, index)

    def stage_position(self, index: int) -> CoordsBuilder:
        return self.position(STAGE_POSITION, index)

    def remove(self, axis: str) -> CoordsBuilder:
        """Unset ``axis``; a no-op when it is not set."""
        self._positions.pop(axis, None)
        return self

    def build(self) -> Coords:
        return Coords(self._positions)
