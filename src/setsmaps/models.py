"""Data models shared by the exercise modules."""

from __future__ import annotations

from dataclasses import dataclass

from setsmaps.constants import PAIR_SEPARATOR


@dataclass(frozen=True)
class SymmetricPair:
    """Two distinct tokens that are exact reverses of each other.

    Build it from :func:`setsmaps.pairs.ordered_pair_key` so that
    ``small < big`` holds and equal pairs hash equally.
    """

    small: str
    big: str

    def __post_init__(self) -> None:
        if not self.small < self.big:
            raise ValueError(f"pair must be ordered: {self.small!r} < {self.big!r}")

    def __str__(self) -> str:
        return f"{self.small}{PAIR_SEPARATOR}{self.big}"


@dataclass(frozen=True)
class EarthquakeEvent:
    """One feature from the USGS earthquake feed."""

    place: str
    magnitude: float

    @property
    def summary(self) -> str:
        """Human-readable ``<place> - Mag <magnitude>`` line."""
        return f"{self.place} - Mag {self.magnitude:.2f}"
