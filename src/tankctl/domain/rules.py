"""Ascending threshold tables for equipment rules.

A :class:`RuleTable` maps an observed value to advice text by scanning
bands in ascending order and returning the first band whose upper bound
is at least the value.

INVARIANT: every table ends in an unbounded (``math.inf``) band, so a
lookup always yields a recommendation. Tables violating this are
rejected at construction with :class:`RuleTableError`.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


class RuleTableError(ValueError):
    """A threshold table is malformed."""


@dataclass(frozen=True)
class ThresholdBand:
    """Advice for values up to and including ``upper_bound``."""

    upper_bound: float
    text: str


class RuleTable:
    """Validated, immutable sequence of ascending threshold bands."""

    def __init__(self, bands: Sequence[ThresholdBand]) -> None:
        if not bands:
            msg = "Rule table must contain at least one band"
            raise RuleTableError(msg)

        for lower, upper in zip(bands, bands[1:]):
            if not upper.upper_bound > lower.upper_bound:
                msg = (
                    f"Rule table bounds must ascend: {lower.upper_bound} "
                    f"is followed by {upper.upper_bound}"
                )
                raise RuleTableError(msg)

        if bands[-1].upper_bound != math.inf:
            msg = (
                f"Rule table must end in an unbounded band, "
                f"last bound is {bands[-1].upper_bound}"
            )
            raise RuleTableError(msg)

        self._bands: tuple[ThresholdBand, ...] = tuple(bands)

    @classmethod
    def of(cls, *pairs: tuple[float, str]) -> RuleTable:
        """Build a table from ``(upper_bound, text)`` pairs."""
        return cls([ThresholdBand(bound, text) for bound, text in pairs])

    def lookup(self, value: float) -> str:
        """Text of the first band whose bound is at least *value*.

        Values no band admits (only NaN, given the unbounded last band)
        get the last band.
        """
        for band in self._bands:
            if value <= band.upper_bound:
                return band.text
        return self._bands[-1].text

    @property
    def bands(self) -> tuple[ThresholdBand, ...]:
        return self._bands

    def __iter__(self) -> Iterator[ThresholdBand]:
        return iter(self._bands)

    def __len__(self) -> int:
        return len(self._bands)
