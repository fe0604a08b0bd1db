"""Reference table of (coordinate, value_a, value_b) samples with linear interpolation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from thermocascade.common.exceptions import DegenerateTableError


@dataclass(frozen=True)
class Sample:
    coordinate: float
    value_a: float
    value_b: float


class ReferenceTable:
    """Ordered samples of the two reference functions.

    Samples are kept in the order given. Callers are expected to supply them
    ascending by coordinate; the table does not sort them.
    """

    def __init__(self, samples: Iterable[Sample]):
        samples = tuple(samples)
        if not samples:
            raise ValueError("Reference table requires at least one sample")
        self._samples: Tuple[Sample, ...] = samples

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "ReferenceTable":
        return cls(Sample(float(row[0]), float(row[1]), float(row[2])) for row in rows)

    @property
    def samples(self) -> Tuple[Sample, ...]:
        return self._samples

    def __len__(self) -> int:
        return len(self._samples)

    def _interp(self, q: float, attr: str) -> float:
        pts = self._samples
        for low, high in zip(pts, pts[1:]):
            if low.coordinate <= q <= high.coordinate:
                span = high.coordinate - low.coordinate
                if span == 0.0:
                    raise DegenerateTableError(
                        f"Samples share coordinate {low.coordinate}; cannot interpolate '{attr}' at {q}"
                    )
                y0 = getattr(low, attr)
                y1 = getattr(high, attr)
                return y0 + (y1 - y0) * (q - low.coordinate) / span
        # no bracketing pair: clamp to the last sample (also below the range)
        return getattr(pts[-1], attr)

    def ref_a(self, q: float) -> float:
        return self._interp(q, "value_a")

    def ref_b(self, q: float) -> float:
        return self._interp(q, "value_b")
