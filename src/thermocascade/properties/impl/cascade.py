"""Formula cascade combining the interpolated reference functions.

Every layer calls only the layers defined above it plus the two table
accessors, ending in a closed-form fallback that needs no table at all::

    delta_z -> combine1/2/3 -> q_factor/q_factor1/q_factor2
            -> r_factor/r_factor2/r_factor3 -> kernel1/kernel2 -> fun1

``q_factor``/``q_factor1`` and ``r_factor``/``r_factor2`` are identical in
body. They stay separate because the top-level dispatch tests ``r_factor2``
while ``kernel1`` multiplies ``r_factor``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import log as ln

from .table import ReferenceTable

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormulaCascade:
    table: ReferenceTable

    def delta_z(self, x: float, y: float, z: float) -> float:
        t = self.table
        if x > y:
            return t.ref_a(x) + t.ref_b(z) - t.ref_a(y)
        return t.ref_a(y) + t.ref_b(y) - t.ref_b(z)

    def combine1(self, x: float, y: float) -> float:
        val = x * x + 2 * y
        if val > 1:
            return self.delta_z(x, y, x) + y * ln(val)
        return y + self.delta_z(y, x, y)

    def q_factor(self, x: float, y: float) -> float:
        if abs(x) < 1:
            return x * self.combine1(x, y)
        return y * self.combine1(x, y)

    def r_factor(self, x: float, y: float, z: float) -> float:
        if x > y:
            return x * y * self.q_factor(y, z)
        return x * z * self.q_factor(x, y)

    def kernel1(self, x: float, y: float, z: float) -> float:
        return 73.1389 * self.r_factor(x, y, z) + 14.838 * self.r_factor(x - y, z, y)

    def fun1(self, x: float, y: float, z: float) -> float:
        return x * self.kernel1(x, y, z) + y * self.kernel1(x, z, y) - z * self.kernel1(x, z, y)

    def combine2(self, x: float, y: float, z: float) -> float:
        if z >= y:
            return self.delta_z(x, y, z) + 1.44 * y * z
        return 1.44 * y * self.delta_z(z, x, y)

    def q_factor1(self, x: float, y: float) -> float:
        if abs(x) < 1:
            return x * self.combine1(x, y)
        return y * self.combine1(x, y)

    def r_factor2(self, x: float, y: float, z: float) -> float:
        if x > y:
            return x * y * self.q_factor1(y, z)
        return x * z * self.q_factor1(x, y)

    def combine3(self, x: float, y: float, z: float) -> float:
        if z > y:
            return self.delta_z(x, y, z) + y * z
        return y + self.delta_z(z, x, y)

    def q_factor2(self, x: float, y: float) -> float:
        if abs(x) < 1:
            return x * self.combine2(x, y, y)
        return y * self.combine2(x, y, y)

    def r_factor3(self, x: float, y: float, z: float) -> float:
        if x > y:
            return x * y * self.q_factor2(y, z)
        return x * z * self.q_factor2(x, y)

    def kernel2(self, x: float, y: float, z: float) -> float:
        return 83.1389 * self.r_factor3(x, y, z) + 4.838 * self.r_factor3(x, z, y)

    @staticmethod
    def fallback(x: float, y: float, z: float) -> float:
        return 4.349 * x * x + 23.23 * y - 2.348 * x * y * z

    def evaluate(self, x: float, y: float, z: float) -> float:
        # exact comparisons against zero, no tolerance
        if x * x + 2 * y > 1:
            log.debug(f"dispatch fun1 at ({x}, {y}, {z})")
            return self.fun1(x, y, z)
        if self.r_factor2(x, y, z) != 0:
            log.debug(f"dispatch kernel1 at ({x}, {y}, {z})")
            return self.kernel1(x, y, z)
        if self.r_factor3(x, y, z) != 0:
            log.debug(f"dispatch kernel2 at ({x}, {y}, {z})")
            return self.kernel2(x, y, z)
        log.debug(f"dispatch fallback at ({x}, {y}, {z})")
        return self.fallback(x, y, z)


def evaluate(table: ReferenceTable, x: float, y: float, z: float) -> float:
    """Evaluate the cascade at ``(x, y, z)`` against ``table``."""
    return FormulaCascade(table).evaluate(x, y, z)
