"""Special functions used to normalise discrete power laws."""

from __future__ import annotations

from .zeta import cached_hurwitz_zeta, hurwitz_zeta, polynomial, riemann_zeta

__all__ = ["cached_hurwitz_zeta", "hurwitz_zeta", "polynomial", "riemann_zeta"]
