"""Conductivity to viscosity lookup table.

The table is built once at import and never mutated afterwards. Keys are
matched by exact float equality - no tolerance, no interpolation - so
callers must pass conductivity values that come from the same discrete set
as the table (``0.1 + 0.2`` is not ``0.3``).

Two lookup contracts are offered because callers differ on whether a miss
is recoverable:

- ``lookup_strict``: raises ``KeyNotFound``
- ``lookup_or_sentinel``: returns ``SENTINEL`` (-1.0), never raises
"""

from types import MappingProxyType
from typing import Iterator, Mapping

from thermvisc.errors import KeyNotFound

__all__ = ['PropertyTable', 'SENTINEL', 'THERMAL_TO_VISCOSITY']

# Tables only hold positive viscosities, so this can never be a real hit
SENTINEL = -1.0


class PropertyTable:
    """Read-only mapping from thermal conductivity to viscosity.

    Parameters
    ----------
    entries : Mapping[float, float]
        Conductivity -> viscosity pairs. Copied on construction; later
        changes to ``entries`` do not affect the table.

    Raises
    ------
    ValueError
        If any viscosity is not positive, which would make a hit look
        like ``SENTINEL``.

    Examples
    --------
    >>> table = PropertyTable({0.1: 1.0, 0.2: 1.1})
    >>> table.lookup_strict(0.2)
    1.1
    >>> table.lookup_or_sentinel(0.25)
    -1.0
    """

    def __init__(self, entries: Mapping[float, float]):
        table = {float(k): float(v) for k, v in entries.items()}
        for conductivity, viscosity in table.items():
            if not viscosity > 0:
                raise ValueError(
                    f"Viscosity for conductivity {conductivity} must be positive, "
                    f"got {viscosity}"
                )
        self._entries = MappingProxyType(table)

    def lookup_strict(self, conductivity: float) -> float:
        """Return the stored viscosity or raise ``KeyNotFound``."""
        try:
            return self._entries[conductivity]
        except KeyError:
            raise KeyNotFound(conductivity) from None

    def lookup_or_sentinel(self, conductivity: float) -> float:
        """Return the stored viscosity, or ``SENTINEL`` on a miss."""
        return self._entries.get(conductivity, SENTINEL)

    def lookup(self, conductivity: float, policy: str = "strict") -> float:
        """Dispatch to one of the two lookup contracts by policy name."""
        if policy == "strict":
            return self.lookup_strict(conductivity)
        elif policy == "sentinel":
            return self.lookup_or_sentinel(conductivity)
        else:
            raise ValueError(f"Unknown lookup policy: {policy}")

    @property
    def entries(self) -> Mapping[float, float]:
        """Read-only view of the table."""
        return self._entries

    def __contains__(self, conductivity) -> bool:
        return conductivity in self._entries

    def __iter__(self) -> Iterator[float]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PropertyTable({dict(self._entries)!r})"


THERMAL_TO_VISCOSITY = PropertyTable({
    0.1: 1.0, 0.2: 1.1, 0.3: 1.2, 0.4: 1.3,
    0.5: 1.4, 0.6: 1.5, 0.7: 1.6, 0.8: 1.7,
    0.9: 1.8, 1.0: 1.9,
})
