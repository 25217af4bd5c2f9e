"""Plateau defines the rectangular grid a rover drives on."""

from core.errors import PlateauError


class Plateau:
    """Immutable grid bounds with corners (0, 0) and (max_x, max_y) inclusive."""

    __slots__ = ("_max_x", "_max_y")

    def __init__(self, max_x, max_y):
        for value in (max_x, max_y):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise PlateauError(
                    f"plateau bounds must be non-negative integers, got ({max_x!r}, {max_y!r})",
                    max_x=max_x,
                    max_y=max_y,
                )
        self._max_x = max_x
        self._max_y = max_y

    @classmethod
    def from_config(cls, config):
        return cls(config.plateau_max_x, config.plateau_max_y)

    @property
    def max_x(self):
        return self._max_x

    @property
    def max_y(self):
        return self._max_y

    def is_within_bounds(self, x, y):
        """True when (x, y) lies on the plateau. Never raises for integer input."""
        return 0 <= x <= self._max_x and 0 <= y <= self._max_y

    def __eq__(self, other):
        if not isinstance(other, Plateau):
            return NotImplemented
        return (self._max_x, self._max_y) == (other._max_x, other._max_y)

    def __hash__(self):
        return hash((self._max_x, self._max_y))

    def __repr__(self):
        return f"Plateau(max_x={self._max_x}, max_y={self._max_y})"
