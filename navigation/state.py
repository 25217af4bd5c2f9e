class RoverState:
    """Read-only snapshot of a rover's position and heading."""

    __slots__ = ("x", "y", "heading")

    def __init__(self, x, y, heading):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "heading", heading)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    @property
    def position(self):
        return (self.x, self.y)

    def to_dict(self):
        return {"x": self.x, "y": self.y, "heading": self.heading.value}

    def __eq__(self, other):
        if not isinstance(other, RoverState):
            return NotImplemented
        return (self.x, self.y, self.heading) == (other.x, other.y, other.heading)

    def __hash__(self):
        return hash((self.x, self.y, self.heading))

    def __repr__(self):
        return f"RoverState(x={self.x}, y={self.y}, heading={self.heading.name})"
