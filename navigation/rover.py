from core.errors import InstructionError, PlacementError
from internal.logging import LogLevel, get_logger
from navigation.heading import Heading
from navigation.instruction import Instruction
from navigation.state import RoverState


class Rover:
    """A rover on a plateau. Moves that would leave the plateau are ignored."""

    def __init__(self, x, y, heading, plateau):
        if not isinstance(heading, Heading):
            raise PlacementError(f"unknown heading {heading!r}", x=x, y=y, heading=heading)
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, int):
                raise PlacementError(
                    f"start coordinates must be integers, got ({x!r}, {y!r})", x=x, y=y, heading=heading
                )
        if not plateau.is_within_bounds(x, y):
            raise PlacementError(f"start ({x}, {y}) is off {plateau!r}", x=x, y=y, heading=heading)
        self._x = x
        self._y = y
        self._heading = heading
        # Shared, never mutated here
        self.plateau = plateau
        self._log = get_logger()
        self._dispatch = {
            Instruction.TURN_LEFT: self.turn_left,
            Instruction.TURN_RIGHT: self.turn_right,
            Instruction.MOVE: self.move_forward,
        }

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def heading(self):
        return self._heading

    @property
    def position(self):
        return (self._x, self._y)

    def turn_left(self):
        self._heading = self._heading.rotate_left()

    def turn_right(self):
        self._heading = self._heading.rotate_right()

    def move_forward(self):
        """Step one cell along the heading, or stay put at the plateau edge."""
        dx, dy = self._heading.step
        new_x, new_y = self._x + dx, self._y + dy

        if not self.plateau.is_within_bounds(new_x, new_y):
            if self._log.is_enabled(LogLevel.DEBUG):
                self._log.debug("move blocked", x=self._x, y=self._y, heading=self._heading.value)
            return

        self._x = new_x
        self._y = new_y

    def execute_instructions(self, instructions):
        """Apply instructions in order. Final state is read back from the rover."""
        for index, instruction in enumerate(instructions):
            try:
                action = self._dispatch[instruction]
            except (KeyError, TypeError) as exc:
                raise InstructionError(
                    f"unknown instruction {instruction!r}", instruction=instruction, index=index, cause=exc
                ) from exc
            action()

    def to_state(self):
        """Immutable snapshot of the current position and heading."""
        return RoverState(self.x, self.y, self.heading)

    def __repr__(self):
        return f"Rover(x={self.x}, y={self.y}, heading={self.heading.name}, plateau={self.plateau!r})"
