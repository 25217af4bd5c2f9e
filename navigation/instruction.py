from enum import Enum


class Instruction(Enum):
    """Atomic rover command."""

    TURN_LEFT = "L"
    TURN_RIGHT = "R"
    MOVE = "M"
