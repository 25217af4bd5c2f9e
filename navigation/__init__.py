from navigation.heading import Heading, rotate_left, rotate_right
from navigation.instruction import Instruction
from navigation.plateau import Plateau
from navigation.rover import Rover
from navigation.state import RoverState

__all__ = [
    "Heading",
    "Instruction",
    "Plateau",
    "Rover",
    "RoverState",
    "rotate_left",
    "rotate_right",
]
