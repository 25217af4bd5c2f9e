from core.errors import BaseSimError, InstructionError, PlacementError, PlateauError

__all__ = [
    "BaseSimError",
    "InstructionError",
    "PlacementError",
    "PlateauError",
]
