"""Errors raised for invalid plateaus, placements and instructions."""

from utils.timestamp import format_timestamp


class BaseSimError(Exception):
    """Base error carrying a timestamp and structured context."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.timestamp}] {super().__str__()}"


class PlateauError(BaseSimError):
    """Plateau bounds that are negative or not integers."""

    def __init__(self, message, max_x=None, max_y=None, **kwargs):
        context = kwargs.pop("context", {})
        context["max_x"] = max_x
        context["max_y"] = max_y
        super().__init__(message, context=context, **kwargs)


class PlacementError(BaseSimError):
    """Rover start position off the plateau, or a bad heading."""

    def __init__(self, message, x=None, y=None, heading=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(x=x, y=y)
        if heading is not None:
            context["heading"] = heading
        super().__init__(message, context=context, **kwargs)


class InstructionError(BaseSimError):
    """Instruction sequence element that is not an Instruction."""

    def __init__(self, message, instruction=None, index=None, **kwargs):
        context = kwargs.pop("context", {})
        context["instruction"] = instruction
        if index is not None:
            context["index"] = index
        super().__init__(message, context=context, **kwargs)
