"""Unit tests for error classes."""

from core.errors import BaseSimError, InstructionError, PlacementError, PlateauError


class TestBaseSimError:
    """Tests for BaseSimError."""

    def test_defaults(self):
        """Error has empty context, no cause and a timestamp."""
        err = BaseSimError("boom")
        assert err.context == {}
        assert err.cause is None
        assert err.timestamp.endswith("Z")

    def test_str_has_timestamp(self):
        """str() prefixes the timestamp."""
        err = BaseSimError("boom")
        assert str(err) == f"[{err.timestamp}] boom"


class TestSubclasses:
    """Tests for domain errors."""

    def test_all_subclass_base(self):
        """Domain errors share the base class."""
        for cls in (PlateauError, PlacementError, InstructionError):
            assert issubclass(cls, BaseSimError)

    def test_plateau_error_context(self):
        """PlateauError records the bounds."""
        err = PlateauError("bad", max_x=-1, max_y=2)
        assert err.context == {"max_x": -1, "max_y": 2}

    def test_placement_error_context(self):
        """PlacementError records position and heading."""
        err = PlacementError("off", x=9, y=0, heading="N", context={"rover": "r1"})
        assert err.context == {"rover": "r1", "x": 9, "y": 0, "heading": "N"}

    def test_instruction_error_cause(self):
        """InstructionError keeps the cause."""
        cause = KeyError("X")
        err = InstructionError("unknown", instruction="X", index=0, cause=cause)
        assert err.cause is cause
        assert err.context == {"instruction": "X", "index": 0}
