import pytest

from syntaxgen.color import to_hex
from syntaxgen.color_scheme import REQUIRED_RAMPS, create_color_scheme
from syntaxgen.errors import MissingRampError


RAMPS = {
    "neutral": ["#000000", "#ffffff"],
    "blue": "#3b82f6",
    "orange": ["#f97316"],
    "green": "#22c55e",
    "cyan": "#06b6d4",
    "yellow": "#eab308",
}


def test_dark_scheme_neutral_runs_dark_to_light():
    scheme = create_color_scheme("dark", False, RAMPS)

    assert to_hex(scheme.ramp("neutral")(1)) == "#ffffff"
    assert to_hex(scheme.ramp("neutral")(0)) == "#000000"


def test_light_scheme_reverses_neutral():
    scheme = create_color_scheme("light", True, RAMPS)

    assert scheme.is_light
    assert to_hex(scheme.ramp("neutral")(1)) == "#000000"
    assert to_hex(scheme.ramp("neutral")(0)) == "#ffffff"


def test_light_scheme_reverses_callable_neutral():
    ramps = dict(RAMPS, neutral=lambda lightness: lightness)
    scheme = create_color_scheme("light", True, ramps)

    assert scheme.ramp("neutral")(0.25) == 0.75


def test_single_color_becomes_ramp():
    scheme = create_color_scheme("dark", False, RAMPS)

    assert callable(scheme.ramp("blue"))
    assert callable(scheme.ramp("orange"))
    assert scheme.missing_ramps() == []


def test_missing_ramp():
    scheme = create_color_scheme("partial", False, {"neutral": "#888888"})

    assert scheme.missing_ramps() == list(REQUIRED_RAMPS[1:])
    with pytest.raises(MissingRampError) as exc_info:
        scheme.ramp("violet")
    assert exc_info.value.ramps == ("violet",)
    assert "partial" in str(exc_info.value)


def test_syntax_override_kept():
    syntax = {"comment": {"italic": True}}
    scheme = create_color_scheme("dark", False, RAMPS, syntax)

    assert scheme.syntax == syntax
