import pytest

from syntaxgen.color_scheme import ColorScheme


NEUTRAL = {1: "#FFFFFF", 0.86: "#DBDBDB", 0.71: "#B5B5B5", 0.4: "#666666"}
BLUE = {0.5: "#3B82F6", 0.4: "#2563EB"}
ORANGE = {0.5: "#F97316"}
GREEN = {0.5: "#22C55E"}
CYAN = {0.5: "#06B6D4"}
YELLOW = {0.5: "#EAB308"}


def ramp_from(samples):
    def ramp(lightness):
        return samples[lightness]

    return ramp


def make_reference_scheme(syntax=None, **ramp_overrides):
    ramps = {
        "neutral": ramp_from(NEUTRAL),
        "blue": ramp_from(BLUE),
        "orange": ramp_from(ORANGE),
        "green": ramp_from(GREEN),
        "cyan": ramp_from(CYAN),
        "yellow": ramp_from(YELLOW),
    }
    ramps.update(ramp_overrides)
    return ColorScheme("reference", ramps=ramps, syntax=syntax)


@pytest.fixture
def reference_scheme():
    return make_reference_scheme()


@pytest.fixture
def scheme_factory():
    return make_reference_scheme
