from __future__ import annotations


__copyright__ = """
Copyright (C) 2009-2017 Andreas Kloeckner
Copyright (C) 2014-2017 Aaron Meurer
"""

__license__ = """
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""


from collections.abc import Callable, Sequence
from typing import Union

from coloraide import Color


ColorLike = Union[str, Color]

#: A ramp maps a lightness scalar in [0, 1] to a color.
Ramp = Callable[[float], ColorLike]

# Lab lightness units per step of chroma-js style darken()/desaturate()
LAB_STEP = 18


def to_hex(value: ColorLike) -> str:
    """
    Return the hex string for a ramp sample. Strings are taken to already be
    hex colors and are returned as given.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Color):
        return value.convert("srgb").to_string(hex=True)
    raise TypeError(
        f"cannot convert {type(value).__name__} to a hex color string")


def mix(color1: ColorLike, color2: ColorLike, weight: float = 0.5,
        space: str = "lch") -> str:
    """
    Blend *color1* and *color2* in *space* and return a hex string. *weight*
    is the share of *color2* in the result.
    """
    mixed = Color(to_hex(color1)).mix(to_hex(color2), weight, space=space)
    return to_hex(mixed)


def make_ramp(stops: Sequence[ColorLike], space: str = "lab") -> Ramp:
    """Return a ramp interpolating evenly through *stops*."""
    if len(stops) < 2:
        raise ValueError("a ramp needs at least two color stops")

    interpolator = Color.interpolate(
        [Color(to_hex(stop)) for stop in stops], space=space)

    def ramp(lightness: float) -> Color:
        if not 0 <= lightness <= 1:
            raise ValueError(
                f"ramp lightness must be within [0, 1], got {lightness!r}")
        return interpolator(lightness)

    return ramp


def color_ramp(base: ColorLike, space: str = "lab") -> Ramp:
    """
    Return a three-stop ramp running from a dark, desaturated variant of
    *base* through *base* itself (at 0.5) to a bright, desaturated variant.
    """
    color = Color(to_hex(base)).convert("lch")

    def desaturated(c):
        return max(c - LAB_STEP, 0)

    start = (color.clone()
             .set("chroma", desaturated)
             .set("lightness", lambda lt: max(lt - 4 * LAB_STEP, 0)))
    end = (color.clone()
           .set("chroma", desaturated)
           .set("lightness", lambda lt: min(lt + 5 * LAB_STEP, 100)))

    return make_ramp([start, color, end], space=space)
