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


from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from syntaxgen.color import ColorLike, Ramp, color_ramp, make_ramp
from syntaxgen.errors import MissingRampError


#: Ramps sampled by the default syntax builder
REQUIRED_RAMPS = ("neutral", "blue", "orange", "green", "cyan", "yellow")

#: The full set of ramps a scheme conventionally ships
RAMP_NAMES = (
    "neutral",
    "red",
    "orange",
    "yellow",
    "green",
    "cyan",
    "blue",
    "violet",
    "magenta",
)

# A partial profile, {category key: {attribute: value}}
ThemeSyntax = Mapping[str, Mapping[str, Any]]


@dataclass(frozen=True)
class ColorScheme:
    name: str
    is_light: bool = False
    ramps: Mapping[str, Ramp] = field(default_factory=dict)
    syntax: Optional[ThemeSyntax] = None

    def ramp(self, name: str) -> Ramp:
        try:
            return self.ramps[name]
        except KeyError:
            raise MissingRampError([name], self.name) from None

    def missing_ramps(self, names: Sequence[str] = REQUIRED_RAMPS) -> list:
        return [name for name in names if name not in self.ramps]


def _as_ramp(spec: Union[Ramp, ColorLike, Sequence[ColorLike]]) -> Ramp:
    if callable(spec):
        return spec
    if isinstance(spec, (list, tuple)):
        if len(spec) == 1:
            return color_ramp(spec[0])
        return make_ramp(spec)
    return color_ramp(spec)


def create_color_scheme(
        name: str,
        is_light: bool,
        color_ramps: Mapping[str, Union[Ramp, ColorLike, Sequence[ColorLike]]],
        syntax: Optional[ThemeSyntax] = None,
        ) -> ColorScheme:
    """
    Build a :class:`ColorScheme` from ramp descriptions. Each ramp may be
    given as a callable, a single base color (expanded with
    :func:`~syntaxgen.color.color_ramp`) or a list of stops.

    Light schemes run their neutral ramp from light to dark, so it is
    reversed here: ``neutral(1)`` is the primary text color in every scheme.
    """
    ramps = {}
    for ramp_name, spec in color_ramps.items():
        if ramp_name == "neutral" and is_light:
            if isinstance(spec, (list, tuple)):
                spec = list(reversed(spec))
            else:
                forward = _as_ramp(spec)
                ramps[ramp_name] = _reversed(forward)
                continue
        ramps[ramp_name] = _as_ramp(spec)

    return ColorScheme(name=name, is_light=is_light, ramps=ramps,
                       syntax=syntax)


def _reversed(ramp: Ramp) -> Ramp:
    def reversed_ramp(lightness: float):
        return ramp(1 - lightness)

    return reversed_ramp
