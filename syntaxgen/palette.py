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


from dataclasses import astuple, dataclass
from typing import Optional

import urwid

from syntaxgen.common import is_bold
from syntaxgen.syntax import StyleCategory, SyntaxHighlightStyle, SyntaxProfile


TRUE_COLORS = 2**24


@dataclass
class PaletteEntry:
    name: str
    foreground: str = "default"
    background: str = "default"
    mono: Optional[str] = None
    foreground_high: Optional[str] = None
    background_high: Optional[str] = None


def add_setting(color, setting):
    if not color:
        return setting
    return f"{color}, {setting}"


def _settings(style: SyntaxHighlightStyle) -> list:
    settings = []
    if is_bold(style.weight):
        settings.append("bold")
    if style.italic:
        settings.append("italics")
    if style.underline:
        settings.append("underline")
    return settings


def _high_color(color: Optional[str]) -> str:
    # urwid's true color format is #rrggbb
    if not color or color == "default":
        return "default"
    if len(color) == 4:
        color = "#" + "".join(ch * 2 for ch in color[1:])
    return color[:7].lower()


def make_palette_entry(name: str, style: SyntaxHighlightStyle,
                       background: str = "default") -> PaletteEntry:
    foreground_high = _high_color(style.color)
    mono = None
    for setting in _settings(style):
        foreground_high = add_setting(foreground_high, setting)
        mono = add_setting(mono, setting)

    return PaletteEntry(
        name=name,
        mono=mono,
        foreground_high=foreground_high,
        background_high=_high_color(background),
    )


def get_palette(profile: SyntaxProfile, background: str = "default") -> list:
    """
    Return an urwid palette list with one entry per syntax category, named
    after the category key. Categories the profile leaves unset use their
    parent's style.
    """
    return [
        astuple(make_palette_entry(
            category.value, profile.resolve(category), background))
        for category in StyleCategory
    ]


def attr_spec(style: SyntaxHighlightStyle,
              background: str = "default") -> urwid.AttrSpec:
    entry = make_palette_entry("", style, background)
    return urwid.AttrSpec(
        entry.foreground_high, entry.background_high, colors=TRUE_COLORS)
