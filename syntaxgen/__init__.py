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


import re
from importlib import metadata
from os.path import expanduser, expandvars, isfile

from syntaxgen.color_scheme import ColorScheme, create_color_scheme
from syntaxgen.errors import (
    InvalidOverrideError,
    MissingRampError,
    ProfileError,
    SchemeFileError,
    UnknownCategoryError,
)
from syntaxgen.syntax import (
    StyleCategory,
    SyntaxHighlightStyle,
    SyntaxProfile,
    build_default_syntax,
    build_syntax,
    merge_syntax,
)


VERSION = metadata.version("syntaxgen")
_ver_match = re.match(r"^([0-9.]+)([a-z0-9]*?)$", VERSION)
assert _ver_match
NUM_VERSION = tuple(int(nr) for nr in _ver_match.group(1).split("."))
__version__ = VERSION


def build_syntax_profile(color_scheme: ColorScheme) -> SyntaxProfile:
    """Return the complete syntax profile for *color_scheme*."""
    return build_syntax(color_scheme)


def get_color_scheme(name: str) -> ColorScheme:
    """
    Look *name* up among the bundled :data:`~syntaxgen.themes.THEMES`, then
    among the user's scheme directories, then as a path to a scheme file.

    :raises SchemeFileError: if no scheme by that name can be found or
        loaded.
    """
    from syntaxgen.settings import find_color_scheme, load_color_scheme
    from syntaxgen.themes import THEMES

    try:
        return THEMES[name]
    except KeyError:
        pass

    path = find_color_scheme(name)
    if path is None:
        path = expanduser(expandvars(name))
        if not isfile(path):
            raise SchemeFileError(f"unknown color scheme {name!r}")

    return load_color_scheme(path)


__all__ = [
    "VERSION",
    "ColorScheme",
    "InvalidOverrideError",
    "MissingRampError",
    "ProfileError",
    "SchemeFileError",
    "StyleCategory",
    "SyntaxHighlightStyle",
    "SyntaxProfile",
    "UnknownCategoryError",
    "build_default_syntax",
    "build_syntax",
    "build_syntax_profile",
    "create_color_scheme",
    "get_color_scheme",
    "merge_syntax",
]
