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


class ProfileError(Exception):
    """Base class for errors raised while building a syntax profile."""


class MissingRampError(ProfileError, KeyError):
    """The color scheme lacks one or more of the ramps the builder samples."""

    def __init__(self, ramps, scheme_name=None):
        self.ramps = tuple(ramps)
        self.scheme_name = scheme_name
        super().__init__(*self.ramps)

    def __str__(self):
        names = ", ".join(repr(name) for name in self.ramps)
        if self.scheme_name:
            return (f"color scheme {self.scheme_name!r} is missing "
                    f"required ramp(s): {names}")
        return f"color scheme is missing required ramp(s): {names}"


class InvalidOverrideError(ProfileError, ValueError):
    pass


class UnknownCategoryError(InvalidOverrideError):
    def __init__(self, category):
        self.category = category
        super().__init__(f"unknown syntax category {category!r}")


class SchemeFileError(ProfileError):
    pass
