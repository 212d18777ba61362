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


import logging


def _init_loggers():
    profile_handler = logging.StreamHandler()
    profile_formatter = logging.Formatter(
        fmt="*** syntaxgen profile %(levelname)s: %(message)s ***"
    )
    profile_handler.setFormatter(profile_formatter)
    profile_log = logging.getLogger("syntaxgen.profile")
    profile_log.addHandler(profile_handler)

    scheme_handler = logging.StreamHandler()
    scheme_formatter = logging.Formatter(
        fmt="*** syntaxgen scheme %(levelname)s: %(message)s ***"
    )
    scheme_handler.setFormatter(scheme_formatter)
    scheme_log = logging.getLogger("syntaxgen.scheme")
    scheme_log.addHandler(scheme_handler)

    return profile_log, scheme_log


profile_log, scheme_log = _init_loggers()
