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


import os
from configparser import ConfigParser, Error as ConfigParserError
from os.path import basename, expanduser, expandvars, isfile, join, splitext

from syntaxgen.color_scheme import ColorScheme, create_color_scheme
from syntaxgen.errors import SchemeFileError
from syntaxgen.lowlevel import scheme_log


XDG_CONF_RESOURCE = "syntaxgen"
SCHEMES_DIR_NAME = "schemes"
SCHEME_FILE_SUFFIX = ".cfg"

SCHEME_SECTION = "scheme"
RAMPS_SECTION = "ramps"
SYNTAX_SECTION_PREFIX = "syntax:"

BOOL_ATTRIBUTES = ("underline", "italic")


# {{{ scheme search path

def get_config_dirs():
    home = os.environ.get("HOME", None)
    config_home = os.environ.get(
        "XDG_CONFIG_HOME", join(home, ".config") if home else None)

    config_dirs = [config_home] if config_home else []
    for cdir in os.environ.get("XDG_CONFIG_DIRS", "/etc/xdg").split(":"):
        if cdir and cdir not in config_dirs:
            config_dirs.append(cdir)

    return config_dirs


def get_scheme_dirs():
    return [join(cdir, XDG_CONF_RESOURCE, SCHEMES_DIR_NAME)
            for cdir in get_config_dirs()]


def find_color_scheme(name):
    """
    Return the path of the scheme file called *name* in the first of
    :func:`get_scheme_dirs` that has one, or *None*.
    """
    fname = name if name.endswith(SCHEME_FILE_SUFFIX) \
        else name + SCHEME_FILE_SUFFIX

    for scheme_dir in get_scheme_dirs():
        path = join(scheme_dir, fname)
        if isfile(path):
            return path

    return None

# }}}


# {{{ parsing

def normalize_bool(value):
    lowered = value.strip().lower()
    if lowered in ["0", "false", "off", "no"]:
        return False
    if lowered in ["1", "true", "on", "yes"]:
        return True
    raise ValueError(f"not a boolean: {value!r}")


def _parse_stops(value):
    return [stop for stop in value.replace(",", " ").split() if stop]


def parse_color_scheme(text, source="<string>") -> ColorScheme:
    """
    Parse the INI text of a color scheme. Hex colors start with ``#``, so
    only ``;`` introduces a comment, and a ``#`` stop on a continuation
    line stays part of its ramp. Values are read raw, without interpolation.
    """
    cparser = ConfigParser(
        interpolation=None,
        comment_prefixes=(";",),
        inline_comment_prefixes=(";",))

    try:
        cparser.read_string(text, source=source)
    except ConfigParserError as err:
        raise SchemeFileError(
            f"unable to parse color scheme {source!r}: {err}") from err

    if not cparser.has_section(SCHEME_SECTION):
        raise SchemeFileError(
            f"color scheme {source!r} has no [{SCHEME_SECTION}] section")

    scheme_conf = dict(cparser.items(SCHEME_SECTION))
    name = scheme_conf.get("name", splitext(basename(source))[0])

    appearance = scheme_conf.get("appearance", "dark").strip().lower()
    if appearance not in ("dark", "light"):
        raise SchemeFileError(
            f"color scheme {name!r}: appearance must be 'dark' or 'light', "
            f"got {appearance!r}")

    color_ramps = {}
    if cparser.has_section(RAMPS_SECTION):
        for ramp_name, value in cparser.items(RAMPS_SECTION):
            stops = _parse_stops(value)
            if not stops:
                raise SchemeFileError(
                    f"color scheme {name!r}: ramp {ramp_name!r} is empty")
            color_ramps[ramp_name] = stops

    syntax = {}
    for section in cparser.sections():
        if not section.startswith(SYNTAX_SECTION_PREFIX):
            continue

        category = section[len(SYNTAX_SECTION_PREFIX):].strip()
        attributes = dict(cparser.items(section))
        for attr_name in BOOL_ATTRIBUTES:
            if attr_name in attributes:
                try:
                    attributes[attr_name] = normalize_bool(
                        attributes[attr_name])
                except ValueError as err:
                    raise SchemeFileError(
                        f"color scheme {name!r}, [{section}]: {err}"
                    ) from err
        syntax[category] = attributes

    try:
        return create_color_scheme(
            name, appearance == "light", color_ramps, syntax or None)
    except ValueError as err:
        raise SchemeFileError(
            f"color scheme {name!r}: invalid color ramp: {err}") from err


def load_color_scheme(path) -> ColorScheme:
    fname = expanduser(expandvars(path))

    try:
        with open(fname, encoding="utf-8") as inf:
            text = inf.read()
    except FileNotFoundError as err:
        scheme_log.error(f"Unable to locate color scheme file {fname!r}")
        raise SchemeFileError(
            f"color scheme file {fname!r} not found") from err
    except (OSError, UnicodeDecodeError) as err:
        scheme_log.error(f"Unable to read color scheme file {fname!r}: {err}")
        raise SchemeFileError(
            f"unable to read color scheme file {fname!r}: {err}") from err

    try:
        return parse_color_scheme(text, fname)
    except SchemeFileError:
        scheme_log.exception("Error when loading color scheme:")
        raise

# }}}

# vim: foldmethod=marker
