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


import copy
from collections.abc import Iterator, Mapping
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from typing import Any, Optional

from coloraide import Color
from typing_extensions import override

from syntaxgen.color import mix, to_hex
from syntaxgen.color_scheme import REQUIRED_RAMPS, ColorScheme
from syntaxgen.common import FONT_WEIGHTS, FontWeight
from syntaxgen.errors import (
    InvalidOverrideError,
    MissingRampError,
    ProfileError,
    UnknownCategoryError,
)
from syntaxgen.lowlevel import profile_log


@dataclass(frozen=True)
class SyntaxHighlightStyle:
    color: Optional[str] = None
    weight: FontWeight = "normal"
    underline: bool = False
    italic: bool = False


DEFAULT_STYLE = SyntaxHighlightStyle()

STYLE_ATTRIBUTES = tuple(f.name for f in fields(SyntaxHighlightStyle))


# ------------------------------------------------------------------------------
# Reference for some categories:
#
#  "comment.doc"             : elixir doc comments
#  "text.literal"            : markdown code spans and code blocks
#  "punctuation.special"     : "${" in template literals, yaml "*", "&", "---"
#  "punctuation.list_marker" : markdown list markers
#  "string.special"          : css color values, toml dates
#  "string.special.symbol"   : elixir atoms, ruby symbols
#  "variable.special"        : "self", "this", css "--var"
#  "label"                   : c statement identifiers
#  "tag"                     : css tag names, selectors
#  "property"                : css class and property names
#  "keyword"                 : also css "@media", "@import"
#  "constant.builtin"        : go "nil", "iota", elixir "__MODULE__"
#  "function.special.definition" : rust macro definitions
#  "preproc"                 : lua hash-bang line
#  "embedded"                : interpolations, template substitutions
# ------------------------------------------------------------------------------

class StyleCategory(str, Enum):
    # {{{ text
    COMMENT = "comment"
    COMMENT_DOC = "comment.doc"
    PRIMARY = "primary"
    PREDICTIVE = "predictive"
    # }}}

    # {{{ formatted text
    EMPHASIS = "emphasis"
    EMPHASIS_STRONG = "emphasis.strong"
    TITLE = "title"
    LINK_URI = "link_uri"
    LINK_TEXT = "link_text"
    TEXT_LITERAL = "text.literal"
    # }}}

    # {{{ punctuation
    PUNCTUATION = "punctuation"
    PUNCTUATION_BRACKET = "punctuation.bracket"
    PUNCTUATION_DELIMITER = "punctuation.delimiter"
    PUNCTUATION_SPECIAL = "punctuation.special"
    PUNCTUATION_LIST_MARKER = "punctuation.list_marker"
    # }}}

    # {{{ strings
    STRING = "string"
    STRING_SPECIAL = "string.special"
    STRING_SPECIAL_SYMBOL = "string.special.symbol"
    STRING_ESCAPE = "string.escape"
    STRING_REGEX = "string.regex"
    # }}}

    # {{{ types
    CONSTRUCTOR = "constructor"
    VARIANT = "variant"
    TYPE = "type"
    TYPE_BUILTIN = "type.builtin"
    # }}}

    # {{{ values
    VARIABLE = "variable"
    VARIABLE_SPECIAL = "variable.special"
    LABEL = "label"
    TAG = "tag"
    ATTRIBUTE = "attribute"
    PROPERTY = "property"
    CONSTANT = "constant"
    KEYWORD = "keyword"
    ENUM = "enum"
    OPERATOR = "operator"
    NUMBER = "number"
    BOOLEAN = "boolean"
    CONSTANT_BUILTIN = "constant.builtin"
    # }}}

    # {{{ functions
    FUNCTION = "function"
    FUNCTION_BUILTIN = "function.builtin"
    FUNCTION_DEFINITION = "function.definition"
    FUNCTION_SPECIAL_DEFINITION = "function.special.definition"
    FUNCTION_METHOD = "function.method"
    FUNCTION_METHOD_BUILTIN = "function.method.builtin"
    # }}}

    PREPROC = "preproc"
    EMBEDDED = "embedded"

    @property
    def is_optional(self) -> bool:
        return self in OPTIONAL_CATEGORIES


OPTIONAL_CATEGORIES = frozenset({
    StyleCategory.STRING_SPECIAL_SYMBOL,
    StyleCategory.STRING_ESCAPE,
    StyleCategory.STRING_REGEX,
    StyleCategory.TYPE_BUILTIN,
    StyleCategory.VARIABLE_SPECIAL,
    StyleCategory.CONSTANT_BUILTIN,
    StyleCategory.FUNCTION_BUILTIN,
    StyleCategory.FUNCTION_DEFINITION,
    StyleCategory.FUNCTION_SPECIAL_DEFINITION,
    StyleCategory.FUNCTION_METHOD,
    StyleCategory.FUNCTION_METHOD_BUILTIN,
})

REQUIRED_CATEGORIES = tuple(
    category for category in StyleCategory
    if category not in OPTIONAL_CATEGORIES)


# Map categories to their parent. A consumer that needs a style for a category
# missing from a profile uses the parent style, recursively.
CATEGORY_PARENTS = {
    StyleCategory.COMMENT_DOC: StyleCategory.COMMENT,
    StyleCategory.PREDICTIVE: StyleCategory.PRIMARY,
    StyleCategory.TITLE: StyleCategory.PRIMARY,
    StyleCategory.EMPHASIS_STRONG: StyleCategory.EMPHASIS,
    StyleCategory.TEXT_LITERAL: StyleCategory.STRING,

    StyleCategory.PUNCTUATION_BRACKET: StyleCategory.PUNCTUATION,
    StyleCategory.PUNCTUATION_DELIMITER: StyleCategory.PUNCTUATION,
    StyleCategory.PUNCTUATION_SPECIAL: StyleCategory.PUNCTUATION,
    StyleCategory.PUNCTUATION_LIST_MARKER: StyleCategory.PUNCTUATION,

    StyleCategory.STRING_SPECIAL: StyleCategory.STRING,
    StyleCategory.STRING_SPECIAL_SYMBOL: StyleCategory.STRING_SPECIAL,
    StyleCategory.STRING_ESCAPE: StyleCategory.STRING_SPECIAL,
    StyleCategory.STRING_REGEX: StyleCategory.STRING_SPECIAL,

    StyleCategory.TYPE_BUILTIN: StyleCategory.TYPE,
    StyleCategory.VARIABLE_SPECIAL: StyleCategory.VARIABLE,
    StyleCategory.CONSTANT_BUILTIN: StyleCategory.CONSTANT,

    StyleCategory.FUNCTION_BUILTIN: StyleCategory.FUNCTION,
    StyleCategory.FUNCTION_DEFINITION: StyleCategory.FUNCTION,
    StyleCategory.FUNCTION_SPECIAL_DEFINITION:
        StyleCategory.FUNCTION_DEFINITION,
    StyleCategory.FUNCTION_METHOD: StyleCategory.FUNCTION,
    StyleCategory.FUNCTION_METHOD_BUILTIN: StyleCategory.FUNCTION_METHOD,
}


# {{{ profile

class SyntaxProfile(Mapping[str, SyntaxHighlightStyle]):
    """
    Read-only mapping from category key (e.g. ``"emphasis.strong"``) to its
    :class:`SyntaxHighlightStyle`. :class:`StyleCategory` members work as
    keys too.
    """

    def __init__(self, styles: Mapping[str, SyntaxHighlightStyle]):
        self._styles = {StyleCategory(key).value: style
                        for key, style in styles.items()}

    @override
    def __getitem__(self, key: str) -> SyntaxHighlightStyle:
        if isinstance(key, StyleCategory):
            key = key.value
        return self._styles[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._styles)

    @override
    def __len__(self) -> int:
        return len(self._styles)

    def __repr__(self):
        return f"{type(self).__name__}({self._styles!r})"

    def resolve(self, category: str) -> SyntaxHighlightStyle:
        """
        Return the style for *category*, or that of its closest ancestor in
        :data:`CATEGORY_PARENTS` if the profile leaves it unset.
        """
        current: Optional[StyleCategory] = StyleCategory(category)
        while current is not None:
            try:
                return self._styles[current.value]
            except KeyError:
                current = CATEGORY_PARENTS.get(current)
        raise KeyError(category)

    def as_dict(self) -> dict[str, dict[str, Any]]:
        return {key: asdict(style) for key, style in self._styles.items()}

# }}}


# {{{ default syntax

# palette role: (ramp name, lightness)
PALETTE_SAMPLES = {
    "primary": ("neutral", 1),
    "comment": ("neutral", 0.71),
    "punctuation": ("neutral", 0.86),
    "emphasis": ("blue", 0.5),
    "string": ("orange", 0.5),
    "function": ("yellow", 0.5),
    "type": ("cyan", 0.5),
    "constructor": ("blue", 0.5),
    "variant": ("blue", 0.5),
    "property": ("blue", 0.5),
    "enum": ("orange", 0.5),
    "operator": ("orange", 0.5),
    "number": ("green", 0.5),
    "boolean": ("green", 0.5),
    "constant": ("green", 0.5),
    "keyword": ("blue", 0.5),
    "link_uri": ("green", 0.5),
    "link_text": ("orange", 0.5),
}

# The predictive (ghost text) color is a blend of neutral and blue, so that
# it is distinct from every sampled color in the theme.
PREDICTIVE_MIX_SOURCES = (("neutral", 0.4), ("blue", 0.4))
PREDICTIVE_MIX_WEIGHT = 0.45
PREDICTIVE_MIX_SPACE = "lch"

# category: (palette role, attributes other than color)
DEFAULT_STYLES = {
    # {{{ text
    StyleCategory.COMMENT: ("comment", {}),
    StyleCategory.COMMENT_DOC: ("comment", {}),
    StyleCategory.PRIMARY: ("primary", {}),
    StyleCategory.PREDICTIVE: ("predictive", {"italic": True}),
    # }}}
    # {{{ formatted text
    StyleCategory.EMPHASIS: ("emphasis", {}),
    StyleCategory.EMPHASIS_STRONG: ("emphasis", {"weight": "bold"}),
    StyleCategory.TITLE: ("primary", {"weight": "bold"}),
    StyleCategory.LINK_URI: ("link_uri", {"underline": True}),
    StyleCategory.LINK_TEXT: ("link_text", {"italic": True}),
    StyleCategory.TEXT_LITERAL: ("string", {}),
    # }}}
    # {{{ punctuation
    StyleCategory.PUNCTUATION: ("punctuation", {}),
    StyleCategory.PUNCTUATION_BRACKET: ("punctuation", {}),
    StyleCategory.PUNCTUATION_DELIMITER: ("punctuation", {}),
    StyleCategory.PUNCTUATION_SPECIAL: ("punctuation", {}),
    StyleCategory.PUNCTUATION_LIST_MARKER: ("punctuation", {}),
    # }}}
    # {{{ strings
    StyleCategory.STRING: ("string", {}),
    StyleCategory.STRING_SPECIAL: ("string", {}),
    StyleCategory.STRING_SPECIAL_SYMBOL: ("string", {}),
    StyleCategory.STRING_ESCAPE: ("comment", {}),
    StyleCategory.STRING_REGEX: ("string", {}),
    # }}}
    # {{{ types
    StyleCategory.CONSTRUCTOR: ("constructor", {}),
    StyleCategory.VARIANT: ("variant", {}),
    StyleCategory.TYPE: ("type", {}),
    # }}}
    # {{{ values
    StyleCategory.VARIABLE: ("primary", {}),
    StyleCategory.LABEL: ("property", {}),
    StyleCategory.TAG: ("property", {}),
    StyleCategory.ATTRIBUTE: ("property", {}),
    StyleCategory.PROPERTY: ("property", {}),
    StyleCategory.CONSTANT: ("constant", {}),
    StyleCategory.KEYWORD: ("keyword", {}),
    StyleCategory.ENUM: ("enum", {}),
    StyleCategory.OPERATOR: ("operator", {}),
    StyleCategory.NUMBER: ("number", {}),
    StyleCategory.BOOLEAN: ("boolean", {}),
    # }}}
    StyleCategory.FUNCTION: ("function", {}),
    StyleCategory.PREPROC: ("primary", {}),
    StyleCategory.EMBEDDED: ("primary", {}),
}


def build_palette(color_scheme: ColorScheme) -> dict[str, str]:
    """
    Sample the scheme's ramps into the semantic colors the default syntax is
    assigned from.
    """
    missing = color_scheme.missing_ramps(REQUIRED_RAMPS)
    if missing:
        raise MissingRampError(missing, color_scheme.name)

    samples: dict[tuple[str, float], str] = {}

    def sample(ramp_name: str, lightness: float) -> str:
        try:
            return samples[ramp_name, lightness]
        except KeyError:
            value = to_hex(color_scheme.ramp(ramp_name)(lightness))
            samples[ramp_name, lightness] = value
            return value

    palette = {
        role: sample(ramp_name, lightness)
        for role, (ramp_name, lightness) in PALETTE_SAMPLES.items()
    }

    (neutral, neutral_lt), (blue, blue_lt) = PREDICTIVE_MIX_SOURCES
    palette["predictive"] = mix(
        sample(neutral, neutral_lt),
        sample(blue, blue_lt),
        PREDICTIVE_MIX_WEIGHT,
        space=PREDICTIVE_MIX_SPACE,
    )

    return palette


def build_default_syntax(color_scheme: ColorScheme) -> SyntaxProfile:
    """
    Return a profile in which every required category, and the optional
    categories with a default, carry a color sampled from *color_scheme*.

    :raises MissingRampError: if the scheme lacks a ramp the defaults are
        sampled from.
    """
    palette = build_palette(color_scheme)

    syntax = {category.value: DEFAULT_STYLE
              for category in REQUIRED_CATEGORIES}

    for category, (role, attributes) in DEFAULT_STYLES.items():
        syntax[category.value] = replace(
            DEFAULT_STYLE, color=palette[role], **attributes)

    unset = [key for key, style in syntax.items() if not style.color]
    if unset:
        raise ProfileError(
            f"no default color assigned to: {', '.join(unset)}")

    return SyntaxProfile(syntax)

# }}}


# {{{ merge

def deep_merge(base: Any, override: Any) -> Any:
    """
    Merge *override* onto *base* without modifying either. Mappings merge
    key by key, lists and tuples concatenate (base items first) and any
    other value in *override* replaces the one in *base*.
    """
    if isinstance(base, Mapping) and isinstance(override, Mapping):
        merged = dict(base)
        for key, value in override.items():
            if key in merged:
                merged[key] = deep_merge(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged

    if (isinstance(base, (list, tuple))
            and isinstance(override, (list, tuple))):
        return type(base)([*base, *override])

    return copy.deepcopy(override)


def _check_attribute(key: str, name: str, value: Any) -> Any:
    if name == "color":
        if isinstance(value, Color):
            return to_hex(value)
        if not isinstance(value, str):
            raise InvalidOverrideError(
                f"{key}.color must be a color string, got {value!r}")

        try:
            parsed = Color(value)
        except ValueError as err:
            raise InvalidOverrideError(
                f"{key}.color is not a valid color: {value!r}") from err

        # #rgb, #rrggbb and #rrggbbaa are kept as written
        if value.startswith("#") and len(value) in (4, 7, 9):
            return value
        return to_hex(parsed)

    if name == "weight":
        if not isinstance(value, str) or value not in FONT_WEIGHTS:
            raise InvalidOverrideError(
                f"{key}.weight must be one of {', '.join(FONT_WEIGHTS)}, "
                f"got {value!r}")
        return value

    if name in ("underline", "italic"):
        if not isinstance(value, bool):
            raise InvalidOverrideError(
                f"{key}.{name} must be a boolean, got {value!r}")
        return value

    raise InvalidOverrideError(
        f"unknown style attribute {name!r} for {key!r}; "
        f"expected one of {', '.join(STYLE_ATTRIBUTES)}")


def merge_style(key: str, style: SyntaxHighlightStyle,
                attributes: Mapping[str, Any]) -> SyntaxHighlightStyle:
    """
    Apply the partial *attributes* of category *key* onto *style*. ``None``
    values are skipped, so an override cannot clear an attribute.
    """
    if not isinstance(attributes, Mapping):
        raise InvalidOverrideError(
            f"override for {key!r} must be a mapping of style attributes, "
            f"got {type(attributes).__name__}")

    changes = {
        name: _check_attribute(key, name, value)
        for name, value in attributes.items()
        if value is not None
    }

    return SyntaxHighlightStyle(**deep_merge(asdict(style), changes))


def merge_syntax(default_syntax: SyntaxProfile, color_scheme: ColorScheme,
                 strict: bool = False) -> SyntaxProfile:
    """
    Merge the scheme's partial syntax override onto *default_syntax*. If the
    scheme has no override, *default_syntax* itself is returned.

    Override categories outside :class:`StyleCategory` are logged and
    skipped, or raise :exc:`UnknownCategoryError` if *strict* is set.
    """
    if not color_scheme.syntax:
        return default_syntax

    merged = dict(default_syntax)

    for key, attributes in color_scheme.syntax.items():
        try:
            category = StyleCategory(key)
        except ValueError:
            if strict:
                raise UnknownCategoryError(key) from None
            profile_log.warning(
                "ignoring unknown syntax category %r in color scheme %r",
                key, color_scheme.name)
            continue

        style = merge_style(
            category.value,
            merged.get(category.value, DEFAULT_STYLE),
            attributes)
        if not style.color:
            raise InvalidOverrideError(
                f"override adds {category.value!r} without a color")

        merged[category.value] = style

    return SyntaxProfile(merged)

# }}}


def build_syntax(color_scheme: ColorScheme) -> SyntaxProfile:
    """Build the default syntax for *color_scheme* and apply its override."""
    profile_log.debug("building syntax profile for %r", color_scheme.name)
    default_syntax = build_default_syntax(color_scheme)
    return merge_syntax(default_syntax, color_scheme)

# vim: foldmethod=marker
