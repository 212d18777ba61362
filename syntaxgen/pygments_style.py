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


from typing import Optional

import pygments.token as t
from pygments.style import Style

from syntaxgen.common import is_bold
from syntaxgen.syntax import StyleCategory, SyntaxHighlightStyle, SyntaxProfile


# Pygments token type: syntax category. Categories absent from a profile fall
# back to their parent category.
TOKEN_MAP = {
    t.Token: StyleCategory.PRIMARY,
    t.Text: StyleCategory.PRIMARY,

    t.Comment: StyleCategory.COMMENT,
    t.Comment.Preproc: StyleCategory.PREPROC,
    t.Comment.PreprocFile: StyleCategory.STRING,
    t.Comment.Hashbang: StyleCategory.PREPROC,

    t.Keyword: StyleCategory.KEYWORD,
    t.Keyword.Constant: StyleCategory.CONSTANT_BUILTIN,
    t.Keyword.Type: StyleCategory.TYPE_BUILTIN,
    t.Operator: StyleCategory.OPERATOR,
    t.Operator.Word: StyleCategory.KEYWORD,
    t.Punctuation: StyleCategory.PUNCTUATION,

    t.Name: StyleCategory.VARIABLE,
    t.Name.Attribute: StyleCategory.ATTRIBUTE,
    t.Name.Builtin: StyleCategory.FUNCTION_BUILTIN,
    t.Name.Builtin.Pseudo: StyleCategory.VARIABLE_SPECIAL,
    t.Name.Class: StyleCategory.TYPE,
    t.Name.Constant: StyleCategory.CONSTANT,
    t.Name.Decorator: StyleCategory.ATTRIBUTE,
    t.Name.Entity: StyleCategory.STRING_SPECIAL,
    t.Name.Exception: StyleCategory.TYPE,
    t.Name.Function: StyleCategory.FUNCTION_DEFINITION,
    t.Name.Function.Magic: StyleCategory.FUNCTION_SPECIAL_DEFINITION,
    t.Name.Label: StyleCategory.LABEL,
    t.Name.Namespace: StyleCategory.TYPE,
    t.Name.Property: StyleCategory.PROPERTY,
    t.Name.Tag: StyleCategory.TAG,
    t.Name.Variable.Magic: StyleCategory.VARIABLE_SPECIAL,

    t.Literal: StyleCategory.CONSTANT,
    t.String: StyleCategory.STRING,
    t.String.Doc: StyleCategory.COMMENT_DOC,
    t.String.Escape: StyleCategory.STRING_ESCAPE,
    t.String.Interpol: StyleCategory.EMBEDDED,
    t.String.Regex: StyleCategory.STRING_REGEX,
    t.String.Symbol: StyleCategory.STRING_SPECIAL_SYMBOL,
    t.Number: StyleCategory.NUMBER,

    t.Generic.Emph: StyleCategory.EMPHASIS,
    t.Generic.Strong: StyleCategory.EMPHASIS_STRONG,
    t.Generic.Heading: StyleCategory.TITLE,
    t.Generic.Subheading: StyleCategory.TITLE,
}


def _pygments_color(color: str) -> str:
    # pygments only takes #rgb and #rrggbb
    if len(color) == 9:
        return color[:7]
    return color


def style_string(style: SyntaxHighlightStyle) -> str:
    """Render *style* as a pygments style definition, e.g. ``"bold #ff0000"``.

    Flags are spelled out both ways, so a token never inherits boldness or
    italics from its parent token type.
    """
    parts = [
        "bold" if is_bold(style.weight) else "nobold",
        "italic" if style.italic else "noitalic",
        "underline" if style.underline else "nounderline",
    ]
    if style.color:
        parts.append(_pygments_color(style.color))
    return " ".join(parts)


def make_pygments_style(profile: SyntaxProfile,
                        name: str = "SyntaxProfileStyle",
                        background_color: Optional[str] = None) -> type:
    """Return a :class:`pygments.style.Style` subclass rendering *profile*."""
    attrs = {
        "default_style": "",
        "styles": {
            ttype: style_string(profile.resolve(category))
            for ttype, category in TOKEN_MAP.items()
        },
    }
    if background_color is not None:
        attrs["background_color"] = _pygments_color(background_color)

    return type(name, (Style,), attrs)
