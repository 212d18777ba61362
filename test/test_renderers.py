import pygments.token as t
import pytest  # noqa: F401
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import PythonLexer
from pygments.style import Style

from syntaxgen.palette import attr_spec, get_palette, make_palette_entry
from syntaxgen.pygments_style import make_pygments_style, style_string
from syntaxgen.syntax import StyleCategory, SyntaxHighlightStyle, build_syntax


def test_style_string():
    assert style_string(SyntaxHighlightStyle("#ABCDEF", "semibold")) \
        == "bold noitalic nounderline #ABCDEF"
    assert style_string(SyntaxHighlightStyle(
        "#ABCDEF80", italic=True, underline=True)) \
        == "nobold italic underline #ABCDEF"


def test_pygments_style(reference_scheme):
    profile = build_syntax(reference_scheme)
    style = make_pygments_style(profile, "ReferenceStyle", "#000000")

    assert issubclass(style, Style)
    assert style.__name__ == "ReferenceStyle"
    assert style.background_color == "#000000"

    keyword = style.style_for_token(t.Keyword)
    assert keyword["color"].lower() == "3b82f6"
    assert not keyword["bold"]

    assert style.style_for_token(t.Generic.Strong)["bold"]
    assert style.style_for_token(t.Name.Function)["color"].lower() \
        == "eab308"


def test_pygments_style_highlights(reference_scheme):
    style = make_pygments_style(build_syntax(reference_scheme))
    html = highlight("def f():\n    return 1\n", PythonLexer(),
                     HtmlFormatter(style=style, noclasses=True))

    assert "#3B82F6" in html or "#3b82f6" in html


def test_palette_entry():
    entry = make_palette_entry(
        "emphasis.strong",
        SyntaxHighlightStyle("#3B82F6", "bold", italic=True),
        background="#000",
    )

    assert entry.foreground == "default"
    assert entry.mono == "bold, italics"
    assert entry.foreground_high == "#3b82f6, bold, italics"
    assert entry.background_high == "#000000"


def test_get_palette(scheme_factory):
    profile = build_syntax(scheme_factory(syntax={
        "function.method": {"color": "#010203"},
    }))
    palette = {entry[0]: entry for entry in get_palette(profile)}

    assert set(palette) == {category.value for category in StyleCategory}
    assert palette["link_uri"] == (
        "link_uri", "default", "default", "underline",
        "#22c55e, underline", "default")
    assert palette["function.method.builtin"][4] == "#010203"
    assert palette["function.builtin"][4] == "#eab308"


def test_attr_spec(reference_scheme):
    profile = build_syntax(reference_scheme)

    spec = attr_spec(profile["link_uri"])
    assert spec.underline
    assert not spec.bold

    spec = attr_spec(profile["title"], background="#000000")
    assert spec.bold
    assert not spec.italics
