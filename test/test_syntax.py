import dataclasses

import pytest

from syntaxgen import build_syntax_profile
from syntaxgen.errors import (
    InvalidOverrideError,
    MissingRampError,
    UnknownCategoryError,
)
from syntaxgen.syntax import (
    OPTIONAL_CATEGORIES,
    REQUIRED_CATEGORIES,
    StyleCategory,
    SyntaxHighlightStyle,
    build_default_syntax,
    build_palette,
    build_syntax,
    deep_merge,
    merge_syntax,
)


# {{{ default syntax

def test_default_syntax_colors_every_required_category(reference_scheme):
    profile = build_default_syntax(reference_scheme)

    for category in REQUIRED_CATEGORIES:
        assert profile[category.value].color


def test_optional_categories_without_defaults_stay_absent(reference_scheme):
    profile = build_default_syntax(reference_scheme)

    assert "function.definition" not in profile
    assert "function.method" not in profile
    assert "constant.builtin" not in profile
    assert profile["string.escape"].color == "#B5B5B5"
    assert profile["string.regex"].color == "#F97316"


def test_reference_scheme_example(reference_scheme):
    profile = build_syntax_profile(reference_scheme)

    assert profile["primary"].color == "#FFFFFF"
    assert profile["keyword"].color == "#3B82F6"
    assert profile["emphasis.strong"].weight == "bold"
    assert profile["link_uri"].underline is True


def test_default_attributes(reference_scheme):
    profile = build_default_syntax(reference_scheme)

    assert profile["predictive"].italic is True
    assert profile["title"] == SyntaxHighlightStyle("#FFFFFF", "bold")
    assert profile["link_text"] == SyntaxHighlightStyle(
        "#F97316", italic=True)
    assert profile["link_uri"].color == "#22C55E"
    assert profile["comment"] == SyntaxHighlightStyle("#B5B5B5")
    assert profile["punctuation.special"].color == "#DBDBDB"
    assert profile["function"].color == "#EAB308"
    assert profile["type"].color == "#06B6D4"
    for key in ["tag", "attribute", "label", "constructor", "variant"]:
        assert profile[key].color == "#3B82F6"
    for key in ["number", "boolean", "constant"]:
        assert profile[key].color == "#22C55E"


def test_predictive_color_is_distinct(reference_scheme):
    palette = build_palette(reference_scheme)
    predictive = palette.pop("predictive").lower()

    assert predictive not in {color.lower() for color in palette.values()}


def test_ramps_sampled_once_per_lightness(mocker, scheme_factory):
    blue = mocker.Mock(side_effect={0.5: "#3B82F6", 0.4: "#2563EB"}.get)
    build_default_syntax(scheme_factory(blue=blue))

    assert blue.call_count == 2
    assert {call.args[0] for call in blue.call_args_list} == {0.4, 0.5}


def test_missing_ramps_named(scheme_factory):
    scheme = scheme_factory()
    ramps = dict(scheme.ramps)
    del ramps["cyan"]
    del ramps["yellow"]
    scheme = dataclasses.replace(scheme, ramps=ramps)

    with pytest.raises(MissingRampError) as exc_info:
        build_syntax(scheme)

    assert exc_info.value.ramps == ("cyan", "yellow")
    assert "'cyan'" in str(exc_info.value)
    assert isinstance(exc_info.value, KeyError)

# }}}


# {{{ profile

def test_profile_is_read_only(reference_scheme):
    profile = build_default_syntax(reference_scheme)

    with pytest.raises(TypeError):
        profile["comment"] = SyntaxHighlightStyle("#000000")
    with pytest.raises(dataclasses.FrozenInstanceError):
        profile["comment"].color = "#000000"


def test_profile_accepts_category_keys(reference_scheme):
    profile = build_default_syntax(reference_scheme)

    assert profile[StyleCategory.KEYWORD] is profile["keyword"]
    assert StyleCategory.EMPHASIS_STRONG in profile


def test_resolve_falls_back_to_parent(scheme_factory):
    profile = build_syntax(scheme_factory(syntax={
        "function.definition": {"color": "#123456"},
    }))

    assert profile.resolve("function.special.definition").color == "#123456"
    assert profile.resolve("function.method.builtin") == profile["function"]
    assert profile.resolve("constant.builtin") == profile["constant"]
    assert profile.resolve("comment") == profile["comment"]


def test_as_dict(reference_scheme):
    profile = build_default_syntax(reference_scheme)
    data = profile.as_dict()

    assert data["emphasis.strong"] == {
        "color": "#3B82F6",
        "weight": "bold",
        "underline": False,
        "italic": False,
    }
    assert set(data) == set(profile)


def test_every_category_is_required_or_optional():
    assert len(REQUIRED_CATEGORIES) + len(OPTIONAL_CATEGORIES) \
        == len(StyleCategory)
    assert StyleCategory.FUNCTION_DEFINITION.is_optional
    assert not StyleCategory.COMMENT.is_optional

# }}}


# {{{ merge

def test_merge_without_override_returns_default(reference_scheme):
    default = build_default_syntax(reference_scheme)

    assert merge_syntax(default, reference_scheme) is default


def test_merge_with_empty_override_returns_default(scheme_factory):
    scheme = scheme_factory(syntax={})
    default = build_default_syntax(scheme)

    assert merge_syntax(default, scheme) is default


def test_override_keeps_color_and_sets_italic(scheme_factory):
    profile = build_syntax(scheme_factory(syntax={
        "comment": {"italic": True},
    }))

    assert profile["comment"].color == "#B5B5B5"
    assert profile["comment"].italic is True


def test_override_color_takes_precedence(scheme_factory):
    scheme = scheme_factory(syntax={"keyword": {"color": "#FF0000"}})
    profile = build_syntax(scheme)

    assert profile["keyword"] == SyntaxHighlightStyle("#FF0000")
    assert profile["emphasis.strong"] == SyntaxHighlightStyle(
        "#3B82F6", "bold")


def test_partial_override_preserves_siblings(scheme_factory):
    profile = build_syntax(scheme_factory(syntax={
        "link_uri": {"color": "#00FF00"},
    }))

    assert profile["link_uri"] == SyntaxHighlightStyle(
        "#00FF00", underline=True)


def test_merge_does_not_modify_default(scheme_factory):
    scheme = scheme_factory(syntax={
        "comment": {"italic": True, "color": "#010101"},
        "function.method": {"color": "#020202"},
    })
    default = build_default_syntax(scheme)
    before = default.as_dict()

    merged = merge_syntax(default, scheme)

    assert merged is not default
    assert default.as_dict() == before
    assert "function.method" not in default
    assert merged["function.method"].color == "#020202"


def test_none_values_cannot_clear_color(scheme_factory):
    profile = build_syntax(scheme_factory(syntax={
        "string": {"color": None, "italic": True},
    }))

    assert profile["string"] == SyntaxHighlightStyle("#F97316", italic=True)


def test_unknown_category_ignored(mocker, scheme_factory):
    log = mocker.patch("syntaxgen.syntax.profile_log")
    scheme = scheme_factory(syntax={
        "not.a.category": {"color": "#000000"},
        "keyword": {"italic": True},
    })

    profile = build_syntax(scheme)

    assert "not.a.category" not in profile
    assert profile["keyword"].italic is True
    log.warning.assert_called_once()


def test_unknown_category_strict(scheme_factory):
    scheme = scheme_factory(syntax={"not.a.category": {"color": "#000000"}})
    default = build_default_syntax(scheme)

    with pytest.raises(UnknownCategoryError):
        merge_syntax(default, scheme, strict=True)


@pytest.mark.parametrize("override", [
    {"keyword": {"weight": "heavy"}},
    {"keyword": {"italic": "yes"}},
    {"keyword": {"blink": True}},
    {"keyword": {"color": 3}},
    {"keyword": {"color": "bogus"}},
    {"keyword": {"weight": ["bold"]}},
    {"keyword": "#FF0000"},
    {"function.method": {"italic": True}},
    ])
def test_invalid_override(scheme_factory, override):
    with pytest.raises(InvalidOverrideError):
        build_syntax(scheme_factory(syntax=override))


def test_color_override_normalized(scheme_factory):
    profile = build_syntax(scheme_factory(syntax={
        "keyword": {"color": "red"},
        "comment": {"color": "#ABC"},
    }))

    assert profile["keyword"].color == "#ff0000"
    assert profile["comment"].color == "#ABC"


def test_deep_merge_appends_sequences():
    base = {"style": {"fonts": ["Mono"], "size": 12}, "tags": ("a",)}
    override = {"style": {"fonts": ["Fallback"]}, "tags": ("b",), "new": [1]}

    merged = deep_merge(base, override)

    assert merged == {
        "style": {"fonts": ["Mono", "Fallback"], "size": 12},
        "tags": ("a", "b"),
        "new": [1],
    }
    assert base["style"]["fonts"] == ["Mono"]
    assert merged["new"] is not override["new"]


def test_deep_merge_replaces_scalars():
    assert deep_merge({"color": "#000000"}, {"color": "#FFFFFF"}) \
        == {"color": "#FFFFFF"}
    assert deep_merge([1], {"a": 1}) == {"a": 1}

# }}}

# vim: foldmethod=marker
