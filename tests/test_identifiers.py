"""Tests for patternlab.patterns.identifiers: the pattern naming grammar."""

import pytest

from patternlab.patterns.identifiers import (
    parse_identifier,
    split_setting,
    strip_ordinals,
    strip_pattern_parameters,
    to_display_case,
)


class TestParsePath:
    """File paths relative to the pattern directory."""

    def test_three_segments(self):
        pid = parse_identifier("00-atoms/01-global/00-colors@inprogress")

        assert pid.type == "00-atoms"
        assert pid.sub_type == "01-global"
        assert pid.name == "00-colors"
        assert pid.state == "inprogress"
        assert pid.hidden is False
        assert pid.pseudo == ""

    def test_derived_paths(self):
        pid = parse_identifier("00-atoms/01-global/00-colors@inprogress")

        assert pid.partial == "atoms-colors"
        assert pid.path_dash == "00-atoms-01-global-00-colors"
        assert pid.path_slash == "00-atoms/01-global/00-colors"
        assert pid.html_url == "00-atoms-01-global-00-colors/00-atoms-01-global-00-colors.html"
        assert pid.view_url == f"patterns/{pid.html_url}"

    def test_two_segments_have_no_subtype(self):
        pid = parse_identifier("02-pages/00-homepage")

        assert pid.type_name == "pages"
        assert pid.sub_type == ""
        assert pid.pattern_name == "homepage"
        assert pid.path_dash == "02-pages-00-homepage"

    def test_deep_paths_fold_into_subtype(self):
        pid = parse_identifier("00-atoms/01-forms/02-inputs/00-text")

        assert pid.sub_type == "01-forms-02-inputs"
        assert pid.name == "00-text"
        assert pid.partial == "atoms-text"

    def test_hidden_marker_on_any_segment(self):
        assert parse_identifier("_00-atoms/00-button").hidden is True
        assert parse_identifier("00-atoms/_00-button").hidden is True
        assert parse_identifier("00-atoms/00-button").hidden is False

    def test_hidden_marker_is_stripped_from_partial(self):
        assert parse_identifier("_meta/_00-head").partial == "meta-head"

    def test_windows_separators(self):
        assert parse_identifier("00-atoms\\00-button").partial == "atoms-button"


class TestParsePartial:
    """Partial strings as used in include references."""

    def test_plain_partial(self):
        pid = parse_identifier("atoms-button")

        assert pid.type == "atoms"
        assert pid.name == "button"
        assert pid.partial == "atoms-button"

    def test_partial_keeps_multi_word_name(self):
        assert parse_identifier("molecules-inline-form").pattern_name == "inline-form"

    def test_ordinals_in_partial_form(self):
        pid = parse_identifier("00-atoms-00-button")

        assert pid.type == "00-atoms"
        assert pid.partial == "atoms-button"

    def test_modifier_and_parameters_are_stripped(self):
        pid = parse_identifier('atoms-button~emphasis:primary|large(label: "Go")')

        assert pid.partial == "atoms-button~emphasis"
        assert pid.pseudo == "emphasis"

    @pytest.mark.parametrize("value", ["", None, "/", "~", "@"])
    def test_malformed_input_never_raises(self, value):
        pid = parse_identifier(value)

        assert pid.type == ""
        assert pid.partial in ("", "~")


class TestPseudo:
    def test_with_pseudo(self):
        base = parse_identifier("00-atoms/01-forms/00-button")
        variant = base.with_pseudo("emphasis")

        assert variant.partial == "atoms-button~emphasis"
        assert variant.path_dash == "00-atoms-01-forms-00-button~emphasis"
        assert variant.display_name == "Button Emphasis"
        assert base.pseudo == ""


class TestHelpers:
    def test_strip_ordinals(self):
        assert strip_ordinals("00-atoms") == "atoms"
        assert strip_ordinals("_01-draft") == "draft"
        assert strip_ordinals("atoms") == "atoms"
        assert strip_ordinals("2020-release-notes") == "release-notes"

    def test_display_case(self):
        assert to_display_case("inline-form") == "Inline Form"
        assert to_display_case("colors") == "Colors"
        assert to_display_case("") == ""

    def test_strip_pattern_parameters(self):
        assert strip_pattern_parameters('atoms-button(label: "x")') == "atoms-button"
        assert strip_pattern_parameters("atoms-button:primary") == "atoms-button"
        assert strip_pattern_parameters("atoms-button") == "atoms-button"

    def test_split_setting(self):
        assert split_setting("a, b,,c ") == ["a", "b", "c"]
        assert split_setting("") == []
        assert split_setting(None) == []
