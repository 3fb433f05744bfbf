"""Tests for call site detection."""

from __future__ import annotations

from luau_props_lsp._engine import find_enclosing_class_name, iter_call_sites


class TestIterCallSites:
    def test_double_quoted_class_name(self):
        (call_site,) = iter_call_sites('e("TextLabel", {')
        assert call_site.class_name == "TextLabel"

    def test_single_quoted_class_name(self):
        (call_site,) = iter_call_sites("e('Frame', {")
        assert call_site.class_name == "Frame"

    def test_bare_identifier_class_name(self):
        (call_site,) = iter_call_sites("e(ImageLabel, {")
        assert call_site.class_name == "ImageLabel"

    def test_react_create_element(self):
        (call_site,) = iter_call_sites('React.createElement("Frame", {')
        assert call_site.class_name == "Frame"
        assert call_site.start == 0

    def test_whitespace_between_tokens(self):
        (call_site,) = iter_call_sites('e (  "Frame"  ,\n\t{')
        assert call_site.class_name == "Frame"

    def test_brace_offset_points_at_opening_brace(self):
        text = 'local frame = e("Frame", { Size = 1 })'
        (call_site,) = iter_call_sites(text)
        assert text[call_site.brace] == "{"
        assert call_site.start == text.index("e(")

    def test_mismatched_quotes_are_not_matched(self):
        assert list(iter_call_sites("e(\"Frame', {")) == []

    def test_identifier_ending_in_e_is_not_a_call_site(self):
        assert list(iter_call_sites('Create("Frame", {')) == []

    def test_call_without_props_table(self):
        assert list(iter_call_sites('e("Frame")')) == []
        assert list(iter_call_sites('e("Frame", props)')) == []

    def test_class_name_character_set(self):
        assert list(iter_call_sites('e("Text-Label", {')) == []
        (call_site,) = iter_call_sites('e("Text_Label2", {')
        assert call_site.class_name == "Text_Label2"

    def test_all_matches_in_order(self):
        code_luau = """\
e("Frame", {
    Size = 1,
}, {
    Label = e("TextLabel", { Text = "hi" }),
    Icon = React.createElement(ImageLabel, {
"""
        names = [call_site.class_name for call_site in iter_call_sites(code_luau)]
        assert names == ["Frame", "TextLabel", "ImageLabel"]


class TestFindEnclosingClassName:
    def test_no_call_site(self):
        assert find_enclosing_class_name("local x = {}") is None

    def test_empty_text(self):
        assert find_enclosing_class_name("") is None

    def test_last_call_site_wins(self):
        code_luau = """\
e("TextLabel", { Text = "done" })
e("Frame", {
"""
        assert find_enclosing_class_name(code_luau) == "Frame"

    def test_scans_across_lines(self):
        code_luau = """\
e("ImageLabel", {
    Image = "rbxassetid://1",

"""
        assert find_enclosing_class_name(code_luau) == "ImageLabel"
