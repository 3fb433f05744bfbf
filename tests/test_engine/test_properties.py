"""Tests for property lookup and completion building."""

from __future__ import annotations

import pytest

from luau_props_lsp._engine import build_completions, resolve_properties
from luau_props_lsp.constants import DEFAULT_PROPS


class TestDefaultProps:
    def test_ships_builtin_classes(self):
        assert {"TextLabel", "Frame", "ImageLabel"} <= set(DEFAULT_PROPS)

    @pytest.mark.parametrize("class_name", sorted(DEFAULT_PROPS))
    def test_entries_are_deduplicated(self, class_name):
        properties = DEFAULT_PROPS[class_name]
        assert properties
        assert len(set(properties)) == len(properties)

    def test_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_PROPS["Frame"] = ("Size",)  # type: ignore[index]


class TestResolveProperties:
    def test_builtin_default(self):
        assert resolve_properties("Frame") == list(DEFAULT_PROPS["Frame"])

    def test_unknown_class(self):
        assert resolve_properties("ScrollingFrame") is None
        assert resolve_properties("ScrollingFrame", {"Frame": ["Size"]}) is None

    def test_user_entry_overrides_default(self):
        user_props = {"Frame": ["Position", "Size"]}
        assert resolve_properties("Frame", user_props) == ["Position", "Size"]

    def test_user_map_without_class_falls_back(self):
        user_props = {"TextButton": ["Text"]}
        assert resolve_properties("Frame", user_props) == list(DEFAULT_PROPS["Frame"])

    def test_empty_user_entry_falls_back(self):
        assert resolve_properties("Frame", {"Frame": []}) == list(DEFAULT_PROPS["Frame"])

    def test_user_only_class(self):
        assert resolve_properties("TextButton", {"TextButton": ["Text", "AutoButtonColor"]}) == [
            "Text",
            "AutoButtonColor",
        ]

    def test_custom_default_map(self):
        assert resolve_properties("Frame", None, {"Frame": ("Size",)}) == ["Size"]


class TestBuildCompletions:
    def test_one_completion_per_property_in_order(self):
        completions = build_completions("Frame", ["Size", "Position", "AnchorPoint"])
        assert [completion.label for completion in completions] == [
            "Size",
            "Position",
            "AnchorPoint",
        ]

    def test_insert_text_places_cursor_after_assignment(self):
        (completion,) = build_completions("Frame", ["Size"])
        assert completion.insert_text == "Size = $0"

    def test_detail_names_class(self):
        (completion,) = build_completions("TextLabel", ["Text"])
        assert completion.detail == "TextLabel property (React Luau helper)"

    def test_snippet_characters_are_escaped(self):
        (completion,) = build_completions("Frame", ["Odd$Name}"])
        assert completion.insert_text == "Odd\\$Name\\} = $0"
        assert completion.label == "Odd$Name}"

    def test_empty_sequence(self):
        assert build_completions("Frame", []) == []
