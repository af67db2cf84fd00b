"""Tests for foundry_converters.journals.frontmatter."""

import pytest
import yaml

from foundry_converters.journals.frontmatter import (
    extract_frontmatter,
    merge_frontmatter,
    prepend_frontmatter,
)


@pytest.mark.unit
class TestExtractFrontmatter:
    """Tests for extract_frontmatter function."""

    def test_extracts_leading_block(self):
        frontmatter, content = extract_frontmatter("---\ntitle: Test\ntags: [a, b]\n---\n# Body")

        assert frontmatter == "title: Test\ntags: [a, b]"
        assert content == "# Body"

    def test_handles_crlf(self):
        frontmatter, content = extract_frontmatter("---\r\ntitle: Test\r\n---\r\nBody")

        assert frontmatter == "title: Test"
        assert content == "Body"

    def test_no_frontmatter(self):
        assert extract_frontmatter("# Just a note") == (None, "# Just a note")

    def test_block_not_at_start_is_ignored(self):
        text = "Intro\n---\ntitle: x\n---\n"

        assert extract_frontmatter(text) == (None, text)

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input(self, value):
        assert extract_frontmatter(value) == (None, "")


@pytest.mark.unit
class TestPrependFrontmatter:
    """Tests for prepend_frontmatter function."""

    def test_prepends_with_delimiters(self):
        assert prepend_frontmatter("title: Test", "Body") == "---\ntitle: Test\n---\nBody"

    def test_none_is_noop(self):
        assert prepend_frontmatter(None, "Body") == "Body"

    def test_round_trip_with_extract(self):
        original = "---\ntitle: Test\n---\nBody text"

        frontmatter, content = extract_frontmatter(original)

        assert prepend_frontmatter(frontmatter, content) == original


@pytest.mark.unit
class TestMergeFrontmatter:
    """Tests for merge_frontmatter function."""

    def test_empty_list(self):
        assert merge_frontmatter([]) == (None, [])

    def test_all_none(self):
        assert merge_frontmatter([None, None]) == (None, [])

    def test_single_block_returned_verbatim(self):
        assert merge_frontmatter([None, "title:   Spaced"]) == ("title:   Spaced", [])

    def test_merges_distinct_keys(self):
        merged, warnings = merge_frontmatter(["title: First", "author: Someone"])

        assert yaml.safe_load(merged) == {"title": "First", "author": "Someone"}
        assert warnings == []

    def test_first_value_wins_on_conflict(self):
        merged, warnings = merge_frontmatter(["title: First\ntags: [a]", "title: Second\ntags: [a]"])

        assert yaml.safe_load(merged) == {"title": "First", "tags": ["a"]}
        assert warnings == ['Conflict on key "title": using value from first occurrence']

    def test_keeps_key_order(self):
        merged, _ = merge_frontmatter(["b: 1\na: 2", "c: 3"])

        assert list(yaml.safe_load(merged)) == ["b", "a", "c"]

    def test_unparseable_block_falls_back_to_first(self):
        merged, warnings = merge_frontmatter(["title: First", "just a plain string"])

        assert merged == "title: First"
        assert warnings == ["Could not parse frontmatter at index 1, falling back to first frontmatter"]

    def test_invalid_yaml_falls_back_to_first(self):
        merged, warnings = merge_frontmatter(["title: First", "title: [unclosed"])

        assert merged == "title: First"
        assert len(warnings) == 1
