"""Tests for foundry_converters.references.html_extract."""

import pytest

from foundry_converters.references.html_extract import (
    extract_asset_references,
    extract_link_references,
    is_journal_uuid,
    strip_path_prefix,
)


@pytest.mark.unit
class TestExtractLinkReferences:
    """Tests for extract_link_references function."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input(self, value):
        assert extract_link_references(value) == []

    def test_labelled_uuid(self):
        links = extract_link_references("<p>Meet @UUID[Actor.abc123]{Bob the NPC}.</p>")

        assert len(links) == 1
        assert links[0].source == "@UUID[Actor.abc123]{Bob the NPC}"
        assert links[0].foundry == "Actor.abc123"
        assert links[0].obsidian == ""
        assert links[0].label == "Bob the NPC"
        assert links[0].metadata == {"isJournalReference": False}

    def test_unlabelled_uuid_uses_name_lookup(self):
        names = {"Actor.abc123": "Bob"}

        links = extract_link_references("@UUID[Actor.abc123]", name_lookup=names.get)

        assert links[0].label == "Bob"

    @pytest.mark.parametrize("html", ["@UUID[Actor.abc123]", "@UUID[Actor.abc123]{}"])
    def test_unresolved_label_falls_back_to_uuid(self, html):
        links = extract_link_references(html, name_lookup=lambda uuid: None)

        assert links[0].label == "Actor.abc123"

    def test_lookup_not_called_for_labelled_link(self):
        def fail(uuid):
            raise AssertionError("lookup should not run")

        links = extract_link_references("@UUID[Item.x]{Sword}", name_lookup=fail)

        assert links[0].label == "Sword"

    def test_journal_page_is_journal_reference(self):
        links = extract_link_references("@UUID[JournalEntry.abc.JournalEntryPage.def]{Page}")

        assert links[0].metadata["isJournalReference"] is True


@pytest.mark.unit
class TestIsJournalUuid:
    """Tests for is_journal_uuid function."""

    @pytest.mark.parametrize("uuid,expected", [
        ("JournalEntry.abc", True),
        ("Compendium.world.lore.JournalEntry.xyz", True),
        ("Actor.abc", False),
        ("Compendium.dnd5e.monsters.Actor.xyz", False),
    ])
    def test_classification(self, uuid, expected):
        assert is_journal_uuid(uuid) is expected


@pytest.mark.unit
class TestExtractAssetReferences:
    """Tests for extract_asset_references function."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input(self, value):
        assert extract_asset_references(value) == []

    def test_image_tag(self):
        html = '<img src="worlds/w/assets/cave.png" alt="Cave map">'

        assets = extract_asset_references(html, asset_path_prefix="worlds/w/assets")

        assert len(assets) == 1
        assert assets[0].source == html
        assert assets[0].foundry == "worlds/w/assets/cave.png"
        assert assets[0].obsidian == "cave.png"
        assert assets[0].label == "Cave map"
        assert assets[0].is_image is True

    def test_anchor_tag(self):
        html = '<a href="files/letter.pdf">Letter</a>'

        assets = extract_asset_references(html)

        assert assets[0].source == html
        assert assets[0].obsidian == "files/letter.pdf"
        assert assets[0].label == "Letter"
        assert assets[0].is_image is False

    def test_image_without_src_is_skipped(self):
        assert extract_asset_references('<img alt="nothing">') == []

    @pytest.mark.parametrize("src", ["https://example.com/a.png", "http://example.com/a.png", "data:image/png;base64,AAAA"])
    def test_skips_remote_and_inline_images(self, src):
        assert extract_asset_references(f'<img src="{src}">') == []

    def test_deduplicates_identical_paths(self):
        html = '<img src="a.png"><img src="a.png"><a href="a.png">A</a>'

        assets = extract_asset_references(html)

        assert len(assets) == 1
        assert assets[0].is_image is True

    def test_windows_prefix(self):
        assets = extract_asset_references('<img src="worlds/w/img/a.png">', asset_path_prefix="worlds\\w\\img")

        assert assets[0].obsidian == "a.png"


@pytest.mark.unit
class TestStripPathPrefix:
    """Tests for strip_path_prefix function."""

    def test_no_prefix(self):
        assert strip_path_prefix("a\\b.png", "") == "a\\b.png"

    def test_strips_prefix_and_slash(self):
        assert strip_path_prefix("worlds/w/a.png", "worlds/w") == "a.png"

    def test_normalizes_backslashes(self):
        assert strip_path_prefix("worlds\\w\\a.png", "worlds/w/") == "a.png"

    def test_unmatched_path_unchanged(self):
        assert strip_path_prefix("other\\a.png", "worlds/w") == "other\\a.png"
