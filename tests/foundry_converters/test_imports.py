"""Tests for foundry_converters module imports."""

import pytest


@pytest.mark.unit
class TestModuleImports:
    """Tests that all exports are accessible."""

    def test_imports_from_root(self):
        """Should import key items from foundry_converters."""
        from foundry_converters import (
            extract_callouts,
            extract_callouts_from_html,
            replace_callout_placeholders,
            restore_callout_placeholders,
            convert_markdown_to_journal_html,
            convert_journal_html_to_markdown,
            MarkdownProseConverter,
        )

        assert callable(extract_callouts)
        assert callable(extract_callouts_from_html)
        assert callable(replace_callout_placeholders)
        assert callable(restore_callout_placeholders)
        assert callable(convert_markdown_to_journal_html)
        assert callable(convert_journal_html_to_markdown)
        assert MarkdownProseConverter is not None

    def test_imports_from_callouts(self):
        """Should import from foundry_converters.callouts."""
        from foundry_converters.callouts import (
            parse_callout_header,
            build_callout_markdown,
            render_callout,
            make_placeholder,
        )

        assert callable(parse_callout_header)
        assert callable(build_callout_markdown)
        assert callable(render_callout)
        assert make_placeholder(0) == "{{CALLOUT:0}}"

    def test_imports_from_journals(self):
        """Should import from foundry_converters.journals."""
        from foundry_converters.journals import (
            extract_frontmatter,
            merge_frontmatter,
            convert_newlines_to_br,
        )

        assert callable(extract_frontmatter)
        assert callable(merge_frontmatter)
        assert callable(convert_newlines_to_br)

    def test_imports_from_references(self):
        """Should import from foundry_converters.references."""
        from foundry_converters import replace_with_placeholders
        from foundry_converters.references import ReferenceReplacement, html_extract, markdown_extract

        assert callable(replace_with_placeholders)
        assert callable(html_extract.extract_link_references)
        assert callable(markdown_extract.extract_asset_references)
        assert ReferenceReplacement._fields == ("text", "links", "assets")
