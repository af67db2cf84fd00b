"""
Shared pytest fixtures for Obsidian/Foundry bridge tests.
"""

import pytest
from pathlib import Path


DEFAULT_MARKEXPR = "smoke or (not integration and not slow)"


def pytest_addoption(parser):
    """Add --full flag to run entire test suite"""
    parser.addoption(
        "--full",
        action="store_true",
        default=False,
        help="Run full test suite (skip smoke-only mode)"
    )


def pytest_configure(config):
    """Configure test run based on flags"""
    if config.getoption("--full"):
        # Only clear default marker if no explicit -m flag was provided
        if config.option.markexpr == DEFAULT_MARKEXPR:
            config.option.markexpr = ""  # Run all tests


# Project root
PROJECT_ROOT = Path(__file__).parent.parent


class WrappingConverter:
    """Fake prose converter that wraps HTML output in a single <p>."""

    def make_html(self, text):
        return f"<p>{text}</p>"

    def make_markdown(self, html):
        return html


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def identity_converter():
    """Prose converter that returns its input unchanged."""
    from foundry_converters.prose import IdentityProseConverter
    return IdentityProseConverter()


@pytest.fixture
def wrapping_converter():
    """Prose converter that wraps rendered Markdown in <p>...</p>."""
    return WrappingConverter()


@pytest.fixture
def markdown_converter():
    """The real markdown-it / markdownify prose converter."""
    from foundry_converters.prose import MarkdownProseConverter
    return MarkdownProseConverter()


@pytest.fixture(scope="session")
def sample_vault_note():
    """Return a vault note with frontmatter and several callouts."""
    return """---
tags: [adventure, chapter-1]
---
# Cragmaw Hideout

The goblins keep watch from the thicket.

> [!warning] Ambush
> Two goblins hide in the brush.

> [!tip]- GM Notes
> The wolves are hungry.
>
> > Read aloud: "You smell smoke."
> [!note]
> Adjacent callout."""
