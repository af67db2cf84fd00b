"""Minimal parsed-document interface over BeautifulSoup.

The HTML callout extractor only selects elements by class, reads attributes,
reads inner markup and swaps elements for placeholder blocks. Keeping those
operations here keeps BeautifulSoup's API out of the extraction logic.
"""

from typing import List, Optional

from bs4 import BeautifulSoup, Tag


class ParsedDocument:
    """An HTML fragment parsed for querying and in-place replacement."""

    def __init__(self, html_content: str):
        self._soup = BeautifulSoup(html_content, "html.parser")

    def select_by_class(self, class_name: str) -> List[Tag]:
        """All elements carrying ``class_name``, in document order."""
        return self._soup.find_all(class_=class_name)

    @staticmethod
    def find_child_by_class(element: Tag, class_name: str) -> Optional[Tag]:
        """First descendant of ``element`` carrying ``class_name``, or None."""
        return element.find(class_=class_name)

    @staticmethod
    def tag_name(element: Tag) -> str:
        return element.name.lower()

    @staticmethod
    def get_attribute(element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    @staticmethod
    def has_attribute(element: Tag, name: str) -> bool:
        return element.has_attr(name)

    @staticmethod
    def inner_html(element: Tag) -> str:
        return element.decode_contents()

    def replace_with_block(self, element: Tag, text: str, tag: str = "p") -> None:
        """Replace ``element`` with a new block element containing ``text``."""
        block = self._soup.new_tag(tag)
        block.string = text
        element.replace_with(block)

    def serialize(self) -> str:
        return self._soup.decode()
