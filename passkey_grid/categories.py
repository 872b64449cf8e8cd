"""
The directory is split into a fixed set of content categories, each described
by a single markdown table.

.. autoclass:: Category
    :members:

.. autoclass:: ContentCategory
    :members:
"""

from typing import Tuple, NamedTuple

from enum import Enum


class Category(Enum):
    """The content categories of the directory, in display order."""

    websites = "websites"
    platforms = "platforms"
    developer_tools = "developer-tools"
    security_keys = "security-keys"

    @property
    def identifier(self) -> str:
        """
        A short, URL-safe name for this category (e.g. "developer-tools").
        Also used as the stem of the category's markdown filename.
        """
        return self.value

    @property
    def title(self) -> str:
        """Human readable name, e.g. for use in a tab label."""
        return _TITLES[self]

    @property
    def columns(self) -> Tuple[str, ...]:
        """The header labels the category's table is expected to have."""
        if self is Category.websites:
            return ("Logo", "Name", "Features", "Link")
        else:
            return ("Logo", "Name", "Features")

    @property
    def configuration_name(self) -> str:
        """
        The name of the renderer configuration (see
        :py:data:`passkey_grid.markdown.CONFIGURATIONS`) used for this
        category.
        """
        if self is Category.websites:
            return "websites"
        else:
            return "default"


_TITLES = {
    Category.websites: "Websites",
    Category.platforms: "Platforms",
    Category.developer_tools: "Developer Tools",
    Category.security_keys: "Security Keys",
}


class ContentCategory(NamedTuple):
    """A category along with the markdown source describing it."""

    category: Category

    source: str
    """The raw markdown source, expected to contain a single table."""

    @property
    def configuration_name(self) -> str:
        return self.category.configuration_name
