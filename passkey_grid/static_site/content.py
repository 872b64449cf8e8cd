"""
Loading of category markdown sources from a content directory.

A content directory contains one markdown file per category, named after the
category's identifier, for example::

    +- content/
    |  +- websites.md
    |  +- platforms.md
    |  +- developer-tools.md
    |  +- security-keys.md

Filenames are matched case insensitively and underscores may be used in place
of hyphens (e.g. ``Developer_Tools.md``).

.. autofunction:: load_category_source

.. autofunction:: load_category_sources

.. autofunction:: check_table_header
"""

from typing import List, Optional, Tuple

from dataclasses import dataclass

from pathlib import Path

import logging

from marko import Markdown  # type: ignore
from marko.ext.gfm import elements  # type: ignore

from passkey_grid.categories import Category, ContentCategory

from passkey_grid.markdown import plain_text

from passkey_grid.static_site.exceptions import (
    NotADirectoryError,
    MissingCategorySourceError,
    MultipleCategorySourcesError,
)


logger = logging.getLogger(__name__)


def normalise_stem(stem: str) -> str:
    return stem.lower().replace("_", "-")


def find_category_source(directory: Path, category: Category) -> Path:
    """
    Find the markdown file for a category within a content directory.
    """
    if not directory.is_dir():
        raise NotADirectoryError(str(directory))

    candidates = sorted(
        path
        for path in directory.iterdir()
        if path.is_file()
        and path.suffix.lower() == ".md"
        and normalise_stem(path.stem) == category.identifier
    )

    if len(candidates) == 0:
        raise MissingCategorySourceError(
            f"No {category.identifier}.md found in {directory}"
        )
    elif len(candidates) > 1:
        raise MultipleCategorySourcesError(
            f"Multiple sources for {category.identifier} found: "
            + ", ".join(str(path) for path in candidates)
        )

    return candidates[0]


def load_category_source(directory: Path, category: Category) -> ContentCategory:
    """Load the markdown source for a single category."""
    path = find_category_source(directory, category)
    logger.info("Loading %s from %s", category.title, path)
    with path.open(encoding="utf-8") as f:
        return ContentCategory(category, f.read())


def load_category_sources(directory: Path) -> List[ContentCategory]:
    """
    Load the markdown sources for every category from a content directory, in
    :py:class:`~passkey_grid.categories.Category` order.
    """
    return [load_category_source(directory, category) for category in Category]


@dataclass(frozen=True)
class SchemaMismatch:
    """
    Describes a category table whose header row does not match the expected
    columns.
    """

    category: Category
    expected: Tuple[str, ...]
    found: Optional[Tuple[str, ...]]
    """The header labels found, or None if no table was found at all."""

    @property
    def description(self) -> str:
        expected = " | ".join(self.expected)
        if self.found is None:
            return f"{self.category.title}: no table found (expected {expected})"
        else:
            found = " | ".join(self.found)
            return f"{self.category.title}: table header is {found} (expected {expected})"


def read_table_header(markdown_source: str) -> Optional[Tuple[str, ...]]:
    """
    Get the header labels of the first table in a markdown document, or None
    if there is no table.

    The document is parsed exactly as it is for rendering (i.e. with the
    ``gfm`` extension) so tables inside code blocks are not tables, and
    escaped pipes (``\\|``) are part of a label.
    """
    document = Markdown(extensions=["gfm"]).parse(markdown_source)
    for element in document.children:
        if isinstance(element, elements.Table):
            header = element.children[0]
            return tuple(plain_text(cell) for cell in header.children)
    return None


def check_table_header(content: ContentCategory) -> Optional[SchemaMismatch]:
    """
    Check that a category's table has the header row expected for that
    category. Returns a :py:class:`SchemaMismatch` if not, or None if the
    header matches.

    Rendering does not depend on this check passing: a mismatched table
    renders with missing or misaligned cells.
    """
    found = read_table_header(content.source)
    expected = content.category.columns
    if found == expected:
        return None
    else:
        return SchemaMismatch(content.category, expected, found)
