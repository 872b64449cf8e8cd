"""
Generates a stand alone HTML page showing every category of the directory,
one tab per category.
"""

from typing import Mapping, Optional, List, NamedTuple

from pathlib import Path

import logging

from passkey_grid.categories import Category

from passkey_grid.markdown import render_categories

from passkey_grid.static_site.content import load_category_sources, check_table_header

from passkey_grid.static_site.templates import directory_template


logger = logging.getLogger(__name__)


DEFAULT_TITLE = "Passkey Directory"


class Panel(NamedTuple):
    identifier: str
    title: str
    fragment: str


def render_page(
    fragments: Mapping[Category, str],
    title: str = DEFAULT_TITLE,
    stylesheet: Optional[str] = None,
) -> str:
    """
    Compose rendered category fragments into a complete HTML page.

    Parameters
    ==========
    fragments : {Category: str, ...}
        The rendered HTML for each category. Categories are shown in
        :py:class:`~passkey_grid.categories.Category` order; categories
        missing from this mapping are omitted.
    title : str
        The page title.
    stylesheet : str or None
        If given, the URL of a stylesheet to link to.
    """
    panels: List[Panel] = [
        Panel(category.identifier, category.title, fragments[category])
        for category in Category
        if category in fragments
    ]
    return directory_template.render(
        title=title,
        stylesheet=stylesheet,
        panels=panels,
    )


def generate_page(
    content_directory: Path,
    title: str = DEFAULT_TITLE,
    stylesheet: Optional[str] = None,
) -> str:
    """
    Load every category's markdown from a content directory and render it
    into a complete HTML page.

    Tables whose header row does not match the expected columns are rendered
    anyway, with a warning logged.
    """
    contents = load_category_sources(content_directory)

    for content in contents:
        mismatch = check_table_header(content)
        if mismatch is not None:
            logger.warning("%s", mismatch.description)

    return render_page(render_categories(contents), title=title, stylesheet=stylesheet)
