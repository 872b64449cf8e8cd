"""
This module implements the HTML generation used when rendering directory
tables. The functions here operate on already-rendered strings and know
nothing about markdown; :py:mod:`passkey_grid.markdown` feeds them from the
parsed markdown tree.

.. autofunction:: t

.. autofunction:: strip_public_prefix

.. autofunction:: render_icon

.. autofunction:: render_responsive_link

.. autofunction:: render_cell

.. autofunction:: render_grid

Generated markup
================

A rendered table looks like::

    <div class="grid ..." role="table" data-columns="3">
      <div class="..." role="columnheader"></div>
      <div class="..." role="columnheader">Name</div>
      <div class="..." role="columnheader"></div>
      <div class="..." role="cell"><img src="/logos/acme.svg" .../></div>
      <div class="..." role="cell">Acme</div>
      <div class="..." role="cell">Passkeys</div>
    </div>

The ``data-columns`` attribute gives the number of columns declared by the
grid so that stylesheets may target a particular layout.
"""

from typing import Optional

from textwrap import indent

from xml.sax.saxutils import quoteattr

from passkey_grid.renderer.layout import GridLayout, cell_classes, grid_classes


PUBLIC_PATH_PREFIX = "/public"
"""
The directory static assets are stored under in the source tree. Assets are
served from the site root so this is removed from image paths.
"""

ICON_SIZE = 32
"""Width and height (in pixels) of icon images."""

NARROW_LINK_LABEL = "Website"
"""The link text shown on narrow viewports in place of the full link text."""


def t(tag: str, body: Optional[str] = None, **attrs: str) -> str:
    """
    A simple utility function for generating HTML tags.

    Examples::

        >>> t("br")
        '<br />'
        >>> t("img", src="file.png")
        '<img src="file.png"/>'
        >>> t("a", "Click here", href="elsewhere.html")
        '<a href="elsewhere.html">Click here</a>'
        >>> t("span", "Hiya", class_="fancy")
        '<span class="fancy">Hiya</span>'
        >>> t("div", "", data__columns="3")
        '<div data-columns="3"></div>'

    Note that trailing underscores (``_``) are trimmed from attribute names and
    double underscores (``__``) are replaced with hyphens.
    """

    attrs_str = " ".join(
        name.rstrip("_").replace("__", "-") + "=" + quoteattr(value)
        for name, value in attrs.items()
    )

    if body is None:
        return f"<{tag} {attrs_str}/>"
    else:
        if "\n" in body:
            body = "\n" + indent(body, "  ").rstrip() + "\n"
        return f"<{tag}{(' ' + attrs_str).rstrip()}>{body}</{tag}>"


def strip_public_prefix(src: str) -> str:
    """
    Remove every occurrence of :py:data:`PUBLIC_PATH_PREFIX` from an image
    path.

    Example::

        >>> strip_public_prefix("/public/logos/acme.svg")
        '/logos/acme.svg'
    """
    return src.replace(PUBLIC_PATH_PREFIX, "")


def render_icon(src: str, alt: str = "", title: str = "") -> str:
    """
    Render a fixed-size icon image. The alt and title attributes are always
    emitted, even when empty.

    The src is used as given: callers strip :py:data:`PUBLIC_PATH_PREFIX`
    (see :py:func:`strip_public_prefix`) before escaping it.
    """
    return t(
        "img",
        src=src,
        alt=alt,
        title=title,
        width=str(ICON_SIZE),
        height=str(ICON_SIZE),
        loading="lazy",
        class_="h-8 w-8 object-contain",
    )


def render_responsive_link(href: str, body: str, title: str = "") -> str:
    """
    Render an external link which opens in a new tab.

    Both the full link body and the short :py:data:`NARROW_LINK_LABEL` are
    included in the output; which one is visible is decided by the
    stylesheet according to the viewport width.

    Parameters
    ==========
    href : str
        The link destination.
    body : str
        The rendered HTML of the link's contents.
    title : str
        The link title. Omitted when empty.
    """
    attrs = {"href": href}
    if title:
        attrs["title"] = title
    attrs["target"] = "_blank"
    attrs["rel"] = "noopener noreferrer"
    attrs["class_"] = "inline-flex items-center underline"

    return t(
        "a",
        (
            t("span", body, class_="hidden md:inline")
            + t("span", NARROW_LINK_LABEL, class_="md:hidden")
        ),
        **attrs,
    )


def render_cell(
    layout: GridLayout,
    body: str,
    header: bool = False,
    align: Optional[str] = None,
) -> str:
    """
    Render a single grid cell.

    Header cells whose body is one of the layout's suppressed labels are
    rendered empty (but still rendered, so that the grid's columns stay
    aligned).
    """
    if header and body in layout.suppressed_header_labels:
        body = ""

    return t(
        "div",
        body,
        class_=cell_classes(layout, header, align),
        role="columnheader" if header else "cell",
    )


def render_grid(layout: GridLayout, cells: str) -> str:
    """
    Wrap a series of rendered cells (header row first) in a grid container.
    """
    return t(
        "div",
        cells,
        class_=grid_classes(layout),
        role="table",
        data__columns=str(layout.column_count),
    )
