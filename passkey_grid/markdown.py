"""
Directory tables are written as GitHub flavoured markdown tables, for
example::

    | Logo                       | Name | Features | Link                 |
    | -------------------------- | ---- | -------- | -------------------- |
    | ![Acme](/public/acme.svg)  | Acme | Passkeys | https://acme.example |

Such documents are rendered into HTML using:

.. autofunction:: render_markdown

.. autofunction:: render_category

.. autofunction:: render_categories

The markdown is rendered using one of a small number of fixed renderer
configurations (see :py:data:`CONFIGURATIONS`), chosen according to the
category being rendered:

.. autoclass:: RendererConfiguration
    :members:

.. autodata:: CONFIGURATIONS

.. autofunction:: get_configuration


Internals
=========

Internally the :py:mod:`marko` markdown parser is used along with its
``gfm`` extension which provides table support. Each configuration is a
:py:class:`marko.helpers.MarkoExtension` whose renderer mixins replace the
``gfm`` extension's rendering of tables, and the default rendering of images
and (optionally) links.

.. note::

    Marko gives precedence to the renderer mixins of extensions registered
    later, so the configuration's extension must always be registered after
    ``gfm``. :py:meth:`RendererConfiguration.markdown` takes care of this.
"""

from typing import Any, Dict, Iterable, Mapping, cast

from types import MappingProxyType

import html

from dataclasses import dataclass

from marko import Markdown, inline  # type: ignore
from marko.helpers import MarkoExtension  # type: ignore
from marko.ext.gfm import elements  # type: ignore

from passkey_grid.categories import Category, ContentCategory
from passkey_grid.renderer.layout import GridLayout
from passkey_grid.renderer.html import (
    strip_public_prefix,
    render_icon,
    render_responsive_link,
    render_cell,
    render_grid,
)


def plain_text(element: Any) -> str:
    """
    Get the plain text content of a marko element, discarding any markup
    (e.g. for use as image alt text).
    """
    children = getattr(element, "children", "")
    if isinstance(children, str):
        return children
    else:
        return "".join(plain_text(child) for child in children)


def escape_url(renderer: Any, url: str) -> str:
    """
    Escape a URL as marko's HTML renderer does (e.g. percent-encoding spaces
    and non-ASCII characters) but without the HTML escaping, which
    :py:func:`~passkey_grid.renderer.html.t` applies to attribute values
    itself.
    """
    return html.unescape(renderer.escape_url(url))


class IconImageRendererMixin:
    """
    Mixin for :py:class:`marko.renderer.Renderer` rendering all images as
    fixed-size icons.
    """

    def render_image(self, element: inline.Image) -> str:
        return render_icon(
            escape_url(self, strip_public_prefix(element.dest)),
            alt=plain_text(element),
            title=element.title or "",
        )


class ResponsiveLinkRendererMixin:
    """
    Mixin for :py:class:`marko.renderer.Renderer` rendering all links as
    external links with a shortened label on narrow viewports.
    """

    def render_link(self, element: inline.Link) -> str:
        return render_responsive_link(
            escape_url(self, element.dest),
            self.render_children(element),  # type: ignore
            title=element.title or "",
        )

    def render_auto_link(self, element: inline.AutoLink) -> str:
        return render_responsive_link(
            escape_url(self, element.dest),
            self.render_children(element),  # type: ignore
        )

    def render_url(self, element: inline.AutoLink) -> str:
        """Bare URLs, as recognised by the ``gfm`` extension."""
        return self.render_auto_link(element)


class GridTableRendererMixin:
    """
    Mixin for :py:class:`marko.renderer.Renderer` rendering ``gfm`` tables
    as CSS grids (see :py:mod:`passkey_grid.renderer`).

    Subclasses must set :py:attr:`layout`.
    """

    layout: GridLayout

    def render_table(self, element: elements.Table) -> str:
        # NB: The header row is the first child
        cells = "".join(self.render(row) for row in element.children)  # type: ignore
        return render_grid(self.layout, cells) + "\n"

    def render_table_row(self, element: elements.TableRow) -> str:
        # Cells are direct children of the grid: rows get no wrapper.
        return cast(str, self.render_children(element))  # type: ignore

    def render_table_cell(self, element: elements.TableCell) -> str:
        return (
            render_cell(
                self.layout,
                self.render_children(element),  # type: ignore
                header=element.header,
                align=element.align,
            )
            + "\n"
        )


class DefaultGridRendererMixin(GridTableRendererMixin):
    layout = GridLayout.default


class WebsitesGridRendererMixin(GridTableRendererMixin):
    layout = GridLayout.websites


@dataclass(frozen=True)
class RendererConfiguration:
    """
    A named bundle of markdown renderer overrides.

    Each configuration has exactly one :py:class:`GridLayout` which determines
    both the number of columns declared by the grid and the column-dependent
    styling of each cell.
    """

    name: str

    layout: GridLayout

    extension: MarkoExtension
    """The marko extension containing this configuration's renderer mixins."""

    def markdown(self) -> Markdown:
        """Create a new :py:class:`marko.Markdown` using this configuration."""
        return Markdown(extensions=["gfm", self.extension])


DEFAULT_CONFIGURATION = RendererConfiguration(
    name="default",
    layout=GridLayout.default,
    extension=MarkoExtension(
        renderer_mixins=[DefaultGridRendererMixin, IconImageRendererMixin],
    ),
)

WEBSITES_CONFIGURATION = RendererConfiguration(
    name="websites",
    layout=GridLayout.websites,
    extension=MarkoExtension(
        renderer_mixins=[
            WebsitesGridRendererMixin,
            IconImageRendererMixin,
            ResponsiveLinkRendererMixin,
        ],
    ),
)

CONFIGURATIONS: Mapping[str, RendererConfiguration] = MappingProxyType(
    {
        configuration.name: configuration
        for configuration in [DEFAULT_CONFIGURATION, WEBSITES_CONFIGURATION]
    }
)
"""All renderer configurations, by name. Read only."""


class UnknownConfigurationError(KeyError):
    """Thrown when a non-existent renderer configuration is requested."""


def get_configuration(name: str) -> RendererConfiguration:
    """Look up a renderer configuration by name."""
    try:
        return CONFIGURATIONS[name]
    except KeyError:
        raise UnknownConfigurationError(name)


def render_markdown(
    markdown_source: str,
    configuration: RendererConfiguration = DEFAULT_CONFIGURATION,
) -> str:
    """
    Render a markdown document into HTML using the given renderer
    configuration.

    Malformed tables are not reported: they simply produce a grid with
    missing or misaligned cells.
    """
    return cast(str, configuration.markdown()(markdown_source))


def render_category(content: ContentCategory) -> str:
    """
    Render a category's markdown using the configuration assigned to that
    category.
    """
    return render_markdown(
        content.source, get_configuration(content.configuration_name)
    )


def render_categories(contents: Iterable[ContentCategory]) -> Dict[Category, str]:
    """
    Render a series of categories, returning a dictionary mapping from
    category to rendered HTML fragment.
    """
    return {content.category: render_category(content) for content in contents}
