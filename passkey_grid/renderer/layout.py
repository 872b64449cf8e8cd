"""
The grid layouts used to display directory tables.

Tables are not rendered as ``<table>`` elements but as a single CSS grid
container whose children are *all* of the table's cells (header cells first,
then each body row in turn). Because the cells are flat siblings, any
per-row or per-column styling must be expressed as structural (e.g.
``:nth-child``) selectors over the whole grid. These selectors depend on the
number of columns, so they are all derived here from
:py:attr:`GridLayout.column_count`.

.. autoclass:: GridLayout
    :members:

.. autofunction:: cell_classes

.. autofunction:: grid_classes
"""

from typing import Optional, List, FrozenSet, Mapping, Tuple

from enum import Enum, auto


SUPPRESSED_HEADER_LABELS = frozenset(["Logo", "Features"])
"""
Header labels which are not shown. (The icon column and feature list are
self-explanatory.)
"""


class GridLayout(Enum):
    """The available grid layout variants."""

    default = auto()
    """A three column layout: logo, name and features."""

    websites = auto()
    """
    A four column layout with a trailing link column. On narrow viewports the
    link column wraps onto its own full-width line below each row.
    """

    @property
    def column_count(self) -> int:
        if self is GridLayout.websites:
            return 4
        else:
            return 3

    @property
    def suppressed_header_labels(self) -> FrozenSet[str]:
        """
        Header labels rendered as empty cells. This is the same for every
        layout, including :py:attr:`websites`, whose header therefore renders
        as ``["", "Name", "", "Link"]``: the Features column is hidden and the
        Link column is labelled.
        """
        return SUPPRESSED_HEADER_LABELS

    @property
    def column_templates(self) -> Tuple[str, ...]:
        """
        The responsive grid-template classes for this layout. Every template
        declares exactly :py:attr:`column_count` tracks.
        """
        if self is GridLayout.websites:
            return (
                "grid-cols-[2.5rem_1fr_1fr_auto]",
                "sm:grid-cols-[3rem_1fr_2fr_auto]",
                "lg:grid-cols-[3rem_1fr_3fr_auto]",
            )
        else:
            return (
                "grid-cols-[2.5rem_1fr_2fr]",
                "md:grid-cols-[3rem_1fr_3fr]",
            )


JUSTIFY_CLASSES: Mapping[Optional[str], str] = {
    "left": "justify-start",
    "center": "justify-center",
    "right": "justify-end",
}


def justify_class(align: Optional[str]) -> Optional[str]:
    """
    Map a table cell alignment ("left", "center", "right" or None) to the
    corresponding flexbox justification class. Returns None for unaligned
    cells.
    """
    return JUSTIFY_CLASSES.get(align)


def cell_classes(layout: GridLayout, header: bool, align: Optional[str]) -> str:
    """
    Generate the class list for a grid cell.

    Parameters
    ==========
    layout : GridLayout
        The layout of the grid the cell is part of.
    header : bool
        True for cells in the table's header row.
    align : str or None
        The column alignment given in the markdown table's delimiter row.
    """
    n = layout.column_count

    classes: List[str] = []
    if header:
        classes += ["font-semibold", "text-sm", "uppercase", "tracking-wide"]
    else:
        classes += ["text-base"]

    classes += ["px-4", "py-3", "border-b"]

    # The final row's cells are the last N children of the grid
    classes.append(f"[&:nth-last-child(-n+{n})]:border-b-0")

    if layout is GridLayout.websites:
        classes.append(f"[&:nth-last-child({n}n+2)]:text-lg")
        classes.append(f"max-md:[&:nth-child({n}n)]:col-span-full")

    justify = justify_class(align)
    if justify is not None:
        classes += ["flex", "items-center", justify]

    return " ".join(classes)


def grid_classes(layout: GridLayout) -> str:
    """Generate the class list for the grid container."""
    return " ".join(["grid", "w-full", "items-stretch", *layout.column_templates])
