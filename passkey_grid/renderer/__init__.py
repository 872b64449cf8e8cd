"""
Directory tables are rendered as CSS grids rather than HTML tables.

Rendering is split into two parts. The grid layout variants, and the class
names derived from them, are defined in :py:mod:`passkey_grid.renderer.layout`.
The generation of the HTML for icons, links, cells and grids is implemented in
:py:mod:`passkey_grid.renderer.html`.

:py:mod:`passkey_grid.renderer.layout`: Grid layouts
====================================================

.. automodule:: passkey_grid.renderer.layout

:py:mod:`passkey_grid.renderer.html`: HTML generation
=====================================================

.. automodule:: passkey_grid.renderer.html

"""
