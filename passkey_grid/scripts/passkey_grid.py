"""
The ``passkey-grid`` command renders a directory of category markdown files
into a single HTML page.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ passkey-grid CONTENT_DIR [OUTPUT_FILENAME]

The content directory must contain one markdown file per category (see
:py:mod:`passkey_grid.static_site.content`). If no output filename is given,
``index.html`` within the content directory is used.

Single fragments
================

The ``--fragment`` (or ``-f``) argument renders just one category's table as
an HTML fragment (e.g. for embedding into another page). In this mode, output
is written to stdout unless an output filename is given::

    $ passkey-grid content/ --fragment websites > websites.html
"""

import sys

import logging

from argparse import ArgumentParser

from pathlib import Path

from passkey_grid.categories import Category

from passkey_grid.markdown import render_category

from passkey_grid.static_site.exceptions import StaticSiteError

from passkey_grid.static_site.content import load_category_source, check_table_header

from passkey_grid.static_site.page import generate_page, DEFAULT_TITLE


logger = logging.getLogger(__name__)


def main() -> None:
    parser = ArgumentParser(
        description="""
            Render a directory of passkey directory markdown tables into HTML.
        """,
    )

    parser.add_argument(
        "content",
        type=Path,
        help="""
            The directory containing one markdown file per category.
        """,
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="""
            The output filename. Defaults to index.html in the content
            directory, or stdout when --fragment is used.
        """,
    )

    parser.add_argument(
        "--title",
        "-t",
        default=DEFAULT_TITLE,
        help="""
            The page title. Default: %(default)s.
        """,
    )
    parser.add_argument(
        "--stylesheet",
        "-c",
        default=None,
        help="""
            URL of a stylesheet to link to from the generated page.
        """,
    )
    parser.add_argument(
        "--fragment",
        "-f",
        choices=[c.identifier for c in Category],
        default=None,
        help="""
            Render only the named category's table, as an HTML fragment.
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="""
            Log progress information.
        """,
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        if args.fragment is not None:
            content = load_category_source(args.content, Category(args.fragment))
            mismatch = check_table_header(content)
            if mismatch is not None:
                logger.warning("%s", mismatch.description)
            html = render_category(content)
        else:
            html = generate_page(
                args.content,
                title=args.title,
                stylesheet=args.stylesheet,
            )
    except StaticSiteError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    output = args.output
    if output is None and args.fragment is None:
        output = args.content / "index.html"

    if output is None:
        sys.stdout.write(html)
    else:
        logger.info("Writing %s", output)
        with output.open("w", encoding="utf-8") as f:
            f.write(html)


if __name__ == "__main__":
    main()
