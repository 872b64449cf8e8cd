class StaticSiteError(Exception):
    """Base class for exceptions thrown during directory page generation."""


class NotADirectoryError(StaticSiteError):
    """Thrown when a path given is not a directory."""


class MissingCategorySourceError(StaticSiteError):
    """Thrown when a content directory has no markdown file for a category."""


class MultipleCategorySourcesError(StaticSiteError):
    """Thrown when a content directory has several markdown files for one category."""
