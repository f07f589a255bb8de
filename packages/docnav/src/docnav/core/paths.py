"""Route path normalization."""

from docnav.core.types import URLPath


def normalize_path(path: object) -> URLPath:
    """Normalize a route for comparison.

    Strips a single trailing slash so "/docs/intro" and "/docs/intro/"
    compare equal. None, "" and non-string values normalize to "".
    """
    if not isinstance(path, str) or not path:
        return URLPath("")
    if path.endswith("/"):
        return URLPath(path[:-1])
    return URLPath(path)
