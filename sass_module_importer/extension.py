"""Stylesheet extension helpers."""

DEFAULT_EXTENSION = ".scss"


def normalize_extension(extension: str) -> str:
    """Ensure the extension starts with a dot ("scss" -> ".scss")."""
    if not extension.startswith("."):
        return "." + extension
    return extension


def with_extension(path: str, extension: str) -> str:
    """Append the extension unless the path already contains it.

    The check is a substring test, not an ends-with test: a path such as
    ``styles.scss/theme`` counts as already extended.

    Args:
        path: File path or import specifier
        extension: Extension including the leading dot

    Returns:
        Path carrying the extension

    Example:
        >>> with_extension("partials/colors", ".scss")
        'partials/colors.scss'
        >>> with_extension("partials/colors.scss", ".scss")
        'partials/colors.scss'
    """
    if extension not in path:
        return path + extension
    return path
