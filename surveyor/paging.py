"""Pagination and filtering of option lists."""

from typing import Callable

FilterFunc = Callable[[str, list[str]], list[str]]


def paginate(page_size: int, choices: list[str], selected: int) -> tuple[list[str], int]:
    """Return the visible page of ``choices`` and the cursor position within it.

    The page keeps the selected option in view: pinned to the top for the
    first half page, pinned to the bottom for the last half page, and
    centered everywhere else.

    Args:
        page_size: Maximum number of options per page; values below 1 mean
            no limit
        choices: The full (already filtered) list of options
        selected: Index of the selected option in ``choices``

    Returns:
        Tuple of (page, cursor) where ``page[cursor]`` is the selected option

    Examples:
        >>> paginate(3, ["a", "b", "c", "d", "e", "f"], 3)
        (['b', 'c', 'd'], 1)
    """
    if not choices:
        return [], 0
    if page_size < 1:
        return list(choices), selected

    total = len(choices)

    if total < page_size:
        start, end, cursor = 0, total, selected
    elif selected < page_size // 2:
        start, end, cursor = 0, page_size, selected
    elif total - selected - 1 < page_size // 2:
        start, end = total - page_size, total
        cursor = selected - start
    else:
        above = page_size // 2
        below = page_size - above
        start, end, cursor = selected - above, selected + below, page_size // 2

    return choices[start:end], cursor


def default_filter(text: str, options: list[str]) -> list[str]:
    """Keep the options containing ``text``, ignoring case."""
    needle = text.lower()
    return [option for option in options if needle in option.lower()]


__all__ = ["FilterFunc", "paginate", "default_filter"]
