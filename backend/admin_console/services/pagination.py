"""Page slicing and page-number controls."""

from typing import List, Sequence, TypeVar, Union

from ..schemas import ELLIPSIS, Page, PageWindow

ItemT = TypeVar("ItemT")

MAX_VISIBLE_PAGES = 5


def paginate(records: Sequence[ItemT], page: int, page_size: int) -> Page[ItemT]:
    """Slice ``records`` into the requested page.

    Out-of-range pages are clamped first so ``items`` always belongs to the
    returned window.
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    window = PageWindow.clamped(page, page_size, len(records))
    start = (window.page - 1) * page_size
    return Page(items=list(records[start:start + page_size]), window=window)


def page_numbers(page: int, total_pages: int) -> List[Union[int, str]]:
    """Build the page buttons shown under a table, with ``"..."`` for gaps."""
    if total_pages <= MAX_VISIBLE_PAGES:
        return list(range(1, total_pages + 1))
    if page <= 3:
        return [1, 2, 3, 4, ELLIPSIS, total_pages]
    if page >= total_pages - 2:
        return [1, ELLIPSIS, *range(total_pages - 3, total_pages + 1)]
    return [1, ELLIPSIS, page - 1, page, page + 1, ELLIPSIS, total_pages]
