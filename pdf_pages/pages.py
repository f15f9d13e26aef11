import argparse
from typing import FrozenSet, Iterable, List, Optional

from pdf_pages.errors import ConversionError, ErrorKind

# None selects every page.
Selection = Optional[FrozenSet[int]]


def parse_page_list(text: str) -> List[int]:
    """argparse type for ``-p 1,3,5``. Zero passes through so it is reported later."""
    pages = []
    for item in text.split(","):
        item = item.strip()
        if not (item.isascii() and item.isdigit()):
            raise argparse.ArgumentTypeError(f"invalid page number: {item!r}")
        pages.append(int(item))
    return pages


def validate_requested_pages(requested: Iterable[int], total: int) -> Selection:
    """Validate 1-based page numbers against ``total`` pages.

    Returns None (all pages) when nothing was requested, otherwise the set of
    0-based indices. Every offending number is reported in a single error.
    """
    requested = list(requested)
    if not requested:
        return None

    problematic = sorted({p for p in requested if p == 0 or p > total})
    if problematic:
        listed = ", ".join(str(p) for p in problematic)
        raise ConversionError(
            ErrorKind.PAGE_VALIDATION,
            f"Invalid requested page(s): {listed}. "
            f"The page numbers must be between 1 and {total}.",
        )

    return frozenset(p - 1 for p in requested)
