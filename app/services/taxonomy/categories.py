"""Subject path parsing - builds category trees from full subject paths.

A full subject path looks like '/Biology/Genetics/Gene expression'. Old-style
subjects stored without the leading separator, and paths with no second
level, are dropped.
"""

from collections import defaultdict
from collections.abc import Iterable

from app.models.taxonomy import ROOT_NODE_NAME, CategoryView

SEPARATOR = "/"
MIN_SEGMENTS = 3


def split_subject_path(path: str) -> list[str]:
    """Split on the separator, dropping trailing empty segments.

    The leading separator yields an empty first segment.
    """
    segments = path.split(SEPARATOR)
    while segments and not segments[-1]:
        segments.pop()
    return segments


def is_full_subject_path(path: str) -> bool:
    """True for paths with a leading separator and at least a top and second level."""
    return path.startswith(SEPARATOR) and len(split_subject_path(path)) >= MIN_SEGMENTS


def build_top_and_second_level(paths: Iterable[str]) -> dict[str, list[str]]:
    """Map each top-level category to its sorted, de-duplicated second-level categories."""
    subcategories: dict[str, set[str]] = defaultdict(set)
    for path in paths:
        if not is_full_subject_path(path):
            continue
        segments = split_subject_path(path)
        subcategories[segments[1]].add(segments[2])

    return {top: sorted(subs) for top, subs in sorted(subcategories.items())}


def build_category_view(paths: Iterable[str]) -> CategoryView:
    """Build the full nested category tree under a ROOT node."""
    root = CategoryView(ROOT_NODE_NAME)
    for path in paths:
        if not is_full_subject_path(path):
            continue
        node = root
        for name in split_subject_path(path)[1:]:
            if name:
                node = node.add_child(name)
    root.sort()
    return root
