from patchview.diff import (
    ClassifiedLine,
    FileDiff,
    LineCategory,
    PatchDocument,
    PatchStats,
    is_valid_diff,
    parse_patch,
)

__all__ = [
    "ClassifiedLine",
    "FileDiff",
    "LineCategory",
    "PatchDocument",
    "PatchStats",
    "is_valid_diff",
    "parse_patch",
]
