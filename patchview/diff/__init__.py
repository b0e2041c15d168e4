from patchview.diff.classifier import (
    ClassifiedLine,
    LineCategory,
    classify_line,
    classify_lines,
)
from patchview.diff.models import FileDiff, PatchDocument
from patchview.diff.parser import build_file_diff, parse_patch
from patchview.diff.segmenter import DEFAULT_FILE_NAME, RawBlock, split_blocks
from patchview.diff.stats import PatchStats, compute_stats, count_changes
from patchview.diff.validator import MIN_DIFF_LENGTH, is_valid_diff

__all__ = [
    "ClassifiedLine",
    "LineCategory",
    "classify_line",
    "classify_lines",
    "FileDiff",
    "PatchDocument",
    "PatchStats",
    "build_file_diff",
    "parse_patch",
    "DEFAULT_FILE_NAME",
    "RawBlock",
    "split_blocks",
    "compute_stats",
    "count_changes",
    "MIN_DIFF_LENGTH",
    "is_valid_diff",
]
