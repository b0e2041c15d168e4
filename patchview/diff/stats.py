from typing import TYPE_CHECKING, Iterable

from pydantic import BaseModel, ConfigDict

from patchview.diff.classifier import ClassifiedLine, LineCategory

if TYPE_CHECKING:
    from patchview.diff.models import FileDiff


class PatchStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    additions: int = 0
    deletions: int = 0
    files: int = 0
    total_changed: int = 0


def count_changes(lines: Iterable[ClassifiedLine]) -> tuple[int, int]:
    """Return (additions, deletions) for one block's classified lines."""
    additions = 0
    deletions = 0
    for line in lines:
        if line.category == LineCategory.ADDITION:
            additions += 1
        elif line.category == LineCategory.DELETION:
            deletions += 1
    return additions, deletions


def compute_stats(files: Iterable["FileDiff"]) -> PatchStats:
    files = list(files)
    additions = sum(f.additions for f in files)
    deletions = sum(f.deletions for f in files)
    return PatchStats(
        additions=additions,
        deletions=deletions,
        files=len(files),
        total_changed=additions + deletions,
    )
