import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Matches `diff --git a/<old> b/<new>` at the start of any line.
DIFF_GIT_RE = re.compile(r"^diff --git a/(.+?) b/(.+?)\r?$", re.MULTILINE)

DEFAULT_FILE_NAME = "changes.diff"


@dataclass(frozen=True)
class RawBlock:
    old_path: str | None
    new_path: str
    content: str


def split_blocks(patch_txt: str) -> list[RawBlock]:
    """
    Carve raw patch text into per-file blocks.

    Args:
        patch_txt: Raw unified diff, possibly covering several files.

    Returns:
        Blocks in source order. Each block runs from its `diff --git` line up
        to the next one (or the end of the text). Joining every block's
        content gives back `patch_txt` unchanged.

    Text before the first marker (e.g. a commit message) is kept at the front
    of the first block, so its `+`/`-` bullet lines count as changes to that
    file.
    Without any marker the whole text becomes a single block named
    `changes.diff`; empty or whitespace-only text gives no blocks.
    """

    if not patch_txt.strip():
        return []

    markers = list(DIFF_GIT_RE.finditer(patch_txt))
    if not markers:
        logger.debug("No diff --git markers found, using a single %s block", DEFAULT_FILE_NAME)
        return [RawBlock(old_path=None, new_path=DEFAULT_FILE_NAME, content=patch_txt)]

    if markers[0].start() > 0:
        logger.debug(
            "Keeping %d chars of preamble in the first block (%s)",
            markers[0].start(),
            markers[0].group(2),
        )

    blocks: list[RawBlock] = []
    for idx, match in enumerate(markers):
        start = 0 if idx == 0 else match.start()
        end = markers[idx + 1].start() if idx + 1 < len(markers) else len(patch_txt)
        blocks.append(
            RawBlock(
                old_path=match.group(1),
                new_path=match.group(2),
                content=patch_txt[start:end],
            )
        )

    logger.debug("Split patch into %d file blocks", len(blocks))
    return blocks
