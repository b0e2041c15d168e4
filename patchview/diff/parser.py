import logging

from patchview.diff.classifier import classify_lines
from patchview.diff.models import FileDiff, PatchDocument
from patchview.diff.segmenter import RawBlock, split_blocks
from patchview.diff.stats import count_changes

logger = logging.getLogger(__name__)


def build_file_diff(block: RawBlock) -> FileDiff:
    additions, deletions = count_changes(classify_lines(block.content))
    return FileDiff(
        file_name=block.new_path,
        old_path=block.old_path,
        content=block.content,
        additions=additions,
        deletions=deletions,
    )


def parse_patch(patch_txt: str | None) -> PatchDocument:
    """
    Parse raw patch text into a `PatchDocument`.

    Never raises for any string input: empty or whitespace-only text gives a
    document with no files, which the review surface shows as "no patch".
    `None` is treated as empty text.

    A unified diff with git headers looks like:
    ```diff
    diff --git a/src/main.py b/src/main.py
    --- a/src/main.py
    +++ b/src/main.py
    @@ -1,2 +1,2 @@
     def foo():
    -    return 1
    +    return 2
    ```
    """

    raw = patch_txt or ""
    files = tuple(build_file_diff(block) for block in split_blocks(raw))
    document = PatchDocument(raw=raw, files=files)

    logger.debug(
        "Parsed patch: %d files, +%d -%d, valid=%s",
        document.stats.files,
        document.stats.additions,
        document.stats.deletions,
        document.is_valid,
    )
    return document
