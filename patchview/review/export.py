import logging
from pathlib import Path

from patchview.diff.models import PatchDocument
from patchview.exceptions import EmptyPatchError

logger = logging.getLogger(__name__)

DEFAULT_DOWNLOAD_NAME = "fix.diff"


def copy_text(document: PatchDocument, file_index: int | None = None) -> str:
    """
    Text to put on the clipboard.

    The whole patch is always the original raw text, never rebuilt from the
    parsed blocks. With `file_index`, only that block's content is returned.
    """

    if document.is_empty:
        raise EmptyPatchError()
    if file_index is None:
        return document.raw
    return document.files[file_index].content


def write_patch(
    document: PatchDocument,
    path: Path | None = None,
    overwrite: bool = False,
    file_index: int | None = None,
) -> Path:
    """Write the patch to disk byte-for-byte and return the path written."""

    path = Path(path) if path is not None else Path(DEFAULT_DOWNLOAD_NAME)
    text = copy_text(document, file_index=file_index)
    write_output(path, text, overwrite)
    logger.debug("Wrote %d chars of patch to %s", len(text), path)
    return path


def write_output(path: Path, content: str, overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise FileExistsError(f"{path} already exists. Use --overwrite to replace.")
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps "\r\n" and "\n" exactly as they are in the patch.
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
