import logging

from patchview.diff.models import FileDiff, PatchDocument
from patchview.diff.parser import parse_patch

logger = logging.getLogger(__name__)


class ReviewState:
    """
    Caller-owned view state over one parsed patch.

    Holds the selected file index and the transient "copied"/"saved" flags.
    The wrapped `PatchDocument` is never modified; `load` swaps in a new one.
    """

    def __init__(self, document: PatchDocument | None = None):
        self.document = document if document is not None else parse_patch("")
        self.selected = 0
        self.copied = False
        self.saved = False

    @classmethod
    def from_text(cls, patch_txt: str | None) -> "ReviewState":
        return cls(parse_patch(patch_txt))

    def load(self, patch_txt: str | None) -> PatchDocument:
        self.document = parse_patch(patch_txt)
        self.selected = 0
        self.reset_flags()
        logger.debug("Loaded new patch with %d files", len(self.document.files))
        return self.document

    @property
    def current(self) -> FileDiff | None:
        if self.document.is_empty:
            return None
        return self.document.files[self.selected]

    def select(self, index: int) -> FileDiff:
        count = len(self.document.files)
        if not 0 <= index < count:
            raise IndexError(f"File index {index} out of range (0..{count - 1})")
        self.selected = index
        return self.document.files[index]

    def next_file(self) -> FileDiff | None:
        if self.document.is_empty:
            return None
        self.selected = (self.selected + 1) % len(self.document.files)
        return self.current

    def previous_file(self) -> FileDiff | None:
        if self.document.is_empty:
            return None
        self.selected = (self.selected - 1) % len(self.document.files)
        return self.current

    def mark_copied(self) -> None:
        self.copied = True

    def mark_saved(self) -> None:
        self.saved = True

    def reset_flags(self) -> None:
        self.copied = False
        self.saved = False
