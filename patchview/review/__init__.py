from patchview.review.export import (
    DEFAULT_DOWNLOAD_NAME,
    copy_text,
    write_output,
    write_patch,
)
from patchview.review.render import (
    render_document,
    render_empty_state,
    render_file,
    render_markdown,
    render_summary,
    render_tabs,
)
from patchview.review.source import extract_patch_text, read_patch_source
from patchview.review.state import ReviewState

__all__ = [
    "DEFAULT_DOWNLOAD_NAME",
    "copy_text",
    "write_output",
    "write_patch",
    "render_document",
    "render_empty_state",
    "render_file",
    "render_markdown",
    "render_summary",
    "render_tabs",
    "extract_patch_text",
    "read_patch_source",
    "ReviewState",
]
