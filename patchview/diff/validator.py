MIN_DIFF_LENGTH = 20


def is_valid_diff(patch_txt: str | None) -> bool:
    """
    Cheap check that a text blob looks like a unified diff.

    Requires `---`, `+++`, `@@` and at least one change line after a newline.
    A change on the very first line of the text is not seen by the last test;
    callers gating on this result rely on that behaviour.
    """

    if not patch_txt or len(patch_txt) < MIN_DIFF_LENGTH:
        return False

    has_header = "---" in patch_txt and "+++" in patch_txt
    has_hunk = "@@" in patch_txt
    has_changes = "\n+" in patch_txt or "\n-" in patch_txt
    return has_header and has_hunk and has_changes
