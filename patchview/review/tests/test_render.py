from patchview.diff.parser import parse_patch
from patchview.review.render import (
    EMPTY_TITLE,
    render_document,
    render_file,
    render_markdown,
    render_summary,
    render_tabs,
)

TWO_FILE_PATCH = """\
diff --git a/src/a.py b/src/a.py
--- a/src/a.py
+++ b/src/a.py
@@ -1,1 +1,1 @@
-old_a
+new_a
diff --git a/src/b.py b/src/b.py
--- a/src/b.py
+++ b/src/b.py
@@ -1,2 +1,1 @@
 keep

-gone
"""


def test_render_file_numbers_lines_without_color():
    doc = parse_patch(TWO_FILE_PATCH)
    out = render_file(doc.files[0], color=False)
    rows = out.split("\n")

    assert rows[0] == "   1  diff --git a/src/a.py b/src/a.py"
    assert rows[4] == "   5  -old_a"
    assert rows[5] == "   6  +new_a"


def test_render_file_shows_blank_lines_as_space():
    doc = parse_patch(TWO_FILE_PATCH)
    rows = render_file(doc.files[1], color=False, show_line_numbers=False).split("\n")
    assert " keep" in rows
    assert rows[rows.index(" keep") + 1] == " "


def test_render_file_colors_changes():
    doc = parse_patch(TWO_FILE_PATCH)
    out = render_file(doc.files[0], color=True)
    assert "\x1b[" in out
    assert "new_a" in out


def test_render_tabs_marks_selected():
    doc = parse_patch(TWO_FILE_PATCH)
    tabs = render_tabs(doc, selected=1, color=False)
    assert "[b.py +0 -1]" in tabs
    assert " a.py +1 -1 " in tabs


def test_render_summary():
    doc = parse_patch(TWO_FILE_PATCH)
    assert render_summary(doc) == (
        "Total changes: 3 lines across 2 files | +1 additions | -2 deletions"
    )


def test_render_document_empty_state():
    out = render_document(parse_patch(""))
    assert EMPTY_TITLE in out


def test_render_document_multi_file():
    doc = parse_patch(TWO_FILE_PATCH)
    out = render_document(doc, selected=1, color=False)
    assert out.startswith("Suggested Fix (2 files)")
    assert "src/b.py" in out
    assert "-gone" in out
    assert "+new_a" not in out
    assert "Total changes: 3 lines" in out


def test_render_document_single_file_has_no_summary():
    doc = parse_patch("--- a/x\n+++ b/x\n@@ -1,1 +1,1 @@\n-old\n+new\n")
    out = render_document(doc, color=False)
    assert out.startswith("Suggested Fix\n")
    assert "changes.diff" in out
    assert "Total changes" not in out


def test_render_markdown():
    doc = parse_patch(TWO_FILE_PATCH)
    md = render_markdown(doc)

    assert md.startswith("# Suggested Fix")
    assert "| src/a.py | 1 | 1 |" in md
    assert "| src/b.py | 0 | 1 |" in md
    assert "| **Total (2 files)** | 1 | 2 |" in md
    assert md.count("```diff") == 2


def test_render_markdown_empty():
    assert EMPTY_TITLE in render_markdown(parse_patch("   "))


def test_render_markdown_fence_outgrows_backticks_in_content():
    patch = (
        "diff --git a/README.md b/README.md\n"
        "--- a/README.md\n+++ b/README.md\n@@ -1,3 +1,3 @@\n"
        " ```python\n-print(1)\n+print(2)\n ```\n"
    )
    md = render_markdown(parse_patch(patch))

    assert "````diff\n" in md
    assert "\n````\n" in md
    assert "\n```diff" not in md
