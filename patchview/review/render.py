from __future__ import annotations

import re

import typer

from patchview.diff.classifier import ClassifiedLine, LineCategory
from patchview.diff.models import FileDiff, PatchDocument

EMPTY_TITLE = "No Patch Available"
EMPTY_HINT = "Generate a fix patch using AI analysis"

CATEGORY_STYLES: dict[LineCategory, dict] = {
    LineCategory.FILE_HEADER_OLD: {"dim": True},
    LineCategory.FILE_HEADER_NEW: {"dim": True},
    LineCategory.ADDITION: {"fg": typer.colors.GREEN},
    LineCategory.DELETION: {"fg": typer.colors.RED},
    LineCategory.HUNK_HEADER: {"fg": typer.colors.CYAN},
    LineCategory.CONTEXT: {},
}


def render_line(
    line: ClassifiedLine,
    color: bool = True,
    show_line_numbers: bool = True,
    number_width: int = 4,
) -> str:
    text = line.display_text
    if color and CATEGORY_STYLES[line.category]:
        text = typer.style(text, **CATEGORY_STYLES[line.category])
    if not show_line_numbers:
        return text
    return f"{line.line_number:>{number_width}}  {text}"


def render_file(
    file: FileDiff,
    color: bool = True,
    show_line_numbers: bool = True,
) -> str:
    lines = file.lines
    width = max(4, len(str(len(lines))))
    return "\n".join(
        render_line(line, color=color, show_line_numbers=show_line_numbers, number_width=width)
        for line in lines
    )


def render_tabs(document: PatchDocument, selected: int = 0, color: bool = True) -> str:
    labels = []
    for index, file in enumerate(document.files):
        adds = f"+{file.additions}"
        dels = f"-{file.deletions}"
        if color:
            adds = typer.style(adds, fg=typer.colors.GREEN)
            dels = typer.style(dels, fg=typer.colors.RED)
        label = f"{file.short_name} {adds} {dels}"
        labels.append(f"[{label}]" if index == selected else f" {label} ")
    return " ".join(labels)


def render_summary(document: PatchDocument) -> str:
    stats = document.stats
    return (
        f"Total changes: {stats.total_changed} lines across {stats.files} files | "
        f"+{stats.additions} additions | -{stats.deletions} deletions"
    )


def render_empty_state() -> str:
    return f"{EMPTY_TITLE}\n{EMPTY_HINT}"


def render_document(
    document: PatchDocument,
    selected: int = 0,
    color: bool = True,
    show_line_numbers: bool = True,
) -> str:
    if document.is_empty:
        return render_empty_state()

    current = document.files[selected]
    title = "Suggested Fix"
    if document.is_multi_file:
        title += f" ({document.stats.files} files)"

    lines = [title]
    if document.is_multi_file:
        lines.append(render_tabs(document, selected, color=color))
    lines.append(current.file_name)
    lines.append("")
    lines.append(render_file(current, color=color, show_line_numbers=show_line_numbers))
    if document.is_multi_file:
        lines.append("")
        lines.append(render_summary(document))
    return "\n".join(lines)


def code_fence(content: str) -> str:
    longest = max((len(run) for run in re.findall(r"`+", content)), default=0)
    return "`" * max(3, longest + 1)


def render_markdown(document: PatchDocument) -> str:
    lines: list[str] = []
    lines.append("# Suggested Fix")
    lines.append("")

    if document.is_empty:
        lines.append(EMPTY_TITLE)
        return "\n".join(lines)

    stats = document.stats
    lines.append(f"Valid diff: {'yes' if document.is_valid else 'no'}")
    lines.append("")
    lines.append("| File | Additions | Deletions |")
    lines.append("|------|-----------|-----------|")
    for file in document.files:
        lines.append(f"| {file.file_name} | {file.additions} | {file.deletions} |")
    lines.append(f"| **Total ({stats.files} files)** | {stats.additions} | {stats.deletions} |")
    lines.append("")

    for file in document.files:
        lines.append(f"## {file.file_name}")
        lines.append("")
        fence = code_fence(file.content)
        lines.append(f"{fence}diff")
        lines.append(file.content.rstrip("\n"))
        lines.append(fence)
        lines.append("")

    return "\n".join(lines)
