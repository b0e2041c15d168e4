from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class LineCategory(StrEnum):
    FILE_HEADER_OLD = "file_header_old"
    FILE_HEADER_NEW = "file_header_new"
    ADDITION = "addition"
    DELETION = "deletion"
    HUNK_HEADER = "hunk_header"
    CONTEXT = "context"


class ClassifiedLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    line_number: int
    category: LineCategory
    raw_text: str

    @property
    def display_text(self) -> str:
        return self.raw_text or " "

    @property
    def is_change(self) -> bool:
        return self.category in (LineCategory.ADDITION, LineCategory.DELETION)


def classify_line(line: str) -> LineCategory:
    """
    Tag a single diff line.

    The order matters: `+++`/`---` file headers share their first character
    with additions and deletions and must be tested first.
    """

    if line.startswith("+++"):
        return LineCategory.FILE_HEADER_NEW
    if line.startswith("---"):
        return LineCategory.FILE_HEADER_OLD
    if line.startswith("+"):
        return LineCategory.ADDITION
    if line.startswith("-"):
        return LineCategory.DELETION
    if line.startswith("@@"):
        return LineCategory.HUNK_HEADER
    return LineCategory.CONTEXT


def classify_lines(content: str) -> list[ClassifiedLine]:
    # Split on "\n" only so a trailing newline shows up as a final empty line.
    return [
        ClassifiedLine(
            line_number=index,
            category=classify_line(line),
            raw_text=line,
        )
        for index, line in enumerate(content.split("\n"), start=1)
    ]
