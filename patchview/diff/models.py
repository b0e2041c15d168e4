from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from patchview.diff.classifier import ClassifiedLine, classify_lines
from patchview.diff.stats import PatchStats, compute_stats, count_changes
from patchview.diff.validator import is_valid_diff


class FileDiff(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_name: str
    old_path: str | None = None
    content: str
    additions: int = Field(ge=0)
    deletions: int = Field(ge=0)

    @model_validator(mode="after")
    def _counts_match_content(self) -> "FileDiff":
        additions, deletions = count_changes(classify_lines(self.content))
        if (self.additions, self.deletions) != (additions, deletions):
            raise ValueError(
                f"{self.file_name}: counts +{self.additions} -{self.deletions} "
                f"do not match content (+{additions} -{deletions})"
            )
        return self

    @property
    def short_name(self) -> str:
        return self.file_name.rsplit("/", 1)[-1] or self.file_name

    @property
    def changed_lines(self) -> int:
        return self.additions + self.deletions

    @property
    def lines(self) -> list[ClassifiedLine]:
        return classify_lines(self.content)


class PatchDocument(BaseModel):
    """A parsed patch: the untouched raw text plus its per-file blocks."""

    model_config = ConfigDict(frozen=True)

    raw: str
    files: tuple[FileDiff, ...] = ()

    @model_validator(mode="after")
    def _files_carve_raw(self) -> "PatchDocument":
        # Blank text has no blocks; otherwise the blocks must rebuild raw exactly.
        if not self.raw.strip():
            if self.files:
                raise ValueError("blank patch text cannot have file blocks")
        elif "".join(f.content for f in self.files) != self.raw:
            raise ValueError("file blocks do not concatenate to the raw patch text")
        return self

    @computed_field
    @property
    def stats(self) -> PatchStats:
        return compute_stats(self.files)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return is_valid_diff(self.raw)

    @property
    def is_empty(self) -> bool:
        return not self.files

    @property
    def is_multi_file(self) -> bool:
        return len(self.files) > 1

    @property
    def file_names(self) -> list[str]:
        return [f.file_name for f in self.files]
