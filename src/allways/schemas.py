from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class StatementKind(str, Enum):
    """Classification of a top-level module statement."""
    IMPORT = "import"
    IMPORT_FROM = "import_from"
    FUNCTION = "function"
    CLASS = "class"
    EXPORT_LIST = "export_list"
    OTHER = "other"


class MarkerProblem(str, Enum):
    """Why a pair of allways marker comments is unusable."""
    MISSING_END = "missing_end"
    MISSING_START = "missing_start"
    OUT_OF_ORDER = "out_of_order"
    DUPLICATE = "duplicate"


class ClassifiedStatement(BaseModel):
    """
    A top-level statement reduced to what matters for __all__.

    For imports and definitions `names` holds the bound names; for an
    export-list assignment it holds the listed strings.
    """
    kind: StatementKind
    lineno: int
    names: List[str] = Field(default_factory=list)


class MarkerSpan(BaseModel):
    """
    Character offsets of an existing allways block.

    `body_start` is the offset just past the start marker line and
    `body_end` the offset where the end marker line begins, so
    text[body_start:body_end] is the generated assignment.
    """
    body_start: int
    body_end: int
    start_line: int
    end_line: int


class ReconcileResult(BaseModel):
    """Final export sequence plus how it differs from the existing list."""
    names: List[str]
    previous: Optional[List[str]] = None
    added: List[str] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)


class ProcessResult(BaseModel):
    """Outcome of running the pipeline over one source text."""
    text: str
    changed: bool
    names: List[str]
    added: List[str] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)
    block_created: bool = False


class FileResult(BaseModel):
    """Per-file outcome reported by the driver."""
    path: str
    status: Literal["modified", "unchanged", "failed"]
    names: List[str] = Field(default_factory=list)
    added: List[str] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)
    error_code: Optional[str] = None
    error: Optional[str] = None
    diff: Optional[str] = None


class RunSummary(BaseModel):
    """Aggregate of a run over many files, results in input order."""
    results: List[FileResult] = Field(default_factory=list)

    @property
    def modified(self) -> List[FileResult]:
        return [r for r in self.results if r.status == "modified"]

    @property
    def unchanged(self) -> List[FileResult]:
        return [r for r in self.results if r.status == "unchanged"]

    @property
    def failed(self) -> List[FileResult]:
        return [r for r in self.results if r.status == "failed"]

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        """JSON-serializable summary for machine output."""
        return {
            "total_files": len(self.results),
            "modified": len(self.modified),
            "unchanged": len(self.unchanged),
            "failed": len(self.failed),
            "results": [r.model_dump(exclude_none=True) for r in self.results],
        }
