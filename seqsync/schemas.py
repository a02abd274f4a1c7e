"""Data models for the alignment engine and API."""
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, StrictInt


class ScoringModel(BaseModel):
    """Linear scoring scheme: match reward, mismatch and gap penalties.

    Values must be real integers; strings, booleans and floats (including
    NaN and infinities) are rejected at construction.
    """
    model_config = ConfigDict(frozen=True)

    match: StrictInt = 2
    mismatch: StrictInt = -1
    gap: StrictInt = -2

    def score(self, a: str, b: str) -> int:
        """Score for aligning symbol a against symbol b."""
        return self.match if a == b else self.mismatch


class AlignmentMode(str, Enum):
    GLOBAL = "global"
    LOCAL = "local"


class PathCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    col: int


class AlignmentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    matrix: tuple[tuple[int, ...], ...]  # (len(seq1)+1) x (len(seq2)+1)
    path: tuple[PathCell, ...]  # start cell -> end cell
    aligned_seq1: str  # aligned sequence with gaps
    aligned_seq2: str
    score: int
    algorithm: str
    start_pos: Optional[PathCell] = None  # local only
    end_pos: Optional[PathCell] = None


class AlignmentStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    matches: int
    mismatches: int
    gaps: int
    alignment_length: int
    identity: str  # e.g. "66.67%"
    similarity: str  # matches + mismatches, gaps excluded


class MatrixView(BaseModel):
    row_labels: list[str]  # "ε" then seq1 symbols
    col_labels: list[str]  # "ε" then seq2 symbols


class AlignmentReport(BaseModel):
    result: AlignmentResult
    statistics: AlignmentStatistics
    formatted: str
    matrix_view: MatrixView


class AlignmentRequest(BaseModel):
    seq1: str
    seq2: str
    algorithm: Literal["global", "local", "both"] = "both"
    scoring: ScoringModel = ScoringModel()


class AlignmentResponse(BaseModel):
    global_alignment: Optional[AlignmentReport] = None
    local_alignment: Optional[AlignmentReport] = None


class ParseTextRequest(BaseModel):
    text: str


class Sequence(BaseModel):
    id: str
    name: str = ""
    sequence: str
    source: str = "unknown"

    @property
    def length(self) -> int:
        return len(self.sequence)


class ExamplePair(BaseModel):
    name: str
    description: str = ""
    seq1: str
    seq2: str
