"""Pairwise sequence alignment: Needleman-Wunsch and Smith-Waterman."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from seqsync.schemas import (
    AlignmentMode, AlignmentResult, AlignmentStatistics,
    MatrixView, PathCell, ScoringModel
)

GAP = "-"

DEFAULT_SCORING = ScoringModel()


class AlignmentError(ValueError):
    """Base class for alignment engine errors."""


class InvalidInputError(AlignmentError):
    """A sequence passed to an aligner is missing or empty."""


class LengthMismatchError(AlignmentError):
    """Aligned sequences of unequal length were given."""


def _check_sequences(seq1: Optional[str], seq2: Optional[str]) -> None:
    if not seq1 or not seq2:
        raise InvalidInputError("Both sequences must be non-empty")


def _new_matrix(rows: int, cols: int) -> list[list[int]]:
    return [[0] * cols for _ in range(rows)]


def global_align(
    seq1: str,
    seq2: str,
    scoring: ScoringModel = DEFAULT_SCORING
) -> AlignmentResult:
    """
    Global alignment (Needleman-Wunsch).

    Boundaries hold cumulative gap penalties. The traceback runs from the
    bottom-right corner to the origin, preferring diagonal, then vertical,
    then horizontal steps when several reproduce the cell score.
    """
    _check_sequences(seq1, seq2)
    m, n = len(seq1), len(seq2)
    gap = scoring.gap

    matrix = _new_matrix(m + 1, n + 1)
    for i in range(m + 1):
        matrix[i][0] = i * gap
    for j in range(n + 1):
        matrix[0][j] = j * gap

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            diagonal = matrix[i-1][j-1] + scoring.score(seq1[i-1], seq2[j-1])
            up = matrix[i-1][j] + gap
            left = matrix[i][j-1] + gap
            matrix[i][j] = max(diagonal, up, left)

    path = []
    aligned1, aligned2 = [], []
    i, j = m, n

    while i > 0 or j > 0:
        path.append(PathCell(row=i, col=j))

        if i == 0:
            aligned1.append(GAP)
            aligned2.append(seq2[j-1])
            j -= 1
            continue
        if j == 0:
            aligned1.append(seq1[i-1])
            aligned2.append(GAP)
            i -= 1
            continue

        current = matrix[i][j]
        if current == matrix[i-1][j-1] + scoring.score(seq1[i-1], seq2[j-1]):
            aligned1.append(seq1[i-1])
            aligned2.append(seq2[j-1])
            i -= 1
            j -= 1
        elif current == matrix[i-1][j] + gap:
            aligned1.append(seq1[i-1])
            aligned2.append(GAP)
            i -= 1
        elif current == matrix[i][j-1] + gap:
            aligned1.append(GAP)
            aligned2.append(seq2[j-1])
            j -= 1
        else:
            # Unreachable with a consistent matrix; step diagonally so the walk ends.
            aligned1.append(seq1[i-1])
            aligned2.append(seq2[j-1])
            i -= 1
            j -= 1

    path.append(PathCell(row=0, col=0))
    path.reverse()

    return AlignmentResult(
        matrix=tuple(tuple(row) for row in matrix),
        path=tuple(path),
        aligned_seq1="".join(reversed(aligned1)),
        aligned_seq2="".join(reversed(aligned2)),
        score=matrix[m][n],
        algorithm="Needleman-Wunsch"
    )


def local_align(
    seq1: str,
    seq2: str,
    scoring: ScoringModel = DEFAULT_SCORING
) -> AlignmentResult:
    """
    Local alignment (Smith-Waterman).

    Every cell is floored at zero. The maximum is tracked in row-major
    order and the first cell reaching it wins; the traceback walks back
    from there until it reaches a zero cell or the matrix edge.
    """
    _check_sequences(seq1, seq2)
    m, n = len(seq1), len(seq2)
    gap = scoring.gap

    matrix = _new_matrix(m + 1, n + 1)
    max_score = 0
    max_pos = (0, 0)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            diagonal = matrix[i-1][j-1] + scoring.score(seq1[i-1], seq2[j-1])
            up = matrix[i-1][j] + gap
            left = matrix[i][j-1] + gap
            matrix[i][j] = max(0, diagonal, up, left)

            if matrix[i][j] > max_score:
                max_score = matrix[i][j]
                max_pos = (i, j)

    path = []
    aligned1, aligned2 = [], []
    i, j = max_pos

    while i > 0 and j > 0 and matrix[i][j] > 0:
        path.append(PathCell(row=i, col=j))

        current = matrix[i][j]
        if current == matrix[i-1][j-1] + scoring.score(seq1[i-1], seq2[j-1]):
            aligned1.append(seq1[i-1])
            aligned2.append(seq2[j-1])
            i -= 1
            j -= 1
        elif current == matrix[i-1][j] + gap:
            aligned1.append(seq1[i-1])
            aligned2.append(GAP)
            i -= 1
        elif current == matrix[i][j-1] + gap:
            aligned1.append(GAP)
            aligned2.append(seq2[j-1])
            j -= 1
        else:
            break
    else:
        path.append(PathCell(row=i, col=j))

    start = PathCell(row=i, col=j)
    path.reverse()

    return AlignmentResult(
        matrix=tuple(tuple(row) for row in matrix),
        path=tuple(path),
        aligned_seq1="".join(reversed(aligned1)),
        aligned_seq2="".join(reversed(aligned2)),
        score=max_score,
        algorithm="Smith-Waterman",
        start_pos=start,
        end_pos=PathCell(row=max_pos[0], col=max_pos[1])
    )


def align(
    mode: AlignmentMode,
    seq1: str,
    seq2: str,
    scoring: ScoringModel = DEFAULT_SCORING
) -> AlignmentResult:
    """Run the global or local aligner selected by mode."""
    mode = AlignmentMode(mode)
    if mode is AlignmentMode.GLOBAL:
        return global_align(seq1, seq2, scoring)
    return local_align(seq1, seq2, scoring)


def _check_lengths(aligned1: str, aligned2: str) -> None:
    if len(aligned1) != len(aligned2):
        raise LengthMismatchError(
            f"Aligned sequences must have equal length, "
            f"got {len(aligned1)} and {len(aligned2)}"
        )


def format_alignment(aligned1: str, aligned2: str) -> str:
    """Three-line view: sequence, match indicators (| : space), sequence."""
    _check_lengths(aligned1, aligned2)

    indicators = []
    for a, b in zip(aligned1, aligned2):
        if a == GAP or b == GAP:
            indicators.append(" ")
        elif a == b:
            indicators.append("|")
        else:
            indicators.append(":")

    return f"{aligned1}\n{''.join(indicators)}\n{aligned2}"


def _percent(count: int, total: int) -> str:
    if total == 0:
        return "0.00%"
    value = (Decimal(count) * 100 / Decimal(total)).quantize(
        Decimal("0.01"), rounding=ROUND_HALF_UP
    )
    return f"{value}%"


def calculate_alignment_stats(aligned1: str, aligned2: str) -> AlignmentStatistics:
    """Count matches, mismatches and gaps; identity and similarity as percentages."""
    _check_lengths(aligned1, aligned2)

    matches = 0
    mismatches = 0
    gaps = 0

    for a, b in zip(aligned1, aligned2):
        if a == GAP or b == GAP:
            gaps += 1
        elif a == b:
            matches += 1
        else:
            mismatches += 1

    length = len(aligned1)
    return AlignmentStatistics(
        matches=matches,
        mismatches=mismatches,
        gaps=gaps,
        alignment_length=length,
        identity=_percent(matches, length),
        similarity=_percent(matches + mismatches, length)
    )


def build_matrix_view(result: AlignmentResult, seq1: str, seq2: str) -> MatrixView:
    """
    Row and column headers for rendering the score matrix.

    Cells are not repeated here: renderers read scores from result.matrix
    and mark the cells listed in result.path.
    """
    rows = len(result.matrix)
    cols = len(result.matrix[0]) if rows else 0
    if (rows, cols) != (len(seq1) + 1, len(seq2) + 1):
        raise LengthMismatchError(
            f"Matrix of {rows} x {cols} does not match sequences of "
            f"length {len(seq1)} and {len(seq2)}"
        )

    return MatrixView(
        row_labels=["ε", *seq1],
        col_labels=["ε", *seq2]
    )
