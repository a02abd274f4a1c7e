"""
SeqSync: global and local pairwise sequence alignment with traceback,
alignment formatting and statistics.
"""

from .alignment import (
    DEFAULT_SCORING,
    AlignmentError,
    InvalidInputError,
    LengthMismatchError,
    align,
    build_matrix_view,
    calculate_alignment_stats,
    format_alignment,
    global_align,
    local_align,
)
from .schemas import (
    AlignmentMode,
    AlignmentResult,
    AlignmentStatistics,
    PathCell,
    ScoringModel,
)

__all__ = [
    "DEFAULT_SCORING",
    "AlignmentError",
    "InvalidInputError",
    "LengthMismatchError",
    "align",
    "build_matrix_view",
    "calculate_alignment_stats",
    "format_alignment",
    "global_align",
    "local_align",
    "AlignmentMode",
    "AlignmentResult",
    "AlignmentStatistics",
    "PathCell",
    "ScoringModel",
]
