#!/usr/bin/env python3
"""
Tests for alignment formatting, statistics and the matrix view.
"""

import pytest

from seqsync import (
    LengthMismatchError,
    build_matrix_view,
    calculate_alignment_stats,
    format_alignment,
    global_align,
    local_align,
)


class TestFormatAlignment:
    """Three-line alignment rendering."""

    def test_match_mismatch_and_gap(self):
        text = format_alignment("A-CGT", "ATTGA")
        assert text == "A-CGT\n| :|:\nATTGA"

    def test_perfect_match(self):
        assert format_alignment("ACGT", "ACGT") == "ACGT\n||||\nACGT"

    def test_gap_against_gap_is_blank(self):
        assert format_alignment("A-", "A-") == "A-\n| \nA-"

    def test_empty_alignment(self):
        assert format_alignment("", "") == "\n\n"

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError, match="equal length"):
            format_alignment("ACGT", "ACG")

    def test_formats_engine_output(self):
        result = global_align("ACGT", "AGT")
        lines = format_alignment(result.aligned_seq1, result.aligned_seq2).split("\n")
        assert lines == ["ACGT", "| ||", "A-GT"]


class TestAlignmentStats:
    """Match, mismatch and gap counting and percentage formatting."""

    def test_perfect_match(self):
        stats = calculate_alignment_stats("ACGT", "ACGT")
        assert stats.matches == 4
        assert stats.mismatches == 0
        assert stats.gaps == 0
        assert stats.alignment_length == 4
        assert stats.identity == "100.00%"
        assert stats.similarity == "100.00%"

    def test_with_gaps(self):
        stats = calculate_alignment_stats("A-CGT", "ATCGT")
        assert stats.matches == 4
        assert stats.mismatches == 0
        assert stats.gaps == 1
        assert stats.identity == "80.00%"
        assert stats.similarity == "80.00%"

    def test_mixed_alignment(self):
        stats = calculate_alignment_stats("A-CGT", "ATTGA")
        assert stats.matches == 2
        assert stats.mismatches == 2
        assert stats.gaps == 1
        assert stats.identity == "40.00%"
        assert stats.similarity == "80.00%"

    def test_gap_on_both_sides_counts_once(self):
        stats = calculate_alignment_stats("A-", "A-")
        assert stats.matches == 1
        assert stats.gaps == 1

    def test_repeating_fractions(self):
        stats = calculate_alignment_stats("ACG", "ATT")
        assert stats.identity == "33.33%"
        stats = calculate_alignment_stats("ACG", "ACT")
        assert stats.identity == "66.67%"

    def test_half_rounds_away_from_zero(self):
        # 1/32 = 3.125%
        stats = calculate_alignment_stats("A" * 32, "A" + "T" * 31)
        assert stats.identity == "3.13%"
        assert stats.similarity == "100.00%"

    def test_empty_alignment(self):
        stats = calculate_alignment_stats("", "")
        assert stats.alignment_length == 0
        assert stats.identity == "0.00%"
        assert stats.similarity == "0.00%"

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            calculate_alignment_stats("AC", "A")

    @pytest.mark.parametrize("seq1,seq2", [
        ("GCATGCU", "GATTACA"),
        ("HEAGAWGHEE", "PAWHEAE"),
        ("A", "TTTT"),
    ])
    def test_counts_sum_to_length(self, seq1, seq2):
        for result in (global_align(seq1, seq2), local_align(seq1, seq2)):
            stats = calculate_alignment_stats(result.aligned_seq1, result.aligned_seq2)
            assert stats.matches + stats.mismatches + stats.gaps == stats.alignment_length


class TestMatrixView:
    """Row and column headers for the score table."""

    def test_labels(self):
        result = global_align("ACG", "TG")
        view = build_matrix_view(result, "ACG", "TG")
        assert view.row_labels == ["ε", "A", "C", "G"]
        assert view.col_labels == ["ε", "T", "G"]

    def test_size_is_linear_in_sequence_length(self):
        """The view carries headers only; cells stay in result.matrix."""
        seq1, seq2 = "ACGT" * 25, "TGCA" * 20
        result = local_align(seq1, seq2)
        view = build_matrix_view(result, seq1, seq2)
        assert set(view.model_dump()) == {"row_labels", "col_labels"}
        assert len(view.row_labels) + len(view.col_labels) == len(seq1) + len(seq2) + 2

    def test_sequences_must_match_matrix(self):
        result = global_align("ACG", "TG")
        with pytest.raises(LengthMismatchError, match="does not match"):
            build_matrix_view(result, "ACGT", "TG")
