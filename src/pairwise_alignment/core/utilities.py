"""
Utility functions for aligned pairs: statistics, CIGAR strings, rescoring
and text rendering.
"""

from typing import Dict, List, Tuple, TYPE_CHECKING

from .alignment import GAP, AlignedPair

if TYPE_CHECKING:
    from ..scoring.schema import ScoringSchema

GAP_STR = '_'
MATCH_STR = '|'
MISMATCH_STR = ':'
SPACE_STR = ' '
DEFAULT_LINE_WIDTH = 50


def compute_alignment_stats(a1: str, a2: str, gap: str = '-') -> Dict:
    """
    Compute alignment statistics from two aligned rows.

    Returns:
        Dictionary with alignment statistics including:
        - matches, mismatches, insertions, deletions
        - identity (fraction of aligned columns)
        - gap_openings, total_gaps
    """
    if len(a1) != len(a2):
        raise ValueError(f"Alignment length mismatch: {len(a1)} != {len(a2)}")

    matches = mismatches = insertions = deletions = 0
    gap_openings = 0
    last_gap = None

    for x, y in zip(a1, a2):
        if x != gap and y != gap:
            if x == y:
                matches += 1
            else:
                mismatches += 1
            last_gap = None
        elif x == gap and y != gap:
            insertions += 1
            if last_gap != 'I':
                gap_openings += 1
                last_gap = 'I'
        elif x != gap and y == gap:
            deletions += 1
            if last_gap != 'D':
                gap_openings += 1
                last_gap = 'D'
        else:
            raise ValueError("Column with a gap in both rows")

    total = matches + mismatches + insertions + deletions
    total_gaps = insertions + deletions

    return {
        "matches": matches,
        "mismatches": mismatches,
        "insertions": insertions,
        "deletions": deletions,
        "identity": matches / total if total else 0.0,
        "total_aligned": total,
        "gap_openings": gap_openings,
        "total_gaps": total_gaps,
    }


def build_cigar(a1: str, a2: str, gap: str = '-') -> str:
    """
    Build CIGAR string from alignment.

    CIGAR operations:
    - I: insertion (gap in the first row)
    - D: deletion (gap in the second row)
    - =: sequence match
    - X: sequence mismatch
    """
    cigar = []
    last_op = None
    count = 0

    for x, y in zip(a1, a2):
        if x != gap and y != gap:
            op = '=' if x == y else 'X'
        elif x == gap:
            op = 'I'
        else:
            op = 'D'

        if op == last_op:
            count += 1
        else:
            if last_op is not None:
                cigar.append(f"{count}{last_op}")
            last_op = op
            count = 1

    if last_op:
        cigar.append(f"{count}{last_op}")

    return ''.join(cigar)


def validate_alignment(aligned: AlignedPair) -> Tuple[bool, List[str]]:
    """
    Check structural invariants of an aligned pair.

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []
    for column, (x, y) in enumerate(aligned.columns()):
        if x is GAP and y is GAP:
            errors.append(f"Column {column} has a gap in both rows")

    first, second = aligned.ungapped()
    if len(first) != aligned.end1 - aligned.start1:
        errors.append(
            f"First row covers {len(first)} symbols, "
            f"range [{aligned.start1}, {aligned.end1}) says {aligned.end1 - aligned.start1}"
        )
    if len(second) != aligned.end2 - aligned.start2:
        errors.append(
            f"Second row covers {len(second)} symbols, "
            f"range [{aligned.start2}, {aligned.end2}) says {aligned.end2 - aligned.start2}"
        )
    return len(errors) == 0, errors


def score_alignment(aligned: AlignedPair, schema: 'ScoringSchema') -> int:
    """
    Recompute the score of an aligned pair under a scoring schema.

    Each maximal run of gaps on the same row is charged as one gap of the
    run's length.
    """
    score = 0
    run_row = None
    run_length = 0

    for x, y in aligned.columns():
        if x is not GAP and y is not GAP:
            row = None
            score += schema.score(x, y)
        else:
            row = 1 if x is GAP else 2

        if row is not None and row == run_row:
            run_length += 1
            continue
        if run_row is not None:
            score += schema.gap_penalty(run_length)
        run_row = row
        run_length = 1 if row is not None else 0

    if run_row is not None:
        score += schema.gap_penalty(run_length)
    return score


def format_alignment(aligned: AlignedPair, width: int = DEFAULT_LINE_WIDTH) -> str:
    """
    Render an aligned pair as blocks of three lines.

    Gaps are shown as '_', identities as '|' and mismatches as ':'. Blocks
    hold at most `width` columns and are separated by a blank line.
    """
    if width < 1:
        raise ValueError("width must be positive")

    row1, row2 = aligned.aligned_strings(gap_char=GAP_STR)
    marks = []
    for x, y in aligned.columns():
        if x is GAP or y is GAP:
            marks.append(SPACE_STR)
        elif x == y:
            marks.append(MATCH_STR)
        else:
            marks.append(MISMATCH_STR)
    middle = ''.join(marks)

    blocks = []
    for start in range(0, len(row1), width):
        end = start + width
        blocks.append(f"{row1[start:end]}\n{middle[start:end]}\n{row2[start:end]}")
    return '\n\n'.join(blocks)


__all__ = [
    'compute_alignment_stats',
    'build_cigar',
    'validate_alignment',
    'score_alignment',
    'format_alignment',
    'GAP_STR',
    'MATCH_STR',
    'MISMATCH_STR',
    'DEFAULT_LINE_WIDTH',
]
