"""
Core types for pairwise alignment.
"""

from .exceptions import (
    AlignmentError,
    SeqErrorKind,
    SequenceError,
    GridIndexError,
    EmptySequenceError,
    ScoringError,
    InputErrorKind,
    InputError,
    SessionError
)

from .alphabet import (
    AminoAcid,
    Nucleotide,
    Alphabet,
    Sequence,
    PROTEIN,
    NUCLEOTIDE,
    ALPHABETS,
    get_alphabet
)

from .grid import Grid

from .alignment import GAP, AlignmentKind, AlignedPair

from .utilities import (
    compute_alignment_stats,
    build_cigar,
    validate_alignment,
    score_alignment,
    format_alignment
)

__all__ = [
    # Errors
    'AlignmentError',
    'SeqErrorKind',
    'SequenceError',
    'GridIndexError',
    'EmptySequenceError',
    'ScoringError',
    'InputErrorKind',
    'InputError',
    'SessionError',

    # Alphabets and sequences
    'AminoAcid',
    'Nucleotide',
    'Alphabet',
    'Sequence',
    'PROTEIN',
    'NUCLEOTIDE',
    'ALPHABETS',
    'get_alphabet',

    # Matrices
    'Grid',

    # Alignments
    'GAP',
    'AlignmentKind',
    'AlignedPair',

    # Utility functions
    'compute_alignment_stats',
    'build_cigar',
    'validate_alignment',
    'score_alignment',
    'format_alignment',
]
