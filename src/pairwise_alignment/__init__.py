"""
Pairwise sequence alignment: Needleman-Wunsch and Smith-Waterman with linear
or affine gap penalties.
"""

__version__ = "1.0.0"
__description__ = "Pairwise sequence alignment with global and local dynamic programming"
__license__ = "MIT"

from .core import (
    AlignmentError,
    SequenceError,
    EmptySequenceError,
    ScoringError,
    InputError,
    SessionError,
    AminoAcid,
    Nucleotide,
    Alphabet,
    Sequence,
    PROTEIN,
    NUCLEOTIDE,
    get_alphabet,
    Grid,
    GAP,
    AlignmentKind,
    AlignedPair
)
from .scoring import (
    Affine,
    Linear,
    ScoringSchema,
    SubstitutionMatrix,
    SubstitutionTable
)
from .algorithms import AlignmentEngine, Backtrack
from .pipeline.session import AlignmentSession, align_sequences


def get_version():
    """Get the package version."""
    return __version__


__all__ = [
    # Metadata
    '__version__',
    'get_version',

    # Errors
    'AlignmentError',
    'SequenceError',
    'EmptySequenceError',
    'ScoringError',
    'InputError',
    'SessionError',

    # Sequences
    'AminoAcid',
    'Nucleotide',
    'Alphabet',
    'Sequence',
    'PROTEIN',
    'NUCLEOTIDE',
    'get_alphabet',

    # Alignment
    'Grid',
    'GAP',
    'AlignmentKind',
    'AlignedPair',
    'Affine',
    'Linear',
    'ScoringSchema',
    'SubstitutionMatrix',
    'SubstitutionTable',
    'AlignmentEngine',
    'Backtrack',
    'AlignmentSession',
    'align_sequences',
]
