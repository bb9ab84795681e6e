"""
Alignment sessions: one pair of sequences, one schema, one run.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from ..algorithms.engine import AlignmentEngine
from ..core.alignment import AlignedPair, AlignmentKind
from ..core.alphabet import Alphabet, Sequence, get_alphabet
from ..core.exceptions import SessionError
from ..scoring.schema import ScoringSchema

logger = logging.getLogger(__name__)


class AlignmentSession:
    """
    Owns two sequences, a scoring schema and the working matrices of a
    single alignment run.

    Args:
        seq1: First sequence (rows)
        seq2: Second sequence (columns)
        kind: AlignmentKind or its name ('global', 'local', ...)
        schema: Scoring schema shared by both sequences

    Raises:
        EmptySequenceError: if either sequence is empty
        InputError: if `kind` names no known alignment kind
    """

    def __init__(self, seq1: Sequence, seq2: Sequence, kind, schema: ScoringSchema):
        self.kind = AlignmentKind.from_name(kind)
        self.schema = schema
        self._engine = AlignmentEngine(seq1, seq2, self.kind, schema)
        self._result: Optional[AlignedPair] = None

    @property
    def seq1(self) -> Sequence:
        return self._engine.seq1

    @property
    def seq2(self) -> Sequence:
        return self._engine.seq2

    @property
    def is_done(self) -> bool:
        return self._result is not None

    def align(self) -> Tuple[int, AlignedPair]:
        """
        Fill the matrices and trace back the optimal alignment.

        Returns:
            Tuple of (score, aligned_pair)

        Raises:
            SessionError: if the session has already been run
        """
        if self._result is not None:
            raise SessionError("Alignment session has already been run")

        logger.debug(
            "Aligning %d x %d symbols (%s, %r)",
            len(self.seq1), len(self.seq2), self.kind.value, self.schema
        )
        self._result = self._engine.run()
        return self._result.score, self._result

    def score_matrix(self) -> np.ndarray:
        """Copy of the primary score matrix of a finished run."""
        if self._result is None:
            raise SessionError("Alignment session has not been run yet")
        return self._engine.score_matrix().to_numpy()


def build_schema(
    alphabet: Alphabet,
    matrix: str = 'BLOSUM62',
    gap_model: str = 'affine',
    gap_open: int = -10,
    gap_extend: Optional[int] = -1,
    match: int = 1,
    mismatch: int = -1
) -> ScoringSchema:
    """Scoring schema for a built-in alphabet from plain parameters."""
    scoring = {
        'matrix': matrix,
        'gap_model': gap_model,
        'gap_open': gap_open,
        'gap_extend': gap_extend,
        'match': match,
        'mismatch': mismatch,
    }
    return ScoringSchema.from_config(scoring, alphabet)


def align_sequences(
    text1: str,
    text2: str,
    alphabet='protein',
    kind='global',
    matrix: str = 'BLOSUM62',
    gap_model: str = 'affine',
    gap_open: int = -10,
    gap_extend: Optional[int] = -1,
    match: int = 1,
    mismatch: int = -1
) -> AlignedPair:
    """
    Parse two strings and align them in a fresh session.

    Args:
        text1, text2: Sequences as one-letter codes, any case
        alphabet: Alphabet instance or 'protein' / 'nucleotide'
        kind: 'global' or 'local'
        matrix: Substitution matrix name (protein only)
        gap_model: 'linear' or 'affine'
        gap_open: Gap opening cost, or the per-position cost when linear
        gap_extend: Gap extension cost (affine only)
        match, mismatch: Identity scores for non-protein alphabets

    Returns:
        The optimal AlignedPair
    """
    if not isinstance(alphabet, Alphabet):
        alphabet = get_alphabet(alphabet)

    seq1 = alphabet.parse(text1)
    seq2 = alphabet.parse(text2)
    schema = build_schema(
        alphabet,
        matrix=matrix,
        gap_model=gap_model,
        gap_open=gap_open,
        gap_extend=gap_extend,
        match=match,
        mismatch=mismatch,
    )
    _, aligned = AlignmentSession(seq1, seq2, kind, schema).align()
    return aligned


__all__ = ['AlignmentSession', 'build_schema', 'align_sequences']
