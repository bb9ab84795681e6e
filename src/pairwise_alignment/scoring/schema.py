"""
Scoring schema: a substitution table paired with a gap penalty model.
"""

from typing import Any, Dict, Hashable, Optional

from ..core.alphabet import Alphabet, get_alphabet
from .gap_penalty import GapPenalty, make_gap_penalty
from .substitution import SubstitutionMatrix, SubstitutionTable


class ScoringSchema:
    """
    Parametrizes the alignment recurrences.

    Args:
        substitution: Total table over the alphabet of the sequences
        gap: Linear or Affine gap penalty
    """

    def __init__(self, substitution: SubstitutionTable, gap: GapPenalty):
        self.substitution = substitution
        self.gap = gap

    @property
    def alphabet(self) -> Alphabet:
        return self.substitution.alphabet

    def score(self, a: Hashable, b: Hashable) -> int:
        return self.substitution.score(a, b)

    def gap_open(self) -> int:
        return self.gap.gap_open

    def gap_extend(self) -> int:
        return self.gap.gap_extend

    def gap_penalty(self, length: int) -> int:
        return self.gap.penalty(length)

    @property
    def is_affine(self) -> bool:
        return self.gap.is_affine

    def __repr__(self) -> str:
        return f"ScoringSchema({self.substitution.name!r}, {self.gap!r})"

    @classmethod
    def from_config(
        cls,
        scoring: Dict[str, Any],
        alphabet: Optional[Alphabet] = None
    ) -> 'ScoringSchema':
        """
        Build a schema from the `scoring` configuration section.

        Protein alphabets use the named matrix; any other alphabet uses
        match/mismatch identity scoring.
        """
        if alphabet is None:
            alphabet = get_alphabet(scoring.get('alphabet', 'protein'))

        if alphabet.name == 'protein':
            table = SubstitutionMatrix.from_name(scoring.get('matrix', 'BLOSUM62')).table
        else:
            table = SubstitutionTable.match_mismatch(
                alphabet,
                match=scoring.get('match', 1),
                mismatch=scoring.get('mismatch', -1),
            )

        gap = make_gap_penalty(
            scoring.get('gap_model', 'affine'),
            scoring.get('gap_open', -10),
            scoring.get('gap_extend', -1),
        )
        return cls(table, gap)


__all__ = ['ScoringSchema']
