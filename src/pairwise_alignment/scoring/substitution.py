"""
Substitution tables: total symbol x symbol -> integer score lookups.
"""

from enum import Enum
from functools import lru_cache
from typing import Dict, Hashable, Mapping, Tuple

import numpy as np
from Bio.Align import substitution_matrices

from ..core.alphabet import PROTEIN, Alphabet
from ..core.exceptions import InputError, InputErrorKind, ScoringError
from . import matrices


class SubstitutionTable:
    """
    Dense integer table indexed by alphabet position.

    Args:
        name: Table name used in reports
        alphabet: Alphabet whose order defines rows and columns
        scores: len(alphabet) x len(alphabet) integer array
    """

    def __init__(self, name: str, alphabet: Alphabet, scores: np.ndarray):
        scores = np.asarray(scores)
        size = len(alphabet)
        if scores.shape != (size, size):
            raise ScoringError(
                f"Table {name!r} has shape {scores.shape}, expected {(size, size)}"
            )
        if not np.issubdtype(scores.dtype, np.integer):
            raise ScoringError(f"Table {name!r} must hold integer scores")

        self.name = name
        self.alphabet = alphabet
        self._scores = scores.astype(np.int64)
        self._scores.setflags(write=False)

    def score(self, a: Hashable, b: Hashable) -> int:
        try:
            return int(self._scores[self.alphabet.index(a), self.alphabet.index(b)])
        except KeyError as e:
            raise ScoringError(
                f"Symbol {e.args[0]!r} is not part of the {self.alphabet.name} alphabet"
            ) from None

    def min_score(self) -> int:
        return int(self._scores.min())

    def max_score(self) -> int:
        return int(self._scores.max())

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self._scores, self._scores.T))

    def to_numpy(self) -> np.ndarray:
        return self._scores.copy()

    def __repr__(self) -> str:
        return f"SubstitutionTable({self.name!r}, alphabet={self.alphabet.name!r})"

    @classmethod
    def from_mapping(
        cls,
        name: str,
        alphabet: Alphabet,
        mapping: Mapping[Tuple[Hashable, Hashable], int]
    ) -> 'SubstitutionTable':
        """
        Build a table from {(a, b): score}. Keys may be symbols or their
        character codes. Every ordered pair must be present.
        """
        size = len(alphabet)
        scores = np.zeros((size, size), dtype=np.int64)
        missing = []

        for a in alphabet:
            for b in alphabet:
                key_options = (
                    (a, b),
                    (alphabet.to_char(a), alphabet.to_char(b)),
                )
                for key in key_options:
                    if key in mapping:
                        scores[alphabet.index(a), alphabet.index(b)] = int(mapping[key])
                        break
                else:
                    missing.append((alphabet.to_char(a), alphabet.to_char(b)))

        if missing:
            shown = ', '.join(f"{x}{y}" for x, y in missing[:5])
            raise ScoringError(
                f"Table {name!r} is incomplete: {len(missing)} pairs missing ({shown})"
            )
        return cls(name, alphabet, scores)

    @classmethod
    def match_mismatch(
        cls,
        alphabet: Alphabet,
        match: int = 1,
        mismatch: int = -1,
        name: str = None
    ) -> 'SubstitutionTable':
        """Identity scoring: `match` on the diagonal, `mismatch` elsewhere."""
        size = len(alphabet)
        scores = np.full((size, size), int(mismatch), dtype=np.int64)
        np.fill_diagonal(scores, int(match))
        return cls(name or f"match{match}/mismatch{mismatch}", alphabet, scores)


@lru_cache(maxsize=None)
def _load_table(name: str) -> SubstitutionTable:
    if hasattr(matrices, name):
        scores: Dict[Tuple[str, str], int] = matrices.parse_lower_triangle(getattr(matrices, name))
    else:
        loaded = substitution_matrices.load(name)
        codes = [PROTEIN.to_char(symbol) for symbol in PROTEIN]
        scores = {(a, b): int(loaded[a, b]) for a in codes for b in codes}
    return SubstitutionTable.from_mapping(name, PROTEIN, scores)


class SubstitutionMatrix(Enum):
    """Built-in amino acid substitution matrices."""
    BLOSUM45 = 'BLOSUM45'
    BLOSUM62 = 'BLOSUM62'
    PAM160 = 'PAM160'

    @property
    def table(self) -> SubstitutionTable:
        return _load_table(self.value)

    @classmethod
    def from_name(cls, name) -> 'SubstitutionMatrix':
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().upper())
        except ValueError:
            raise InputError(InputErrorKind.SCORING_MATRIX_NOT_EXIST, name) from None


__all__ = ['SubstitutionTable', 'SubstitutionMatrix']
