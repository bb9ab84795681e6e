"""
Dynamic-programming alignment engine.

Needleman-Wunsch (global) and Smith-Waterman (local) under a linear or an
affine gap model. Linear gaps use a single score matrix whose pointers name
the move that produced each cell. Affine gaps use three matrices:

    M[i][j]  = max(M[i-1][j-1], Ix[i-1][j-1], Iy[i-1][j-1]) + score(a_i, b_j)
    Ix[i][j] = max(M[i-1][j] + open, Ix[i-1][j] + extend, Iy[i-1][j] + open)
    Iy[i][j] = max(M[i][j-1] + open, Ix[i][j-1] + open, Iy[i][j-1] + extend)

Ix ends in a gap consuming seq1 (an UP move), Iy in a gap consuming seq2 (a
LEFT move). Each affine matrix keeps its own pointer grid whose pointers
name the predecessor matrix: DIAGONAL for M, UP for Ix, LEFT for Iy.
"""

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..core.alignment import GAP, AlignedPair, AlignmentKind
from ..core.alphabet import Sequence
from ..core.exceptions import AlignmentError, EmptySequenceError, ScoringError
from ..core.grid import Grid
from ..scoring.schema import ScoringSchema
from .backtrack import Backtrack, choose, floor_at_zero

logger = logging.getLogger(__name__)

# Scores are held in int64 matrices
SCORE_LIMIT = 2**62


class AlignmentEngine:
    """
    Builds the score matrices for one pair of sequences and walks them back.

    Args:
        seq1: Sequence laid along the rows
        seq2: Sequence laid along the columns
        kind: AlignmentKind.GLOBAL or AlignmentKind.LOCAL
        schema: Substitution table and gap model

    Raises:
        EmptySequenceError: if either sequence is empty
        ScoringError: if a symbol is outside the schema's alphabet, or the
            scores cannot be held in 64-bit matrices
    """

    def __init__(
        self,
        seq1: Sequence,
        seq2: Sequence,
        kind: AlignmentKind,
        schema: ScoringSchema
    ):
        if len(seq1) == 0 or len(seq2) == 0:
            raise EmptySequenceError(
                f"Cannot align empty sequences (lengths {len(seq1)} and {len(seq2)})"
            )
        for seq in (seq1, seq2):
            for symbol in seq:
                if symbol not in schema.alphabet:
                    raise ScoringError(
                        f"Symbol {symbol!r} is not part of the {schema.alphabet.name} alphabet"
                    )
        self.neg_inf = self._unreachable_score(len(seq1) + len(seq2), schema)

        self.seq1 = seq1
        self.seq2 = seq2
        self.kind = kind
        self.schema = schema
        self.rows = len(seq1) + 1
        self.cols = len(seq2) + 1

        self._scores: Dict[Backtrack, Grid] = {}
        self._pointers: Dict[Backtrack, Grid] = {}

    @staticmethod
    def _unreachable_score(span: int, schema: ScoringSchema) -> int:
        """
        Score for cells no path reaches.

        A path has at most `span` steps, so every reachable cell scores at
        least span * (worst step). The sentinel sits below that even after
        `span` best-case gains are added to it.
        """
        table = schema.substitution
        worst = min(table.min_score(), schema.gap_open(), schema.gap_extend(), 0)
        best = max(table.max_score(), 0)
        neg_inf = span * (worst - best) - 1
        if neg_inf + span * worst < -SCORE_LIMIT:
            raise ScoringError(
                f"Scores of {schema!r} over {span} symbols do not fit in 64-bit matrices"
            )
        return neg_inf

    @property
    def is_local(self) -> bool:
        return self.kind is AlignmentKind.LOCAL

    @property
    def is_filled(self) -> bool:
        return bool(self._scores)

    def fill(self):
        """Build the score and pointer matrices."""
        logger.debug(
            "Filling %s %s matrices of %dx%d",
            self.kind.value,
            'affine' if self.schema.is_affine else 'linear',
            self.rows, self.cols
        )
        if self.schema.is_affine:
            self._fill_affine()
        else:
            self._fill_linear()

    def score_matrix(self) -> Grid:
        """Primary score matrix (S for linear gaps, M for affine)."""
        if not self.is_filled:
            raise AlignmentError("Matrices have not been filled yet")
        return self._scores[Backtrack.DIAGONAL]

    def pointer_matrix(self, state: Backtrack = Backtrack.DIAGONAL) -> Grid:
        """Pointer grid of one matrix; values are Backtrack codes."""
        if not self.is_filled:
            raise AlignmentError("Matrices have not been filled yet")
        return self._pointers[state]

    def _fill_linear(self):
        rows, cols = self.rows, self.cols
        seq1, seq2 = self.seq1, self.seq2
        score = self.schema.score
        gap = self.schema.gap_open()
        local = self.is_local

        S = Grid(rows, cols, 0)
        P = Grid(rows, cols, Backtrack.STOP)

        if not local:
            for i in range(1, rows):
                S.set(i, 0, i * gap)
                P.set(i, 0, Backtrack.UP)
            for j in range(1, cols):
                S.set(0, j, j * gap)
                P.set(0, j, Backtrack.LEFT)

        for i in range(1, rows):
            a = seq1[i - 1]
            for j in range(1, cols):
                best, pointer = choose(
                    S.get(i - 1, j - 1) + score(a, seq2[j - 1]),
                    S.get(i - 1, j) + gap,
                    S.get(i, j - 1) + gap,
                )
                if local:
                    best, pointer = floor_at_zero(best, pointer)
                S.set(i, j, best)
                P.set(i, j, pointer)

        self._scores = {Backtrack.DIAGONAL: S}
        self._pointers = {Backtrack.DIAGONAL: P}

    def _fill_affine(self):
        rows, cols = self.rows, self.cols
        seq1, seq2 = self.seq1, self.seq2
        score = self.schema.score
        gap_open = self.schema.gap_open()
        gap_extend = self.schema.gap_extend()
        local = self.is_local

        M = Grid(rows, cols, self.neg_inf)
        Ix = Grid(rows, cols, self.neg_inf)
        Iy = Grid(rows, cols, self.neg_inf)
        PM = Grid(rows, cols, Backtrack.STOP)
        PX = Grid(rows, cols, Backtrack.STOP)
        PY = Grid(rows, cols, Backtrack.STOP)

        M.set(0, 0, 0)
        if local:
            for i in range(1, rows):
                M.set(i, 0, 0)
            for j in range(1, cols):
                M.set(0, j, 0)
        else:
            for i in range(1, rows):
                Ix.set(i, 0, self.schema.gap_penalty(i))
                PX.set(i, 0, Backtrack.DIAGONAL if i == 1 else Backtrack.UP)
            for j in range(1, cols):
                Iy.set(0, j, self.schema.gap_penalty(j))
                PY.set(0, j, Backtrack.DIAGONAL if j == 1 else Backtrack.LEFT)

        for i in range(1, rows):
            a = seq1[i - 1]
            for j in range(1, cols):
                best, pointer = choose(
                    M.get(i - 1, j - 1),
                    Ix.get(i - 1, j - 1),
                    Iy.get(i - 1, j - 1),
                )
                best += score(a, seq2[j - 1])
                if local:
                    best, pointer = floor_at_zero(best, pointer)
                M.set(i, j, best)
                PM.set(i, j, pointer)

                best, pointer = choose(
                    M.get(i - 1, j) + gap_open,
                    Ix.get(i - 1, j) + gap_extend,
                    Iy.get(i - 1, j) + gap_open,
                )
                Ix.set(i, j, best)
                PX.set(i, j, pointer)

                best, pointer = choose(
                    M.get(i, j - 1) + gap_open,
                    Ix.get(i, j - 1) + gap_open,
                    Iy.get(i, j - 1) + gap_extend,
                )
                Iy.set(i, j, best)
                PY.set(i, j, pointer)

        self._scores = {Backtrack.DIAGONAL: M, Backtrack.UP: Ix, Backtrack.LEFT: Iy}
        self._pointers = {Backtrack.DIAGONAL: PM, Backtrack.UP: PX, Backtrack.LEFT: PY}

    def start_cell(self) -> Tuple[Backtrack, int, int, int]:
        """
        Locate where traceback begins.

        Global: the bottom-right cell, in the matrix holding the best score
        there (ties M > Ix > Iy). Local: the maximum of the primary matrix,
        first occurrence in row-major order.

        Returns:
            Tuple of (state, row, col, score)
        """
        if not self.is_filled:
            raise AlignmentError("Matrices have not been filled yet")

        if self.is_local:
            primary = self._scores[Backtrack.DIAGONAL].to_numpy()
            flat = int(np.argmax(primary))
            i, j = divmod(flat, self.cols)
            return Backtrack.DIAGONAL, i, j, int(primary[i, j])

        i, j = self.rows - 1, self.cols - 1
        if not self.schema.is_affine:
            return Backtrack.DIAGONAL, i, j, self._scores[Backtrack.DIAGONAL].get(i, j)

        best, state = choose(
            self._scores[Backtrack.DIAGONAL].get(i, j),
            self._scores[Backtrack.UP].get(i, j),
            self._scores[Backtrack.LEFT].get(i, j),
        )
        return state, i, j, best

    def traceback(self) -> AlignedPair:
        """Walk the pointers from the start cell and build the aligned pair."""
        state, i, j, score = self.start_cell()
        logger.debug("Traceback from (%d, %d) in state %s, score %d", i, j, state.name, score)
        end_i, end_j = i, j

        first: List[Optional[object]] = []
        second: List[Optional[object]] = []
        affine = self.schema.is_affine
        max_steps = self.rows + self.cols

        for _ in range(max_steps + 1):
            # Pointer grids store the enum as int64
            pointer = Backtrack(self._pointers[state].get(i, j))
            if pointer is Backtrack.STOP:
                break
            # Linear pointers name the move; affine pointers name the next matrix
            move = state if affine else pointer
            if move is Backtrack.DIAGONAL:
                first.append(self.seq1[i - 1])
                second.append(self.seq2[j - 1])
            elif move is Backtrack.UP:
                first.append(self.seq1[i - 1])
                second.append(GAP)
            else:
                first.append(GAP)
                second.append(self.seq2[j - 1])
            di, dj = move.delta
            i, j = i - di, j - dj
            if affine:
                state = pointer
        else:
            raise AlignmentError(f"Traceback did not terminate after {max_steps} steps")

        first.reverse()
        second.reverse()

        return AlignedPair(
            first=first,
            second=second,
            score=score,
            kind=self.kind,
            start1=i,
            end1=end_i,
            start2=j,
            end2=end_j,
            alphabet=self.seq1.alphabet or self.schema.alphabet,
        )

    def run(self) -> AlignedPair:
        self.fill()
        return self.traceback()


__all__ = ['AlignmentEngine', 'SCORE_LIMIT']
