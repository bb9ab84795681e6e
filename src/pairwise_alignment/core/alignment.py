"""
Alignment kinds and the aligned pair produced by traceback.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Iterator, Optional, Tuple

from .alphabet import Alphabet, _default_char
from .exceptions import InputError, InputErrorKind

# Gap marker inside aligned rows
GAP = None


class AlignmentKind(Enum):
    """Selects boundary initialization, recurrence floor and traceback rule."""
    GLOBAL = 'global'
    LOCAL = 'local'

    @classmethod
    def from_name(cls, name) -> 'AlignmentKind':
        """Accepts 'global'/'local' or the algorithm names."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace('-', '_')
        aliases = {
            'global': cls.GLOBAL,
            'needleman_wunsch': cls.GLOBAL,
            'nw': cls.GLOBAL,
            'local': cls.LOCAL,
            'smith_waterman': cls.LOCAL,
            'sw': cls.LOCAL,
        }
        try:
            return aliases[key]
        except KeyError:
            raise InputError(InputErrorKind.ALIGNER_NOT_EXIST, name) from None


@dataclass(frozen=True)
class AlignedPair:
    """
    Two equal-length rows of symbols or gaps, with the alignment score.

    start/end fields are 0-based half-open ranges of the input sequences
    covered by the alignment. For global alignments they span both inputs.
    """
    first: Tuple[Optional[Hashable], ...]
    second: Tuple[Optional[Hashable], ...]
    score: int
    kind: AlignmentKind
    start1: int = 0
    end1: int = 0
    start2: int = 0
    end2: int = 0
    alphabet: Optional[Alphabet] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'first', tuple(self.first))
        object.__setattr__(self, 'second', tuple(self.second))
        if len(self.first) != len(self.second):
            raise ValueError(
                f"Aligned rows differ in length: {len(self.first)} != {len(self.second)}"
            )

    def __len__(self) -> int:
        return len(self.first)

    def columns(self) -> Iterator[Tuple[Optional[Hashable], Optional[Hashable]]]:
        return zip(self.first, self.second)

    def ungapped(self) -> Tuple[Tuple[Hashable, ...], Tuple[Hashable, ...]]:
        """Both rows with gap markers removed."""
        return (
            tuple(s for s in self.first if s is not GAP),
            tuple(s for s in self.second if s is not GAP),
        )

    def aligned_strings(self, gap_char: str = '-') -> Tuple[str, str]:
        """Rows rendered as plain strings."""
        to_char = self.alphabet.to_char if self.alphabet is not None else _default_char

        def render(row):
            return ''.join(gap_char if s is GAP else to_char(s) for s in row)

        return render(self.first), render(self.second)

    def __str__(self) -> str:
        from .utilities import format_alignment
        return format_alignment(self)


__all__ = ['GAP', 'AlignmentKind', 'AlignedPair']
