"""
Alphabets, symbols and sequences.

An alphabet is a finite, ordered set of hashable symbols. The position of a
symbol in its alphabet is the row/column it occupies in substitution tables.
Parsing raw text into symbols is case-insensitive and rejects empty strings,
non-ASCII characters and characters outside the alphabet.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Hashable, Iterable, Iterator, Optional, Tuple

from .exceptions import InputError, InputErrorKind, SeqErrorKind, SequenceError


class AminoAcid(Enum):
    """IUPAC amino acid codes. Represents the basic 20 amino acids."""
    A = 'A'
    C = 'C'
    D = 'D'
    E = 'E'
    F = 'F'
    G = 'G'
    H = 'H'
    I = 'I'
    K = 'K'
    L = 'L'
    M = 'M'
    N = 'N'
    P = 'P'
    Q = 'Q'
    R = 'R'
    S = 'S'
    T = 'T'
    V = 'V'
    W = 'W'
    Y = 'Y'

    def __str__(self) -> str:
        return self.value


class Nucleotide(Enum):
    """Unambiguous IUPAC nucleotide codes (DNA and RNA)."""
    A = 'A'
    C = 'C'
    G = 'G'
    T = 'T'
    U = 'U'

    def __str__(self) -> str:
        return self.value


def _default_char(symbol) -> str:
    return str(getattr(symbol, 'value', symbol))


class Alphabet:
    """
    Finite ordered set of symbols with a one-character code per symbol.

    Args:
        name: Alphabet name used in configuration and reports
        symbols: The symbols, in table order
        char_of: Maps a symbol to its single ASCII character code
    """

    def __init__(
        self,
        name: str,
        symbols: Iterable[Hashable],
        char_of: Optional[Callable[[Hashable], str]] = None
    ):
        self.name = name
        self.symbols: Tuple[Hashable, ...] = tuple(symbols)
        if not self.symbols:
            raise ValueError(f"Alphabet {name!r} has no symbols")

        self._char_of = char_of or _default_char
        self._index: Dict[Hashable, int] = {}
        self._by_char: Dict[str, Hashable] = {}

        for position, symbol in enumerate(self.symbols):
            if symbol in self._index:
                raise ValueError(f"Duplicate symbol {symbol!r} in alphabet {name!r}")
            code = self._char_of(symbol)
            if len(code) != 1 or not code.isascii():
                raise ValueError(f"Symbol {symbol!r} must map to a single ASCII character")
            key = code.upper()
            if key in self._by_char:
                raise ValueError(f"Code {code!r} is used twice in alphabet {name!r}")
            self._index[symbol] = position
            self._by_char[key] = symbol

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self._index

    def __repr__(self) -> str:
        return f"Alphabet({self.name!r}, size={len(self.symbols)})"

    def index(self, symbol) -> int:
        """Row/column of a symbol in substitution tables."""
        return self._index[symbol]

    def to_char(self, symbol) -> str:
        return self._char_of(symbol)

    def from_char(self, char_code: str):
        """
        Map a single character to its symbol. Case-insensitive.

        Raises:
            SequenceError: NON_ASCII or INVALID_CODE
        """
        if not char_code.isascii():
            raise SequenceError(SeqErrorKind.NON_ASCII, f"Found {char_code!r}.")
        try:
            return self._by_char[char_code.upper()]
        except KeyError:
            raise SequenceError(
                SeqErrorKind.INVALID_CODE,
                f"{char_code!r} is not part of the {self.name} alphabet."
            ) from None

    def parse(self, text: str, seq_id: Optional[str] = None) -> 'Sequence':
        """
        Build a Sequence from a string of character codes.

        Args:
            text: Characters of the alphabet, any case
            seq_id: Optional identifier kept on the sequence

        Returns:
            Sequence of symbols

        Raises:
            SequenceError: EMPTY_STRING, NON_ASCII or INVALID_CODE
        """
        if not text:
            raise SequenceError(SeqErrorKind.EMPTY_STRING)
        symbols = [self.from_char(c) for c in text]
        return Sequence(symbols, alphabet=self, seq_id=seq_id)


@dataclass(frozen=True)
class Sequence:
    """Immutable ordered sequence of alphabet symbols."""
    symbols: Tuple[Hashable, ...]
    alphabet: Optional[Alphabet] = field(default=None, compare=False)
    seq_id: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'symbols', tuple(self.symbols))

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.symbols)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Sequence(self.symbols[index], alphabet=self.alphabet, seq_id=self.seq_id)
        return self.symbols[index]

    def __str__(self) -> str:
        to_char = self.alphabet.to_char if self.alphabet is not None else _default_char
        return ''.join(to_char(s) for s in self.symbols)


PROTEIN = Alphabet('protein', AminoAcid)
NUCLEOTIDE = Alphabet('nucleotide', Nucleotide)

ALPHABETS = {
    PROTEIN.name: PROTEIN,
    NUCLEOTIDE.name: NUCLEOTIDE,
}


def get_alphabet(name: str) -> Alphabet:
    """Look up a built-in alphabet by name (case-insensitive)."""
    try:
        return ALPHABETS[str(name).lower()]
    except KeyError:
        raise InputError(InputErrorKind.ALPHABET_NOT_EXIST, name) from None


__all__ = [
    'AminoAcid',
    'Nucleotide',
    'Alphabet',
    'Sequence',
    'PROTEIN',
    'NUCLEOTIDE',
    'ALPHABETS',
    'get_alphabet',
]
