"""
FASTA input for alignment requests.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from ..core.alphabet import Alphabet


def validate_fasta_file(filepath: str, alphabet: Optional[Alphabet] = None) -> Tuple[bool, str]:
    """
    Validate if a file is a valid FASTA file.

    Args:
        filepath: Path to the FASTA file
        alphabet: When given, every residue must be a code of this alphabet

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not os.path.exists(filepath):
        return False, f"File does not exist: {filepath}"

    if not os.path.isfile(filepath):
        return False, f"Not a file: {filepath}"

    if os.path.getsize(filepath) == 0:
        return False, f"File is empty: {filepath}"

    try:
        with open(filepath, 'r') as f:
            first_line = f.readline().strip()
            if not first_line.startswith('>'):
                return False, f"File does not start with '>' character: {filepath}"
    except UnicodeDecodeError:
        return False, f"File is not a valid text file: {filepath}"

    try:
        records = list(SeqIO.parse(filepath, "fasta"))
    except ValueError as e:
        return False, f"Error parsing FASTA file: {e}"

    if len(records) == 0:
        return False, f"No sequences found in file: {filepath}"

    valid_chars = None
    if alphabet is not None:
        valid_chars = {alphabet.to_char(s).upper() for s in alphabet}

    for i, record in enumerate(records):
        if len(record.seq) == 0:
            return False, f"Sequence {i+1} is empty in file: {filepath}"

        if valid_chars is not None:
            invalid_chars = set(str(record.seq).upper()) - valid_chars
            if invalid_chars:
                return False, (
                    f"Sequence {i+1} contains characters outside the "
                    f"{alphabet.name} alphabet: {sorted(invalid_chars)}"
                )

    return True, f"Valid FASTA file with {len(records)} sequence(s)"


def read_fasta_sequence(
    filepath: str,
    sequence_index: int = 0,
    sequence_id: Optional[str] = None
) -> Tuple[str, str]:
    """
    Read a specific sequence from a FASTA file.

    Args:
        filepath: Path to FASTA file
        sequence_index: Index of sequence to read (0-based)
        sequence_id: Record identifier; takes precedence over the index

    Returns:
        Tuple of (sequence_id, sequence)
    """
    records = list(SeqIO.parse(filepath, "fasta"))

    if sequence_id is not None:
        for record in records:
            if record.id == sequence_id:
                return record.id, str(record.seq)
        raise KeyError(f"Sequence {sequence_id!r} not found in {filepath}")

    if sequence_index >= len(records):
        raise IndexError(f"Sequence index {sequence_index} out of bounds. "
                         f"File contains {len(records)} sequences.")

    record = records[sequence_index]
    return record.id, str(record.seq)


def read_fasta_file(filepath: str) -> Dict[str, str]:
    """
    Read all sequences from a FASTA file.

    Returns:
        Dictionary with sequence IDs as keys and sequences as values
    """
    records = list(SeqIO.parse(filepath, "fasta"))
    if not records:
        raise ValueError(f"No sequences found in file: {filepath}")
    return {record.id: str(record.seq) for record in records}


def write_fasta(filepath: str, sequences: Dict[str, str], description: str = ""):
    """
    Write sequences to a FASTA file.

    Args:
        filepath: Path to output FASTA file
        sequences: Dictionary with sequence IDs as keys and sequences as values
        description: Description added to every header line
    """
    records = [
        SeqRecord(Seq(seq), id=seq_id, description=description)
        for seq_id, seq in sequences.items()
    ]
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, 'w') as output_handle:
        SeqIO.write(records, output_handle, "fasta")


__all__ = [
    'validate_fasta_file',
    'read_fasta_sequence',
    'read_fasta_file',
    'write_fasta',
]
