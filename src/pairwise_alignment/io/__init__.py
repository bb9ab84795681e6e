from .fasta_reader import (
    validate_fasta_file,
    read_fasta_sequence,
    read_fasta_file,
    write_fasta
)

from .results_writer import (
    format_report,
    write_summary,
    save_all_results
)

__all__ = [
    # Fasta reader functions
    'validate_fasta_file',
    'read_fasta_sequence',
    'read_fasta_file',
    'write_fasta',

    # Results writer functions
    'format_report',
    'write_summary',
    'save_all_results',
]
