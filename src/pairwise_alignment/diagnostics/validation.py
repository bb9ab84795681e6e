"""
Configuration and input validation.
"""

import numbers
from typing import Dict, List, Optional, Tuple

from ..core.alignment import AlignmentKind
from ..core.alphabet import ALPHABETS, get_alphabet
from ..core.exceptions import InputError
from ..scoring.gap_penalty import GapModel
from ..scoring.substitution import SubstitutionMatrix

REQUIRED_SECTIONS = ['alignment', 'scoring']


def _check_cost(value, label: str, errors: List[str]):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        errors.append(f"{label} must be an integer, got {value!r}")
    elif not float(value).is_integer():
        errors.append(f"{label} must be an integer, got {value!r}")
    elif value > 0:
        errors.append(f"{label} should be zero or negative, got {value}")


def validate_configuration(config: Dict) -> Tuple[bool, List[str]]:
    """
    Validate alignment configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []

    for section in REQUIRED_SECTIONS:
        if section not in config:
            errors.append(f"Missing configuration section: {section}")

    align_config = config.get('alignment', {})
    try:
        AlignmentKind.from_name(align_config.get('mode', 'global'))
    except InputError:
        errors.append(f"Unknown alignment mode: {align_config.get('mode')!r}")

    alphabet_name = align_config.get('alphabet', 'protein')
    if str(alphabet_name).lower() not in ALPHABETS:
        errors.append(
            f"Unknown alphabet: {alphabet_name!r} (choose from {sorted(ALPHABETS)})"
        )
        alphabet_name = None

    scoring = config.get('scoring', {})
    if alphabet_name is not None and str(alphabet_name).lower() == 'protein':
        try:
            SubstitutionMatrix.from_name(scoring.get('matrix', 'BLOSUM62'))
        except InputError:
            errors.append(f"Unknown substitution matrix: {scoring.get('matrix')!r}")
    else:
        for key in ('match', 'mismatch'):
            value = scoring.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                errors.append(f"{key} must be an integer, got {value!r}")

    try:
        model = GapModel.from_name(scoring.get('gap_model', 'affine'))
    except InputError:
        errors.append(f"Unknown gap model: {scoring.get('gap_model')!r}")
        model = None

    _check_cost(scoring.get('gap_open', -10), "gap_open", errors)
    if model is GapModel.AFFINE and scoring.get('gap_extend') is not None:
        _check_cost(scoring['gap_extend'], "gap_extend", errors)

    width = config.get('io', {}).get('line_width', 50)
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        errors.append(f"line_width should be a positive integer, got {width!r}")

    return len(errors) == 0, errors


def validate_inputs(
    fasta1: Optional[str],
    fasta2: Optional[str],
    config: Dict
) -> Tuple[bool, List[str]]:
    """
    Validate the FASTA inputs of an alignment request.

    Args:
        fasta1: Path to first FASTA file, or None
        fasta2: Path to second FASTA file, or None
        config: Alignment configuration

    Returns:
        Tuple of (is_valid, error_messages)
    """
    from ..io.fasta_reader import validate_fasta_file

    errors = []
    alphabet = get_alphabet(config.get('alignment', {}).get('alphabet', 'protein'))

    for label, fasta in (("FASTA file 1", fasta1), ("FASTA file 2", fasta2)):
        if fasta is None:
            continue
        valid, msg = validate_fasta_file(fasta, alphabet)
        if not valid:
            errors.append(f"{label}: {msg}")

    return len(errors) == 0, errors


__all__ = [
    'validate_configuration',
    'validate_inputs',
]
