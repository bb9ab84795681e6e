import copy
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from ..config.config_loader import DEFAULT_CONFIG_PATH, merge_config, reload_config
from ..core.alphabet import get_alphabet
from ..core.exceptions import AlignmentError
from ..diagnostics.validation import validate_configuration, validate_inputs
from ..io.fasta_reader import read_fasta_sequence
from ..io.results_writer import format_report, save_all_results
from ..scoring.schema import ScoringSchema
from .session import AlignmentSession


def load_config(config_path: str = None) -> Dict[str, Any]:
    """
    Load configuration into the shared config loader and return a copy.
    Fails if file does not exist.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = copy.deepcopy(reload_config(str(config_path)).config)
    config['_source'] = str(config_path.resolve())
    return config


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """Setup logging configuration."""
    log_level_str = config.get('debug', {}).get('log_level', 'INFO')
    log_level = getattr(logging, str(log_level_str).upper(), logging.INFO)

    logger = logging.getLogger('pairwise_alignment')
    logger.setLevel(log_level)

    # Close and remove existing handlers
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # File handler, only when a log directory is configured
    log_dir = config.get('logging', {}).get('log_dir')
    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / 'alignment.log')
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def load_input_sequence(input_config: Dict[str, Any], which: int) -> Tuple[str, str]:
    """
    Resolve one input sequence from the `input` section.

    A literal `seq<which>` wins over `fasta<which>`; FASTA records are picked
    by `id<which>` or default to the first record.

    Returns:
        Tuple of (name, sequence_text)
    """
    literal = input_config.get(f'seq{which}')
    if literal is not None:
        return input_config.get(f'id{which}') or f"seq{which}", literal

    fasta = input_config.get(f'fasta{which}')
    if fasta is None:
        raise ValueError(f"No sequence {which} given (use --seq{which} or --fasta{which})")
    return read_fasta_sequence(fasta, sequence_id=input_config.get(f'id{which}'))


def run_alignment(config: Dict[str, Any], logger: logging.Logger) -> int:
    """
    Core alignment logic.

    Args:
        config: Configuration dictionary
        logger: Logger instance

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    is_valid, errors = validate_configuration(config)
    if not is_valid:
        for error in errors:
            logger.error(f"Configuration error: {error}")
        return 1

    input_config = config.get('input', {})
    is_valid, errors = validate_inputs(
        input_config.get('fasta1') if input_config.get('seq1') is None else None,
        input_config.get('fasta2') if input_config.get('seq2') is None else None,
        config
    )
    if not is_valid:
        for error in errors:
            logger.error(f"Validation error: {error}")
        return 1

    try:
        alphabet = get_alphabet(config['alignment']['alphabet'])
        name1, text1 = load_input_sequence(input_config, 1)
        name2, text2 = load_input_sequence(input_config, 2)

        seq1 = alphabet.parse(text1, seq_id=name1)
        seq2 = alphabet.parse(text2, seq_id=name2)
        schema = ScoringSchema.from_config(config['scoring'], alphabet)
        mode = config['alignment']['mode']

        logger.info(f"Aligning {name1} ({len(seq1)}) vs {name2} ({len(seq2)})")
        logger.info(f"Mode: {mode}, alphabet: {alphabet.name}, scoring: {schema!r}")

        start = time.perf_counter()
        score, aligned = AlignmentSession(seq1, seq2, mode, schema).align()
        elapsed = time.perf_counter() - start
        logger.info(f"Alignment finished in {elapsed:.3f}s with score {score}")

        width = config.get('io', {}).get('line_width', 50)
        print(format_report(aligned, name1, name2, width=width))

        output_dir = config.get('io', {}).get('output_dir')
        if output_dir:
            saved = save_all_results(
                aligned, name1, name2,
                output_dir=output_dir,
                config=config,
                width=width
            )
            for kind, path in saved.items():
                logger.info(f"Saved {kind}: {path}")

        return 0

    except (AlignmentError, ValueError, KeyError, IndexError, OSError) as e:
        logger.error(f"Alignment failed: {e}", exc_info=config.get('debug', {}).get('verbose', False))
        return 1


def main(config_path: Optional[str] = None, overrides: Optional[Dict] = None) -> int:
    """Main alignment entry point."""
    # Load configuration
    try:
        config = load_config(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR loading configuration: {e}")
        return 1

    # Apply overrides
    config = merge_config(config, overrides)

    logger = setup_logging(config)
    logger.debug(f"Configuration loaded from {config.get('_source', 'default')}")

    return run_alignment(config, logger)

