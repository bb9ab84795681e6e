"""
Command-line interface for pairwise alignment.
"""

import sys
import argparse
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pairwise-align',
        description="Pairwise sequence alignment - global (Needleman-Wunsch) or local (Smith-Waterman) with linear or affine gaps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Global protein alignment with BLOSUM62 and affine gaps
  %(prog)s --seq1 HEAGAWGHEE --seq2 PAWHEAE

  # Local alignment with PAM160
  %(prog)s --seq1 HEAGAWGHEE --seq2 PAWHEAE --mode local --matrix PAM160

  # Nucleotide alignment with a linear gap cost
  %(prog)s --seq1 GATTACA --seq2 GCATGCU --alphabet nucleotide --gap-model linear --gap-open -1

  # Align records from FASTA files and save the results
  %(prog)s --fasta1 a.fa --fasta2 b.fa --id2 P69905 --output-dir Results
        """
    )

    # Inputs
    parser.add_argument('--seq1', type=str, help='First sequence as one-letter codes')
    parser.add_argument('--seq2', type=str, help='Second sequence as one-letter codes')
    parser.add_argument('--fasta1', type=str, help='FASTA file holding the first sequence')
    parser.add_argument('--fasta2', type=str, help='FASTA file holding the second sequence')
    parser.add_argument('--id1', type=str, help='Record id in --fasta1 (default: first record)')
    parser.add_argument('--id2', type=str, help='Record id in --fasta2 (default: first record)')

    # Alignment
    parser.add_argument(
        '--alphabet',
        choices=['protein', 'nucleotide'],
        help='Sequence alphabet'
    )
    parser.add_argument(
        '--mode',
        choices=['global', 'local'],
        help='Global (Needleman-Wunsch) or local (Smith-Waterman) alignment'
    )

    # Scoring
    parser.add_argument(
        '--matrix',
        choices=['BLOSUM45', 'BLOSUM62', 'PAM160'],
        help='Substitution matrix for protein alignments'
    )
    parser.add_argument('--match', type=int, help='Identity score for nucleotide alignments')
    parser.add_argument('--mismatch', type=int, help='Mismatch score for nucleotide alignments')
    parser.add_argument(
        '--gap-model',
        choices=['linear', 'affine'],
        help='Gap penalty model'
    )
    parser.add_argument(
        '--gap-open',
        type=int,
        help='Gap opening cost (zero or negative); per-position cost when linear'
    )
    parser.add_argument(
        '--gap-extend',
        type=int,
        help='Gap extension cost (zero or negative)'
    )

    # Configuration and output
    parser.add_argument('--config', type=str, help='Path to configuration YAML file')
    parser.add_argument('--output-dir', type=str, help='Save JSON, summary and FASTA results here')
    parser.add_argument('--width', type=int, help='Columns per block in the printed alignment')

    parser.add_argument('--version', action='store_true', help='Show version information')

    # Debug
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')

    return parser


def build_overrides(args: argparse.Namespace) -> dict:
    """Translate parsed arguments into configuration overrides."""
    config_overrides = {}

    def put(section, key, value):
        if value is not None:
            config_overrides.setdefault(section, {})[key] = value

    put('input', 'seq1', args.seq1)
    put('input', 'seq2', args.seq2)
    put('input', 'fasta1', args.fasta1)
    put('input', 'fasta2', args.fasta2)
    put('input', 'id1', args.id1)
    put('input', 'id2', args.id2)

    put('alignment', 'alphabet', args.alphabet)
    put('alignment', 'mode', args.mode)

    put('scoring', 'matrix', args.matrix)
    put('scoring', 'match', args.match)
    put('scoring', 'mismatch', args.mismatch)
    put('scoring', 'gap_model', args.gap_model)
    put('scoring', 'gap_open', args.gap_open)
    put('scoring', 'gap_extend', args.gap_extend)

    put('io', 'output_dir', args.output_dir)
    put('io', 'line_width', args.width)

    if args.verbose:
        put('debug', 'verbose', True)
    if args.debug:
        put('debug', 'log_level', 'DEBUG')

    return config_overrides


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from ..diagnostics.version_checker import print_version_report
        print_version_report()
        return 0

    if args.seq1 is None and args.fasta1 is None:
        parser.error("one of --seq1 or --fasta1 is required")
    if args.seq2 is None and args.fasta2 is None:
        parser.error("one of --seq2 or --fasta2 is required")

    for fasta in (args.fasta1, args.fasta2):
        if fasta is not None and not Path(fasta).exists():
            print(f"ERROR: FASTA file not found: {fasta}", file=sys.stderr)
            return 1

    from ..pipeline.main_pipeline import main as pipeline_main

    try:
        return pipeline_main(config_path=args.config, overrides=build_overrides(args))
    except Exception as e:
        print(f"Alignment failed: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
