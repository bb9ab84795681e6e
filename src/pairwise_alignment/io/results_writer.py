"""
Results writing utilities for pairwise alignment.
"""

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.alignment import AlignedPair
from ..core.utilities import (
    DEFAULT_LINE_WIDTH,
    build_cigar,
    compute_alignment_stats,
    format_alignment
)
from .fasta_reader import write_fasta

_CIGAR_OPS = {
    'I': 'Insertion',
    'D': 'Deletion',
    'X': 'Mismatch',
    '=': 'Exact Match',
}


def format_report(
    aligned: AlignedPair,
    name1: str = "seq1",
    name2: str = "seq2",
    width: int = DEFAULT_LINE_WIDTH
) -> str:
    """
    Human-readable report: score, ranges, identity and the wrapped alignment.
    """
    row1, row2 = aligned.aligned_strings()
    stats = compute_alignment_stats(row1, row2)

    lines = [
        f"{aligned.kind.value.capitalize()} alignment of {name1} vs {name2}",
        f"Score: {aligned.score}",
        f"Length: {len(aligned)}",
        f"{name1} range: [{aligned.start1}, {aligned.end1})",
        f"{name2} range: [{aligned.start2}, {aligned.end2})",
        f"Identity: {stats['identity']*100:.2f}% "
        f"({stats['matches']}/{stats['total_aligned']})",
        f"Gaps: {stats['total_gaps']} in {stats['gap_openings']} run(s)",
        "",
    ]
    if len(aligned):
        lines.append(format_alignment(aligned, width=width))
    else:
        lines.append("(empty alignment)")
    return '\n'.join(lines)


def write_summary(path: str, stats: Dict, cigar: str, total_score: int, alignment_text: str = ""):
    """Write comprehensive alignment summary."""
    with open(path, "w") as f:
        f.write("="*60 + "\n")
        f.write("ALIGNMENT SUMMARY\n")
        f.write("="*60 + "\n\n")

        f.write(f"Total Score: {total_score}\n\n")

        f.write("Alignment Statistics:\n")
        f.write("-"*40 + "\n")
        for key, value in stats.items():
            if key == 'identity':
                f.write(f"{key.replace('_', ' ').title()}: {value*100:.2f}%\n")
            else:
                f.write(f"{key.replace('_', ' ').title()}: {value}\n")

        f.write("\nCIGAR String:\n")
        f.write("-"*40 + "\n")
        f.write(f"{cigar}\n")

        f.write("\nCIGAR Operations:\n")
        f.write("-"*40 + "\n")
        for count, op in re.findall(r'(\d+)([IDX=])', cigar):
            f.write(f"  {count} {_CIGAR_OPS[op]}\n")

        if alignment_text:
            f.write("\nAlignment:\n")
            f.write("-"*40 + "\n")
            f.write(f"{alignment_text}\n")

        f.write("\n" + "="*60 + "\n")
        f.write("END OF SUMMARY\n")
        f.write("="*60 + "\n")


def safe_file_name(text: str) -> str:
    """Replace characters that cannot appear in a file name."""
    return re.sub(r'[^\w.-]', '_', text)


def save_all_results(
    aligned: AlignedPair,
    name1: str = "seq1",
    name2: str = "seq2",
    output_dir: str = "Results",
    base_name: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
    width: int = DEFAULT_LINE_WIDTH
) -> Dict[str, str]:
    """
    Save alignment results as a JSON document, a text summary and a gapped FASTA.

    Args:
        aligned: Alignment to save
        name1: Display name of the first sequence
        name2: Display name of the second sequence
        output_dir: Base output directory
        base_name: Optional file prefix; defaults to "<name1>_vs_<name2>"
        config: Optional configuration recorded in the JSON document
        width: Columns per block in the text alignment

    Returns:
        Dictionary of saved file paths
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    file_prefix = safe_file_name(base_name or f"{name1}_vs_{name2}")
    row1, row2 = aligned.aligned_strings()
    stats = compute_alignment_stats(row1, row2)
    cigar = build_cigar(row1, row2)

    saved_files = {}

    summary_path = output_path / f"{file_prefix}_summary.txt"
    alignment_text = format_alignment(aligned, width=width) if len(aligned) else ""
    write_summary(str(summary_path), stats, cigar, aligned.score, alignment_text)
    saved_files['summary'] = str(summary_path)

    json_path = output_path / f"{file_prefix}_results.json"
    json_results = {
        'metadata': {
            'timestamp': datetime.now().isoformat(),
            'sequence1_name': name1,
            'sequence2_name': name2,
            'kind': aligned.kind.value,
            'total_score': aligned.score,
            'base_name': file_prefix,
        },
        'statistics': stats,
        'alignment': {
            'sequence1': row1,
            'sequence2': row2,
            'cigar': cigar,
            'length': len(aligned),
            'range1': [aligned.start1, aligned.end1],
            'range2': [aligned.start2, aligned.end2],
        }
    }
    if config:
        json_results['configuration'] = {
            k: v for k, v in config.items()
            if k not in ['_source'] and not k.startswith('__')
        }

    with open(json_path, 'w') as f:
        json.dump(json_results, f, indent=2)
    saved_files['json'] = str(json_path)

    fasta_path = output_path / f"{file_prefix}_aligned.fa"
    # Record ids must stay distinct when both inputs share a name
    id2 = name2 if name2 != name1 else f"{name2}_2"
    write_fasta(str(fasta_path), {name1: row1, id2: row2}, description="aligned with gaps")
    saved_files['aligned_fasta'] = str(fasta_path)

    return saved_files


__all__ = [
    'format_report',
    'write_summary',
    'safe_file_name',
    'save_all_results',
]
