"""
Integration tests for the command-line interface and file outputs.
"""
import json

import pytest

from pairwise_alignment.io.fasta_reader import (
    read_fasta_file,
    read_fasta_sequence,
    validate_fasta_file
)
from pairwise_alignment import align_sequences
from pairwise_alignment.core.alphabet import NUCLEOTIDE, PROTEIN
from pairwise_alignment.io.results_writer import save_all_results
from pairwise_alignment.scripts.run_pipeline import main as cli_main


def create_test_fasta(filename, records):
    """Create a test FASTA file from (id, sequence) pairs."""
    with open(filename, 'w') as f:
        for sequence_id, sequence in records:
            f.write(f">{sequence_id}\n")
            # Write in lines of 60 characters
            for i in range(0, len(sequence), 60):
                f.write(sequence[i:i+60] + "\n")
    return str(filename)


def test_fasta_reader(tmp_path):
    path = create_test_fasta(tmp_path / "prot.fa", [
        ("alpha", "MVLSPADKTNVKAAWGKVGAHAGEYGAEALERMFLSFPTTKTYFPHF"),
        ("beta", "MVHLTPEEKSAVTALWGKVNVDEVGGEALGRLLVVYPWTQRFFESFGDL"),
    ])
    assert read_fasta_sequence(path) == ("alpha", "MVLSPADKTNVKAAWGKVGAHAGEYGAEALERMFLSFPTTKTYFPHF")
    assert read_fasta_sequence(path, sequence_index=1)[0] == "beta"
    assert read_fasta_sequence(path, sequence_id="beta")[1].startswith("MVHLTPEEK")
    assert list(read_fasta_file(path)) == ["alpha", "beta"]

    with pytest.raises(IndexError):
        read_fasta_sequence(path, sequence_index=2)
    with pytest.raises(KeyError):
        read_fasta_sequence(path, sequence_id="gamma")


def test_validate_fasta_file(tmp_path):
    path = create_test_fasta(tmp_path / "dna.fa", [("s1", "GATTACA")])
    ok, msg = validate_fasta_file(path, NUCLEOTIDE)
    assert ok, msg

    # E and F are amino acids but not nucleotides
    path = create_test_fasta(tmp_path / "prot.fa", [("p1", "GATEFACA")])
    assert validate_fasta_file(path, PROTEIN)[0]
    ok, msg = validate_fasta_file(path, NUCLEOTIDE)
    assert not ok
    assert "nucleotide" in msg

    assert not validate_fasta_file(str(tmp_path / "missing.fa"))[0]

    empty = tmp_path / "empty.fa"
    empty.write_text("")
    assert not validate_fasta_file(str(empty))[0]

    plain = tmp_path / "plain.txt"
    plain.write_text("GATTACA\n")
    assert not validate_fasta_file(str(plain))[0]


def test_cli_literal_sequences(capsys):
    code = cli_main([
        '--seq1', 'GATTACA', '--seq2', 'GCATGCU',
        '--alphabet', 'nucleotide', '--gap-model', 'linear', '--gap-open', '-1',
    ])
    assert code == 0
    out = capsys.readouterr().out
    assert "Score: 0" in out
    assert "Global alignment of seq1 vs seq2" in out


def test_cli_local_protein(capsys):
    code = cli_main([
        '--seq1', 'HEAGAWGHEE', '--seq2', 'HEAGAWGHEE',
        '--mode', 'local', '--matrix', 'BLOSUM62',
    ])
    assert code == 0
    out = capsys.readouterr().out
    assert "Score: 62" in out
    assert "HEAGAWGHEE\n||||||||||\nHEAGAWGHEE" in out


def test_cli_fasta_and_output_dir(tmp_path, capsys):
    fasta1 = create_test_fasta(tmp_path / "a.fa", [("first", "TGTTACGG")])
    fasta2 = create_test_fasta(tmp_path / "b.fa", [("decoy", "AAAA"), ("second", "GGTTGACTA")])
    out_dir = tmp_path / "Results"

    code = cli_main([
        '--fasta1', fasta1, '--fasta2', fasta2, '--id2', 'second',
        '--alphabet', 'nucleotide', '--mode', 'local',
        '--match', '3', '--mismatch', '-3',
        '--gap-model', 'linear', '--gap-open', '-2',
        '--output-dir', str(out_dir),
    ])
    assert code == 0
    assert "Score: 13" in capsys.readouterr().out

    with open(out_dir / "first_vs_second_results.json") as f:
        results = json.load(f)
    assert results['metadata']['total_score'] == 13
    assert results['metadata']['kind'] == 'local'
    assert results['alignment']['sequence1'] == "GTT-AC"
    assert results['alignment']['sequence2'] == "GTTGAC"
    assert results['alignment']['cigar'] == "3=1I2="
    assert results['alignment']['range1'] == [1, 6]
    assert results['configuration']['scoring']['match'] == 3

    summary = (out_dir / "first_vs_second_summary.txt").read_text()
    assert "Total Score: 13" in summary
    assert "GTT_AC" in summary

    aligned = read_fasta_file(str(out_dir / "first_vs_second_aligned.fa"))
    assert aligned == {"first": "GTT-AC", "second": "GTTGAC"}


def test_saved_file_names_are_sanitized(tmp_path):
    """Sequence ids with path separators still produce files inside the output directory."""
    aligned = align_sequences("GATTACA", "GCATGCU", alphabet='nucleotide', gap_model='linear', gap_open=-1)
    saved = save_all_results(aligned, "seq/1", "seq2", output_dir=str(tmp_path))
    assert saved['summary'] == str(tmp_path / "seq_1_vs_seq2_summary.txt")
    assert (tmp_path / "seq_1_vs_seq2_results.json").exists()
    assert read_fasta_file(saved['aligned_fasta'])["seq/1"].replace('-', '') == "GATTACA"


def test_cli_config_file(tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text(
        "alignment:\n  mode: global\n  alphabet: nucleotide\n"
        "scoring:\n  gap_model: affine\n  gap_open: -2\n  gap_extend: -1\n"
    )
    code = cli_main(['--config', str(config), '--seq1', 'AAAA', '--seq2', 'AA'])
    assert code == 0
    assert "Score: -1" in capsys.readouterr().out


def test_cli_errors(tmp_path, capsys):
    # Invalid residue for the chosen alphabet
    assert cli_main(['--seq1', 'GATXACA', '--seq2', 'GATTACA', '--alphabet', 'nucleotide']) == 1

    # Positive gap cost fails configuration validation
    assert cli_main(['--seq1', 'PVAGH', '--seq2', 'PVAGH', '--gap-open', '3']) == 1

    # FASTA file that does not exist
    assert cli_main(['--fasta1', str(tmp_path / "missing.fa"), '--seq2', 'PVAGH']) == 1

    # Missing second sequence is a usage error
    with pytest.raises(SystemExit):
        cli_main(['--seq1', 'PVAGH'])


def test_cli_version(capsys):
    assert cli_main(['--version']) == 0
    out = capsys.readouterr().out
    assert "pairwise-alignment" in out
    assert "numpy" in out
