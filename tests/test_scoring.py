import numpy as np
import pytest

from pairwise_alignment.core.alphabet import NUCLEOTIDE, PROTEIN, AminoAcid, Nucleotide
from pairwise_alignment.core.exceptions import InputError, InputErrorKind, ScoringError
from pairwise_alignment.scoring import (
    Affine,
    GapModel,
    Linear,
    ScoringSchema,
    SubstitutionMatrix,
    SubstitutionTable,
    make_gap_penalty
)
from pairwise_alignment.scoring.matrices import parse_lower_triangle

A = AminoAcid


@pytest.mark.parametrize("a, b, expected", [
    (A.A, A.A, 4),
    (A.W, A.W, 11),
    (A.Y, A.Y, 7),
    (A.N, A.N, 6),
    (A.P, A.I, -3),
    (A.Q, A.G, -2),
    (A.H, A.Y, 2),
])
def test_blosum62_values(a, b, expected):
    table = SubstitutionMatrix.BLOSUM62.table
    assert table.score(a, b) == expected
    assert table.score(b, a) == expected


def test_other_matrix_diagonals():
    assert SubstitutionMatrix.BLOSUM45.table.score(A.W, A.W) == 15
    assert SubstitutionMatrix.BLOSUM45.table.score(A.C, A.C) == 12
    assert SubstitutionMatrix.PAM160.table.score(A.W, A.W) == 12
    assert SubstitutionMatrix.PAM160.table.score(A.C, A.C) == 9


@pytest.mark.parametrize("name", ["BLOSUM45", "BLOSUM62"])
def test_blosum_tables_come_from_biopython(name):
    from Bio.Align import substitution_matrices

    reference = substitution_matrices.load(name)
    table = SubstitutionMatrix.from_name(name).table
    for a in PROTEIN:
        for b in PROTEIN:
            assert table.score(a, b) == reference[a.value, b.value]


def test_table_score_range():
    table = SubstitutionMatrix.BLOSUM62.table
    assert table.min_score() == -4
    assert table.max_score() == 11
    identity = SubstitutionTable.match_mismatch(NUCLEOTIDE, 2, -3)
    assert (identity.min_score(), identity.max_score()) == (-3, 2)

@pytest.mark.parametrize("matrix", list(SubstitutionMatrix))
def test_builtin_matrices_are_total_and_symmetric(matrix):
    table = matrix.table
    scores = table.to_numpy()
    assert scores.shape == (20, 20)
    assert table.is_symmetric()
    # Identities always score at least as well as any substitution in the row
    assert np.all(np.diag(scores) >= scores.max(axis=1))


def test_matrix_lookup_by_name():
    assert SubstitutionMatrix.from_name('blosum62') is SubstitutionMatrix.BLOSUM62
    assert SubstitutionMatrix.from_name(' PAM160 ') is SubstitutionMatrix.PAM160
    with pytest.raises(InputError) as excinfo:
        SubstitutionMatrix.from_name('BLOSUM100')
    assert excinfo.value.kind is InputErrorKind.SCORING_MATRIX_NOT_EXIST


def test_parse_lower_triangle_mirrors_entries():
    text = """
       X  Y
    X  1
    Y -2  3
    """
    scores = parse_lower_triangle(text)
    assert scores[('X', 'X')] == 1
    assert scores[('X', 'Y')] == -2
    assert scores[('Y', 'X')] == -2
    assert scores[('Y', 'Y')] == 3


def test_match_mismatch_table():
    table = SubstitutionTable.match_mismatch(NUCLEOTIDE, match=2, mismatch=-3)
    assert table.score(Nucleotide.A, Nucleotide.A) == 2
    assert table.score(Nucleotide.A, Nucleotide.U) == -3
    assert table.is_symmetric()


def test_from_mapping_requires_every_pair():
    mapping = {(a, b): (1 if a == b else -1) for a in 'ACGT' for b in 'ACGT'}
    with pytest.raises(ScoringError):
        SubstitutionTable.from_mapping('incomplete', NUCLEOTIDE, mapping)

    mapping.update({('U', x): 0 for x in 'ACGTU'})
    mapping.update({(x, 'U'): 0 for x in 'ACGT'})
    table = SubstitutionTable.from_mapping('complete', NUCLEOTIDE, mapping)
    assert table.score(Nucleotide.G, Nucleotide.G) == 1
    assert table.score(Nucleotide.U, Nucleotide.C) == 0


def test_table_rejects_bad_shapes_and_foreign_symbols():
    with pytest.raises(ScoringError):
        SubstitutionTable('small', NUCLEOTIDE, np.zeros((4, 4), dtype=int))
    with pytest.raises(ScoringError):
        SubstitutionTable('floats', NUCLEOTIDE, np.zeros((5, 5)))
    with pytest.raises(ScoringError):
        SubstitutionMatrix.BLOSUM62.table.score(Nucleotide.A, A.A)


def test_gap_penalties():
    linear = Linear(-2)
    assert linear.gap_open == -2
    assert linear.gap_extend == -2
    assert linear.penalty(1) == -2
    assert linear.penalty(3) == -6
    assert not linear.is_affine

    affine = Affine(-10, -1)
    assert affine.penalty(1) == -10
    assert affine.penalty(3) == -12
    assert affine.is_affine

    with pytest.raises(ValueError):
        affine.penalty(0)


@pytest.mark.parametrize("cost", [1, -1.5, True, "x", None])
def test_gap_costs_must_be_non_positive_integers(cost):
    with pytest.raises(ScoringError):
        Linear(cost)


def test_integral_float_costs_are_accepted():
    assert Linear(-2.0).cost == -2
    assert Affine(0, 0).penalty(5) == 0


def test_make_gap_penalty():
    assert make_gap_penalty('linear', -3) == Linear(-3)
    assert make_gap_penalty('AFFINE', -5, -2) == Affine(-5, -2)
    assert make_gap_penalty(GapModel.AFFINE, -4) == Affine(-4, -4)
    with pytest.raises(InputError) as excinfo:
        make_gap_penalty('quadratic', -1)
    assert excinfo.value.kind is InputErrorKind.GAP_MODEL_NOT_EXIST


def test_schema_from_config():
    schema = ScoringSchema.from_config({'matrix': 'PAM160', 'gap_model': 'affine',
                                        'gap_open': -8, 'gap_extend': -2}, PROTEIN)
    assert schema.alphabet is PROTEIN
    assert schema.substitution.name == 'PAM160'
    assert schema.is_affine
    assert schema.gap_open() == -8
    assert schema.gap_extend() == -2
    assert schema.gap_penalty(4) == -14

    schema = ScoringSchema.from_config({'gap_model': 'linear', 'gap_open': -2,
                                        'match': 5, 'mismatch': -4}, NUCLEOTIDE)
    assert not schema.is_affine
    assert schema.gap_open() == schema.gap_extend() == -2
    assert schema.score(Nucleotide.C, Nucleotide.C) == 5
    assert schema.score(Nucleotide.C, Nucleotide.T) == -4
