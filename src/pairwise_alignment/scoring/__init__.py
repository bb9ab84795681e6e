"""
Scoring schemas: substitution tables and gap penalty models.
"""

from .gap_penalty import Affine, GapModel, GapPenalty, Linear, make_gap_penalty
from .schema import ScoringSchema
from .substitution import SubstitutionMatrix, SubstitutionTable

__all__ = [
    'Affine',
    'GapModel',
    'GapPenalty',
    'Linear',
    'make_gap_penalty',
    'ScoringSchema',
    'SubstitutionMatrix',
    'SubstitutionTable',
]
