from .backtrack import *
from .engine import *

__all__ = [
    # Pointers
    'Backtrack',
    'choose',
    'floor_at_zero',

    # Dynamic programming
    'AlignmentEngine',
    'SCORE_LIMIT',
]
