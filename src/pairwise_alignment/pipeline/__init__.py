from .session import AlignmentSession, align_sequences, build_schema
from .main_pipeline import main

# Alias for convenience
run_pipeline = main

__all__ = [
    'AlignmentSession',
    'align_sequences',
    'build_schema',
    'main',
    'run_pipeline',
]
