"""
Diagnostic modules for pairwise alignment.
"""

from .version_checker import *
from .validation import *

__all__ = [
    'get_package_version',
    'check_versions',
    'print_version_report',
    'validate_configuration',
    'validate_inputs',
]
