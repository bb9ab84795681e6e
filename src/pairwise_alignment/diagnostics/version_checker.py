from importlib import metadata
from typing import Dict

REQUIRED_PACKAGES = {
    'numpy': '1.21.0',
    'pyyaml': '6.0',
    'biopython': '1.79',
}


def get_package_version(package_name: str) -> str:
    """Get version of installed package using importlib.metadata."""
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return "Not installed"


def check_versions() -> Dict[str, str]:
    """Installed version of every required package."""
    return {name: get_package_version(name) for name in REQUIRED_PACKAGES}


def print_version_report():
    """Print package and dependency versions."""
    from .. import __version__

    print("=" * 60)
    print(f"pairwise-alignment {__version__}")
    print("=" * 60)
    for name, installed in check_versions().items():
        print(f"  {name:<12} {installed:<16} (minimum {REQUIRED_PACKAGES[name]})")
    print("=" * 60)


__all__ = [
    'get_package_version',
    'check_versions',
    'print_version_report',
]
