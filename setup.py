from setuptools import setup, find_packages

# -------------------------------------------------
# Dependencies
# -------------------------------------------------

install_requires = [
    "numpy>=1.21",
    "pyyaml>=6.0",
    "biopython>=1.79",
]

extras_require = {
    "test": ["pytest>=7.0"],
}

# -------------------------------------------------
# Setup
# -------------------------------------------------

setup(
    name="pairwise-alignment",
    version="1.0.0",
    description="Pairwise sequence alignment with Needleman-Wunsch and Smith-Waterman, linear or affine gaps",
    license="MIT",
    python_requires=">=3.8",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"pairwise_alignment.config": ["default_config.yaml"]},
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "pairwise-align=pairwise_alignment.scripts.run_pipeline:main",
        ],
    },
    zip_safe=False,
)
