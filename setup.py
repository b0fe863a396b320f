"""Setup script for mergebench."""

from pathlib import Path

from setuptools import find_packages, setup

__version__ = "0.1.0"


def get_long_description():
    """Read README for long description."""
    readme_path = Path(__file__).parent / "README.md"
    if readme_path.exists():
        return readme_path.read_text(encoding="utf-8")
    return "mergebench: micro-benchmarks for dict and list merge strategies"


setup(
    name="mergebench",
    version=__version__,
    author="mergebench Authors",
    description="Micro-benchmarks comparing mutating, copying and persistent merge strategies",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["mergebench", "mergebench.*"]),
    python_requires=">=3.9",
    install_requires=[
        "click>=8.0",
        "immutables>=0.19",
        "numpy>=1.21",
        "scipy>=1.7",
    ],
    extras_require={
        "dev": ["pytest>=7.0", "pytest-cov>=4.0"],
    },
    entry_points={
        "console_scripts": [
            "mergebench=mergebench.cli:main",
        ],
    },
    zip_safe=False,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Testing",
    ],
)
