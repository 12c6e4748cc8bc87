"""Setup script for kloc-analyzer"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
this_directory = Path(__file__).parent
long_description = ""
readme_path = this_directory / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

setup(
    name="kloc-analyzer",
    version="1.2.0",
    author="Ngo Tuan Long",
    author_email="tuanlongn@gmail.com",
    description="KLOC statistics for git contributors, grouped by author email",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/tuanlongn/kloc",
    project_urls={
        "Bug Tracker": "https://github.com/tuanlongn/kloc/issues",
        "Source Code": "https://github.com/tuanlongn/kloc",
    },
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Version Control :: Git",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "typer>=0.9.0",
        "rich>=12.0.0",
        "tomli>=2.0.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "kloc-analyzer=kloc_analyzer.cli:main",
        ],
    },
    keywords="git kloc lines-of-code statistics contributors cli",
)
