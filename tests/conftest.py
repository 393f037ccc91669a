import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest


@pytest.fixture()
def metadata_text() -> str:
    """A clean debian/upstream/metadata file."""

    return (
        "Bug-Database: https://github.com/merkys/Debian-DEP12/issues\n"
        "Bug-Submit: https://github.com/merkys/Debian-DEP12/issues/new\n"
        "Repository: https://github.com/merkys/Debian-DEP12.git\n"
        "Repository-Browse: https://github.com/merkys/Debian-DEP12\n"
        "Registry:\n"
        "  - Name: CPAN\n"
        "    Entry: Debian-DEP12\n"
        "Reference:\n"
        "  Author: Andrius Merkys\n"
        "  Title: Interface to Debian DEP 12 format\n"
        "  Year: 2021\n"
        "  DOI: 10.1000/xyz123\n"
        "  URL: https://metacpan.org/dist/Debian-DEP12\n"
    )


@pytest.fixture()
def bibtex_text() -> str:
    return (
        "@article{doe2020,\n"
        "  author = {Doe, Jane and Roe, Richard},\n"
        "  title = {Sample article title},\n"
        "  journal = {Journal of Testing},\n"
        "  year = {2020},\n"
        "  volume = {10},\n"
        "  pages = {123--130},\n"
        "  doi = {10.1234/jt.2020.456},\n"
        "  url = {https://example.org/article}\n"
        "}\n"
        "\n"
        "@book{patel2019,\n"
        "  author = {Patel, R.},\n"
        "  title = {Data validation handbook},\n"
        "  publisher = {Testing Press},\n"
        "  year = {2019},\n"
        "  isbn = {978-0-306-40615-7}\n"
        "}\n"
    )
