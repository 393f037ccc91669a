"""DEP-12 field catalog and BibTeX key canonicalization."""
from __future__ import annotations

from collections.abc import Mapping
import re
from typing import Any

# See https://dep-team.pages.debian.net/deps/dep12/

KNOWN_FIELDS = frozenset(
    {
        "Archive",
        "ASCL-Id",
        "Bug-Database",
        "Bug-Submit",
        "Cite-As",
        "Changelog",
        "CPE",
        "Documentation",
        "Donation",
        "FAQ",
        "Funding",
        "Gallery",
        "Other-References",
        "Reference",
        "Registration",
        "Registry",
        "Repository",
        "Repository-Browse",
        "Screenshots",
        "Security-Contact",
        "Webservice",
    }
)

LIST_FIELDS = frozenset({"Funding", "Reference", "Registry", "Screenshots"})

# Iteration order of the URL pass follows this tuple.
URL_FIELDS = (
    "Bug-Database",
    "Bug-Submit",
    "Changelog",
    "Documentation",
    "Donation",
    "FAQ",
    "Gallery",
    "Other-References",
    "Registration",
    "Repository",
    "Repository-Browse",
    "Screenshots",
    "Webservice",
)

REFERENCE_FIELD = "Reference"

ACRONYM_KEYS = frozenset({"doi", "isbn", "issn", "pmid", "url"})

NUMERIC_KEYS = ("Number", "Pages", "Volume", "Year")

_NUMERIC_VALUE = re.compile(r"[1-9][0-9]*")


def canonical_bibtex_key(key: str) -> str:
    """Return the DEP-12 spelling of a BibTeX field name (``doi`` -> ``DOI``, ``year`` -> ``Year``)."""
    if key in ACRONYM_KEYS:
        return key.upper()
    return key[:1].upper() + key[1:]


def normalize_numeric(key: str, value: Any) -> Any:
    if key in NUMERIC_KEYS and isinstance(value, str) and _NUMERIC_VALUE.fullmatch(value):
        return int(value)
    return value


def is_scalar(value: Any) -> bool:
    """Lists and mappings are the only non-scalar shapes a parsed document can hold."""
    return not isinstance(value, (list, tuple, Mapping))
