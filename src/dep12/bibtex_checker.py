"""Field-level checks for bibliographic (BibTeX-style) records.

Records are mappings keyed by lower-case BibTeX field names, e.g.::

    {"doi": "10.1000/xyz", "year": 2020, "url": "https://example.org"}

Only identifier and locator fields are inspected; whether a record is
complete enough to be cited is not judged.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Mapping, Protocol, Sequence, Union

from .models import ValidationWarning
from .url_checker import UrlChecker, is_valid_url

BibliographicProblem = Union[ValidationWarning, Mapping[str, Any]]

_DOI = re.compile(r"10\.[0-9]{4,9}/\S+")
_DOI_PREFIXED = re.compile(r"(?:https?://(?:dx\.)?doi\.org/|doi:\s*)(10\.[0-9]{4,9}/\S+)", re.IGNORECASE)
_ISSN = re.compile(r"([0-9]{4})-?([0-9]{3}[0-9X])", re.IGNORECASE)
_PMID = re.compile(r"[1-9][0-9]*")
_PMID_PREFIXED = re.compile(r"pmid:?\s*([1-9][0-9]*)", re.IGNORECASE)
_YEAR = re.compile(r"[0-9]{4}")
_PAGES = re.compile(r"[A-Za-z]?[0-9]+[A-Za-z]?(?:\s*(?:-{1,2}|–|—)\s*[A-Za-z]?[0-9]+[A-Za-z]?)?")
_MONTH_NUMBER = re.compile(r"[0-9]{1,2}")

_MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

INVALID_VALUE = "value '%(value)s' does not look like valid %(kind)s"
BETTER_WRITTEN = "value '%(value)s' is better written as '%(suggestion)s'"


class BibliographicChecker(Protocol):
    def check(self, record: Mapping[str, Any]) -> Sequence[BibliographicProblem]:  # pragma: no cover - interface
        ...


class BibtexRecordChecker:
    """Checks identifier-like fields of a single bibliographic record."""

    def __init__(self, url_checker: UrlChecker | None = None):
        self.url_checker = url_checker or is_valid_url
        self._checks: Dict[str, Callable[[str, Any], List[ValidationWarning]]] = {
            "doi": self._check_doi,
            "url": self._check_url,
            "isbn": self._check_isbn,
            "issn": self._check_issn,
            "pmid": self._check_pmid,
            "year": self._check_year,
            "month": self._check_month,
            "pages": self._check_pages,
        }

    def check(self, record: Mapping[str, Any]) -> List[ValidationWarning]:
        warnings: List[ValidationWarning] = []
        for key in sorted(record):
            check = self._checks.get(key)
            if check is None or record[key] is None:
                continue
            warnings.extend(check(key, record[key]))
        return warnings

    @staticmethod
    def _invalid(key: str, value: Any, kind: str) -> List[ValidationWarning]:
        return [ValidationWarning(INVALID_VALUE, key, value, {"kind": kind})]

    @staticmethod
    def _better(key: str, value: Any, suggestion: str) -> List[ValidationWarning]:
        return [ValidationWarning(BETTER_WRITTEN, key, value, {"suggestion": suggestion})]

    def _check_doi(self, key: str, value: Any) -> List[ValidationWarning]:
        text = str(value).strip()
        if _DOI.fullmatch(text):
            return []
        prefixed = _DOI_PREFIXED.fullmatch(text)
        if prefixed:
            return self._better(key, value, prefixed.group(1))
        return self._invalid(key, value, "DOI")

    def _check_url(self, key: str, value: Any) -> List[ValidationWarning]:
        if self.url_checker(value):
            return []
        return self._invalid(key, value, "URL")

    def _check_isbn(self, key: str, value: Any) -> List[ValidationWarning]:
        digits = re.sub(r"[\s-]", "", str(value)).upper()
        if _isbn_checksum_ok(digits):
            return []
        return self._invalid(key, value, "ISBN")

    def _check_issn(self, key: str, value: Any) -> List[ValidationWarning]:
        text = str(value).strip()
        match = _ISSN.fullmatch(text)
        if not match or not _issn_checksum_ok(match.group(1) + match.group(2).upper()):
            return self._invalid(key, value, "ISSN")
        canonical = f"{match.group(1)}-{match.group(2).upper()}"
        if text != canonical:
            return self._better(key, value, canonical)
        return []

    def _check_pmid(self, key: str, value: Any) -> List[ValidationWarning]:
        text = str(value).strip()
        if _PMID.fullmatch(text):
            return []
        prefixed = _PMID_PREFIXED.fullmatch(text)
        if prefixed:
            return self._better(key, value, prefixed.group(1))
        return self._invalid(key, value, "PMID")

    def _check_year(self, key: str, value: Any) -> List[ValidationWarning]:
        if isinstance(value, bool) or not _YEAR.fullmatch(str(value).strip()):
            return self._invalid(key, value, "year")
        return []

    def _check_month(self, key: str, value: Any) -> List[ValidationWarning]:
        text = str(value).strip().lower()
        if _MONTH_NUMBER.fullmatch(text) and 1 <= int(text) <= 12:
            return []
        if text in _MONTHS or any(text == month[:3] for month in _MONTHS):
            return []
        return self._invalid(key, value, "month")

    def _check_pages(self, key: str, value: Any) -> List[ValidationWarning]:
        text = str(value).strip()
        if _PAGES.fullmatch(text):
            return []
        return self._invalid(key, value, "page range")


def _isbn_checksum_ok(digits: str) -> bool:
    if re.fullmatch(r"[0-9]{9}[0-9X]", digits):
        total = sum((10 - i) * (10 if ch == "X" else int(ch)) for i, ch in enumerate(digits))
        return total % 11 == 0
    if re.fullmatch(r"97[89][0-9]{10}", digits):
        total = sum((1 if i % 2 == 0 else 3) * int(ch) for i, ch in enumerate(digits))
        return total % 10 == 0
    return False


def _issn_checksum_ok(digits: str) -> bool:
    total = sum((8 - i) * int(ch) for i, ch in enumerate(digits[:7]))
    check = (11 - total % 11) % 11
    expected = "X" if check == 10 else str(check)
    return digits[7] == expected
