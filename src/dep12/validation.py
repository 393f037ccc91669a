"""Validation routines for DEP-12 documents."""
from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping, Protocol

from .bibtex_checker import BibliographicChecker, BibliographicProblem, BibtexRecordChecker
from .fields import (
    KNOWN_FIELDS,
    LIST_FIELDS,
    REFERENCE_FIELD,
    URL_FIELDS,
    canonical_bibtex_key,
    is_scalar,
)
from .models import ValidationWarning
from .url_checker import UrlChecker, is_valid_url

logger = logging.getLogger(__name__)

UNKNOWN_FIELD = "unknown field"
SCALAR_EXPECTED = "scalar value expected"
NON_SCALAR_VALUE = "non-scalar value"
TRAILING_NEWLINE = "URL has trailing newline character"
INVALID_URL = "value '%(value)s' does not look like valid URL"
RECORD_EXPECTED = "bibliographic record expected"

_ONE_TRAILING_NEWLINE = re.compile(r"(.*)\n")


class ValidatedDocument(Protocol):
    def fields(self) -> Iterable[str]:  # pragma: no cover - interface
        ...

    def get(self, name: str) -> Any:  # pragma: no cover - interface
        ...

    def bibtex_records(self) -> List[Any]:  # pragma: no cover - interface
        ...


class Dep12Validator:
    """Runs the field-shape, URL and bibliographic passes over a document.

    Warnings are returned in pass order: shape warnings sorted by field
    name, then URL warnings in ``URL_FIELDS`` order, then bibliographic
    warnings in ``Reference`` order. Nothing in the document content makes
    :meth:`validate` raise.
    """

    def __init__(
        self,
        url_checker: UrlChecker | None = None,
        bibtex_checker: BibliographicChecker | None = None,
    ):
        self.url_checker = url_checker or is_valid_url
        self.bibtex_checker = bibtex_checker or BibtexRecordChecker(self.url_checker)

    def validate(self, document: ValidatedDocument) -> List[ValidationWarning]:
        warnings = self.validate_field_shapes(document)
        warnings.extend(self.validate_url_fields(document))
        warnings.extend(self.validate_references(document))
        logger.debug("Validation finished with %d warning(s)", len(warnings))
        return warnings

    def validate_field_shapes(self, document: ValidatedDocument) -> List[ValidationWarning]:
        warnings: List[ValidationWarning] = []
        for name in sorted(document.fields(), key=str):
            value = document.get(name)
            if name not in KNOWN_FIELDS:
                warnings.append(ValidationWarning(UNKNOWN_FIELD, name, value))
            if not is_scalar(value) and name not in LIST_FIELDS:
                warnings.append(ValidationWarning(SCALAR_EXPECTED, name, value))
        return warnings

    def validate_url_fields(self, document: ValidatedDocument) -> List[ValidationWarning]:
        warnings: List[ValidationWarning] = []
        for name in URL_FIELDS:
            value = document.get(name)
            if value is None:
                continue
            values = value if isinstance(value, (list, tuple)) else [value]
            for item in values:
                warning = self._check_url(name, item)
                if warning is not None:
                    warnings.append(warning)
        return warnings

    def _check_url(self, name: str, value: Any) -> ValidationWarning | None:
        if not is_scalar(value):
            return ValidationWarning(NON_SCALAR_VALUE, name, value)
        if self.url_checker(value):
            return None
        if isinstance(value, str):
            match = _ONE_TRAILING_NEWLINE.fullmatch(value)
            if match and self.url_checker(match.group(1)):
                return ValidationWarning(
                    TRAILING_NEWLINE, name, value, {"suggestion": match.group(1)}
                )
        return ValidationWarning(INVALID_URL, name, value)

    def validate_references(self, document: ValidatedDocument) -> List[ValidationWarning]:
        warnings: List[ValidationWarning] = []
        for index, record in enumerate(document.bibtex_records()):
            if not isinstance(record, Mapping):
                warnings.append(
                    ValidationWarning(RECORD_EXPECTED, REFERENCE_FIELD, record, {"key": index})
                )
                continue
            for problem in self.bibtex_checker.check(record):
                warning = _as_warning(problem)
                warnings.append(
                    warning.with_context(field=canonical_bibtex_key(warning.field), key=index)
                )
        return warnings


def _as_warning(problem: BibliographicProblem) -> ValidationWarning:
    if isinstance(problem, ValidationWarning):
        return problem
    return ValidationWarning.from_mapping(problem)


def validate(document: ValidatedDocument) -> List[ValidationWarning]:
    """Validate ``document`` with the default URL and bibliographic checkers."""
    return Dep12Validator().validate(document)
