"""Debian DEP-12 upstream metadata validation toolkit."""

from .document import Dep12Document
from .models import ConstructionError, Dep12Error, ValidationWarning, render
from .parsers import YamlLoaderConfig
from .url_checker import is_valid_url
from .bibtex_checker import BibtexRecordChecker
from .validation import Dep12Validator, validate

__all__ = [
    "Dep12Document",
    "Dep12Validator",
    "ValidationWarning",
    "ConstructionError",
    "Dep12Error",
    "YamlLoaderConfig",
    "BibtexRecordChecker",
    "is_valid_url",
    "render",
    "validate",
]
