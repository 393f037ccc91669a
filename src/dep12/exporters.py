"""Exporters for DEP-12 documents and validation results."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Set

import bibtexparser
from bibtexparser.library import Library
from bibtexparser.model import Entry, Field

from .document import Dep12Document
from .models import ValidationWarning


def to_yaml(document: Dep12Document) -> str:
    return document.to_yaml()


def warnings_to_dicts(warnings: List[ValidationWarning]) -> List[Dict[str, Any]]:
    return [warning.to_dict() for warning in warnings]


def warnings_to_json(warnings: List[ValidationWarning]) -> str:
    return json.dumps(warnings_to_dicts(warnings), indent=2, default=str)


def to_bibtex(document: Dep12Document) -> str:
    """Render the document's ``Reference`` records as BibTeX entries."""
    entries = []
    seen_keys: Set[str] = set()
    for idx, record in enumerate(document.bibtex_records(), start=1):
        if not isinstance(record, Mapping):
            continue
        fields = [
            Field(name, _brace_safe(str(value)))
            for name, value in record.items()
            if name not in ("type", "id") and value is not None
        ]
        key = _entry_key(record, idx)
        if key in seen_keys:
            key = f"{key}-{idx}"
        seen_keys.add(key)
        entries.append(
            Entry(
                entry_type=str(record.get("type") or "misc").lower(),
                key=key,
                fields=fields,
            )
        )
    if not entries:
        return ""
    return bibtexparser.write_string(Library(entries))


_BRACE_COMMANDS = {"{": "\\textbraceleft{}", "}": "\\textbraceright{}"}


def _brace_safe(value: str) -> str:
    """Spell out braces as LaTeX commands when they do not pair up."""
    depth = 0
    for char in value:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth < 0:
                break
    if depth == 0:
        return value
    return "".join(_BRACE_COMMANDS.get(char, char) for char in value)


def _entry_key(record: Mapping[str, Any], idx: int) -> str:
    if record.get("id"):
        return str(record["id"])
    author = str(record.get("author") or "").split(",")[0].split(" and ")[0].strip()
    lead = author.split()[-1].lower() if author else ""
    year = record.get("year") or ""
    key = f"{lead}{year}"
    return key or f"ref{idx}"
