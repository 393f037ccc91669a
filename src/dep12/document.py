"""In-memory DEP-12 upstream metadata document."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Set

from bibtexparser.library import Library
from bibtexparser.model import Entry

from .fields import REFERENCE_FIELD, canonical_bibtex_key, normalize_numeric
from .models import ConstructionError, ValidationWarning
from .parsers import DocumentLoader, YamlLoaderConfig, dump_yaml
from .validation import Dep12Validator

logger = logging.getLogger(__name__)


def entry_to_reference(entry: Entry) -> Dict[str, Any]:
    """Convert a BibTeX entry into a ``Reference`` record with DEP-12 key spelling."""
    reference: Dict[str, Any] = {}
    for bib_field in entry.fields:
        if bib_field.value is None:
            continue
        key = canonical_bibtex_key(bib_field.key.lower())
        value = bib_field.value if isinstance(bib_field.value, str) else str(bib_field.value)
        reference[key] = normalize_numeric(key, value)
    return reference


class Dep12Document:
    """A DEP-12 record: field name -> value.

    Construction never checks field names or value shapes; call
    :meth:`validate` to diagnose them.

    ``source`` may be ``None`` (empty document), a mapping (used as is), YAML
    text, or BibTeX entries (a ``bibtexparser`` ``Entry``, ``Library`` or a
    list of entries), which become the ``Reference`` field.
    """

    def __init__(self, source: Any = None, yaml_config: YamlLoaderConfig | None = None):
        self._data: Dict[str, Any]
        if source is None:
            self._data = {}
        elif isinstance(source, Mapping):
            self._data = dict(source)
        elif isinstance(source, (str, bytes)):
            self._data = DocumentLoader(yaml_config).load_yaml(source)
        elif isinstance(source, (Entry, Library)) or _is_entry_list(source):
            self._data = {REFERENCE_FIELD: _references_from_bibtex(source)}
        else:
            raise ConstructionError(f"cannot create Dep12Document from {type(source).__name__}")

    @classmethod
    def from_yaml(cls, text: str | bytes, yaml_config: YamlLoaderConfig | None = None) -> "Dep12Document":
        return cls(DocumentLoader(yaml_config).load_yaml(text))

    @classmethod
    def from_bibtex(cls, entries: Entry | Library | Iterable[Entry]) -> "Dep12Document":
        if not isinstance(entries, (Entry, Library)):
            entries = list(entries)
        return cls(entries)

    @classmethod
    def from_bibtex_string(cls, text: str) -> "Dep12Document":
        return cls.from_bibtex(DocumentLoader().load_bibtex(text))

    @classmethod
    def from_file(
        cls, file_path: str | Path, yaml_config: YamlLoaderConfig | None = None
    ) -> "Dep12Document":
        """Load ``debian/upstream/metadata`` style YAML, or BibTeX for ``.bib`` files."""
        path = Path(file_path)
        loader = DocumentLoader(yaml_config)
        text = loader.load_text(path)
        logger.debug("Loading %s", path)
        if path.suffix.lower() == ".bib":
            return cls.from_bibtex(loader.load_bibtex(text))
        return cls(loader.load_yaml(text))

    def fields(self) -> Set[str]:
        return set(self._data)

    def get(self, name: str) -> Any:
        return self._data.get(name)

    def set(self, name: str, value: Any) -> Any:
        """Store ``value`` under ``name`` and return the previous value."""
        previous = self._data.get(name)
        self._data[name] = value
        return previous

    def delete(self, name: str) -> Any:
        return self._data.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dep12Document):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Dep12Document({self._data!r})"

    def bibtex_records(self) -> List[Any]:
        """Return ``Reference`` as a list of records keyed by lower-case BibTeX names.

        A single record is treated as a one-element list. Items that are not
        mappings are returned untouched.
        """
        reference = self.get(REFERENCE_FIELD)
        if reference is None:
            return []
        if isinstance(reference, Mapping) or not isinstance(reference, (list, tuple)):
            reference = [reference]
        records: List[Any] = []
        for item in reference:
            if isinstance(item, Mapping):
                records.append({str(key).lower(): value for key, value in item.items()})
            else:
                records.append(item)
        return records

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def to_yaml(self) -> str:
        return dump_yaml(self._data)

    def validate(self, validator: Dep12Validator | None = None) -> List[ValidationWarning]:
        return (validator or Dep12Validator()).validate(self)


def _is_entry_list(source: Any) -> bool:
    return isinstance(source, (list, tuple)) and all(isinstance(item, Entry) for item in source)


def _references_from_bibtex(source: Entry | Library | Iterable[Entry]) -> List[Dict[str, Any]]:
    if isinstance(source, Entry):
        entries: Iterable[Entry] = [source]
    elif isinstance(source, Library):
        entries = source.entries
    else:
        entries = source
    references = [entry_to_reference(entry) for entry in entries]
    logger.debug("Converted %d BibTeX entries to references", len(references))
    return references
