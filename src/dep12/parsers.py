"""Loaders for the serialization formats a DEP-12 document is built from."""
from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import re
from typing import Any, List, Tuple, Type

import bibtexparser
from bibtexparser.model import Entry
import yaml

from .models import ConstructionError

logger = logging.getLogger(__name__)

# PyYAML 5.4 is the first release without the FullLoader code execution hole (CVE-2020-14343).
DEFAULT_YAML_MIN_VERSION = (5, 4)


def parse_version(text: str) -> Tuple[int, ...]:
    """Turn ``"6.0.1"`` into ``(6, 0, 1)``; trailing non-numeric parts are ignored."""
    parts = []
    for piece in text.split("."):
        match = re.match(r"[0-9]+", piece)
        if not match:
            break
        parts.append(int(match.group(0)))
    return tuple(parts)


@dataclass(frozen=True)
class YamlLoaderConfig:
    """How untrusted YAML text is turned into plain data.

    Only plain-data loaders (no Python object construction) should be
    configured here.
    """

    loader: Type[Any] = yaml.SafeLoader
    minimum_version: Tuple[int, ...] = DEFAULT_YAML_MIN_VERSION

    def check_version(self, installed: str | None = None) -> None:
        installed = installed if installed is not None else yaml.__version__
        if parse_version(installed) < self.minimum_version:
            wanted = ".".join(str(part) for part in self.minimum_version)
            raise ConstructionError(f"PyYAML < {wanted} is insecure (found {installed})")


class DocumentLoader:
    """Reads YAML and BibTeX sources for document construction."""

    def __init__(self, yaml_config: YamlLoaderConfig | None = None):
        self.yaml_config = yaml_config or YamlLoaderConfig()

    def load_yaml(self, text: str | bytes) -> dict:
        """Parse YAML text into a mapping; an empty document yields ``{}``."""
        self.yaml_config.check_version()
        try:
            data = yaml.load(text, Loader=self.yaml_config.loader)
        except yaml.YAMLError as exc:
            raise ConstructionError(f"invalid YAML: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConstructionError(
                f"cannot create Dep12Document from YAML {type(data).__name__}"
            )
        return data

    def load_bibtex(self, text: str) -> List[Entry]:
        library = bibtexparser.parse_string(text)
        for block in library.failed_blocks:
            logger.warning("Skipping unparseable BibTeX block: %s", block.raw.strip()[:80])
        return list(library.entries)

    def load_text(self, file_path: str | Path) -> str:
        path = Path(file_path)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConstructionError(f"cannot read {path}: {exc}") from exc


def dump_yaml(data: Any) -> str:
    """Serialize plain data as block-style YAML without a document start marker."""
    return yaml.dump(
        data,
        Dumper=yaml.SafeDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
