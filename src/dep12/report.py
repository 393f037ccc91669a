"""Validation reporting utilities."""
from __future__ import annotations

from typing import List

from .models import ValidationWarning


def describe_location(warning: ValidationWarning) -> str:
    if warning.key is not None:
        return f"Reference[{warning.key}].{warning.field}"
    return str(warning.field)


def render_report(warnings: List[ValidationWarning], source: str | None = None) -> str:
    """Return a human-readable report summarizing validation findings."""

    header_lines = ["DEP-12 Validation Report"]
    if source:
        header_lines.append(f"Source: {source}")

    if not warnings:
        header_lines.append("No metadata issues detected.")
        return "\n".join(header_lines)

    lines = header_lines + [f"Warnings: {len(warnings)}"]
    for warning in warnings:
        line = f"[WARNING] {describe_location(warning)}: {warning.render()}"
        if warning.suggestion is not None and "%(suggestion)s" not in warning.message:
            line += f" -> {warning.suggestion!r}"
        lines.append(line)
    return "\n".join(lines)
