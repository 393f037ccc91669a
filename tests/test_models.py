import dataclasses

import pytest

from dep12.models import ValidationWarning, render


def test_render_substitutes_value():
    warning = ValidationWarning("value '%(value)s' does not look like valid URL", "FAQ", "nope")

    assert render(warning) == "value 'nope' does not look like valid URL"
    assert str(warning) == render(warning)


def test_render_with_absent_value():
    warning = ValidationWarning("value '%(value)s' is empty", "FAQ")

    assert warning.render() == "value '' is empty"


def test_render_keeps_output_on_one_line():
    warning = ValidationWarning("value '%(value)s'", "FAQ", "a\nb")

    assert warning.render() == "value 'a\\nb'"


def test_render_uses_extra_context():
    warning = ValidationWarning("use '%(suggestion)s'", "DOI", "x", {"suggestion": "10.1/y"})

    assert warning.render() == "use '10.1/y'"


def test_warning_is_immutable():
    warning = ValidationWarning("unknown field", "Homepage", extra={"key": 1})

    with pytest.raises(dataclasses.FrozenInstanceError):
        warning.field = "Other"  # type: ignore[misc]
    with pytest.raises(TypeError):
        warning.extra["key"] = 2  # type: ignore[index]


def test_to_dict_export_shape():
    warning = ValidationWarning(
        "URL has trailing newline character",
        "Bug-Database",
        "https://example.org\n",
        {"suggestion": "https://example.org"},
    )

    assert warning.to_dict() == {
        "message": "URL has trailing newline character",
        "field": "Bug-Database",
        "value": "https://example.org\n",
        "suggestion": "https://example.org",
    }
    assert "value" not in ValidationWarning("unknown field", "X").to_dict()


def test_from_mapping_and_with_context():
    warning = ValidationWarning.from_mapping({"field": "doi", "message": "bad", "value": 1, "kind": "DOI"})

    moved = warning.with_context(field="DOI", key=3)

    assert moved.field == "DOI"
    assert moved.key == 3
    assert moved.extra["kind"] == "DOI"
    assert warning.key is None
