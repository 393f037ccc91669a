import pytest

fastapi = pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from dep12.web import app


client = TestClient(app)


def test_homepage_renders_form():
    response = client.get("/")

    assert response.status_code == 200
    assert "DEP-12 Checker" in response.text
    assert "tailwind" in response.text.lower()
    assert "name=\"text\"" in response.text


def test_validate_form_returns_report():
    response = client.post("/validate", data={"text": "Bug-Database: not a url\n"})

    assert response.status_code == 200
    assert "DEP-12 Validation Report" in response.text
    assert "value &#x27;not a url&#x27; does not look like valid URL" in response.text


def test_api_validate_returns_warnings():
    response = client.post(
        "/api/validate",
        json={"text": "Bug-Database: \"https://example.org/issues\\n\"\nReference:\n  - DOI: abc\n"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["valid"] is False
    assert [(w["field"], w["key"], w["suggestion"]) for w in payload["warnings"]] == [
        ("Bug-Database", None, "https://example.org/issues"),
        ("DOI", 0, None),
    ]


def test_api_validate_clean_metadata(metadata_text):
    response = client.post("/api/validate", json={"text": metadata_text})

    assert response.status_code == 200
    assert response.json() == {"valid": True, "warnings": []}


def test_api_rejects_non_mapping_yaml():
    response = client.post("/api/validate", json={"text": "- a\n- b\n"})

    assert response.status_code == 400


@pytest.mark.parametrize(
    ("text", "field"),
    [("1: foo\n", "1"), ("null: foo\n", "None"), ("true: foo\n", "True")],
)
def test_api_reports_non_string_field_names(text, field):
    response = client.post("/api/validate", json={"text": text})

    assert response.status_code == 200
    warnings = response.json()["warnings"]
    assert [(w["field"], w["message"]) for w in warnings] == [(field, "unknown field")]


def test_validate_form_handles_non_string_field_names():
    response = client.post("/validate", data={"text": "1: foo\nHomepage: https://example.org\n"})

    assert response.status_code == 200
    assert "unknown field" in response.text
