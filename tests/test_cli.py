import json
from pathlib import Path

from dep12 import cli
from dep12.config import Settings


def test_cli_validates_clean_file(tmp_path: Path, metadata_text, capsys):
    metadata = tmp_path / "metadata"
    metadata.write_text(metadata_text)

    exit_code = cli.main(["validate", str(metadata)])

    assert exit_code == 0
    assert "No metadata issues detected." in capsys.readouterr().out


def test_cli_writes_json_and_honours_strict(tmp_path: Path, capsys):
    metadata = tmp_path / "metadata"
    metadata.write_text("Bug-Database: not a url\nHomepage: https://example.org\n")
    json_out = tmp_path / "results.json"

    exit_code = cli.main(["validate", str(metadata), "--json-output", str(json_out), "--strict"])

    assert exit_code == 1
    out = capsys.readouterr().out
    assert "[WARNING] Homepage: unknown field" in out
    assert "value 'not a url' does not look like valid URL" in out
    results = json.loads(json_out.read_text())
    assert [w["message"] for w in results[str(metadata)]["warnings"]] == [
        "unknown field",
        "value '%(value)s' does not look like valid URL",
    ]


def test_cli_warnings_are_not_fatal_by_default(tmp_path: Path):
    metadata = tmp_path / "metadata"
    metadata.write_text("Homepage: https://example.org\n")

    assert cli.main(["validate", str(metadata)]) == 0


def test_cli_strict_from_settings(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(cli, "load_settings", lambda: Settings(strict=True))
    metadata = tmp_path / "metadata"
    metadata.write_text("Homepage: https://example.org\n")

    assert cli.main(["validate", str(metadata)]) == 1


def test_cli_reports_unloadable_file(tmp_path: Path, capsys):
    metadata = tmp_path / "metadata"
    metadata.write_text("- not\n- a mapping\n")

    exit_code = cli.main(["validate", str(metadata), str(tmp_path / "missing")])

    assert exit_code == 2
    err = capsys.readouterr().err
    assert "cannot create Dep12Document from YAML list" in err
    assert "missing" in err


def test_cli_converts_bibtex(tmp_path: Path, bibtex_text):
    bib = tmp_path / "refs.bib"
    bib.write_text(bibtex_text)
    output = tmp_path / "metadata"

    exit_code = cli.main(["convert", str(bib), "--output", str(output)])

    assert exit_code == 0
    text = output.read_text()
    assert text.startswith("Reference:")
    assert "DOI: 10.1234/jt.2020.456" in text
    assert "Year: 2020" in text


def test_cli_uses_injected_validator(monkeypatch, tmp_path: Path):
    created = []

    class FakeValidator:
        def __init__(self, *_, **__):
            created.append(self)

        def validate(self, document):
            return []

    monkeypatch.setattr(cli, "Dep12Validator", FakeValidator)
    metadata = tmp_path / "metadata"
    metadata.write_text("Homepage: https://example.org\n")

    assert cli.main(["validate", str(metadata), "--strict"]) == 0
    assert created, "Fake validator should have been used"
