from dep12.config import load_settings
from dep12.parsers import DEFAULT_YAML_MIN_VERSION, YamlLoaderConfig, parse_version


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DEP12_LOG_LEVEL", "debug")
    monkeypatch.setenv("DEP12_STRICT", "yes")
    monkeypatch.setenv("DEP12_YAML_MIN_VERSION", "6.0")

    settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.strict is True
    assert settings.yaml_config() == YamlLoaderConfig(minimum_version=(6, 0))


def test_settings_defaults(monkeypatch):
    for name in ("DEP12_LOG_LEVEL", "DEP12_STRICT", "DEP12_YAML_MIN_VERSION"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("dep12.config.load_dotenv", lambda: False)

    settings = load_settings()

    assert settings.log_level == "WARNING"
    assert settings.strict is False
    assert settings.yaml_min_version == DEFAULT_YAML_MIN_VERSION


def test_parse_version():
    assert parse_version("6.0.1") == (6, 0, 1)
    assert parse_version("5.4b2") == (5, 4)
    assert parse_version("0.69") < (5, 4)
