import json
from pathlib import Path

from pageobjectgen.page_fetcher import DEFAULT_NAVIGATION_TIMEOUT_MS
from pageobjectgen.settings import GeneratorSettings, load_settings, save_settings


def test_settings_roundtrip(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.json"
    original = GeneratorSettings(
        language="java",
        namespace="Shop.Pages",
        java_package="com.shop.pages",
        wait_timeout_seconds=20,
        navigation_timeout_ms=45_000,
        wait_until="load",
    )
    ok, error = save_settings(original, config_path)
    assert ok and error is None
    assert load_settings(config_path) == original


def test_settings_load_fallbacks(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    assert load_settings(config_path) == GeneratorSettings()
    config_path.write_text("{invalid", encoding="utf-8")
    assert load_settings(config_path) == GeneratorSettings()
    config_path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(config_path) == GeneratorSettings()


def test_settings_invalid_values_are_coerced(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "language": "C#",
                "wait_timeout_seconds": -5,
                "navigation_timeout_ms": "soon",
                "wait_until": "whenever",
                "namespace": "",
            }
        ),
        encoding="utf-8",
    )
    settings = load_settings(config_path)
    assert settings.language == "csharp"
    assert settings.wait_timeout_seconds == 10
    assert settings.navigation_timeout_ms == DEFAULT_NAVIGATION_TIMEOUT_MS
    assert settings.wait_until == "domcontentloaded"
    assert settings.namespace == "YourProject.PageObjects"


def test_settings_save_leaves_no_temp_files(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    save_settings(GeneratorSettings(), config_path)
    assert [path.name for path in tmp_path.iterdir()] == ["config.json"]
    payload = json.loads(config_path.read_text(encoding="utf-8"))
    assert payload["language"] == "csharp"


def test_settings_save_reports_unwritable_folder(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a folder", encoding="utf-8")
    ok, error = save_settings(GeneratorSettings(), blocker / "config.json")
    assert not ok
    assert error is not None and error.startswith("Could not prepare settings file")
