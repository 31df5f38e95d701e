from __future__ import annotations

from dataclasses import asdict, dataclass
import json
import os
from pathlib import Path
import tempfile

from .keywords import TargetLanguage, normalize_language
from .page_fetcher import DEFAULT_NAVIGATION_TIMEOUT_MS, DEFAULT_USER_AGENT, WAIT_UNTIL_CHOICES

CONFIG_DIR = Path.home() / ".pageobjectgen"
CONFIG_PATH = CONFIG_DIR / "config.json"

DEFAULT_NAMESPACE = "YourProject.PageObjects"
DEFAULT_JAVA_PACKAGE = "com.example.pages"
DEFAULT_WAIT_TIMEOUT_SECONDS = 10


@dataclass(slots=True)
class GeneratorSettings:
    language: TargetLanguage = "csharp"
    namespace: str = DEFAULT_NAMESPACE
    java_package: str = DEFAULT_JAVA_PACKAGE
    wait_timeout_seconds: int = DEFAULT_WAIT_TIMEOUT_SECONDS
    navigation_timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS
    wait_until: str = "domcontentloaded"
    user_agent: str = DEFAULT_USER_AGENT


def load_settings(config_path: Path | None = None) -> GeneratorSettings:
    path = config_path or CONFIG_PATH
    if not path.exists() or not path.is_file():
        return GeneratorSettings()

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, TypeError):
        return GeneratorSettings()

    if not isinstance(payload, dict):
        return GeneratorSettings()

    wait_until = str(payload.get("wait_until", "") or "domcontentloaded")
    return GeneratorSettings(
        language=normalize_language(str(payload.get("language", "") or "csharp")),
        namespace=str(payload.get("namespace", "") or DEFAULT_NAMESPACE),
        java_package=str(payload.get("java_package", "") or DEFAULT_JAVA_PACKAGE),
        wait_timeout_seconds=_positive_int(payload.get("wait_timeout_seconds"), DEFAULT_WAIT_TIMEOUT_SECONDS),
        navigation_timeout_ms=_positive_int(payload.get("navigation_timeout_ms"), DEFAULT_NAVIGATION_TIMEOUT_MS),
        wait_until=wait_until if wait_until in WAIT_UNTIL_CHOICES else "domcontentloaded",
        user_agent=str(payload.get("user_agent", "") or DEFAULT_USER_AGENT),
    )


def save_settings(settings: GeneratorSettings, config_path: Path | None = None) -> tuple[bool, str | None]:
    """Persist ``settings`` so later runs start from them; returns ``(ok, error)``."""
    path = config_path or CONFIG_PATH
    payload = json.dumps(asdict(settings), indent=2, sort_keys=True) + "\n"

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    except OSError as exc:
        return False, f"Could not prepare settings file {path}: {exc}"

    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload)
        temp_path.replace(path)
    except OSError as exc:
        temp_path.unlink(missing_ok=True)
        return False, f"Could not save settings to {path}: {exc}"
    return True, None


def _positive_int(value: object, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default
