from __future__ import annotations

from dataclasses import dataclass
from difflib import unified_diff
import os
from pathlib import Path
import re
import tempfile
from typing import AbstractSet

DEFAULT_CLASS_NAME = "GeneratedPage"

_INVALID_CLASS_CHARS = re.compile(r"[^A-Za-z0-9_]")
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class PagePreview:
    ok: bool
    target_file: Path
    message: str
    diff_text: str
    file_content: str | None
    overwrites: bool = False


def derive_class_name(output_path: str | Path) -> str:
    stem = Path(output_path).stem
    cleaned = _INVALID_CLASS_CHARS.sub("", stem)
    if not cleaned or cleaned[0].isdigit():
        return DEFAULT_CLASS_NAME
    return cleaned[0].upper() + cleaned[1:]


def normalize_page_class_name(raw_value: str, reserved_words: AbstractSet[str]) -> tuple[str, str | None]:
    value = raw_value.strip()
    if not value:
        return "", "Class name is required."
    if not _IDENTIFIER_PATTERN.fullmatch(value):
        return "", f"Invalid class name '{value}'. Class names must start with a letter or underscore and contain only letters, digits and underscores."
    if value.lower() in reserved_words:
        return "", f"Invalid class name '{value}'. Class names must not be keywords."
    return value, None


def normalize_output_path(output_path: str | Path, extension: str) -> Path:
    path = Path(output_path)
    if path.name.lower().endswith(extension.lower()):
        return path
    return path.with_name(f"{path.name}{extension}")


def generate_page_preview(target_file: Path, content: str) -> PagePreview:
    existing: str | None = None
    if target_file.exists():
        if not target_file.is_file():
            return PagePreview(
                ok=False,
                target_file=target_file,
                message=f"Target path is not a file: {target_file}",
                diff_text="",
                file_content=None,
            )
        try:
            existing = target_file.read_text(encoding="utf-8")
        except OSError as exc:
            return PagePreview(
                ok=False,
                target_file=target_file,
                message=f"Could not read existing file: {exc}",
                diff_text="",
                file_content=None,
            )

    diff_text = "".join(
        unified_diff(
            (existing or "").splitlines(keepends=True),
            content.splitlines(keepends=True),
            fromfile=str(target_file) if existing is not None else "/dev/null",
            tofile=str(target_file),
        )
    )
    return PagePreview(
        ok=True,
        target_file=target_file,
        message="Preview generated, no files written.",
        diff_text=diff_text,
        file_content=content,
        overwrites=existing is not None,
    )


def apply_page_preview(preview: PagePreview) -> tuple[bool, str]:
    if not preview.ok or preview.file_content is None:
        return False, "No page preview to apply."

    target = preview.target_file
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return False, f"Could not create output directory: {exc}"

    temp_path: Path | None = None
    try:
        fd, temp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
        temp_path = Path(temp_name)
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as temp_file:
            temp_file.write(preview.file_content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        temp_path.replace(target)
    except OSError as exc:
        if temp_path and temp_path.exists():
            temp_path.unlink(missing_ok=True)
        return False, f"Error writing output file '{target}': {exc}"
    return True, f"Successfully generated page object class at: {target}"
