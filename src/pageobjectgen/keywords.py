from __future__ import annotations

from typing import Literal

TargetLanguage = Literal["csharp", "java"]
SUPPORTED_LANGUAGES: tuple[TargetLanguage, ...] = ("csharp", "java")

# Reserved and contextual keywords, lower-cased for case-insensitive lookup.
CSHARP_KEYWORDS: frozenset[str] = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch", "char", "checked",
        "class", "const", "continue", "decimal", "default", "delegate", "do", "double", "else",
        "enum", "event", "explicit", "extern", "false", "finally", "fixed", "float", "for",
        "foreach", "goto", "if", "implicit", "in", "int", "interface", "internal", "is", "lock",
        "long", "namespace", "new", "null", "object", "operator", "out", "override", "params",
        "private", "protected", "public", "readonly", "ref", "return", "sbyte", "sealed",
        "short", "sizeof", "stackalloc", "static", "string", "struct", "switch", "this", "throw",
        "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort", "using",
        "virtual", "void", "volatile", "while", "add", "alias", "ascending", "async", "await",
        "by", "descending", "dynamic", "equals", "from", "get", "global", "group", "into",
        "join", "let", "nameof", "on", "orderby", "partial", "remove", "select", "set",
        "unmanaged", "value", "var", "when", "where", "with", "yield",
    }
)

JAVA_KEYWORDS: frozenset[str] = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char", "class",
        "const", "continue", "default", "do", "double", "else", "enum", "extends", "final",
        "finally", "float", "for", "goto", "if", "implements", "import", "instanceof", "int",
        "interface", "long", "native", "new", "package", "private", "protected", "public",
        "return", "short", "static", "strictfp", "super", "switch", "synchronized", "this",
        "throw", "throws", "transient", "try", "void", "volatile", "while", "true", "false",
        "null", "var", "record", "yield", "sealed", "permits",
    }
)

_KEYWORDS_BY_LANGUAGE: dict[str, frozenset[str]] = {
    "csharp": CSHARP_KEYWORDS,
    "java": JAVA_KEYWORDS,
}

FILE_EXTENSIONS: dict[str, str] = {
    "csharp": ".cs",
    "java": ".java",
}


def normalize_language(value: str | None) -> TargetLanguage:
    normalized = (value or "").strip().lower()
    if normalized in {"c#", "cs"}:
        normalized = "csharp"
    if normalized == "csharp":
        return "csharp"
    if normalized == "java":
        return "java"
    return "csharp"


def reserved_words_for(language: str) -> frozenset[str]:
    return _KEYWORDS_BY_LANGUAGE[normalize_language(language)]


def file_extension_for(language: str) -> str:
    return FILE_EXTENSIONS[normalize_language(language)]
