"""Language table used for line counting.

Adding a new language:
  1. Add a LanguageConfig entry to LANGUAGES below.
  2. That's it. ``detect_language`` picks up its extensions.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class LanguageConfig:
    """Everything the line counter needs to know about a language."""

    name: str
    extensions: list[str]

    # Prefixes that make a (stripped) line a comment line.
    line_comments: list[str] = field(default_factory=list)

    # (start, end) delimiters of block comments.
    block_comments: list[tuple[str, str]] = field(default_factory=list)

    # Exact file names that belong to this language (e.g. "Makefile").
    file_names: list[str] = field(default_factory=list)


# ── Re-usable building blocks ──────────────────────────────────────

_C_LINE = ["//"]
_C_BLOCK = [("/*", "*/")]
_HASH = ["#"]
_DASH = ["--"]
_HTML_BLOCK = [("<!--", "-->")]


# ── Language definitions ───────────────────────────────────────────

_CONFIGS = [
    LanguageConfig("Python", [".py", ".pyi", ".pyw"], _HASH),
    LanguageConfig("Rust", [".rs"], _C_LINE, _C_BLOCK),
    LanguageConfig("Go", [".go"], _C_LINE, _C_BLOCK),
    LanguageConfig("C", [".c", ".h"], _C_LINE, _C_BLOCK),
    LanguageConfig("C++", [".cc", ".cpp", ".cxx", ".hh", ".hpp", ".hxx"], _C_LINE, _C_BLOCK),
    LanguageConfig("C#", [".cs"], _C_LINE, _C_BLOCK),
    LanguageConfig("Java", [".java"], _C_LINE, _C_BLOCK),
    LanguageConfig("Kotlin", [".kt", ".kts"], _C_LINE, _C_BLOCK),
    LanguageConfig("Scala", [".scala", ".sc"], _C_LINE, _C_BLOCK),
    LanguageConfig("Swift", [".swift"], _C_LINE, _C_BLOCK),
    LanguageConfig("JavaScript", [".js", ".mjs", ".cjs"], _C_LINE, _C_BLOCK),
    LanguageConfig("JSX", [".jsx"], _C_LINE, _C_BLOCK),
    LanguageConfig("TypeScript", [".ts", ".mts", ".cts"], _C_LINE, _C_BLOCK),
    LanguageConfig("TSX", [".tsx"], _C_LINE, _C_BLOCK),
    LanguageConfig("PHP", [".php"], ["//", "#"], _C_BLOCK),
    LanguageConfig("Ruby", [".rb", ".rake"], _HASH, [("=begin", "=end")], ["Rakefile", "Gemfile"]),
    LanguageConfig("Perl", [".pl", ".pm"], _HASH),
    LanguageConfig("Lua", [".lua"], _DASH, [("--[[", "]]")]),
    LanguageConfig("Haskell", [".hs"], _DASH, [("{-", "-}")]),
    LanguageConfig("Elixir", [".ex", ".exs"], _HASH),
    LanguageConfig("Erlang", [".erl", ".hrl"], ["%"]),
    LanguageConfig("Dart", [".dart"], _C_LINE, _C_BLOCK),
    LanguageConfig("Zig", [".zig"], _C_LINE),
    LanguageConfig("Shell", [".sh", ".bash", ".zsh"], _HASH),
    LanguageConfig("PowerShell", [".ps1", ".psm1"], _HASH, [("<#", "#>")]),
    LanguageConfig("SQL", [".sql"], _DASH, _C_BLOCK),
    LanguageConfig("HTML", [".html", ".htm"], [], _HTML_BLOCK),
    LanguageConfig("CSS", [".css"], [], _C_BLOCK),
    LanguageConfig("SCSS", [".scss", ".sass"], _C_LINE, _C_BLOCK),
    LanguageConfig("Markdown", [".md", ".markdown"]),
    LanguageConfig("reStructuredText", [".rst"]),
    LanguageConfig("JSON", [".json"]),
    LanguageConfig("YAML", [".yaml", ".yml"], _HASH),
    LanguageConfig("TOML", [".toml"], _HASH),
    LanguageConfig("XML", [".xml", ".xsd", ".svg"], [], _HTML_BLOCK),
    LanguageConfig("Makefile", [".mk"], _HASH, [], ["Makefile", "makefile", "GNUmakefile"]),
    LanguageConfig("Dockerfile", [".dockerfile"], _HASH, [], ["Dockerfile"]),
    LanguageConfig("CMake", [".cmake"], _HASH, [], ["CMakeLists.txt"]),
    LanguageConfig("Plain Text", [".txt"]),
]

LANGUAGES: dict[str, LanguageConfig] = {cfg.name: cfg for cfg in _CONFIGS}

_EXTENSION_TO_LANGUAGE: dict[str, LanguageConfig] = {}
_FILENAME_TO_LANGUAGE: dict[str, LanguageConfig] = {}
for _cfg in _CONFIGS:
    for _ext in _cfg.extensions:
        _EXTENSION_TO_LANGUAGE[_ext] = _cfg
    for _fname in _cfg.file_names:
        _FILENAME_TO_LANGUAGE[_fname] = _cfg


def detect_language(filepath) -> Optional[LanguageConfig]:
    """Detect language from file name or extension.

    Exact file names win over extensions, so ``CMakeLists.txt`` is CMake
    rather than plain text.

    Returns:
        The matching LanguageConfig, or None for unknown files
    """
    path = Path(filepath)
    by_name = _FILENAME_TO_LANGUAGE.get(path.name)
    if by_name is not None:
        return by_name
    return _EXTENSION_TO_LANGUAGE.get(path.suffix.lower())
