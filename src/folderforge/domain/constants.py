from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the format tags, tree-diagram glyphs and the file extension
allow-list consulted by the stricter classification policy.
"""

from typing import Dict, List, Tuple

# -----------------------------------------------------------------------------
# FORMAT TAGS
# -----------------------------------------------------------------------------
FORMAT_TREE = "tree"
FORMAT_NESTED = "nested"
FORMAT_FLAT = "flat"
FORMAT_SEGMENTS = "segments"
FORMAT_PATHS = "paths"

SUPPORTED_FORMATS: Tuple[str, ...] = (
    FORMAT_TREE,
    FORMAT_NESTED,
    FORMAT_FLAT,
    FORMAT_SEGMENTS,
    FORMAT_PATHS,
)

# Long-form spellings accepted from configuration and CLI
FORMAT_ALIASES: Dict[str, str] = {
    "tree-string": FORMAT_TREE,
    "ascii": FORMAT_TREE,
    "nested-map": FORMAT_NESTED,
    "nested-mapping": FORMAT_NESTED,
    "flat-map": FORMAT_FLAT,
    "flat-mapping": FORMAT_FLAT,
    "path-segments": FORMAT_SEGMENTS,
    "segment-list": FORMAT_SEGMENTS,
    "path-list": FORMAT_PATHS,
}

# -----------------------------------------------------------------------------
# TREE DIAGRAM GLYPHS
# -----------------------------------------------------------------------------
TREE_BRANCH = "├── "
TREE_LAST_BRANCH = "└── "
TREE_PIPE = "│   "
TREE_SPACE = "    "
TREE_CONNECTOR_CHARS = "├└│─"
DEFAULT_INDENT_UNIT = 4

PATH_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# EXTENSION ALLOW-LIST
# -----------------------------------------------------------------------------
# Entries starting with '.' match as suffixes; bare entries match whole names.
FILE_EXTENSIONS: List[str] = [
    # Web / JavaScript
    ".js", ".mjs", ".cjs", ".jsx", ".ts", ".mts", ".cts", ".tsx",
    ".html", ".htm", ".css", ".scss", ".sass", ".less", ".vue", ".svelte", ".astro",
    # Data / config
    ".json", ".jsonc", ".json5", ".toml", ".yaml", ".yml", ".xml", ".csv", ".tsv",
    ".ini", ".cfg", ".conf", ".config", ".env", ".properties", ".lock", ".sql",
    # Python
    ".py", ".pyi", ".ipynb",
    # JVM
    ".java", ".kt", ".kts", ".gradle", ".scala", ".groovy",
    # .NET
    ".cs", ".csproj", ".sln", ".fs", ".vb",
    # Native
    ".c", ".h", ".cpp", ".cc", ".hpp", ".rs", ".go", ".mod", ".sum", ".zig",
    ".swift", ".m", ".dart",
    # Scripting
    ".rb", ".php", ".phtml", ".pl", ".lua", ".r", ".sh", ".bash", ".zsh",
    ".ps1", ".bat", ".cmd",
    # Docs
    ".md", ".mdx", ".rst", ".txt", ".pdf", ".adoc",
    # Assets
    ".svg", ".png", ".jpg", ".jpeg", ".gif", ".ico", ".webp",
    # Dotfiles
    ".gitignore", ".gitattributes", ".dockerignore", ".npmrc", ".nvmrc",
    ".editorconfig", ".prettierrc", ".eslintrc",
    # Bare file names
    "Dockerfile", "Makefile", "CMakeLists.txt", "LICENSE", "Procfile", "Gemfile",
]
