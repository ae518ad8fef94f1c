# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : builtins.py
#   file_relpath : src/headersmith/languages/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Built-in language definitions.

Exports:
    LANGUAGES (tuple[Language, ...]): Default languages in registration order.
        Order matters only for equal-length extension ties.

Notes:
    Block-only languages (CSS, XML, HTML...) receive block-comment headers; the
    others can carry line-comment headers, block comments in existing headers
    are still recognized where the language has them.
"""

from __future__ import annotations

from headersmith.languages.base import Language

LANGUAGES: tuple[Language, ...] = (
    Language(
        name="csharp",
        extensions=(".cs", ".designer.cs", ".xaml.cs", ".aspx.cs", ".ascx.cs"),
        line_comment="//",
        block_start="/*",
        block_end="*/",
        description="C# sources (*.cs)",
    ),
    Language(
        name="c",
        extensions=(".c", ".h"),
        line_comment="//",
        block_start="/*",
        block_end="*/",
        description="C sources and headers (*.c, *.h)",
    ),
    Language(
        name="cpp",
        extensions=(".cc", ".cxx", ".cpp", ".hh", ".hpp", ".hxx"),
        line_comment="//",
        block_start="/*",
        block_end="*/",
        description="C++ sources and headers",
    ),
    Language(
        name="java",
        extensions=(".java",),
        line_comment="//",
        block_start="/*",
        block_end="*/",
        description="Java sources (*.java)",
    ),
    Language(
        name="kotlin",
        extensions=(".kt", ".kts"),
        line_comment="//",
        block_start="/*",
        block_end="*/",
        description="Kotlin sources (*.kt, *.kts)",
    ),
    Language(
        name="go",
        extensions=(".go",),
        line_comment="//",
        block_start="/*",
        block_end="*/",
        description="Go sources (*.go)",
    ),
    Language(
        name="rust",
        extensions=(".rs",),
        line_comment="//",
        block_start="/*",
        block_end="*/",
        description="Rust sources (*.rs)",
    ),
    Language(
        name="swift",
        extensions=(".swift",),
        line_comment="//",
        block_start="/*",
        block_end="*/",
        description="Swift sources (*.swift)",
    ),
    Language(
        name="javascript",
        extensions=(".js", ".jsx", ".mjs", ".cjs"),
        line_comment="//",
        block_start="/*",
        block_end="*/",
        description="JavaScript sources",
    ),
    Language(
        name="typescript",
        extensions=(".ts", ".tsx", ".d.ts"),
        line_comment="//",
        block_start="/*",
        block_end="*/",
        description="TypeScript sources",
    ),
    Language(
        name="fsharp",
        extensions=(".fs", ".fsi", ".fsx"),
        line_comment="//",
        block_start="(*",
        block_end="*)",
        description="F# sources",
    ),
    Language(
        name="visualbasic",
        extensions=(".vb",),
        line_comment="'",
        description="Visual Basic sources (*.vb)",
    ),
    Language(
        name="python",
        extensions=(".py", ".pyi"),
        line_comment="#",
        description="Python sources (*.py, *.pyi)",
    ),
    Language(
        name="shell",
        extensions=(".sh", ".bash", ".zsh"),
        line_comment="#",
        description="Shell scripts",
    ),
    Language(
        name="powershell",
        extensions=(".ps1", ".psm1", ".psd1"),
        line_comment="#",
        block_start="<#",
        block_end="#>",
        description="PowerShell scripts",
    ),
    Language(
        name="yaml",
        extensions=(".yml", ".yaml"),
        line_comment="#",
        description="YAML documents",
    ),
    Language(
        name="toml",
        extensions=(".toml",),
        line_comment="#",
        description="TOML documents",
    ),
    Language(
        name="sql",
        extensions=(".sql",),
        line_comment="--",
        block_start="/*",
        block_end="*/",
        description="SQL scripts (*.sql)",
    ),
    Language(
        name="lua",
        extensions=(".lua",),
        line_comment="--",
        block_start="--[[",
        block_end="]]",
        description="Lua sources (*.lua)",
    ),
    Language(
        name="css",
        extensions=(".css", ".scss", ".less"),
        block_start="/*",
        block_end="*/",
        description="Stylesheets",
    ),
    Language(
        name="xml",
        extensions=(".xml", ".xaml", ".csproj", ".vbproj", ".props", ".targets", ".config", ".resx"),
        block_start="<!--",
        block_end="-->",
        prologue=r"\s*<\?xml\s",
        description="XML documents",
    ),
    Language(
        name="html",
        extensions=(".html", ".htm", ".cshtml", ".vue"),
        block_start="<!--",
        block_end="-->",
        description="HTML documents and templates",
    ),
    Language(
        name="aspx",
        extensions=(".aspx", ".ascx", ".master"),
        block_start="<%--",
        block_end="--%>",
        description="ASP.NET pages and controls",
    ),
)
