"""Modal terminal editor for git rebase todo files."""

__all__ = [
    "adapters",
    "config",
    "errors",
    "git",
    "input",
    "keymaps",
    "modules",
    "plan",
    "process",
    "runtime",
    "view",
]

__version__ = "0.1.0"
