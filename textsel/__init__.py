"""textsel - resolve textobject query results into editor selections."""

from typing import TYPE_CHECKING, Any

__all__ = [
    "__version__",
    "main",
    "SelectConfig",
    "select_textobject",
]

__version__ = "0.1.0"

if TYPE_CHECKING:
    from .cli import main
    from .config import SelectConfig
    from .editing.selection import select_textobject


def __getattr__(name: str) -> Any:
    """Lazy import to keep package import side-effect free."""
    if name == "main":
        from .cli import main

        return main
    if name == "SelectConfig":
        from .config import SelectConfig

        return SelectConfig
    if name == "select_textobject":
        from .editing.selection import select_textobject

        return select_textobject
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
