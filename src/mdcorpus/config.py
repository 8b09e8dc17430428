"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_PORT = 7331
DEFAULT_TITLE = "mdcorpus"
DEFAULT_HIGHLIGHT_STYLE = "monokai"


@dataclass(slots=True)
class AppConfig:
    root_dir: Path = Path(".")
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    site_title: str = DEFAULT_TITLE
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE

    def resolve_root_dir(self, base_dir: Path | None = None) -> Path:
        root = Path(self.root_dir).expanduser()
        if root.is_absolute() or base_dir is None:
            return root
        return base_dir / root

    def validate(self, base_dir: Path | None = None) -> Path:
        """Return the resolved root directory, failing if it is unusable."""
        root = self.resolve_root_dir(base_dir)
        if not root.exists():
            raise FileNotFoundError(f"Directory not found: {root}")
        if not root.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {root}")
        return root.resolve()
