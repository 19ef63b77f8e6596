"""Application paths configuration."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppPaths:
    config_path: Path
    cart_path: Path

    @classmethod
    def default(cls) -> "AppPaths":
        home = Path.home()

        return cls(
            config_path=Path("settings.yml"),
            cart_path=home / ".local" / "share" / "runmate" / "cart.json",
        )
