"""JSON-file persistence for the shopping cart."""

import json
import logging
from pathlib import Path
from typing import List

logger = logging.getLogger("RunMate.JsonCartStore")


class JsonCartStore:
    """Stores cart lines as a JSON list. Read/write errors are logged, not raised."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[dict]:
        try:
            if self.path.exists():
                with open(self.path, "r") as f:
                    data = json.load(f)
                if isinstance(data, list):
                    return [line for line in data if isinstance(line, dict)]
                logger.warning(f"Ignoring malformed cart file {self.path}")
        except (json.JSONDecodeError, IOError) as e:
            logger.error("Error loading cart: %s", e)
        return []

    def save(self, lines: List[dict]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(lines, f, indent=2)
        except IOError as e:
            logger.error("Error saving cart: %s", e)
