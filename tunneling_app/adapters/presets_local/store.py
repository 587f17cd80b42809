from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List

from tunneling_app.domain.models import SimulationConfig

logger = logging.getLogger(__name__)

# Quick presets: energy / barrier height / barrier width (mass untouched)
BUILTIN_PRESETS: Dict[str, Dict[str, float]] = {
    "Tunneling": {"energy": 4.0, "barrier_height": 6.0, "barrier_width": 1.0},
    "Transmission": {"energy": 7.0, "barrier_height": 5.0, "barrier_width": 1.5},
    "Block": {"energy": 4.0, "barrier_height": 10.0, "barrier_width": 2.0},
}


def _slugify(name: str) -> str:
    safe = "".join(c if c.isalnum() or c in ("-", "_") else "-" for c in name.strip())
    safe = "-".join(filter(None, safe.split("-")))
    return safe.lower() or "preset"


class LocalPresetStore:
    """Filesystem-based preset storage (JSON), schema-version aware.

    Presets are stored in ``<base_dir>/<slug>.json``.
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = Path(base_dir or Path.cwd() / "presets").resolve()
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def list(self) -> List[str]:
        return sorted(p.stem for p in self.base_dir.glob("*.json"))

    def path_for(self, name: str) -> Path:
        return self.base_dir / f"{_slugify(name)}.json"

    def save(self, name: str, cfg: SimulationConfig) -> None:
        path = self.path_for(name)
        data = cfg.model_dump()
        data["schema_version"] = cfg.version
        with path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.info("Saved preset %s to %s", name, path)

    def load(self, name: str) -> SimulationConfig:
        path = self.path_for(name)
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        # Only schema 1.0.0 exists so far; nothing to migrate
        data.pop("schema_version", None)
        logger.info("Loaded preset %s from %s", name, path)
        return SimulationConfig.model_validate(data)

    def remove(self, name: str) -> None:
        path = self.path_for(name)
        if path.exists():
            path.unlink()
            logger.info("Removed preset %s", name)
