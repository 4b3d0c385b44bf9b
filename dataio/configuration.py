from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class Config:
    # main window geometry
    window_width: int = 1200
    window_height: int = 760
    # chart y-axis (dB SPL)
    y_min: float = 50.0
    y_max: float = 110.0
    y_tick_step: float = 10.0
    curve_color: str = "red"
    # seed for the catalog's curve jitter; None draws fresh jitter every run
    jitter_seed: Optional[int] = None
    # alternative speaker catalog YAML; None uses the packaged one
    catalog_path: Optional[str] = None
    config_folder: str = ""
    config_filename: str = "settings.json"

    def __post_init__(self):
        self.config_folder = str(self.config_folder or "")
        if self.y_max <= self.y_min:
            raise ValueError(f"y_max ({self.y_max}) must be greater than y_min ({self.y_min})")
        if self.y_tick_step <= 0:
            raise ValueError("y_tick_step must be positive")
        if self.jitter_seed is not None and self.jitter_seed < 0:
            raise ValueError(f"jitter_seed ({self.jitter_seed}) must be a non-negative integer")

    @property
    def config_path(self) -> Path:
        return Path(self.config_folder) / self.config_filename

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        if path is None:
            raise ValueError("path must be provided for load()")
        path = Path(path)
        if not path.exists():
            # return default config with folder set
            return cls(config_folder=str(path.parent), config_filename=path.name)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            seed = data.get("jitter_seed")
            return cls(
                window_width=int(data.get("window_width", 1200)),
                window_height=int(data.get("window_height", 760)),
                y_min=float(data.get("y_min", 50.0)),
                y_max=float(data.get("y_max", 110.0)),
                y_tick_step=float(data.get("y_tick_step", 10.0)),
                curve_color=str(data.get("curve_color", "red")),
                jitter_seed=int(seed) if seed is not None else None,
                catalog_path=data.get("catalog_path"),
                config_folder=str(path.parent),
                config_filename=path.name,
            )
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            # on parse error return defaults and keep config folder
            logger.warning(f"Ignoring unreadable settings file {path}: {exc}")
            return cls(config_folder=str(path.parent), config_filename=path.name)

# Module-level singleton accessor
_config_singleton: Optional[Config] = None

def _default_repo_config_folder() -> Path:
    # repo root is two levels up from this file: .../dataio/configuration.py
    repo_root = Path(__file__).resolve().parent.parent
    return repo_root / "config"

def get_config(recreate: bool = False) -> Config:
    """
    Return a singleton Config instance.
    On first call settings.json in the repo config folder is read if present;
    otherwise built-in defaults are used. The file is never written.
    Set recreate=True to reload from disk.
    """
    global _config_singleton
    if _config_singleton is not None and not recreate:
        return _config_singleton

    cfg_file = _default_repo_config_folder() / "settings.json"
    _config_singleton = Config.load(cfg_file)
    return _config_singleton
