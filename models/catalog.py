# models/catalog.py
"""Speaker catalog loader.

The catalog is a YAML file shipped next to this module
(``speaker_catalog.yaml``). Each entry carries the speaker's metadata and a
short table of anchor points; loading an entry generates its response curve
with :func:`models.curve_generator.generate_response_curve`.

The catalog is application-distributed and read once; callers normally go
through :func:`get_speaker_catalog`, which builds it on first use from the
configured path and jitter seed.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import yaml

from .curve_generator import (
    AnchorOrderError,
    Jitter,
    as_anchor_points,
    generate_response_curve,
    uniform_jitter,
    validate_anchors,
)
from .speaker import Speaker

logger = logging.getLogger(__name__)


class SpeakerCatalogError(Exception):
    """Exception raised when the speaker catalog cannot be loaded."""
    pass


class SpeakerNotFoundError(SpeakerCatalogError):
    """Exception raised when a requested speaker is not in the catalog."""
    pass


class SpeakerCatalogValidationError(SpeakerCatalogError):
    """Exception raised when a catalog entry fails validation."""
    pass


_REQUIRED_FIELDS = ("name", "resonance_frequency", "sensitivity", "description", "anchors")


def default_catalog_path() -> Path:
    return Path(__file__).parent / "speaker_catalog.yaml"


def _validate_entry(entry: Any, position: int) -> None:
    """Validate one catalog entry.

    Raises:
        SpeakerCatalogValidationError: If validation fails
    """
    if not isinstance(entry, dict):
        raise SpeakerCatalogValidationError(f"Catalog entry #{position} must be a mapping")

    label = entry.get("name") or f"#{position}"
    for key in _REQUIRED_FIELDS:
        if key not in entry:
            raise SpeakerCatalogValidationError(f"Speaker '{label}' is missing required field: {key}")

    if not isinstance(entry["name"], str) or not entry["name"].strip():
        raise SpeakerCatalogValidationError(f"Speaker {label}: 'name' must be a non-empty string")
    for key in ("resonance_frequency", "sensitivity"):
        value = entry[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise SpeakerCatalogValidationError(f"Speaker '{label}': '{key}' must be an integer")
    if not isinstance(entry["description"], str):
        raise SpeakerCatalogValidationError(f"Speaker '{label}': 'description' must be a string")

    anchors = entry["anchors"]
    if not isinstance(anchors, list):
        raise SpeakerCatalogValidationError(f"Speaker '{label}': 'anchors' must be a list")
    for i, pair in enumerate(anchors):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise SpeakerCatalogValidationError(
                f"Speaker '{label}': anchor {i} must be a [frequency, level] pair"
            )
        for v in pair:
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise SpeakerCatalogValidationError(
                    f"Speaker '{label}': anchor {i} contains a non-numeric value {v!r}"
                )
    try:
        validate_anchors(as_anchor_points(anchors))
    except AnchorOrderError as exc:
        raise SpeakerCatalogValidationError(f"Speaker '{label}': {exc}") from exc


def build_speaker(entry: Dict[str, Any], jitter: Optional[Jitter] = None) -> Speaker:
    anchors = as_anchor_points(entry["anchors"])
    return Speaker(
        name=entry["name"],
        resonance_frequency=int(entry["resonance_frequency"]),
        sensitivity=int(entry["sensitivity"]),
        description=entry["description"],
        anchors=anchors,
        response=generate_response_curve(anchors, jitter=jitter),
    )


def load_catalog(path: Optional[Path] = None, jitter: Optional[Jitter] = None) -> List[Speaker]:
    """Load and validate the catalog at *path*, generating every curve.

    Raises:
        SpeakerCatalogError: If the file is missing, unreadable or not valid YAML
        SpeakerCatalogValidationError: If an entry is malformed
    """
    path = Path(path) if path is not None else default_catalog_path()
    if not path.is_file():
        logger.error(f"Speaker catalog not found or not a file: {path}")
        raise SpeakerCatalogError(f"Speaker catalog not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        logger.error(f"Failed to parse speaker catalog {path}: {exc}")
        raise SpeakerCatalogError(f"Invalid YAML in speaker catalog '{path.name}': {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"Failed to read speaker catalog {path}: {exc}")
        raise SpeakerCatalogError(f"Cannot read speaker catalog '{path.name}': {exc}") from exc

    entries = data.get("speakers") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        message = f"Speaker catalog '{path.name}' has no 'speakers' list"
        logger.error(message)
        raise SpeakerCatalogValidationError(message)

    if jitter is None:
        jitter = uniform_jitter()

    speakers = []
    names = set()
    for position, entry in enumerate(entries):
        try:
            _validate_entry(entry, position)
        except SpeakerCatalogValidationError as exc:
            logger.error(str(exc))
            raise
        if entry["name"] in names:
            message = f"Duplicate speaker name in catalog: {entry['name']}"
            logger.error(message)
            raise SpeakerCatalogValidationError(message)
        names.add(entry["name"])
        speakers.append(build_speaker(entry, jitter=jitter))

    logger.debug(f"Loaded {len(speakers)} speakers from {path}")
    return speakers


# Module-level singleton
_catalog: Optional[List[Speaker]] = None


def get_speaker_catalog(recreate: bool = False) -> List[Speaker]:
    """
    Return the application's speaker catalog, building it on first call.
    The catalog path and jitter seed come from the application config.
    Set recreate=True to rebuild (new jitter unless a seed is configured).
    """
    global _catalog
    if _catalog is not None and not recreate:
        return _catalog

    from dataio import get_config
    cfg = get_config()
    path = Path(cfg.catalog_path) if cfg.catalog_path else None
    rng = np.random.default_rng(cfg.jitter_seed)
    _catalog = load_catalog(path, jitter=uniform_jitter(rng))
    return _catalog


def list_speaker_names() -> List[str]:
    return [s.name for s in get_speaker_catalog()]


def get_speaker(name: str) -> Speaker:
    for speaker in get_speaker_catalog():
        if speaker.name == name:
            return speaker
    raise SpeakerNotFoundError(f"Speaker '{name}' not found. Available: {', '.join(list_speaker_names())}")
