# models/__init__.py

"""Public API for the models package.

The numeric core of the viewer. Nothing in here imports Qt, so everything can
be exercised headless.

Exports provided:
  - FrequencyBand, BANDS, AXIS_MAX, band_for_frequency, sample_grid - band table
  - AnchorPoint, CurvePoint, Speaker - immutable records
  - generate_response_curve, uniform_jitter, AnchorOrderError - curve generator
  - normalize_frequency, normalize_frequencies, denormalize_label, axis_ticks,
    pixel_to_frequency, resolve_point, format_selection - chart mapping
  - PointSelection - interaction state
  - get_speaker_catalog(), load_catalog(), get_speaker(name) - speaker catalog

Speaker Catalog:
  Speakers are defined in ``speaker_catalog.yaml`` next to this package.
  Each entry has its metadata and an anchor table; the response curve is
  generated from the anchors when the catalog is first requested.
"""

from .bands import AXIS_MAX, BANDS, FrequencyBand, band_for_frequency, sample_grid
from .speaker import AnchorPoint, CurvePoint, Speaker
from .curve_generator import (
    AnchorOrderError,
    FALLBACK_LEVEL_DB,
    generate_response_curve,
    interpolate_level,
    uniform_jitter,
)
from .chart_mapping import (
    axis_ticks,
    denormalize_label,
    format_frequency_label,
    format_selection,
    normalize_frequencies,
    normalize_frequency,
    pixel_to_frequency,
    resolve_point,
)
from .selection import PointSelection
from .catalog import (
    SpeakerCatalogError,
    SpeakerCatalogValidationError,
    SpeakerNotFoundError,
    get_speaker,
    get_speaker_catalog,
    list_speaker_names,
    load_catalog,
)

__all__ = [
    "AXIS_MAX",
    "BANDS",
    "FrequencyBand",
    "band_for_frequency",
    "sample_grid",
    "AnchorPoint",
    "CurvePoint",
    "Speaker",
    "AnchorOrderError",
    "FALLBACK_LEVEL_DB",
    "generate_response_curve",
    "interpolate_level",
    "uniform_jitter",
    "axis_ticks",
    "denormalize_label",
    "format_frequency_label",
    "format_selection",
    "normalize_frequencies",
    "normalize_frequency",
    "pixel_to_frequency",
    "resolve_point",
    "PointSelection",
    "SpeakerCatalogError",
    "SpeakerCatalogValidationError",
    "SpeakerNotFoundError",
    "get_speaker",
    "get_speaker_catalog",
    "list_speaker_names",
    "load_catalog",
]
