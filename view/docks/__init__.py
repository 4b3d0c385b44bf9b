"""
Dock widgets package for the speaker viewer.

Each dock is a self-contained module that can be developed independently.
"""

from .speaker_list_dock import SpeakerListDock
from .log_dock import LogDock

__all__ = ["SpeakerListDock", "LogDock"]
