from .speaker_vm import SpeakerViewModel

__all__ = ["SpeakerViewModel"]
