from .voicepeak_client import VoicepeakClient

__all__ = [
    "VoicepeakClient",
]
