from .speech_synth import ISpeechSynthesizer

__all__ = [
    "ISpeechSynthesizer",
]
