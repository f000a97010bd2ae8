from jalwa.voice.capture import SpeechRecognizer, VoiceCapture
from jalwa.voice.whisper import WhisperRecognizer

__all__ = ["SpeechRecognizer", "VoiceCapture", "WhisperRecognizer"]
