"""
Speech boundary: audio file -> text, text -> audio file.

Both directions degrade to None on any failure so the command engine
only ever sees plain text or nothing at all.
"""

import os
import logging

from openai import OpenAI, OpenAIError

logger = logging.getLogger(__name__)


def _default_client():
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        logger.warning("OPENAI_API_KEY is not set; speech is disabled.")
        return None
    return OpenAI(api_key=api_key)


class _OpenAIUser:
    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = _default_client()
        return self._client


class Transcriber(_OpenAIUser):
    def __init__(self, model="whisper-1", client=None):
        super().__init__(client)
        self.model = model

    def transcribe(self, audio_path):
        """Return the stripped transcript, or None."""
        if not audio_path or not os.path.isfile(audio_path):
            logger.warning("No audio file at %s", audio_path)
            return None
        if os.path.getsize(audio_path) == 0:
            logger.warning("Audio file %s is empty", audio_path)
            return None
        if self.client is None:
            return None

        try:
            with open(audio_path, "rb") as audio_file:
                transcript = self.client.audio.transcriptions.create(model=self.model, file=audio_file)
        except (OpenAIError, OSError) as e:
            logger.warning("Transcription error: %s", e)
            return None

        text = (getattr(transcript, "text", "") or "").strip()
        return text or None


class Speaker(_OpenAIUser):
    def __init__(self, model="tts-1", voice="alloy", client=None):
        super().__init__(client)
        self.model = model
        self.voice = voice

    def speak(self, text, out_path):
        """Synthesize text into out_path. Returns the path, or None."""
        if not text or not text.strip():
            return None
        if self.client is None:
            return None

        try:
            response = self.client.audio.speech.create(model=self.model, voice=self.voice, input=text)
            response.write_to_file(out_path)
        except (OpenAIError, OSError) as e:
            logger.warning("Speech error: %s", e)
            return None
        return out_path
