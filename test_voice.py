import os
import tempfile
import unittest
from unittest.mock import patch

from openai import OpenAIError

from junkbay.voice import Speaker, Transcriber


class MockTranscript:
    def __init__(self, text):
        self.text = text


class MockTranscriptions:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def create(self, model, file):
        self.calls.append(model)
        if self.error:
            raise self.error
        return MockTranscript(self.text)


class MockSpeechResponse:
    def __init__(self, sink):
        self.sink = sink

    def write_to_file(self, path):
        self.sink.append(path)


class MockSpeech:
    def __init__(self, error=None):
        self.error = error
        self.written = []
        self.inputs = []

    def create(self, model, voice, input):
        if self.error:
            raise self.error
        self.inputs.append((model, voice, input))
        return MockSpeechResponse(self.written)


class MockAudio:
    def __init__(self, transcriptions=None, speech=None):
        self.transcriptions = transcriptions or MockTranscriptions()
        self.speech = speech or MockSpeech()


class MockClient:
    def __init__(self, **kwargs):
        self.audio = MockAudio(**kwargs)


class TestTranscriber(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.audio_path = os.path.join(self.tmp.name, "command.wav")
        with open(self.audio_path, "wb") as f:
            f.write(b"RIFF fake audio")

    def tearDown(self):
        self.tmp.cleanup()

    def test_transcribes_and_strips(self):
        client = MockClient(transcriptions=MockTranscriptions(text="  look at the archway \n"))
        transcriber = Transcriber(model="whisper-1", client=client)
        self.assertEqual(transcriber.transcribe(self.audio_path), "look at the archway")
        self.assertEqual(client.audio.transcriptions.calls, ["whisper-1"])

    def test_blank_transcript(self):
        client = MockClient(transcriptions=MockTranscriptions(text="   "))
        self.assertIsNone(Transcriber(client=client).transcribe(self.audio_path))

    def test_api_error(self):
        client = MockClient(transcriptions=MockTranscriptions(error=OpenAIError("boom")))
        self.assertIsNone(Transcriber(client=client).transcribe(self.audio_path))

    def test_missing_file(self):
        client = MockClient()
        path = os.path.join(self.tmp.name, "nope.wav")
        self.assertIsNone(Transcriber(client=client).transcribe(path))
        self.assertEqual(client.audio.transcriptions.calls, [])

    def test_empty_file(self):
        open(self.audio_path, "wb").close()
        client = MockClient()
        self.assertIsNone(Transcriber(client=client).transcribe(self.audio_path))
        self.assertEqual(client.audio.transcriptions.calls, [])

    def test_no_api_key(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(Transcriber().transcribe(self.audio_path))


class TestSpeaker(unittest.TestCase):
    def test_writes_audio(self):
        client = MockClient()
        speaker = Speaker(model="tts-1", voice="alloy", client=client)
        self.assertEqual(speaker.speak("The bay waits back.", "reply.mp3"), "reply.mp3")
        self.assertEqual(client.audio.speech.inputs, [("tts-1", "alloy", "The bay waits back.")])
        self.assertEqual(client.audio.speech.written, ["reply.mp3"])

    def test_blank_text(self):
        client = MockClient()
        self.assertIsNone(Speaker(client=client).speak("  ", "reply.mp3"))
        self.assertEqual(client.audio.speech.inputs, [])

    def test_api_error(self):
        client = MockClient(speech=MockSpeech(error=OpenAIError("quota")))
        self.assertIsNone(Speaker(client=client).speak("hello", "reply.mp3"))

    def test_no_api_key(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(Speaker().speak("hello", "reply.mp3"))


if __name__ == '__main__':
    unittest.main()
