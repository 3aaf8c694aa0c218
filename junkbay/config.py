"""config.yaml and .env handling, plus logging setup."""

import os
import logging
from dataclasses import dataclass

import yaml
from dotenv import load_dotenv
from rich.logging import RichHandler

CONFIG_PATH = "config.yaml"

DEFAULT_CONFIG = {
    "scene": "junk_bay",
    "debug_mode": False,
    "log_level": "WARNING",
    "speak_replies": False,
    "transcribe_model": "whisper-1",
    "speech_model": "tts-1",
    "speech_voice": "alloy",
    "speech_output": "reply.mp3",
    "qa_enabled": False,
}

DEFAULT_YAML = """
# JUNK BAY CONFIGURATION
# ----------------------
# The command engine runs offline. Only the speech options talk to OpenAI,
# and only when OPENAI_API_KEY is set in your .env file.

scene: junk_bay
debug_mode: false
log_level: WARNING
qa_enabled: false

# Speech
speak_replies: false
transcribe_model: whisper-1
speech_model: tts-1
speech_voice: alloy
speech_output: reply.mp3
"""


@dataclass
class EnvironmentSettings:
    """Secrets that come from the environment, never from config.yaml."""

    openai_api_key: str | None = None

    @classmethod
    def from_env(cls) -> "EnvironmentSettings":
        load_dotenv()
        return cls(openai_api_key=os.getenv("OPENAI_API_KEY"))


def load_config(config_path=CONFIG_PATH):
    """
    Loads config.yaml or creates default if missing.
    Keys missing from the file fall back to DEFAULT_CONFIG.
    """
    if not os.path.exists(config_path):
        with open(config_path, "w") as f:
            f.write(DEFAULT_YAML.strip() + "\n")

    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f) or {}
    return {**DEFAULT_CONFIG, **loaded}


def toggle_debug(config, config_path=CONFIG_PATH):
    """Flips debug_mode and writes the config back."""
    config["debug_mode"] = not config.get("debug_mode", False)
    with open(config_path, "w") as f:
        yaml.dump(config, f, default_flow_style=False)
    return config["debug_mode"]


def configure_logging(level="WARNING", console=None):
    handler = RichHandler(console=console, show_path=False, markup=False)
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
