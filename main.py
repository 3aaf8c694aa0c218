import sys
import os
import json
import time
import logging

import yaml
from rich.console import Console
from rich.panel import Panel
from rich.markdown import Markdown
from rich.prompt import Prompt
from rich.theme import Theme
from rich.text import Text
from rich.markup import escape

from junkbay.config import load_config, toggle_debug, configure_logging, EnvironmentSettings
from junkbay.errors import SceneDataError, UnknownSceneError
from junkbay.game import Game
from junkbay.voice import Transcriber, Speaker

AUDIO_PREFIX = "@"

custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",
    "dim": "dim",
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})

console = Console(theme=custom_theme)
logger = logging.getLogger("junkbay.main")


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def show_welcome_screen(config):
    clear_screen()

    welcome_md = Markdown("""
    # JUNK BAY

    A voice adventure with a rulebook for a brain.

    > *Say it, and the bay answers. Eventually.*
    """)

    console.print(Panel(welcome_md, border_style="info", padding=(1, 2), width=60))
    console.print("\n[dim]Select an option:[/dim]\n")

    debug_state = "On" if config.get('debug_mode', False) else "Off"
    menu_options = [
        ("1", f"Start: {config.get('scene')}"),
        ("D", f"Toggle Debug Mode (current: {debug_state})"),
        ("Q", "Quit"),
    ]
    for key, label in menu_options:
        console.print(f" [[info]{key}[/info]] {label}")

    print()
    return Prompt.ask(" >", choices=["1", "D", "Q"], default="1").upper()


def read_command(user_input, transcriber):
    """Typed text passes through; '@path' is transcribed. Returns None to skip."""
    if not user_input.startswith(AUDIO_PREFIX):
        return user_input

    audio_path = user_input[len(AUDIO_PREFIX):].strip()
    with console.status("[dim]Transcribing...[/dim]"):
        text = transcriber.transcribe(audio_path)
    if text is None:
        console.print(Panel("[warning]Could not transcribe that recording.[/]", border_style="warning"))
        return None
    console.print(f"[dim]Heard:[/dim] {escape(text)}")
    return text


def reply_panel(reply_text):
    """Replies can echo the player's words, so they are shown as plain text."""
    return Panel(Text(reply_text), border_style="info")


# ============================================
# GAME LOOP
# ============================================
def start_game(config):
    clear_screen()

    try:
        game = Game(config.get('scene'), qa_enabled=config.get('qa_enabled', False))
    except UnknownSceneError as e:
        logger.error("Unknown scene %r", config.get('scene'))
        console.print(Panel(f"[warning]ERROR: Unknown scene.[/] {e}", border_style="warning"))
        time.sleep(3)
        return
    except FileNotFoundError as e:
        console.print(Panel(f"[warning]ERROR: Scene data not found.[/] Missing file: {e}", border_style="warning"))
        time.sleep(3)
        return
    except yaml.YAMLError as e:
        console.print(Panel(
            f"[warning]YAML STRUCTURE ERROR:[/]\nCheck the scene files for indentation or syntax errors.\nDetails: {e}",
            border_style="warning"))
        time.sleep(5)
        return
    except SceneDataError as e:
        logger.error("Scene data error: %s", e)
        console.print(Panel(f"[warning]SCENE DATA ERROR:[/]\n{e}", border_style="warning"))
        time.sleep(5)
        return

    transcriber = Transcriber(model=config.get('transcribe_model'))
    speaker = Speaker(model=config.get('speech_model'), voice=config.get('speech_voice'))
    is_debug = config.get('debug_mode', False)

    console.print(Panel(f"[bold blue]{game.scene.title}[/bold blue]", title="SCENE", border_style="info"))
    console.print(f"\n{game.scene.narrator.area_variants[0]}")
    console.print("[dim]Type 'quit' to return to menu. Start a line with @ to send an audio file.[/dim]\n")

    while True:
        user_input = Prompt.ask("[info]>[/info]")

        if user_input.lower() in ["quit", "exit", "menu"]:
            break

        raw_text = read_command(user_input, transcriber)
        if raw_text is None:
            continue

        result = game.process_command(raw_text)
        console.print(reply_panel(result['reply_text']))

        if is_debug:
            console.print(Panel(
                f"[dim]Rule:[/] {result['rule_id']}\n\n[dim]Session:[/]\n"
                f"{escape(json.dumps(game.get_session_snapshot(), indent=2))}",
                title="[DEBUG: Director Output]",
                border_style="dim",
            ))

        if config.get('speak_replies', False):
            with console.status("[dim]Speaking...[/dim]"):
                spoken = speaker.speak(result['reply_text'], config.get('speech_output'))
            if spoken:
                console.print(f"[dim]Audio written to {spoken}[/dim]")


# ============================================
# MAIN
# ============================================
def main():
    config = load_config()
    configure_logging(config.get('log_level'), console=console)
    settings = EnvironmentSettings.from_env()

    if (config.get('speak_replies') or config.get('transcribe_model')) and not settings.openai_api_key:
        console.print("\n[warning]NOTE:[/] No API Key found in .env file.")
        console.print("[dim]Typed commands work. Audio input and spoken replies are off.[/dim]")
        time.sleep(1)

    while True:
        config = load_config()
        choice = show_welcome_screen(config)

        if choice == "1":
            start_game(config)
        elif choice == "D":
            state = toggle_debug(config)
            clear_screen()
            console.print(Panel(f"[info]DEBUG MODE:[/][bold]{' ON' if state else ' OFF'}[/bold]", border_style="info"))
            time.sleep(1)
        elif choice == "Q":
            console.print("\nGoodbye.")
            sys.exit()


if __name__ == "__main__":
    main()
