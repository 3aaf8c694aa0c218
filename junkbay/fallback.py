"""Generic replies for commands no rule claimed.

The resolver always answers: it picks the strongest intent and the
strongest target and phrases a line from the scene's fallback templates.
"""

from junkbay.director import Response
from junkbay.variants import pick_variant

INTENT_PRIORITY = (
    "ask", "look", "search", "scan", "read", "press", "clean", "approach",
    "enter", "smell", "listen", "touch", "taste", "take", "use", "open",
    "move", "break", "start", "climb", "talk", "throw", "kick", "jump", "wait",
)

TARGET_PRIORITY = (
    "archway", "machine", "panel", "glow", "symbols", "stains", "pillar",
    "red_disc", "blue_crate", "silver_cylinder", "metal_tab", "rubble",
    "debris", "slime", "walls", "ceiling", "lights", "shadows", "deck",
    "pipes", "vents", "cables", "area", "roger",
)

# Intents answered with a fixed line from the fallback templates.
PROMPT_INTENTS = ("search", "scan", "read", "press", "clean", "approach",
                  "enter", "throw", "kick")

# Intents answered with a target-aware template when a target exists.
TARGETED_INTENTS = ("open", "move", "break", "start", "climb")

# Intents answered with a scene reply.
REPLY_INTENTS = {
    "smell": "smell_metal",
    "touch": "touch_cold_metal",
    "taste": "taste_no",
    "take": "take_nothing",
    "use": "use_nothing",
    "jump": "jump",
    "talk": "talk_general",
}


def pick_intent(command):
    """Strongest ranked intent, "look" when none of them was recognized."""
    for intent in INTENT_PRIORITY:
        if intent in command.intents:
            return intent
    return "look"


def pick_target(command):
    for target in TARGET_PRIORITY:
        if target in command.targets:
            return target
    if command.targets:
        return sorted(command.targets)[0]
    return None


class FallbackResolver:
    """Callable fallback bound to one scene's narrator and area description."""

    def __init__(self, scene):
        self.scene = scene

    def __call__(self, command, raw_text, session, flags):
        narrator = self.scene.narrator
        intent = pick_intent(command)
        target = pick_target(command)

        if intent == "ask":
            if "roger" in command.persons:
                session.focus("roger")
                return Response(narrator.say("roger_who"), "fallback.ask.roger")
            if target:
                session.focus(target)
                return Response(narrator.fallback_line("ask_target", target=narrator.name(target)),
                                "fallback.ask.target")
            return Response(narrator.fallback_line("ask_general"), "fallback.ask.general")

        if intent == "look":
            if target:
                session.focus(target)
                return Response(narrator.fallback_line("look_target", target=narrator.name(target)),
                                "fallback.look.target")
            return Response(self.scene.describe_area(session), "fallback.look.general")

        if intent in PROMPT_INTENTS:
            return Response(narrator.fallback_line(intent), f"fallback.{intent}")

        if intent in TARGETED_INTENTS:
            if target:
                return Response(narrator.fallback_line(f"{intent}_target", target=narrator.name(target)),
                                f"fallback.{intent}.target")
            return Response(narrator.fallback_line(intent), f"fallback.{intent}")

        if intent == "listen":
            key = "listen_hum" if flags.ambient_hum else "listen_quiet"
            return Response(narrator.say(key), "fallback.listen")

        if intent == "wait":
            text = pick_variant(session, "wait", [narrator.say("wait_a"), narrator.say("wait_b")])
            return Response(text, "fallback.wait")

        if intent in REPLY_INTENTS:
            return Response(narrator.say(REPLY_INTENTS[intent]), f"fallback.{intent}")

        return Response(narrator.fallback_line("default", raw=raw_text), "fallback.default")
