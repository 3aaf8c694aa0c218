"""Rule building blocks: outcomes, the Rule record and rule-set composition."""

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class Reply:
    text: str


@dataclass(frozen=True)
class Pass:
    reason: str = ""


@dataclass(frozen=True)
class Rule:
    """
    A declarative rule.

    guard(session, flags) gates the rule before matching.
    match(command, raw_text, session, flags) decides if it applies.
    effect(command, raw_text, session, flags) returns Reply, Pass, or None for no match.
    """

    id: str
    priority: int
    match: Callable
    effect: Callable
    guard: Optional[Callable] = None


def compose(global_rules, scene_rules):
    """Merge both rule sets, highest priority first. Ties keep declaration order."""
    return sorted([*global_rules, *scene_rules], key=lambda rule: -rule.priority)


# ==========================================================
# MATCH HELPERS
# ==========================================================
def has_any(tokens, *items):
    return any(item in tokens for item in items)


def intent_with(intent, *nouns):
    """Match when the intent is present and any of the nouns is a target."""
    def match(command, raw_text, session, flags):
        if intent not in command.intents:
            return False
        return not nouns or has_any(command.targets, *nouns)
    return match
