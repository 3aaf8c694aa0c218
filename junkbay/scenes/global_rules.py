"""Rules available in every scene: meta commands and Roger lore."""

import re

from junkbay.rules import Reply, Pass, has_any
from junkbay.scenes.base import Rulebook

QA_PATTERNS = (
    re.compile(r"\bqa\b", re.IGNORECASE),
    re.compile(r"\bq\s*/?\s*a\b", re.IGNORECASE),
    re.compile(r"\bqa[-_\s]?o[-_\s]?matic\b", re.IGNORECASE),
)

# (rule id, priority, topic words, reply key)
ROGER_LORE = (
    ("roger.who", 1600, ("who",), "roger_who"),
    ("roger.status_now", 1599, ("now", "here", "where"), "roger_status_now"),
    ("roger.pattern", 1598, ("how", "survive", "alive", "why"), "roger_pattern"),
    ("roger.past_arcada", 1597, ("ship", "arcada", "invasion"), "roger_past_arcada"),
    ("roger.past_kerona", 1596, ("planet", "kerona", "crash"), "roger_past_kerona"),
    ("roger.past_vohaul", 1595, ("abduct", "abducted", "base", "life", "support"), "roger_past_vohaul"),
    ("roger.mood", 1594, ("feel", "scared", "afraid", "brave"), "roger_mood"),
)


def is_qa(raw_text):
    return any(pattern.search(raw_text or "") for pattern in QA_PATTERNS)


def asks_about_roger(command, topics):
    if "roger" not in command.persons:
        return False
    asking = "ask" in command.intents or "feel" in command.intents or command.is_question
    return asking and has_any(command.all, *topics)


def build_global_rules(narrator):
    book = Rulebook(narrator)

    def qa_entry(c, raw, s, f):
        if not s.qa_enabled:
            return Pass("QA disabled, allow other handlers")
        return Reply(narrator.say("qa_entry"))

    def inventory(c, raw, s, f):
        if not s.inventory:
            return Reply(narrator.say("inventory_empty"))
        items = sorted(narrator.name(item) for item in s.inventory)
        return Reply(narrator.say("inventory", items=", ".join(items)))

    def status(c, raw, s, f):
        parts = ["lights: on" if f.lights_working else "lights: dim"]
        if f.lights_flickering:
            parts.append("lights: flicker")
        parts.append("hum: yes" if f.ambient_hum else "hum: no")
        parts.append("slime: yes" if f.slime_present else "slime: no")
        parts.append("archway: open" if f.archway_open else "archway: closed")
        parts.append("archway: safer" if f.archway_safe else "archway: risky")
        parts.append("panel: responsive" if f.panel_unlocked else "panel: stubborn")
        parts.append("machine: latched" if f.machine_repaired else "machine: missing latch")
        parts.append(f"focus: {s.last_focus or 'none'}")
        return Reply(narrator.say("status", parts=", ".join(parts)))

    def score(c, raw, s, f):
        return Reply(narrator.say("score", solved=f.progress(), total=len(f.PROGRESSION)))

    book.says("system.empty", 10000, lambda c, raw, s, f: c.is_empty, "empty")
    book.add("qa.entry", 3000, lambda c, raw, s, f: is_qa(raw), qa_entry)
    book.says("social.greet", 2900, lambda c, raw, s, f: "greet" in c.intents, "greet")
    book.says("social.thanks", 2890, lambda c, raw, s, f: "thanks" in c.intents, "thanks")
    book.says("system.help", 2880, lambda c, raw, s, f: "help" in c.intents, "help")
    book.add("system.inventory", 2870, lambda c, raw, s, f: "inventory" in c.intents, inventory)
    book.add("system.status", 2860, lambda c, raw, s, f: "status" in c.intents, status)
    book.add("system.score", 2855, lambda c, raw, s, f: "score" in c.intents, score)

    # Each lore answer moves the focus to Roger so "him" works next.
    for rule_id, priority, topics, key in ROGER_LORE:
        book.says(rule_id, priority,
                  lambda c, raw, s, f, topics=topics: asks_about_roger(c, topics),
                  key, focus="roger")
    return book.rules
