import logging

from junkbay.errors import SceneDataError
from junkbay.fallback import FallbackResolver
from junkbay.lexicons import Lexicon
from junkbay.listener import Listener
from junkbay.narrator import Narrator, load_scene_data, SCENE_BASE_PATH
from junkbay.rules import Rule, Reply
from junkbay.session import SceneFlags
from junkbay.variants import pick_variant

logger = logging.getLogger(__name__)


def reply_with(narrator, key, focus=None):
    """Effect that optionally moves the focus and replies with a canned line."""
    def effect(command, raw_text, session, flags):
        if focus:
            session.focus(focus)
        return Reply(narrator.say(key))
    return effect


class Rulebook:
    """Collects rules in declaration order, optionally under one id prefix."""

    def __init__(self, narrator, prefix=None):
        self.narrator = narrator
        self.prefix = prefix
        self.rules = []

    def add(self, name, priority, match, effect, guard=None):
        rule_id = f"{self.prefix}.{name}" if self.prefix else name
        self.rules.append(Rule(rule_id, priority, match, effect, guard))

    def says(self, name, priority, match, key, focus=None, guard=None):
        self.narrator.check([key])
        self.add(name, priority, match, reply_with(self.narrator, key, focus), guard)


class Scene:
    """
    A room: manifest, reply book and rule set.

    Subclasses only provide build_rules(). Everything here is built once
    and then shared read-only by every session in the room.
    """

    scene_id = None

    def __init__(self, manifest, book, global_book=None):
        self.manifest = manifest
        self.id = manifest.get("id", self.scene_id)
        self.title = manifest.get("title", self.id)
        self.background = manifest.get("background")
        self.default_flags = dict(manifest.get("default_flags") or {})

        # Fails here, not mid-game, when the manifest names an unknown flag.
        SceneFlags.with_overrides(self.default_flags)

        self.narrator = Narrator(global_book or {}, {"names": manifest.get("names") or {}}, book)
        if not self.narrator.area_variants:
            raise SceneDataError(f"Scene {self.id} has no area_variants")

        self.lexicon = Lexicon(
            nouns=manifest.get("nouns"),
            verbs=manifest.get("verbs"),
            adjectives=manifest.get("adjectives"),
        )
        self.listener = Listener(self.lexicon)
        self.fallback = FallbackResolver(self)
        self.rules = tuple(self.build_rules())
        logger.info("Scene %s ready with %d rules", self.id, len(self.rules))

    @classmethod
    def load(cls, global_book=None, base_path=SCENE_BASE_PATH):
        scene_data = load_scene_data(cls.scene_id, base_path)
        return cls(scene_data["manifest"], scene_data["book"], global_book)

    def build_rules(self):
        return []

    def new_flags(self):
        return SceneFlags.with_overrides(self.default_flags)

    def describe_area(self, session):
        """The rotating room description, shared by every "look around" path."""
        session.focus("area")
        return pick_variant(session, "look_area", self.narrator.area_variants)
