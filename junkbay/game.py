import logging

from junkbay.director import Director
from junkbay.scenes import DEFAULT_SCENE_ID, get_scene, global_rules
from junkbay.session import SessionState

logger = logging.getLogger(__name__)


class Game:
    """
    One play session.

    Owns its SessionState and SceneFlags; the scene (lexicon, rules,
    replies) and the global rules are shared with every other Game.
    """

    def __init__(self, scene_id=DEFAULT_SCENE_ID, qa_enabled=False, scene=None, rules=None):
        self.scene = scene or get_scene(scene_id)
        self.session = SessionState(qa_enabled=qa_enabled)
        self.flags = self.scene.new_flags()
        self.director = Director(global_rules() if rules is None else rules)

    def process_command(self, raw_text):
        """Classify, dispatch and answer. Always returns a non-empty reply."""
        command = self.scene.listener.classify(raw_text, self.session)
        response = self.director.execute(
            command, raw_text, self.session, self.flags,
            scene_rules=self.scene.rules,
            fallback=self.scene.fallback,
        )
        return response.to_dict()

    def get_session_snapshot(self):
        return self.session.snapshot(self.flags)

    def change_scene(self, scene_id):
        """
        Swap rules, lexicon and flags. Inventory, knowledge, counters and
        focus travel with the player, so carried items are not in the new room.
        """
        scene = scene_id if hasattr(scene_id, "rules") else get_scene(scene_id)
        logger.info("Scene change: %s -> %s", self.scene.id, scene.id)
        self.scene = scene
        self.flags = scene.new_flags().without_held(self.session.inventory)
        return scene
