"""Scene registry. Scenes and the global rules are built once and shared."""

import logging
from functools import lru_cache

from junkbay.errors import UnknownSceneError
from junkbay.narrator import Narrator, load_global_book, load_manifest
from junkbay.scenes.global_rules import build_global_rules
from junkbay.scenes.junk_bay import JunkBayScene

logger = logging.getLogger(__name__)

SCENES = {
    JunkBayScene.scene_id: JunkBayScene,
}

DEFAULT_SCENE_ID = "junk_bay"


def resolve_scene_id(scene_id):
    key = (scene_id or DEFAULT_SCENE_ID).strip().lower()
    if key not in SCENES:
        key = scene_aliases().get(key, key)
    if key not in SCENES:
        raise UnknownSceneError(scene_id)
    return key


@lru_cache(maxsize=None)
def scene_aliases():
    """Alias -> scene id, read from the aliases list of every registered manifest."""
    aliases = {}
    for scene_id in SCENES:
        for alias in load_manifest(scene_id).get("aliases") or ():
            aliases[str(alias).strip().lower()] = scene_id
    return aliases


@lru_cache(maxsize=None)
def global_book():
    return load_global_book()


@lru_cache(maxsize=None)
def global_rules():
    return tuple(build_global_rules(Narrator(global_book())))


@lru_cache(maxsize=None)
def _load_scene(scene_id):
    logger.info("Loading scene %s", scene_id)
    return SCENES[scene_id].load(global_book())


def get_scene(scene_id=DEFAULT_SCENE_ID):
    return _load_scene(resolve_scene_id(scene_id))
