import os
import logging

import yaml

from junkbay.errors import SceneDataError

logger = logging.getLogger(__name__)

DATA_BASE_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
GLOBAL_BOOK_PATH = os.path.join(DATA_BASE_PATH, "global", "replies.yaml")
SCENE_BASE_PATH = os.path.join(DATA_BASE_PATH, "scenes")


def load_yaml(path):
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_manifest(scene_id, base_path=SCENE_BASE_PATH):
    return load_yaml(os.path.join(base_path, scene_id, "manifest.yaml"))


def load_scene_data(scene_id, base_path=SCENE_BASE_PATH):
    """
    Loads the manifest and reply book for a scene.
    Raises FileNotFoundError or yaml.YAMLError for missing or malformed files.
    """
    scene_path = os.path.join(base_path, scene_id)
    scene_data = {
        "manifest": load_manifest(scene_id, base_path),
        "book": load_yaml(os.path.join(scene_path, "replies.yaml")),
    }
    logger.info("Loaded scene data from %s", scene_path)
    return scene_data


def load_global_book(path=GLOBAL_BOOK_PATH):
    return load_yaml(path)


def render_target(token, names=None):
    """Human-readable name for a canonical token."""
    if not token:
        return ""
    if names and token in names:
        return names[token]
    return token.replace("_", " ")


class Narrator:
    def __init__(self, *books):
        """
        The Narrator is the TEXT ENGINE.
        It owns canned replies and never decides anything. Later books
        override earlier ones key by key.
        """
        self.replies = {}
        self.names = {}
        self.fallback = {}
        self.area_variants = []
        for book in books:
            self.replies.update(book.get("replies") or {})
            self.names.update(book.get("names") or {})
            self.fallback.update(book.get("fallback") or {})
            if book.get("area_variants"):
                self.area_variants = list(book["area_variants"])

    def say(self, key, **params):
        try:
            text = self.replies[key]
        except KeyError:
            raise SceneDataError(f"Missing reply: {key}") from None
        return text.format(**params) if params else text

    def fallback_line(self, key, **params):
        try:
            text = self.fallback[key]
        except KeyError:
            raise SceneDataError(f"Missing fallback template: {key}") from None
        return text.format(**params)

    def name(self, token):
        return render_target(token, self.names)

    def check(self, keys):
        """Fail fast when a rule set refers to replies this book lacks."""
        missing = sorted(set(keys) - set(self.replies))
        if missing:
            raise SceneDataError(f"Missing replies: {', '.join(missing)}")
