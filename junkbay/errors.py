"""Load-time errors. Player input never raises; these point at bad scene data."""


class SceneDataError(ValueError):
    """A scene manifest or reply book is malformed."""


class UnknownSceneError(KeyError):
    """No scene is registered under the requested id."""
