import logging
from dataclasses import dataclass, field, asdict, fields, replace

from junkbay.errors import SceneDataError

logger = logging.getLogger(__name__)

# Carried item -> the flag that says it is lying in the room.
ITEM_PRESENCE = {
    "red_disc": "has_red_disc",
    "blue_crate": "has_blue_crate",
    "silver_cylinder": "has_silver_cylinder",
}


@dataclass
class SceneFlags:
    """Boolean room state. Every field has a default, so rules never see a gap."""

    # Environment
    pod_door_sealed: bool = True
    lights_working: bool = True
    slime_present: bool = True
    ambient_hum: bool = True
    walls_sweaty: bool = False
    player_bruised: bool = True
    lights_flickering: bool = True
    archway_open: bool = True
    wall_has_symbols: bool = True
    wall_has_stains: bool = True
    floor_has_rubble: bool = True
    left_machine_powered: bool = True
    blue_glow_active: bool = True
    cables_plugged: bool = False
    glow_unstable: bool = False
    panel_seam_visible: bool = False
    stains_wiped: bool = False

    # Item presence
    has_red_disc: bool = True
    has_blue_crate: bool = True
    has_silver_cylinder: bool = True

    # Progression
    panel_unlocked: bool = False
    machine_repaired: bool = False
    archway_safe: bool = False

    PROGRESSION = ("panel_unlocked", "machine_repaired", "archway_safe")

    @classmethod
    def with_overrides(cls, overrides=None):
        """Build flags from the defaults plus a scene's overrides."""
        try:
            return replace(cls(), **(overrides or {}))
        except TypeError as e:
            known = sorted(f.name for f in fields(cls))
            raise SceneDataError(f"Unknown scene flag in {sorted(overrides)}; known flags: {known}") from e

    def progress(self):
        return sum(1 for name in self.PROGRESSION if getattr(self, name))

    def without_held(self, inventory):
        """Clear the presence flag of every item the player already carries."""
        for item_id in inventory:
            presence_flag = ITEM_PRESENCE.get(item_id)
            if presence_flag:
                setattr(self, presence_flag, False)
        return self


@dataclass
class SessionState:
    """
    Everything one play session owns.
    Rule effects mutate it in place; nothing is ever rolled back.
    """

    inventory: set = field(default_factory=set)
    knowledge: set = field(default_factory=set)
    last_focus: str | None = None
    counters: dict = field(default_factory=dict)
    qa_enabled: bool = False

    # ==========================================================
    # COUNTERS
    # ==========================================================
    def bump(self, key):
        self.counters[key] = self.counters.get(key, 0) + 1
        return self.counters[key]

    def seen(self, key):
        return self.counters.get(key, 0)

    # ==========================================================
    # KNOWLEDGE & FOCUS
    # ==========================================================
    def learn(self, fact):
        """Record a fact. Returns True the first time it is learned."""
        if fact in self.knowledge:
            return False
        self.knowledge.add(fact)
        return True

    def knows(self, fact):
        return fact in self.knowledge

    def focus(self, target):
        self.last_focus = target

    # ==========================================================
    # INVENTORY
    # ==========================================================
    def has(self, item_id):
        return item_id in self.inventory

    def take(self, item_id, flags=None, presence_flag=None):
        """
        Move an item from the room into the inventory.
        The presence flag, when given, is cleared so the item lives in one place only.
        """
        self.inventory.add(item_id)
        if flags is not None and presence_flag:
            setattr(flags, presence_flag, False)
        logger.debug("took %s", item_id)

    def release(self, item_id, flags=None, presence_flag=None):
        """Put an item back into the room."""
        self.inventory.discard(item_id)
        if flags is not None and presence_flag:
            setattr(flags, presence_flag, True)
        logger.debug("released %s", item_id)

    def snapshot(self, flags):
        """Read-only copy of the session for status panels and tests."""
        return {
            "inventory": sorted(self.inventory),
            "knowledge": sorted(self.knowledge),
            "scene_flags": asdict(flags),
            "last_focus": self.last_focus,
        }
