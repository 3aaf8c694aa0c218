"""
Junk bay: an industrial bay with an archway, a powered machine and loose parts.

Progression: take the silver cylinder, search the rubble for the metal
tab, latch both into the machine coupling. The symbols on the back wall
tell you the archway is safe once you can read them.
"""

from junkbay.fallback import pick_target
from junkbay.rules import Reply, has_any, intent_with as wants
from junkbay.scenes.base import Scene, Rulebook
from junkbay.variants import pick_variant

PANEL = ("panel", "controls")
FLOOR = ("rubble", "deck", "debris")
MACHINE = ("machine", "coupling")


def said(c, *words):
    return has_any(c.all, *words)


def touching(*nouns):
    """Touch, or "feel" aimed at a thing. "feel" about Roger is a mood question."""
    def match(c, raw, s, f):
        if not ("touch" in c.intents or ("feel" in c.intents and c.nouns)):
            return False
        return not nouns or has_any(c.targets, *nouns)
    return match


def both(first, second):
    def match(c, raw, s, f):
        return first(c, raw, s, f) and second(c, raw, s, f)
    return match


def saying(*words):
    return lambda c, raw, s, f: said(c, *words)


class JunkBayScene(Scene):
    scene_id = "junk_bay"

    def build_rules(self):
        n = self.narrator
        book = Rulebook(n, prefix=self.scene_id)

        def pick(focus, choose):
            """Reply effect whose key depends on state."""
            def effect(c, raw, s, f):
                if focus:
                    s.focus(focus)
                return Reply(n.say(choose(s, f)))
            return effect

        # ==========================================================
        # 1. WHERE AM I / LOOK
        # ==========================================================
        book.add("ask_where", 2850,
                 lambda c, raw, s, f: ("ask" in c.intents and not c.persons
                                       and (said(c, "where") or "here" in c.pronouns)),
                 lambda c, raw, s, f: Reply(self.describe_area(s)))

        book.says("look_under", 2010,
                  lambda c, raw, s, f: "look" in c.intents and "under" in c.prepositions,
                  "look_under", focus="area")
        book.says("look_behind", 2009,
                  lambda c, raw, s, f: "look" in c.intents and "behind" in c.prepositions,
                  "look_behind", focus="area")
        book.says("look_self", 2005, wants("look", "self"), "look_self", focus="self")
        book.add("look_around", 2000,
                 lambda c, raw, s, f: "look" in c.intents and (
                     "area" in c.nouns or "around" in c.prepositions
                     or "here" in c.pronouns or not c.targets),
                 lambda c, raw, s, f: Reply(self.describe_area(s)))

        # Items first, then fixtures, then the room itself.
        book.add("look_red_disc", 1990, wants("look", "red_disc"), pick(
            "red_disc", lambda s, f: "look_red_disc"
            if f.has_red_disc or s.has("red_disc") else "look_red_disc_gone"))
        book.add("look_blue_crate", 1989, wants("look", "blue_crate"), pick(
            "blue_crate", lambda s, f: "look_blue_crate" if f.has_blue_crate else "look_blue_crate_gone"))
        book.add("look_silver_cylinder", 1988, wants("look", "silver_cylinder"), pick(
            "silver_cylinder", lambda s, f: "look_silver_cylinder"
            if f.has_silver_cylinder or s.has("silver_cylinder") else "look_silver_cylinder_gone"))
        book.add("look_metal_tab", 1987, wants("look", "metal_tab"), pick(
            "metal_tab", lambda s, f: "look_metal_tab" if s.has("metal_tab") else "look_metal_tab_hidden"))
        book.add("look_coupling", 1986, wants("look", "coupling", "socket"), pick(
            "coupling", lambda s, f: "look_machine_repaired" if f.machine_repaired else "look_coupling"))
        book.add("look_panel", 1985, wants("look", *PANEL), pick(
            "panel", lambda s, f: "look_panel_seam_visible" if f.panel_seam_visible else "look_panel"))

        def glow_key(s, f):
            if not f.blue_glow_active:
                return "look_glow_dead"
            return "look_glow_flicker" if f.glow_unstable else "look_glow"

        book.add("look_glow", 1984, wants("look", "glow"), pick("glow", glow_key))

        def symbols_key(s, f):
            if not f.wall_has_symbols:
                return "look_symbols_gone"
            return "look_symbols_wiped" if f.panel_seam_visible else "look_symbols"

        book.add("look_symbols", 1983, wants("look", "symbols"), pick("symbols", symbols_key))

        def stains_key(s, f):
            if not f.wall_has_stains:
                return "look_stains_gone"
            return "look_stains_wiped" if f.stains_wiped else "look_stains"

        book.add("look_stains", 1982, wants("look", "stains"), pick("stains", stains_key))
        book.says("look_archway", 1981, wants("look", "archway"), "look_archway", focus="archway")

        def machine_key(s, f):
            if not f.left_machine_powered:
                return "look_machine_powered_down"
            return "look_machine_repaired" if f.machine_repaired else "look_machine"

        book.add("look_machine", 1980, wants("look", "machine"), pick("machine", machine_key))
        book.says("look_pillar", 1979, wants("look", "pillar"), "look_pillar", focus="pillar")
        book.add("look_cables", 1978, wants("look", "cables"), pick(
            "cables", lambda s, f: "look_cables_plugged" if f.cables_plugged else "look_cables"))
        book.add("look_slime", 1977, wants("look", "slime"), pick(
            "slime", lambda s, f: "look_slime_present" if f.slime_present else "look_slime_absent"))

        def lights_key(s, f):
            return "look_lights_working" if f.lights_working else "look_lights_dead"

        book.add("look_lights_flicker", 1976,
                 both(wants("look", "lights"), lambda c, raw, s, f: "flicker" in c.adjectives),
                 pick("lights", lambda s, f: "look_lights_flicker" if f.lights_flickering else lights_key(s, f)))
        book.add("look_lights", 1975, wants("look", "lights"), pick("lights", lights_key))
        book.says("look_rubble", 1974, wants("look", "rubble"), "look_rubble", focus="rubble")
        book.says("look_debris", 1973, wants("look", "debris"), "look_debris", focus="debris")
        book.says("look_pipes", 1972, wants("look", "pipes"), "look_pipes", focus="pipes")
        book.says("look_vents", 1971, wants("look", "vents"), "look_vents", focus="vents")
        book.says("look_shadows", 1970, wants("look", "shadows"), "look_shadows", focus="shadows")
        book.says("look_ceiling", 1969, wants("look", "ceiling"), "look_ceiling", focus="ceiling")
        book.says("look_deck", 1968, wants("look", "deck"), "look_deck", focus="deck")
        book.says("look_walls", 1967, wants("look", "walls"), "look_walls", focus="walls")

        # ==========================================================
        # 2. SENSES
        # ==========================================================
        book.says("smell_ozone", 1895,
                  lambda c, raw, s, f: "smell" in c.intents and (
                      "ozone" in c.nouns or said(c, "electric", "burnt")),
                  "smell_ozone", focus="air")
        book.says("smell_archway", 1894, wants("smell", "archway"), "smell_archway", focus="archway")
        book.says("smell_slime", 1893, wants("smell", "slime"), "smell_slime", focus="slime")
        book.says("smell_rubble", 1892, wants("smell", *FLOOR), "smell_rubble", focus="rubble")
        book.says("smell_vents", 1891, wants("smell", "vents"), "smell_vents", focus="vents")
        book.says("smell_disc", 1890, wants("smell", "red_disc"), "smell_disc", focus="red_disc")
        book.says("smell_general", 1889, wants("smell"), "smell_metal", focus="air")

        book.says("listen_archway", 1888, wants("listen", "archway"), "listen_archway", focus="archway")
        book.add("listen_machine", 1887, wants("listen", "machine"), pick(
            "machine", lambda s, f: "listen_machine_hum" if f.left_machine_powered else "listen_machine_silent"))
        book.add("listen_ambient", 1886,
                 lambda c, raw, s, f: "listen" in c.intents or "hum" in c.nouns,
                 pick("hum", lambda s, f: "listen_hum" if f.ambient_hum else "listen_quiet"))

        book.says("touch_slime", 1885, touching("slime"), "touch_slime", focus="slime")
        book.says("touch_rubble", 1884, touching("rubble", "debris"), "touch_rubble", focus="rubble")
        book.says("touch_panel", 1883, touching(*PANEL), "touch_panel", focus="panel")
        book.says("touch_glow", 1882, touching("glow"), "touch_glow", focus="glow")
        book.says("touch_disc", 1881, touching("red_disc"), "touch_disc", focus="red_disc")
        book.says("touch_cables", 1880, touching("cables"), "touch_cables", focus="cables")

        def touch_general(c, raw, s, f):
            s.focus(pick_target(c) or s.last_focus or "deck")
            return Reply(n.say("touch_cold_metal"))

        book.add("touch_general", 1879, touching(), touch_general)
        book.says("taste", 1878, wants("taste"), "taste_no")

        # ==========================================================
        # 3. IDLE, KICK, THROW
        # ==========================================================
        book.add("wait", 1875, wants("wait"),
                 lambda c, raw, s, f: Reply(pick_variant(s, "wait", [n.say("wait_a"), n.say("wait_b")])))
        book.says("jump", 1874, wants("jump"), "jump")

        book.says("kick_crate", 1873, wants("kick", "blue_crate"), "kick_crate", focus="blue_crate")
        book.says("kick_machine", 1872, wants("kick", "machine"), "kick_machine", focus="machine")
        book.says("kick_wall", 1871, wants("kick", "walls"), "kick_wall", focus="walls")
        book.says("kick_rubble", 1870, wants("kick", *FLOOR), "kick_rubble", focus="rubble")
        book.says("kick_general", 1869, wants("kick"), "kick_air")

        def throw_disc(key):
            def effect(c, raw, s, f):
                s.focus("red_disc")
                if not (s.has("red_disc") or f.has_red_disc):
                    return Reply(n.say("throw_missing"))
                s.release("red_disc", f, "has_red_disc")
                return Reply(n.say(key))
            return effect

        def throws_disc_at(*nouns):
            return both(wants("throw", "red_disc"), lambda c, raw, s, f: has_any(c.targets, *nouns))

        book.add("throw_disc_at_machine", 1868, throws_disc_at("machine"), throw_disc("throw_disc_at_machine"))
        book.add("throw_disc_at_archway", 1867, throws_disc_at("archway"), throw_disc("throw_disc_at_archway"))
        book.add("throw_disc_at_panel", 1866, throws_disc_at(*PANEL), throw_disc("throw_disc_at_panel"))
        book.add("throw_disc", 1865, wants("throw", "red_disc"), throw_disc("throw_disc"))

        def throw_cylinder(c, raw, s, f):
            s.focus("silver_cylinder")
            if not (s.has("silver_cylinder") or f.has_silver_cylinder):
                return Reply(n.say("throw_missing"))
            s.release("silver_cylinder", f, "has_silver_cylinder")
            return Reply(n.say("throw_cylinder"))

        book.add("throw_cylinder", 1864, wants("throw", "silver_cylinder"), throw_cylinder)
        book.says("throw_general", 1863, wants("throw"), "throw_nothing")

        # ==========================================================
        # 4. SEARCH, SCAN, READ, PRESS
        # ==========================================================
        def search_floor(c, raw, s, f):
            s.focus("rubble")
            if s.learn("found_metal_tab"):
                s.take("metal_tab")
                return Reply(n.say("search_found_tab"))
            return Reply(n.say("search_nothing"))

        book.add("search_floor", 1860, wants("search", *FLOOR), search_floor)
        book.says("search_crate", 1859, wants("search", "blue_crate"), "search_crate", focus="blue_crate")
        book.says("search_area", 1858, wants("search", "area"), "search_area", focus="area")
        book.says("search_general", 1857, wants("search"), "search_general")

        def scan_machine(c, raw, s, f):
            s.focus("machine")
            if not f.left_machine_powered:
                return Reply(n.say("scan_machine_inert"))
            s.learn("machine_scanned")
            return Reply(n.say("scan_machine"))

        book.add("scan_machine", 1856, wants("scan", "machine"), scan_machine)
        book.says("scan_archway", 1855, wants("scan", "archway"), "scan_archway", focus="archway")
        book.says("scan_panel", 1854, wants("scan", *PANEL), "scan_panel", focus="panel")
        book.says("scan_general", 1853, wants("scan"), "scan_general")

        def read_symbols(c, raw, s, f):
            s.focus("symbols")
            if not f.wall_has_symbols:
                return Reply(n.say("read_symbols_gone"))
            # Clean symbols read at once; dusty ones take a second look.
            first_read = s.learn("symbols_decoded")
            if first_read and not f.panel_seam_visible:
                return Reply(n.say("read_symbols_fail"))
            f.archway_safe = True
            return Reply(n.say("read_symbols_success"))

        book.add("read_symbols", 1852, wants("read", "symbols"), read_symbols)
        book.says("read_panel", 1851, wants("read", *PANEL), "read_panel", focus="panel")
        book.says("read_stains", 1850, wants("read", "stains"), "read_stains", focus="stains")
        book.says("read_general", 1849, wants("read"), "read_general")

        def press_panel(c, raw, s, f):
            s.focus("panel")
            if not f.panel_unlocked and not s.has("silver_cylinder"):
                return Reply(n.say("press_panel_dead"))
            f.panel_unlocked = True
            return Reply(n.say("press_panel_beep"))

        book.add("press_panel", 1848, wants("press", *PANEL), press_panel)
        book.says("press_general", 1847, wants("press"), "press_general")

        # ==========================================================
        # 5. CLEAN
        # ==========================================================
        def clean_symbols(c, raw, s, f):
            s.focus("symbols")
            if not f.panel_seam_visible:
                f.panel_seam_visible = True
                return Reply(n.say("clean_symbols_reveal"))
            return Reply(n.say("clean_symbols"))

        def clean_stains(c, raw, s, f):
            s.focus("stains")
            f.stains_wiped = True
            return Reply(n.say("clean_stains"))

        book.add("clean_symbols", 1846, wants("clean", "symbols"), clean_symbols)
        book.add("clean_stains", 1845, wants("clean", "stains"), clean_stains)
        book.says("clean_wall", 1844, wants("clean", "walls"), "clean_wall", focus="walls")
        book.says("clean_panel", 1843, wants("clean", *PANEL), "clean_panel", focus="panel")
        book.says("clean_vents", 1842, wants("clean", "vents"), "clean_vents", focus="vents")
        book.says("clean_floor", 1841, wants("clean", *FLOOR), "clean_floor", focus="deck")
        book.says("clean_general", 1840, wants("clean"), "clean_general")

        # ==========================================================
        # 6. OPEN, CLOSE, APPROACH, ENTER, CLIMB
        # ==========================================================
        book.says("pry_with_disc", 1839, wants("open", "red_disc"), "pry_with_disc", focus="red_disc")
        book.add("open_archway", 1838, wants("open", "archway"), pick(
            "archway", lambda s, f: "open_archway" if f.archway_open else "open_archway_sealed"))

        def panel_open_key(s, f):
            if f.panel_seam_visible:
                return "open_panel_seam"
            return "open_panel_unlocked" if f.panel_unlocked else "open_panel"

        book.add("open_panel", 1837, wants("open", *PANEL), pick("panel", panel_open_key))
        book.says("open_crate", 1836, wants("open", "blue_crate"), "open_crate", focus="blue_crate")
        book.says("open_machine", 1835, wants("open", *MACHINE), "open_machine", focus="machine")
        book.says("close_archway", 1834, wants("close", "archway"), "close_archway", focus="archway")
        book.says("close_panel", 1833, wants("close", *PANEL), "close_panel", focus="panel")
        book.says("close_crate", 1832, wants("close", "blue_crate"), "close_crate", focus="blue_crate")

        book.add("approach_archway", 1830, wants("approach", "archway"), pick(
            "archway", lambda s, f: "approach_archway" if f.archway_open else "approach_archway_sealed"))

        def enter_archway(c, raw, s, f):
            s.focus("archway")
            if not f.archway_open:
                return Reply(n.say("enter_archway_closed"))
            if not f.archway_safe:
                return Reply(n.say("enter_archway_blocked"))
            s.learn("passed_archway")
            return Reply(n.say("enter_archway_safe"))

        book.add("enter_archway", 1829, wants("enter", "archway"), enter_archway)
        book.says("approach_machine", 1828, wants("approach", "machine"), "approach_machine", focus="machine")
        book.says("enter_machine", 1827, wants("enter", "machine"), "enter_machine", focus="machine")

        book.says("climb_pillar", 1826, wants("climb", "pillar"), "climb_pillar", focus="pillar")
        book.says("climb_wall", 1825, wants("climb", "walls"), "climb_wall", focus="walls")
        book.says("climb_crate", 1824, wants("climb", "blue_crate"), "climb_crate", focus="blue_crate")

        # ==========================================================
        # 7. MOVE, PUSH, PULL, TURN
        # ==========================================================
        def unplug_cables(c, raw, s, f):
            s.focus("cables")
            if not f.cables_plugged:
                return Reply(n.say("unplug_cables_already"))
            f.cables_plugged = False
            f.glow_unstable = True
            return Reply(n.say("unplug_cables"))

        book.add("unplug_cables", 1823,
                 both(wants("move", "cables"), saying("unplug", "disconnect")), unplug_cables)

        def move_crate(c, raw, s, f):
            s.focus("blue_crate")
            if said(c, "push", "shove"):
                return Reply(n.say("push_crate"))
            if said(c, "pull", "drag"):
                return Reply(n.say("pull_crate"))
            return Reply(n.say("move_crate"))

        book.add("move_crate", 1822, wants("move", "blue_crate"), move_crate)
        book.says("move_machine", 1821, wants("move", "machine"), "push_machine", focus="machine")
        book.says("move_panel", 1820, wants("move", *PANEL), "push_panel", focus="panel")
        book.says("move_cables", 1819, wants("move", "cables"), "pull_cables", focus="cables")
        book.says("lift_debris", 1818,
                  both(wants("move", "debris"), saying("lift", "hoist")), "lift_debris", focus="debris")
        book.says("move_rubble", 1817, wants("move", "rubble", "debris"), "pull_rubble", focus="rubble")
        book.says("turn_disc", 1816, wants("move", "red_disc"), "turn_disc", focus="red_disc")
        book.says("turn_cylinder", 1815, wants("move", "silver_cylinder"), "turn_cylinder",
                  focus="silver_cylinder")

        # ==========================================================
        # 8. POWER
        # ==========================================================
        def power_off(c, raw, s, f):
            s.focus("machine")
            if not f.left_machine_powered:
                return Reply(n.say("machine_already_off"))
            f.left_machine_powered = False
            f.blue_glow_active = False
            return Reply(n.say("toggle_machine_off"))

        def power_on(c, raw, s, f):
            s.focus("machine")
            if f.left_machine_powered:
                return Reply(n.say("machine_already_on"))
            f.left_machine_powered = True
            f.blue_glow_active = True
            return Reply(n.say("toggle_machine_on"))

        book.add("power_machine_off", 1814,
                 both(wants("start", *MACHINE), saying("turnoff", "off", "deactivate", "shutdown")), power_off)
        book.add("power_machine_on", 1813, wants("start", *MACHINE), power_on)
        book.says("toggle_lights", 1812, wants("start", "lights"), "toggle_lights", focus="lights")

        # ==========================================================
        # 9. SMASH
        # ==========================================================
        book.says("smash_machine", 1811, wants("break", "machine"), "smash_machine", focus="machine")
        book.says("smash_panel", 1810, wants("break", *PANEL), "smash_panel", focus="panel")
        book.says("smash_wall", 1809, wants("break", "walls"), "smash_wall", focus="walls")
        book.says("smash_crate", 1808, wants("break", "blue_crate"), "smash_crate", focus="blue_crate")
        book.says("smash_lights", 1807, wants("break", "lights"), "smash_lights", focus="lights")
        book.says("smash_disc", 1806, wants("break", "red_disc"), "smash_disc", focus="red_disc")

        # ==========================================================
        # 10. TAKE
        # ==========================================================
        def take_item(item_id, presence_flag, key, missing_key):
            def effect(c, raw, s, f):
                s.focus(item_id)
                if not getattr(f, presence_flag):
                    return Reply(n.say(missing_key))
                s.take(item_id, f, presence_flag)
                return Reply(n.say(key))
            return effect

        def take_tab(c, raw, s, f):
            s.focus("metal_tab")
            if s.has("metal_tab"):
                return Reply(n.say("take_tab_owned"))
            if s.knows("found_metal_tab"):
                s.take("metal_tab")
                return Reply(n.say("take_tab"))
            return Reply(n.say("take_tab_missing"))

        book.add("take_red_disc", 1799, wants("take", "red_disc"),
                 take_item("red_disc", "has_red_disc", "take_red_disc", "take_red_disc_missing"))
        book.add("take_silver_cylinder", 1798, wants("take", "silver_cylinder"),
                 take_item("silver_cylinder", "has_silver_cylinder", "take_cylinder", "take_cylinder_missing"))
        book.add("take_metal_tab", 1797, wants("take", "metal_tab"), take_tab)
        book.says("take_blue_crate", 1796, wants("take", "blue_crate"), "take_blue_crate", focus="blue_crate")
        book.says("take_machine", 1795, wants("take", *MACHINE), "take_machine", focus="machine")
        book.says("take_panel", 1794, wants("take", *PANEL), "take_panel", focus="panel")
        book.says("take_wall", 1793, wants("take", "walls"), "take_wall", focus="walls")
        book.says("take_pipes", 1792, wants("take", "pipes"), "take_pipes", focus="pipes")
        book.says("take_cables", 1791, wants("take", "cables"), "take_cables", focus="cables")
        book.says("take_slime", 1790, wants("take", "slime"), "take_slime", focus="slime")
        book.says("take_debris", 1789, wants("take", "debris", "rubble"), "take_debris", focus="debris")
        book.says("take_generic", 1788, wants("take"), "take_nothing")

        # ==========================================================
        # 11. USE
        # ==========================================================
        def plug_cables(c, raw, s, f):
            s.focus("cables")
            if f.cables_plugged:
                return Reply(n.say("plug_cables_already"))
            f.cables_plugged = True
            f.glow_unstable = False
            return Reply(n.say("plug_cables"))

        def cylinder_on_panel(c, raw, s, f):
            s.focus("panel")
            if not s.has("silver_cylinder"):
                return Reply(n.say("use_cylinder_missing"))
            f.panel_unlocked = True
            f.blue_glow_active = True
            s.learn("panel_accepted_cylinder")
            return Reply(n.say("use_cylinder_on_panel"))

        def tab_on_machine(c, raw, s, f):
            s.focus("machine")
            if not s.has("metal_tab"):
                return Reply(n.say("use_tab_missing"))
            if not s.has("silver_cylinder"):
                return Reply(n.say("use_tab_no_cylinder"))
            f.machine_repaired = True
            f.blue_glow_active = True
            s.learn("machine_latched")
            return Reply(n.say("use_tab_on_machine_success"))

        def cylinder_on_machine(c, raw, s, f):
            s.focus("machine")
            if not s.has("silver_cylinder"):
                return Reply(n.say("use_cylinder_missing"))
            if not f.left_machine_powered:
                return Reply(n.say("use_cylinder_machine_unpowered"))
            if not s.has("metal_tab"):
                return Reply(n.say("use_cylinder_on_machine_fail"))
            return Reply(n.say("use_cylinder_wants_latch"))

        def use_general(c, raw, s, f):
            if s.last_focus:
                return Reply(n.say("use_focus", target=n.name(s.last_focus)))
            return Reply(n.say("use_raw", raw=raw))

        book.add("plug_cables", 1780, wants("use", "cables"), plug_cables)
        book.add("use_cylinder_on_panel", 1779,
                 both(wants("use", "silver_cylinder"), lambda c, raw, s, f: has_any(c.targets, *PANEL)),
                 cylinder_on_panel)
        book.add("use_tab_on_machine", 1778,
                 both(wants("use", "metal_tab"), lambda c, raw, s, f: has_any(c.targets, *MACHINE)),
                 tab_on_machine)
        book.add("use_cylinder_on_machine", 1777,
                 both(wants("use", "silver_cylinder"), lambda c, raw, s, f: has_any(c.targets, *MACHINE)),
                 cylinder_on_machine)
        book.says("use_disc_on_crate", 1776,
                  both(wants("use", "red_disc"), lambda c, raw, s, f: "blue_crate" in c.targets),
                  "use_disc_on_crate", focus="blue_crate")
        book.says("plug_machine", 1775,
                  both(wants("use", *MACHINE), saying("plug", "connect", "attach")),
                  "plug_machine", focus="machine")
        book.says("use_disc_hint", 1774, wants("use", "red_disc"), "use_disc_hint", focus="red_disc")
        book.says("use_cylinder_hint", 1773, wants("use", "silver_cylinder"), "use_cylinder_hint",
                  focus="silver_cylinder")
        book.add("use_general", 1771, wants("use"), use_general)

        # ==========================================================
        # 12. TALK
        # ==========================================================
        book.says("talk_roger", 1703,
                  lambda c, raw, s, f: "talk" in c.intents and "roger" in c.persons,
                  "talk_roger_unavailable", focus="roger")
        book.says("talk_self", 1702, wants("talk", "self"), "talk_self")
        book.says("talk_machine", 1701, wants("talk", "machine"), "talk_machine", focus="machine")
        book.says("talk_archway", 1700, wants("talk", "archway"), "talk_archway", focus="archway")
        book.says("shout", 1699, both(wants("talk"), saying("shout", "yell", "scream")), "shout")
        book.says("talk_general", 1698, wants("talk"), "talk_general")

        # ==========================================================
        # 13. IDLE ACTIONS
        # ==========================================================
        idle = (
            ("sit", 1650, ("sit",)),
            ("sleep", 1649, ("sleep", "nap")),
            ("pray", 1648, ("pray",)),
            ("dance", 1647, ("dance",)),
            ("sing", 1646, ("sing",)),
            ("crouch", 1645, ("crouch", "duck", "kneel")),
            ("hide", 1644, ("hide",)),
            ("swear", 1643, ("swear", "curse")),
            ("run", 1642, ("run", "sprint")),
        )
        for name, priority, words in idle:
            book.says(name, priority, saying(*words), name)

        return book.rules
