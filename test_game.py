import unittest
from unittest.mock import patch

from junkbay.errors import SceneDataError, UnknownSceneError
from junkbay.game import Game
from junkbay.narrator import load_scene_data
from junkbay.scenes import get_scene, global_book, resolve_scene_id, scene_aliases
from junkbay.scenes.junk_bay import JunkBayScene


class TestJunkBay(unittest.TestCase):
    def setUp(self):
        self.game = Game("junk_bay")

    def say(self, text):
        return self.game.process_command(text)

    def reply(self, key):
        return self.game.scene.narrator.say(key)

    # --- basics -------------------------------------------------------

    def test_empty_input(self):
        for text in ("", "   ", "?!"):
            result = self.say(text)
            self.assertEqual(result["rule_id"], "system.empty")
            self.assertEqual(result["reply_text"], self.reply("empty"))

    def test_every_input_gets_an_answer(self):
        for text in ("xyzzy", "close the pipes", "sing", "feel the floor", "?", "qa",
                     "look at it", "use", "throw", "hello", "where am i", "push the crate"):
            result = self.say(text)
            self.assertTrue(result["reply_text"])
            self.assertTrue(result["rule_id"])

    def test_same_inputs_same_outputs(self):
        script = ["look around", "wait", "take the red disc", "look at it",
                  "search the rubble", "inventory", "look around", "wait"]
        other = Game("junk_bay")
        for text in script:
            self.assertEqual(self.say(text), other.process_command(text))
        self.assertEqual(self.game.get_session_snapshot(), other.get_session_snapshot())

    def test_games_do_not_share_state(self):
        other = Game("junk_bay")
        self.say("take the red disc")
        self.assertEqual(other.get_session_snapshot()["inventory"], [])
        self.assertTrue(other.flags.has_red_disc)

    # --- variants and counters ----------------------------------------

    def test_wait_cycles(self):
        texts = [self.say("wait")["reply_text"] for _ in range(3)]
        self.assertEqual(texts, [self.reply("wait_a"), self.reply("wait_b"), self.reply("wait_a")])
        self.assertEqual(self.game.session.seen("rule.junk_bay.wait"), 3)
        self.assertEqual(self.game.session.seen("variant.wait"), 3)

    def test_look_around_cycles(self):
        variants = self.game.scene.narrator.area_variants
        self.assertEqual(self.say("look around")["reply_text"], variants[0])
        self.assertEqual(self.say("look")["reply_text"], variants[1])
        self.assertEqual(self.say("where am i")["reply_text"], variants[0])

    # --- items --------------------------------------------------------

    def test_take_red_disc_once(self):
        first = self.say("take the red disc")
        self.assertEqual(first["rule_id"], "junk_bay.take_red_disc")
        self.assertEqual(first["reply_text"], self.reply("take_red_disc"))
        self.assertFalse(self.game.flags.has_red_disc)

        second = self.say("take the red disc")
        self.assertEqual(second["reply_text"], "You do not see a red disc to take.")
        self.assertEqual(self.game.get_session_snapshot()["inventory"], ["red_disc"])

    def test_inventory(self):
        self.assertEqual(self.say("inventory")["reply_text"], self.reply("inventory_empty"))
        self.say("take the red disc")
        result = self.say("inventory")
        self.assertEqual(result["rule_id"], "system.inventory")
        self.assertEqual(result["reply_text"], "Inventory: red disc")

    def test_throw_returns_item_to_room(self):
        self.say("take the red disc")
        self.assertEqual(self.say("throw the disc")["rule_id"], "junk_bay.throw_disc")
        self.assertTrue(self.game.flags.has_red_disc)
        self.assertNotIn("red_disc", self.game.session.inventory)

    # --- progression --------------------------------------------------

    def test_repair_machine(self):
        self.assertEqual(self.say("use the tab on the machine")["reply_text"], self.reply("use_tab_missing"))

        found = self.say("search the rubble")
        self.assertEqual(found["reply_text"], self.reply("search_found_tab"))
        self.assertIn("metal_tab", self.game.session.inventory)
        self.assertEqual(self.say("search the rubble")["reply_text"], self.reply("search_nothing"))

        self.assertEqual(self.say("use the tab on the machine")["reply_text"], self.reply("use_tab_no_cylinder"))
        self.say("take the silver cylinder")

        result = self.say("use the tab on the machine")
        self.assertEqual(result["rule_id"], "junk_bay.use_tab_on_machine")
        self.assertEqual(result["reply_text"], self.reply("use_tab_on_machine_success"))
        self.assertTrue(self.game.flags.machine_repaired)
        self.assertIn("machine_latched", self.game.session.knowledge)

    def test_repair_needs_tab_as_well_as_cylinder(self):
        self.say("take the silver cylinder")
        self.assertIn("silver_cylinder", self.game.session.inventory)

        result = self.say("use the tab on the machine")
        self.assertEqual(result["rule_id"], "junk_bay.use_tab_on_machine")
        self.assertEqual(result["reply_text"], self.reply("use_tab_missing"))
        self.assertFalse(self.game.flags.machine_repaired)

    def test_symbols_then_archway(self):
        self.assertEqual(self.say("enter the archway")["reply_text"], self.reply("enter_archway_blocked"))
        self.assertEqual(self.say("read the symbols")["reply_text"], self.reply("read_symbols_fail"))
        self.assertEqual(self.say("read the symbols")["reply_text"], self.reply("read_symbols_success"))
        self.assertTrue(self.game.flags.archway_safe)

        result = self.say("go through the archway")
        self.assertEqual(result["rule_id"], "junk_bay.enter_archway")
        self.assertEqual(result["reply_text"], self.reply("enter_archway_safe"))

    def test_cleaned_symbols_read_first_time(self):
        self.say("wipe the symbols")
        self.assertTrue(self.game.flags.panel_seam_visible)
        self.assertEqual(self.say("read the symbols")["reply_text"], self.reply("read_symbols_success"))

    def test_power_toggle(self):
        self.assertEqual(self.say("turn off the machine")["rule_id"], "junk_bay.power_machine_off")
        self.assertFalse(self.game.flags.left_machine_powered)
        self.assertFalse(self.game.flags.blue_glow_active)
        self.assertEqual(self.say("look at the machine")["reply_text"], self.reply("look_machine_powered_down"))
        self.assertEqual(self.say("turn on the machine")["rule_id"], "junk_bay.power_machine_on")
        self.assertTrue(self.game.flags.left_machine_powered)

    def test_score(self):
        self.say("read the symbols")
        self.say("read the symbols")
        self.assertIn("1 of 3", self.say("score")["reply_text"])

    # --- pronouns and focus -------------------------------------------

    def test_it_follows_focus(self):
        self.say("look at the archway")
        result = self.say("look at it")
        self.assertEqual(result["rule_id"], "junk_bay.look_archway")
        self.assertEqual(result["reply_text"], self.reply("look_archway"))

    def test_him_after_roger(self):
        self.assertEqual(self.say("who is roger")["rule_id"], "roger.who")
        self.assertEqual(self.game.session.last_focus, "roger")
        result = self.say("look at him")
        self.assertEqual(result["rule_id"], "fallback.look.target")
        self.assertIn("Roger", result["reply_text"])

    # --- global rules -------------------------------------------------

    def test_roger_lore(self):
        self.assertEqual(self.say("where is roger now")["rule_id"], "roger.status_now")
        self.assertEqual(self.say("how does roger survive")["rule_id"], "roger.pattern")
        self.assertEqual(self.say("tell me about roger and the arcada")["rule_id"], "roger.past_arcada")
        self.assertEqual(self.say("is roger scared")["rule_id"], "roger.mood")

    def test_social(self):
        self.assertEqual(self.say("hello")["rule_id"], "social.greet")
        self.assertEqual(self.say("thanks")["rule_id"], "social.thanks")
        self.assertEqual(self.say("help")["rule_id"], "system.help")

    def test_status(self):
        result = self.say("status")
        self.assertEqual(result["rule_id"], "system.status")
        self.assertIn("archway: risky", result["reply_text"])

    def test_qa_disabled_passes(self):
        result = self.say("qa")
        self.assertEqual(result["rule_id"], "fallback.look.general")
        self.assertEqual(self.game.session.seen("rule.qa.entry"), 0)

    def test_qa_enabled(self):
        game = Game("junk_bay", qa_enabled=True)
        result = game.process_command("qa")
        self.assertEqual(result["rule_id"], "qa.entry")


class TestScenes(unittest.TestCase):
    def test_aliases(self):
        self.assertEqual(resolve_scene_id("scene2"), "junk_bay")
        self.assertEqual(resolve_scene_id(" JunkBay "), "junk_bay")
        self.assertIs(get_scene("scene2"), get_scene("junk_bay"))

    def test_aliases_come_from_manifests(self):
        self.assertEqual(scene_aliases(), {"scene2": "junk_bay", "junkbay": "junk_bay"})

        scene_aliases.cache_clear()
        self.addCleanup(scene_aliases.cache_clear)
        with patch("junkbay.scenes.load_manifest", return_value={"aliases": ["Bay_Two"]}):
            self.assertEqual(resolve_scene_id("bay_two"), "junk_bay")
            with self.assertRaises(UnknownSceneError):
                resolve_scene_id("scene2")

    def test_scene_without_area_description(self):
        scene_data = load_scene_data("junk_bay")
        book = {key: value for key, value in scene_data["book"].items() if key != "area_variants"}
        with self.assertRaises(SceneDataError):
            JunkBayScene(scene_data["manifest"], book, global_book())

    def test_unknown_scene(self):
        with self.assertRaises(UnknownSceneError):
            Game("the_moon")

    def test_change_scene_keeps_player(self):
        game = Game("junk_bay")
        game.process_command("take the red disc")
        game.process_command("wait")
        game.change_scene("junkbay")

        self.assertIn("red_disc", game.session.inventory)
        self.assertEqual(game.session.seen("variant.wait"), 1)
        self.assertEqual(game.process_command("wait")["reply_text"], game.scene.narrator.say("wait_b"))

    def test_change_scene_keeps_carried_items_out_of_the_room(self):
        game = Game("junk_bay")
        game.process_command("take the red disc")
        game.change_scene("junk_bay")

        self.assertFalse(game.flags.has_red_disc)
        self.assertTrue(game.flags.has_silver_cylinder)
        result = game.process_command("take the red disc")
        self.assertEqual(result["reply_text"], game.scene.narrator.say("take_red_disc_missing"))
        self.assertEqual(game.get_session_snapshot()["inventory"], ["red_disc"])

    def test_change_scene_accepts_scene_object(self):
        game = Game("junk_bay")
        scene = get_scene("junk_bay")
        self.assertIs(game.change_scene(scene), scene)

    def test_rule_ids_unique(self):
        ids = [rule.id for rule in get_scene("junk_bay").rules]
        self.assertEqual(len(ids), len(set(ids)))


if __name__ == '__main__':
    unittest.main()
