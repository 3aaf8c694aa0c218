import unittest

from junkbay.director import Director, Response, dispatch
from junkbay.listener import classify
from junkbay.rules import Pass, Reply, Rule, compose
from junkbay.session import SceneFlags, SessionState


def always(c, raw, s, f):
    return True


def never(c, raw, s, f):
    return False


def says(text):
    return lambda c, raw, s, f: Reply(text)


class MockFallback:
    def __init__(self):
        self.calls = 0

    def __call__(self, command, raw_text, session, flags):
        self.calls += 1
        return Response("fallback text", "fallback.test")


class TestDispatch(unittest.TestCase):
    def setUp(self):
        self.session = SessionState()
        self.flags = SceneFlags()
        self.command = classify("look at the wall")
        self.fallback = MockFallback()

    def run_rules(self, *rules):
        return dispatch(self.command, "look at the wall", self.session, self.flags,
                        compose(rules, []), fallback=self.fallback)

    def test_higher_priority_wins_regardless_of_order(self):
        low = Rule("low", 10, always, says("low"))
        high = Rule("high", 20, always, says("high"))
        self.assertEqual(self.run_rules(low, high).rule_id, "high")
        self.assertEqual(self.run_rules(high, low).rule_id, "high")

    def test_ties_keep_declaration_order(self):
        first = Rule("first", 10, always, says("first"))
        second = Rule("second", 10, always, says("second"))
        self.assertEqual(self.run_rules(first, second).rule_id, "first")
        self.assertEqual(self.run_rules(second, first).rule_id, "second")

    def test_first_match_wins_not_best_match(self):
        result = self.run_rules(
            Rule("generic", 30, always, says("generic")),
            Rule("specific", 20, always, says("specific")),
        )
        self.assertEqual(result, Response("generic", "generic"))

    def test_pass_continues_scanning(self):
        result = self.run_rules(
            Rule("gate", 50, always, lambda c, raw, s, f: Pass("disabled")),
            Rule("real", 10, always, says("real")),
        )
        self.assertEqual(result.rule_id, "real")

    def test_pass_never_final(self):
        result = self.run_rules(
            Rule("gate_a", 50, always, lambda c, raw, s, f: Pass("a")),
            Rule("gate_b", 40, always, lambda c, raw, s, f: Pass("b")),
        )
        self.assertEqual(result.rule_id, "fallback.test")
        self.assertEqual(self.fallback.calls, 1)

    def test_effect_returning_none_is_no_match(self):
        result = self.run_rules(
            Rule("maybe", 50, always, lambda c, raw, s, f: None),
            Rule("real", 10, always, says("real")),
        )
        self.assertEqual(result.rule_id, "real")

    def test_non_matching_rules_skipped(self):
        result = self.run_rules(
            Rule("nope", 50, never, says("nope")),
            Rule("real", 10, always, says("real")),
        )
        self.assertEqual(result.rule_id, "real")

    def test_guard_skips_before_match(self):
        matched = []

        def recording_match(c, raw, s, f):
            matched.append(True)
            return True

        guarded = Rule("guarded", 50, recording_match, says("guarded"),
                       guard=lambda s, f: f.machine_repaired)
        result = self.run_rules(guarded, Rule("real", 10, always, says("real")))
        self.assertEqual(result.rule_id, "real")
        self.assertEqual(matched, [])

        self.flags.machine_repaired = True
        self.assertEqual(self.run_rules(guarded).rule_id, "guarded")

    def test_fallback_when_nothing_matches(self):
        self.assertEqual(self.run_rules(Rule("nope", 1, never, says("x"))).reply_text, "fallback text")

    def test_no_fallback_returns_none(self):
        result = dispatch(self.command, "x", self.session, self.flags, [], fallback=None)
        self.assertIsNone(result)

    def test_side_effects_persist(self):
        def mutating(c, raw, s, f):
            s.learn("touched")
            return Pass("keep going")

        self.run_rules(Rule("mutating", 50, always, mutating))
        self.assertIn("touched", self.session.knowledge)

    def test_reply_bumps_rule_counter(self):
        rule = Rule("counted", 10, always, says("x"))
        self.run_rules(rule)
        self.run_rules(rule)
        self.assertEqual(self.session.seen("rule.counted"), 2)

    def test_fallback_bumps_its_counter(self):
        self.run_rules()
        self.assertEqual(self.session.seen("rule.fallback.test"), 1)

    def test_pass_does_not_bump(self):
        self.run_rules(Rule("gate", 50, always, lambda c, raw, s, f: Pass("no")))
        self.assertEqual(self.session.seen("rule.gate"), 0)


class TestCompose(unittest.TestCase):
    def test_merges_and_sorts(self):
        g = [Rule("g1", 5, always, says("")), Rule("g2", 50, always, says(""))]
        s = [Rule("s1", 20, always, says("")), Rule("s2", 5, always, says(""))]
        self.assertEqual([r.id for r in compose(g, s)], ["g2", "s1", "g1", "s2"])

    def test_does_not_mutate_inputs(self):
        g = (Rule("g1", 1, always, says("")),)
        s = [Rule("s1", 2, always, says(""))]
        compose(g, s)
        self.assertEqual([r.id for r in s], ["s1"])


class TestDirector(unittest.TestCase):
    def test_scene_rules_swap_without_touching_globals(self):
        director = Director([Rule("global", 10, always, says("global"))], fallback=MockFallback())
        session, flags = SessionState(), SceneFlags()
        command = classify("anything")

        plain = director.execute(command, "anything", session, flags)
        self.assertEqual(plain.rule_id, "global")

        scene = [Rule("scene", 20, always, says("scene"))]
        self.assertEqual(director.execute(command, "anything", session, flags, scene_rules=scene).rule_id, "scene")
        self.assertEqual(director.execute(command, "anything", session, flags).rule_id, "global")

    def test_response_dict(self):
        self.assertEqual(Response("hi", "r").to_dict(), {"reply_text": "hi", "rule_id": "r"})


if __name__ == '__main__':
    unittest.main()
