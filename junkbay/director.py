import logging
from dataclasses import dataclass

from junkbay.rules import Reply, Pass, compose

logger = logging.getLogger(__name__)

RULE_PREFIX = "rule."


@dataclass(frozen=True)
class Response:
    reply_text: str
    rule_id: str

    def to_dict(self):
        return {"reply_text": self.reply_text, "rule_id": self.rule_id}


def rule_key(rule_id):
    return f"{RULE_PREFIX}{rule_id}"


def dispatch(command, raw_text, session, flags, rules, fallback=None):
    """
    First full match wins.

    Rules are expected in priority order (see compose). A Pass keeps the
    scan going; if nothing replies the fallback answers. Effects have
    already mutated state by the time we return and stay that way.
    """
    passed = []
    for rule in rules:
        if rule.guard is not None and not rule.guard(session, flags):
            continue
        if not rule.match(command, raw_text, session, flags):
            continue

        outcome = rule.effect(command, raw_text, session, flags)
        if isinstance(outcome, Reply):
            session.bump(rule_key(rule.id))
            logger.debug("%r -> %s (passed: %s)", raw_text, rule.id, passed)
            return Response(outcome.text, rule.id)
        if isinstance(outcome, Pass):
            passed.append(rule.id)

    if fallback is None:
        logger.debug("%r -> no rule (passed: %s)", raw_text, passed)
        return None

    response = fallback(command, raw_text, session, flags)
    session.bump(rule_key(response.rule_id))
    logger.debug("%r -> %s (passed: %s)", raw_text, response.rule_id, passed)
    return response


class Director:
    def __init__(self, global_rules, fallback=None):
        """
        The Director is the RULE ROUTER.
        It does not classify and it does not write text. It merges the
        global rules with the active scene's rules and runs the dispatch.
        """
        self.global_rules = tuple(global_rules)
        self.fallback = fallback

    def rules_for(self, scene_rules):
        return compose(self.global_rules, scene_rules)

    def execute(self, command, raw_text, session, flags, scene_rules=(), fallback=None):
        rules = self.rules_for(scene_rules)
        return dispatch(command, raw_text, session, flags, rules,
                        fallback=fallback or self.fallback)
