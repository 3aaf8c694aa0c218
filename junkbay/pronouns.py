"""Pronoun resolution against the session's last focus."""

from junkbay.lexicons import MALE_PERSONS

OBJECT_PRONOUNS = frozenset(["it", "that", "this", "there", "here"])


def resolve(nouns, pronouns, last_focus):
    """Return the nouns implied by pronouns, or an empty set.

    Explicit nouns always win: when any noun was recognized nothing is
    resolved. "her" has no referent and resolves to nothing.
    """
    if nouns or not pronouns or not last_focus:
        return frozenset()

    resolved = set()
    for pronoun in pronouns:
        if pronoun in OBJECT_PRONOUNS:
            resolved.add(last_focus)
        elif pronoun == "him" and last_focus in MALE_PERSONS:
            resolved.add(last_focus)
    return frozenset(resolved)
