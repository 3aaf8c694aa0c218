import re
import logging
from dataclasses import dataclass, field

from junkbay.lexicons import (
    BASE_LEXICON,
    COMPOUNDS,
    QUESTION_STARTERS,
    VERB_INTENTS,
    WORD_ALIASES,
)
from junkbay.pronouns import resolve

logger = logging.getLogger(__name__)

STRIP_PATTERN = re.compile(r"[^a-z0-9\-_\s?]")
EDGE_CHARS = "-_"


@dataclass(frozen=True)
class ClassifiedCommand:
    """One player input, sorted into canonical token sets."""

    words: tuple = ()
    verbs: frozenset = field(default_factory=frozenset)
    nouns: frozenset = field(default_factory=frozenset)
    adjectives: frozenset = field(default_factory=frozenset)
    prepositions: frozenset = field(default_factory=frozenset)
    intents: frozenset = field(default_factory=frozenset)
    persons: frozenset = field(default_factory=frozenset)
    pronouns: frozenset = field(default_factory=frozenset)
    targets: frozenset = field(default_factory=frozenset)
    all: frozenset = field(default_factory=frozenset)
    is_question: bool = False

    @property
    def is_empty(self):
        return not self.words


def normalize(raw_text):
    """Lowercase, strip punctuation and fold compounds. Returns a list of words."""
    text = STRIP_PATTERN.sub(" ", (raw_text or "").lower())
    words = []
    for chunk in text.replace("?", " ").split():
        word = chunk.strip(EDGE_CHARS)
        if word:
            words.append(word)

    folded = []
    i = 0
    while i < len(words):
        pair = tuple(words[i:i + 2])
        if len(pair) == 2 and pair in COMPOUNDS:
            folded.append(COMPOUNDS[pair])
            i += 2
            continue
        folded.append(WORD_ALIASES.get(words[i], words[i]))
        i += 1
    return folded


def is_questionish(raw_text, words):
    if "?" in (raw_text or ""):
        return True
    return bool(words) and words[0] in QUESTION_STARTERS


class Listener:
    """
    The Listener is the CLASSIFIER.
    It turns free text into a ClassifiedCommand. No randomness, no I/O:
    the same text and the same last focus always give the same command.
    """

    def __init__(self, lexicon=BASE_LEXICON):
        self.lexicon = lexicon

    def classify(self, raw_text, session=None):
        words = normalize(raw_text)
        question = is_questionish(raw_text, words)

        buckets = {name: set() for name, _ in self.lexicon.categories()}
        for word in words:
            category, token = self.lexicon.lookup(word)
            buckets[category].add(token)

        intents = buckets["intents"]
        for verb in buckets["verbs"]:
            if verb in VERB_INTENTS:
                intents.add(VERB_INTENTS[verb])
        if not intents and question:
            intents.add("ask")

        last_focus = session.last_focus if session is not None else None
        nouns = buckets["nouns"] | resolve(buckets["nouns"], buckets["pronouns"], last_focus)

        targets = nouns | buckets["persons"]
        everything = set(words) | nouns
        for tokens in buckets.values():
            everything |= tokens

        command = ClassifiedCommand(
            words=tuple(words),
            verbs=frozenset(buckets["verbs"]),
            nouns=frozenset(nouns),
            adjectives=frozenset(buckets["adjectives"]),
            prepositions=frozenset(buckets["prepositions"]),
            intents=frozenset(intents),
            persons=frozenset(buckets["persons"]),
            pronouns=frozenset(buckets["pronouns"]),
            targets=frozenset(targets),
            all=frozenset(everything),
            is_question=question,
        )
        logger.debug("classified %r -> intents=%s targets=%s",
                     raw_text, sorted(command.intents), sorted(command.targets))
        return command


def classify(raw_text, session=None, lexicon=BASE_LEXICON):
    return Listener(lexicon).classify(raw_text, session)
