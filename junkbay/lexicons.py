"""Static word tables for the command classifier.

Every table maps a surface word (already lowercased) to a canonical token.
Scene manifests extend NOUNS, VERBS and ADJECTIVES; the rest are global.
"""

PRONOUNS = {
    "it": "it",
    "this": "this",
    "that": "that",
    "these": "this",
    "those": "that",
    "him": "him",
    "her": "her",
    "there": "there",
    "here": "here",
}

PERSONS = {
    "roger": "roger",
    "wilco": "roger",
    "rogerwilco": "roger",
    "roger-wilco": "roger",
    "roger_wilco": "roger",
}

INTENTS = {
    # Social
    "hi": "greet", "hello": "greet", "hey": "greet", "yo": "greet",
    "sup": "greet", "greetings": "greet", "hiya": "greet", "howdy": "greet",
    "thanks": "thanks", "thank": "thanks", "thankyou": "thanks", "thx": "thanks",

    # Meta
    "help": "help", "hint": "help", "clue": "help",
    "inventory": "inventory", "inv": "inventory", "items": "inventory",
    "bag": "inventory", "pockets": "inventory",
    "status": "status", "state": "status", "debug": "status",
    "score": "score", "points": "score",
    "qa": "qa",

    # Questions
    "what": "ask", "why": "ask", "who": "ask", "where": "ask", "when": "ask",
    "how": "ask", "tell": "ask", "explain": "ask", "describe": "ask",

    # Feelings
    "feel": "feel", "scared": "feel", "afraid": "feel", "calm": "feel",
    "tired": "feel", "hungry": "feel", "thirsty": "feel",
}

VERBS = {
    # look
    "look": "look", "examine": "look", "inspect": "look", "view": "look",
    "see": "look", "watch": "look", "peer": "look", "stare": "look",
    "glance": "look", "observe": "look", "check": "look", "study": "look",
    # smell
    "smell": "smell", "sniff": "smell", "inhale": "smell", "breathe": "smell",
    # listen
    "listen": "listen", "hear": "listen",
    # touch ("feel" is claimed by INTENTS first)
    "touch": "touch", "rub": "touch", "poke": "touch", "stroke": "touch",
    # taste
    "taste": "taste", "lick": "taste",
    # close
    "close": "close", "shut": "close", "seal": "close",
    # open
    "open": "open", "pry": "open", "force": "open", "unseal": "open",
    "unlock": "open", "unbolt": "open", "jimmy": "open",
    # take
    "take": "take", "get": "take", "grab": "take", "pick": "take",
    "pocket": "take", "steal": "take", "acquire": "take", "obtain": "take",
    # use
    "use": "use", "wear": "use", "apply": "use", "insert": "use",
    "plug": "use", "attach": "use", "fit": "use", "connect": "use",
    "place": "use", "put": "use",
    # move
    "push": "move", "pull": "move", "drag": "move", "shove": "move",
    "manipulate": "move", "turn": "move", "twist": "move", "rotate": "move",
    "roll": "move", "lift": "move", "hoist": "move", "budge": "move",
    "move": "move", "unplug": "move", "disconnect": "move",
    # start (power control, both directions)
    "start": "start", "run": "start", "ignite": "start", "activate": "start",
    "enable": "start", "power": "start", "switch": "start", "toggle": "start",
    "turnon": "start", "turnoff": "start", "deactivate": "start",
    # break
    "break": "break", "smash": "break", "crack": "break",
    "shatter": "break", "destroy": "break",
    # climb
    "climb": "climb", "scale": "climb", "ascend": "climb", "mount": "climb",
    # enter
    "enter": "enter", "board": "enter", "getin": "enter", "goin": "enter",
    # talk
    "talk": "talk", "ask": "talk", "speak": "talk", "say": "talk",
    "shout": "talk", "call": "talk", "yell": "talk",
    # search
    "search": "search", "rummage": "search", "sift": "search",
    "dig": "search", "explore": "search",
    # scan
    "scan": "scan", "analyze": "scan",
    # read
    "read": "read", "translate": "read", "decode": "read",
    # press
    "press": "press", "tap": "press", "hit": "press",
    # clean
    "clean": "clean", "scrub": "clean", "wipe": "clean", "sweep": "clean",
    # approach
    "approach": "approach", "walk": "approach", "go": "approach", "head": "approach",
    # throw
    "throw": "throw", "toss": "throw", "hurl": "throw", "chuck": "throw",
    # kick
    "kick": "kick",
    # jump
    "jump": "jump", "hop": "jump", "leap": "jump",
    # wait
    "wait": "wait", "rest": "wait", "pause": "wait",
}

PREPOSITIONS = {
    "in": "in", "into": "in", "inside": "in",
    "through": "through", "thru": "through",
    "around": "around",
    "at": "at",
    "on": "on", "onto": "on", "upon": "on",
    "below": "under", "under": "under", "underneath": "under", "beneath": "under",
    "down": "down",
    "above": "above", "over": "above",
    "with": "with", "without": "without",
    "to": "to", "toward": "to", "towards": "to",
    "from": "from",
    "near": "near", "beside": "near", "by": "near",
    "behind": "behind",
    "between": "between",
}

NOUNS = {
    # Environment
    "area": "area", "room": "area", "bay": "area", "space": "area", "scene": "area",
    "air": "air", "atmosphere": "air",
    "wall": "walls", "walls": "walls",
    "ceiling": "ceiling", "roof": "ceiling",
    "lights": "lights", "light": "lights", "lighting": "lights",
    "lamp": "lights", "grid": "lights",
    "shadows": "shadows", "shadow": "shadows",
    "deck": "deck", "floor": "deck", "ground": "deck",
    "slime": "slime", "goo": "slime", "gunk": "slime", "ooze": "slime", "puddle": "slime",
    "rust": "rust", "corrosion": "rust",
    "debris": "debris", "scrap": "debris", "chunks": "debris",
    "fragments": "debris", "shards": "debris",
    "rubble": "rubble", "rocks": "rubble", "stones": "rubble",
    "dirt": "rubble", "dust": "rubble", "grit": "rubble",
    "pipes": "pipes", "pipe": "pipes",
    "vents": "vents", "vent": "vents",
    "cables": "cables", "cable": "cables", "wires": "cables", "wire": "cables",
    "wiring": "cables", "conduit": "cables", "conduits": "cables",
    # Sensory
    "hum": "hum", "humming": "hum", "buzz": "hum", "buzzing": "hum", "vibration": "hum",
    "sound": "sound", "sounds": "sound", "noise": "sound",
    "odor": "odor", "scent": "odor", "stink": "odor",
    "ozone": "ozone",
    # The player
    "self": "self", "myself": "self", "yourself": "self",
    # Pod fixtures
    "door": "door", "hatch": "door",
    "window": "window", "pane": "window", "glass": "window", "porthole": "window",
    "pod": "pod",
    "cryo": "cryo", "cryopod": "cryo", "cryogenic": "cryo", "chamber": "cryo",
    "controls": "controls", "buttons": "controls", "lever": "controls",
    "motivator": "motivator", "artifact": "motivator", "warp": "motivator",
    "connector": "socket", "socket": "socket", "prongs": "socket",
}

ADJECTIVES = {
    "sealed": "sealed", "locked": "locked",
    "dark": "dark", "black": "dark",
    "cold": "cold", "warm": "warm", "wet": "wet", "sticky": "sticky",
    "bright": "bright", "dim": "dim",
    "broken": "broken", "dead": "dead", "alive": "alive",
    "flicker": "flicker", "flickering": "flicker", "flickers": "flicker",
    "blue": "blue", "red": "red", "green": "green", "orange": "orange",
    "silver": "silver", "gold": "gold", "golden": "gold",
    "metallic": "metallic", "metal": "metallic",
    "industrial": "industrial", "abandoned": "abandoned", "futuristic": "futuristic",
    "small": "small", "large": "large", "big": "large",
}

# Two-word surface forms folded into one word before lookup.
COMPOUNDS = {
    ("roger", "wilco"): "roger",
    ("turn", "on"): "turnon",
    ("switch", "on"): "turnon",
    ("power", "on"): "turnon",
    ("power", "up"): "turnon",
    ("turn", "off"): "turnoff",
    ("switch", "off"): "turnoff",
    ("power", "off"): "turnoff",
    ("power", "down"): "turnoff",
    ("shut", "down"): "turnoff",
    ("get", "in"): "getin",
    ("go", "in"): "goin",
    ("go", "through"): "goin",
    ("walk", "through"): "goin",
    ("escape", "pod"): "pod",
    ("junk", "bay"): "bay",
    ("scene", "2"): "scene",
}

# Single-word aliases applied after compounds.
WORD_ALIASES = {
    "wilco": "roger",
    "rogerwilco": "roger",
    "roger-wilco": "roger",
    "roger_wilco": "roger",
    "scene2": "scene",
    "escapepod": "pod",
    "escape-pod": "pod",
    "escape_pod": "pod",
    "warpmotivator": "motivator",
    "junkbay": "bay",
    "junk-bay": "bay",
    "junk_bay": "bay",
}

QUESTION_STARTERS = frozenset([
    "what", "why", "how", "where", "who", "when", "tell", "explain",
    "describe", "can", "should", "is", "are", "do", "does",
])

# Verb category -> intent it asserts.
VERB_INTENTS = {
    "look": "look", "smell": "smell", "listen": "listen", "touch": "touch",
    "taste": "taste", "close": "close", "open": "open", "take": "take",
    "use": "use", "move": "move", "start": "start", "break": "break",
    "climb": "climb", "enter": "enter", "talk": "talk", "search": "search",
    "scan": "scan", "read": "read", "press": "press", "clean": "clean",
    "approach": "approach", "throw": "throw", "kick": "kick", "jump": "jump",
    "wait": "wait",
}

# Persons that "him" may stand for.
MALE_PERSONS = frozenset(["roger"])


class Lexicon:
    """Global tables merged with one scene's noun, verb and adjective extensions.

    Lookup order is fixed: pronoun, person, intent, verb, preposition,
    noun, adjective. Scene entries override global entries of the same
    category.
    """

    def __init__(self, nouns=None, verbs=None, adjectives=None):
        self.pronouns = dict(PRONOUNS)
        self.persons = dict(PERSONS)
        self.intents = dict(INTENTS)
        self.verbs = {**VERBS, **(verbs or {})}
        self.prepositions = dict(PREPOSITIONS)
        self.nouns = {**NOUNS, **(nouns or {})}
        self.adjectives = {**ADJECTIVES, **(adjectives or {})}

    def categories(self):
        return (
            ("pronouns", self.pronouns),
            ("persons", self.persons),
            ("intents", self.intents),
            ("verbs", self.verbs),
            ("prepositions", self.prepositions),
            ("nouns", self.nouns),
            ("adjectives", self.adjectives),
        )

    def lookup(self, word):
        """Return (category, token) for the first table containing word.

        Unknown words degrade to an adjective literal of themselves.
        """
        for category, table in self.categories():
            token = table.get(word)
            if token:
                return category, token
        return "adjectives", word


BASE_LEXICON = Lexicon()
