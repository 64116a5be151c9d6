"""
Severity policy for the suite log.

Higher rank = more severe. Anything we don't recognise ranks as INFO so a
mistyped level is still recorded unless the threshold is above INFO.
"""

LEVEL_RANKS = {
    "DEBUG": 0,
    "INFO": 1,
    "WARNING": 2,
    "ERROR": 3,
}

DEFAULT_LEVEL = "INFO"
DEFAULT_RANK = LEVEL_RANKS[DEFAULT_LEVEL]


def normalize(level) -> str:
    if level is None:
        return DEFAULT_LEVEL
    s = str(level).strip().upper()
    return s or DEFAULT_LEVEL


def is_known(level) -> bool:
    return normalize(level) in LEVEL_RANKS


def rank(level) -> int:
    return LEVEL_RANKS.get(normalize(level), DEFAULT_RANK)


def should_persist(incoming_level, configured_minimum) -> bool:
    return rank(incoming_level) >= rank(configured_minimum)
