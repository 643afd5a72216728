# agromart_ussd/domain/services/input_parser.py
"""Split the gateway's accumulated ``text`` into the dialogue path.

The gateway resends the whole call history on every request, joined by
``*``. The number of tokens is the dialogue level.
"""

from typing import List

DELIMITER = "*"


def parse(raw_text: str) -> List[str]:
    """Return the ordered tokens of ``raw_text``.

    An empty string yields ``[""]``; callers treat blank input as level 0
    before parsing.
    """
    return (raw_text or "").split(DELIMITER)


def level_of(raw_text: str) -> int:
    """Dialogue depth of ``raw_text``; blank input is level 0."""
    if not (raw_text or "").strip():
        return 0
    return len(parse(raw_text.strip()))
