"""Room selection from the template catalogue."""
import random
from typing import Optional

from ..models.level import Level
from ..models.templates import TEMPLATES, TEMPLATE_SIZE, Template


def rotate_template(template: Template) -> Template:
    """Rotate a template by 90 degrees: transpose, then reverse every row."""
    transposed = [
        [template[col][row] for col in range(TEMPLATE_SIZE)]
        for row in range(TEMPLATE_SIZE)
    ]
    return tuple(tuple(reversed(row)) for row in transposed)


def pick_random_room(rng: Optional[random.Random] = None) -> Level:
    """
    Return a random template, rotated 0 to 3 times, as a room.

    Args:
        rng: Random number generator. A fresh one is used when omitted.

    Returns:
        5x5 grid of the rotated template.
    """
    if rng is None:
        rng = random.Random()

    template = TEMPLATES[rng.randrange(len(TEMPLATES))]
    rotation = rng.randrange(4)

    for _ in range(rotation):
        template = rotate_template(template)

    return [list(row) for row in template]
