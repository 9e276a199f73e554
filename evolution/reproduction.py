"""
meeba module: evolution/reproduction.py

Live reproduction. The physics pass only flags bodies that have banked
enough calories; this is where flagged parents actually split.
"""

from __future__ import annotations
from typing import Iterator, List

from config import Settings
from meeba.body import Body
from meeba.factory import replicate_parent
from meeba.prng import Prng
from meeba.vitals import set_calories


def spawn_child(parent: Body, settings: Settings, prng: Prng, ids: Iterator[int]) -> Body:
    """
    Replicate ``parent`` at a random launch angle. The parent keeps what
    the child did not take, which drops it back under its spawn threshold.
    """
    child = replicate_parent(parent, prng.rand(), settings, prng, ids)
    set_calories(parent.vitals, parent.vitals.calories - child.vitals.calories)
    parent.meta.spawn_ready = False
    return child


def reproduce(bodies: List[Body], settings: Settings, prng: Prng, ids: Iterator[int]) -> List[Body]:
    """Returns the children of every spawn-ready body."""
    return [
        spawn_child(parent, settings, prng, ids)
        for parent in bodies
        if parent.meta.spawn_ready
    ]
