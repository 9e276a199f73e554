"""
meeba module: meeba/vitals.py

Calorie bookkeeping. Vitals belong to exactly one body and are updated in
place; ``is_dead`` is always derived from the current calories.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Sequence, TYPE_CHECKING

from config import Settings

if TYPE_CHECKING:
    from meeba.spikes import Spike


@dataclass
class Vitals:
    calories: float
    upkeep: float     # calories burned per second
    dies_at: float
    spawns_at: float

    @property
    def is_dead(self) -> bool:
        return self.calories < self.dies_at

    @property
    def is_spawn_ready(self) -> bool:
        return self.calories >= self.spawns_at


def get_upkeep(mass: float, spikes: Sequence["Spike"], settings: Settings) -> int:
    """
    Upkeep grows with mass and spikes. Spike count is penalized
    exponentially, and the whole bill is discounted by mass so that
    bigger bodies are cheaper per unit of mass.
    """
    mass_cost = mass * settings.upkeep_per_mass
    spike_cost = (
        (len(spikes) * settings.upkeep_per_spike) ** settings.spike_count_exponent
        + sum(spike.length for spike in spikes)
    )
    mass_adjustment = mass ** -settings.mass_calorie_exponent if mass > 0 else 0.0
    return math.floor((mass_cost + spike_cost) * mass_adjustment * settings.temperature_adjustment)


def init_vitals(mass: float, spikes: Sequence["Spike"], settings: Settings) -> Vitals:
    midpoint = (settings.percent_dies_at + settings.percent_spawns_at) / 2
    return Vitals(
        calories=math.floor(mass * midpoint),
        upkeep=get_upkeep(mass, spikes, settings),
        dies_at=math.floor(mass * settings.percent_dies_at),
        spawns_at=math.floor(mass * settings.percent_spawns_at),
    )


def set_calories(vitals: Vitals, calories: float) -> None:
    vitals.calories = max(0, calories)


def add_calories(vitals: Vitals, calories: float) -> None:
    set_calories(vitals, vitals.calories + calories)


def drain_calories(vitals: Vitals, amount: float) -> float:
    """
    Remove up to ``amount`` calories, never going below zero.
    Returns the calories actually removed.
    """
    drained = min(max(0, amount), vitals.calories)
    vitals.calories -= drained
    return drained
