"""
Simulation tuning knobs.

Module constants are the defaults. The simulation itself only ever reads a
``Settings`` snapshot; change a knob by building a new snapshot with
``update_setting`` and handing it to the world.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from functools import cached_property
import math
import random
from typing import Tuple

# Arena
SCREEN_W, SCREEN_H = 1280, 720

# Population controls
START_BODIES = 75
MOTE_SPAWN_RATE = 4.0  # motes per second
MAX_MOTES = 75

# Ambient conditions
ENERGY = 3_500_000
TEMPERATURE = 30.0
BASE_TEMPERATURE = 30.0  # temperature at which upkeep/drain are unscaled

# Bodies
MIN_RADIUS = 10
INITIAL_ENERGY_ADJUSTMENT = 0.01
SPAWNING_ENERGY_ADJUSTMENT = 0.002

# Motes
MOTE_RADIUS = 6
MOTE_COLOR = "#779922"
MOTE_CALORIE_ADJUSTMENT = 20.0
MOTE_SPEED_ADJUSTMENT = 0.0003

# Genome
AVERAGE_GENE_COUNT = 48
AVERAGE_GENE_SIZE = 6
BITS_PER_MASS = 1
BITS_PER_SPIKE_LENGTH = 2
# (control byte, odds); odds sum to 1
GENE_ODDS: Tuple[Tuple[int, float], ...] = (
    (0xF0, 0.70),  # size
    (0xF1, 0.06),  # spike
    (0xF2, 0.08),  # red
    (0xF3, 0.08),  # green
    (0xF4, 0.08),  # blue
)

# Mutation
VOLATILITY = 1.0
CHANCE_MUTATE_BIT = 0.0005
CHANCE_DROP_BYTE = 0.001
CHANCE_REPEAT_BYTE = 0.001
CHANCE_TRANSPOSE_BYTE = 0.0005
CHANCE_DROP_GENE = 0.005
CHANCE_REPEAT_GENE = 0.005
CHANCE_TRANSPOSE_GENE = 0.005

# Vitals
PERCENT_DIES_AT = 0.5
PERCENT_SPAWNS_AT = 2.0
UPKEEP_PER_MASS = 0.4
UPKEEP_PER_SPIKE = 8.0
SPIKE_COUNT_EXPONENT = 1.5
MASS_CALORIE_EXPONENT = 0.5

# Spikes
SPIKE_WIDTH = 6
SPIKE_DRAIN = 8000.0
DRAIN_LENGTH_QUOTIENT = 0.5
SPIKE_COOLDOWN_MS = 100.0

# Physics
SEPARATION_PASSES = 8

# Tank area the spawning energy budget is tuned for (1920x1080)
REFERENCE_TANK_AREA = 2073600

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(n: int) -> str:
    if n == 0:
        return "0"
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def new_seed() -> str:
    """Random base-36 seed string for a fresh simulation."""
    return to_base36(random.getrandbits(40))


@dataclass(frozen=True)
class Settings:
    """
    Immutable configuration snapshot.

    Derived values are cached properties, so every snapshot carries its own
    consistent set and nothing global has to be recomputed on change.
    """
    seed: str = "meeba"

    width: int = SCREEN_W
    height: int = SCREEN_H
    start_bodies: int = START_BODIES
    mote_spawn_rate: float = MOTE_SPAWN_RATE
    max_motes: int = MAX_MOTES

    energy: float = ENERGY
    temperature: float = TEMPERATURE
    base_temperature: float = BASE_TEMPERATURE

    min_radius: int = MIN_RADIUS
    initial_energy_adjustment: float = INITIAL_ENERGY_ADJUSTMENT
    spawning_energy_adjustment: float = SPAWNING_ENERGY_ADJUSTMENT

    mote_radius: int = MOTE_RADIUS
    mote_color: str = MOTE_COLOR
    mote_calorie_adjustment: float = MOTE_CALORIE_ADJUSTMENT
    mote_speed_adjustment: float = MOTE_SPEED_ADJUSTMENT

    average_gene_count: int = AVERAGE_GENE_COUNT
    average_gene_size: int = AVERAGE_GENE_SIZE
    bits_per_mass: int = BITS_PER_MASS
    bits_per_spike_length: int = BITS_PER_SPIKE_LENGTH
    gene_odds: Tuple[Tuple[int, float], ...] = GENE_ODDS

    volatility: float = VOLATILITY
    chance_mutate_bit: float = CHANCE_MUTATE_BIT
    chance_drop_byte: float = CHANCE_DROP_BYTE
    chance_repeat_byte: float = CHANCE_REPEAT_BYTE
    chance_transpose_byte: float = CHANCE_TRANSPOSE_BYTE
    chance_drop_gene: float = CHANCE_DROP_GENE
    chance_repeat_gene: float = CHANCE_REPEAT_GENE
    chance_transpose_gene: float = CHANCE_TRANSPOSE_GENE

    percent_dies_at: float = PERCENT_DIES_AT
    percent_spawns_at: float = PERCENT_SPAWNS_AT
    upkeep_per_mass: float = UPKEEP_PER_MASS
    upkeep_per_spike: float = UPKEEP_PER_SPIKE
    spike_count_exponent: float = SPIKE_COUNT_EXPONENT
    mass_calorie_exponent: float = MASS_CALORIE_EXPONENT

    spike_width: int = SPIKE_WIDTH
    spike_drain: float = SPIKE_DRAIN
    drain_length_quotient: float = DRAIN_LENGTH_QUOTIENT
    spike_cooldown: float = SPIKE_COOLDOWN_MS

    separation_passes: int = SEPARATION_PASSES

    # --- derived ---

    @cached_property
    def min_mass(self) -> int:
        return math.ceil(math.pi * self.min_radius * self.min_radius)

    @cached_property
    def max_energy(self) -> int:
        return math.ceil(2 * self.energy * self.initial_energy_adjustment)

    @cached_property
    def mote_mass(self) -> int:
        return math.ceil(math.pi * self.mote_radius * self.mote_radius)

    @cached_property
    def mote_starting_calories(self) -> int:
        return math.ceil(self.mote_mass * self.mote_calorie_adjustment)

    @cached_property
    def mote_max_speed(self) -> int:
        return math.ceil(2 * self.energy / self.mote_mass * self.mote_speed_adjustment)

    @cached_property
    def mote_border_right(self) -> int:
        return self.width - self.mote_radius

    @cached_property
    def mote_border_bottom(self) -> int:
        return self.height - self.mote_radius

    @cached_property
    def max_spawning_energy(self) -> int:
        tank_size_adjustment = self.width * self.height / REFERENCE_TANK_AREA
        return math.ceil(2 * self.energy * self.spawning_energy_adjustment * tank_size_adjustment)

    @cached_property
    def max_gene_count(self) -> int:
        return 2 * self.average_gene_count

    @cached_property
    def max_gene_size(self) -> int:
        return 2 * self.average_gene_size

    @cached_property
    def temperature_adjustment(self) -> float:
        if self.base_temperature <= 0:
            return 0.0
        return max(0.0, self.temperature / self.base_temperature)

    @cached_property
    def control_thresholds(self) -> Tuple[Tuple[float, int], ...]:
        """Cumulative (threshold, control byte) table built from ``gene_odds``."""
        table = []
        total = 0.0
        for control_byte, odds in self.gene_odds:
            total += odds
            table.append((total, control_byte))
        return tuple(table)

    def scaled_chance(self, chance: float) -> float:
        return max(0.0, min(1.0, chance * self.volatility))


SETTING_NAMES = frozenset(f.name for f in fields(Settings))


def update_setting(settings: Settings, name: str, value) -> Settings:
    """Return a new snapshot with one knob changed."""
    if name not in SETTING_NAMES:
        raise KeyError(f"Unknown setting: {name}")
    return replace(settings, **{name: value})
