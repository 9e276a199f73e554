"""
meeba module: evolution/mutate.py

Genome replication. A descendant is produced by an ordered pipeline of
stochastic operators, first over single bytes and then over whole genes:

  bytes: flip bits -> drop -> repeat -> transpose
  genes: segment -> drop -> repeat -> transpose -> join

Every stage consumes the previous stage's output, so the order is part of
the result. All chances are scaled by the ``volatility`` setting.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple, TypeVar

from config import Settings
from meeba.genome import is_control
from meeba.prng import Prng

T = TypeVar("T")

# a certain repeat would never stop rolling
MAX_REPEAT_CHANCE = 0.99


def mutate_bits(byte: int, chance: float, prng: Prng) -> int:
    """Flip each of the 8 bits independently with probability ``chance``."""
    mask = 0
    for bit in range(8):
        if prng.rand() < chance:
            mask |= 1 << bit
    return byte ^ mask


def drop_items(items: Sequence[T], chance: float, prng: Prng) -> List[T]:
    return [item for item in items if prng.rand() >= chance]


def repeat_items(items: Sequence[T], chance: float, prng: Prng) -> List[T]:
    """Each item may be duplicated in place, and each copy may roll again."""
    chance = min(chance, MAX_REPEAT_CHANCE)
    repeated: List[T] = []
    for item in items:
        repeated.append(item)
        while prng.rand() < chance:
            repeated.append(item)
    return repeated


def transpose_items(items: Sequence[T], chance: float, prng: Prng) -> List[T]:
    """Pull out items with probability ``chance`` and reinsert each at a random index."""
    staying: List[T] = []
    moving: List[T] = []
    for item in items:
        if prng.rand() < chance:
            moving.append(item)
        else:
            staying.append(item)

    for item in moving:
        staying.insert(prng.rand_int(0, len(staying) + 1), item)
    return staying


def segment_genes(data: Sequence[int]) -> Tuple[List[int], List[List[int]]]:
    """Split into (prefix with no control byte, genes each led by a control byte)."""
    prefix: List[int] = []
    genes: List[List[int]] = []
    for byte in data:
        if is_control(byte):
            genes.append([byte])
        elif genes:
            genes[-1].append(byte)
        else:
            prefix.append(byte)
    return prefix, genes


def replicate_genome(genome: bytes, settings: Settings, prng: Prng) -> bytes:
    """Return a mutated descendant of ``genome``. The parent is untouched."""
    chance = settings.scaled_chance

    data = [mutate_bits(byte, chance(settings.chance_mutate_bit), prng) for byte in genome]
    data = drop_items(data, chance(settings.chance_drop_byte), prng)
    data = repeat_items(data, chance(settings.chance_repeat_byte), prng)
    data = transpose_items(data, chance(settings.chance_transpose_byte), prng)

    prefix, genes = segment_genes(data)
    genes = drop_items(genes, chance(settings.chance_drop_gene), prng)
    genes = repeat_items(genes, chance(settings.chance_repeat_gene), prng)
    genes = transpose_items(genes, chance(settings.chance_transpose_gene), prng)

    replicated = list(prefix)
    for gene in genes:
        replicated.extend(gene)
    return bytes(replicated)
