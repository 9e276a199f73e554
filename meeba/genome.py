"""
meeba module: meeba/genome.py

Byte-string genomes.

Layout:
- any byte >= 0xF0 is a control byte and starts a gene
- the bytes after it, up to the next control byte, are the gene's body
- bytes before the first control byte belong to no gene

Traits come from a "bit census": the number of set bits across the bodies
of every gene of a given type.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple

from config import Settings
from meeba.prng import Prng
from render.colors import rgb_to_hue

CONTROL_FLOOR = 0xF0


class GeneType(IntEnum):
    """Control bytes with a meaning. Other control bytes start inert genes."""
    SIZE = 0xF0
    SPIKE = 0xF1
    RED = 0xF2
    GREEN = 0xF3
    BLUE = 0xF4


@dataclass(frozen=True)
class Gene:
    type: int
    location: float  # position of the control byte, 0 (start) to 1 (end)
    body: bytes


@dataclass(frozen=True)
class SpikeCommand:
    angle: float  # turns
    length: int


@dataclass(frozen=True)
class Commands:
    """Instructions for building a body, read fresh from a genome."""
    size: int
    spikes: Tuple[SpikeCommand, ...]
    hue: float


def is_control(byte: int) -> bool:
    return byte >= CONTROL_FLOOR


def to_hex(genome: bytes) -> str:
    return genome.hex()


def from_hex(text: str) -> bytes:
    return bytes.fromhex(text)


def count_bits(data: bytes) -> int:
    return sum(bin(byte).count("1") for byte in data)


def to_genes(genome: bytes) -> List[Gene]:
    starts = [i for i, byte in enumerate(genome) if is_control(byte)]
    genes: List[Gene] = []
    for n, start in enumerate(starts):
        end = starts[n + 1] if n + 1 < len(starts) else len(genome)
        genes.append(Gene(
            type=genome[start],
            location=start / len(genome),
            body=bytes(genome[start + 1:end]),
        ))
    return genes


def pick_control_byte(roll: float, thresholds: Tuple[Tuple[float, int], ...]) -> int:
    """First control byte whose cumulative threshold exceeds ``roll``."""
    if not thresholds:
        return CONTROL_FLOOR
    for threshold, control_byte in thresholds:
        if roll < threshold:
            return control_byte
    # float rounding can leave the last threshold a hair under 1
    return thresholds[-1][1]


def _rand_gene(settings: Settings, prng: Prng) -> List[int]:
    control_byte = pick_control_byte(prng.rand(), settings.control_thresholds)
    size = prng.rand_int(1, settings.max_gene_size + 1)
    return [control_byte] + [prng.rand_int(0, 256) for _ in range(size)]


def create_genome(settings: Settings, prng: Prng) -> bytes:
    """A brand new random genome."""
    count = prng.rand_int(1, settings.max_gene_count + 1)
    data: List[int] = []
    for _ in range(count):
        data.extend(_rand_gene(settings, prng))
    return bytes(data)


def bit_census(genes: List[Gene]) -> Dict[int, int]:
    census: Dict[int, int] = {gene_type: 0 for gene_type in GeneType}
    for gene in genes:
        if gene.type in census:
            census[gene.type] += count_bits(gene.body)
    return census


def read_genome(genome: bytes, settings: Settings) -> Commands:
    """
    Interpret a genome. A genome without control bytes reads as size 0,
    no spikes and hue 0.
    """
    genes = to_genes(genome)
    census = bit_census(genes)

    size = census[GeneType.SIZE] // max(1, settings.bits_per_mass)
    spikes = tuple(
        SpikeCommand(
            angle=gene.location,
            length=count_bits(gene.body) // max(1, settings.bits_per_spike_length),
        )
        for gene in genes
        if gene.type == GeneType.SPIKE
    )
    hue = rgb_to_hue(census[GeneType.RED], census[GeneType.GREEN], census[GeneType.BLUE])

    return Commands(size=size, spikes=spikes, hue=hue)
