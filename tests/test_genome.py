import pytest

import config
from meeba.genome import (
    GeneType,
    count_bits,
    create_genome,
    from_hex,
    is_control,
    pick_control_byte,
    read_genome,
    to_genes,
    to_hex,
)
from meeba.prng import Prng

SAMPLE = bytes([0x01, 0xF0, 0x0F, 0x03, 0xF1, 0x7F, 0xF5, 0x01])


def test_count_bits():
    assert count_bits(b"") == 0
    assert count_bits(bytes([0xFF, 0x01, 0x00])) == 9


def test_to_genes_splits_on_control_bytes():
    genes = to_genes(SAMPLE)

    assert [g.type for g in genes] == [0xF0, 0xF1, 0xF5]
    assert [g.location for g in genes] == [1 / 8, 4 / 8, 6 / 8]
    assert [g.body for g in genes] == [bytes([0x0F, 0x03]), bytes([0x7F]), bytes([0x01])]


def test_leading_bytes_belong_to_no_gene():
    genes = to_genes(bytes([0x12, 0x34, 0xF0]))
    assert len(genes) == 1
    assert genes[0].body == b""


def test_read_genome(settings):
    commands = read_genome(SAMPLE, settings)

    assert commands.size == 6
    assert len(commands.spikes) == 1
    assert commands.spikes[0].angle == 0.5
    assert commands.spikes[0].length == 3
    assert commands.hue == 0


def test_size_sums_census_before_flooring(settings):
    settings = config.update_setting(settings, "bits_per_mass", 2)
    genome = bytes([0xF0, 0x01, 0xF0, 0x01, 0xF0, 0x01])
    assert read_genome(genome, settings).size == 1


@pytest.mark.parametrize("genome", [b"", bytes([0x00, 0x12, 0xEF])])
def test_genome_without_genes_reads_as_nothing(settings, genome):
    commands = read_genome(genome, settings)
    assert commands.size == 0
    assert commands.spikes == ()
    assert commands.hue == 0


def test_hue_from_color_genes(settings):
    red = read_genome(bytes([GeneType.RED, 0xFF]), settings)
    green = read_genome(bytes([GeneType.GREEN, 0xFF]), settings)
    blue = read_genome(bytes([GeneType.BLUE, 0xFF]), settings)

    assert red.hue == pytest.approx(0.0)
    assert green.hue == pytest.approx(1 / 3)
    assert blue.hue == pytest.approx(2 / 3)


def test_inert_genes_have_no_effect(settings):
    assert read_genome(bytes([0xFA, 0xFF, 0x7F]), settings).size == 0


@pytest.mark.parametrize("data", [
    b"",
    b"\x00",
    bytes(range(256)),
    bytes([0xF0, 0x00, 0xFF]),
])
def test_hex_round_trip(data):
    assert from_hex(to_hex(data)) == data


def test_to_hex_is_lowercase_pairs():
    assert to_hex(bytes([0xF0, 0x0A])) == "f00a"


def test_from_hex_rejects_garbage():
    with pytest.raises(ValueError):
        from_hex("not hex")


def test_pick_control_byte():
    table = ((0.5, 0xF0), (1.0, 0xF1))
    assert pick_control_byte(0.0, table) == 0xF0
    assert pick_control_byte(0.49, table) == 0xF0
    assert pick_control_byte(0.5, table) == 0xF1
    assert pick_control_byte(0.999, table) == 0xF1


def test_pick_control_byte_falls_back_to_last():
    table = ((0.3, 0xF0), (0.9999999, 0xF1))
    assert pick_control_byte(0.99999999, table) == 0xF1


def test_create_genome_shape(settings):
    prng = Prng("genes")
    for _ in range(20):
        genome = create_genome(settings, prng)
        assert is_control(genome[0])
        assert genome[0] in {byte for byte, _ in settings.gene_odds}
        genes = to_genes(genome)
        assert 1 <= len(genes)
        # random body bytes may themselves be control bytes, splitting genes
        assert len(genome) <= settings.max_gene_count * (settings.max_gene_size + 1)


def test_create_genome_is_deterministic(settings):
    assert create_genome(settings, Prng("same")) == create_genome(settings, Prng("same"))


def test_create_genome_respects_odds(settings):
    settings = config.update_setting(settings, "gene_odds", ((0xF1, 1.0),))
    genome = create_genome(settings, Prng("spiky"))
    assert genome[0] == 0xF1
