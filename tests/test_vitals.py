from types import SimpleNamespace

import pytest

import config
from meeba.vitals import Vitals, drain_calories, get_upkeep, init_vitals, set_calories


def spikes(*lengths):
    return [SimpleNamespace(length=length) for length in lengths]


def test_init_vitals_thresholds(settings):
    vitals = init_vitals(1000, [], settings)
    assert vitals.dies_at == 500
    assert vitals.spawns_at == 2000
    assert vitals.calories == 1250
    assert not vitals.is_dead
    assert not vitals.is_spawn_ready


def test_thresholds_are_floored(settings):
    vitals = init_vitals(315, [], settings)
    assert vitals.dies_at == 157
    assert vitals.spawns_at == 630
    assert vitals.calories == 393


def test_upkeep_without_spikes(settings):
    # 1000 * 0.4 / sqrt(1000)
    assert get_upkeep(1000, [], settings) == 12


def test_upkeep_with_spikes(settings):
    # (400 + (2 * 8) ** 1.5 + 4 + 4) / sqrt(1000)
    assert get_upkeep(1000, spikes(4, 4), settings) == 14


def test_bigger_bodies_pay_less_per_mass(settings):
    small = get_upkeep(400, [], settings) / 400
    big = get_upkeep(4000, [], settings) / 4000
    assert big < small


def test_upkeep_scales_with_temperature(settings):
    hot = config.update_setting(settings, "temperature", 60)
    cold = config.update_setting(settings, "temperature", -10)
    assert get_upkeep(1000, [], hot) == 25
    assert get_upkeep(1000, [], cold) == 0


def test_drain_returns_actual_amount():
    vitals = Vitals(calories=100, upkeep=0, dies_at=50, spawns_at=200)
    assert drain_calories(vitals, 30) == 30
    assert vitals.calories == 70
    assert not vitals.is_dead

    assert drain_calories(vitals, 500) == 70
    assert vitals.calories == 0
    assert vitals.is_dead


def test_drain_never_goes_negative():
    vitals = Vitals(calories=5, upkeep=0, dies_at=0, spawns_at=10)
    drain_calories(vitals, 1e9)
    assert vitals.calories == 0
    assert drain_calories(vitals, 10) == 0


@pytest.mark.parametrize("amount, dead", [(49, False), (50, False), (51, True)])
def test_is_dead_tracks_calories(amount, dead):
    vitals = Vitals(calories=100, upkeep=0, dies_at=50, spawns_at=200)
    drain_calories(vitals, amount)
    assert vitals.is_dead is dead
    assert vitals.is_dead == (vitals.calories < vitals.dies_at)


def test_negative_drain_is_ignored():
    vitals = Vitals(calories=10, upkeep=0, dies_at=0, spawns_at=100)
    assert drain_calories(vitals, -5) == 0
    assert vitals.calories == 10


def test_set_calories_recomputes_state():
    vitals = Vitals(calories=100, upkeep=0, dies_at=50, spawns_at=200)
    set_calories(vitals, 250)
    assert vitals.is_spawn_ready
    set_calories(vitals, -3)
    assert vitals.calories == 0
    assert vitals.is_dead
