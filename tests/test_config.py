import pytest

import config


def test_derived_values():
    settings = config.Settings()
    assert settings.min_mass == 315
    assert settings.max_gene_count == 2 * config.AVERAGE_GENE_COUNT
    assert settings.max_gene_size == 2 * config.AVERAGE_GENE_SIZE
    assert settings.mote_border_right == settings.width - settings.mote_radius
    assert settings.temperature_adjustment == 1.0


def test_update_setting_returns_new_snapshot():
    settings = config.Settings()
    wider = config.update_setting(settings, "width", 2000)

    assert wider.width == 2000
    assert settings.width == config.SCREEN_W
    assert wider.mote_border_right == 2000 - wider.mote_radius


def test_update_unknown_setting():
    with pytest.raises(KeyError):
        config.update_setting(config.Settings(), "gravity", 9.8)


def test_settings_are_frozen():
    with pytest.raises(Exception):
        config.Settings().width = 5


def test_control_thresholds_are_cumulative():
    thresholds = config.Settings().control_thresholds
    values = [t for t, _ in thresholds]
    assert values == sorted(values)
    assert values[-1] == pytest.approx(1.0)
    assert [b for _, b in thresholds] == [b for b, _ in config.GENE_ODDS]


def test_temperature_adjustment_never_negative():
    assert config.Settings(temperature=-40).temperature_adjustment == 0
    assert config.Settings(temperature=45).temperature_adjustment == 1.5


def test_scaled_chance():
    settings = config.Settings(volatility=2)
    assert settings.scaled_chance(0.1) == 0.2
    assert settings.scaled_chance(0.8) == 1.0


def test_base36():
    assert config.to_base36(0) == "0"
    assert config.to_base36(35) == "z"
    assert config.to_base36(36) == "10"
    seed = config.new_seed()
    assert config.to_base36(int(seed, 36)) == seed
