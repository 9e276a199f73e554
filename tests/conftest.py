import itertools

import pytest

import config
from meeba.factory import init_body
from meeba.prng import Prng


@pytest.fixture
def settings():
    return config.Settings(seed="testseed", width=100, height=100, start_bodies=0, mote_spawn_rate=0)


@pytest.fixture
def prng():
    return Prng("testseed")


@pytest.fixture
def ids():
    return itertools.count(1)


@pytest.fixture
def make_body(settings, ids):
    """Spikeless radius-10 body (genome ``f0``) placed and moving as asked."""

    def _make(x, y, angle=0.0, speed=0.0, genome=b"\xf0", mass=None):
        body = init_body(genome, settings, next(ids))
        if mass is not None:
            body.mass = mass
        body.velocity.angle = angle
        body.velocity.speed = speed
        body.move_to(x, y)
        return body

    return _make
