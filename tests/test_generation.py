"""Tests for commute_map.generation."""

import math
import random

import numpy as np
import pytest

from commute_map.core.errors import InvalidArgumentError
from commute_map.core.geometry import Coordinate
from commute_map.generation.random_points import PointGenerator, generate_houses


class ScriptedRandom:
    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


class TestGenerate:
    @pytest.mark.parametrize("count", [0, 1, 7, 100])
    def test_returns_exactly_count_points(self, office, seeded_generator, count):
        assert len(seeded_generator.generate(office, count)) == count

    def test_zero_count_is_empty(self, seeded_generator):
        assert seeded_generator.generate(Coordinate(-33.9, 151.2), 0) == ()

    def test_points_within_half_degree(self, office):
        houses = PointGenerator(rng=random.Random(0)).generate(office, 2000)
        for house in houses:
            assert office.lat - 0.5 <= house.lat <= office.lat + 0.5
            assert office.lng - 0.5 <= house.lng <= office.lng + 0.5

    def test_scripted_draws(self):
        # lat: sign draw 0.1 -> -2, magnitude 0.6; lng: sign draw 0.9 -> +2, magnitude 0.4
        generator = PointGenerator(rng=ScriptedRandom([0.1, 0.6, 0.9, 0.4]))
        (house,) = generator.generate(Coordinate(10.0, 20.0), 1)
        assert house.lat == pytest.approx(9.7)
        assert house.lng == pytest.approx(20.2)

    def test_axes_pick_signs_independently(self):
        generator = PointGenerator(rng=ScriptedRandom([0.9, 0.5, 0.1, 0.5]))
        (house,) = generator.generate(Coordinate(0.0, 0.0), 1)
        assert house.lat == pytest.approx(0.25)
        assert house.lng == pytest.approx(-0.25)

    def test_seeded_source_reproduces_sequence(self, office):
        first = PointGenerator(rng=random.Random(99)).generate(office, 20)
        second = PointGenerator(rng=random.Random(99)).generate(office, 20)
        assert first == second

    def test_matches_manual_draws(self, office):
        houses = PointGenerator(rng=random.Random(5)).generate(office, 3)

        rng = random.Random(5)
        expected = []
        for _ in range(3):
            lat_scale = -2 if rng.random() < 0.5 else 2
            lat = office.lat + rng.random() / lat_scale
            lng_scale = -2 if rng.random() < 0.5 else 2
            lng = office.lng + rng.random() / lng_scale
            expected.append(Coordinate(lat, lng))
        assert list(houses) == expected

    def test_numpy_generator_as_source(self, office):
        houses = PointGenerator(rng=np.random.default_rng(3)).generate(office, 10)
        assert len(houses) == 10
        assert all(isinstance(h.lat, float) for h in houses)

    def test_each_call_returns_new_sequence(self, office, seeded_generator):
        a = seeded_generator.generate(office, 5)
        b = seeded_generator.generate(office, 5)
        assert a is not b
        assert a != b

    def test_numpy_integer_count(self, office, seeded_generator):
        houses = seeded_generator.generate(office, np.int64(3))
        assert len(houses) == 3

    def test_generate_houses_default_count(self, office):
        assert len(generate_houses(office, rng=random.Random(1))) == 100


class TestGenerateValidation:
    @pytest.mark.parametrize("count", [-1, 2.5, "3", True, None])
    def test_bad_count(self, office, seeded_generator, count):
        with pytest.raises(InvalidArgumentError):
            seeded_generator.generate(office, count)

    def test_bad_count_is_value_error(self, office, seeded_generator):
        with pytest.raises(ValueError):
            seeded_generator.generate(office, -5)

    @pytest.mark.parametrize("ref", [Coordinate(math.nan, 0.0), Coordinate(0.0, math.inf)])
    def test_non_finite_reference(self, seeded_generator, ref):
        with pytest.raises(InvalidArgumentError):
            seeded_generator.generate(ref, 3)

    def test_no_draws_on_invalid_input(self, office):
        rng = ScriptedRandom([])
        with pytest.raises(InvalidArgumentError):
            PointGenerator(rng=rng).generate(office, -1)
