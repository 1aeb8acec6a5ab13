"""
Tests for salvo statistics.
"""

import random

import pytest

from spaceship.salvo import SalvoReport, simulate_salvo
from spaceship.ship import FiringMode, GT4500


class TestSimulateSalvo:
    """Tests for simulate_salvo."""

    def test_reliable_ship(self):
        ship = GT4500(1, 0.0, 1, 0.0, rng=random.Random(42))
        report = simulate_salvo(ship, FiringMode.ALL, 100)
        assert report.successes == 100
        assert report.failures == 0
        assert report.failure_rate == 0.0

    def test_broken_ship(self):
        ship = GT4500(1, 1.0, 1, 1.0, rng=random.Random(42))
        report = simulate_salvo(ship, FiringMode.SINGLE, 50)
        assert report.failures == 50
        assert report.failure_rate == 1.0

    def test_counts_match_draws(self, scripted_rng):
        scripted_rng.random.side_effect = [0.1, 0.9, 0.2, 0.8]
        ship = GT4500(1, 0.5, 0, 0.0, rng=scripted_rng)
        report = simulate_salvo(ship, FiringMode.SINGLE, 4)
        assert report == SalvoReport(
            mode=FiringMode.SINGLE,
            trials=4,
            successes=2,
            failures=2,
            failure_rate=0.5,
        )

    def test_seeded_reports_reproducible(self):
        reports = [
            simulate_salvo(GT4500(1, 0.3, 1, 0.3, rng=random.Random(9)), FiringMode.ALL, 500)
            for _ in range(2)
        ]
        assert reports[0] == reports[1]

    def test_single_mode_converges_to_failure_rate(self):
        ship = GT4500(1, 0.25, 0, 0.0, rng=random.Random(1234))
        report = simulate_salvo(ship, FiringMode.SINGLE, 20_000)
        assert report.failure_rate == pytest.approx(0.25, abs=0.02)

    def test_all_mode_compounds_failure(self):
        """Two independent banks at 0.5 fail together three times out of four."""
        ship = GT4500(1, 0.5, 1, 0.5, rng=random.Random(99))
        report = simulate_salvo(ship, FiringMode.ALL, 20_000)
        assert report.failure_rate == pytest.approx(0.75, abs=0.02)

    @pytest.mark.parametrize("trials", [0, -5])
    def test_trials_must_be_positive(self, trials):
        ship = GT4500(1, 0.0, 1, 0.0)
        with pytest.raises(ValueError):
            simulate_salvo(ship, FiringMode.SINGLE, trials)

    def test_str(self):
        report = SalvoReport(FiringMode.ALL, 10, 7, 3, 0.3)
        assert str(report) == "ALL: 7/10 succeeded, observed failure rate 0.3000"
