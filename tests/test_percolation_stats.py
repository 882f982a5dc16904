import math

import numpy as np
import pytest

from percolation_stats import PercolationStats, main, run_trial


def test_run_trial_stops_at_percolation():
    rng = np.random.default_rng(7)
    for n in (1, 2, 5, 10):
        fraction = run_trial(n, rng)
        assert 0.0 < fraction <= 1.0
    # a single site percolates as soon as it opens
    assert run_trial(1, rng) == 1.0


@pytest.mark.parametrize("n,trials", [(0, 10), (-1, 10), (10, 0), (10, -3)])
def test_invalid_arguments(n, trials):
    with pytest.raises(ValueError):
        PercolationStats(n, trials, rng=0)


@pytest.mark.parametrize("confidence", [0.0, 1.0, 1.5])
def test_invalid_confidence(confidence):
    with pytest.raises(ValueError):
        PercolationStats(5, 5, rng=0, confidence=confidence)


def test_mean_threshold_within_unit_interval():
    stats = PercolationStats(10, 30, rng=1)
    assert len(stats.threshold_samples) == 30
    assert 0.0 < stats.mean() < 1.0
    assert stats.stddev() > 0.0
    lo, hi = stats.confidence_interval()
    assert lo < stats.mean() < hi


def test_interval_uses_normal_quantile():
    stats = PercolationStats(8, 40, rng=2)
    assert stats.z_value() == pytest.approx(1.959964, abs=1e-5)
    half = stats.confidenceHi() - stats.mean()
    assert half == pytest.approx(1.959964 * stats.stddev() / math.sqrt(40), rel=1e-6)


def test_half_width_shrinks_with_more_trials():
    small = PercolationStats(10, 100, rng=3)
    large = PercolationStats(10, 400, rng=4)
    ratio = large.half_width() / small.half_width()
    assert 0.3 < ratio < 0.8


def test_same_seed_same_samples():
    a = PercolationStats(6, 20, rng=42)
    b = PercolationStats(6, 20, rng=42)
    np.testing.assert_array_equal(a.threshold_samples, b.threshold_samples)


def test_generator_is_threaded_through():
    rng = np.random.default_rng(5)
    stats = PercolationStats(4, 3, rng=rng)
    assert stats.rng is rng


def test_single_trial_has_undefined_stddev():
    stats = PercolationStats(5, 1, rng=0)
    assert math.isnan(stats.stddev())


def test_report_prints_summary(capsys):
    PercolationStats(5, 10, rng=0).report()
    out = capsys.readouterr().out
    assert "STATS REPORT (n = 5, trials = 10)" in out
    assert "the 95% confidence interval is" in out


def test_cli_prints_three_lines(capsys):
    assert main(["20", "30", "--seed", "11"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("mean                    = ")
    assert lines[1].startswith("stddev                  = ")
    assert lines[2].startswith("95% confidence interval = [")
    assert 0.0 < float(lines[0].split("=")[1]) < 1.0


@pytest.mark.parametrize("argv", [["0", "10"], ["10", "-1"], ["ten", "10"], ["10"]])
def test_cli_rejects_bad_arguments(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code != 0
    assert capsys.readouterr().err


def test_cli_label_follows_confidence(capsys):
    assert main(["10", "30", "--seed", "1", "--confidence", "0.9"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[2].startswith("90% confidence interval = [")


@pytest.mark.parametrize("value", ["1.2", "0", "1", "high"])
def test_cli_rejects_bad_confidence(value, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["10", "30", "--confidence", value])
    assert exc.value.code == 2
    assert "--confidence" in capsys.readouterr().err


@pytest.mark.parametrize("value", ["-1", "abc"])
def test_cli_rejects_bad_seed(value, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["10", "30", "--seed", value])
    assert exc.value.code == 2
    assert "--seed" in capsys.readouterr().err


def test_cli_accepts_zero_seed(capsys):
    assert main(["5", "5", "--seed", "0"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 3
