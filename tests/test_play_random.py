"""Tests for the random-board harness."""
from bridge.play_random import TrialConfig, main, run_trials
from bridge.seats import Position


def test_run_trials_summary():
    summary = run_trials(TrialConfig(deals=6, seed=3))
    assert summary.deals == 6
    assert summary.bad_boards == 0
    assert summary.passed_out + sum(summary.contracts_by_strain.values()) == 6
    assert len(summary.declarer_tricks) == 6 - summary.passed_out
    assert all(0 <= t <= 13 for t in summary.declarer_tricks)


def test_run_trials_is_reproducible():
    cfg = TrialConfig(deals=4, seed=11, first_dealer=Position.EAST)
    assert run_trials(cfg) == run_trials(cfg)


def test_cli_prints_summary_and_links(capsys):
    main(["--deals", "2", "--seed", "1", "--links", "--auctions", "--dealer", "north"])
    out = capsys.readouterr().out
    assert "deals=2" in out
    assert "handviewer.html?lin=" in out
    assert "Board 1 (dealer North)" in out
    assert "Board 2 (dealer East)" in out
