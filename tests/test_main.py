from unittest import mock

import pytest

from rpgclasses.main import main


@pytest.fixture(autouse=True)
def _no_sleep():
    with mock.patch("time.sleep") as sleep:
        yield sleep


def test_main_returns_zero(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.count("Leveled Up!") == 5


def test_main_order_of_party(capsys):
    main([])
    out = capsys.readouterr().out
    names = ["Midas", "Frieren", "Achilles", "Charybdis", "Guts"]
    positions = [out.index(f"{name} Leveled Up!") for name in names]
    assert positions == sorted(positions)


def test_main_reports_every_resource(capsys):
    main([])
    out = capsys.readouterr().out
    for label in ("Rage = ", "Spell Slots = ", "Lock On = ", "Cloaking = ", "Negate = "):
        assert out.count(label) == 1
    assert out.count("Level = ") == 5


def test_main_all_reach_same_level(capsys):
    main([])
    lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("Level = ")]
    assert len(set(lines)) == 1
    assert lines[0] == f"Level = {1 + 11}"


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])