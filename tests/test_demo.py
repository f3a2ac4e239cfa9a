import pytest

from floatstats.demo import main


@pytest.fixture
def output(capsys):
    status = main([])
    lines = capsys.readouterr().out.splitlines()
    return status, dict(line.split(": ", 1) for line in lines)


def test_exit_status(output):
    status, _ = output
    assert status == 0


def test_sample_without_replacement_line(output):
    _, lines = output
    drawn = [float(v) for v in lines["sample"].strip("[]").split()]
    assert len(drawn) == 3
    assert len(set(drawn)) == 3
    assert set(drawn) <= {0.1, 0.2, 0.3, 0.4}


def test_sample_with_replacement_line(output):
    _, lines = output
    drawn = [float(v) for v in lines["sample with replacement"].strip("[]").split()]
    assert len(drawn) == 10
    assert set(drawn) <= {0.1, 0.2, 0.3, 0.4}


def test_geometric_mean_line(output):
    _, lines = output
    assert float(lines["geometric mean"]) == pytest.approx(16.0)


def test_rejects_unknown_option(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--unknown"])
    assert excinfo.value.code == 2