# tests/test_cli.py

from multical.cli import main


def test_convert(capsys):
    assert main(["convert", "2024-03-20", "--to", "persian", "--locale", "en"]) == 0
    out = capsys.readouterr().out
    assert "2024/03/20" in out
    assert "1403/01/01" in out
    assert "Farvardin" in out


def test_convert_from_hijri(capsys):
    assert main(["convert", "1445-09-01", "--from", "hijri", "--to", "civil"]) == 0
    assert "2024/03/11" in capsys.readouterr().out


def test_year_info(capsys):
    assert main(["year-info", "1399", "--calendar", "persian"]) == 0
    out = capsys.readouterr().out
    assert "leap        : yes" in out
    assert "year length : 366" in out


def test_month_grid(capsys):
    assert main(["month", "1403", "1", "--calendar", "persian"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[1].startswith("Sa")
    assert "03-20" in out


def test_round_trip(capsys):
    assert main(["round-trip", "--calendars", "persian,hijri", "--N", "200"]) == 0
    out = capsys.readouterr().out
    assert "persian: 200 trials, 0 failures" in out


def test_domain_error_exit_code(capsys):
    assert main(["convert", "300000000-01-01"]) == 2
    assert "out of feasible range" in capsys.readouterr().err


def test_verbose_flag(capsys):
    assert main(["-v", "year-info", "2024"]) == 0
    assert "leap        : yes" in capsys.readouterr().out
