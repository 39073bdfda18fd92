# tests/test_ummalqura_index.py

import logging

import pytest

from hijrical.core.errors import OutOfRangeError
from hijrical.reference import ummalqura as uq
from hijrical.reference import update_ummalqura_table


@pytest.fixture
def fresh_loader(monkeypatch, tmp_path):
    monkeypatch.delenv(uq.ENV_TABLE, raising=False)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    uq.load_default_index.cache_clear()
    yield
    uq.load_default_index.cache_clear()


def test_index_model(ramadan_1445):
    assert len(ramadan_1445) == 3
    assert ramadan_1445.range == (1075, 1077)
    assert list(ramadan_1445) == [(1075, 60351), (1076, 60380), (1077, 60410)]
    assert ramadan_1445.label(1076) == (1445, 9)
    assert ramadan_1445.label(0) == (1356, 1)
    assert ramadan_1445.hijri_range == ((1445, 8), (1445, 10))
    with pytest.raises(OutOfRangeError):
        ramadan_1445.day_offset(1078)


def test_index_rejects_bad_data():
    with pytest.raises(ValueError):
        uq.UmmAlQuraIndex(())
    with pytest.raises(ValueError):
        uq.UmmAlQuraIndex((10, 40, 30))
    with pytest.raises(ValueError):
        uq.UmmAlQuraIndex((10, 40), end_offset=20)


def test_csv_roundtrip(ramadan_1445, tmp_path):
    path = uq.write_index_csv(ramadan_1445, tmp_path / "sub" / "ummalqura.csv")
    assert path.read_text(encoding="utf-8").splitlines()[0] == "month_index,day_offset"

    index = uq.read_index_csv(path)
    assert index.offsets == ramadan_1445.offsets
    assert index.min_index == ramadan_1445.min_index
    assert index.source == str(path)
    # the end offset is not stored, so the last length is unknown
    assert index.month_length(index.max_index) is None
    assert index.month_length(1076) == 30


def test_csv_requires_consecutive_months(tmp_path):
    p = tmp_path / "gap.csv"
    p.write_text("month_index,day_offset\n1,100\n3,159\n", encoding="utf-8")
    with pytest.raises(ValueError):
        uq.read_index_csv(p)

    p.write_text("month_index,day_offset\n", encoding="utf-8")
    with pytest.raises(ValueError):
        uq.read_index_csv(p)


def test_env_table_wins(fresh_loader, ramadan_1445, tmp_path, monkeypatch):
    path = uq.write_index_csv(ramadan_1445, tmp_path / "env.csv")
    monkeypatch.setenv(uq.ENV_TABLE, str(path))

    index = uq.load_default_index()
    assert index.source == str(path)
    assert uq.load_default_index() is index


def test_broken_env_table_is_an_error(fresh_loader, tmp_path, monkeypatch):
    p = tmp_path / "broken.csv"
    p.write_text("month_index,day_offset\nx,y\n", encoding="utf-8")
    monkeypatch.setenv(uq.ENV_TABLE, str(p))
    with pytest.raises(ValueError):
        uq.load_default_index()


def test_cache_is_used(fresh_loader, ramadan_1445):
    path = uq.write_index_csv(ramadan_1445, uq.default_cache_path())
    assert path.parent.name == "hijrical"
    assert uq.load_default_index().source == str(path)


def test_broken_cache_falls_through(fresh_loader, caplog):
    path = uq.default_cache_path()
    path.parent.mkdir(parents=True)
    path.write_text("not,a,table\n1,2,3\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="hijrical.reference.ummalqura"):
        index = uq.load_default_index()
    assert index.source == "hijri-converter"
    assert "ignoring unreadable" in caplog.text


def test_update_table_writes_and_checks(tmp_path, capsys):
    out = tmp_path / "uq.csv"
    assert update_ummalqura_table.main(["--out", str(out)]) == 0
    assert uq.ENV_TABLE in capsys.readouterr().out

    # refuses to overwrite without --force
    assert update_ummalqura_table.main(["--out", str(out)]) == 1
    assert update_ummalqura_table.main(["--out", str(out), "--force"]) == 0

    assert update_ummalqura_table.main(["--check", str(out)]) == 0
    assert "1343/1 .. 1500/12" in capsys.readouterr().out
    assert len(uq.read_index_csv(out)) == (1500 - 1343 + 1) * 12


def test_default_index_without_table_files(fresh_loader):
    import hijrical

    index = uq.load_default_index()
    assert index.source == "hijri-converter"
    assert index.hijri_range == ((1343, 1), (1500, 12))

    hijrical.set_index(None)
    g = hijrical.hijri_to_gregorian(hijrical.HijriMoment(1445, 9, 1))
    assert g.date_tuple() == (2024, 3, 11)
    assert not uq.default_cache_path().exists()
