import io
import json
import sys
from unittest import mock

from eatherapp.main import DB_NAME, main

GEO = {"results": [{"latitude": 52.52, "longitude": 13.41}]}
FORECAST = {
    "latitude": 52.52,
    "longitude": 13.41,
    "current": {
        "temperature_2m": 20.5,
        "relative_humidity_2m": 40,
        "precipitation": 0.0,
        "wind_speed_10m": 11.2,
    },
}


def fake_urlopen(request, *args, **kwargs):
    url = request.full_url if hasattr(request, "full_url") else request
    body = GEO if "geocoding" in url else FORECAST
    response = mock.MagicMock()
    response.__enter__.return_value.read.return_value = json.dumps(body).encode()
    return response


def test_exit_from_menu(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main(["--base-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "1. Login\n2. Register\n3. Exit" in out
    assert "5. Exit" in out
    assert (tmp_path / "db" / DB_NAME).exists()
    assert len((tmp_path / "prv.key").read_bytes()) == 32
    assert len((tmp_path / "prv.iv").read_bytes()) == 16


def test_end_of_input_stops(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--base-dir", str(tmp_path)]) == 0


def test_current_weather_session(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 Berlin 2\n"))
    with mock.patch("urllib.request.urlopen", side_effect=fake_urlopen) as urlopen:
        assert main(["--base-dir", str(tmp_path)]) == 0
    assert urlopen.call_count == 2
    out = capsys.readouterr().out
    assert "temperature: 20.5C" in out
    assert "humidity: 40%" in out


def test_missing_keys_with_existing_database(tmp_path, capsys):
    (tmp_path / "db").mkdir()
    (tmp_path / "db" / DB_NAME).write_bytes(b"")
    assert main(["--base-dir", str(tmp_path)]) == 1
    assert "Keyfile missing" in capsys.readouterr().err


def test_keys_reused_between_runs(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main(["--base-dir", str(tmp_path)]) == 0
    key = (tmp_path / "prv.key").read_bytes()
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main(["--base-dir", str(tmp_path)]) == 0
    assert (tmp_path / "prv.key").read_bytes() == key