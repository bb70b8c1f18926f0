from simplelines.utils import logging
from simplelines.utils.logging import LogLevel, formatData


def test_level_names():
	assert logging.level("debug") == LogLevel.Debug
	assert logging.level(" Error ") == LogLevel.Error
	assert logging.level("verbose") == LogLevel.Warning


def test_format_data():
	assert formatData(None) == "◌"
	assert formatData({"label": "a b", "line": 3, "ok": True}) == "label='a b' line=3 ok=✓"


def test_filtered_by_level(capsys, monkeypatch):
	monkeypatch.setattr(logging, "LOG_LEVEL", LogLevel.Warning)
	logging.debug("Hidden", line=1)
	logging.warning("Shown", line=2)
	err = capsys.readouterr().err
	assert "Hidden" not in err
	assert "Shown" in err
	assert "line=2" in err


def test_error_code(capsys, monkeypatch):
	monkeypatch.setattr(logging, "LOG_LEVEL", LogLevel.Debug)
	logging.error("Failed", 1, files=2)
	assert "[1] Failed files=2" in capsys.readouterr().err



def test_exception(capsys, monkeypatch):
	monkeypatch.setattr(logging, "LOG_LEVEL", LogLevel.Warning)
	try:
		raise OSError("Broken pipe")
	except OSError as e:
		assert logging.exception(e, "Unable to write", path="a.txt") is e
	err = capsys.readouterr().err
	assert "Unable to write: [OSError] Broken pipe path=a.txt" in err
	assert "... in test_exception" in err


# EOF
