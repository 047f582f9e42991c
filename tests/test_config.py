import logging

from course_planner import config


def test_default_data_file_from_environment(monkeypatch):
    monkeypatch.setenv(config.DATA_FILE_ENV, "/srv/advising/courses.csv")
    assert config.default_data_file() == "/srv/advising/courses.csv"

    monkeypatch.setenv(config.DATA_FILE_ENV, "")
    assert config.default_data_file() is None


def test_default_log_level(monkeypatch):
    monkeypatch.delenv(config.LOG_LEVEL_ENV, raising=False)
    assert config.default_log_level() == "WARNING"

    monkeypatch.setenv(config.LOG_LEVEL_ENV, "info")
    assert config.default_log_level() == "INFO"


def test_configure_logging_ignores_unknown_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    monkeypatch.setenv(config.LOG_LEVEL_ENV, "chatty")
    config.configure_logging()
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "error")
    config.configure_logging()
    config.configure_logging(verbose=True)

    assert [c["level"] for c in calls] == [logging.WARNING, logging.ERROR, logging.DEBUG]
