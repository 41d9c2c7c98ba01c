from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import sundown.data.sun_times as sun_times
from sundown.config import APP_TITLE, TABS
from sundown.data.filters import SearchFilter

APP_PATH = Path(__file__).resolve().parent.parent / "app.py"


def _run_app() -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _current_times(at: AppTest) -> list:
    return [metric.value for metric in at.metric if metric.label == "Current Time"]


def test_app_renders_title_tabs_and_footer() -> None:
    at = _run_app()
    assert at.title[0].value == APP_TITLE
    assert [tab.label for tab in at.tabs] == [tab.label for tab in TABS]
    assert any("Showing 15 of 15 cities" in caption.value for caption in at.caption)


def test_search_narrows_and_reports_empty_results(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="sundown.ui.layout")
    at = _run_app()
    at.text_input(key="sd_search_term").input("lon").run()
    assert any("Showing 1 of 15 cities" in caption.value for caption in at.caption)
    assert "Search filter changed" in caplog.text
    assert "'term': 'lon'" in caplog.text

    at.text_input(key="sd_search_term").input("Atlantis").run()
    assert any('No cities found matching "Atlantis"' in info.value for info in at.info)
    assert any("Showing 0 of 15 cities" in caption.value for caption in at.caption)
    assert "'term': 'Atlantis'" in caplog.text


def test_refresh_interval_reaches_the_fragment(monkeypatch: pytest.MonkeyPatch) -> None:
    import app

    monkeypatch.setenv("SUNDOWN_REFRESH_SECONDS", "7")
    recorded = {}

    def _fragment(*, run_every=None):
        recorded["run_every"] = run_every

        def _decorate(func):
            recorded["func"] = func
            return lambda *args, **kwargs: recorded.setdefault("calls", []).append(args)

        return _decorate

    monkeypatch.setattr(app.st, "fragment", _fragment)
    monkeypatch.setattr(app.st, "title", lambda *args, **kwargs: None)
    monkeypatch.setattr(app, "setup_page", lambda: None)
    monkeypatch.setattr(app, "search_filter_ui", lambda: SearchFilter(term="par"))

    app.main()

    assert recorded["run_every"] == 7
    assert recorded["func"] is app.render_live_view
    filters, settings = recorded["calls"][0]
    assert filters.term == "par"
    assert settings.refresh_interval_seconds == 7


def test_each_rerun_reads_the_clock_again(monkeypatch: pytest.MonkeyPatch) -> None:
    clock = [dt.datetime(2024, 6, 21, 12, 0, tzinfo=dt.timezone.utc)]
    monkeypatch.setattr(sun_times, "utc_now", lambda: clock[0])

    at = _run_app()
    first = _current_times(at)
    assert first[0] == "08:00 AM"  # New York, EDT

    clock[0] = dt.datetime(2024, 6, 21, 15, 30, tzinfo=dt.timezone.utc)
    at.run()
    assert not at.exception
    second = _current_times(at)
    assert second[0] == "11:30 AM"
    assert first != second
