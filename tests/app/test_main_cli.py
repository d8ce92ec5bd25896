from __future__ import annotations

import json
import logging
import os
import signal
import sys
from typing import TYPE_CHECKING

import pytest

from lotwise import main as main_module
from lotwise.adapters.taxonomy import StaticTermTaxonomy
from lotwise.adapters.visibility import InMemoryDashboardVisibility
from lotwise.app import AnalysisSession
from tests.helpers.market import FakeMarketDataService, make_snapshot

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from lotwise.domain.ports import DashboardVisibility


@pytest.fixture
def captured_visibility(monkeypatch: pytest.MonkeyPatch) -> list[DashboardVisibility | None]:
    captured: list[DashboardVisibility | None] = []

    def fake_build_session(*, visibility: DashboardVisibility | None = None) -> AnalysisSession:
        captured.append(visibility)
        return AnalysisSession(
            taxonomy=StaticTermTaxonomy(),
            market=FakeMarketDataService(make_snapshot(5000, 7000)),
            visibility=visibility or InMemoryDashboardVisibility(visible=True),
        )

    monkeypatch.setattr(main_module, "build_session", fake_build_session)
    return captured


def _write_item(tmp_path: Path, data: object) -> str:
    path = tmp_path / "item.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_analyze_prints_query_terms_and_valuation(
    tmp_path: Path,
    captured_visibility: list[DashboardVisibility | None],
    capsys: pytest.CaptureFixture[str],
) -> None:
    item = _write_item(tmp_path, {"title": "Vas, Orrefross, glas", "estimate": 10000})

    main_module.main(["analyze", item])

    output = capsys.readouterr().out
    assert "Query: vas (non_art_item)" in output
    assert "[x] vas (object_type)" in output
    assert "[ ] glas (material)" in output
    assert "Valuation: 5 000-7 000 SEK" in output
    assert "[medium] estimate:" in output
    assert "Orrefross -> Orrefors" in output
    assert captured_visibility == [None]


def test_hide_dashboard_defers_market_lookup(
    tmp_path: Path,
    captured_visibility: list[DashboardVisibility | None],
    capsys: pytest.CaptureFixture[str],
) -> None:
    item = _write_item(tmp_path, {"title": "Vas, glas"})

    main_module.main(["analyze", item, "--hide-dashboard"])

    visibility = captured_visibility[0]
    assert visibility is not None
    assert not visibility.is_visible()
    assert "Market: deferred until the dashboard is opened" in capsys.readouterr().out


def test_ai_artist_option_is_used(
    tmp_path: Path,
    captured_visibility: list[DashboardVisibility | None],
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = captured_visibility
    item = _write_item(tmp_path, {"title": "Skulptur, brons"})

    main_module.main(["analyze", item, "--ai-artist", "Carl Milles", "--show-dashboard"])

    assert 'Query: "Carl Milles" skulptur (ai_only)' in capsys.readouterr().out


@pytest.mark.parametrize("data", ["not an object", {"description": "no title"}])
def test_invalid_item_exits_with_code_2(
    tmp_path: Path,
    captured_visibility: list[DashboardVisibility | None],
    data: object,
) -> None:
    item = _write_item(tmp_path, data)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["analyze", item])

    assert excinfo.value.code == 2
    assert captured_visibility == []


def test_missing_file_exits_with_code_2(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["analyze", str(tmp_path / "missing.json")])

    assert excinfo.value.code == 2


def test_unexpected_error_exits_with_code_1(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def broken_build_session(**_: object) -> AnalysisSession:
        raise RuntimeError("boom")

    monkeypatch.setattr(main_module, "build_session", broken_build_session)
    item = _write_item(tmp_path, {"title": "Vas"})

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["analyze", item])

    assert excinfo.value.code == 1
    assert "Error: boom" in capsys.readouterr().err


def test_version_flag_prints_package_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("lotwise ")


@pytest.mark.parametrize(
    ("argv_prefix", "argv_suffix", "expected_level"),
    [
        ([], [], logging.INFO),
        (["--verbose"], [], logging.DEBUG),
        ([], ["--verbose"], logging.DEBUG),
    ],
)
def test_verbose_flag_is_accepted_before_and_after_the_command(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    captured_visibility: list[DashboardVisibility | None],
    argv_prefix: list[str],
    argv_suffix: list[str],
    expected_level: int,
) -> None:
    _ = captured_visibility
    levels: list[int] = []

    def record_logging(*, level: int) -> None:
        levels.append(level)

    monkeypatch.setattr(main_module, "configure_logging", record_logging)
    item = _write_item(tmp_path, {"title": "Vas, glas"})

    main_module.main([*argv_prefix, "analyze", item, *argv_suffix])

    assert levels == [expected_level]


@pytest.fixture
def dotenv_api_key() -> Iterator[str]:
    yield "key-from-dotenv"
    os.environ.pop("ANTHROPIC_API_KEY", None)


def test_console_entry_point_loads_dotenv_from_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, dotenv_api_key: str
) -> None:
    (tmp_path / ".env").write_text(f"ANTHROPIC_API_KEY={dotenv_api_key}\n", encoding="utf-8")
    item = _write_item(tmp_path, {"title": "Vas, glas"})
    seen_keys: list[str | None] = []
    installed_signals: list[int] = []

    def fake_build_session(*, visibility: DashboardVisibility | None = None) -> AnalysisSession:
        seen_keys.append(os.getenv("ANTHROPIC_API_KEY"))
        return AnalysisSession(
            taxonomy=StaticTermTaxonomy(),
            market=FakeMarketDataService(make_snapshot()),
            visibility=visibility or InMemoryDashboardVisibility(visible=True),
        )

    monkeypatch.setattr(main_module, "build_session", fake_build_session)
    monkeypatch.setattr(
        main_module, "signal", lambda signum, _handler: installed_signals.append(signum)
    )
    monkeypatch.setattr(sys, "argv", ["lotwise", "analyze", item])
    monkeypatch.chdir(tmp_path)

    main_module.run()

    assert seen_keys == [dotenv_api_key]
    assert installed_signals == [signal.SIGINT]
