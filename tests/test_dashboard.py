from pathlib import Path

from streamlit.testing.v1 import AppTest

import docking_system

DASHBOARD = str(Path(__file__).parent.parent / "dashboard.py")


def run_dashboard() -> AppTest:
    return AppTest.from_file(DASHBOARD).run()


def test_dashboard_starts_with_empty_station():
    at = run_dashboard()

    assert not at.exception
    system = at.session_state["docking_system"]
    assert system.station.bike is None


def test_dock_without_bike_warns():
    at = run_dashboard()
    at.button(key="dock").click().run()

    assert not at.exception
    assert at.session_state["docking_system"].stats["docks"] == 0
    assert len(at.warning) == 1


def test_new_bike_then_dock():
    at = run_dashboard()
    at.button(key="new_bike").click().run()
    at.button(key="dock").click().run()

    system = at.session_state["docking_system"]
    assert system.station.bike is system.bikes[0]


def test_report_after_dock():
    at = run_dashboard()
    at.button(key="new_bike").click().run()
    at.button(key="dock").click().run()
    at.button(key="report").click().run()

    system = at.session_state["docking_system"]
    assert system.event_log[-1]["action"] == "report"
    assert system.event_log[-1]["held"] == "Bike 1"


def test_scripted_walkthrough(generated_dir):
    at = run_dashboard()
    at.button(key="walkthrough").click().run()

    assert not at.exception
    assert at.session_state["walkthrough_run"]
    system = at.session_state["docking_system"]
    assert system.station.bike is system.bikes[1]
    assert (generated_dir / "console_output.txt").exists()


def test_release_adds_bike_and_keeps_slot():
    at = run_dashboard()
    at.button(key="new_bike").click().run()
    at.button(key="dock").click().run()
    at.button(key="release").click().run()

    assert not at.exception
    system = at.session_state["docking_system"]
    assert len(system.bikes) == 2
    assert system.station.bike is system.bikes[0]
    assert system.stats["releases"] == 1


def test_reset_after_walkthrough_clears_everything(generated_dir):
    at = run_dashboard()
    at.button(key="walkthrough").click().run()
    assert len(at.expander) == 1

    at.button(key="reset").click().run()

    assert not at.exception
    assert not at.session_state["walkthrough_run"]
    system = at.session_state["docking_system"]
    assert system.station.bike is None
    assert system.event_log == []
    assert len(at.expander) == 0


def test_failed_walkthrough_shows_error(generated_dir, monkeypatch):
    def broken_dock(self, bike):
        return None

    monkeypatch.setattr(docking_system.DockingSystem, "dock", broken_dock)
    at = run_dashboard()
    at.button(key="walkthrough").click().run()

    assert not at.exception
    assert len(at.error) == 1
    assert "Walkthrough failed" in at.error[0].value
    assert not at.session_state["walkthrough_run"]
