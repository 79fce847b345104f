# main.py

import sys
from io import StringIO
from typing import Optional

import config  # Import the module directly
from data_models import Bike
from docking_system import DockingSystem


class WalkthroughError(RuntimeError):
    """Raised when a walkthrough step does not give the expected result."""


def check_step(step: str, result: Optional[Bike], expected: Optional[Bike]):
    """Fails the walkthrough unless the step returned exactly the expected bike."""
    if result is not expected:
        raise WalkthroughError(
            f"Step '{step}' returned {result!r}, expected {expected!r}"
        )
    print(f"  ok: {step}")


def print_walkthrough_summary(system: DockingSystem):
    """Prints a formatted summary of the walkthrough to the console."""
    stats = system.stats
    print("-" * 70)
    print("=== Walkthrough Results ===")
    print(f"Bikes created: {stats['bikes_created']}")
    print(f"Docks: {stats['docks']}")
    print(f"Reports: {stats['reports']}")
    print(f"Station now holds: {system.label_for(system.station.bike)}")
    print("\n=== Event Log ===")
    print(system.event_log_frame().to_string(index=False))
    print("-" * 70)


def run_walkthrough() -> DockingSystem:
    """Docks two bikes in turn, checking what the station reports at each step."""
    old_stdout = sys.stdout
    captured_output = StringIO()
    sys.stdout = captured_output

    try:
        print("=== Docking Station Walkthrough ===")
        config.GENERATED_DIR.mkdir(parents=True, exist_ok=True)

        system = DockingSystem()

        print("\n1. A new station has no bike docked")
        check_step("report on empty station", system.report(), None)

        print("\n2. Dock a bike and read it back")
        bike_a = system.new_bike()
        check_step("dock returns the bike", system.dock(bike_a), bike_a)
        check_step("station reports the docked bike", system.report(), bike_a)

        # Only one slot: the second bike replaces the first.
        print("\n3. Dock a second bike")
        bike_b = system.new_bike()
        check_step("dock returns the second bike", system.dock(bike_b), bike_b)
        check_step("station reports the second bike", system.report(), bike_b)

        print("Walkthrough finished.")
        print_walkthrough_summary(system)

        system.event_log_frame().to_csv(config.EVENT_LOG_PATH, index=False)
        print(f"Event log written to {config.EVENT_LOG_PATH}")
    finally:
        sys.stdout = old_stdout
        config.GENERATED_DIR.mkdir(parents=True, exist_ok=True)
        with open(config.CONSOLE_OUTPUT_PATH, 'w') as f:
            f.write(captured_output.getvalue())

    return system


if __name__ == "__main__":
    run_walkthrough()
    with open(config.CONSOLE_OUTPUT_PATH, 'r') as f:
        print(f.read())
