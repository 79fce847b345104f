# docking_system.py

from typing import Dict, List, Optional

import pandas as pd

from data_models import Bike, DockingStation

EVENT_LOG_COLUMNS = ["step", "action", "bike", "held"]


class DockingSystem:
    """Manages the bikes and the docking station of one interactive session."""

    def __init__(self):
        self.station = DockingStation()
        self.bikes: List[Bike] = []
        self.event_log: List[Dict] = []
        self.stats = {
            "bikes_created": 0,
            "docks": 0,
            "reports": 0,
            "releases": 0,
        }

    def label_for(self, bike: Optional[Bike]) -> str:
        """Returns a readable name for a bike, based on the order bikes were created in."""
        if bike is None:
            return "-"
        for index, known in enumerate(self.bikes, start=1):
            if known is bike:
                return f"Bike {index}"
        return "Unregistered bike"

    def log_event(self, action: str, bike: Optional[Bike]):
        """Records an action together with what the station holds afterwards."""
        self.event_log.append(
            {
                "step": len(self.event_log) + 1,
                "action": action,
                "bike": self.label_for(bike),
                "held": self.label_for(self.station.bike),
            }
        )

    def new_bike(self) -> Bike:
        bike = Bike()
        self.bikes.append(bike)
        self.stats["bikes_created"] += 1
        self.log_event("new_bike", bike)
        return bike

    def dock(self, bike: Bike) -> Bike:
        docked = self.station.dock(bike)
        self.stats["docks"] += 1
        self.log_event("dock", docked)
        return docked

    def report(self) -> Optional[Bike]:
        """Returns the docked bike (or None) and logs the read."""
        held = self.station.bike
        self.stats["reports"] += 1
        self.log_event("report", held)
        return held

    def release_bike(self) -> Bike:
        """Releases a fresh bike from the station and registers it with the session."""
        bike = self.station.release_bike()
        self.bikes.append(bike)
        self.stats["bikes_created"] += 1
        self.stats["releases"] += 1
        self.log_event("release_bike", bike)
        return bike

    def event_log_frame(self) -> pd.DataFrame:
        """Returns the event log as a DataFrame, one row per action."""
        return pd.DataFrame(self.event_log, columns=EVENT_LOG_COLUMNS)
