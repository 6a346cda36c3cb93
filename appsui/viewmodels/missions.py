"""
Missions — browse bundled Apollo missions and their crews.

Data comes from the bundled ``astronauts.json`` (an object keyed by
astronaut id) and ``missions.json`` (an array).  Nothing is persisted.
"""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from appsui.bundle import decode_resource, parse_date
from appsui.exceptions import MissingAstronautError

__all__ = [
    "Astronaut",
    "CrewRole",
    "CrewMember",
    "Mission",
    "MissionsViewModel",
    "load_astronauts",
    "load_missions",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Astronaut:
    id:          str
    name:        str
    description: str

    @classmethod
    def from_dict(cls, data: dict) -> "Astronaut":
        return cls(id=str(data["id"]), name=str(data["name"]), description=str(data["description"]))


@dataclass(frozen=True)
class CrewRole:
    name: str
    role: str


@dataclass(frozen=True)
class CrewMember:
    role:      str
    astronaut: Astronaut


@dataclass(frozen=True)
class Mission:
    id:          int
    launch_date: Optional[date]
    crew:        tuple
    description: str

    @classmethod
    def from_dict(cls, data: dict) -> "Mission":
        return cls(
            id=int(data["id"]),
            launch_date=parse_date(data.get("launchDate")),
            crew=tuple(CrewRole(name=str(c["name"]), role=str(c["role"])) for c in data["crew"]),
            description=str(data["description"]),
        )

    @property
    def display_name(self) -> str:
        return f"Apollo {self.id}"

    @property
    def image(self) -> str:
        return f"apollo{self.id}"

    @property
    def short_formatted_launch_date(self) -> str:
        """e.g. "Jul 16, 1969", or "N/A" for missions that never launched."""
        if self.launch_date is None:
            return "N/A"
        return f"{self.launch_date:%b} {self.launch_date.day}, {self.launch_date.year}"

    @property
    def long_formatted_launch_date(self) -> str:
        """e.g. "July 16, 1969", or "N/A"."""
        if self.launch_date is None:
            return "N/A"
        return f"{self.launch_date:%B} {self.launch_date.day}, {self.launch_date.year}"


def load_astronauts(data_dir: Optional[Path] = None) -> dict[str, Astronaut]:
    return decode_resource(
        "astronauts.json",
        lambda raw: {key: Astronaut.from_dict(value) for key, value in raw.items()},
        data_dir,
    )


def load_missions(data_dir: Optional[Path] = None) -> list[Mission]:
    return decode_resource("missions.json", lambda raw: [Mission.from_dict(m) for m in raw], data_dir)


class MissionsViewModel:
    """
    Attributes
    ──────────
    astronauts    — astronaut id → Astronaut
    missions      — missions in bundle order
    showing_grid  — layout toggle (grid vs. list)
    """

    def __init__(
        self,
        astronauts: Optional[dict[str, Astronaut]] = None,
        missions: Optional[list[Mission]] = None,
    ) -> None:
        self.astronauts = astronauts if astronauts is not None else load_astronauts()
        self.missions = missions if missions is not None else load_missions()
        self.showing_grid = False
        logger.debug("%d mission(s), %d astronaut(s)", len(self.missions), len(self.astronauts))

    def toggle_layout(self) -> bool:
        self.showing_grid = not self.showing_grid
        return self.showing_grid

    def crew_for(self, mission: Mission) -> list[CrewMember]:
        """
        Resolve a mission's crew roles to astronauts.

        Raises:
            MissingAstronautError: a crew entry names an unknown astronaut.
        """
        crew = []
        for member in mission.crew:
            astronaut = self.astronauts.get(member.name)
            if astronaut is None:
                raise MissingAstronautError(f"Missing {member.name}")
            crew.append(CrewMember(role=member.role, astronaut=astronaut))
        return crew

    def missions_for(self, astronaut_id: str) -> list[Mission]:
        """Missions an astronaut flew (or trained for), bundle order."""
        return [m for m in self.missions if any(c.name == astronaut_id for c in m.crew)]
