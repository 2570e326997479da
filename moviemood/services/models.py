"""Shared dataclasses for service layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Gender(str, Enum):
    FEMALE = "Female"
    MALE = "Male"
    UNKNOWN = "Unknown"

    @classmethod
    def from_code(cls, code: int | None) -> Gender:
        """TMDb uses 1 for female; every other reported code is shown as male."""

        if code is None:
            return cls.UNKNOWN
        return cls.FEMALE if code == 1 else cls.MALE


@dataclass(frozen=True, slots=True)
class Movie:
    """A single catalog movie as shown in chat answers."""

    id: int = 0
    title: str = ""
    overview: str = ""
    release_date: str = ""
    vote_average: float = 0.0


@dataclass(frozen=True, slots=True)
class PersonDetail:
    """Biographical fields from the person detail endpoint; None means unknown."""

    birthday: str | None = None
    deathday: str | None = None
    biography: str | None = None
    place_of_birth: str | None = None
    gender_code: int | None = None


@dataclass(frozen=True, slots=True)
class ActorCandidate:
    """A person search hit before biographical enrichment."""

    id: int
    name: str
    known_for: tuple[Movie, ...] = ()


@dataclass(frozen=True, slots=True)
class Actor:
    id: int
    name: str
    birthday: str = ""
    deathday: str = ""
    biography: str = ""
    gender: Gender = Gender.UNKNOWN
    place_of_birth: str = ""
    known_for: tuple[Movie, ...] = ()

    @classmethod
    def from_candidate(cls, candidate: ActorCandidate, detail: PersonDetail) -> Actor:
        return cls(
            id=candidate.id,
            name=candidate.name,
            birthday=detail.birthday or "",
            deathday=detail.deathday or "",
            biography=detail.biography or "",
            gender=Gender.from_code(detail.gender_code),
            place_of_birth=detail.place_of_birth or "",
            known_for=candidate.known_for,
        )

    @property
    def is_deceased(self) -> bool:
        return bool(self.deathday)
