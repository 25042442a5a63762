from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

from scheduler.roster import Participant, ParticipantRoster
from utils.directory import CountryDirectory
from utils.local_time import combine_instant
from utils.logging_setup import get_logger

logger = get_logger(__name__)


@dataclass
class AppointmentDraft:
    title: str = ""
    description: str = ""
    date: str = ""
    time: str = ""

    @property
    def instant(self) -> Optional[datetime]:
        return combine_instant(self.date, self.time)

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "description": self.description, "date": self.date, "time": self.time}


@dataclass
class SubmissionResult:
    accepted: bool
    message: str
    participants: List[Participant] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accepted": self.accepted,
            "message": self.message,
            "participants": [p.to_dict() for p in self.participants],
        }


_DRAFT_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(AppointmentDraft))


class AppointmentForm:
    """Appointment draft plus its participant roster.

    Date/time edits restamp the roster so displayed local times never lag the
    draft. submit() is the only operation that resets both.
    """

    def __init__(self, directory: CountryDirectory, reference_offset: timedelta):
        self.draft = AppointmentDraft()
        self.roster = ParticipantRoster(directory, reference_offset)

    def set_field(self, name: str, value: str) -> None:
        if name not in _DRAFT_FIELDS:
            raise ValueError(f"Unknown appointment field: {name}")
        setattr(self.draft, name, value or "")
        if name in ("date", "time"):
            self.roster.restamp_all(self.draft.instant)

    def add_participant(self, name: str, email: str, country_code: str) -> Optional[Participant]:
        return self.roster.add(name, email, country_code)

    def remove_participant(self, participant_id: str) -> bool:
        return self.roster.remove(participant_id)

    def _validate(self) -> Optional[str]:
        if len(self.roster) == 0:
            return "Add at least one participant."
        if not self.draft.title.strip():
            return "A title is required."
        if self.draft.instant is None:
            return "A valid date and time are required."
        return None

    def submit(self) -> SubmissionResult:
        problem = self._validate()
        if problem:
            logger.info("Appointment rejected: %s", problem)
            return SubmissionResult(False, problem)

        self.roster.restamp_all(self.draft.instant)
        notified = list(self.roster)
        message = f"{len(notified)} invitation(s) sent with matching local times."
        logger.info("Appointment %r scheduled for %s: %s", self.draft.title, self.draft.instant, message)
        self.reset()
        return SubmissionResult(True, message, notified)

    def reset(self) -> None:
        self.draft = AppointmentDraft()
        self.roster.clear()

    cancel = reset
