from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, Iterator, List, Optional, Tuple

from timezone_api.models import Country
from utils.directory import CountryDirectory
from utils.local_time import local_time_for
from utils.logging_setup import get_logger

logger = get_logger(__name__)


@dataclass
class Participant:
    name: str
    email: str
    country: Country
    local_time: Optional[str] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "country": self.country.to_dict(),
            "local_time": self.local_time,
        }


class ParticipantRoster:
    """Ordered participants of one appointment draft.

    Every participant's ``local_time`` follows the current appointment instant:
    stamped on add when an instant is known, overwritten by restamp_all().
    """

    def __init__(self, directory: CountryDirectory, reference_offset: timedelta):
        self.directory = directory
        self.reference_offset = reference_offset
        self.instant: Optional[datetime] = None
        self._participants: List[Participant] = []

    def __len__(self) -> int:
        return len(self._participants)

    def __iter__(self) -> Iterator[Participant]:
        return iter(list(self._participants))

    @property
    def participants(self) -> Tuple[Participant, ...]:
        return tuple(self._participants)

    def add(self, name: str, email: str, country_code: str) -> Optional[Participant]:
        """Append a participant; None (roster unchanged) if a field is missing or the code is unknown."""
        name, email = (name or "").strip(), (email or "").strip()
        if not name or not email or not country_code:
            logger.debug("Participant not added: name, email and country are required")
            return None
        country = self.directory.find_by_code(country_code)
        if country is None:
            logger.debug("Participant not added: unknown country code %r", country_code)
            return None
        existing = {p.id for p in self._participants}
        participant = Participant(name=name, email=email, country=country)
        while participant.id in existing:
            participant.id = uuid.uuid4().hex
        participant.local_time = local_time_for(self.instant, country.offset, self.reference_offset)
        self._participants.append(participant)
        return participant

    def remove(self, participant_id: str) -> bool:
        for i, p in enumerate(self._participants):
            if p.id == participant_id:
                del self._participants[i]
                return True
        return False

    def restamp_all(self, instant: Optional[datetime]) -> None:
        self.instant = instant
        # Incomplete draft: existing stamps stay, stamped never goes back to unstamped
        if instant is None:
            return
        for p in self._participants:
            p.local_time = local_time_for(instant, p.country.offset, self.reference_offset)

    def clear(self) -> None:
        self._participants = []
        self.instant = None
