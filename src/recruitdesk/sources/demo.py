"""Seeded sample candidates for demos and local development."""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta, timezone

from recruitdesk.models import INTENTS, STATUSES, CandidateRecord

logger = logging.getLogger(__name__)

_PROGRAMS = [
    "B.S. Data Science",
    "B.S. Computer Science",
    "M.S. AI",
    "B.S. Cybersecurity",
    "M.S. Software Engineering",
]

_SKILL_POOL = [
    "Python", "Data Viz", "JavaScript", "React", "APIs", "ML",
    "Neural Networks", "Stats", "SQL", "Networking", "Cloud", "Rust",
]

_LOCATIONS = [
    "Flagstaff, AZ", "Phoenix, AZ", "San Diego, CA", "Austin, TX",
    "Denver, CO", "Seattle, WA", "Norfolk, VA",
]

_FIRST_NAMES = ["Jordan", "Avery", "Riley", "Morgan", "Casey", "Taylor", "Quinn"]
_LAST_NAMES = ["Ellis", "Nguyen", "Patel", "Garcia", "Okafor", "Brooks", "Kim"]


def _activity_label(delta: timedelta) -> str:
    hours = int(delta.total_seconds() // 3600)
    if hours < 24:
        return f"{max(hours, 1)} hour{'s' if hours != 1 else ''} ago"
    days = hours // 24
    return f"{days} day{'s' if days != 1 else ''} ago"


class DemoCandidateProvider:
    """Named demo data provider.

    The first three records are the fixed dashboard samples; the rest are
    drawn from a ``random.Random(seed)`` so a given ``(count, seed, now)``
    always yields the same list.
    """

    def __init__(
        self,
        count: int = 24,
        seed: int = 42,
        now: datetime | None = None,
    ) -> None:
        self._count = max(count, 0)
        self._seed = seed
        self._now = now or datetime.now(timezone.utc)

    def fetch_candidates(self) -> list[CandidateRecord]:
        records = self._fixed_samples()[: self._count]
        rng = random.Random(self._seed)
        for n in range(len(records), self._count):
            records.append(self._generate(rng, 101 + n))
        logger.info("Demo provider produced %d candidate(s).", len(records))
        return records

    def _fixed_samples(self) -> list[CandidateRecord]:
        now = self._now
        return [
            CandidateRecord(
                id="c101",
                blind_id="Candidate #101",
                match_score=94,
                program="B.S. Data Science",
                activity="2 hours ago",
                activity_date=now - timedelta(hours=2),
                intent="high",
                skills=("Python", "Data Viz"),
            ),
            CandidateRecord(
                id="c102",
                blind_id="Candidate #102",
                match_score=89,
                program="B.S. Computer Science",
                activity="1 day ago",
                activity_date=now - timedelta(days=1),
                intent="medium",
                skills=("JavaScript", "React", "APIs"),
            ),
            CandidateRecord(
                id="c103",
                blind_id="Candidate #103",
                match_score=82,
                program="M.S. AI",
                activity="3 days ago",
                activity_date=now - timedelta(days=3),
                intent="very-high",
                skills=("ML", "Neural Networks"),
                is_revealed=True,
                name="Jordan Ellis",
                email="jordan.ellis@example.com",
            ),
        ]

    def _generate(self, rng: random.Random, number: int) -> CandidateRecord:
        delta = timedelta(hours=rng.randint(1, 24 * 14))
        revealed = rng.random() > 0.5
        name = f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}"
        return CandidateRecord(
            id=f"c{number}",
            blind_id=f"Candidate #{number}",
            match_score=rng.randint(55, 99),
            program=rng.choice(_PROGRAMS),
            activity=_activity_label(delta),
            activity_date=self._now - delta,
            intent=rng.choice(INTENTS),
            status=rng.choice(STATUSES + (None,)),
            is_revealed=revealed,
            name=name,
            email=f"{name.lower().replace(' ', '.')}@example.com",
            phone=f"+1 (555) {rng.randint(100, 999)}-{rng.randint(1000, 9999)}",
            skills=tuple(rng.sample(_SKILL_POOL, rng.randint(1, 4))),
            location=rng.choice(_LOCATIONS),
            favorite=rng.random() > 0.7,
        )
