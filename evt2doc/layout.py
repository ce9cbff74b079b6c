"""
layout.py - Bounding box dogadjaja (layout za generatore)

Za listu dogadjaja racuna najmanji prozor (dani x sati) koji ih sve
sadrzi. Svi generatori koriste isti prozor da odrede velicinu izlaza.

Gornji lijevi ugao je najraniji datum u kombinaciji sa najranijim satom
pocetka (bilo kojeg dana), a donji desni najkasniji datum u kombinaciji
sa najkasnijim satom zavrsetka. Datum i sat se prate odvojeno, tako da
svi dani u kalendaru dijele isti raspon sati.

Primjer: 06.11. 09:00-10:00 i 08.11. 08:00-08:30
    top_left     = 06.11. 08:00
    bottom_right = 08.11. 10:00
"""
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import List, Optional, Tuple

from .errors import NoEventProvided
from .models import Event
from .stages import Stage


# ---------------------------------------------------------------------------
# BoundingBox
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class BoundingBox:
    """Prozor (dani x sati) koji sadrzi sve dogadjaje."""
    top_left: datetime
    bottom_right: datetime

    def first_day(self) -> datetime:
        """Prvi dan u 00:00."""
        return datetime.combine(self.top_left.date(), time())

    def last_day(self) -> datetime:
        """Zadnji dan u 00:00."""
        return datetime.combine(self.bottom_right.date(), time())

    def day_count(self) -> int:
        """Broj dana (ukljucivo) izmedju prvog i zadnjeg dana.
        Racuna se razlikom datuma, pa radi i preko granice mjeseca."""
        return (self.bottom_right.date() - self.top_left.date()).days + 1

    def day_index(self, moment: datetime) -> int:
        """Indeks dana (od 0) u kojem je dati trenutak."""
        return (moment.date() - self.top_left.date()).days

    def days(self) -> List[datetime]:
        first = self.first_day()
        return [first + timedelta(days=i) for i in range(self.day_count())]

    def first_hour(self) -> int:
        return self.top_left.hour

    def last_hour(self) -> int:
        """Sat zavrsetka, zaokruzen na gore ako ima minuta."""
        return self.bottom_right.hour + (1 if self.bottom_right.minute else 0)


def _boundary(first, second, pick):
    """Kombinuje sat i datum, svaki izabran nezavisno (min ili max)."""
    return datetime.combine(
        pick(first.date(), second.date()),
        pick(first.time(), second.time()),
    )


def top_left_boundary(first, second):
    """Najraniji dan u najraniji sat od dva trenutka.
    Primjer: (06.11. 09:00, 08.11. 08:00) -> 06.11. 08:00"""
    return _boundary(first, second, min)


def bottom_right_boundary(first, second):
    """Najkasniji dan u najkasniji sat od dva trenutka.
    Primjer: (06.11. 09:00, 08.11. 08:00) -> 08.11. 09:00"""
    return _boundary(first, second, max)


def compute_bounding_box(events) -> Optional[BoundingBox]:
    """Racuna bounding box za listu dogadjaja.
    Za praznu listu vraca None (nema prozora, ni praznog)."""
    if not events:
        return None

    top_left = events[0].start
    bottom_right = events[0].end
    for event in events:
        top_left = top_left_boundary(top_left, event.start)
        bottom_right = bottom_right_boundary(bottom_right, event.end)

    return BoundingBox(top_left, bottom_right)


# ---------------------------------------------------------------------------
# Timetable (ulaz za generatore)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Timetable:
    """Dogadjaji zajedno sa njihovim bounding box-om."""
    events: Tuple[Event, ...]
    box: BoundingBox

    def events_on(self, day: datetime) -> List[Event]:
        """Dogadjaji koji pocinju datog dana, sortirani po vremenu."""
        return sorted(
            (e for e in self.events if e.start.date() == day.date()),
            key=lambda e: e.start.time(),
        )


class Layout(Stage):
    """Stage: lista Event-ova -> Timetable. Prazna lista je greska."""

    Error = NoEventProvided

    def apply(self, events, options):
        box = compute_bounding_box(events)
        if box is None:
            raise NoEventProvided()
        return Timetable(tuple(events), box)
