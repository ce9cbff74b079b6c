"""
Zajednicke fixture-e za testove evt2doc.
"""
from datetime import datetime

import pytest

from evt2doc.models import Event, EventKind


def make_block(description=None, **fields):
    """Sastavlja tekst jednog bloka iz polja zaglavlja.
    Primjer: make_block(type='talk', date='2024-11-06 09:00', duration='45')"""
    header = "\n".join(f"{key}: {value}" for key, value in fields.items())
    if description is None:
        return header
    return f"{header}\n\n{description}"


def make_event(start, duration=60, kind=EventKind.TALK, title="Predavanje", **kwargs):
    if isinstance(start, str):
        start = datetime.strptime(start, "%Y-%m-%d %H:%M")
    return Event(kind=kind, title=title, start=start, duration=duration, **kwargs)


@pytest.fixture
def timetable_text():
    """Dokument sa tri dana i svim tipovima dogadjaja."""
    return "\n---\n".join([
        make_block(
            "Uvod u **raspored** dogadjaja.",
            type="talk", title="Opening", lang="en",
            date="2024-11-06 09:00", duration="45", speakers="[Ada Lovelace]",
        ),
        make_block(type="break", title="Kafa", date="2024-11-06 09:45", duration="15"),
        make_block(
            "Predavanje na francuskom.",
            type="talk", title="Les graphes", lang="fr",
            date="2024-11-06 10:00", duration="60", speakers="[Ana, Bojan, Cedo]",
        ),
        make_block(type="meal", title="Rucak", date="2024-11-07 12:00", duration="90"),
        make_block(type="fun", title="Izlet", date="2024-11-08 14:00", duration="120"),
    ]) + "\n"
