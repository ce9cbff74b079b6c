"""
utils.py - Pomocne funkcije za generatore

Sadrzi:
    - format_day: datum -> 'Wednesday, November 6'
    - format_time: datum -> '09:00'
    - sort_by_start: sortiranje dogadjaja po pocetku
"""


def format_day(moment):
    """Naslov dana u izlazu. Primjer: 'Wednesday, November 6'"""
    return f"{moment:%A, %B} {moment.day}"


def format_time(moment):
    return moment.strftime("%H:%M")


def sort_by_start(events):
    """Vraca novu listu sortiranu po pocetku (stabilno)."""
    return sorted(events, key=lambda e: e.start)
