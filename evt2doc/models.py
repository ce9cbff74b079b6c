"""
models.py - Model dogadjaja

Definise sve objekte koji nastaju parsiranjem jednog bloka rasporeda:
EventKind (tip dogadjaja), Language (jezik predavanja) i Event.

Event nastaje iskljucivo u parser.py i nakon toga se ne mijenja
(frozen dataclass). Generatori citaju samo ove objekte.
"""
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Tuple

import pycountry

from .errors import InvalidKind

# Oznaka koja se dodaje skracenom tekstu
ELLIPSIS = "..."

# Naslov koji dobija dogadjaj bez 'title' polja
DEFAULT_TITLE = "(no title)"

# Maksimalna duzina teksta u celiji kalendara
SHORT_TEXT_LENGTH = 30


# ---------------------------------------------------------------------------
# Tip dogadjaja
# ---------------------------------------------------------------------------
class EventKind(Enum):
    """Tip dogadjaja. Vrijednost je kanonski token iz ulaznog fajla
    i ujedno CSS/TikZ klasa u generatorima."""
    TALK = "talk"
    MEAL = "meal"
    BREAK = "break"
    FUN = "fun"
    TRANSPORT = "transport"

    @classmethod
    def parse(cls, token):
        """Parsira token bez obzira na velika/mala slova.
        Nepoznat token je greska (InvalidKind), nema tihog defaulta."""
        try:
            return cls(token.strip().lower())
        except ValueError:
            raise InvalidKind(token) from None

    def __str__(self):
        return self.value


# ---------------------------------------------------------------------------
# Jezik dogadjaja
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Language:
    """Jezik predavanja prema ISO 639.

    alpha_3 se koristi kao babel makro u LaTeX izlazu (npr. \\fra)."""
    alpha_2: str    # "fr"
    alpha_3: str    # "fra"
    name: str       # "French"

    @classmethod
    def from_code(cls, code):
        """Dekodira 2-slovni ISO 639-1 kod. Vraca None ako kod nije
        prepoznat - jezik je opcionalan i nikad nije greska."""
        if not code or not re.fullmatch(r'[A-Za-z]{2}', code.strip()):
            return None
        try:
            record = pycountry.languages.get(alpha_2=code.strip().lower())
        except LookupError:
            record = None
        if record is None:
            return None
        return cls(record.alpha_2, record.alpha_3, record.name)

    def __str__(self):
        return self.alpha_2


# ---------------------------------------------------------------------------
# Skracivanje teksta
# ---------------------------------------------------------------------------
def cut_text(text, length):
    """Skracuje tekst na najvise `length` znakova, sa ELLIPSIS na kraju.

    Ako je `length` manji ili jednak duzini oznake, uzima se `length`
    znakova plus oznaka, da bi ostao vidljiv barem dio teksta.
    Primjer: cut_text('Konferencija', 8) -> 'Konfe...'
             cut_text('Konferencija', 2) -> 'Ko...'"""
    if len(text) <= length:
        return text
    if length > len(ELLIPSIS):
        return text[:length - len(ELLIPSIS)] + ELLIPSIS
    return text[:length] + ELLIPSIS


# ---------------------------------------------------------------------------
# Event
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Event:
    """Jedan dogadjaj iz rasporeda sa validiranim poljima.

    start je naive datetime i tumaci se kao lokalno vrijeme procesa.
    Bez tzinfo: svi dogadjaji dijele istu zonu, a
    generatori ispisuju samo datum i sat, bez konverzije."""
    kind: EventKind
    title: str
    start: datetime                     # lokalno vrijeme (naive)
    duration: int                       # minute, >= 0
    description: Optional[str] = None
    language: Optional[Language] = None
    speakers: Tuple[str, ...] = ()

    @property
    def end(self) -> datetime:
        return self.start + timedelta(minutes=self.duration)

    def short_title(self, length):
        return cut_text(self.title, length)

    def speakers_string(self):
        return ", ".join(self.speakers)

    def short_text(self):
        """Tekst za celiju kalendara.

        Za predavanja: ime govornika ('A', 'A and B', 'A et al.'),
        a bez govornika skraceni naslov. Ostali tipovi uvijek
        koriste skraceni naslov."""
        if self.kind is EventKind.TALK and self.speakers:
            if len(self.speakers) == 1:
                return self.speakers[0]
            if len(self.speakers) == 2:
                return f"{self.speakers[0]} and {self.speakers[1]}"
            return f"{self.speakers[0]} et al."
        return self.short_title(SHORT_TEXT_LENGTH)
