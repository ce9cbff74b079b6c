"""
parser.py - Sintaksna analiza rasporeda dogadjaja

Prima blokove iz Lexer-a i pretvara svaki u Event.
Svaki blok se parsira nezavisno; prva greska u bloku prekida parsiranje
tog bloka (nema djelimicnog Event-a).

Podrzana polja zaglavlja:
    type      - opciono, talk/meal/break/fun/transport (default: talk)
    title     - opciono, slobodan tekst (default: '(no title)')
    lang      - opciono, ISO 639-1 kod (nepoznat kod se ignorise)
    date      - obavezno, 'YYYY-MM-DD HH:MM' (lokalno vrijeme)
    duration  - obavezno, trajanje u minutama (0 .. 2**32-1, samo cifre)
    speakers  - opciono, lista odvojena zarezima, npr. [A, B]
Ostala polja se ignorisu.

Ponasanje kod neispravnog bloka bira pozivatelj (on_error):
    'abort' - prvi neispravan blok prekida cijeli dokument (BlockError)
    'skip'  - neispravan blok se preskace uz upozorenje, ostali se parsiraju
"""
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from .errors import (
    DATE_FORMAT,
    BlockError,
    CouldNotParseDuration,
    InvalidDateShape,
    ParsingError,
    SettingNotFound,
)
from .lexer import Lexer, split_pairs, split_sections
from .models import DEFAULT_TITLE, Event, EventKind, Language
from .stages import Stage

logger = logging.getLogger(__name__)

ON_ERROR_POLICIES = ('abort', 'skip')

# Trajanje: nenegativan cijeli broj minuta (32-bitni, bez znaka)
DURATION = re.compile(r'[0-9]+')
MAX_DURATION = 2**32 - 1


@dataclass(frozen=True)
class ParseOptions:
    """Opcije za ParseTimetable stage."""
    on_error: str = 'abort'     # 'abort' ili 'skip'


# ---------------------------------------------------------------------------
# Parsiranje jednog bloka
# ---------------------------------------------------------------------------

def parse_event(text):
    """Parsira jedan blok u Event. Podize ParsingError podklasu."""
    header, description = split_sections(text)
    settings = split_pairs(header)

    if 'type' in settings:
        kind = EventKind.parse(settings['type'])
    else:
        kind = EventKind.TALK

    language = Language.from_code(settings.get('lang'))
    title = settings.get('title') or DEFAULT_TITLE

    start = _parse_date(settings)
    duration = _parse_duration(settings, start)
    speakers = _parse_speakers(settings.get('speakers', ''))

    return Event(
        kind=kind,
        title=title,
        start=start,
        duration=duration,
        description=description,
        language=language,
        speakers=speakers,
    )


def _parse_date(settings):
    if 'date' not in settings:
        raise SettingNotFound('date')
    value = settings['date']
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise InvalidDateShape(value) from None


def _parse_duration(settings, start):
    """Trajanje u minutama: samo ASCII cifre, najvise MAX_DURATION,
    i kraj dogadjaja mora biti predstavljiv datum."""
    if 'duration' not in settings:
        raise SettingNotFound('duration')
    value = settings['duration']
    try:
        if not DURATION.fullmatch(value):
            raise ValueError(f"nije nenegativan cijeli broj: {value!r}")
        duration = int(value)
        if duration > MAX_DURATION:
            raise ValueError(f"trajanje vece od {MAX_DURATION} minuta")
    except ValueError as exc:
        raise CouldNotParseDuration(value) from exc
    try:
        start + timedelta(minutes=duration)
    except OverflowError as exc:
        raise CouldNotParseDuration(value) from exc
    return duration


def _parse_speakers(value):
    """'[A, B, ,C]' -> ('A', 'B', 'C')"""
    cleaned = value.replace('[', '').replace(']', '')
    return tuple(s.strip() for s in cleaned.split(',') if s.strip())


# ---------------------------------------------------------------------------
# Parsiranje cijelog dokumenta
# ---------------------------------------------------------------------------
class Parser:
    """Parsira listu blokova iz Lexer-a u listu Event-ova.

    Greske preskocenih blokova (on_error='skip') ostaju u self.errors
    kao BlockError objekti."""

    def __init__(self, blocks):
        self.blocks = blocks
        self.errors = []

    def parse(self, on_error='abort'):
        """Parsira sve blokove i vraca listu Event-ova."""
        if on_error not in ON_ERROR_POLICIES:
            raise ValueError(
                f"Nepoznata politika '{on_error}', ocekivano: {', '.join(ON_ERROR_POLICIES)}"
            )

        events = []
        self.errors = []
        for block in self.blocks:
            try:
                events.append(parse_event(block.text))
            except ParsingError as exc:
                error = BlockError(exc, block.number, block.line)
                if on_error == 'abort':
                    raise error from exc
                logger.warning(f"Upozorenje (linija {block.line}): {exc}. "
                               f"Preskačem blok {block.number}.")
                self.errors.append(error)

        logger.debug(f"Parsirano {len(events)} dogadjaja iz {len(self.blocks)} blokova")
        return events


def parse(text, on_error='abort'):
    """Parsira cijeli dokument u listu Event-ova."""
    return Parser(Lexer(text).blocks).parse(on_error)


class ParseTimetable(Stage):
    """Stage: tekst dokumenta -> lista Event-ova."""

    Error = ParsingError
    Options = ParseOptions

    def apply(self, text, options):
        return parse(text, options.on_error)
