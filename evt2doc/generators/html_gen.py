"""
html_gen.py - HTML generator rasporeda

Generise standalone HTML stranicu: jedna kolona (<div class="day">) po
danu iz bounding box-a, a u njoj dogadjaji tog dana sortirani po pocetku.
Opis dogadjaja se pise u Markdown-u i pretvara u HTML.

Visina dogadjaja je procenat od HTMLOptions.day_minutes (podrazumijevano
8 sati), tako da je raspored citljiv i bez apsolutnog pozicioniranja.
"""
import html
import logging
from dataclasses import dataclass
from typing import Optional

import markdown

from ..errors import RenderError
from ..models import EventKind
from ..stages import Stage
from ..templating import load_template, replace
from ..utils import format_day, format_time

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "template.html"

# Zastavice za jezike predavanja (ostali jezici dobijaju '?')
LANGUAGE_FLAGS = {
    "fr": "\U0001F1EB\U0001F1F7",
    "en": "\U0001F1EC\U0001F1E7",
}


@dataclass(frozen=True)
class HTMLOptions:
    """Opcije za HTML generator."""
    template_path: Optional[str] = None
    day_minutes: int = 8 * 60       # broj minuta koji odgovara visini 100%


class HTMLGenerator(Stage):
    """Stage: Timetable -> HTML stranica sa rasporedom po danima."""

    Error = RenderError
    Options = HTMLOptions

    def apply(self, timetable, options):
        if options.day_minutes <= 0:
            raise RenderError(f"day_minutes mora biti pozitivan, dobijeno {options.day_minutes}")
        template = load_template(options.template_path, DEFAULT_TEMPLATE)

        calendar = ""
        for day in timetable.box.days():
            calendar += self._day_html(day, timetable.events_on(day), options)

        return replace(template, "CALENDAR", calendar)

    # ------------------------------------------------------------------
    # Generisanje HTML-a
    # ------------------------------------------------------------------

    def _day_html(self, day, events, options):
        """Kolona jednog dana. Vrijeme pocetka se ispisuje samo ako se
        razlikuje od kraja prethodnog dogadjaja."""
        out = '<div class="day">'
        out += f"<h2>{format_day(day)}</h2>"

        previous_end = None
        for event in events:
            if previous_end is None or previous_end != event.start:
                out += f'<span class="time">{format_time(event.start)}</span>'
            out += self._event_html(event, options)
            out += f'<span class="time">{format_time(event.end)}</span>'
            previous_end = event.end

        out += "</div>\n"
        return out

    def _event_html(self, event, options):
        """Jedan dogadjaj: naslov, govornici (za predavanja) i opis."""
        height = event.duration * 100 // options.day_minutes
        out = f'\t<div class="event {event.kind!s}" style="height: {height}%;">'

        out += '<div class="title">'
        if event.language is not None:
            out += self._flag(event.language) + " "
        out += f"<b>{html.escape(event.title)}</b><br>"
        if event.kind is EventKind.TALK and event.speakers:
            out += f"<span>{html.escape(event.speakers_string())}</span>"
        out += "</div>\n"

        out += f'<div class="abstract">{self._description_html(event.description)}</div>'
        out += "</div>"
        return out

    def _flag(self, language):
        return LANGUAGE_FLAGS.get(language.alpha_2, "?")

    def _description_html(self, description):
        """Markdown opis -> HTML. Bez opisa vraca prazan string."""
        if not description:
            return ""
        return markdown.markdown(description, extensions=["tables"])
