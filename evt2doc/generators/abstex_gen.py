"""
abstex_gen.py - LaTeX generator knjizice sazetaka (abstracts)

Za svaki dan generise \\section sa datumom, a za svako predavanje i
zabavni dogadjaj (talk, fun) \\subsection sa naslovom, vremenom,
govornicima i opisom. Obroci, pauze i prevoz se ne ispisuju.

Placeholderi u sablonu: BEGIN_DATE, END_DATE, ABSTRACTS.
"""
from dataclasses import dataclass
from typing import Optional

from ..errors import RenderError
from ..models import EventKind
from ..stages import Stage
from ..templating import load_template, replace
from ..utils import format_day, format_time, sort_by_start

DEFAULT_TEMPLATE = "template_abstex.tex"

# Tipovi dogadjaja koji imaju sazetak
ABSTRACT_KINDS = (EventKind.TALK, EventKind.FUN)


@dataclass(frozen=True)
class AbstractsOptions:
    template_path: Optional[str] = None


class AbstractsGenerator(Stage):
    """Stage: Timetable -> LaTeX dokument sa sazecima predavanja."""

    Error = RenderError
    Options = AbstractsOptions

    def apply(self, timetable, options):
        template = load_template(options.template_path, DEFAULT_TEMPLATE)
        box = timetable.box

        abstracts = ""
        current_day = None
        for event in sort_by_start(timetable.events):
            # Novi dan -> nova sekcija
            if event.start.date() != current_day:
                current_day = event.start.date()
                abstracts += f"\\section{{{format_day(event.start)}}}\n"

            if event.kind in ABSTRACT_KINDS:
                abstracts += self._talk_title(event)
                abstracts += self._talk_subtitle(event)
                if event.description:
                    abstracts += f"\\paragraph{{}} {event.description}"
                abstracts += "\n\n"

        out = replace(template, "BEGIN_DATE", format_day(box.first_day()))
        out = replace(out, "END_DATE", format_day(box.last_day()))
        return replace(out, "ABSTRACTS", abstracts)

    def _talk_title(self, event):
        """\\subsection sa babel makroom jezika (npr. \\fra) ispred naslova."""
        language = f"\\{event.language.alpha_3} " if event.language else ""
        return f"\\subsection{{{language}{event.title}}}\n"

    def _talk_subtitle(self, event):
        """Vrijeme pocetka i govornici u kurzivu."""
        line = format_time(event.start)
        if event.speakers:
            line += f" - {event.speakers_string()}"
        return f"\\paragraph{{}} \\textit{{{line}}}\n"
