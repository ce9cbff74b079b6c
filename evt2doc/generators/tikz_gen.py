"""
tikz_gen.py - TikZ (LaTeX) generator kalendara

Generise standalone LaTeX dokument sa TikZ kalendarom: kolone su dani,
redovi su sati, a svaki dogadjaj je jedan \\node cija visina odgovara
trajanju. Raspon dana i sati dolazi iz bounding box-a (layout.py).

Koordinate:
    x = indeks dana + 1 (kolona 1 je prvi dan)
    y = sat.minute u stotinkama sata (09:30 -> 09.50)
"""
import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import RenderError
from ..stages import Stage
from ..templating import load_template, replace
from ..utils import format_day

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "template_tikz.tex"


@dataclass(frozen=True)
class TikzOptions:
    """Opcije za TikZ generator."""
    template_path: Optional[str] = None     # None = podrazumijevani sablon


class TikzGenerator(Stage):
    """Stage: Timetable -> LaTeX izvorni kod sa TikZ kalendarom."""

    Error = RenderError
    Options = TikzOptions

    def apply(self, timetable, options):
        template = load_template(options.template_path, DEFAULT_TEMPLATE)
        box = timetable.box

        first_hour = box.first_hour()
        last_hour = box.last_hour()
        day_count = box.day_count()

        # Mreza: oznake sati, horizontalne i vertikalne linije, naslovi dana
        calendar = self._hour_marks(first_hour, last_hour)
        calendar += self._hour_dividers(first_hour, last_hour, day_count)
        calendar += self._day_dividers(first_hour, last_hour, day_count)
        calendar += self._date_headers(first_hour, box)

        # Jedan node po dogadjaju
        for event in timetable.events:
            calendar += self._event_node(event, box.day_index(event.start))

        logger.debug(f"TikZ: {len(timetable.events)} dogadjaja, {day_count} dana, "
                     f"sati {first_hour}-{last_hour}")
        return replace(template, "CALENDAR", calendar)

    # ------------------------------------------------------------------
    # Dijelovi kalendara
    # ------------------------------------------------------------------

    def _foreach_hour(self, first_hour, last_hour):
        """\\foreach petlja preko svih sati kalendara."""
        return (
            "\n    \\foreach \\time   [evaluate=\\time] in "
            f"{{{first_hour},...,{last_hour}}}"
        )

    def _hour_marks(self, first_hour, last_hour):
        """Oznaka 'hh:00' lijevo od svakog sata."""
        return (
            self._foreach_hour(first_hour, last_hour)
            + "\n        \\node[anchor=east] at (1,\\time) {\\time:00};"
        )

    def _hour_dividers(self, first_hour, last_hour, day_count):
        """Horizontalna linija na svakom satu, sirine day_count kolona."""
        return (
            self._foreach_hour(first_hour, last_hour)
            + f"\n        \\draw (1,\\time) -- ({day_count + 1}, \\time);"
        )

    def _day_dividers(self, first_hour, last_hour, day_count):
        """Vertikalne linije izmedju dana."""
        return (
            "\n    % Draw some day dividers."
            f"\n    \\foreach \\day   [evaluate=\\day] in {{1,...,{day_count + 1}}}"
            f"\n        \\draw (\\day,{first_hour - 1}) -- (\\day,{last_hour});"
        )

    def _date_headers(self, first_hour, box):
        """Naslov iznad svake kolone (dana)."""
        headers = ""
        for col, day in enumerate(box.days(), 1):
            headers += (
                f"\n    \\node[anchor=south] at ({col}.5, {first_hour - 1}.5) "
                f"{{{format_day(day)}}};"
            )
        return headers

    def _event_node(self, event, day_index):
        """Node za jedan dogadjaj: stil po tipu, visina u satima, pozicija."""
        height = event.duration / 60
        y = f"{event.start:%H}.{event.start.minute * 5 // 3:02d}"
        return (
            f"\n    \\node[{event.kind!s}={{{height:.2f}}}{{1}}] "
            f"at ({day_index + 1},{y}) {{{event.short_text()}}};"
        )
