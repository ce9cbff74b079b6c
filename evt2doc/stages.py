"""
stages.py - Kompajlerski stage-ovi i njihovo ulancavanje

Svaki korak kompajliranja (parsiranje, layout, generisanje, post-obrada)
je Stage sa istim ugovorom:

    stage.run(data)               -> Outcome
    stage.run_with(data, options) -> Outcome

Outcome je ili uspjeh (value = rezultat stage-a) ili neuspjeh
(error = greska tipa Stage.Error). run() je isto sto i run_with()
sa podrazumijevanim opcijama stage-a (Stage.Options()).

Stage-ovi se ulancavaju s lijeva na desno:

    outcome = (chain(text, ParseTimetable())
               .then(Layout())
               .then(TikzGenerator(), TikzOptions(template_path=...)))

Ako jedan stage ne uspije, sljedeci se vise ne pozivaju i Outcome nosi
gresku prvog neuspjelog stage-a. Stage-ovi ne dijele stanje - sve sto
sljedeci stage treba mora doci kroz ulaz ili opcije.
"""
import logging

from .errors import Evt2DocError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Outcome (uspjeh ili neuspjeh jednog stage-a)
# ---------------------------------------------------------------------------
class Outcome:
    """Rezultat stage-a: value ako je uspio, error ako nije."""

    __slots__ = ('value', 'error')

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        if error is None:
            raise ValueError("neuspjeh mora nositi gresku")
        return cls(error=error)

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """Vraca rezultat ili podize gresku neuspjelog stage-a."""
        if self.error is not None:
            raise self.error
        return self.value

    def then(self, stage, options=None):
        """Pokrece sljedeci stage nad rezultatom ovog.
        Neuspjeh se prosljedjuje dalje bez pozivanja stage-a."""
        if not self.ok:
            return self
        return chain(self.value, stage, options)

    def map_error(self, convert):
        """Pretvara gresku u zajednicki tip (na mjestu ulancavanja)."""
        if self.ok:
            return self
        return Outcome.failure(convert(self.error))

    def __repr__(self):
        if self.ok:
            return f"Outcome.success({self.value!r})"
        return f"Outcome.failure({self.error!r})"


# ---------------------------------------------------------------------------
# Bazna klasa za stage-ove
# ---------------------------------------------------------------------------
class Stage:
    """Bazna klasa za sve stage-ove.

    Podklasa implementira apply(data, options) koja vraca rezultat ili
    podize gresku tipa Error. Options je dataclass sa podrazumijevanim
    vrijednostima (ili None ako stage nema konfiguraciju).
    Greske koje nisu tipa Error su bugovi i ne hvataju se."""

    Error = Evt2DocError
    Options = None

    def apply(self, data, options):
        raise NotImplementedError

    def default_options(self):
        return self.Options() if self.Options is not None else None

    def run(self, data):
        return self.run_with(data, self.default_options())

    def run_with(self, data, options):
        name = type(self).__name__
        logger.debug(f"Stage {name}: pokrecem")
        try:
            value = self.apply(data, options)
        except self.Error as exc:
            logger.debug(f"Stage {name}: neuspjeh ({exc})")
            return Outcome.failure(exc)
        return Outcome.success(value)


# ---------------------------------------------------------------------------
# Ulancavanje
# ---------------------------------------------------------------------------

def chain(value, stage, options=None):
    """Pokrece stage nad vrijednoscu. Bez opcija koristi stage.run()."""
    if options is None:
        return stage.run(value)
    return stage.run_with(value, options)


def run_pipeline(value, *steps):
    """Pokrece niz stage-ova s lijeva na desno.

    Svaki korak je stage ili (stage, options) par.
    Vraca Outcome zadnjeg pokrenutog stage-a."""
    outcome = Outcome.success(value)
    for step in steps:
        stage, options = step if isinstance(step, tuple) else (step, None)
        outcome = outcome.then(stage, options)
    return outcome
