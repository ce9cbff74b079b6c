#!/usr/bin/env python3
"""
tt2doc.py - Kompajler za raspored dogadjaja (tekst -> TikZ/HTML/LaTeX/PDF)

Ovaj fajl je glavni ulazni punkt za rad sa rasporedima.
Sva podrazumijevana konfiguracija (format, politika gresaka, itd.)
se definise ovdje. Modul evt2doc/ je apstraktan i ne sadrzi globalne
postavke - svaki stage dobija svoje opcije eksplicitno.

Redoslijed stage-ova:
    ParseTimetable -> Layout -> {Tikz,HTML,Abstracts}Generator [-> Latexmk]
"""

import argparse
import logging
import signal
import sys

from evt2doc.errors import Evt2DocError
from evt2doc.generators import (
    AbstractsGenerator,
    AbstractsOptions,
    HTMLGenerator,
    HTMLOptions,
    LatexmkOptions,
    LatexmkStage,
    TikzGenerator,
    TikzOptions,
)
from evt2doc.layout import Layout, compute_bounding_box
from evt2doc.parser import ParseOptions, ParseTimetable
from evt2doc.stages import chain

# Omogucava cist izlaz pri pipe-anju (npr. | head, | grep)
signal.signal(signal.SIGPIPE, signal.SIG_DFL)

logger = logging.getLogger("tt2doc")


# ---------------------------------------------------------------------------
# Podrazumijevana konfiguracija
# ---------------------------------------------------------------------------
# Generatori po nazivu formata. LaTeX formati se mogu dodatno
# prevesti u PDF (--pdf).
FORMATS = {
    "tikz": TikzGenerator,
    "html": HTMLGenerator,
    "abstracts": AbstractsGenerator,
}
LATEX_FORMATS = ("tikz", "abstracts")

# Broj minuta koji odgovara punoj visini kolone u HTML izlazu
HTML_DAY_MINUTES = 8 * 60

# Komanda i argumenti za PDF post-obradu
LATEXMK_COMMAND = "latexmk"
LATEXMK_ARGUMENTS = ("-pdflua",)


def main(argv=None):
    # -------------------------------------------------------------------
    # Definicija CLI argumenata
    # -------------------------------------------------------------------
    parser = argparse.ArgumentParser(
        description="Kompajler za raspored dogadjaja u TikZ/HTML/LaTeX/PDF."
    )

    # Ulaz i izlaz
    parser.add_argument("-i", "--input", required=True,
                        help="Putanja do ulaznog fajla ('-' za stdin)")
    parser.add_argument("-f", "--format", choices=sorted(FORMATS),
                        help="Izlazni format")
    parser.add_argument("-o", "--output",
                        help="Putanja za izlaz (default: stdout)")
    parser.add_argument("--pdf", action="store_true",
                        help="Prevedi LaTeX izlaz u PDF pomocu latexmk")

    # Konfiguracija stage-ova
    parser.add_argument("-t", "--template",
                        help="Putanja do vlastitog sablona za generator")
    parser.add_argument("--skip-invalid", action="store_true",
                        help="Preskoci neispravne blokove umjesto prekida")
    parser.add_argument("--html-day-minutes", type=int, default=HTML_DAY_MINUTES,
                        help=f"Minute koje odgovaraju visini kolone (default: {HTML_DAY_MINUTES})")
    parser.add_argument("--save-temps", action="store_true",
                        help="Sacuvaj pomocne fajlove latexmk-a")

    # Debug i inspekcija
    parser.add_argument("-d", "--dump", action="store_true",
                        help="Ispisi parsirane dogadjaje i bounding box (na stderr ako dokument ide na stdout)")
    parser.add_argument("--log-file", help="Zapisi log i u ovaj fajl")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Detaljan ispis (debug)")

    args = parser.parse_args(argv)

    # Provjera da je specificiran barem jedan izlaz
    if not args.format and not args.dump:
        parser.print_help(sys.stderr)
        print("\nGreska: nije specificiran izlazni format. Koristite -f ili -d.",
              file=sys.stderr)
        return 1
    if args.pdf and args.format not in LATEX_FORMATS:
        parser.error(f"--pdf je moguc samo za formate: {', '.join(LATEX_FORMATS)}")

    setup_logging(args.verbose, args.log_file)

    # -------------------------------------------------------------------
    # 1. Ucitavanje ulaza
    # -------------------------------------------------------------------
    try:
        text = _read_input(args.input)
    except OSError as exc:
        logger.error(f"Greška: ulazni fajl '{args.input}' nije moguce procitati: {exc}")
        return 1

    # -------------------------------------------------------------------
    # 2. Parsiranje (tekst -> lista Event-ova)
    # -------------------------------------------------------------------
    on_error = "skip" if args.skip_invalid else "abort"
    outcome = chain(text, ParseTimetable(), ParseOptions(on_error=on_error))

    if outcome.ok:
        logger.info(f"Parsirano dogadjaja: {len(outcome.value)}")
        if args.dump:
            # Uz -f bez -o dokument ide na stdout, pa dump ide na stderr
            stream = sys.stderr if args.format and not args.output else sys.stdout
            _print_events(outcome.value, stream)

    if not args.format:
        return _finish(outcome)

    # -------------------------------------------------------------------
    # 3. Layout i generisanje izlaza
    # -------------------------------------------------------------------
    outcome = (outcome
               .then(Layout())
               .then(FORMATS[args.format](), _generator_options(args)))

    # -------------------------------------------------------------------
    # 4. PDF post-obrada (opcionalno)
    # -------------------------------------------------------------------
    if args.pdf:
        outcome = outcome.then(LatexmkStage(), LatexmkOptions(
            save_temps=args.save_temps,
            command=LATEXMK_COMMAND,
            arguments=LATEXMK_ARGUMENTS,
        ))

    if not outcome.ok:
        return _finish(outcome)

    # -------------------------------------------------------------------
    # 5. Zapis izlaza
    # -------------------------------------------------------------------
    try:
        _write_output(args.output, outcome.value)
    except OSError as exc:
        logger.error(f"Greška: izlaz '{args.output}' nije moguce zapisati: {exc}")
        return 1
    if args.output:
        logger.info(f"Generisan {args.format}{' (PDF)' if args.pdf else ''}: {args.output}")
    return 0


# ---------------------------------------------------------------------------
# Pomocne funkcije
# ---------------------------------------------------------------------------

def setup_logging(verbose=False, log_file=None):
    """Podesava root logger: kratke poruke na stderr, detaljne u fajl."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    if root.hasHandlers():
        root.handlers.clear()

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(ch)

    if log_file:
        fh = logging.FileHandler(log_file, encoding='utf-8')
        fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s'))
        root.addHandler(fh)
    return root


def _generator_options(args):
    """Opcije za izabrani generator iz CLI argumenata."""
    if args.format == "html":
        return HTMLOptions(template_path=args.template, day_minutes=args.html_day_minutes)
    if args.format == "tikz":
        return TikzOptions(template_path=args.template)
    return AbstractsOptions(template_path=args.template)


def _finish(outcome):
    """Ispisuje gresku neuspjelog stage-a i vraca izlazni kod."""
    if outcome.ok:
        return 0
    error = outcome.error
    if not isinstance(error, Evt2DocError):
        error = Evt2DocError(str(error))
    logger.error(f"Greška: {error}")
    return 1


def _read_input(path):
    if path == "-":
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _write_output(path, value):
    """Zapisuje tekst ili bytes (PDF) u fajl ili na stdout."""
    if path is None:
        if isinstance(value, bytes):
            sys.stdout.buffer.write(value)
        else:
            sys.stdout.write(value)
        return
    if isinstance(value, bytes):
        with open(path, 'wb') as f:
            f.write(value)
    else:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(value)


def _print_events(events, stream=None):
    """Ispisuje parsirane dogadjaje i bounding box (default: stdout).
    Koristi se sa -d/--dump flagom za debug i inspekciju."""
    stream = stream or sys.stdout
    print("=== DOGADJAJI ===", file=stream)
    for event in events:
        print(event, file=stream)

    print("\n--- BOUNDING BOX ---", file=stream)
    box = compute_bounding_box(events)
    if box is None:
        print("(nema dogadjaja)", file=stream)
    else:
        print(box, file=stream)
        print(f"Dana: {box.day_count()}, sati: {box.first_hour()}-{box.last_hour()}",
              file=stream)

    print("=================", file=stream)


if __name__ == "__main__":
    sys.exit(main())
