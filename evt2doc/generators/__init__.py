"""
generators - Izlazni generatori i post-obrada rasporeda

Dostupni stage-ovi:
    TikzGenerator       - LaTeX/TikZ kalendar (Timetable -> str)
    HTMLGenerator       - HTML raspored po danima (Timetable -> str)
    AbstractsGenerator  - LaTeX knjizica sazetaka (Timetable -> str)
    LatexmkStage        - LaTeX -> PDF pomocu latexmk (str -> bytes)
"""
from .abstex_gen import AbstractsGenerator, AbstractsOptions
from .html_gen import HTMLGenerator, HTMLOptions
from .latexmk import LatexmkOptions, LatexmkStage
from .tikz_gen import TikzGenerator, TikzOptions
