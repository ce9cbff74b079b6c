"""
templating.py - Jednostavni sabloni sa {{ KLJUC }} placeholderima

Generatori ucitavaju sablon (fajl korisnika ili podrazumijevani iz
evt2doc/templates/) i u njega upisuju generisani sadrzaj.
"""
from importlib import resources

from .errors import TemplateError


def placeholder(key):
    return "{{ " + key + " }}"


def replace(template, key, value):
    """Zamjenjuje svaki '{{ key }}' u sablonu sa value.
    Ako placeholder ne postoji, sablon nije validan (TemplateError)."""
    full_key = placeholder(key)
    if full_key not in template:
        raise TemplateError(f"placeholder `{full_key}` nije pronadjen u sablonu")
    return template.replace(full_key, value)


def load_template(path, default):
    """Ucitava sablon sa putanje, ili podrazumijevani sablon `default`
    (ime fajla u evt2doc/templates/) ako putanja nije data."""
    try:
        if path is None:
            return resources.files(__package__).joinpath('templates').joinpath(default).read_text(
                encoding='utf-8'
            )
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as exc:
        raise TemplateError(f"Greska pri citanju sablona '{path or default}': {exc}") from exc
