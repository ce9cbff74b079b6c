"""
lexer.py - Leksicka analiza rasporeda dogadjaja

Dijeli sirovi tekst na blokove (jedan blok = jedan dogadjaj), blok na
zaglavlje i opis, a zaglavlje na 'kljuc: vrijednost' parove.
Blokovi se koriste kao ulaz za Parser.

Format dokumenta:
    type: talk
    title: Naslov predavanja
    date: 2024-11-06 09:00
    duration: 45

    Opis (proizvoljan tekst, moze biti Markdown).
    ---
    type: break
    ...
"""
import re

from .errors import InvalidField

# Linija koja razdvaja blokove: tacno '---' (razmaci se toleriraju)
DELIMITER = re.compile(r'^[ \t]*---[ \t]*$')

# Prazna linija izmedju zaglavlja i opisa
PARAGRAPH = re.compile(r'\n[ \t]*\n')


class Block:
    """Jedan blok dokumenta sa rednim brojem i brojem prve linije."""
    def __init__(self, number, text, line):
        self.number = number
        self.text = text
        self.line = line

    def __repr__(self):
        return f"Block({self.number}, line={self.line}, {self.text[:30]!r})"


class Lexer:
    """Dijeli dokument na blokove po DELIMITER linijama.

    Blokovi koji sadrze samo whitespace (npr. '---' na pocetku ili
    kraju fajla) nisu dogadjaji i preskacu se."""

    def __init__(self, text):
        """Tokenizira ulazni tekst u listu Block objekata."""
        self.blocks = []
        current = []
        start = 1

        lines = text.replace('\r\n', '\n').split('\n')
        for line_num, line in enumerate(lines, 1):
            if DELIMITER.match(line):
                self._push(current, start)
                current = []
                start = line_num + 1
            else:
                current.append(line)
        self._push(current, start)

    def _push(self, lines, start):
        """Dodaje blok ako nije prazan. Linija bloka je prva neprazna."""
        text = "\n".join(lines)
        if not text.strip():
            return
        offset = next(i for i, line in enumerate(lines) if line.strip())
        self.blocks.append(Block(len(self.blocks) + 1, text, start + offset))


# ---------------------------------------------------------------------------
# Dijelovi jednog bloka
# ---------------------------------------------------------------------------

def split_sections(text):
    """Razdvaja blok na (zaglavlje, opis).

    Zaglavlje i opis su odvojeni praznom linijom. Bez prazne linije
    cijeli blok je zaglavlje, a opis je None. Prazan opis je None."""
    trimmed = text.replace('\r\n', '\n').strip()
    parts = PARAGRAPH.split(trimmed, maxsplit=1)
    if len(parts) == 1:
        return trimmed, None
    header, description = parts[0].strip(), parts[1].strip()
    return header, description or None


def split_pairs(header):
    """Pretvara zaglavlje u rjecnik {kljuc: vrijednost}.

    Svaka neprazna linija se dijeli na prvoj dvotacki; kljuc i vrijednost
    se trimaju. Linija bez dvotacke je greska (InvalidField) koja navodi
    tu liniju doslovno. Ako se kljuc ponavlja, vazi zadnja vrijednost."""
    pairs = {}
    for line in header.split('\n'):
        if not line.strip():
            continue
        key, sep, value = line.partition(':')
        if not sep:
            raise InvalidField(line)
        pairs[key.strip()] = value.strip()
    return pairs
