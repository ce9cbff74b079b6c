"""
errors.py - Hijerarhija gresaka za evt2doc

Sve greske nasljedjuju Evt2DocError, tako da pozivatelj (tt2doc.py) moze
uhvatiti bilo koju gresku kompajlera na jednom mjestu.

    Evt2DocError
    +-- ParsingError          (greske gramatike, jedan blok)
    |   +-- InvalidField
    |   +-- InvalidKind
    |   +-- InvalidDateShape
    |   +-- CouldNotParseDuration
    |   +-- SettingNotFound
    |   +-- BlockError        (omotac sa pozicijom bloka u dokumentu)
    +-- StageError            (greske stage-ova u pipeline-u)
        +-- NoEventProvided
        +-- RenderError
        |   +-- TemplateError
        +-- PostProcessError
"""

DATE_FORMAT = "%Y-%m-%d %H:%M"


class Evt2DocError(Exception):
    """Bazna greska za sve greske kompajlera."""

    pass


# ---------------------------------------------------------------------------
# Greske parsiranja
# ---------------------------------------------------------------------------
class ParsingError(Evt2DocError, ValueError):
    """Parsiranje jednog bloka nije uspjelo. Nema djelimicnog Event-a."""

    pass


class InvalidField(ParsingError):
    """Linija zaglavlja nije validan 'kljuc: vrijednost' par."""

    def __init__(self, line):
        self.line = line
        super().__init__(f"linija `{line}` nije validno polje (ocekivano 'kljuc: vrijednost')")


class InvalidKind(ParsingError):
    """Tip dogadjaja nije jedan od poznatih (talk, meal, break, fun, transport)."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"`{token}` nije validan tip dogadjaja")


class InvalidDateShape(ParsingError):
    """Datum ne odgovara formatu DATE_FORMAT."""

    def __init__(self, value, pattern=DATE_FORMAT):
        self.value = value
        self.pattern = pattern
        super().__init__(f"datum `{value}` ne odgovara ocekivanom formatu: `{pattern}`")


class CouldNotParseDuration(ParsingError):
    """Trajanje nije nenegativan cijeli broj minuta.
    Originalna greska je dostupna kao __cause__: ValueError za los
    zapis ili preveliku vrijednost, OverflowError ako kraj dogadjaja
    nije predstavljiv datum."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"trajanje `{value}` nije cijeli broj minuta")


class SettingNotFound(ParsingError):
    """Obavezno polje (date, duration) nedostaje u zaglavlju."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"polje `{name}` nije pronadjeno")


class BlockError(ParsingError):
    """Greska jednog bloka sa pozicijom u dokumentu.

    block je redni broj bloka (od 1), line je prva linija bloka u
    dokumentu. Originalna greska je u atributu error."""

    def __init__(self, error, block, line):
        self.error = error
        self.block = block
        self.line = line
        super().__init__(f"blok {block} (linija {line}): {error}")


# ---------------------------------------------------------------------------
# Greske stage-ova
# ---------------------------------------------------------------------------
class StageError(Evt2DocError):
    """Bazna greska za stage-ove pipeline-a."""

    pass


class NoEventProvided(StageError):
    """Lista dogadjaja je prazna, nema bounding box-a za iscrtavanje."""

    def __init__(self):
        super().__init__("nije proslijedjen nijedan dogadjaj")


class RenderError(StageError):
    """Generator nije uspio proizvesti izlaz."""

    pass


class TemplateError(RenderError):
    """Sablon nije moguce procitati ili u njemu nedostaje placeholder."""

    pass


class PostProcessError(StageError):
    """Vanjski alat (latexmk) nije proizveo ocekivani izlaz."""

    pass
