"""
evt2doc - Kompajler za raspored dogadjaja (konferencije, skole, ...)

Pipeline:  tekst -> Lexer -> Parser -> [Event] -> Layout -> Timetable -> Generatori

Svaki korak je Stage (stages.py) sa istim ugovorom run()/run_with(),
pa redoslijed koraka bira pozivatelj (tt2doc.py), a ne sami stage-ovi.

Modul ne sadrzi globalnu konfiguraciju. Opcije svakog stage-a se
prosljedjuju eksplicitno kroz run_with().
"""
