"""
latexmk.py - Post-obrada LaTeX izlaza u PDF pomocu latexmk

Zapisuje LaTeX izvorni kod (iz TikzGenerator ili AbstractsGenerator) u
.tex fajl, pokrece latexmk i vraca sadrzaj generisanog PDF-a.

Bez input_path opcije radi u privremenom direktoriju koji se brise
nakon poziva (osim ako je save_temps postavljen).
"""
import logging
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from ..errors import PostProcessError
from ..stages import Stage

logger = logging.getLogger(__name__)

TEX_NAME = "timetable.tex"


@dataclass(frozen=True)
class LatexmkOptions:
    """Opcije za poziv latexmk-a."""
    input_path: Optional[str] = None        # gdje zapisati .tex (None = privremeni dir)
    save_temps: bool = False                # ne brisi pomocne fajlove
    command: str = "latexmk"
    arguments: Tuple[str, ...] = ("-pdflua",)


class LatexmkStage(Stage):
    """Stage: LaTeX izvorni kod -> PDF (bytes)."""

    Error = PostProcessError
    Options = LatexmkOptions

    def apply(self, latex, options):
        if options.input_path:
            workdir = None
            tex_path = Path(options.input_path)
        else:
            workdir = Path(tempfile.mkdtemp(prefix="evt2doc-"))
            tex_path = workdir / TEX_NAME

        try:
            try:
                tex_path.write_text(latex, encoding="utf-8")
            except OSError as exc:
                raise PostProcessError(f"Ne mogu zapisati '{tex_path}': {exc}") from exc

            self._run_latexmk(tex_path, options)

            pdf_path = tex_path.with_suffix(".pdf")
            try:
                return pdf_path.read_bytes()
            except OSError as exc:
                raise PostProcessError(f"PDF '{pdf_path}' nije generisan: {exc}") from exc
        finally:
            if options.save_temps:
                logger.info(f"Pomocni fajlovi sacuvani u: {tex_path.parent}/")
            else:
                self._cleanup(tex_path, workdir)

    def _run_latexmk(self, tex_path, options):
        """Pokrece latexmk u direktoriju .tex fajla."""
        args = [options.command, *options.arguments, tex_path.name]
        logger.debug(f"Pokrecem: {' '.join(args)}")
        try:
            result = subprocess.run(
                args,
                cwd=str(tex_path.parent),
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise PostProcessError(f"Alat '{options.command}' nije pronadjen") from exc

        if result.returncode != 0:
            tail = "\n".join((result.stdout or "").splitlines()[-10:])
            raise PostProcessError(
                f"{options.command} je zavrsio sa kodom {result.returncode}\n{tail}"
            )

    def _cleanup(self, tex_path, workdir):
        """Brise privremeni direktorij, ili sve '<ime>.*' fajlove pored .tex-a."""
        if workdir is not None:
            shutil.rmtree(workdir, ignore_errors=True)
            return
        for path in tex_path.parent.glob(f"{tex_path.stem}.*"):
            if not path.is_file():
                continue
            try:
                path.unlink()
            except OSError as exc:
                logger.warning(f"Upozorenje: ne mogu obrisati privremeni fajl '{path}': {exc}")
