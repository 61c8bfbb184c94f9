import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel

from jobpare_cv.exceptions import ConfigError, OutputWriteError
from jobpare_cv.pdf import PdfConversionResult, PdfRenderer

logger = logging.getLogger(__name__)


class OutputMode(str, Enum):
    NONE = "none"
    HTML = "html"
    PDF = "pdf"
    PDF_FALLBACK_HTML = "pdf_fallback_html"


class DispatchOutcome(BaseModel):
    mode: OutputMode
    path: Optional[Path] = None
    pdf_error: Optional[str] = None


def save_html(html: str, output_path: Union[str, Path]) -> Path:
    """
    Writes HTML content to a file, creating parent directories as needed.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Error saving HTML file: {e}") from e

    logger.info("HTML file generated successfully: %s", output_path)
    return output_path


class OutputDispatcher:
    """Chooses between HTML and PDF output for a rendered CV."""

    def __init__(self, pdf_renderer: Optional[PdfRenderer] = None):
        self._pdf_renderer = pdf_renderer

    @property
    def pdf_renderer(self) -> PdfRenderer:
        # built lazily so HTML-only runs never read browser settings
        if self._pdf_renderer is None:
            self._pdf_renderer = PdfRenderer()
        return self._pdf_renderer

    def dispatch(self, html: str, output_path: Union[str, Path, None] = None,
                 html_only: bool = False) -> DispatchOutcome:
        """
        Persists rendered HTML according to the output path and flags.

        - no output path: nothing is written
        - html_only or '.html': HTML written to the path
        - '.pdf': PDF through the renderer, HTML next to it if that fails
        - anything else: HTML written to '<path>.html'
        """
        if output_path is None or str(output_path) == "":
            logger.debug("No output path given, skipping output")
            return DispatchOutcome(mode=OutputMode.NONE)

        output_path = Path(output_path)
        suffix = output_path.suffix.lower()

        if html_only or suffix == ".html":
            logger.info("Generating HTML file...")
            return DispatchOutcome(mode=OutputMode.HTML, path=save_html(html, output_path))

        if suffix == ".pdf":
            logger.info("Generating PDF...")
            return self._dispatch_pdf(html, output_path)

        logger.info("Generating HTML file (use .pdf extension for PDF output)...")
        html_path = output_path.with_name(output_path.name + ".html")
        return DispatchOutcome(mode=OutputMode.HTML, path=save_html(html, html_path))

    def _dispatch_pdf(self, html: str, output_path: Path) -> DispatchOutcome:
        try:
            renderer = self.pdf_renderer
        except ConfigError as e:
            result = PdfConversionResult.failure(str(e))
        else:
            result = renderer.convert(html, output_path)
        if result.ok:
            return DispatchOutcome(mode=OutputMode.PDF, path=result.path)

        logger.warning("PDF generation failed (%s), falling back to HTML...", result.error)
        html_path = output_path.with_suffix(".html")
        return DispatchOutcome(
            mode=OutputMode.PDF_FALLBACK_HTML,
            path=save_html(html, html_path),
            pdf_error=result.error,
        )
