"""
HTML -> PDF through headless Chromium (Playwright).

convert() never raises: a failed or timed-out conversion is returned as a
PdfConversionResult with ok=False so the caller can fall back to HTML.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

from playwright.async_api import async_playwright
from pydantic import BaseModel

from jobpare_cv.config import Settings, get_settings

logger = logging.getLogger(__name__)

PAGE_MARGINS = {"top": "0mm", "right": "0mm", "bottom": "0mm", "left": "0mm"}
BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class PdfConversionResult(BaseModel):
    ok: bool
    path: Optional[Path] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, path: Path) -> "PdfConversionResult":
        return cls(ok=True, path=path)

    @classmethod
    def failure(cls, error: str) -> "PdfConversionResult":
        return cls(ok=False, error=error)


class PdfRenderer:
    """Prints one HTML document to an A4 PDF per call."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @property
    def timeout_ms(self) -> float:
        return self.settings.pdf_timeout * 1000

    def convert(self, html: str, output_path: Union[str, Path]) -> PdfConversionResult:
        """
        Converts HTML content to a PDF file.

        A fresh browser is launched for the single page and closed again on
        every exit path. The whole conversion, printing included, must finish
        within the configured timeout.

        Args:
            html (str): Rendered HTML.
            output_path (str | Path): Where to write the PDF.

        Returns:
            PdfConversionResult: ok=True with the path, or ok=False with the error.
        """
        output_path = Path(output_path)
        timeout = self.settings.pdf_timeout
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            asyncio.run(asyncio.wait_for(self._print(html, output_path), timeout))
        except asyncio.TimeoutError:
            logger.error("Error generating PDF: timed out after %ss", timeout)
            return PdfConversionResult.failure(f"PDF conversion timed out after {timeout}s")
        except Exception as e:
            logger.error("Error generating PDF: %s", e)
            return PdfConversionResult.failure(str(e) or type(e).__name__)

        logger.info("PDF generated successfully: %s", output_path)
        return PdfConversionResult.success(output_path)

    async def _print(self, html: str, output_path: Path) -> None:
        async with async_playwright() as p:
            browser = None
            try:
                browser = await p.chromium.launch(
                    headless=self.settings.headless,
                    executable_path=self.settings.chrome_path,
                    args=BROWSER_ARGS,
                    timeout=self.timeout_ms,
                )
                page = await browser.new_page()
                page.set_default_timeout(self.timeout_ms)
                # wait for web fonts and images referenced by the template
                await page.set_content(html, wait_until="networkidle", timeout=self.timeout_ms)
                await page.pdf(
                    path=str(output_path),
                    format="A4",
                    margin=PAGE_MARGINS,
                    print_background=True,
                    prefer_css_page_size=True,
                )
            finally:
                if browser is not None:
                    await browser.close()
