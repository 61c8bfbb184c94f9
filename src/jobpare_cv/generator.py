import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from jobpare_cv.binder import TemplateBinder
from jobpare_cv.dispatcher import DispatchOutcome, OutputDispatcher, OutputMode
from jobpare_cv.loader import load_document
from jobpare_cv.validator import validate_document

logger = logging.getLogger(__name__)


class GenerationState(str, Enum):
    VALIDATED = "validated"
    DONE = "done"


class GenerationResult(BaseModel):
    state: GenerationState
    warnings: List[str] = Field(default_factory=list)
    outcome: Optional[DispatchOutcome] = None
    html: Optional[str] = None


class CVGenerator:
    """
    Runs one CV generation request:
    load data -> validate -> (stop if validate_only) -> render -> write output.

    Errors from loading or rendering propagate and abort the run; a failed
    PDF conversion does not (the dispatcher falls back to HTML).
    """

    def __init__(self, binder: Optional[TemplateBinder] = None,
                 dispatcher: Optional[OutputDispatcher] = None):
        self.binder = binder or TemplateBinder()
        self.dispatcher = dispatcher or OutputDispatcher()

    def generate(self, template: Union[str, Path], input: Union[str, Path],
                 output: Union[str, Path, None] = None, html_only: bool = False,
                 validate_only: bool = False) -> GenerationResult:
        logger.info("Starting CV generation...")
        logger.info("Template: %s", template)
        logger.info("Data: %s", input)
        if output:
            logger.info("Output: %s", output)

        logger.info("Loading JSON data...")
        document = load_document(input)

        warnings = validate_document(document)
        for warning in warnings:
            logger.warning("Warning: %s", warning)

        if validate_only:
            logger.info("Data validation completed successfully!")
            return GenerationResult(state=GenerationState.VALIDATED, warnings=warnings)

        logger.info("Loading HTML template...")
        compiled = self.binder.compile(template)

        logger.info("Rendering HTML...")
        html = self.binder.render(compiled, document)

        outcome = self.dispatcher.dispatch(html, output, html_only=html_only)

        logger.info("CV generation completed successfully!")
        if outcome.path is not None:
            logger.info("Your CV is ready: %s", outcome.path)
            if outcome.mode != OutputMode.PDF:
                logger.info('Open it in your browser and use "Print to PDF" for a PDF version.')

        return GenerationResult(state=GenerationState.DONE, warnings=warnings,
                                outcome=outcome, html=html)
