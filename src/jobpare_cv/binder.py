"""
Template binding: compile an HTML template once, render it against CV data.

Each TemplateBinder owns its Jinja2 environment, so helpers and the compile
cache are never shared between binders.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from jinja2 import ChainableUndefined, Environment, Template, TemplateSyntaxError

from jobpare_cv.exceptions import RenderError, TemplateCompileError, TemplateNotFound

logger = logging.getLogger(__name__)


def _item_text(item: Any) -> str:
    if item is None:
        return ""
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    return str(item)


def join(value: Any) -> str:
    """
    Join a list into 'a, b, c'. Anything that is not a list renders as ''.

    Items are written as they read in JSON: null is empty text, booleans are
    true/false and 2.0 is 2.
    """
    if not isinstance(value, (list, tuple)):
        return ""
    return ", ".join(_item_text(item) for item in value)


class CompiledTemplate:
    """A compiled template. Only a TemplateBinder knows how to render it."""

    def __init__(self, name: str, template: Template):
        self.name = name
        self._template = template

    def __repr__(self) -> str:
        return f"CompiledTemplate({self.name!r})"


class TemplateBinder:
    def __init__(self):
        # No loader: templates are compiled from their text.
        # Missing values render as empty text at any depth, e.g. personal_info.name
        self.env = Environment(
            autoescape=True,
            undefined=ChainableUndefined,
        )
        self.env.globals["join"] = join
        self._cache: Dict[Tuple[str, str], CompiledTemplate] = {}

    def compile(self, template_path: Union[str, Path]) -> CompiledTemplate:
        """
        Loads and compiles an HTML template file.

        Args:
            template_path (str | Path): Path to the template file.

        Returns:
            CompiledTemplate: Reusable compiled template.

        Raises:
            TemplateNotFound: If the file does not exist.
            TemplateCompileError: If the file cannot be read or does not compile.
        """
        path = Path(template_path)
        try:
            source = path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise TemplateNotFound(f"Template file '{path}' not found.") from e
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateCompileError(f"Error loading template: {e}") from e

        return self.compile_source(source, name=str(path))

    def compile_source(self, source: str, name: str = "<string>") -> CompiledTemplate:
        """Compiles template text. Identical (name, source) pairs are compiled once."""
        key = (name, source)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            template = self.env.from_string(source)
        except TemplateSyntaxError as e:
            raise TemplateCompileError(
                f"Error loading template: {e.message} (line {e.lineno})"
            ) from e
        except Exception as e:
            raise TemplateCompileError(f"Error loading template: {e}") from e

        compiled = CompiledTemplate(name, template)
        self._cache[key] = compiled
        logger.debug("Compiled template %s", name)
        return compiled

    def render(self, compiled: CompiledTemplate, document: Any) -> str:
        """
        Renders CV data through a compiled template.

        The document's top-level keys become template variables.

        Raises:
            RenderError: If the template cannot be applied to the data.
        """
        if not isinstance(document, dict):
            raise RenderError(
                f"Error rendering template: CV data must be a JSON object, got {type(document).__name__}"
            )

        try:
            return compiled._template.render(document)
        except Exception as e:
            raise RenderError(f"Error rendering template: {e}") from e

    def render_source(self, source: str, document: Any, name: Optional[str] = None) -> str:
        """Compile (or reuse) ``source`` and render it in one step."""
        return self.render(self.compile_source(source, name or "<string>"), document)
