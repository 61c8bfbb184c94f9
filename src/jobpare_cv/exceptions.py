"""
Errors raised while generating a CV.

Everything here is fatal to a generation run. A failed PDF conversion is not
an exception: the renderer returns a failed PdfConversionResult and the
dispatcher falls back to HTML.
"""


class CVGeneratorError(Exception):
    """Base class for all jobpare-cv errors."""


class InputError(CVGeneratorError):
    pass


class InputNotFound(InputError):
    pass


class InputMalformed(InputError):
    pass


class InputLoadError(InputError):
    """Any other failure while reading the input (permissions, encoding...)."""


class TemplateError(CVGeneratorError):
    pass


class TemplateNotFound(TemplateError):
    pass


class TemplateCompileError(TemplateError):
    pass


class RenderError(TemplateError):
    pass


class OutputWriteError(CVGeneratorError):
    pass


class RoleDataNotFound(CVGeneratorError):
    pass


class ConfigError(CVGeneratorError):
    pass
