class ConversionError(TypeError):
    """A foreign structure could not be converted into a Structure"""


class ConfigurationError(ValueError):
    """Invalid or missing parameters for building a SHIP basis"""


class EvaluationError(RuntimeError):
    """Evaluating the basis on an atomic environment failed"""
