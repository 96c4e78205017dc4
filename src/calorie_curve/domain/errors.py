"""Error taxonomy for nutrition lookups and suggestions."""


class CalorieCurveError(Exception):
    """Base error for request-terminal failures."""


class ValidationError(CalorieCurveError):
    """Caller input is missing required fields."""


class GeneratorError(CalorieCurveError):
    """The text generator call failed, timed out or is unavailable."""


class GeneratorNotConfiguredError(GeneratorError):
    """No text generator is configured on the server."""


class UpstreamFormatError(CalorieCurveError):
    """Generator output could not be parsed into the expected JSON shape."""


class SchemaError(CalorieCurveError):
    """Generator output parsed but lacks required fields."""
