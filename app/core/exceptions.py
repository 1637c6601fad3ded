class PsychometricsError(Exception):
    """Base class for errors raised by the psychometrics pipeline."""


class ModelQueryError(PsychometricsError):
    """The model provider could not produce a usable completion."""


class InvalidRawScoresError(PsychometricsError):
    """The inbound raw-score map has the wrong shape or out-of-range values."""

    def __init__(self, message: str, error: str = "Invalid score value"):
        super().__init__(message)
        self.message = message
        self.error = error


class UnknownInventoryError(InvalidRawScoresError):
    """An inventory name outside of bigfive/mbti/disc was requested."""

    def __init__(self, message: str):
        super().__init__(message, error="Invalid inventory name")
