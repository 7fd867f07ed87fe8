class AnalysisError(Exception):
    """Base class for failures inside the analysis pipeline."""


class ExternalCallFailure(AnalysisError):
    """The generative text service could not be reached or returned an error."""


class MalformedResponse(AnalysisError):
    """The generative text service answered, but not with usable JSON."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw
