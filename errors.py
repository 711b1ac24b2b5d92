class AnalysisError(Exception):
    """Base class for failures of a CV analysis batch."""


class ValidationError(AnalysisError):
    """Request is missing the job description or the CV files."""


class ServiceUnavailable(AnalysisError):
    """The language-model service could not be reached or answered with an error."""
