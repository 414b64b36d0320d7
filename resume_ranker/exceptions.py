class ResumeRankerError(RuntimeError):
    """Base class for errors raised by the analysis engine"""


class AnalysisError(ResumeRankerError):
    """Raised when a batch of resumes cannot be analyzed.

    The only expected cause is a job description that yields no usable
    keywords; unexpected failures inside the engine are wrapped in it too.
    """


class ConfigError(ResumeRankerError):
    """Raised when an analyzer config file cannot be read or is malformed"""


class ResultNotFoundError(ResumeRankerError):
    """Raised when a stored analysis id is unknown"""


class DuplicateResultError(ResumeRankerError):
    """Raised when an analysis id is stored twice"""
