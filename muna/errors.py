#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

class MunaError(Exception):
    """
    Base class for Muna prediction errors.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class UnsupportedValueType(MunaError, TypeError):
    """
    Raised when an object cannot be converted to a prediction value.
    """

    def __init__(self, obj: object):
        super().__init__(
            f"Failed to serialize value because object has an "
            f"unsupported type: `{type(obj).__qualname__}`"
        )
        self.value_type = type(obj)

class UnsupportedDtype(MunaError, ValueError):
    """
    Raised when a value has a data type that cannot be represented in Python.
    """

    def __init__(self, dtype: str, reason: str | None=None):
        message = f"Failed to process value with type `{dtype}` because it is not supported"
        super().__init__(f"{message}: {reason}" if reason else message)
        self.dtype = dtype

class MalformedValueBuffer(MunaError, ValueError):
    """
    Raised when a value buffer does not match its declared data type.
    """

    def __init__(self, dtype: str, reason: str):
        super().__init__(f"Failed to deserialize `{dtype}` value because its buffer is malformed: {reason}")
        self.dtype = dtype

class IncompatiblePredictor(MunaError, ValueError):
    """
    Raised when a predictor signature cannot be adapted to an external API.

    Members:
        tag (str): Predictor tag.
        requirement (str): The unmet requirement.
    """

    def __init__(self, tag: str, *, api: str, requirement: str):
        super().__init__(f"{tag} cannot be used with {api} because {requirement}.")
        self.tag = tag
        self.api = api
        self.requirement = requirement

class PredictionFailed(MunaError, RuntimeError):
    """
    Raised when a prediction reports an error.

    Members:
        tag (str): Predictor tag.
        error (str): Prediction error.
    """

    def __init__(self, tag: str, error: str):
        super().__init__(error)
        self.tag = tag
        self.error = error

class InvalidPredictorOutput(MunaError, RuntimeError):
    """
    Raised when a prediction succeeds but returns an unusable result.
    """

    def __init__(self, tag: str, reason: str):
        super().__init__(f"{tag} returned {reason}")
        self.tag = tag

class StreamingNotSupported(MunaError, RuntimeError):
    """
    Raised when streaming is requested over a prediction path that cannot stream.
    """

    def __init__(self, acceleration: str):
        super().__init__(f"Streaming predictions are not supported with `{acceleration}` acceleration")
        self.acceleration = acceleration
