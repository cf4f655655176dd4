#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from ...types import Dtype, Parameter

RESPONSE_FORMAT = "openai.chat.completions.response_format"
REASONING_EFFORT = "openai.chat.completions.reasoning_effort"
MAX_OUTPUT_TOKENS = "openai.chat.completions.max_output_tokens"
TEMPERATURE = "openai.chat.completions.temperature"
TOP_P = "openai.chat.completions.top_p"
FREQUENCY_PENALTY = "openai.chat.completions.frequency_penalty"
PRESENCE_PENALTY = "openai.chat.completions.presence_penalty"

class Annotations:
    """
    Parameters that bind predictor inputs to OpenAI chat completion request fields.
    """

    @classmethod
    def ResponseFormat(cls, *, name: str="", description: str | None=None, **kwargs) -> Parameter:
        """
        Response format parameter.
        """
        return _create_parameter(name, Dtype.dict, RESPONSE_FORMAT, description, **kwargs)

    @classmethod
    def ReasoningEffort(cls, *, name: str="", description: str | None=None, **kwargs) -> Parameter:
        """
        Reasoning effort parameter.
        """
        return _create_parameter(name, Dtype.string, REASONING_EFFORT, description, **kwargs)

    @classmethod
    def MaxOutputTokens(cls, *, name: str="", description: str | None=None, **kwargs) -> Parameter:
        """
        Maximum output tokens parameter.
        """
        return _create_parameter(name, kwargs.pop("type", Dtype.int32), MAX_OUTPUT_TOKENS, description, **kwargs)

    @classmethod
    def SamplingTemperature(cls, *, name: str="", description: str | None=None, **kwargs) -> Parameter:
        """
        Sampling temperature parameter.
        """
        return _create_parameter(name, kwargs.pop("type", Dtype.float32), TEMPERATURE, description, **kwargs)

    @classmethod
    def TopP(cls, *, name: str="", description: str | None=None, **kwargs) -> Parameter:
        """
        Nucleus sampling parameter.
        """
        return _create_parameter(name, kwargs.pop("type", Dtype.float32), TOP_P, description, **kwargs)

    @classmethod
    def FrequencyPenalty(cls, *, name: str="", description: str | None=None, **kwargs) -> Parameter:
        """
        Token frequency penalty parameter.
        """
        return _create_parameter(name, kwargs.pop("type", Dtype.float32), FREQUENCY_PENALTY, description, **kwargs)

    @classmethod
    def PresencePenalty(cls, *, name: str="", description: str | None=None, **kwargs) -> Parameter:
        """
        Token presence penalty parameter.
        """
        return _create_parameter(name, kwargs.pop("type", Dtype.float32), PRESENCE_PENALTY, description, **kwargs)

def _create_parameter(
    name: str,
    dtype: Dtype,
    denotation: str,
    description: str | None,
    **kwargs
) -> Parameter:
    return Parameter(
        name=name,
        type=dtype,
        description=description,
        denotation=denotation,
        optional=kwargs.pop("optional", True),
        **kwargs
    )
