#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from pydantic import AliasChoices, BaseModel, Field
from typing import Literal

from .value import Dtype

ParameterDenotation = Literal[
    "audio", "audio.speed", "audio.voice",
    "embedding", "embedding.dims",
    "openai.chat.completions.frequency_penalty",
    "openai.chat.completions.max_output_tokens",
    "openai.chat.completions.presence_penalty",
    "openai.chat.completions.reasoning_effort",
    "openai.chat.completions.response_format",
    "openai.chat.completions.temperature",
    "openai.chat.completions.top_p",
]

class EnumerationMember(BaseModel):
    """
    Parameter enumeration member.

    Members:
        name (str): Enumeration member name.
        value (str | int): Enumeration member value.
    """
    name: str = Field(description="Enumeration member name.")
    value: str | int = Field(description="Enumeration member value.")

class Parameter(BaseModel):
    """
    Predictor parameter.

    Members:
        name (str): Parameter name.
        type (Dtype): Parameter type. This is `None` if the type is unknown or unsupported by Muna.
        description (str): Parameter description.
        denotation (str): Parameter denotation for specialized data types.
        optional (bool): Whether the parameter is optional.
        range (tuple): Parameter value range for numeric parameters.
        enumeration (list): Parameter value choices for enumeration parameters.
        value_schema (dict): Parameter JSON schema. This is only populated for `list` and `dict` parameters.
        sample_rate (int): Audio sample rate in Hertz.
    """
    name: str = Field(description="Parameter name.")
    type: Dtype | None = Field(
        default=None,
        description="Parameter type. This is `None` if the type is unknown or unsupported by Muna."
    )
    description: str | None = Field(
        default=None,
        description="Parameter description."
    )
    denotation: ParameterDenotation | str | None = Field(
        default=None,
        description="Parameter denotation for specialized data types."
    )
    optional: bool | None = Field(
        default=None,
        description="Whether the parameter is optional."
    )
    range: tuple[float, float] | None = Field(
        default=None,
        description="Parameter value range for numeric parameters."
    )
    enumeration: list[EnumerationMember] | None = Field(
        default=None,
        description="Parameter value choices for enumeration parameters."
    )
    value_schema: dict[str, object] | None = Field(
        default=None,
        description="Parameter JSON schema. This is only populated for `list` and `dict` parameters.",
        serialization_alias="schema",
        validation_alias=AliasChoices("schema", "value_schema")
    )
    sample_rate: int | None = Field(
        default=None,
        description="Audio sample rate in Hertz.",
        serialization_alias="sampleRate",
        validation_alias=AliasChoices("sample_rate", "sampleRate")
    )

    @classmethod
    def Audio(
        cls,
        *,
        name: str="",
        description: str | None=None,
        sample_rate: int,
        **kwargs
    ) -> Parameter:
        """
        Audio parameter.
        """
        return Parameter(
            name=name,
            type=Dtype.float32,
            description=description,
            denotation="audio",
            sample_rate=sample_rate,
            **kwargs
        )

    @classmethod
    def AudioSpeed(
        cls,
        *,
        name: str="",
        description: str | None=None,
        min: float | None=None,
        max: float | None=None,
        **kwargs
    ) -> Parameter:
        """
        Audio speed parameter.
        """
        return Parameter(
            name=name,
            type=kwargs.pop("type", Dtype.float32),
            description=description,
            denotation="audio.speed",
            range=(min, max) if min is not None and max is not None else None,
            **kwargs
        )

    @classmethod
    def AudioVoice(
        cls,
        *,
        name: str="",
        description: str | None=None,
        **kwargs
    ) -> Parameter:
        """
        Audio voice parameter.
        """
        return Parameter(
            name=name,
            type=Dtype.string,
            description=description,
            denotation="audio.voice",
            **kwargs
        )

    @classmethod
    def Embedding(
        cls,
        *,
        name: str="",
        description: str | None=None,
        **kwargs
    ) -> Parameter:
        """
        Embedding matrix parameter.
        """
        return Parameter(
            name=name,
            type=Dtype.float32,
            description=description,
            denotation="embedding",
            **kwargs
        )

    @classmethod
    def EmbeddingDims(
        cls,
        *,
        name: str="",
        description: str | None=None,
        min: int | None=None,
        max: int | None=None,
        **kwargs
    ) -> Parameter:
        """
        Embedding Matryoshka dimensions parameter.
        """
        return Parameter(
            name=name,
            type=kwargs.pop("type", Dtype.int32),
            description=description,
            denotation="embedding.dims",
            range=(min, max) if min is not None and max is not None else None,
            **kwargs
        )
