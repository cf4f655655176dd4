#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from dataclasses import dataclass
from pydantic import TypeAdapter
from typing import overload, Iterator, Literal

from ...errors import InvalidPredictorOutput
from ...services import PredictorService
from ...types import Acceleration, Dtype, Parameter, Prediction, Value
from ..annotations import FLOATING_DTYPES, INTEGER_DTYPES, get_output, get_parameter, get_required_input
from ..predictions import PredictionService
from ..remote import RemoteAcceleration
from .annotations import (
    FREQUENCY_PENALTY, MAX_OUTPUT_TOKENS, PRESENCE_PENALTY, REASONING_EFFORT,
    RESPONSE_FORMAT, TEMPERATURE, TOP_P
)
from .delegate import DelegateCache, retrieve_signature
from .schema import ChatCompletion, ChatCompletionChunk, Message, ReasoningEffort, _MessageDict, _ResponseFormatDict
from .stream import (
    aggregate_chat_completion, create_chat_completion_chunk,
    gather_chat_completion_outputs, parse_chat_completion_output
)

API = "OpenAI chat completions API"

class ChatCompletionService:
    """
    Create chat completions.
    """

    def __init__(
        self,
        predictors: PredictorService,
        predictions: PredictionService
    ):
        self.__predictors = predictors
        self.__predictions = predictions
        self.__cache = DelegateCache(self.__create_delegate)

    @overload
    def create(
        self,
        *,
        messages: list[Message | _MessageDict],
        model: str,
        stream: Literal[False]=False,
        response_format: _ResponseFormatDict | None=None,
        reasoning_effort: ReasoningEffort | None=None,
        max_completion_tokens: int | None=None,
        temperature: float | None=None,
        top_p: float | None=None,
        frequency_penalty: float | None=None,
        presence_penalty: float | None=None,
        acceleration: Acceleration | RemoteAcceleration="remote_auto"
    ) -> ChatCompletion: ...

    @overload
    def create(
        self,
        *,
        messages: list[Message | _MessageDict],
        model: str,
        stream: Literal[True],
        response_format: _ResponseFormatDict | None=None,
        reasoning_effort: ReasoningEffort | None=None,
        max_completion_tokens: int | None=None,
        temperature: float | None=None,
        top_p: float | None=None,
        frequency_penalty: float | None=None,
        presence_penalty: float | None=None,
        acceleration: Acceleration | RemoteAcceleration="remote_auto"
    ) -> Iterator[ChatCompletionChunk]: ...

    def create(
        self,
        *,
        messages: list[Message | _MessageDict],
        model: str,
        stream: bool=False,
        response_format: _ResponseFormatDict | None=None,
        reasoning_effort: ReasoningEffort | None=None,
        max_completion_tokens: int | None=None,
        temperature: float | None=None,
        top_p: float | None=None,
        frequency_penalty: float | None=None,
        presence_penalty: float | None=None,
        acceleration: Acceleration | RemoteAcceleration="remote_auto"
    ) -> ChatCompletion | Iterator[ChatCompletionChunk]:
        """
        Create a chat completion.

        Request fields that the predictor does not declare an input for are ignored.

        Parameters:
            messages (list): Messages for the conversation so far.
            model (str): Chat model predictor tag.
            stream (bool): Whether to stream responses.
            response_format (dict): Response format.
            reasoning_effort (str): Reasoning effort for reasoning models.
            max_completion_tokens (int): Maximum completion tokens.
            temperature (float): Sampling temperature.
            top_p (float): Nucleus sampling coefficient.
            frequency_penalty (float): Token frequency penalty.
            presence_penalty (float): Token presence penalty.
            acceleration (Acceleration | RemoteAcceleration): Prediction acceleration.

        Returns:
            ChatCompletion | Iterator: Chat completion, or a stream of chat completion chunks when `stream` is `True`.
        """
        delegate = self.__cache.get(model)
        return delegate(
            messages=messages,
            stream=stream,
            acceleration=acceleration,
            response_format=response_format,
            reasoning_effort=reasoning_effort,
            max_completion_tokens=max_completion_tokens,
            temperature=temperature,
            top_p=top_p,
            frequency_penalty=frequency_penalty,
            presence_penalty=presence_penalty
        )

    def __create_delegate(self, tag: str) -> _ChatCompletionDelegate:
        signature = retrieve_signature(self.__predictors, tag, api=API)
        # Check that the single required input is `list[Message]`
        input_param = get_required_input(signature, tag=tag, api=API, dtype=Dtype.list)
        # Get optional inputs
        option_lookups = {
            "response_format": (Dtype.dict, RESPONSE_FORMAT),
            "reasoning_effort": (Dtype.string, REASONING_EFFORT),
            "max_completion_tokens": (INTEGER_DTYPES, MAX_OUTPUT_TOKENS),
            "temperature": (FLOATING_DTYPES, TEMPERATURE),
            "top_p": (FLOATING_DTYPES, TOP_P),
            "frequency_penalty": (FLOATING_DTYPES, FREQUENCY_PENALTY),
            "presence_penalty": (FLOATING_DTYPES, PRESENCE_PENALTY),
        }
        options = dict[str, Parameter]()
        for field, (dtype, denotation) in option_lookups.items():
            _, param = get_parameter(signature.inputs, dtype=dtype, denotation=denotation)
            if param is not None:
                options[field] = param
        # Get chat completion output
        completion_idx, _ = get_output(
            signature,
            tag=tag,
            api=API,
            dtype=Dtype.dict,
            titles={ "ChatCompletion", "ChatCompletionChunk" },
            capability="chat completion"
        )
        return _ChatCompletionDelegate(
            tag=tag,
            predictions=self.__predictions,
            input_param=input_param,
            options=options,
            completion_idx=completion_idx
        )

@dataclass(frozen=True)
class _ChatCompletionDelegate:
    tag: str
    predictions: PredictionService
    input_param: Parameter
    options: dict[str, Parameter]
    completion_idx: int

    def __call__(
        self,
        *,
        messages: list[Message | _MessageDict],
        stream: bool,
        acceleration: str,
        **options: Value
    ) -> ChatCompletion | Iterator[ChatCompletionChunk]:
        messages = _MESSAGES_ADAPTER.validate_python(messages)
        inputs: dict[str, Value] = {
            self.input_param.name: _MESSAGES_ADAPTER.dump_python(messages, mode="json", by_alias=True)
        }
        for field, value in options.items():
            param = self.options.get(field)
            if value is not None and param is not None:
                inputs[param.name] = value
        if stream:
            predictions = self.predictions.stream(self.tag, inputs=inputs, acceleration=acceleration)
            return self._stream(predictions)
        if self.predictions.supports_streaming(acceleration):
            outputs = list(gather_chat_completion_outputs(
                self.predictions.stream(self.tag, inputs=inputs, acceleration=acceleration),
                tag=self.tag,
                output_idx=self.completion_idx
            ))
        else:
            prediction = self.predictions.create(self.tag, inputs=inputs, acceleration=acceleration)
            outputs = [parse_chat_completion_output(prediction, tag=self.tag, output_idx=self.completion_idx)]
        if not outputs:
            raise InvalidPredictorOutput(self.tag, "no chat completion outputs")
        return aggregate_chat_completion(outputs)

    def _stream(self, predictions: Iterator[Prediction]) -> Iterator[ChatCompletionChunk]:
        outputs = gather_chat_completion_outputs(predictions, tag=self.tag, output_idx=self.completion_idx)
        try:
            for output in outputs:
                yield create_chat_completion_chunk(output)
        finally:
            outputs.close()

_MESSAGES_ADAPTER = TypeAdapter(list[Message])
