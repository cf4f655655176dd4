#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from collections.abc import Iterable, Iterator
from pydantic import TypeAdapter, ValidationError

from ...errors import InvalidPredictorOutput, PredictionFailed
from ...types import Prediction
from .schema import (
    ChatCompletion, ChatCompletionChunk, Choice, DeltaMessage,
    Message, StreamChoice, Usage
)

class ChatCompletionAggregator:
    """
    Fold a sequence of chat completion chunks into a single chat completion.

    Chunks are grouped by choice index in arrival order. Each folded choice
    concatenates the content of its deltas, takes its role from the first
    delta, and takes its finish reason from the first chunk that sets one.
    Token usage is summed across all chunks.
    """

    def __init__(self):
        self.__chunks = list[ChatCompletionChunk]()
        self.__choices = dict[int, list[StreamChoice]]()

    def push(self, chunk: ChatCompletionChunk) -> ChatCompletionChunk:
        """
        Add a chunk to the aggregator.

        Parameters:
            chunk (ChatCompletionChunk): Chat completion chunk.

        Returns:
            ChatCompletionChunk: The same chunk.
        """
        self.__chunks.append(chunk)
        for choice in chunk.choices:
            self.__choices.setdefault(choice.index, []).append(choice)
        return chunk

    def completion(self) -> ChatCompletion:
        """
        Create the chat completion from all chunks pushed so far.

        Returns:
            ChatCompletion: Chat completion.
        """
        if not self.__chunks:
            raise ValueError("Failed to create chat completion because no chunks were received")
        first_chunk = self.__chunks[0]
        choices = [
            _create_choice(index, self.__choices[index])
            for index in sorted(self.__choices)
        ]
        usages = [chunk.usage or Usage() for chunk in self.__chunks]
        usage = Usage(
            completion_tokens=sum(usage.completion_tokens for usage in usages),
            prompt_tokens=sum(usage.prompt_tokens for usage in usages),
            total_tokens=sum(usage.total_tokens for usage in usages)
        )
        return ChatCompletion(
            id=first_chunk.id,
            model=first_chunk.model,
            created=first_chunk.created,
            choices=choices,
            usage=usage
        )

def aggregate_chat_completion(
    outputs: Iterable[ChatCompletion | ChatCompletionChunk]
) -> ChatCompletion:
    """
    Create a chat completion from a sequence of predictor outputs.
    When every output is a full completion, the last one is returned.
    """
    outputs = list(outputs)
    if outputs and all(isinstance(output, ChatCompletion) for output in outputs):
        return outputs[-1]
    aggregator = ChatCompletionAggregator()
    for output in outputs:
        aggregator.push(create_chat_completion_chunk(output))
    return aggregator.completion()

def create_chat_completion_chunk(output: ChatCompletion | ChatCompletionChunk) -> ChatCompletionChunk:
    """
    Coerce a predictor output into a chat completion chunk.
    """
    if isinstance(output, ChatCompletionChunk):
        return output
    return ChatCompletionChunk(
        id=output.id,
        model=output.model,
        created=output.created,
        choices=[StreamChoice(
            index=choice.index,
            delta=DeltaMessage(role=choice.message.role, content=choice.message.content),
            finish_reason=choice.finish_reason
        ) for choice in output.choices],
        usage=output.usage
    )

def gather_chat_completion_outputs(
    predictions: Iterator[Prediction],
    *,
    tag: str,
    output_idx: int
) -> Iterator[ChatCompletion | ChatCompletionChunk]:
    """
    Extract the chat completion output from each prediction in a stream.
    The prediction stream is closed when this generator is closed.
    """
    try:
        for prediction in predictions:
            yield parse_chat_completion_output(prediction, tag=tag, output_idx=output_idx)
    finally:
        close = getattr(predictions, "close", None)
        if close is not None:
            close()

def parse_chat_completion_output(
    prediction: Prediction,
    *,
    tag: str,
    output_idx: int
) -> ChatCompletion | ChatCompletionChunk:
    """
    Parse the chat completion output of a prediction.
    """
    if prediction.error is not None:
        raise PredictionFailed(tag, prediction.error)
    if not prediction.results or len(prediction.results) <= output_idx:
        raise InvalidPredictorOutput(tag, "a prediction without a chat completion result")
    output = prediction.results[output_idx]
    try:
        return _OUTPUT_ADAPTER.validate_python(output)
    except ValidationError as ex:
        raise InvalidPredictorOutput(tag, f"an invalid chat completion: {output}") from ex

def _create_choice(index: int, choices: list[StreamChoice]) -> Choice:
    first_delta = choices[0].delta
    role = first_delta.role if first_delta is not None and first_delta.role else "assistant"
    content = "".join(
        choice.delta.content
        for choice in choices
        if choice.delta is not None and choice.delta.content is not None
    )
    finish_reason = next(
        (choice.finish_reason for choice in choices if choice.finish_reason is not None),
        "stop"
    )
    return Choice(
        index=index,
        message=Message(role=role, content=content),
        finish_reason=finish_reason
    )

_OUTPUT_ADAPTER = TypeAdapter(ChatCompletion | ChatCompletionChunk)
