#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from muna import InvalidPredictorOutput, PredictionFailed
from muna.beta.openai import ChatCompletion, ChatCompletionAggregator, ChatCompletionChunk
from muna.beta.openai.stream import aggregate_chat_completion, create_chat_completion_chunk, parse_chat_completion_output
import pytest

from conftest import create_prediction

def _create_chunk(content, *, index=0, role=None, finish_reason=None, usage=None) -> ChatCompletionChunk:
    return ChatCompletionChunk.model_validate({
        "id": "chatcmpl_1",
        "model": "@test/chat",
        "created": 1767225600,
        "choices": [{
            "index": index,
            "delta": { "role": role, "content": content },
            "finish_reason": finish_reason
        }],
        "usage": usage
    })

def test_aggregate_chunks():
    aggregator = ChatCompletionAggregator()
    aggregator.push(_create_chunk("The capital", role="assistant"))
    aggregator.push(_create_chunk(" of France"))
    aggregator.push(_create_chunk(None))
    aggregator.push(_create_chunk(" is Paris.", finish_reason="stop"))
    completion = aggregator.completion()
    assert completion.object == "chat.completion"
    assert completion.id == "chatcmpl_1"
    assert len(completion.choices) == 1
    assert completion.choices[0].message.role == "assistant"
    assert completion.choices[0].message.content == "The capital of France is Paris."
    assert completion.choices[0].finish_reason == "stop"

def test_aggregate_usage():
    aggregator = ChatCompletionAggregator()
    aggregator.push(_create_chunk("a", usage={ "completion_tokens": 1, "prompt_tokens": 2, "total_tokens": 3 }))
    aggregator.push(_create_chunk("b"))
    aggregator.push(_create_chunk("c", usage={ "completion_tokens": 4, "prompt_tokens": 5, "total_tokens": 9 }))
    usage = aggregator.completion().usage
    assert (usage.completion_tokens, usage.prompt_tokens, usage.total_tokens) == (5, 7, 12)

def test_aggregate_defaults():
    aggregator = ChatCompletionAggregator()
    aggregator.push(_create_chunk("Hi"))
    choice = aggregator.completion().choices[0]
    assert choice.message.role == "assistant"
    assert choice.finish_reason == "stop"

def test_aggregate_first_finish_reason():
    aggregator = ChatCompletionAggregator()
    aggregator.push(_create_chunk("Hi", finish_reason="length"))
    aggregator.push(_create_chunk("", finish_reason="stop"))
    assert aggregator.completion().choices[0].finish_reason == "length"

def test_aggregate_multiple_choices():
    aggregator = ChatCompletionAggregator()
    aggregator.push(_create_chunk("B1", index=1))
    aggregator.push(_create_chunk("A1", index=0))
    aggregator.push(_create_chunk("B2", index=1))
    choices = aggregator.completion().choices
    assert [choice.index for choice in choices] == [0, 1]
    assert [choice.message.content for choice in choices] == ["A1", "B1B2"]

def test_aggregate_without_chunks():
    with pytest.raises(ValueError):
        ChatCompletionAggregator().completion()

def test_push_returns_chunk():
    chunk = _create_chunk("Hi")
    assert ChatCompletionAggregator().push(chunk) is chunk

def test_aggregate_full_completions():
    first = aggregate_chat_completion([_create_chunk("Hi")])
    second = first.model_copy(update={ "id": "chatcmpl_2" })
    assert aggregate_chat_completion([first, second]) is second

def test_coerce_completion_to_chunk():
    completion = aggregate_chat_completion([_create_chunk("Hello", role="assistant", finish_reason="stop")])
    chunk = create_chat_completion_chunk(completion)
    assert chunk.object == "chat.completion.chunk"
    assert chunk.choices[0].delta.content == "Hello"
    assert chunk.choices[0].finish_reason == "stop"

def test_parse_chat_completion_output():
    output = _create_chunk("Hi").model_dump(mode="json")
    result = parse_chat_completion_output(create_prediction("@test/chat", [output]), tag="@test/chat", output_idx=0)
    assert isinstance(result, ChatCompletionChunk)
    output = aggregate_chat_completion([_create_chunk("Hi")]).model_dump(mode="json")
    result = parse_chat_completion_output(create_prediction("@test/chat", [output]), tag="@test/chat", output_idx=0)
    assert isinstance(result, ChatCompletion)

def test_parse_failed_prediction():
    prediction = create_prediction("@test/chat", None, error="Out of memory")
    with pytest.raises(PredictionFailed) as ex:
        parse_chat_completion_output(prediction, tag="@test/chat", output_idx=0)
    assert ex.value.error == "Out of memory"

def test_parse_prediction_with_empty_error():
    output = _create_chunk("Hi").model_dump(mode="json")
    prediction = create_prediction("@test/chat", [output], error="")
    with pytest.raises(PredictionFailed):
        parse_chat_completion_output(prediction, tag="@test/chat", output_idx=0)

def test_parse_invalid_chat_completion_output():
    prediction = create_prediction("@test/chat", [{ "text": "Hi" }])
    with pytest.raises(InvalidPredictorOutput):
        parse_chat_completion_output(prediction, tag="@test/chat", output_idx=0)
    with pytest.raises(InvalidPredictorOutput):
        parse_chat_completion_output(create_prediction("@test/chat", []), tag="@test/chat", output_idx=0)
