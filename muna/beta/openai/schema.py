#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from pydantic import BaseModel, Field
from typing import Literal, TypedDict

ChatRole = Literal["assistant", "developer", "system", "user"]

DeltaRole = Literal["assistant", "developer", "system", "user", "tool"]

FinishReason = Literal["stop", "length", "tool_calls", "content_filter", "function_call"]

ReasoningEffort = Literal["minimal", "low", "medium", "high", "xhigh"]

class Message(BaseModel):
    """
    Chat message.

    Members:
        role (str): Message author role.
        content (str): Message content.
    """
    role: ChatRole = Field(description="Message author role.")
    content: str | None = Field(default=None, description="Message content.")

class Usage(BaseModel):
    """
    Chat completion token usage.
    """
    completion_tokens: int = Field(default=0, description="Number of tokens in the generated completion.")
    prompt_tokens: int = Field(default=0, description="Number of tokens in the prompt.")
    total_tokens: int = Field(default=0, description="Total number of tokens used in the request.")

class Choice(BaseModel):
    """
    Chat completion choice.
    """
    index: int = Field(description="Choice index.")
    message: Message = Field(description="Generated message.")
    finish_reason: FinishReason = Field(description="Reason the model stopped generating tokens.")
    logprobs: None = Field(default=None, description="Log probabilities. This is always `None`.")

class ChatCompletion(BaseModel):
    """
    Chat completion.
    """
    object: Literal["chat.completion"] = Field(default="chat.completion", description="Object type.")
    id: str = Field(description="Completion identifier.")
    model: str = Field(description="Model used to create the completion.")
    choices: list[Choice] = Field(description="Completion choices.")
    created: int = Field(description="Unix timestamp in seconds when the completion was created.")
    usage: Usage | None = Field(default=None, description="Token usage.")

class DeltaMessage(BaseModel):
    """
    Partial chat message generated while streaming.
    """
    role: DeltaRole | None = Field(default=None, description="Message author role.")
    content: str | None = Field(default=None, description="Message content.")

class StreamChoice(BaseModel):
    """
    Chat completion chunk choice.
    """
    index: int = Field(description="Choice index.")
    delta: DeltaMessage | None = Field(default=None, description="Partial message.")
    finish_reason: FinishReason | None = Field(default=None, description="Reason the model stopped generating tokens.")
    logprobs: None = Field(default=None, description="Log probabilities. This is always `None`.")

class ChatCompletionChunk(BaseModel):
    """
    Chat completion chunk.
    """
    object: Literal["chat.completion.chunk"] = Field(default="chat.completion.chunk", description="Object type.")
    id: str = Field(description="Completion identifier. Every chunk of a completion has the same identifier.")
    model: str = Field(description="Model used to create the completion.")
    choices: list[StreamChoice] = Field(description="Completion choices.")
    created: int = Field(description="Unix timestamp in seconds when the completion was created.")
    usage: Usage | None = Field(default=None, description="Token usage.")

class Embedding(BaseModel):
    """
    Embedding vector.
    """
    object: Literal["embedding"] = Field(default="embedding", description="Object type.")
    embedding: list[float] | str = Field(description="Embedding vector, or the base64-encoded vector data.")
    index: int = Field(description="Index of the embedding in the list of embeddings.")

class EmbeddingCreateResponse(BaseModel):
    """
    Embedding creation response.
    """

    class Usage(BaseModel):
        prompt_tokens: int = Field(description="Number of tokens used by the prompt.")
        total_tokens: int = Field(description="Total number of tokens used by the request.")

    object: Literal["list"] = Field(default="list", description="Object type.")
    model: str = Field(description="Embedding model predictor tag.")
    data: list[Embedding] = Field(description="Embeddings.")
    usage: Usage = Field(description="Token usage.")

class SpeechCreateResponse(BaseModel):
    """
    Generated speech.

    Members:
        content (bytes): Encoded audio data.
        content_type (str): Audio MIME type.
    """
    content: bytes = Field(description="Encoded audio data.")
    content_type: str = Field(description="Audio MIME type.")

class _MessageDict(TypedDict):
    role: ChatRole
    content: str | None

class _JSONSchemaDict(TypedDict, total=False):
    name: str
    description: str
    schema: dict[str, object]
    strict: bool

class _ResponseFormatDict(TypedDict, total=False):
    type: Literal["text", "json_object", "json_schema"]
    json_schema: _JSONSchemaDict
