#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from .annotations import Annotations
from .openai import OpenAIClient
from .schema import (
    ChatCompletion, ChatCompletionChunk, Choice, DeltaMessage,
    EmbeddingCreateResponse, Embedding, Message, SpeechCreateResponse,
    StreamChoice, Usage
)
from .stream import ChatCompletionAggregator
