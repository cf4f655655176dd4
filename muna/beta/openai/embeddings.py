#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from base64 import b64encode
from dataclasses import dataclass
from numpy import float32, ndarray
from typing import Literal

from ...errors import InvalidPredictorOutput, PredictionFailed
from ...services import PredictorService
from ...types import Acceleration, Dtype, Parameter, Value
from ..annotations import INTEGER_DTYPES, get_output, get_parameter, get_required_input
from ..predictions import PredictionService
from ..remote import RemoteAcceleration
from .delegate import DelegateCache, retrieve_signature
from .schema import Embedding, EmbeddingCreateResponse

API = "OpenAI embeddings API"

EncodingFormat = Literal["float", "base64"]

class EmbeddingsService:
    """
    Embeddings service.
    """

    def __init__(
        self,
        predictors: PredictorService,
        predictions: PredictionService
    ):
        self.__predictors = predictors
        self.__predictions = predictions
        self.__cache = DelegateCache(self.__create_delegate)

    def create(
        self,
        *,
        input: str | list[str],
        model: str,
        dimensions: int | None=None,
        encoding_format: EncodingFormat | None=None,
        acceleration: Acceleration | RemoteAcceleration="remote_auto"
    ) -> EmbeddingCreateResponse:
        """
        Create an embedding vector representing the input text.

        Parameters:
            input (str | list): Input text to embed. The input must not exceed the max input tokens for the model.
            model (str): Embedding model predictor tag.
            dimensions (int): The number of dimensions the resulting output embeddings should have. Only supported by Matryoshka embedding models.
            encoding_format (str): The format to return the embeddings in.
            acceleration (Acceleration | RemoteAcceleration): Prediction acceleration.

        Returns:
            EmbeddingCreateResponse: Embeddings, one for each input text.
        """
        input = [input] if isinstance(input, str) else list(input)
        delegate = self.__cache.get(model)
        return delegate(
            input=input,
            dimensions=dimensions,
            encoding_format=encoding_format or "float",
            acceleration=acceleration
        )

    def __create_delegate(self, tag: str) -> _EmbeddingDelegate:
        signature = retrieve_signature(self.__predictors, tag, api=API)
        # Check that the single required input is `list[str]`
        input_param = get_required_input(signature, tag=tag, api=API, dtype=Dtype.list)
        # Get the Matryoshka dim parameter (optional)
        _, dims_param = get_parameter(signature.inputs, dtype=INTEGER_DTYPES, denotation="embedding.dims")
        # Get the embedding matrix output
        embedding_idx, _ = get_output(
            signature,
            tag=tag,
            api=API,
            dtype=Dtype.float32,
            denotation="embedding",
            capability="embedding"
        )
        return _EmbeddingDelegate(
            tag=tag,
            predictions=self.__predictions,
            input_param=input_param,
            dims_param=dims_param,
            embedding_idx=embedding_idx
        )

@dataclass(frozen=True)
class _EmbeddingDelegate:
    tag: str
    predictions: PredictionService
    input_param: Parameter
    dims_param: Parameter | None
    embedding_idx: int

    def __call__(
        self,
        *,
        input: list[str],
        dimensions: int | None,
        encoding_format: EncodingFormat,
        acceleration: str
    ) -> EmbeddingCreateResponse:
        inputs: dict[str, Value] = { self.input_param.name: input }
        if self.dims_param is not None and dimensions is not None:
            inputs[self.dims_param.name] = dimensions
        prediction = self.predictions.create(self.tag, inputs=inputs, acceleration=acceleration)
        if prediction.error is not None:
            raise PredictionFailed(self.tag, prediction.error)
        results = prediction.results or []
        if len(results) <= self.embedding_idx:
            raise InvalidPredictorOutput(self.tag, "a prediction without an embedding result")
        embedding_matrix = results[self.embedding_idx] # (N,D)
        if not isinstance(embedding_matrix, ndarray):
            raise InvalidPredictorOutput(
                self.tag,
                f"an embedding result of type {type(embedding_matrix).__name__} instead of a tensor"
            )
        if embedding_matrix.ndim != 2 or embedding_matrix.dtype != float32:
            raise InvalidPredictorOutput(
                self.tag,
                f"an embedding matrix with invalid shape {embedding_matrix.shape} "
                f"and dtype {embedding_matrix.dtype}"
            )
        data = [
            _create_embedding(vector, index=idx, encoding_format=encoding_format)
            for idx, vector in enumerate(embedding_matrix)
        ]
        return EmbeddingCreateResponse(
            model=self.tag,
            data=data,
            usage=EmbeddingCreateResponse.Usage(prompt_tokens=0, total_tokens=0)
        )

def _create_embedding(
    vector: ndarray,
    *,
    index: int,
    encoding_format: EncodingFormat
) -> Embedding:
    data = (
        b64encode(vector.tobytes()).decode()
        if encoding_format == "base64"
        else vector.tolist()
    )
    return Embedding(embedding=data, index=index)
