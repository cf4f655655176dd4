#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from dataclasses import dataclass
from io import BytesIO
from numpy import clip, float32, int16, ndarray
from typing import Literal
import wave

from ...errors import IncompatiblePredictor, InvalidPredictorOutput, PredictionFailed
from ...services import PredictorService
from ...types import Acceleration, Dtype, Parameter, Value
from ..annotations import FLOATING_DTYPES, get_output, get_parameter, get_required_input
from ..predictions import PredictionService
from ..remote import RemoteAcceleration
from ..types import Audio
from .delegate import DelegateCache, retrieve_signature
from .schema import SpeechCreateResponse

API = "OpenAI speech API"

SpeechFormat = Literal["pcm", "wav"]

class SpeechService:
    """
    Speech service.
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
        input: str,
        model: str,
        voice: str | None=None,
        response_format: SpeechFormat="wav",
        speed: float | None=None,
        acceleration: Acceleration | RemoteAcceleration="remote_auto"
    ) -> SpeechCreateResponse:
        """
        Generate audio from the input text.

        Parameters:
            input (str): The text to generate audio for.
            model (str): Speech generation predictor tag.
            voice (str): The voice to use when generating the audio.
            response_format (str): The format to return audio in. Only `pcm` and `wav` are supported.
            speed (float): The speed of the generated audio.
            acceleration (Acceleration | RemoteAcceleration): Prediction acceleration.

        Returns:
            SpeechCreateResponse: Generated audio.
        """
        if response_format not in _ENCODERS:
            raise ValueError(
                f"Failed to create speech because response format `{response_format}` "
                f"is not supported. Use one of: {', '.join(_ENCODERS)}"
            )
        delegate = self.__cache.get(model)
        return delegate(
            input=input,
            voice=voice,
            response_format=response_format,
            speed=speed,
            acceleration=acceleration
        )

    def __create_delegate(self, tag: str) -> _SpeechDelegate:
        signature = retrieve_signature(self.__predictors, tag, api=API)
        # Check that the single required input is the text
        input_param = get_required_input(signature, tag=tag, api=API, dtype=Dtype.string)
        # Get voice and speed parameters (optional)
        _, voice_param = get_parameter(signature.inputs, dtype=Dtype.string, denotation="audio.voice")
        _, speed_param = get_parameter(signature.inputs, dtype=FLOATING_DTYPES, denotation="audio.speed")
        # Get audio output
        audio_idx, audio_param = get_output(
            signature,
            tag=tag,
            api=API,
            dtype=Dtype.float32,
            denotation="audio",
            capability="audio"
        )
        if audio_param.sample_rate is None:
            raise IncompatiblePredictor(
                tag,
                api=API,
                requirement=f"its audio output parameter `{audio_param.name}` does not declare a sample rate"
            )
        return _SpeechDelegate(
            tag=tag,
            predictions=self.__predictions,
            input_param=input_param,
            voice_param=voice_param,
            speed_param=speed_param,
            audio_idx=audio_idx,
            sample_rate=audio_param.sample_rate
        )

@dataclass(frozen=True)
class _SpeechDelegate:
    tag: str
    predictions: PredictionService
    input_param: Parameter
    voice_param: Parameter | None
    speed_param: Parameter | None
    audio_idx: int
    sample_rate: int

    def __call__(
        self,
        *,
        input: str,
        voice: str | None,
        response_format: SpeechFormat,
        speed: float | None,
        acceleration: str
    ) -> SpeechCreateResponse:
        inputs: dict[str, Value] = { self.input_param.name: input }
        if self.voice_param is not None and voice is not None:
            inputs[self.voice_param.name] = voice
        if self.speed_param is not None and speed is not None:
            inputs[self.speed_param.name] = speed
        prediction = self.predictions.create(self.tag, inputs=inputs, acceleration=acceleration)
        if prediction.error is not None:
            raise PredictionFailed(self.tag, prediction.error)
        results = prediction.results or []
        if len(results) <= self.audio_idx:
            raise InvalidPredictorOutput(self.tag, "a prediction without an audio result")
        audio = self._create_audio(results[self.audio_idx])
        encoder, content_type = _ENCODERS[response_format]
        return SpeechCreateResponse(
            content=encoder(audio),
            content_type=content_type.format(
                sample_rate=audio.sample_rate,
                channel_count=audio.channel_count
            )
        )

    def _create_audio(self, tensor: Value) -> Audio:
        if not isinstance(tensor, ndarray):
            raise InvalidPredictorOutput(
                self.tag,
                f"an audio result of type {type(tensor).__name__} instead of a tensor"
            )
        if tensor.dtype != float32:
            raise InvalidPredictorOutput(self.tag, f"an audio tensor with invalid dtype {tensor.dtype}")
        if tensor.ndim not in (1, 2):
            raise InvalidPredictorOutput(self.tag, f"an audio tensor with invalid shape {tensor.shape}")
        return Audio.from_samples(tensor, sample_rate=self.sample_rate)

def _encode_pcm(audio: Audio) -> bytes:
    return audio.samples.tobytes()

def _encode_wav(audio: Audio) -> bytes:
    samples = (clip(audio.samples, -1., 1.) * 32767).astype("<i2")
    buffer = BytesIO()
    with wave.open(buffer, "wb") as file:
        file.setnchannels(audio.channel_count)
        file.setsampwidth(int16().itemsize)
        file.setframerate(audio.sample_rate)
        file.writeframes(samples.tobytes())
    return buffer.getvalue()

_ENCODERS = {
    "pcm": (_encode_pcm, "audio/pcm;rate={sample_rate};channels={channel_count}"),
    "wav": (_encode_wav, "audio/wav"),
}
