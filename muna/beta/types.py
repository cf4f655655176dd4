#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from numpy import float32
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field

class Audio(BaseModel, **ConfigDict(arbitrary_types_allowed=True, frozen=True)):
    """
    Interleaved audio buffer.

    Members:
        samples (ndarray): Audio samples with shape (F,C).
        sample_rate (int): Audio sample rate (Hz).
        channel_count (int): Audio channel count.
    """
    samples: NDArray[float32] = Field(description="Audio samples with shape (F,C).")
    sample_rate: int = Field(description="Audio sample rate (Hz).")
    channel_count: int = Field(description="Audio channel count.")

    @classmethod
    def from_samples(cls, samples: NDArray[float32], *, sample_rate: int) -> Audio:
        """
        Create an audio buffer from a mono (F,) or interleaved (F,C) sample array.
        """
        samples = samples if samples.ndim == 2 else samples[:, None]
        return cls(samples=samples, sample_rate=sample_rate, channel_count=samples.shape[1])

    @property
    def duration(self) -> float:
        """
        Audio duration in seconds.
        """
        return self.samples.shape[0] / self.sample_rate
