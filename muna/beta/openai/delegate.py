#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from collections.abc import Callable
from logging import getLogger
from typing import Generic, TypeVar

from ...errors import IncompatiblePredictor
from ...services import PredictorService
from ...types import Signature

D = TypeVar("D")

logger = getLogger(__name__)

class DelegateCache(Generic[D]):
    """
    Delegates keyed by predictor tag.

    A delegate is created the first time its tag is requested, then reused for
    the lifetime of the cache. Delegates are never invalidated, so a predictor
    whose signature changes keeps its original delegate until the cache is
    discarded. Failed creations are not cached.
    """

    def __init__(self, factory: Callable[[str], D]):
        self.__factory = factory
        self.__delegates = dict[str, D]()

    def get(self, tag: str) -> D:
        """
        Get the delegate for a predictor, creating it if needed.

        Parameters:
            tag (str): Predictor tag.
        """
        delegate = self.__delegates.get(tag)
        if delegate is None:
            delegate = self.__delegates.setdefault(tag, self.__factory(tag))
        return delegate

    def __contains__(self, tag: str) -> bool:
        return tag in self.__delegates

    def __len__(self) -> int:
        return len(self.__delegates)

def retrieve_signature(
    predictors: PredictorService,
    tag: str,
    *,
    api: str
) -> Signature:
    """
    Retrieve the signature of a predictor being adapted to an OpenAI API.

    Raises:
        IncompatiblePredictor: If the predictor could not be found.
    """
    logger.debug("Creating %s delegate for %s", api, tag)
    predictor = predictors.retrieve(tag)
    if predictor is None:
        raise IncompatiblePredictor(
            tag,
            api=api,
            requirement=(
                "the predictor could not be found. Check that your access key "
                "is valid and that you have access to the predictor"
            )
        )
    return predictor.signature
