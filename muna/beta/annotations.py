#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from collections.abc import Collection

from ..errors import IncompatiblePredictor
from ..types import Dtype, Parameter, Signature

FLOATING_DTYPES = frozenset({ Dtype.float32, Dtype.float64 })

INTEGER_DTYPES = frozenset({
    Dtype.int8, Dtype.int16, Dtype.int32, Dtype.int64,
    Dtype.uint8, Dtype.uint16, Dtype.uint32, Dtype.uint64
})

def get_parameter(
    parameters: list[Parameter],
    *,
    dtype: Dtype | Collection[Dtype],
    denotation: str | None=None
) -> tuple[int | None, Parameter | None]:
    """
    Find the first parameter with a given type and denotation.

    Parameters:
        parameters (list): Parameters to search.
        dtype (Dtype | set): Parameter type or set of accepted types.
        denotation (str): Parameter denotation. When `None`, any denotation is accepted.

    Returns:
        tuple: Parameter index and parameter, or `(None, None)` if no parameter matches.
    """
    dtypes = { dtype } if isinstance(dtype, str) else set(dtype)
    return next((
        (idx, param)
        for idx, param in enumerate(parameters)
        if (
            param.type in dtypes and
            (denotation is None or param.denotation == denotation)
        )
    ), (None, None))

def get_required_input(
    signature: Signature,
    *,
    tag: str,
    api: str,
    dtype: Dtype
) -> Parameter:
    """
    Get the single required input parameter of a predictor.

    Parameters:
        signature (Signature): Predictor signature.
        tag (str): Predictor tag.
        api (str): Name of the API the predictor is being adapted to.
        dtype (Dtype): Required input type.

    Returns:
        Parameter: Required input parameter.

    Raises:
        IncompatiblePredictor: If the predictor does not have exactly one required input of the given type.
    """
    required_inputs = [param for param in signature.inputs if not param.optional]
    if not required_inputs:
        raise IncompatiblePredictor(tag, api=api, requirement="it has no required input parameters")
    if len(required_inputs) > 1:
        raise IncompatiblePredictor(tag, api=api, requirement="it has more than one required input parameter")
    input_param = required_inputs[0]
    if input_param.type != dtype:
        raise IncompatiblePredictor(
            tag,
            api=api,
            requirement=f"its required input parameter `{input_param.name}` is not a `{dtype}` parameter"
        )
    return input_param

def get_output(
    signature: Signature,
    *,
    tag: str,
    api: str,
    dtype: Dtype,
    denotation: str | None=None,
    titles: Collection[str] | None=None,
    capability: str
) -> tuple[int, Parameter]:
    """
    Get the first output parameter matching a given type, denotation, and JSON schema title.

    Parameters:
        signature (Signature): Predictor signature.
        tag (str): Predictor tag.
        api (str): Name of the API the predictor is being adapted to.
        dtype (Dtype): Output type.
        denotation (str): Output denotation.
        titles (set): Accepted JSON schema titles.
        capability (str): Description of the output, used in errors.

    Returns:
        tuple: Output index and parameter.

    Raises:
        IncompatiblePredictor: If no output parameter matches.
    """
    for idx, param in enumerate(signature.outputs):
        if param.type != dtype:
            continue
        if denotation is not None and param.denotation != denotation:
            continue
        if titles is not None and (param.value_schema or {}).get("title") not in titles:
            continue
        return idx, param
    raise IncompatiblePredictor(
        tag,
        api=api,
        requirement=f"it does not have a valid {capability} output parameter"
    )
