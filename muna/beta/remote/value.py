#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from base64 import b64encode
from dataclasses import asdict, is_dataclass
from io import BytesIO
from json import dumps, loads, JSONDecodeError
from numpy import array, dtype, frombuffer, generic, load as npz_load, ndarray, savez_compressed
from numpy.lib.npyio import NpzFile
from PIL import Image, UnidentifiedImageError
from pydantic import BaseModel
from requests import get
from urllib.request import urlopen
from zipfile import BadZipFile

from ...errors import MalformedValueBuffer, UnsupportedDtype, UnsupportedValueType
from ...types import Dtype, RemoteValue, Value

def create_remote_value(obj: Value) -> RemoteValue:
    """
    Create a remote value from an object.

    Parameters:
        obj (Value): Input object.

    Returns:
        RemoteValue: Remote value.
    """
    obj = _ensure_object_serializable(obj)
    match obj:
        case None:          return RemoteValue(data=None, type=Dtype.null)
        case bool():        return create_remote_value(array(obj, dtype=Dtype.bool))
        case int():         return create_remote_value(array(obj, dtype=_get_integer_dtype(obj)))
        case float():       return create_remote_value(array(obj, dtype=Dtype.float32))
        case generic():     return create_remote_value(array(obj))
        case ndarray():
            tensor_type = _get_tensor_dtype(obj)
            buffer = BytesIO()
            savez_compressed(buffer, obj)
            data = upload_value_data(buffer)
            return RemoteValue(data=data, type=tensor_type)
        case str():
            buffer = BytesIO(obj.encode("utf-8"))
            data = upload_value_data(buffer, mime="text/plain")
            return RemoteValue(data=data, type=Dtype.string)
        case list():
            buffer = BytesIO(_serialize_json(obj))
            data = upload_value_data(buffer, mime="application/json")
            return RemoteValue(data=data, type=Dtype.list)
        case Image.Image():
            buffer = BytesIO()
            obj.save(buffer, format="PNG")
            data = upload_value_data(buffer, mime="image/png")
            return RemoteValue(data=data, type=Dtype.image)
        case bytes() | bytearray() | memoryview():
            data = upload_value_data(BytesIO(bytes(obj)))
            return RemoteValue(data=data, type=Dtype.binary)
        case BytesIO():
            data = upload_value_data(obj)
            return RemoteValue(data=data, type=Dtype.binary)
        case dict():
            buffer = BytesIO(_serialize_json(obj))
            data = upload_value_data(buffer, mime="application/json")
            return RemoteValue(data=data, type=Dtype.dict)
        case _:
            raise UnsupportedValueType(obj)

def parse_remote_value(value: RemoteValue) -> Value:
    """
    Parse an object from a remote value.

    Parameters:
        value (RemoteValue): Remote value.

    Returns:
        Value: Parsed object.
    """
    match value.type:
        case Dtype.null:
            return None
        case Dtype.bfloat16 | Dtype.float16:
            raise UnsupportedDtype(value.type, "half-precision tensors cannot be represented without loss")
        case _ if value.type not in _DECODABLE_DTYPES:
            raise UnsupportedDtype(value.type)
    if value.data is None:
        raise MalformedValueBuffer(value.type, "value has no data")
    buffer = download_value_data(value.data)
    match value.type:
        case _ if value.type in _TENSOR_DTYPES:
            return _parse_tensor(buffer, value.type)
        case Dtype.string:
            try:
                return buffer.decode("utf-8")
            except UnicodeDecodeError as ex:
                raise MalformedValueBuffer(value.type, "buffer is not valid UTF-8") from ex
        case Dtype.list | Dtype.dict:
            try:
                return loads(buffer.decode("utf-8"))
            except (UnicodeDecodeError, JSONDecodeError) as ex:
                raise MalformedValueBuffer(value.type, "buffer is not valid JSON") from ex
        case Dtype.image:
            try:
                image = Image.open(BytesIO(buffer))
                image.load()
            except (UnidentifiedImageError, OSError) as ex:
                raise MalformedValueBuffer(value.type, "buffer is not a valid image") from ex
            return image
        case Dtype.binary:  return BytesIO(buffer)

def upload_value_data(
    data: BytesIO,
    *,
    mime: str="application/octet-stream"
) -> str:
    """
    Upload value data and return a URL to it.
    NOTE: Values are currently always embedded in a data URL.

    Parameters:
        data (BytesIO): Value data.
        mime (str): Value MIME type.

    Returns:
        str: Value URL.
    """
    encoded_data = b64encode(data.getvalue()).decode("ascii")
    return f"data:{mime};base64,{encoded_data}"

def download_value_data(url: str) -> bytes:
    """
    Download value data from a URL.

    Parameters:
        url (str): Data URL or remote URL.

    Returns:
        bytes: Value data.
    """
    if url.startswith("data:"):
        with urlopen(url) as response:
            return response.read()
    response = get(url)
    response.raise_for_status()
    return response.content

def _parse_tensor(buffer: bytes, tensor_type: Dtype) -> ndarray | int | float | bool:
    """
    Parse a tensor from an NPZ/NPY archive or a raw little-endian element buffer.
    Zero-dimensional tensors are returned as Python scalars.
    """
    if buffer.startswith(_ZIP_MAGIC) or buffer.startswith(_NPY_MAGIC):
        try:
            archive = npz_load(BytesIO(buffer), allow_pickle=False)
            if isinstance(archive, NpzFile):
                with archive:
                    tensor = archive[archive.files[0]]
            else:
                tensor = archive
        except (BadZipFile, IndexError, OSError, ValueError) as ex:
            raise MalformedValueBuffer(tensor_type, "archive could not be read") from ex
        if tensor.dtype.name != tensor_type:
            raise MalformedValueBuffer(tensor_type, f"archive contains `{tensor.dtype.name}` data")
    else:
        element_type = dtype(_TENSOR_DTYPES[tensor_type]).newbyteorder("<")
        if len(buffer) % element_type.itemsize != 0:
            raise MalformedValueBuffer(
                tensor_type,
                f"buffer length {len(buffer)} is not a multiple of the element size {element_type.itemsize}"
            )
        tensor = frombuffer(buffer, dtype=element_type).copy()
    return tensor if len(tensor.shape) else tensor.item()

def _get_tensor_dtype(tensor: ndarray) -> Dtype:
    name = tensor.dtype.name
    if name in { Dtype.float16, Dtype.bfloat16 }:
        raise UnsupportedDtype(name, "half-precision tensors cannot be represented without loss")
    if name not in _TENSOR_DTYPES:
        raise UnsupportedDtype(name)
    return _TENSOR_DTYPES[name]

def _get_integer_dtype(value: int) -> Dtype:
    if -2**31 <= value < 2**31:
        return Dtype.int32
    if -2**63 <= value < 2**63:
        return Dtype.int64
    raise UnsupportedValueType(value)

def _serialize_json(obj: list | dict) -> bytes:
    try:
        return dumps(obj).encode("utf-8")
    except (TypeError, ValueError) as ex:
        raise UnsupportedValueType(obj) from ex

def _ensure_object_serializable(obj: object) -> object:
    """
    Ensure an object is serializable.
    """
    is_dict = is_dataclass(obj) and not isinstance(obj, type)
    match obj:
        case list():        return list(map(_ensure_object_serializable, obj))
        case dict():        return { key: _ensure_object_serializable(value) for key, value in obj.items() }
        case BaseModel():   return obj.model_dump(mode="json", by_alias=True)
        case _ if is_dict:  return asdict(obj)
        case _:             return obj

# `bool` is listed first because it is the only one-byte type
# that must never be read back as `uint8`.
_TENSOR_DTYPES = {
    "bool": Dtype.bool,
    "float32": Dtype.float32,
    "float64": Dtype.float64,
    "int8": Dtype.int8,
    "int16": Dtype.int16,
    "int32": Dtype.int32,
    "int64": Dtype.int64,
    "uint8": Dtype.uint8,
    "uint16": Dtype.uint16,
    "uint32": Dtype.uint32,
    "uint64": Dtype.uint64,
}
_DECODABLE_DTYPES = {
    *_TENSOR_DTYPES.values(),
    Dtype.string, Dtype.list, Dtype.dict, Dtype.image, Dtype.binary
}
_ZIP_MAGIC = b"PK\x03\x04"
_NPY_MAGIC = b"\x93NUMPY"
