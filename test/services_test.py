#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from conftest import FakeClient
from muna import MunaAPIError
from muna.services import PredictorService, UserService
import pytest

def test_retrieve_predictor():
    client = FakeClient({
        "tag": "@yusuf/area",
        "signature": { "inputs": [], "outputs": [] }
    })
    predictor = PredictorService(client).retrieve("@yusuf/area")
    assert predictor.tag == "@yusuf/area"
    assert client.requests == [("GET", "/predictors/@yusuf/area", None)]

def test_retrieve_missing_predictor():
    client = FakeClient(error=MunaAPIError("Predictor not found", 404))
    assert PredictorService(client).retrieve("@yusuf/missing") is None

def test_retrieve_predictor_server_error():
    client = FakeClient(error=MunaAPIError("Internal server error", 500))
    with pytest.raises(MunaAPIError) as ex:
        PredictorService(client).retrieve("@yusuf/area")
    assert ex.value.status_code == 500

def test_retrieve_user():
    user = UserService(FakeClient({ "username": "yusuf" })).retrieve()
    assert user.username == "yusuf"

def test_retrieve_user_without_access_key():
    client = FakeClient(error=MunaAPIError("Unauthorized", 401))
    assert UserService(client).retrieve() is None

def test_retrieve_user_forbidden():
    client = FakeClient(error=MunaAPIError("Forbidden", 403))
    with pytest.raises(MunaAPIError):
        UserService(client).retrieve()
