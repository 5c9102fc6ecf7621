import base64
from io import BytesIO
from unittest import mock

import pytest
import requests
from PIL import Image

import config
import store
from application import application


def fake_response(payload, status_code=200):
    response = mock.MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(config, "MONGO_URI", None)
    store.set_users_collection(None)
    application.config["TESTING"] = True
    with application.test_client() as client:
        yield client
    store.set_users_collection(None)


@pytest.fixture
def users_collection():
    collection = mock.MagicMock()
    store.set_users_collection(collection)
    yield collection
    store.set_users_collection(None)


@pytest.fixture
def png_data_url():
    buffer = BytesIO()
    Image.new("RGB", (4, 3), color="green").save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode()


@pytest.fixture
def completion():
    return {
        "id": "gen-1",
        "model": "anthropic/claude-2",
        "choices": [{"message": {"role": "assistant", "content": "Plant beans.\nRotate crops."}}],
    }


@pytest.fixture
def respond():
    return fake_response
