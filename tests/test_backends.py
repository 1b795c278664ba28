"""Tests for the image-generation backends and the dispatcher."""

import json
from types import SimpleNamespace

import httpx
import pytest

import ai_client
from ai_backends import gemini_api, openai_images
from conftest import respond
from errors import GenerationError

ENDPOINT = openai_images.ENDPOINT


# ---------------------------------------------------------------------------
# openai_images
# ---------------------------------------------------------------------------

class TestOpenAIRequest:
    def test_request_body(self):
        body = openai_images.build_request("a trophy", "1024x1024")
        assert body == {
            "model":           "dall-e-3",
            "prompt":          "a trophy",
            "n":               1,
            "size":            "1024x1024",
            "quality":         "standard",
            "response_format": "url",
        }

    @pytest.mark.parametrize("prompt,size", [("", "1024x1024"), ("ok", "512x512")])
    def test_invalid_request_rejected(self, prompt, size):
        with pytest.raises(GenerationError, match="Invalid generation request"):
            openai_images.build_request(prompt, size)

    def test_invalid_request_makes_no_call(self, mock_http):
        client, recorder = mock_http({})
        with pytest.raises(GenerationError):
            openai_images.call("ok", "640x480", "sk-test", client=client)
        assert recorder.requests == []


class TestOpenAICall:
    def test_success(self, mock_http):
        client, recorder = mock_http({ENDPOINT: respond(200, json={
            "data": [{"url": "https://img.example.org/out.png", "revised_prompt": "a better trophy"}],
        })})

        result = openai_images.call("a trophy", "1792x1024", "sk-test", client=client)

        assert result == {
            "url":            "https://img.example.org/out.png",
            "revised_prompt": "a better trophy",
            "_model":         "dall-e-3",
        }
        request = recorder.requests[0]
        assert request.method == "POST"
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert json.loads(request.content)["size"] == "1792x1024"

    def test_missing_key(self, mock_http):
        client, recorder = mock_http({})
        with pytest.raises(GenerationError, match="No OPENAI_API_KEY found"):
            openai_images.call("a trophy", "1024x1024", None, client=client)
        assert recorder.requests == []

    def test_http_error_includes_status_and_body(self, mock_http):
        client, _ = mock_http({ENDPOINT: respond(400, b'{"error": "content_policy_violation"}')})
        with pytest.raises(GenerationError, match="400.*content_policy_violation"):
            openai_images.call("a trophy", "1024x1024", "sk-test", client=client)

    @pytest.mark.parametrize("payload", [{"data": []}, {"data": [{"revised_prompt": "x"}]}, {}])
    def test_no_url(self, mock_http, payload):
        client, _ = mock_http({ENDPOINT: respond(200, json=payload)})
        with pytest.raises(GenerationError, match="No image URL"):
            openai_images.call("a trophy", "1024x1024", "sk-test", client=client)

    def test_malformed_json(self, mock_http):
        client, _ = mock_http({ENDPOINT: respond(200, b"not json")})
        with pytest.raises(GenerationError, match="Malformed"):
            openai_images.call("a trophy", "1024x1024", "sk-test", client=client)

    def test_transport_error(self, mock_http):
        def boom(request):
            raise httpx.ReadTimeout("slow", request=request)

        client, _ = mock_http({ENDPOINT: boom})
        with pytest.raises(GenerationError, match="request failed"):
            openai_images.call("a trophy", "1024x1024", "sk-test", client=client)


# ---------------------------------------------------------------------------
# gemini_api
# ---------------------------------------------------------------------------

class _FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error    = error
        self.calls    = []

    def generate_images(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return self.response


def _fake_genai(monkeypatch, models):
    created = []

    class FakeClient:
        def __init__(self, api_key):
            created.append(api_key)
            self.models = models

    monkeypatch.setattr(gemini_api.genai, "Client", FakeClient)
    return created


class TestGemini:
    def test_success(self, monkeypatch, png_bytes):
        image  = SimpleNamespace(image=SimpleNamespace(image_bytes=png_bytes), enhanced_prompt="enhanced")
        models = _FakeModels(response=SimpleNamespace(generated_images=[image]))
        created = _fake_genai(monkeypatch, models)

        result = gemini_api.call("a mule", "1792x1024", "g-key")

        assert created == ["g-key"]
        assert result["image_bytes"] == png_bytes
        assert result["revised_prompt"] == "enhanced"
        config = models.calls[0]["config"]
        assert config.aspect_ratio == "16:9"
        assert config.number_of_images == 1

    def test_missing_key(self, monkeypatch):
        created = _fake_genai(monkeypatch, _FakeModels())
        with pytest.raises(GenerationError, match="No GEMINI_API_KEY found"):
            gemini_api.call("a mule", "1024x1024", "")
        assert created == []

    def test_unsupported_size(self, monkeypatch):
        _fake_genai(monkeypatch, _FakeModels())
        with pytest.raises(GenerationError, match="Unsupported size"):
            gemini_api.call("a mule", "800x600", "g-key")

    def test_quota_error(self, monkeypatch):
        err = Exception('429 RESOURCE_EXHAUSTED {"error": {"details": '
                        '[{"@type": "type.googleapis.com/google.rpc.RetryInfo", "retryDelay": "41s"}]}}')
        _fake_genai(monkeypatch, _FakeModels(error=err))
        with pytest.raises(GenerationError, match="quota exceeded.*41s"):
            gemini_api.call("a mule", "1024x1024", "g-key")

    def test_empty_response(self, monkeypatch):
        _fake_genai(monkeypatch, _FakeModels(response=SimpleNamespace(generated_images=None)))
        with pytest.raises(GenerationError, match="No image in response"):
            gemini_api.call("a mule", "1024x1024", "g-key")


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

class TestDispatcher:
    def test_default_backend(self):
        assert ai_client.get_backend({}) is openai_images

    def test_backend_from_config(self):
        assert ai_client.get_backend({"IMAGE_PROVIDER": "gemini_api"}) is gemini_api

    def test_unknown_backend(self):
        with pytest.raises(RuntimeError, match="not found"):
            ai_client.get_backend({"IMAGE_PROVIDER": "nope"})

    def test_api_key_for(self):
        assert ai_client.api_key_for({"OPENAI_API_KEY": "sk"}) == "sk"
        assert ai_client.api_key_for({"OPENAI_API_KEY": ""}) is None
        assert ai_client.api_key_for({"IMAGE_PROVIDER": "gemini_api", "OPENAI_API_KEY": "sk"}) is None

    def test_call_ai_passes_key_and_client(self, mock_http):
        client, recorder = mock_http({ENDPOINT: respond(200, json={"data": [{"url": "https://x/y.png"}]})})
        result = ai_client.call_ai("p", "1024x1024", {"OPENAI_API_KEY": "sk"}, client=client)
        assert result["url"] == "https://x/y.png"
        assert recorder.requests[0].headers["Authorization"] == "Bearer sk"
