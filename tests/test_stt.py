import asyncio

import httpx
import pytest

from watson_speech import NotAcceptable, NotFound, SpeechModel, SpeechToText, WatsonConfig

SERVICE_URL = "https://api.us-south.speech-to-text.watson.cloud.ibm.com/instances/guid"

MODEL = {
    "name": "en-US_BroadbandModel",
    "language": "en-US",
    "url": f"{SERVICE_URL}/v1/models/en-US_BroadbandModel",
    "rate": 16000,
    "supported_features": {"custom_language_model": True, "custom_acoustic_model": True, "speaker_labels": True},
    "description": "US English broadband model.",
}


def make_stt(handler) -> SpeechToText:
    config = WatsonConfig.from_authorization_token("token-123", SERVICE_URL)
    return SpeechToText(config, transport=httpx.MockTransport(handler))


def test_list_models():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["Authorization"] == "Bearer token-123"
        assert request.url == httpx.URL(f"{SERVICE_URL}/v1/models")
        return httpx.Response(200, json={"models": [MODEL]})

    models = make_stt(handler).list_models()

    assert models[0].name == "en-US_BroadbandModel"
    assert models[0].rate == 16000
    assert models[0].supported_features.speaker_labels is True


def test_get_model_by_enum_and_string():
    paths = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json=MODEL)

    stt = make_stt(handler)
    stt.get_model(SpeechModel.EnUsBroadband)
    stt.get_model("en-US_NarrowbandModel")

    assert paths == [
        "/instances/guid/v1/models/en-US_BroadbandModel",
        "/instances/guid/v1/models/en-US_NarrowbandModel",
    ]


def test_get_model_unknown_string_is_rejected_locally():
    with pytest.raises(ValueError):
        make_stt(lambda request: httpx.Response(200, json=MODEL)).get_model("xx-XX_Nothing")


def test_get_model_not_found_names_model():
    with pytest.raises(NotFound) as exc:
        make_stt(lambda request: httpx.Response(404)).get_model(SpeechModel.JaJpTelephony)

    assert "'ja-JP_Telephony'" in str(exc.value)


def test_list_models_async_maps_errors():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(406, json={"error": "Unsupported Accept header", "code": 406})

    async def run():
        config = WatsonConfig.from_authorization_token("token-123", SERVICE_URL)
        async with SpeechToText(config, async_transport=httpx.MockTransport(handler)) as stt:
            await stt.list_models_async()

    with pytest.raises(NotAcceptable) as exc:
        asyncio.run(run())

    assert str(exc.value) == "Unsupported Accept header"
