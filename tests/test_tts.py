import asyncio
import json
import threading
from pathlib import Path

import httpx
import pytest

from watson_speech import (
    AudioFormat,
    FileReadError,
    ResponseDecodeError,
    Language,
    NotModified,
    PhonemeFormat,
    TextToSpeech,
    Unauthorized,
    WatsonConfig,
    WatsonVoice,
    Word,
)

SERVICE_URL = "https://api.eu-gb.text-to-speech.watson.cloud.ibm.com/instances/guid"

VOICE = {
    "url": f"{SERVICE_URL}/v1/voices/en-US_AllisonV3Voice",
    "gender": "female",
    "name": "en-US_AllisonV3Voice",
    "language": "en-US",
    "description": "Allison: American English female voice.",
    "customizable": True,
    "supported_features": {"custom_pronunciation": True, "voice_transformation": False},
}


def make_tts(handler, **kwargs) -> TextToSpeech:
    config = WatsonConfig.from_authorization_token("token-123", SERVICE_URL, **kwargs)
    return TextToSpeech(config, transport=httpx.MockTransport(handler))


def test_list_voices_decodes_records():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url == httpx.URL(f"{SERVICE_URL}/v1/voices")
        return httpx.Response(200, json={"voices": [VOICE]})

    voices = make_tts(handler).list_voices()

    assert len(voices) == 1
    assert voices[0].name == "en-US_AllisonV3Voice"
    assert voices[0].customizable is True
    assert voices[0].supported_features.custom_pronunciation is True
    assert voices[0].customization is None


def test_get_voice_with_customization():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/v1/voices/en-US_AllisonV3Voice")
        assert request.url.params["customization_id"] == "cid"
        return httpx.Response(200, json=dict(VOICE, customization={"customization_id": "cid", "name": "mine"}))

    voice = make_tts(handler).get_voice(WatsonVoice.EnUsAllisonV3, "cid")

    assert voice.customization.customization_id == "cid"
    assert voice.customization.name == "mine"


def test_get_voice_not_modified_is_raised():
    tts = make_tts(lambda request: httpx.Response(304))

    with pytest.raises(NotModified):
        tts.get_voice("en-US_AllisonV3Voice")


def test_get_voice_unknown_customization_names_it():
    tts = make_tts(lambda request: httpx.Response(401))

    with pytest.raises(Unauthorized) as exc:
        tts.get_voice(WatsonVoice.EnUsAllisonV3, "cid-42")

    assert "'cid-42'" in str(exc.value)
    assert exc.value.resource_id == "cid-42"


def test_synthesise_uses_default_voice_and_returns_bytes():
    audio = bytes(range(256))

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/instances/guid/v1/synthesize"
        assert request.url.query == b"text=Hello%20world&voice=en-US_MichaelV3Voice"
        return httpx.Response(200, content=audio, headers={"Content-Type": "audio/ogg;codecs=opus"})

    assert make_tts(handler).synthesise("Hello world", None, None) == audio


def test_synthesise_with_format_customization_and_voice_override():
    def handler(request: httpx.Request) -> httpx.Response:
        params = request.url.params
        assert list(params.keys()) == ["text", "voice", "accept", "customization_id"]
        assert params["voice"] == "de-DE_BirgitV3Voice"
        assert params["accept"] == "audio/l16;rate=16000;endianness=little-endian"
        assert params["customization_id"] == "cid"
        return httpx.Response(200, content=b"pcm")

    tts = make_tts(handler)

    assert tts.synthesise("Guten Tag", AudioFormat.l16(16000), "cid", voice=WatsonVoice.DeDeBirgitV3) == b"pcm"


def test_set_voice_changes_default():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["voice"] == "en-GB_KateV3Voice"
        return httpx.Response(200, content=b"x")

    tts = make_tts(handler)
    tts.set_voice("en-GB_KateV3Voice")

    assert tts.voice is WatsonVoice.EnGbKateV3
    tts.synthesise("hello")


def test_configured_voice_is_used():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["voice"] == "fr-FR_ReneeV3Voice"
        return httpx.Response(200, content=b"x")

    make_tts(handler, voice=WatsonVoice.FrFrReneeV3).synthesise("bonjour")


def test_create_custom_model_posts_json():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path.endswith("/v1/customizations")
        assert json.loads(request.content) == {"name": "First", "language": "en-GB", "description": "demo"}
        return httpx.Response(201, json={"customization_id": "64f4807f"})

    model = make_tts(handler).create_custom_model("First", Language.EnGb, "demo")

    assert model.customization_id == "64f4807f"
    assert model.name is None


def test_create_custom_model_defaults_language():
    def handler(request: httpx.Request) -> httpx.Response:
        assert json.loads(request.content) == {"name": "First", "language": "en-US", "description": ""}
        return httpx.Response(200, json={"customization_id": "a"})

    make_tts(handler).create_custom_model("First")


def test_list_custom_models_filters_by_language():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["language"] == "ja-JP"
        return httpx.Response(
            200,
            json={"customizations": [{"customization_id": "a", "name": "one", "language": "ja-JP", "owner": "me"}]},
        )

    models = make_tts(handler).list_custom_models("ja-JP")

    assert [m.customization_id for m in models] == ["a"]
    assert models[0].owner == "me"


def test_list_custom_models_without_language_has_no_query():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.query == b""
        return httpx.Response(200, json={"customizations": []})

    assert make_tts(handler).list_custom_models() == []


def test_update_custom_model_sends_only_given_fields():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path.endswith("/v1/customizations/cid")
        assert json.loads(request.content) == {
            "description": "new",
            "words": [{"word": "IEEE", "translation": "I triple E"}],
        }
        return httpx.Response(200)

    assert make_tts(handler).update_custom_model("cid", description="new", words=[Word("IEEE", "I triple E")]) is None


def test_get_custom_model_includes_words_and_prompts():
    payload = {
        "customization_id": "cid",
        "name": "model",
        "words": [{"word": "NCAA", "translation": "N C double A"}],
        "prompts": [{"prompt": "Hello", "prompt_id": "greeting", "status": "available"}],
    }
    model = make_tts(lambda request: httpx.Response(200, json=payload)).get_custom_model("cid")

    assert model.words == [Word("NCAA", "N C double A")]
    assert model.prompts[0].prompt_id == "greeting"
    assert model.prompts[0].status == "available"


def test_delete_custom_model_expects_no_content():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "DELETE"
        return httpx.Response(204)

    assert make_tts(handler).delete_custom_model("cid") is None


def test_custom_words_round_trip():
    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if request.method == "POST":
            assert path.endswith("/customizations/cid/words")
            assert json.loads(request.content) == {
                "words": [{"word": "tomato", "translation": "tomahto"}, {"word": "NYC", "translation": "New York City"}]
            }
            return httpx.Response(200)
        if request.method == "PUT":
            assert path.endswith("/customizations/cid/words/ACLs")
            assert json.loads(request.content) == {"translation": "ackles", "part_of_speech": "Noun"}
            return httpx.Response(200)
        if path.endswith("/words"):
            return httpx.Response(200, json={"words": [{"word": "tomato", "translation": "tomahto"}]})
        assert path.endswith("/words/tomato")
        return httpx.Response(200, json={"translation": "tomahto"})

    tts = make_tts(handler)
    tts.add_custom_words("cid", [Word("tomato", "tomahto"), Word("NYC", "New York City")])
    tts.add_custom_word("cid", Word("ACLs", "ackles", "Noun"))

    assert tts.list_custom_words("cid") == [Word("tomato", "tomahto")]
    assert tts.get_custom_word("cid", "tomato") == Word("tomato", "tomahto")


def test_add_custom_prompt_sends_multipart(tmp_path):
    audio = tmp_path / "hello.wav"
    audio.write_bytes(b"RIFF....WAVEfmt ")

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/v1/customizations/cid/prompts/greeting")
        assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        body = request.content
        assert b'name="metadata"' in body
        assert b'{"prompt_text": "Hello there", "speaker_id": "spk"}' in body
        assert b'name="file"; filename="hello.wav"' in body
        assert b"Content-Type: audio/wav" in body
        assert b"RIFF....WAVEfmt " in body
        return httpx.Response(201, json={"prompt": "Hello there", "prompt_id": "greeting", "status": "processing", "speaker_id": "spk"})

    prompt = make_tts(handler).add_custom_prompt("cid", "greeting", "Hello there", audio, "spk")

    assert prompt.status == "processing"
    assert prompt.speaker_id == "spk"


def test_add_custom_prompt_missing_file_raises_before_request(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    missing = tmp_path / "missing.wav"

    with pytest.raises(FileReadError) as exc:
        make_tts(handler).add_custom_prompt("cid", "greeting", "Hi", missing)

    assert exc.value.resource_id == str(missing)


def test_prompts_list_get_delete():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "DELETE":
            return httpx.Response(204)
        if request.url.path.endswith("/prompts"):
            return httpx.Response(200, json={"prompts": [{"prompt": "Hi", "prompt_id": "p1", "status": "failed", "error": "too short"}]})
        return httpx.Response(200, json={"prompt": "Hi", "prompt_id": "p1", "status": "available"})

    tts = make_tts(handler)

    prompts = tts.list_custom_prompts("cid")
    assert prompts[0].error == "too short"
    assert tts.get_custom_prompt("cid", "p1").status == "available"
    assert tts.delete_custom_prompt("cid", "p1") is None


def test_speaker_models(tmp_path):
    sample = tmp_path / "speaker.wav"
    sample.write_bytes(b"wav-bytes")

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            assert request.url.params["speaker_name"] == "Jane Doe"
            assert request.headers["Content-Type"] == "audio/wav"
            assert request.content == b"wav-bytes"
            return httpx.Response(201, json={"speaker_id": "56367f89"})
        if request.method == "DELETE":
            return httpx.Response(204)
        if request.url.path.endswith("/v1/speakers"):
            return httpx.Response(200, json={"speakers": [{"speaker_id": "56367f89", "name": "Jane Doe"}]})
        return httpx.Response(
            200,
            json={
                "customizations": [
                    {"customization_id": "cid", "prompts": [{"prompt": "Hi", "prompt_id": "p1", "status": "available", "speaker_id": "56367f89"}]}
                ]
            },
        )

    tts = make_tts(handler)

    assert tts.create_speaker_model("Jane Doe", sample) == "56367f89"
    speakers = tts.list_speaker_models()
    assert speakers[0].name == "Jane Doe"
    customizations = tts.get_speaker_model("56367f89")
    assert customizations[0].customization_id == "cid"
    assert customizations[0].prompts[0].prompt_id == "p1"
    assert tts.delete_speaker_model("56367f89") is None


def test_get_pronunciation_query():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.query == b"text=IEEE&voice=en-US_MichaelV3Voice&format=ibm"
        return httpx.Response(200, json={"pronunciation": ".0Y .tr1Ipxl .1i"})

    pronunciation = make_tts(handler).get_pronunciation("IEEE", format=PhonemeFormat.IBM)

    assert pronunciation.pronunciation == ".0Y .tr1Ipxl .1i"


def test_delete_user_data():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "DELETE"
        assert request.url.path == "/instances/guid/v1/user_data/customer-1"
        return httpx.Response(200)

    assert make_tts(handler).delete_user_data("customer-1") is None


def test_async_operations_mirror_sync():
    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/v1/synthesize"):
            assert request.url.params["accept"] == "audio/mp3;rate=22050"
            return httpx.Response(200, content=b"mp3")
        return httpx.Response(200, json={"voices": [VOICE]})

    async def run():
        config = WatsonConfig.from_authorization_token("token-123", SERVICE_URL)
        async with TextToSpeech(config, async_transport=httpx.MockTransport(handler)) as tts:
            voices = await tts.list_voices_async()
            audio = await tts.synthesise_async("hi", AudioFormat.mp3())
        return voices, audio

    voices, audio = asyncio.run(run())

    assert voices[0].gender == "female"
    assert audio == b"mp3"


def test_concurrent_async_calls_share_one_client():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=request.url.params["text"].encode())

    async def run():
        config = WatsonConfig.from_authorization_token("token-123", SERVICE_URL)
        async with TextToSpeech(config, async_transport=httpx.MockTransport(handler)) as tts:
            return await asyncio.gather(*(tts.synthesise_async(f"line {n}") for n in range(5)))

    assert asyncio.run(run()) == [f"line {n}".encode() for n in range(5)]


def test_malformed_list_item_raises_decode_error():
    tts = make_tts(lambda request: httpx.Response(200, json={"words": ["a"]}))

    with pytest.raises(ResponseDecodeError):
        tts.list_custom_words("cid")


def test_async_uploads_read_audio_off_the_event_loop(tmp_path, monkeypatch):
    prompt_audio = tmp_path / "prompt.wav"
    prompt_audio.write_bytes(b"prompt-wav")
    speaker_audio = tmp_path / "speaker.wav"
    speaker_audio.write_bytes(b"speaker-wav")

    read_on_main_thread = []
    original_read_bytes = Path.read_bytes

    def recording_read_bytes(self):
        read_on_main_thread.append(threading.current_thread() is threading.main_thread())
        return original_read_bytes(self)

    monkeypatch.setattr(Path, "read_bytes", recording_read_bytes)

    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/v1/speakers"):
            assert request.url.params["speaker_name"] == "Jane Doe"
            assert request.headers["Content-Type"] == "audio/wav"
            assert request.content == b"speaker-wav"
            return httpx.Response(201, json={"speaker_id": "56367f89"})
        assert request.url.path.endswith("/v1/customizations/cid/prompts/greeting")
        assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert b'name="file"; filename="prompt.wav"' in request.content
        assert b"prompt-wav" in request.content
        return httpx.Response(200, json={"prompt": "Hello", "prompt_id": "greeting", "status": "processing"})

    async def run():
        config = WatsonConfig.from_authorization_token("token-123", SERVICE_URL)
        async with TextToSpeech(config, async_transport=httpx.MockTransport(handler)) as tts:
            prompt = await tts.add_custom_prompt_async("cid", "greeting", "Hello", prompt_audio)
            speaker_id = await tts.create_speaker_model_async("Jane Doe", speaker_audio)
        return prompt, speaker_id

    prompt, speaker_id = asyncio.run(run())

    assert prompt.status == "processing"
    assert speaker_id == "56367f89"
    assert read_on_main_thread == [False, False]


def test_async_uploads_missing_file_raise_file_read_error(tmp_path):
    async def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    missing = tmp_path / "missing.wav"

    async def run(upload):
        config = WatsonConfig.from_authorization_token("token-123", SERVICE_URL)
        async with TextToSpeech(config, async_transport=httpx.MockTransport(handler)) as tts:
            await upload(tts)

    with pytest.raises(FileReadError) as prompt_exc:
        asyncio.run(run(lambda tts: tts.add_custom_prompt_async("cid", "greeting", "Hi", missing)))
    with pytest.raises(FileReadError) as speaker_exc:
        asyncio.run(run(lambda tts: tts.create_speaker_model_async("Jane Doe", missing)))

    assert prompt_exc.value.resource_id == str(missing)
    assert speaker_exc.value.resource_id == str(missing)
