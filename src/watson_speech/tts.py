"""Client for the IBM Watson Text to Speech service.

Each remote operation is described once by an ``_<name>_op`` builder and
exposed twice: ``name()`` blocks, ``name_async()`` runs on the caller's loop.
"""
import asyncio
import json
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .client import Operation, ResourceClient, json_body, json_list, no_content, raw_bytes
from .errors import FileReadError, error_map
from .formats import AudioFormat, Language, PhonemeFormat, WatsonVoice
from .models import CustomModel, Prompt, Pronunciation, Speaker, SpeakerCustomModel, Voice, Word

VoiceLike = Union[WatsonVoice, str]
PathLike = Union[str, Path]


def _voice_id(voice: VoiceLike) -> str:
    return voice.id() if isinstance(voice, WatsonVoice) else WatsonVoice(voice).id()


def _read_audio(audio_file: PathLike) -> bytes:
    path = Path(audio_file)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileReadError(f"There was an error reading the file {path}: {exc}", resource_id=str(path)) from exc


class TextToSpeech(ResourceClient):
    """Voices, custom models, words, prompts, speaker models and synthesis."""

    def set_voice(self, voice: VoiceLike) -> None:
        """Change the voice used when a call does not pass one.

        This is the only mutable state on the client; guard it yourself if
        several tasks share one instance and change it.
        """
        self.config.voice = WatsonVoice(_voice_id(voice))

    @property
    def voice(self) -> WatsonVoice:
        return self.config.voice

    def _resolve_voice(self, voice: Optional[VoiceLike]) -> str:
        return _voice_id(voice) if voice is not None else self.config.voice.id()

    # Voices

    def _list_voices_op(self) -> Operation:
        return Operation(
            "GET",
            "v1/voices",
            errors=error_map(406, 415, 500, 503),
            decode=json_list(Voice.from_dict, "voices"),
        )

    def list_voices(self, *, timeout: Optional[float] = None) -> List[Voice]:
        """List every voice available to the service instance."""
        return self._call(self._list_voices_op(), timeout)

    async def list_voices_async(self, *, timeout: Optional[float] = None) -> List[Voice]:
        return await self._acall(self._list_voices_op(), timeout)

    def _get_voice_op(self, voice: VoiceLike, customization_id: Optional[str]) -> Operation:
        return Operation(
            "GET",
            "v1/voices/{voice}",
            path_params={"voice": _voice_id(voice)},
            params=[("customization_id", customization_id)],
            errors=error_map(304, 400, 401, 406, 415, 500, 503),
            decode=json_body(Voice.from_dict),
            resource_id=customization_id,
        )

    def get_voice(
        self, voice: VoiceLike, customization_id: Optional[str] = None, *, timeout: Optional[float] = None
    ) -> Voice:
        """Get one voice; with ``customization_id`` the voice's custom model is included."""
        return self._call(self._get_voice_op(voice, customization_id), timeout)

    async def get_voice_async(
        self, voice: VoiceLike, customization_id: Optional[str] = None, *, timeout: Optional[float] = None
    ) -> Voice:
        return await self._acall(self._get_voice_op(voice, customization_id), timeout)

    # Custom models

    def _create_custom_model_op(
        self, name: str, language: Optional[Union[Language, str]], description: Optional[str]
    ) -> Operation:
        language = language or Language.default()
        body = {
            "name": name,
            "language": language.id() if isinstance(language, Language) else Language(language).id(),
            "description": description or "",
        }
        return Operation(
            "POST",
            "v1/customizations",
            json=body,
            success=(200, 201),
            errors=error_map(400, 500, 503),
            decode=json_body(CustomModel.from_dict),
        )

    def create_custom_model(
        self,
        name: str,
        language: Optional[Union[Language, str]] = None,
        description: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> CustomModel:
        """Create an empty custom model. Only ``customization_id`` is set on the result."""
        return self._call(self._create_custom_model_op(name, language, description), timeout)

    async def create_custom_model_async(
        self,
        name: str,
        language: Optional[Union[Language, str]] = None,
        description: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> CustomModel:
        return await self._acall(self._create_custom_model_op(name, language, description), timeout)

    def _list_custom_models_op(self, language: Optional[Union[Language, str]]) -> Operation:
        if isinstance(language, str):
            language = Language(language)
        return Operation(
            "GET",
            "v1/customizations",
            params=[("language", language.id() if language else None)],
            errors=error_map(400, 500, 503),
            decode=json_list(CustomModel.from_dict, "customizations"),
        )

    def list_custom_models(
        self, language: Optional[Union[Language, str]] = None, *, timeout: Optional[float] = None
    ) -> List[CustomModel]:
        """List custom models owned by the instance, optionally for one language."""
        return self._call(self._list_custom_models_op(language), timeout)

    async def list_custom_models_async(
        self, language: Optional[Union[Language, str]] = None, *, timeout: Optional[float] = None
    ) -> List[CustomModel]:
        return await self._acall(self._list_custom_models_op(language), timeout)

    def _update_custom_model_op(
        self,
        customization_id: str,
        name: Optional[str],
        description: Optional[str],
        words: Optional[Iterable[Word]],
    ) -> Operation:
        body = {}
        if name is not None:
            body["name"] = name
        if description is not None:
            body["description"] = description
        if words is not None:
            body["words"] = [word.to_dict() for word in words]
        return Operation(
            "POST",
            "v1/customizations/{customization_id}",
            path_params={"customization_id": customization_id},
            json=body,
            errors=error_map(400, 401, 500, 503),
            resource_id=customization_id,
        )

    def update_custom_model(
        self,
        customization_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        words: Optional[Iterable[Word]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        """Rename, redescribe, or add/replace words in a custom model."""
        self._call(self._update_custom_model_op(customization_id, name, description, words), timeout)

    async def update_custom_model_async(
        self,
        customization_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        words: Optional[Iterable[Word]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        await self._acall(self._update_custom_model_op(customization_id, name, description, words), timeout)

    def _get_custom_model_op(self, customization_id: str) -> Operation:
        return Operation(
            "GET",
            "v1/customizations/{customization_id}",
            path_params={"customization_id": customization_id},
            errors=error_map(304, 400, 401, 500, 503),
            decode=json_body(CustomModel.from_dict),
            resource_id=customization_id,
        )

    def get_custom_model(self, customization_id: str, *, timeout: Optional[float] = None) -> CustomModel:
        return self._call(self._get_custom_model_op(customization_id), timeout)

    async def get_custom_model_async(self, customization_id: str, *, timeout: Optional[float] = None) -> CustomModel:
        return await self._acall(self._get_custom_model_op(customization_id), timeout)

    def _delete_custom_model_op(self, customization_id: str) -> Operation:
        return Operation(
            "DELETE",
            "v1/customizations/{customization_id}",
            path_params={"customization_id": customization_id},
            success=(204,),
            errors=error_map(400, 401, 500, 503),
            resource_id=customization_id,
        )

    def delete_custom_model(self, customization_id: str, *, timeout: Optional[float] = None) -> None:
        self._call(self._delete_custom_model_op(customization_id), timeout)

    async def delete_custom_model_async(self, customization_id: str, *, timeout: Optional[float] = None) -> None:
        await self._acall(self._delete_custom_model_op(customization_id), timeout)

    # Custom words

    def _list_custom_words_op(self, customization_id: str) -> Operation:
        return Operation(
            "GET",
            "v1/customizations/{customization_id}/words",
            path_params={"customization_id": customization_id},
            errors=error_map(400, 401, 500, 503),
            decode=json_list(Word.from_dict, "words"),
            resource_id=customization_id,
        )

    def list_custom_words(self, customization_id: str, *, timeout: Optional[float] = None) -> List[Word]:
        return self._call(self._list_custom_words_op(customization_id), timeout)

    async def list_custom_words_async(self, customization_id: str, *, timeout: Optional[float] = None) -> List[Word]:
        return await self._acall(self._list_custom_words_op(customization_id), timeout)

    def _add_custom_words_op(self, customization_id: str, words: Iterable[Word]) -> Operation:
        return Operation(
            "POST",
            "v1/customizations/{customization_id}/words",
            path_params={"customization_id": customization_id},
            json={"words": [word.to_dict() for word in words]},
            errors=error_map(400, 401, 500, 503),
            resource_id=customization_id,
        )

    def add_custom_words(self, customization_id: str, words: Iterable[Word], *, timeout: Optional[float] = None) -> None:
        """Add several words at once; existing words are overwritten."""
        self._call(self._add_custom_words_op(customization_id, words), timeout)

    async def add_custom_words_async(
        self, customization_id: str, words: Iterable[Word], *, timeout: Optional[float] = None
    ) -> None:
        await self._acall(self._add_custom_words_op(customization_id, words), timeout)

    def _add_custom_word_op(self, customization_id: str, word: Word) -> Operation:
        body = {"translation": word.translation}
        if word.part_of_speech is not None:
            body["part_of_speech"] = word.part_of_speech
        return Operation(
            "PUT",
            "v1/customizations/{customization_id}/words/{word}",
            path_params={"customization_id": customization_id, "word": word.word},
            json=body,
            errors=error_map(400, 401, 500, 503),
            resource_id=customization_id,
        )

    def add_custom_word(self, customization_id: str, word: Word, *, timeout: Optional[float] = None) -> None:
        self._call(self._add_custom_word_op(customization_id, word), timeout)

    async def add_custom_word_async(self, customization_id: str, word: Word, *, timeout: Optional[float] = None) -> None:
        await self._acall(self._add_custom_word_op(customization_id, word), timeout)

    def _get_custom_word_op(self, customization_id: str, word: str) -> Operation:
        return Operation(
            "GET",
            "v1/customizations/{customization_id}/words/{word}",
            path_params={"customization_id": customization_id, "word": word},
            errors=error_map(400, 401, 500, 503),
            decode=json_body(lambda data: Word.from_dict(data, word=word)),
            resource_id=customization_id,
        )

    def get_custom_word(self, customization_id: str, word: str, *, timeout: Optional[float] = None) -> Word:
        return self._call(self._get_custom_word_op(customization_id, word), timeout)

    async def get_custom_word_async(self, customization_id: str, word: str, *, timeout: Optional[float] = None) -> Word:
        return await self._acall(self._get_custom_word_op(customization_id, word), timeout)

    def _delete_custom_word_op(self, customization_id: str, word: str) -> Operation:
        return Operation(
            "DELETE",
            "v1/customizations/{customization_id}/words/{word}",
            path_params={"customization_id": customization_id, "word": word},
            success=(204,),
            errors=error_map(400, 401, 500, 503),
            resource_id=customization_id,
        )

    def delete_custom_word(self, customization_id: str, word: str, *, timeout: Optional[float] = None) -> None:
        self._call(self._delete_custom_word_op(customization_id, word), timeout)

    async def delete_custom_word_async(self, customization_id: str, word: str, *, timeout: Optional[float] = None) -> None:
        await self._acall(self._delete_custom_word_op(customization_id, word), timeout)

    # Custom prompts

    def _list_custom_prompts_op(self, customization_id: str) -> Operation:
        return Operation(
            "GET",
            "v1/customizations/{customization_id}/prompts",
            path_params={"customization_id": customization_id},
            errors=error_map(400, 401, 500, 503),
            decode=json_list(Prompt.from_dict, "prompts"),
            resource_id=customization_id,
        )

    def list_custom_prompts(self, customization_id: str, *, timeout: Optional[float] = None) -> List[Prompt]:
        return self._call(self._list_custom_prompts_op(customization_id), timeout)

    async def list_custom_prompts_async(self, customization_id: str, *, timeout: Optional[float] = None) -> List[Prompt]:
        return await self._acall(self._list_custom_prompts_op(customization_id), timeout)

    def _add_custom_prompt_op(
        self,
        customization_id: str,
        prompt_id: str,
        prompt_text: str,
        filename: str,
        audio: bytes,
        speaker_id: Optional[str],
    ) -> Operation:
        metadata = {"prompt_text": prompt_text}
        if speaker_id is not None:
            metadata["speaker_id"] = speaker_id
        return Operation(
            "POST",
            "v1/customizations/{customization_id}/prompts/{prompt_id}",
            path_params={"customization_id": customization_id, "prompt_id": prompt_id},
            files={
                "metadata": (None, json.dumps(metadata), "application/json"),
                "file": (filename, audio, "audio/wav"),
            },
            success=(200, 201),
            errors=error_map(400, 401, 415, 500, 503),
            decode=json_body(Prompt.from_dict),
            resource_id=customization_id,
        )

    def add_custom_prompt(
        self,
        customization_id: str,
        prompt_id: str,
        prompt_text: str,
        audio_file: PathLike,
        speaker_id: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Prompt:
        """Add a prompt (text plus a WAV recording of it) to a custom model.

        The audio must be WAV, at least 16 kHz and at most 30 seconds long.
        Prompts are supported only for US English custom models.
        """
        audio = _read_audio(audio_file)
        operation = self._add_custom_prompt_op(
            customization_id, prompt_id, prompt_text, Path(audio_file).name, audio, speaker_id
        )
        return self._call(operation, timeout)

    async def add_custom_prompt_async(
        self,
        customization_id: str,
        prompt_id: str,
        prompt_text: str,
        audio_file: PathLike,
        speaker_id: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Prompt:
        audio = await asyncio.to_thread(_read_audio, audio_file)
        operation = self._add_custom_prompt_op(
            customization_id, prompt_id, prompt_text, Path(audio_file).name, audio, speaker_id
        )
        return await self._acall(operation, timeout)

    def _get_custom_prompt_op(self, customization_id: str, prompt_id: str) -> Operation:
        return Operation(
            "GET",
            "v1/customizations/{customization_id}/prompts/{prompt_id}",
            path_params={"customization_id": customization_id, "prompt_id": prompt_id},
            errors=error_map(400, 401, 500, 503),
            decode=json_body(Prompt.from_dict),
            resource_id=customization_id,
        )

    def get_custom_prompt(self, customization_id: str, prompt_id: str, *, timeout: Optional[float] = None) -> Prompt:
        return self._call(self._get_custom_prompt_op(customization_id, prompt_id), timeout)

    async def get_custom_prompt_async(
        self, customization_id: str, prompt_id: str, *, timeout: Optional[float] = None
    ) -> Prompt:
        return await self._acall(self._get_custom_prompt_op(customization_id, prompt_id), timeout)

    def _delete_custom_prompt_op(self, customization_id: str, prompt_id: str) -> Operation:
        return Operation(
            "DELETE",
            "v1/customizations/{customization_id}/prompts/{prompt_id}",
            path_params={"customization_id": customization_id, "prompt_id": prompt_id},
            success=(204,),
            errors=error_map(400, 401, 500, 503),
            resource_id=customization_id,
        )

    def delete_custom_prompt(self, customization_id: str, prompt_id: str, *, timeout: Optional[float] = None) -> None:
        self._call(self._delete_custom_prompt_op(customization_id, prompt_id), timeout)

    async def delete_custom_prompt_async(
        self, customization_id: str, prompt_id: str, *, timeout: Optional[float] = None
    ) -> None:
        await self._acall(self._delete_custom_prompt_op(customization_id, prompt_id), timeout)

    # Speaker models

    def _list_speaker_models_op(self) -> Operation:
        return Operation(
            "GET",
            "v1/speakers",
            errors=error_map(400, 500, 503),
            decode=json_list(Speaker.from_dict, "speakers"),
        )

    def list_speaker_models(self, *, timeout: Optional[float] = None) -> List[Speaker]:
        return self._call(self._list_speaker_models_op(), timeout)

    async def list_speaker_models_async(self, *, timeout: Optional[float] = None) -> List[Speaker]:
        return await self._acall(self._list_speaker_models_op(), timeout)

    def _create_speaker_model_op(self, speaker_name: str, audio: bytes) -> Operation:
        return Operation(
            "POST",
            "v1/speakers",
            params=[("speaker_name", speaker_name)],
            content=audio,
            content_type="audio/wav",
            success=(201,),
            errors=error_map(400, 401, 415, 500, 503),
            decode=json_body(lambda data: data["speaker_id"]),
        )

    def create_speaker_model(self, speaker_name: str, audio_file: PathLike, *, timeout: Optional[float] = None) -> str:
        """Enroll a speaker from a WAV sample (16 kHz or more, up to one minute).

        Returns the new speaker ID.
        """
        return self._call(self._create_speaker_model_op(speaker_name, _read_audio(audio_file)), timeout)

    async def create_speaker_model_async(
        self, speaker_name: str, audio_file: PathLike, *, timeout: Optional[float] = None
    ) -> str:
        audio = await asyncio.to_thread(_read_audio, audio_file)
        return await self._acall(self._create_speaker_model_op(speaker_name, audio), timeout)

    def _get_speaker_model_op(self, speaker_id: str) -> Operation:
        return Operation(
            "GET",
            "v1/speakers/{speaker_id}",
            path_params={"speaker_id": speaker_id},
            errors=error_map(304, 400, 401, 500, 503),
            decode=json_list(SpeakerCustomModel.from_dict, "customizations"),
            resource_id=speaker_id,
        )

    def get_speaker_model(self, speaker_id: str, *, timeout: Optional[float] = None) -> List[SpeakerCustomModel]:
        """Prompts defined by a speaker, grouped by custom model."""
        return self._call(self._get_speaker_model_op(speaker_id), timeout)

    async def get_speaker_model_async(
        self, speaker_id: str, *, timeout: Optional[float] = None
    ) -> List[SpeakerCustomModel]:
        return await self._acall(self._get_speaker_model_op(speaker_id), timeout)

    def _delete_speaker_model_op(self, speaker_id: str) -> Operation:
        return Operation(
            "DELETE",
            "v1/speakers/{speaker_id}",
            path_params={"speaker_id": speaker_id},
            success=(204,),
            errors=error_map(400, 401, 500, 503),
            resource_id=speaker_id,
        )

    def delete_speaker_model(self, speaker_id: str, *, timeout: Optional[float] = None) -> None:
        self._call(self._delete_speaker_model_op(speaker_id), timeout)

    async def delete_speaker_model_async(self, speaker_id: str, *, timeout: Optional[float] = None) -> None:
        await self._acall(self._delete_speaker_model_op(speaker_id), timeout)

    # Pronunciation

    def _get_pronunciation_op(
        self,
        text: str,
        voice: Optional[VoiceLike],
        format: Optional[PhonemeFormat],
        customization_id: Optional[str],
    ) -> Operation:
        return Operation(
            "GET",
            "v1/pronunciation",
            params=[
                ("text", text),
                ("voice", self._resolve_voice(voice)),
                ("format", (format or PhonemeFormat.default()).id()),
                ("customization_id", customization_id),
            ],
            errors=error_map(304, 400, 401, 404, 406, 500, 503),
            decode=json_body(Pronunciation.from_dict),
            resource_id=customization_id,
        )

    def get_pronunciation(
        self,
        text: str,
        voice: Optional[VoiceLike] = None,
        format: Optional[PhonemeFormat] = None,
        customization_id: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Pronunciation:
        """Phonetic pronunciation of a word in IPA (default) or IBM SPR."""
        return self._call(self._get_pronunciation_op(text, voice, format, customization_id), timeout)

    async def get_pronunciation_async(
        self,
        text: str,
        voice: Optional[VoiceLike] = None,
        format: Optional[PhonemeFormat] = None,
        customization_id: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Pronunciation:
        return await self._acall(self._get_pronunciation_op(text, voice, format, customization_id), timeout)

    # Synthesis

    def _synthesise_op(
        self,
        text: str,
        format: Optional[AudioFormat],
        customization_id: Optional[str],
        voice: Optional[VoiceLike],
    ) -> Operation:
        return Operation(
            "GET",
            "v1/synthesize",
            params=[
                ("text", text),
                ("voice", self._resolve_voice(voice)),
                ("accept", format.id() if format else None),
                ("customization_id", customization_id),
            ],
            errors=error_map(400, 404, 406, 415, 500, 503),
            decode=raw_bytes,
            resource_id=customization_id,
        )

    def synthesise(
        self,
        text: str,
        format: Optional[AudioFormat] = None,
        customization_id: Optional[str] = None,
        *,
        voice: Optional[VoiceLike] = None,
        timeout: Optional[float] = None,
    ) -> bytes:
        """Synthesise ``text`` and return the audio bytes untouched.

        Without ``format`` the service answers in its default, Ogg/Opus. The
        voice defaults to the client's current voice; a custom model only
        applies when its language matches the voice.
        """
        return self._call(self._synthesise_op(text, format, customization_id, voice), timeout)

    async def synthesise_async(
        self,
        text: str,
        format: Optional[AudioFormat] = None,
        customization_id: Optional[str] = None,
        *,
        voice: Optional[VoiceLike] = None,
        timeout: Optional[float] = None,
    ) -> bytes:
        return await self._acall(self._synthesise_op(text, format, customization_id, voice), timeout)

    # User data

    def _delete_user_data_op(self, customer_id: str) -> Operation:
        return Operation(
            "DELETE",
            "v1/user_data/{customer_id}",
            path_params={"customer_id": customer_id},
            success=(200, 204),
            errors=error_map(400, 500, 503),
            decode=no_content,
            resource_id=customer_id,
        )

    def delete_user_data(self, customer_id: str, *, timeout: Optional[float] = None) -> None:
        """Delete everything associated with ``customer_id``; a no-op if nothing is."""
        self._call(self._delete_user_data_op(customer_id), timeout)

    async def delete_user_data_async(self, customer_id: str, *, timeout: Optional[float] = None) -> None:
        await self._acall(self._delete_user_data_op(customer_id), timeout)
