"""Records mirroring the JSON the Watson services return, field for field."""
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class AccessToken:
    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int
    expiration: int
    scope: Optional[str] = None
    delegated_refresh_token: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccessToken":
        return cls(
            access_token=data["access_token"],
            refresh_token=data["refresh_token"],
            token_type=data["token_type"],
            expires_in=data["expires_in"],
            expiration=data["expiration"],
            scope=data.get("scope"),
            delegated_refresh_token=data.get("delegated_refresh_token"),
        )

    def is_expired(self, now: Optional[float] = None, leeway: int = 0) -> bool:
        """Whether ``expiration`` (epoch seconds) has passed.

        The clients never check this themselves; call it before reusing a
        token and re-authenticate when it returns True.
        """
        if now is None:
            now = time.time()
        return now + leeway >= self.expiration

    def __repr__(self) -> str:
        return (
            f"AccessToken(token_type={self.token_type!r}, expires_in={self.expires_in}, "
            f"expiration={self.expiration}, scope={self.scope!r})"
        )


@dataclass(frozen=True)
class SupportedFeatures:
    custom_pronunciation: bool
    voice_transformation: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SupportedFeatures":
        return cls(
            custom_pronunciation=data.get("custom_pronunciation", False),
            voice_transformation=data.get("voice_transformation", False),
        )


@dataclass(frozen=True)
class Word:
    """A word and its translation in a custom model.

    ``translation`` is either a phonetic (IPA or IBM SPR) or a sounds-like
    translation. ``part_of_speech`` is only meaningful for Japanese.
    """

    word: str
    translation: str
    part_of_speech: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], word: Optional[str] = None) -> "Word":
        # Querying a single word returns only its translation.
        return cls(
            word=data.get("word", word),
            translation=data["translation"],
            part_of_speech=data.get("part_of_speech"),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"word": self.word, "translation": self.translation}
        if self.part_of_speech is not None:
            payload["part_of_speech"] = self.part_of_speech
        return payload


@dataclass(frozen=True)
class Prompt:
    prompt: str
    prompt_id: str
    status: Optional[str] = None
    error: Optional[str] = None
    speaker_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Prompt":
        return cls(
            prompt=data["prompt"],
            prompt_id=data["prompt_id"],
            status=data.get("status"),
            error=data.get("error"),
            speaker_id=data.get("speaker_id"),
        )


@dataclass(frozen=True)
class CustomModel:
    """A Text to Speech custom model.

    Creating a model returns only ``customization_id``; ``words`` and
    ``prompts`` are filled in only when a single model is fetched.
    """

    customization_id: str
    name: Optional[str] = None
    language: Optional[str] = None
    owner: Optional[str] = None
    created: Optional[str] = None
    last_modified: Optional[str] = None
    description: Optional[str] = None
    words: Optional[List[Word]] = None
    prompts: Optional[List[Prompt]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomModel":
        words = data.get("words")
        prompts = data.get("prompts")
        return cls(
            customization_id=data["customization_id"],
            name=data.get("name"),
            language=data.get("language"),
            owner=data.get("owner"),
            created=data.get("created"),
            last_modified=data.get("last_modified"),
            description=data.get("description"),
            words=[Word.from_dict(w) for w in words] if words is not None else None,
            prompts=[Prompt.from_dict(p) for p in prompts] if prompts is not None else None,
        )


@dataclass(frozen=True)
class Voice:
    url: str
    gender: str
    name: str
    language: str
    description: str
    customizable: bool
    supported_features: SupportedFeatures
    customization: Optional[CustomModel] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Voice":
        customization = data.get("customization")
        return cls(
            url=data["url"],
            gender=data["gender"],
            name=data["name"],
            language=data["language"],
            description=data["description"],
            customizable=data["customizable"],
            supported_features=SupportedFeatures.from_dict(data.get("supported_features") or {}),
            customization=CustomModel.from_dict(customization) if customization else None,
        )


@dataclass(frozen=True)
class Speaker:
    speaker_id: str
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Speaker":
        return cls(speaker_id=data["speaker_id"], name=data["name"])


@dataclass(frozen=True)
class SpeakerCustomModel:
    """Prompts a speaker has defined in one custom model."""

    customization_id: str
    prompts: List[Prompt]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpeakerCustomModel":
        return cls(
            customization_id=data["customization_id"],
            prompts=[Prompt.from_dict(p) for p in data.get("prompts", [])],
        )


@dataclass(frozen=True)
class Pronunciation:
    pronunciation: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pronunciation":
        return cls(pronunciation=data["pronunciation"])


@dataclass(frozen=True)
class ModelSupportedFeatures:
    custom_language_model: bool
    custom_acoustic_model: bool
    speaker_labels: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelSupportedFeatures":
        return cls(
            custom_language_model=data.get("custom_language_model", False),
            custom_acoustic_model=data.get("custom_acoustic_model", False),
            speaker_labels=data.get("speaker_labels", False),
        )


@dataclass(frozen=True)
class Model:
    """A Speech to Text base model."""

    name: str
    language: str
    url: str
    rate: int
    supported_features: ModelSupportedFeatures
    description: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Model":
        return cls(
            name=data["name"],
            language=data["language"],
            url=data["url"],
            rate=data["rate"],
            supported_features=ModelSupportedFeatures.from_dict(data.get("supported_features") or {}),
            description=data["description"],
        )
