"""
Typed REST client for IBM Watson Text to Speech and Speech to Text.

Authenticate with IamAuthenticator, build a WatsonConfig from the token and
the instance URL, then use TextToSpeech or SpeechToText. Every operation has
a blocking form and an ``_async`` form sharing one request description.
"""
from .auth import IamAuthenticator
from .config import WatsonConfig
from .errors import (
    BadRequest,
    FileReadError,
    InternalServerError,
    InvalidApiKey,
    NotAcceptable,
    NotAllowed,
    NotFound,
    NotModified,
    ParameterValidationFailed,
    ResponseDecodeError,
    ServiceConnectionError,
    ServiceUnavailable,
    Unauthorized,
    UnmappedResponse,
    UnsupportedMediaType,
    WatsonError,
)
from .formats import AudioEndianness, AudioFormat, Language, PhonemeFormat, SpeechModel, WatsonVoice
from .models import (
    AccessToken,
    CustomModel,
    Model,
    ModelSupportedFeatures,
    Prompt,
    Pronunciation,
    Speaker,
    SpeakerCustomModel,
    SupportedFeatures,
    Voice,
    Word,
)
from .stt import SpeechToText
from .tts import TextToSpeech

__all__ = [
    "AccessToken",
    "AudioEndianness",
    "AudioFormat",
    "BadRequest",
    "CustomModel",
    "FileReadError",
    "IamAuthenticator",
    "InternalServerError",
    "InvalidApiKey",
    "Language",
    "Model",
    "ModelSupportedFeatures",
    "NotAcceptable",
    "NotAllowed",
    "NotFound",
    "NotModified",
    "ParameterValidationFailed",
    "PhonemeFormat",
    "Prompt",
    "Pronunciation",
    "ResponseDecodeError",
    "ServiceConnectionError",
    "ServiceUnavailable",
    "Speaker",
    "SpeakerCustomModel",
    "SpeechModel",
    "SpeechToText",
    "SupportedFeatures",
    "TextToSpeech",
    "Unauthorized",
    "UnmappedResponse",
    "UnsupportedMediaType",
    "Voice",
    "WatsonConfig",
    "WatsonError",
    "WatsonVoice",
    "Word",
]
