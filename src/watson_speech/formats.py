"""Closed identifier tables the Watson services match literally.

Every enum is decorated with ``@unique`` so two members can never share a
literal; ``id()`` returns the string the service expects.
"""
from dataclasses import dataclass
from enum import Enum, unique
from typing import Optional


@unique
class WatsonVoice(Enum):
    """Text to Speech voices."""
    ArMsOmar = "ar-MS_OmarVoice"
    CsCzAlena = "cs-CZ_AlenaVoice"
    DeDeBirgitV3 = "de-DE_BirgitV3Voice"
    DeDeDieterV3 = "de-DE_DieterV3Voice"
    DeDeErikaV3 = "de-DE_ErikaV3Voice"
    EnAuCraig = "en-AU_CraigVoice"
    EnAuMadison = "en-AU_MadisonVoice"
    EnAuSteve = "en-AU_SteveVoice"
    EnGbCharlotteV3 = "en-GB_CharlotteV3Voice"
    EnGbJamesV3 = "en-GB_JamesV3Voice"
    EnGbKateV3 = "en-GB_KateV3Voice"
    EnUsAllisonV3 = "en-US_AllisonV3Voice"
    EnUsEmilyV3 = "en-US_EmilyV3Voice"
    EnUsHenryV3 = "en-US_HenryV3Voice"
    EnUsKevinV3 = "en-US_KevinV3Voice"
    EnUsLisaV3 = "en-US_LisaV3Voice"
    EnUsMichaelV3 = "en-US_MichaelV3Voice"
    EnUsOliviaV3 = "en-US_OliviaV3Voice"
    EsEsEnriqueV3 = "es-ES_EnriqueV3Voice"
    EsEsLauraV3 = "es-ES_LauraV3Voice"
    EsLaSofiaV3 = "es-LA_SofiaV3Voice"
    EsUsSofiaV3 = "es-US_SofiaV3Voice"
    FrCaLouiseV3 = "fr-CA_LouiseV3Voice"
    FrFrNicolasV3 = "fr-FR_NicolasV3Voice"
    FrFrReneeV3 = "fr-FR_ReneeV3Voice"
    ItItFrancescaV3 = "it-IT_FrancescaV3Voice"
    JaJpEmiV3 = "ja-JP_EmiV3Voice"
    KoKrHyunjun = "ko-KR_HyunjunVoice"
    KoKrSiWoo = "ko-KR_SiWooVoice"
    KoKrYoungmi = "ko-KR_YoungmiVoice"
    KoKrYuna = "ko-KR_YunaVoice"
    NlBeAdele = "nl-BE_AdeleVoice"
    NlBeBram = "nl-BE_BramVoice"
    NlNlEmma = "nl-NL_EmmaVoice"
    NlNlLiam = "nl-NL_LiamVoice"
    PtBrIsabelaV3 = "pt-BR_IsabelaV3Voice"
    SvSeIngrid = "sv-SE_IngridVoice"
    ZhCnLiNa = "zh-CN_LiNaVoice"
    ZhCnWangWei = "zh-CN_WangWeiVoice"
    ZhCnZhangJing = "zh-CN_ZhangJingVoice"

    @classmethod
    def default(cls) -> "WatsonVoice":
        return cls.EnUsMichaelV3

    def id(self) -> str:
        return self.value


@unique
class Language(Enum):
    """Languages a Text to Speech custom model can be defined for."""
    ArMs = "ar-MS"
    CsCz = "cs-CZ"
    DeDe = "de-DE"
    EnAu = "en-AU"
    EnGb = "en-GB"
    EnUs = "en-US"
    EsEs = "es-ES"
    EsLa = "es-LA"
    EsUs = "es-US"
    FrCa = "fr-CA"
    FrFr = "fr-FR"
    ItIt = "it-IT"
    JaJp = "ja-JP"
    KoKr = "ko-KR"
    NlBe = "nl-BE"
    NlNl = "nl-NL"
    PtBr = "pt-BR"
    SvSe = "sv-SE"
    ZhCn = "zh-CN"

    @classmethod
    def default(cls) -> "Language":
        return cls.EnUs

    def id(self) -> str:
        return self.value


@unique
class PhonemeFormat(Enum):
    IBM = "ibm"
    IPA = "ipa"

    @classmethod
    def default(cls) -> "PhonemeFormat":
        return cls.IPA

    def id(self) -> str:
        return self.value


@unique
class AudioEndianness(Enum):
    BigEndian = "big-endian"
    LittleEndian = "little-endian"

    @classmethod
    def default(cls) -> "AudioEndianness":
        return cls.LittleEndian

    def id(self) -> str:
        return self.value


@unique
class SpeechModel(Enum):
    """Speech to Text base models, previous and next generation."""
    ArMsBroadband = "ar-MS_BroadbandModel"
    ArMsTelephony = "ar-MS_Telephony"
    CsCzTelephony = "cs-CZ_Telephony"
    DeDeBroadband = "de-DE_BroadbandModel"
    DeDeNarrowband = "de-DE_NarrowbandModel"
    DeDeMultimedia = "de-DE_Multimedia"
    DeDeTelephony = "de-DE_Telephony"
    EnAuBroadband = "en-AU_BroadbandModel"
    EnAuNarrowband = "en-AU_NarrowbandModel"
    EnAuMultimedia = "en-AU_Multimedia"
    EnAuTelephony = "en-AU_Telephony"
    EnGbBroadband = "en-GB_BroadbandModel"
    EnGbNarrowband = "en-GB_NarrowbandModel"
    EnGbMultimedia = "en-GB_Multimedia"
    EnGbTelephony = "en-GB_Telephony"
    EnInTelephony = "en-IN_Telephony"
    EnUsBroadband = "en-US_BroadbandModel"
    EnUsNarrowband = "en-US_NarrowbandModel"
    EnUsShortFormNarrowband = "en-US_ShortForm_NarrowbandModel"
    EnUsMultimedia = "en-US_Multimedia"
    EnUsTelephony = "en-US_Telephony"
    EnWwMedicalTelephony = "en-WW_Medical_Telephony"
    EsEsBroadband = "es-ES_BroadbandModel"
    EsEsNarrowband = "es-ES_NarrowbandModel"
    EsEsMultimedia = "es-ES_Multimedia"
    EsEsTelephony = "es-ES_Telephony"
    FrCaBroadband = "fr-CA_BroadbandModel"
    FrCaNarrowband = "fr-CA_NarrowbandModel"
    FrCaMultimedia = "fr-CA_Multimedia"
    FrCaTelephony = "fr-CA_Telephony"
    FrFrBroadband = "fr-FR_BroadbandModel"
    FrFrNarrowband = "fr-FR_NarrowbandModel"
    FrFrMultimedia = "fr-FR_Multimedia"
    FrFrTelephony = "fr-FR_Telephony"
    HiInTelephony = "hi-IN_Telephony"
    ItItBroadband = "it-IT_BroadbandModel"
    ItItNarrowband = "it-IT_NarrowbandModel"
    ItItMultimedia = "it-IT_Multimedia"
    ItItTelephony = "it-IT_Telephony"
    JaJpBroadband = "ja-JP_BroadbandModel"
    JaJpNarrowband = "ja-JP_NarrowbandModel"
    JaJpMultimedia = "ja-JP_Multimedia"
    JaJpTelephony = "ja-JP_Telephony"
    KoKrBroadband = "ko-KR_BroadbandModel"
    KoKrNarrowband = "ko-KR_NarrowbandModel"
    KoKrMultimedia = "ko-KR_Multimedia"
    KoKrTelephony = "ko-KR_Telephony"
    NlBeTelephony = "nl-BE_Telephony"
    NlNlBroadband = "nl-NL_BroadbandModel"
    NlNlNarrowband = "nl-NL_NarrowbandModel"
    NlNlMultimedia = "nl-NL_Multimedia"
    NlNlTelephony = "nl-NL_Telephony"
    PtBrBroadband = "pt-BR_BroadbandModel"
    PtBrNarrowband = "pt-BR_NarrowbandModel"
    PtBrMultimedia = "pt-BR_Multimedia"
    PtBrTelephony = "pt-BR_Telephony"
    SvSeTelephony = "sv-SE_Telephony"
    ZhCnBroadband = "zh-CN_BroadbandModel"
    ZhCnNarrowband = "zh-CN_NarrowbandModel"
    ZhCnTelephony = "zh-CN_Telephony"

    @classmethod
    def default(cls) -> "SpeechModel":
        return cls.EnUsBroadband

    def id(self) -> str:
        return self.value


# MIME type -> default sampling rate. None means the rate must be supplied.
_RATE_DEFAULTS = {
    "audio/alaw": None,
    "audio/flac": 22050,
    "audio/l16": None,
    "audio/ogg": 22050,
    "audio/ogg;codecs=opus": 48000,
    "audio/ogg;codecs=vorbis": 22050,
    "audio/mp3": 22050,
    "audio/mpeg": 22050,
    "audio/mulaw": None,
    "audio/wav": 22050,
    "audio/webm;codecs=vorbis": 22050,
}

# Formats whose sampling rate is fixed by the service.
_FIXED_RATE = {"audio/basic", "audio/webm", "audio/webm;codecs=opus"}


@dataclass(frozen=True)
class AudioFormat:
    """An audio MIME type as accepted by the ``accept`` synthesis parameter.

    Use the named constructors rather than building one by hand; they know
    which formats need a rate and which take none.
    """

    mime_type: str
    sample_rate: Optional[int] = None
    endianness: Optional[AudioEndianness] = None

    def __post_init__(self) -> None:
        if self.mime_type in _FIXED_RATE:
            if self.sample_rate is not None:
                raise ValueError(f"{self.mime_type} does not accept a sample rate")
        elif self.mime_type in _RATE_DEFAULTS:
            if self.sample_rate is None and _RATE_DEFAULTS[self.mime_type] is None:
                raise ValueError(f"{self.mime_type} requires a sample rate")
        else:
            raise ValueError(f"Unsupported audio format: {self.mime_type}")
        if self.endianness is not None and self.mime_type != "audio/l16":
            raise ValueError("endianness only applies to audio/l16")

    @classmethod
    def default(cls) -> "AudioFormat":
        return cls.ogg_opus(48000)

    @classmethod
    def alaw(cls, sample_rate: int) -> "AudioFormat":
        return cls("audio/alaw", sample_rate)

    @classmethod
    def basic(cls) -> "AudioFormat":
        """8000 Hz, fixed by the service."""
        return cls("audio/basic")

    @classmethod
    def flac(cls, sample_rate: Optional[int] = None) -> "AudioFormat":
        return cls("audio/flac", sample_rate)

    @classmethod
    def l16(cls, sample_rate: int, endianness: Optional[AudioEndianness] = None) -> "AudioFormat":
        return cls("audio/l16", sample_rate, endianness)

    @classmethod
    def ogg(cls, sample_rate: Optional[int] = None) -> "AudioFormat":
        return cls("audio/ogg", sample_rate)

    @classmethod
    def ogg_opus(cls, sample_rate: Optional[int] = None) -> "AudioFormat":
        return cls("audio/ogg;codecs=opus", sample_rate)

    @classmethod
    def ogg_vorbis(cls, sample_rate: Optional[int] = None) -> "AudioFormat":
        return cls("audio/ogg;codecs=vorbis", sample_rate)

    @classmethod
    def mp3(cls, sample_rate: Optional[int] = None) -> "AudioFormat":
        return cls("audio/mp3", sample_rate)

    @classmethod
    def mpeg(cls, sample_rate: Optional[int] = None) -> "AudioFormat":
        return cls("audio/mpeg", sample_rate)

    @classmethod
    def mulaw(cls, sample_rate: int) -> "AudioFormat":
        return cls("audio/mulaw", sample_rate)

    @classmethod
    def wav(cls, sample_rate: Optional[int] = None) -> "AudioFormat":
        return cls("audio/wav", sample_rate)

    @classmethod
    def webm(cls) -> "AudioFormat":
        """Opus at 48000 Hz, fixed by the service."""
        return cls("audio/webm")

    @classmethod
    def webm_opus(cls) -> "AudioFormat":
        return cls("audio/webm;codecs=opus")

    @classmethod
    def webm_vorbis(cls, sample_rate: Optional[int] = None) -> "AudioFormat":
        return cls("audio/webm;codecs=vorbis", sample_rate)

    def id(self) -> str:
        """The literal MIME string the service expects, defaults filled in."""
        if self.mime_type in _FIXED_RATE:
            return self.mime_type
        rate = self.sample_rate if self.sample_rate is not None else _RATE_DEFAULTS[self.mime_type]
        value = f"{self.mime_type};rate={rate}"
        if self.mime_type == "audio/l16":
            endianness = self.endianness or AudioEndianness.default()
            value = f"{value};endianness={endianness.id()}"
        return value
