import os
from typing import Optional, Union
from urllib.parse import urlsplit

from .formats import WatsonVoice
from .models import AccessToken


class WatsonConfig:
    """Configuration for one Watson service instance.

    Holds the instance URL, the bearer token and, for Text to Speech, the
    default voice used when a call does not name one.
    """

    def __init__(
        self,
        *,
        service_url: str,
        authorization_token: Optional[str] = None,
        voice: Union[WatsonVoice, str, None] = None,
    ) -> None:
        """Initialize WatsonConfig.

        Args:
            service_url: Instance URL, e.g. https://api.us-south.text-to-speech.watson.cloud.ibm.com/instances/<id>
            authorization_token: IAM access token sent as a bearer token
            voice: Default synthesis voice (WatsonVoice or its literal id)
        """
        self.service_url = service_url
        self.authorization_token = authorization_token
        self.voice = WatsonVoice(voice) if isinstance(voice, str) else (voice or WatsonVoice.default())

    @classmethod
    def from_authorization_token(cls, token: str, service_url: str, **kwargs) -> "WatsonConfig":
        return cls(service_url=service_url, authorization_token=token, **kwargs)

    @classmethod
    def from_access_token(cls, token: AccessToken, service_url: str, **kwargs) -> "WatsonConfig":
        """Create WatsonConfig from the record returned by IamAuthenticator.exchange."""
        return cls(service_url=service_url, authorization_token=token.access_token, **kwargs)

    @classmethod
    def from_env(cls, **kwargs) -> "WatsonConfig":
        """Create WatsonConfig from WATSON_SERVICE_URL, WATSON_TOKEN and WATSON_VOICE."""
        return cls(
            service_url=os.environ.get("WATSON_SERVICE_URL", ""),
            authorization_token=os.environ.get("WATSON_TOKEN"),
            voice=os.environ.get("WATSON_VOICE") or None,
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self.service_url.rstrip("/")

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def validate(self) -> None:
        if not self.service_url:
            raise ValueError("service_url is required for WatsonConfig")
        if urlsplit(self.service_url).scheme != "https":
            raise ValueError("service_url must use https")
        if not self.authorization_token:
            raise ValueError("authorization_token must be provided.")

    def __repr__(self) -> str:
        return f"WatsonConfig(service_url={self.service_url!r}, voice={self.voice.id()!r})"
