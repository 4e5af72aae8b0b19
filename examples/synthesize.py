"""
Example: convert text to speech with an IAM API key or an existing token.

Environment variables:
- WATSON_SERVICE_URL (instance URL from the service credentials)
- WATSON_APIKEY (optional when WATSON_TOKEN provided)
- WATSON_TOKEN (IAM access token)
- WATSON_VOICE (optional, e.g. en-GB_KateV3Voice)
"""
import os
from pathlib import Path

from watson_speech import AudioFormat, IamAuthenticator, TextToSpeech, WatsonConfig


def main() -> None:
    config = WatsonConfig.from_env()
    apikey = os.environ.get("WATSON_APIKEY")
    if not config.authorization_token:
        if not apikey:
            raise SystemExit("Set WATSON_APIKEY or WATSON_TOKEN.")
        with IamAuthenticator() as auth:
            config.authorization_token = auth.exchange(apikey).access_token

    with TextToSpeech(config) as tts:
        audio = tts.synthesise("Hello from the Watson Text to Speech REST client!", AudioFormat.mp3())

    output = Path("output.mp3")
    output.write_bytes(audio)
    print(f"Wrote synthesized audio to {output}")


if __name__ == "__main__":
    main()
