"""
Example: print the Speech to Text base models of an instance.

Environment variables:
- WATSON_SERVICE_URL (Speech to Text instance URL)
- WATSON_TOKEN (IAM access token)
"""
from watson_speech import SpeechToText, WatsonConfig


def main() -> None:
    config = WatsonConfig.from_env()
    if not config.authorization_token:
        raise SystemExit("Set WATSON_SERVICE_URL and WATSON_TOKEN.")

    with SpeechToText(config) as stt:
        for model in stt.list_models():
            print(f"{model.name:32} {model.rate:>6} Hz  {model.description}")


if __name__ == "__main__":
    main()
