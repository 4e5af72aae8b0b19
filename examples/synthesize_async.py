"""
Example: synthesise several lines concurrently on one client.

Environment variables:
- WATSON_SERVICE_URL (instance URL from the service credentials)
- WATSON_APIKEY (IAM API key)
"""
import asyncio
import os
from pathlib import Path

from watson_speech import AudioFormat, IamAuthenticator, TextToSpeech, WatsonConfig

LINES = ["Good morning.", "Your meeting starts in five minutes.", "Goodbye."]


async def main() -> None:
    service_url = os.environ.get("WATSON_SERVICE_URL")
    apikey = os.environ.get("WATSON_APIKEY")
    if not service_url or not apikey:
        raise SystemExit("Set WATSON_SERVICE_URL and WATSON_APIKEY.")

    async with IamAuthenticator() as auth:
        token = await auth.exchange_async(apikey)

    async with TextToSpeech(WatsonConfig.from_access_token(token, service_url)) as tts:
        clips = await asyncio.gather(*(tts.synthesise_async(line, AudioFormat.wav()) for line in LINES))

    for index, audio in enumerate(clips):
        output = Path(f"line_{index}.wav")
        output.write_bytes(audio)
        print(f"Wrote {output}")


if __name__ == "__main__":
    asyncio.run(main())
