"""
Example: Asking for a location guess from the command line.

This demonstrates:
- Building a GeolocationAgent from environment configuration
- Attaching local image files as inline data URIs
- Multi-turn follow-up questions in the same conversation

Usage:
    python examples/relay_usage.py photo.jpg [more.png ...]
"""

import asyncio
import mimetypes
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

from guessr.agents import GeolocationAgent
from guessr.models import ImageRef


def load_image(path: Path) -> ImageRef:
    mime_type = mimetypes.guess_type(path.name)[0] or "image/jpeg"
    return ImageRef.from_bytes(path.read_bytes(), mime_type)


async def main(paths):
    agent = GeolocationAgent()
    print(f"Using provider: {agent.provider.config.provider} ({agent.provider.model})")

    for path in paths:
        agent.attach_image(load_image(Path(path)))

    question = ""
    while True:
        outcome = await agent.ask(question)
        if outcome is not None:
            print(f"\nAssistant: {outcome.reply}\n")

        try:
            question = input("You (empty to quit): ").strip()
        except EOFError:
            break
        if not question:
            break


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:]))
