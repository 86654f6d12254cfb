"""Run the Guessr API with uvicorn: ``python -m guessr.server``."""

import logging
import os

import uvicorn
from dotenv import load_dotenv

# Load .env file from the working directory
load_dotenv()


def main() -> None:
    logging.basicConfig(
        level=os.getenv("GUESSR_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "guessr.server.app:app",
        host=os.getenv("GUESSR_HOST", "127.0.0.1"),
        port=int(os.getenv("GUESSR_PORT", 8000)),
    )


if __name__ == "__main__":
    main()
