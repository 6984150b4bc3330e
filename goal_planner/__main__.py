import asyncio
import sys

from dotenv import load_dotenv

from .cli import main


def run() -> None:
    # Exposes GOOGLE_API_KEY and friends from .env to the Google libraries
    load_dotenv()
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
