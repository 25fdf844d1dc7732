import asyncio
import logging
import sys
from jobscraper.core.runner import runner

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


async def main():
    """
    Main entry point. Search keywords, location and output file come from
    the environment (see jobscraper/config/settings.py).
    """
    path = await runner.run()
    print(f"file saved: {path}")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
