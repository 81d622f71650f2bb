"""
Main entry point for DINORUN.

Runs the game in the pygame simulator window.
"""

from pathlib import Path
import asyncio
import logging
import sys

from dotenv import load_dotenv

from dinorun.config.settings import get_settings

LOG_FILE = "dinorun.log"


def setup_logging(debug: bool = False, log_file: Path = Path(LOG_FILE)) -> None:
    """Configure console and file logging. The log file is truncated on each run."""
    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # Quiet noisy libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def main() -> None:
    """Main entry point."""
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("DINORUN starting...")

    try:
        from dinorun.simulator.main import run_simulator
        asyncio.run(run_simulator(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("DINORUN stopped")


if __name__ == "__main__":
    main()
