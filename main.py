"""
Lead-capture assistant entry point.

Runs the offline console chat. Property pages embed the controller
directly; this entry point is for development and demos.

Usage:
    python main.py
    python main.py --property sea-view-villa --scenario buy
"""

import logging

from lead_assistant.config import settings

logger = logging.getLogger(__name__)


def _run_console_mode() -> None:
    """Start the offline console demo (no network required)."""
    from console_demo import main as console_main

    logger.debug("Starting console mode for '%s'", settings.assistant_name)
    console_main()


if __name__ == "__main__":
    _run_console_mode()
