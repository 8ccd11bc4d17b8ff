"""Application entry point for Robot Arena."""
from __future__ import annotations

import logging
from pathlib import Path

from app.app import RobotArenaApp
from core.config import load_app_config


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    root = Path(__file__).resolve().parents[1]
    app_config = load_app_config(root / "config" / "app_config.json")

    app = RobotArenaApp(app_config=app_config)
    app.run()


if __name__ == "__main__":
    main()
