# gridpath/app/config.py
"""
Runtime settings.

- ENV: GRIDPATH_WIDTH, GRIDPATH_HEIGHT, GRIDPATH_UI=text|viewer, GRIDPATH_LOG_LEVEL
- CLI: --width=N --height=N --ui=text|viewer --log-level=LEVEL --demo  (override ENV)
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Mapping, Optional

UIS = ("text", "viewer")


@dataclass
class Settings:
    width: int = 5
    height: int = 5
    ui: str = "text"
    log_level: str = "WARNING"
    demo: bool = False


def _size(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


def resolve_settings(argv: Optional[List[str]] = None,
                     env: Optional[Mapping[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    env = os.environ if env is None else env

    raw = {
        "width": env.get("GRIDPATH_WIDTH", "5"),
        "height": env.get("GRIDPATH_HEIGHT", "5"),
        "ui": env.get("GRIDPATH_UI", "text"),
        "log-level": env.get("GRIDPATH_LOG_LEVEL", "WARNING"),
    }
    demo = False
    for arg in argv:
        if arg == "--demo":
            demo = True
        elif arg.startswith("--") and "=" in arg:
            key, value = arg[2:].split("=", 1)
            if key not in raw:
                raise ValueError(f"unknown option --{key}")
            raw[key] = value
        else:
            raise ValueError(f"unrecognised argument {arg!r}")

    ui = raw["ui"].lower()
    if ui not in UIS:
        raise ValueError(f"ui must be one of {', '.join(UIS)}, got {raw['ui']!r}")
    level = raw["log-level"].upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level {raw['log-level']!r}")

    return Settings(width=_size("width", raw["width"]),
                    height=_size("height", raw["height"]),
                    ui=ui, log_level=level, demo=demo)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
