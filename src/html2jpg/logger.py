"""Layered console logging for html2jpg.

Every record carries a ``layer`` that picks the leading icon and colour, so
conversion lines read as ``✓ Converted: ...`` or ``✗ Failed to convert ...``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

__all__ = [
    "logger",
    "step",
    "success",
    "debug_detail",
    "get_logger",
    "configure_logging",
]

BASE_LOGGER_NAME = "html2jpg"

# ---------------------------------------------------------------------------
# Palette and helpers

_PALETTE: Dict[str, str] = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "bold": "\033[1m",
    "blue": "\033[34m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "red": "\033[31m",
    "magenta": "\033[35m",
}


def _color_disabled() -> bool:
    return os.getenv("NO_COLOR") is not None


def _apply_color(text: str, *styles: str) -> str:
    if _color_disabled() or not styles:
        return text
    colors = "".join(_PALETTE.get(style, "") for style in styles)
    return f"{colors}{text}{_PALETTE['reset']}"


# ---------------------------------------------------------------------------
# Formatter and adapter


class LayeredFormatter(logging.Formatter):
    """Formatter that decorates output based on the record.layer attribute."""

    LAYER_MAPPINGS: Dict[str, Dict[str, Any]] = {
        "step": {"icon": "▶", "style": ("blue", "bold")},
        "success": {"icon": "✓", "style": ("green", "bold")},
        "warning": {"icon": "!", "style": ("yellow", "bold")},
        "error": {"icon": "✗", "style": ("red", "bold")},
        "debug": {"icon": "·", "style": ("magenta",)},
        "user": {"icon": "•", "style": ()},
    }

    def format(self, record: logging.LogRecord) -> str:
        layer = getattr(record, "layer", "user")
        mapping = self.LAYER_MAPPINGS.get(layer, self.LAYER_MAPPINGS["user"])
        message = super().format(record)
        if layer == "debug":
            return f"{_apply_color('[debug]', 'dim')} {message}"
        prefix = _apply_color(mapping["icon"], *mapping["style"])
        return f"{prefix} {message}"


class LayeredAdapter(logging.LoggerAdapter):
    """Logger adapter that injects a 'layer' extra value."""

    def __init__(self, logger: logging.Logger, default_layer: str = "user"):
        super().__init__(logger, {"layer": default_layer})

    def log(self, level: int, msg: Any, *args, layer: Optional[str] = None, **kwargs) -> None:
        if not self.isEnabledFor(level):
            return
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("layer", layer or self.extra.get("layer", "user"))
        self.logger.log(level, msg, *args, **kwargs)

    def warning(self, msg: Any, *args, **kwargs) -> None:  # type: ignore[override]
        kwargs.setdefault("layer", "warning")
        super().warning(msg, *args, **kwargs)

    def error(self, msg: Any, *args, **kwargs) -> None:  # type: ignore[override]
        kwargs.setdefault("layer", "error")
        super().error(msg, *args, **kwargs)


# ---------------------------------------------------------------------------
# Configuration


def _console_level() -> int:
    profile = (os.getenv("LOG_PROFILE") or "user").lower()
    level = logging.INFO
    if profile == "quiet":
        level = logging.WARNING
    elif profile in {"debug", "verbose"}:
        level = logging.DEBUG

    override = os.getenv("LOG_LEVEL")
    if override:
        named = getattr(logging, override.upper(), None)
        if isinstance(named, int):
            level = named
    return level


def configure_logging() -> logging.Logger:
    """Attach console (and optional file) handlers to the base logger once."""
    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if base_logger.handlers:
        return base_logger

    base_logger.setLevel(logging.DEBUG)
    base_logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_console_level())
    console_handler.setFormatter(LayeredFormatter("%(message)s"))
    base_logger.addHandler(console_handler)

    log_file = os.getenv("LOG_FILE")
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            base_logger.warning("Failed to configure logfile '%s': %s", log_file, exc)
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(levelname)s] %(name)s %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            file_handler.setLevel(logging.DEBUG)
            base_logger.addHandler(file_handler)

    return base_logger


logger = LayeredAdapter(logging.getLogger(BASE_LOGGER_NAME))


# ---------------------------------------------------------------------------
# Public helpers


def step(message: str) -> None:
    """Log a major step in the workflow."""
    logger.log(logging.INFO, message, layer="step")


def success(message: str) -> None:
    logger.log(logging.INFO, message, layer="success")


def debug_detail(message: str) -> None:
    """Log detailed debug information (hidden unless LOG_PROFILE=debug)."""
    logger.log(logging.DEBUG, message, layer="debug")


def get_logger(name: str, *, layer: str = "user") -> LayeredAdapter:
    """Return a child logger using the layered formatting."""
    child = logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")
    return LayeredAdapter(child, default_layer=layer)
