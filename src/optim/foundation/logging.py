from __future__ import annotations

import logging


def configure_optim_logging(*, level: int = logging.INFO) -> None:
    """
    Configure a minimal console logger for optim.

    Notes:
        - This is intentionally opt-in (library code must not call logging.basicConfig()).
        - The handler is only attached if neither the root logger nor the "optim" logger has handlers.
        - When a handler is already attached, only the level is updated.
    """
    root = logging.getLogger()
    optim_logger = logging.getLogger("optim")

    if optim_logger.handlers:
        optim_logger.setLevel(level)
        return
    # If the user already configured logging, don't interfere.
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    optim_logger.addHandler(handler)
    optim_logger.setLevel(level)
    optim_logger.propagate = False


__all__ = ["configure_optim_logging"]
