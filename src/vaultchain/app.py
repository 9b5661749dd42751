"""The VaultChain application: an ordered chain of async steps run once per process."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Iterable

from vaultchain.config import AppConfig
from vaultchain.errors import VaultChainError

logger = logging.getLogger(__name__)

Step = Callable[[AppConfig], Awaitable[None]]


async def describe_config(config: AppConfig) -> None:
    """Log the active configuration (DEBUG)."""
    for key, value in config.to_dict().items():
        logger.debug("config %s=%r", key, value)


DEFAULT_STEPS: tuple[Step, ...] = (describe_config,)


class VaultChain:
    """
    Application entry object. Owns its AppConfig for its whole lifetime.

    execute() awaits each step in order. The first step that raises stops
    the chain and its exception propagates unchanged.
    """

    def __init__(self, config: AppConfig, steps: Iterable[Step] | None = None) -> None:
        self.config = config
        self._steps: list[Step] = list(DEFAULT_STEPS if steps is None else steps)
        self._executed = False

    @property
    def steps(self) -> tuple[Step, ...]:
        return tuple(self._steps)

    def add_step(self, step: Step) -> None:
        """Append a step to the chain. Only allowed before execute()."""
        if self._executed:
            raise VaultChainError("Cannot add steps after execute() has run")
        self._steps.append(step)

    async def execute(self) -> None:
        if self._executed:
            raise VaultChainError("execute() may only run once per VaultChain instance")
        self._executed = True
        logger.debug("Running %d step(s)", len(self._steps))
        for index, step in enumerate(self._steps, start=1):
            name = getattr(step, "__name__", repr(step))
            logger.debug("[%d/%d] %s", index, len(self._steps), name)
            await step(self.config)
        logger.debug("Chain complete")
