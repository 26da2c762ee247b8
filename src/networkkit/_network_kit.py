from functools import cached_property
from logging import getLogger
from os import environ as env
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ._codec import Codec
from ._config import Config
from ._services import FetchClient
from ._utils import setup_logging
from ._utils.constants import ENV_DEBUG, ENV_USER_AGENT, LOGGER_NAME

load_dotenv()

_TRUTHY = ("1", "true", "yes", "on")


class NetworkKit:
    """Entry point that builds a configured FetchClient.

    Settings come from the arguments first, then from the environment
    (``NETWORKKIT_USER_AGENT``, ``NETWORKKIT_DEBUG``, also read from a
    ``.env`` file), then from the Config defaults.
    """

    def __init__(
        self,
        *,
        user_agent: Optional[str] = None,
        debug: Optional[bool] = None,
        codec: Optional[Codec] = None,
    ) -> None:
        user_agent_value = user_agent or env.get(ENV_USER_AGENT)
        debug_value = (
            debug
            if debug is not None
            else env.get(ENV_DEBUG, "").strip().lower() in _TRUTHY
        )

        settings: Dict[str, Any] = {"debug": debug_value}
        if user_agent_value:
            settings["user_agent"] = user_agent_value
        self._config = Config(**settings)
        self._codec = codec

        setup_logging(self._config.debug)
        log = getLogger(LOGGER_NAME)

        log.debug("CONFIG:")
        log.debug(f"{self._config.model_dump()}\n")

    @property
    def config(self) -> Config:
        return self._config

    @cached_property
    def client(self) -> FetchClient:
        """The FetchClient for this configuration, built once and reused."""
        return FetchClient(self._config, codec=self._codec)
