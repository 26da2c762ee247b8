from typing import Dict

from pydantic import BaseModel, Field

from ._utils.constants import HEADER_ACCEPT, USER_AGENT_PREFIX
from ._version import __version__


def _default_headers() -> Dict[str, str]:
    return {HEADER_ACCEPT: "application/json"}


class Config(BaseModel):
    default_headers: Dict[str, str] = Field(default_factory=_default_headers)
    user_agent: str = f"{USER_AGENT_PREFIX}/{__version__}"
    follow_redirects: bool = True
    verify_ssl: bool = True
    debug: bool = False
