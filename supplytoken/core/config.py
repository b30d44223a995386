# supplytoken/core/config.py

import logging
import os
from dataclasses import dataclass

from .arithmetic import UINT256_BITS

@dataclass(frozen=True)
class TokenConfig:
    """
    Settings shared by the token logic and its proxy.

    Attributes:
        bits: width of balances and total supply
        log_level: level applied by configure_logging
    """
    bits: int = UINT256_BITS
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.bits <= 0:
            raise ValueError("bits must be positive")

    @classmethod
    def from_env(cls, environ=None) -> "TokenConfig":
        """Build a config from SUPPLYTOKEN_* environment variables."""
        environ = os.environ if environ is None else environ
        return cls(
            bits=int(environ.get("SUPPLYTOKEN_BITS", UINT256_BITS)),
            log_level=environ.get("SUPPLYTOKEN_LOG_LEVEL", "WARNING").upper(),
        )

def configure_logging(config: TokenConfig = None):
    """Opt-in console logging for scripts; the library itself adds no handlers."""
    config = config or TokenConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
