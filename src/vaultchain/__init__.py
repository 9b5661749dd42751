"""VaultChain: command-line bootstrap around an asynchronous step chain."""

from vaultchain.app import VaultChain
from vaultchain.config import AppConfig
from vaultchain.errors import VaultChainError

__version__ = "0.1.0"

__all__ = ["AppConfig", "VaultChain", "VaultChainError", "__version__"]
