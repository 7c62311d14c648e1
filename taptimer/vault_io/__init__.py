# taptimer/vault_io/__init__.py
# Note storage, state persistence & console access

from .vault import Vault
from .state_file import StateFile
from .generics import read_json_safe, write_json_safe, ensure_parent

__all__ = [
    "Vault",
    "StateFile",
    "read_json_safe",
    "write_json_safe",
    "ensure_parent",
]
