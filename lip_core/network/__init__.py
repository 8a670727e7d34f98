"""Network collaborators for version resolution."""

from .module import check_module_path, escape_module_path
from .proxy import ProxyClient, version_list_url

__all__ = [
    "ProxyClient",
    "check_module_path",
    "escape_module_path",
    "version_list_url",
]
