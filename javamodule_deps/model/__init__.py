"""In-memory model of parsed module descriptors."""

from .cache import ModuleInfoCache
from .module_info import Directive
from .module_info import ModuleInfo
from .module_info import load_module_info
from .module_info import parse_module_info
from .module_info import source_set_to_module_name
from .module_info import to_dotted_case

__all__ = [
    "Directive",
    "ModuleInfo",
    "ModuleInfoCache",
    "load_module_info",
    "parse_module_info",
    "source_set_to_module_name",
    "to_dotted_case",
]
