from .lazy_module import LazyModule
from .module_manager import discover_modules, module_manager
