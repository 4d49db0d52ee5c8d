from functools import cached_property
from os import walk
from pathlib import Path

from pulumi import log

from .lazy_module import LazyModule

_modules_path = Path(__file__).absolute().parent.parent / "modules"


def _get_dirs(path: Path) -> list[str]:
    """Get all directories in ``path`` that don't start with underscore"""
    _, dirs, _ = next(walk(path))
    return sorted(d for d in dirs if not d.startswith("_"))


def discover_modules() -> dict[str, dict[str, LazyModule]]:
    """Find all modules

    Assumes that the path to a module is ``kinesis_thunder/modules/{provider}/{module}``. The folder name is converted
    from snake to kebab case for the nested dictionary key, since stacks are named after the module they run.

    Example::

        # kinesis_thunder
        # └── modules
        #     └── aws
        #         └── kinesis

        {
            "aws": {
                "kinesis": LazyModule(provider='aws', name='kinesis'),
            },
        }

    :return: A mapping of providers to mappings of module names to lazy modules
    """
    return {
        provider: {
            module_name.replace("_", "-"): LazyModule(provider, module_name)
            for module_name in _get_dirs(_modules_path / provider)
        }
        for provider in _get_dirs(_modules_path)
    }


class _ModuleManager:
    """Hands out thunder modules by provider and stack name. Discovery runs on first lookup."""

    @cached_property
    def modules(self) -> dict[str, dict[str, LazyModule]]:
        modules = discover_modules()

        log.debug(f"discovered modules `{modules}` in `{_modules_path}`")

        return modules

    def get_module(self, provider: str, module_name: str) -> LazyModule:
        """Returns the module without importing it.

        :param provider: Provider name
        :param module_name: Module name, in kebab case
        :return: A LazyModule
        :raises ModuleNotFoundError: If no such module exists for the provider
        """
        try:
            lazy_module = self.modules[provider][module_name]
        except KeyError:
            known = ", ".join(self.modules.get(provider, {})) or "none"
            raise ModuleNotFoundError(
                f"module `{module_name}` was not found under provider `{provider}` (known modules: {known})"
            )

        log.debug(f"accessing module `{lazy_module}`")

        return lazy_module


module_manager = _ModuleManager()
