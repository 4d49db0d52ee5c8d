import logging
from pathlib import Path
from typing import Union

import hiyapyco

from .exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


def load_config_files(paths: list[Union[str, Path]]) -> dict:
    """
    Load and merge one or more YAML config files

    Files are merged in the order given using HiYaPyCo, so values in later files override values in earlier ones.
    A typical layout keeps shared settings in a base file and per-environment values in a second one:

        kinesis-thunder plan -c kinesis.common.yaml -c kinesis.prod.yaml

    :param paths: Paths of YAML files to merge
    :return: The merged config as a dict
    :raises ConfigValidationError: If a file is missing or doesn't hold a mapping
    """
    if not paths:
        raise ConfigValidationError("at least one config file is required")

    for path in paths:
        if not Path(path).is_file():
            raise ConfigValidationError(f"config file `{path}` does not exist")

    logger.debug("Merging configs %s", paths)
    loaded = hiyapyco.load([str(path) for path in paths])

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigValidationError(f"expected a mapping at the top level of the config, got `{type(loaded).__name__}`")

    return _to_builtin(loaded)


def _to_builtin(value):
    # HiYaPyCo hands back ordered mappings, dacite and the yaml dumper want plain types
    if isinstance(value, dict):
        return {k: _to_builtin(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_to_builtin(v) for v in value]
    else:
        return value
