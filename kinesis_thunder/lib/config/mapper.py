import json
from enum import Enum
from typing import Type, Any

from dacite import from_dict, Config, DaciteError, DaciteFieldError
from pulumi import log, runtime

from kinesis_thunder.lib.base import ConfigType
from .exceptions import ConfigValidationError


def _parse_args_value(value: Any) -> Any:
    """Parse and return json values if valid json, else return original value

    :param value: A potential json string
    :return: Parsed json object or raw arg
    """
    try:
        return json.loads(value)
    except (json.decoder.JSONDecodeError, TypeError):
        return value


def get_raw_stack_config(stack: str) -> dict:
    """Pull stack config from Pulumi internals, clean it and return in dict form

    This method may break when upgrading the ``pulumi`` python dependency.

    :param stack: Name of the stack
    :return: dict
    """
    stack_prefix = stack + ":"

    config = {
        k.removeprefix(stack_prefix): _parse_args_value(v)
        for k, v in runtime.config.CONFIG.items()
        if k.startswith(stack_prefix)
    }

    log.debug(f"config dict for stack `{stack}` is {config}")

    return config


def config_from_dict(config_cls: Type[ConfigType], data: dict) -> ConfigType:
    """Map a raw config dict onto a config dataclass

    Uses `dacite <https://github.com/konradhalas/dacite>`_ in strict mode, so unknown keys are rejected
    along with missing and mistyped ones.

    :param config_cls: The dataclass for the config
    :param data: Raw config
    :return: The config expressed in ``config_cls``
    :raises ConfigValidationError: If ``data`` doesn't fit ``config_cls``
    """
    try:
        return from_dict(
            data_class=config_cls,
            data=data,
            config=Config(
                cast=[Enum],
                strict=True,
            ),
        )
    except DaciteFieldError as e:
        raise ConfigValidationError(str(e), key=e.field_path) from e
    except DaciteError as e:
        raise ConfigValidationError(str(e)) from e


def get_stack_config(stack: str, config_cls: Type[ConfigType]) -> ConfigType:
    """Get a stack config in dataclass form

    :param stack: Name of the stack
    :param config_cls: The dataclass for the config
    :return: The stack config expressed in the module's config dataclass
    """
    raw_config = get_raw_stack_config(stack)

    config = config_from_dict(config_cls, raw_config)

    log.debug(f"config for stack `{stack}` is {config}")

    return config
