from dataclasses import fields, is_dataclass
from typing import Any

from pulumi import Output, get_stack


def _map_dict(val: dict) -> dict:
    return {k: _map(v) for k, v in val.items()}


def _map(val: Any) -> Any:
    if isinstance(val, list):
        return [_map(v) for v in val]
    elif isinstance(val, dict):
        return _map_dict(val)
    elif is_dataclass(val) and not isinstance(val, type):
        return {f.name: _map(getattr(val, f.name)) for f in fields(val)}
    elif isinstance(val, Output):
        return val
    elif isinstance(val, type):
        raise TypeError(f"Unexpected value '{val}' of type '{type(val)}'")
    else:
        return val


def exports_to_dict(exports: object) -> dict:
    """Recursively convert an exports dataclass into plain dicts and lists, leaving ``Output`` values in place

    :param exports: A module exports object and a dataclass instance
    :return: dict
    """
    return _map(exports)


def outputs_from_exports(exports: object) -> dict:
    """Generate a serializable output from a Pulumi exports object

    Recursively converts dataclasses to dict.

    Raises an exception for any class object found.

    :param exports: A module exports object and a dataclass instance
    :return: The output for the module
    """
    return {
        get_stack(): exports_to_dict(exports),
    }
