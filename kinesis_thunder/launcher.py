import logging
import os

from pulumi import get_stack, log, export

from kinesis_thunder.lib.utils import exports_to_dict
from kinesis_thunder.module_manager import module_manager


def run_stack(provider: str, stack_name: str) -> None:
    """Invoke a module with its stack configuration

    :param provider: A provider
    :param stack_name: The stack name
    :return: None
    """
    module = module_manager.get_module(provider, stack_name)

    log.debug(f"running module `{stack_name}`")

    exports = module.run(stack_name)

    export(stack_name, exports_to_dict(exports))


def run_active_stack(provider: str) -> None:
    """Invoke the active module with its configuration

    :param provider: A provider
    :return: None
    """
    stack = get_stack()

    log.debug(f"active stack is `{stack}`")

    run_stack(provider, stack)


if os.getenv("KINESIS_THUNDER_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    msg = "kinesis thunder logging enabled"
    log.debug(msg)
    logging.debug(msg)
