from typing import Optional

from pulumi import Output

from kinesis_thunder.lib.stack import find_entity_in_stack_output

KINESIS_STACK = "kinesis"


def _require_stream(stream: Optional[dict], name: str, stack: str) -> dict:
    if stream is None:
        raise LookupError(f"stream `{name}` is not exported by stack `{stack}`")
    return stream


def get_stream(name: str, stack: str = KINESIS_STACK) -> Output[dict]:
    """Look up a stream exported by a kinesis stack

    The returned dict holds ``name``, ``arn``, ``read_only_policy_arn`` and ``writer_policy_arn``.

    :param name: Stream name as given in the kinesis stack config (without namespace)
    :param stack: Name of the kinesis stack
    :return: dict wrapped in Output
    :raises LookupError: When the stack doesn't export a stream called ``name``
    """
    return find_entity_in_stack_output(stack, "kinesis_streams", name).apply(
        lambda stream: _require_stream(stream, name, stack)
    )


def get_stream_policies(name: str, stack: str = KINESIS_STACK) -> tuple[Output[str], Output[str]]:
    """Look up the read-only and read-write policy ARNs of a stream exported by a kinesis stack

    :param name: Stream name as given in the kinesis stack config
    :param stack: Name of the kinesis stack
    :return: (read-only policy ARN, read-write policy ARN)
    """
    stream = get_stream(name, stack)

    return stream.apply(lambda s: s["read_only_policy_arn"]), stream.apply(lambda s: s["writer_policy_arn"])
