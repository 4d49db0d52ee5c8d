import json
from functools import cache
from typing import Optional

from jmespath import search
from pulumi import StackReference, Output


@cache
def get_stack_output(stack: str) -> Output:
    """Get the output a thunder stack exported under its own name

    One ``StackReference`` is created per stack, however many lookups are made against it.

    :param stack: Name of the stack
    :return: The stack's output wrapped in Output
    """
    return StackReference(f"{stack}-stack-reference", stack_name=stack).require_output(stack)


def find_entity_in_stack_output(stack: str, path_to_list: str, value: str, path: Optional[str] = None) -> Output[dict]:
    """Find the first dictionary in a list exported by a stack whose ``path`` equals ``value``

    :param stack: Name of stack with output
    :param path_to_list: JMESPath to the list. Use "@" for identity.
    :param value: Value of ``path`` to look for
    :param path: Key compared against ``value`` in each element of the list. Defaults to "name".
    :return: dict wrapped in Output, ``None`` inside when nothing matches
    """
    literal = json.dumps(value).replace("`", "\\`")
    expression = f"{path_to_list}[?{path or 'name'} == `{literal}`] | [0]"

    return get_stack_output(stack).apply(lambda output: search(expression, output))
