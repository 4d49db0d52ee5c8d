from .stack_output import find_entity_in_stack_output, get_stack_output
