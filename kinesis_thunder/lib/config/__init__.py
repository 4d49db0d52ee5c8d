from .exceptions import ConfigValidationError
from .loader import load_config_files
from .mapper import config_from_dict, get_raw_stack_config, get_stack_config
