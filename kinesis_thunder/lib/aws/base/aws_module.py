from abc import ABC

from kinesis_thunder.lib.base import BaseModule


class AWSModule(BaseModule, ABC):
    """
    Base class for thunder modules using the AWS provider
    """

    provider: str = "aws"
