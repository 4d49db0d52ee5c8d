from .kinesis import Kinesis
