from dataclasses import dataclass, field
from typing import Optional

from pulumi import Input

from kinesis_thunder.lib.config import ConfigValidationError

SHARD_LEVEL_METRICS = ["IncomingBytes", "OutgoingBytes"]
"""Enhanced shard-level metrics enabled on every stream"""


@dataclass
class KinesisStreamArgs:
    name: str
    """A name to identify the stream, unique within the stack. Prefixed with the namespace to build resource names."""

    shard_count: Optional[int] = None
    """The number of shards that the stream will use. Falls back to ``stream_defaults``."""

    retention_period: Optional[int] = None
    """Length of time (hours) data records are accessible after they are added to the stream. Falls back to
    ``stream_defaults``."""

    enforce_consumer_deletion: Optional[bool] = None
    """Deregister all consumers before the stream is deleted. Falls back to ``stream_defaults``."""

    shard_level_metrics: Optional[list[str]] = None
    """Accepted for compatibility but not applied, streams always enable ``SHARD_LEVEL_METRICS``."""


@dataclass
class StreamDefaults:
    shard_count: int = 1
    retention_period: int = 24
    enforce_consumer_deletion: bool = True
    shard_level_metrics: list[str] = field(default_factory=lambda: list(SHARD_LEVEL_METRICS))


@dataclass
class ResolvedStream:
    """A stream with every default filled in"""

    name: str
    shard_count: int
    retention_period: int
    enforce_consumer_deletion: bool
    shard_level_metrics: list[str]


@dataclass
class KinesisConfig:
    namespace: str
    """Prefix for every resource name"""

    environment: str
    """Value of the ``Environment`` tag"""

    streams: list[KinesisStreamArgs]
    """Streams to create"""

    use_encryption: bool = False
    """Encrypt every stream with its own KMS key"""

    tags: dict[str, str] = field(default_factory=dict)
    """Additional tags for every resource. ``Environment``, ``ManagedBy`` and ``Namespace`` can't be overridden."""

    stream_defaults: StreamDefaults = field(default_factory=StreamDefaults)
    """Values for stream fields left unset"""

    def __post_init__(self):
        for key in ("namespace", "environment"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value:
                raise ConfigValidationError(f"`{key}` is required and must be a non-empty string", key=key)

        if not isinstance(self.use_encryption, bool):
            raise ConfigValidationError(
                f"`use_encryption` must be a boolean, got `{self.use_encryption!r}`", key="use_encryption"
            )

        seen = set()
        for stream in self.streams:
            if not stream.name:
                raise ConfigValidationError("every stream needs a non-empty `name`", key="streams")
            if stream.name in seen:
                raise ConfigValidationError(f"stream name `{stream.name}` is used more than once", key="streams")
            seen.add(stream.name)


@dataclass
class KinesisStreamExport:
    name: str
    """Stream name as given in the config"""

    arn: Input[str]
    """Stream ARN"""

    read_only_policy_arn: Input[str]
    """ARN of the policy granting read access to the stream"""

    writer_policy_arn: Input[str]
    """ARN of the policy granting read and write access to the stream"""


@dataclass
class KinesisExports:
    kinesis_streams: list[KinesisStreamExport]
    """Streams created by this module"""

    kinesis_stream_arns: dict[str, Input[str]]
    """Stream name to stream ARN"""

    read_only_iam_policies: dict[str, Input[str]]
    """Stream name to read-only policy ARN"""

    writer_iam_policies: dict[str, Input[str]]
    """Stream name to read-write policy ARN"""

    @classmethod
    def from_streams(cls, streams: list[KinesisStreamExport]) -> "KinesisExports":
        """Project per-stream exports into the keyed views, without touching the values

        :param streams: One export per stream
        :return: KinesisExports
        """
        return cls(
            kinesis_streams=streams,
            kinesis_stream_arns={stream.name: stream.arn for stream in streams},
            read_only_iam_policies={stream.name: stream.read_only_policy_arn for stream in streams},
            writer_iam_policies={stream.name: stream.writer_policy_arn for stream in streams},
        )

