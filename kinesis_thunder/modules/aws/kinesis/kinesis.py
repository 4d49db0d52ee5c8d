from typing import Optional

from pulumi import ResourceOptions, log
from pulumi_aws import kinesis, kms

from kinesis_thunder.lib.aws.base import AWSModule
from kinesis_thunder.lib.iam import create_policy
from kinesis_thunder.lib.tags import compose_tags
from .config import (
    SHARD_LEVEL_METRICS,
    KinesisConfig,
    KinesisExports,
    KinesisStreamExport,
    ResolvedStream,
)
from .defaults import resolve_streams, streams_requiring_keys
from .naming import (
    key_alias_name,
    key_description,
    policy_description,
    policy_name,
    policy_path,
    stream_name,
)
from .policies import generate_stream_policy
from .types import EncryptionType, PolicyAccess


class Kinesis(AWSModule):
    def build(self, config: KinesisConfig) -> KinesisExports:
        self._warn_on_metrics_override(config)

        streams = resolve_streams(config.streams, config.stream_defaults)
        encrypted = set(streams_requiring_keys(streams.keys(), config.use_encryption))
        tags = compose_tags(config.tags, config.environment, config.namespace)

        log.debug(f"creating {len(streams)} streams in namespace `{config.namespace}`, encrypted: {sorted(encrypted)}")

        return KinesisExports.from_streams(
            [
                self._create_stream(config.namespace, stream, tags, encrypt=stream.name in encrypted)
                for stream in streams.values()
            ]
        )

    def _create_stream(
        self, namespace: str, stream: ResolvedStream, tags: dict, encrypt: bool
    ) -> KinesisStreamExport:
        name = stream_name(namespace, stream.name)
        key = self._create_key(namespace, stream.name, tags) if encrypt else None

        kinesis_stream = kinesis.Stream(
            name,
            name=name,
            shard_count=stream.shard_count,
            retention_period=stream.retention_period,
            enforce_consumer_deletion=stream.enforce_consumer_deletion,
            # stream.shard_level_metrics is not applied
            shard_level_metrics=list(SHARD_LEVEL_METRICS),
            encryption_type=EncryptionType.KMS.value if key else EncryptionType.NONE.value,
            kms_key_id=key.id if key else None,
            tags=tags,
            opts=ResourceOptions(parent=self),
        )

        read_policy, write_policy = [
            self._create_policy(namespace, stream.name, access, kinesis_stream, key, tags)
            for access in (PolicyAccess.READ_ONLY, PolicyAccess.READ_WRITE)
        ]

        return KinesisStreamExport(
            name=stream.name,
            arn=kinesis_stream.arn,
            read_only_policy_arn=read_policy.arn,
            writer_policy_arn=write_policy.arn,
        )

    def _create_key(self, namespace: str, name: str, tags: dict) -> kms.Key:
        """
        Create the KMS key dedicated to a single stream, along with a friendly alias
        """
        key = kms.Key(
            f"{stream_name(namespace, name)}-key",
            description=key_description(namespace, name),
            enable_key_rotation=True,
            tags=tags,
            opts=ResourceOptions(parent=self),
        )

        kms.Alias(
            f"{stream_name(namespace, name)}-alias",
            name=key_alias_name(namespace, name),
            target_key_id=key.key_id,
            opts=ResourceOptions(parent=key),
        )

        return key

    def _create_policy(
        self,
        namespace: str,
        name: str,
        access: PolicyAccess,
        stream: kinesis.Stream,
        key: Optional[kms.Key],
        tags: dict,
    ):
        return create_policy(
            policy_name(namespace, name, access),
            generate_stream_policy(access, stream.arn, key.arn if key else None),
            path=policy_path(namespace),
            description=policy_description(namespace, name, access),
            tags=tags,
            opts=ResourceOptions(parent=stream),
        )

    @staticmethod
    def _warn_on_metrics_override(config: KinesisConfig) -> None:
        overridden = [
            stream.name
            for stream in config.streams
            if stream.shard_level_metrics is not None and stream.shard_level_metrics != SHARD_LEVEL_METRICS
        ]
        if config.stream_defaults.shard_level_metrics != SHARD_LEVEL_METRICS:
            overridden.insert(0, "stream_defaults")

        if overridden:
            log.warn(
                f"`shard_level_metrics` is set on {', '.join(overridden)} but is not applied, "
                f"streams always enable {SHARD_LEVEL_METRICS}"
            )
