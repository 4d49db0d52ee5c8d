"""
Offline rendering of the resources the ``Kinesis`` module declares.

The plan is built from the same naming, tagging and policy functions as the module, without a Pulumi engine. Values
only AWS can assign (KMS key ARNs) are rendered as ``KNOWN_AFTER_APPLY``.
"""
import json
from dataclasses import dataclass
from typing import Optional

from kinesis_thunder.lib.iam import interpolate_resource
from kinesis_thunder.lib.tags import compose_tags
from kinesis_thunder.lib.utils import exports_to_dict
from .config import SHARD_LEVEL_METRICS, KinesisConfig, KinesisExports, KinesisStreamExport
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

KNOWN_AFTER_APPLY = "(known after apply)"

STREAM_ARN = "arn:{partition}:kinesis:{region}:{account_id}:stream/{stream_name}"
POLICY_ARN = "arn:{partition}:iam::{account_id}:policy{path}{policy_name}"


@dataclass
class KeyPlan:
    stream: str
    alias: str
    description: str
    enable_key_rotation: bool
    tags: dict
    arn: str = KNOWN_AFTER_APPLY


@dataclass
class StreamPlan:
    stream: str
    name: str
    arn: str
    shard_count: int
    retention_period: int
    enforce_consumer_deletion: bool
    shard_level_metrics: list[str]
    encryption_type: str
    kms_key: Optional[str]
    tags: dict


@dataclass
class PolicyPlan:
    stream: str
    access: str
    name: str
    path: str
    arn: str
    description: str
    document: dict
    tags: dict


@dataclass
class KinesisPlan:
    streams: list[StreamPlan]
    keys: list[KeyPlan]
    policies: list[PolicyPlan]
    outputs: KinesisExports

    def to_dict(self) -> dict:
        return exports_to_dict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def build_plan(
    config: KinesisConfig,
    partition: str = "aws",
    region: str = "<region>",
    account_id: str = "<account-id>",
) -> KinesisPlan:
    """
    Render the desired state of a kinesis stack

    :param config: The module config
    :param partition: AWS partition used in ARNs
    :param region: AWS region used in ARNs
    :param account_id: AWS account id used in ARNs
    :return: KinesisPlan
    """
    streams = resolve_streams(config.streams, config.stream_defaults)
    encrypted = set(streams_requiring_keys(streams.keys(), config.use_encryption))
    tags = compose_tags(config.tags, config.environment, config.namespace)
    namespace = config.namespace

    stream_plans, key_plans, policy_plans, exports = [], [], [], []

    for stream in streams.values():
        name = stream_name(namespace, stream.name)
        key = None

        if stream.name in encrypted:
            key = KeyPlan(
                stream=stream.name,
                alias=key_alias_name(namespace, stream.name),
                description=key_description(namespace, stream.name),
                enable_key_rotation=True,
                tags=dict(tags),
            )
            key_plans.append(key)

        arn = interpolate_resource(
            STREAM_ARN, partition=partition, region=region, account_id=account_id, stream_name=name
        )

        stream_plans.append(
            StreamPlan(
                stream=stream.name,
                name=name,
                arn=arn,
                shard_count=stream.shard_count,
                retention_period=stream.retention_period,
                enforce_consumer_deletion=stream.enforce_consumer_deletion,
                shard_level_metrics=list(SHARD_LEVEL_METRICS),
                encryption_type=EncryptionType.KMS.value if key else EncryptionType.NONE.value,
                kms_key=key.alias if key else None,
                tags=dict(tags),
            )
        )

        policies = {}
        for access in PolicyAccess:
            policy = PolicyPlan(
                stream=stream.name,
                access=access.value,
                name=policy_name(namespace, stream.name, access),
                path=policy_path(namespace),
                arn=interpolate_resource(
                    POLICY_ARN,
                    partition=partition,
                    account_id=account_id,
                    path=policy_path(namespace),
                    policy_name=policy_name(namespace, stream.name, access),
                ),
                description=policy_description(namespace, stream.name, access),
                document=generate_stream_policy(access, arn, key.arn if key else None).to_dict(),
                tags=dict(tags),
            )
            policy_plans.append(policy)
            policies[access] = policy

        exports.append(
            KinesisStreamExport(
                name=stream.name,
                arn=arn,
                read_only_policy_arn=policies[PolicyAccess.READ_ONLY].arn,
                writer_policy_arn=policies[PolicyAccess.READ_WRITE].arn,
            )
        )

    return KinesisPlan(
        streams=stream_plans,
        keys=key_plans,
        policies=policy_plans,
        outputs=KinesisExports.from_streams(exports),
    )
