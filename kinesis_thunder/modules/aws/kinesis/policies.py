from typing import Optional

from pulumi import Input

from kinesis_thunder.lib.iam import PolicyDocument, Statement
from .types import PolicyAccess

# https://docs.aws.amazon.com/service-authorization/latest/reference/list_amazonkinesis.html
READ_ACTIONS = [
    "kinesis:DescribeLimits",
    "kinesis:DescribeStream",
    "kinesis:GetRecords",
    "kinesis:GetShardIterator",
    "kinesis:SubscribeToShard",
]

# PutRecord and PutRecords
WRITE_ACTIONS = [
    "kinesis:PutRecord*",
]

KMS_ACTIONS = {
    PolicyAccess.READ_ONLY: ["kms:Decrypt"],
    PolicyAccess.READ_WRITE: ["kms:Decrypt", "kms:GenerateDataKey"],
}

STREAM_ACTIONS = {
    PolicyAccess.READ_ONLY: READ_ACTIONS,
    PolicyAccess.READ_WRITE: READ_ACTIONS + WRITE_ACTIONS,
}


def generate_stream_policy(
    access: PolicyAccess, stream_arn: Input[str], key_arn: Optional[Input[str]] = None
) -> PolicyDocument:
    """
    Generate the policy document granting access to a single stream

    The stream statement always comes first. When the stream is encrypted a second statement grants the KMS actions
    needed for ``access`` on the stream's own key only.

    Grants for ``READ_ONLY``:
        kinesis:DescribeLimits, kinesis:DescribeStream, kinesis:GetRecords, kinesis:GetShardIterator,
        kinesis:SubscribeToShard
        kms:Decrypt (encrypted streams)

    ``READ_WRITE`` adds:
        kinesis:PutRecord*
        kms:GenerateDataKey (encrypted streams)

    :param access: Level of access to grant
    :param stream_arn: ARN of the stream
    :param key_arn: ARN of the stream's KMS key, ``None`` for unencrypted streams
    :return: PolicyDocument
    """
    statements = [
        Statement(
            Effect="Allow",
            Action=list(STREAM_ACTIONS[access]),
            Resource=[stream_arn],
        )
    ]

    if key_arn is not None:
        statements.append(
            Statement(
                Effect="Allow",
                Action=list(KMS_ACTIONS[access]),
                Resource=[key_arn],
            )
        )

    return PolicyDocument(statements=statements)
