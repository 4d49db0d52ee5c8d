from kinesis_thunder.modules.aws.kinesis.policies import generate_stream_policy
from kinesis_thunder.modules.aws.kinesis.types import PolicyAccess

STREAM_ARN = "arn:aws:kinesis:us-west-2:123456789012:stream/events-log-events-stream"
KEY_ARN = "arn:aws:kms:us-west-2:123456789012:key/1234abcd"

READ_ACTIONS = [
    "kinesis:DescribeLimits",
    "kinesis:DescribeStream",
    "kinesis:GetRecords",
    "kinesis:GetShardIterator",
    "kinesis:SubscribeToShard",
]


def test_read_policy_without_key():
    assert generate_stream_policy(PolicyAccess.READ_ONLY, STREAM_ARN).to_dict() == {
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Action": READ_ACTIONS,
                "Resource": [STREAM_ARN],
            }
        ],
    }


def test_read_policy_with_key():
    statements = generate_stream_policy(PolicyAccess.READ_ONLY, STREAM_ARN, KEY_ARN).to_dict()["Statement"]

    assert len(statements) == 2
    assert statements[0]["Action"] == READ_ACTIONS
    assert statements[1] == {"Effect": "Allow", "Action": ["kms:Decrypt"], "Resource": [KEY_ARN]}


def test_write_policy_without_key():
    statements = generate_stream_policy(PolicyAccess.READ_WRITE, STREAM_ARN).to_dict()["Statement"]

    assert len(statements) == 1
    assert statements[0]["Action"] == READ_ACTIONS + ["kinesis:PutRecord*"]
    assert statements[0]["Resource"] == [STREAM_ARN]


def test_write_policy_with_key():
    statements = generate_stream_policy(PolicyAccess.READ_WRITE, STREAM_ARN, KEY_ARN).to_dict()["Statement"]

    assert len(statements) == 2
    assert statements[1] == {
        "Effect": "Allow",
        "Action": ["kms:Decrypt", "kms:GenerateDataKey"],
        "Resource": [KEY_ARN],
    }


def test_documents_do_not_share_action_lists():
    document = generate_stream_policy(PolicyAccess.READ_ONLY, STREAM_ARN)
    document.statements[0].Action.append("kinesis:*")

    assert "kinesis:*" not in generate_stream_policy(PolicyAccess.READ_ONLY, STREAM_ARN).statements[0].Action
