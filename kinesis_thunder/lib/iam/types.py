from dataclasses import dataclass, field

POLICY_VERSION = "2012-10-17"


@dataclass
class Statement:
    Effect: str
    """AWS statement effect, ("Allow", "Deny")"""

    Action: list[str]
    """AWS action, ("kinesis:GetRecords", "kms:Decrypt",...)"""

    Resource: list
    """AWS resources to apply this statement to. Plain strings, or ``Output[str]`` inside a Pulumi program."""

    def to_dict(self) -> dict:
        return {
            "Effect": self.Effect,
            "Action": list(self.Action),
            "Resource": list(self.Resource),
        }


@dataclass
class PolicyDocument:
    statements: list[Statement] = field(default_factory=list)
    """Ordered statements; order is kept when rendering"""

    version: str = POLICY_VERSION
    """IAM policy language version"""

    def to_dict(self) -> dict:
        return {
            "Version": self.version,
            "Statement": [statement.to_dict() for statement in self.statements],
        }
