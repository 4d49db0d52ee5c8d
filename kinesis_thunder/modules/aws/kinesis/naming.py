from .types import PolicyAccess


def stream_name(namespace: str, name: str) -> str:
    return f"{namespace}-{name}-stream"


def key_alias_name(namespace: str, name: str) -> str:
    return f"alias/{namespace}-{name}-stream"


def policy_name(namespace: str, name: str, access: PolicyAccess) -> str:
    return f"{namespace}-{name}-{access.value}"


def policy_path(namespace: str) -> str:
    return f"/kinesis-streams/{namespace}/"


def key_description(namespace: str, name: str) -> str:
    return f"Encryption key for Kinesis stream {stream_name(namespace, name)}"


def policy_description(namespace: str, name: str, access: PolicyAccess) -> str:
    return f"Grants {access.value} access to Kinesis stream {stream_name(namespace, name)}"
