from enum import Enum


class EncryptionType(Enum):
    KMS = "KMS"
    """Server-side encryption with a customer managed KMS key"""

    NONE = "NONE"
    """No server-side encryption"""


class PolicyAccess(Enum):
    READ_ONLY = "read-only"
    """Describe the stream and consume its records"""

    READ_WRITE = "read-write"
    """Everything ``READ_ONLY`` grants, plus producing records"""
