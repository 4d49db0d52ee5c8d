from dataclasses import asdict, fields
from typing import Iterable

from kinesis_thunder.lib.config import ConfigValidationError
from .config import KinesisStreamArgs, ResolvedStream, StreamDefaults

MIN_RETENTION_HOURS = 24
MAX_RETENTION_HOURS = 8760


def resolve_stream(args: KinesisStreamArgs, defaults: StreamDefaults) -> ResolvedStream:
    """
    Fill the unset fields of a stream from the defaults

    This is a shallow, per-field override: any field set on ``args`` wins, including ``0`` and ``False``.
    Only fields left as ``None`` fall back to ``defaults``.

    :param args: Stream from the config
    :param defaults: Default values
    :return: ResolvedStream
    :raises ConfigValidationError: If the resolved values are outside what Kinesis accepts
    """
    overrides = {f.name: getattr(args, f.name) for f in fields(args) if getattr(args, f.name) is not None}

    resolved = ResolvedStream(**{**asdict(defaults), **overrides})

    # bool is an int subclass, so strict config mapping lets `true` through
    for key in ("shard_count", "retention_period"):
        value = getattr(resolved, key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigValidationError(f"stream `{resolved.name}` {key} must be an integer, got {value!r}", key=key)

    if resolved.shard_count < 1:
        raise ConfigValidationError(
            f"stream `{resolved.name}` needs at least one shard, got {resolved.shard_count}", key="shard_count"
        )

    if not MIN_RETENTION_HOURS <= resolved.retention_period <= MAX_RETENTION_HOURS:
        raise ConfigValidationError(
            f"stream `{resolved.name}` retention period must be between {MIN_RETENTION_HOURS} and "
            f"{MAX_RETENTION_HOURS} hours, got {resolved.retention_period}",
            key="retention_period",
        )

    return resolved


def resolve_streams(streams: Iterable[KinesisStreamArgs], defaults: StreamDefaults) -> dict[str, ResolvedStream]:
    """Resolve every stream, keyed by stream name in config order"""
    return {args.name: resolve_stream(args, defaults) for args in streams}


def streams_requiring_keys(names: Iterable[str], use_encryption: bool) -> list[str]:
    """
    Select the streams that get a dedicated KMS key

    Encryption is all-or-nothing: either every stream gets its own key or none does.

    :param names: Stream names
    :param use_encryption: Global encryption flag
    :return: Names of the streams needing a key
    """
    return list(names) if use_encryption else []
