import pytest

from kinesis_thunder.lib.config import ConfigValidationError, config_from_dict, load_config_files
from kinesis_thunder.modules.aws.kinesis.config import KinesisConfig, KinesisStreamArgs, StreamDefaults


def raw_config(**overrides) -> dict:
    config = {
        "namespace": "events",
        "environment": "prod",
        "streams": [{"name": "log-events"}],
    }
    config.update(overrides)
    return config


def test_minimal_config():
    config = config_from_dict(KinesisConfig, raw_config())

    assert config.namespace == "events"
    assert config.environment == "prod"
    assert config.streams == [KinesisStreamArgs(name="log-events")]
    assert config.use_encryption is False
    assert config.tags == {}
    assert config.stream_defaults == StreamDefaults()


def test_full_config():
    config = config_from_dict(
        KinesisConfig,
        raw_config(
            use_encryption=True,
            tags={"Team": "data-platform"},
            streams=[{"name": "a", "shard_count": 3, "enforce_consumer_deletion": False}, {"name": "b"}],
            stream_defaults={"retention_period": 48},
        ),
    )

    assert config.use_encryption is True
    assert config.tags == {"Team": "data-platform"}
    assert config.streams[0] == KinesisStreamArgs(name="a", shard_count=3, enforce_consumer_deletion=False)
    assert config.stream_defaults.retention_period == 48
    assert config.stream_defaults.shard_count == 1


@pytest.mark.parametrize("key", ["namespace", "environment", "streams"])
def test_missing_required_field(key):
    data = raw_config()
    del data[key]

    with pytest.raises(ConfigValidationError) as e:
        config_from_dict(KinesisConfig, data)

    assert e.value.key == key


@pytest.mark.parametrize("key", ["namespace", "environment"])
def test_empty_required_field(key):
    with pytest.raises(ConfigValidationError) as e:
        config_from_dict(KinesisConfig, raw_config(**{key: ""}))

    assert e.value.key == key


@pytest.mark.parametrize("value", ["yes", 1, None])
def test_non_bool_encryption_flag(value):
    with pytest.raises(ConfigValidationError) as e:
        config_from_dict(KinesisConfig, raw_config(use_encryption=value))

    assert e.value.key == "use_encryption"


def test_duplicate_stream_names():
    with pytest.raises(ConfigValidationError, match="log-events"):
        config_from_dict(KinesisConfig, raw_config(streams=[{"name": "log-events"}, {"name": "log-events"}]))


def test_unknown_keys_are_rejected():
    with pytest.raises(ConfigValidationError):
        config_from_dict(KinesisConfig, raw_config(shards=2))


def test_stream_without_name():
    with pytest.raises(ConfigValidationError):
        config_from_dict(KinesisConfig, raw_config(streams=[{"shard_count": 2}]))


def test_direct_construction_is_validated():
    with pytest.raises(ConfigValidationError):
        KinesisConfig(namespace="events", environment="prod", streams=[], use_encryption="true")


def test_load_single_file(tmp_path):
    path = tmp_path / "kinesis.yaml"
    path.write_text(
        "namespace: events\n"
        "environment: dev\n"
        "use_encryption: true\n"
        "streams:\n"
        "  - name: log-events\n"
        "    shard_count: 2\n"
    )

    assert load_config_files([path]) == {
        "namespace": "events",
        "environment": "dev",
        "use_encryption": True,
        "streams": [{"name": "log-events", "shard_count": 2}],
    }


def test_later_files_override_earlier_ones(tmp_path):
    base = tmp_path / "kinesis.common.yaml"
    base.write_text(
        "namespace: events\n"
        "environment: dev\n"
        "tags:\n"
        "  Team: data-platform\n"
        "streams:\n"
        "  - name: log-events\n"
    )
    prod = tmp_path / "kinesis.prod.yaml"
    prod.write_text("environment: prod\nuse_encryption: true\n")

    merged = load_config_files([base, prod])

    assert merged["namespace"] == "events"
    assert merged["environment"] == "prod"
    assert merged["use_encryption"] is True
    assert merged["tags"] == {"Team": "data-platform"}
    assert merged["streams"] == [{"name": "log-events"}]


def test_missing_file(tmp_path):
    with pytest.raises(ConfigValidationError, match="does not exist"):
        load_config_files([tmp_path / "missing.yaml"])


def test_no_files():
    with pytest.raises(ConfigValidationError):
        load_config_files([])
