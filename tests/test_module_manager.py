import pytest

from kinesis_thunder.modules.aws.kinesis import Kinesis
from kinesis_thunder.modules.aws.kinesis.config import KinesisConfig
from kinesis_thunder.module_manager import LazyModule, discover_modules, module_manager


def test_discover_modules():
    assert discover_modules() == {"aws": {"kinesis": LazyModule(provider="aws", name="kinesis")}}


def test_get_module():
    lazy_module = module_manager.get_module("aws", "kinesis")

    assert lazy_module.Module is Kinesis


def test_get_unknown_module():
    with pytest.raises(ModuleNotFoundError):
        module_manager.get_module("aws", "sqs")


def test_get_unknown_provider():
    with pytest.raises(ModuleNotFoundError):
        module_manager.get_module("azure", "kinesis")


def test_config_type_comes_from_build_hint():
    assert Kinesis.get_config_type() is KinesisConfig
