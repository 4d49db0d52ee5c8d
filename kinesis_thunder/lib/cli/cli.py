import logging

import click
import yaml

from kinesis_thunder.lib.config import ConfigValidationError, config_from_dict, load_config_files
from kinesis_thunder.modules.aws.kinesis.config import KinesisConfig
from kinesis_thunder.modules.aws.kinesis.defaults import resolve_streams, streams_requiring_keys
from kinesis_thunder.modules.aws.kinesis.plan import build_plan

logger = logging.getLogger(__name__)

config_option = click.option(
    "-c",
    "--config",
    "config_files",
    multiple=True,
    required=True,
    type=click.Path(dir_okay=False),
    help="YAML config file. Repeat to merge several files, later files win.",
)


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


def _load_config(config_files) -> KinesisConfig:
    try:
        config = config_from_dict(KinesisConfig, load_config_files(list(config_files)))
        # resolving also checks the numeric stream fields
        resolve_streams(config.streams, config.stream_defaults)
    except ConfigValidationError as e:
        raise click.ClickException(f"invalid config: {e}")

    logger.debug("Loaded config %s", config)

    return config


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!", err=True)


@cli.command()
@config_option
def validate(config_files):
    """Check a kinesis config without rendering it"""
    config = _load_config(config_files)
    streams = resolve_streams(config.streams, config.stream_defaults)

    echo_key_value("Namespace", config.namespace)
    echo_key_value("Environment", config.environment)
    echo_key_value("Streams", ", ".join(streams) or "-")
    echo_key_value("Encrypted", ", ".join(streams_requiring_keys(streams, config.use_encryption)) or "-")


@cli.command()
@config_option
@click.option("--partition", default="aws", show_default=True, help="AWS partition used in ARNs")
@click.option("--region", default="<region>", show_default=True, help="AWS region used in ARNs")
@click.option("--account-id", default="<account-id>", show_default=True, help="AWS account id used in ARNs")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Output format",
)
def plan(config_files, partition, region, account_id, output_format):
    """Render the streams, keys and policies a config declares"""
    config = _load_config(config_files)

    desired_state = build_plan(config, partition=partition, region=region, account_id=account_id)

    if output_format == "yaml":
        click.echo(yaml.safe_dump(desired_state.to_dict(), sort_keys=False), nl=False)
    else:
        click.echo(desired_state.to_json())


def run():
    exit(cli())


if __name__ == "__main__":
    run()
