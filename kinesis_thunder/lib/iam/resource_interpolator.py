import logging

logger = logging.getLogger(__name__)


def interpolate_resource(resource: str, **values: str) -> str:
    """
    Interpolate resource identifiers to allow access to the full set of parameters provided by AWS

    Example:
        interpolate_resource(
            "arn:{partition}:kinesis:{region}:{account_id}:stream/{stream_name}",
            partition="aws", region="us-west-2", account_id="1234567890", stream_name="events-log-stream",
        )
        becomes
        "arn:aws:kinesis:us-west-2:1234567890:stream/events-log-stream"

    :param resource: Resource string to interpolate
    :param values: Values for the placeholders in ``resource``
    :return: Interpolated resource string
    """
    interpolated = resource.format(**values)
    logger.debug("interpolating resource: [%s] to [%s]", resource, interpolated)
    return interpolated
