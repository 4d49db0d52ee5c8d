from typing import Optional

MANAGED_BY = "pulumi"
"""Value of the ``ManagedBy`` tag on every resource this library creates"""


def compose_tags(tags: Optional[dict], environment: str, namespace: str) -> dict:
    """
    Generate the tag dict applied to every taggable resource

    User tags come first and the governance tags are laid over them, so a user supplied ``Environment``,
    ``ManagedBy`` or ``Namespace`` never survives:

        compose_tags({"Team": "data", "Environment": "dev"}, environment="prod", namespace="events")
        {
            "Team": "data",
            "Environment": "prod",
            "ManagedBy": "pulumi",
            "Namespace": "events",
        }

    :param tags: User supplied tags
    :param environment: Environment the resources belong to
    :param namespace: Namespace prefixing the resource names
    :return: Dict of tags
    """
    return {
        **(tags or {}),
        "Environment": environment,
        "ManagedBy": MANAGED_BY,
        "Namespace": namespace,
    }
