import json
from typing import Optional

from pulumi import Output, ResourceOptions
from pulumi_aws import iam

from .types import PolicyDocument


def render_policy(document: PolicyDocument) -> Output[str]:
    """
    Serialize a policy document to JSON once every ``Output`` inside it has resolved

    Keys keep their insertion order, so the same document always renders to the same string.

    :param document: Policy document, possibly holding ``Output`` resources
    :return: JSON policy wrapped in Output
    """
    return Output.from_input(document.to_dict()).apply(json.dumps)


def create_policy(
    name: str,
    document: PolicyDocument,
    *,
    path: str = "/",
    description: Optional[str] = None,
    tags: Optional[dict] = None,
    opts: Optional[ResourceOptions] = None,
) -> iam.Policy:
    """
    Create a managed IAM policy for a given PolicyDocument

    :param name: Policy name, also used as the Pulumi resource name
    :param document: The policy document
    :param path: IAM path of the policy
    :param description: Optional description
    :param tags: Tags for the policy
    :param opts: ResourceOptions for the policy
    :return: iam.Policy
    """
    return iam.Policy(
        name,
        name=name,
        path=path,
        description=description,
        policy=render_policy(document),
        tags=tags,
        opts=opts,
    )
