import json

import pulumi
import pytest

from kinesis_thunder.lib.stack import get_stack_output
from kinesis_thunder.lib.utils import exports_to_dict
from kinesis_thunder.modules.aws.kinesis import Kinesis

ACCOUNT_ID = "123456789012"
REGION = "us-west-2"


class KinesisMocks(pulumi.runtime.Mocks):
    """Records every resource and fills in the outputs AWS would assign"""

    def __init__(self):
        self.resources = []
        self.stack_outputs = {}

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        outputs = dict(args.inputs)

        if args.typ == "aws:kinesis/stream:Stream":
            outputs["arn"] = f"arn:aws:kinesis:{REGION}:{ACCOUNT_ID}:stream/{args.inputs['name']}"
        elif args.typ == "aws:kms/key:Key":
            outputs["keyId"] = f"{args.name}-key-id"
            outputs["arn"] = f"arn:aws:kms:{REGION}:{ACCOUNT_ID}:key/{args.name}"
        elif args.typ == "aws:iam/policy:Policy":
            outputs["arn"] = f"arn:aws:iam::{ACCOUNT_ID}:policy{args.inputs['path']}{args.inputs['name']}"
        elif args.typ == "pulumi:pulumi:StackReference":
            outputs["outputs"] = self.stack_outputs.get(args.inputs.get("name"), {})

        self.resources.append(args)

        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}

    def of_type(self, typ: str) -> list:
        return [resource for resource in self.resources if resource.typ == typ]

    def named(self, typ: str, name: str):
        matches = [resource for resource in self.of_type(typ) if resource.name == name]
        assert len(matches) == 1, f"expected one `{typ}` named `{name}`, found {len(matches)}"
        return matches[0]

    def streams(self) -> list:
        return self.of_type("aws:kinesis/stream:Stream")

    def keys(self) -> list:
        return self.of_type("aws:kms/key:Key")

    def policies(self) -> list:
        return self.of_type("aws:iam/policy:Policy")

    def policy_document(self, name: str) -> dict:
        return json.loads(self.named("aws:iam/policy:Policy", name).inputs["policy"])


@pytest.fixture
def mocks():
    mocks = KinesisMocks()
    pulumi.runtime.set_mocks(mocks, preview=False)
    get_stack_output.cache_clear()
    return mocks


@pytest.fixture
def run_kinesis(mocks):
    """Run the kinesis module against the mocks and return its exports with every Output resolved"""

    def _run_kinesis(config) -> dict:
        resolved = {}

        @pulumi.runtime.test
        def _run():
            exports = Kinesis("kinesis", config).run()
            return pulumi.Output.from_input(exports_to_dict(exports)).apply(resolved.update)

        _run()

        return resolved

    return _run_kinesis
