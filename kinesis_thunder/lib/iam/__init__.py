from .create_policy import create_policy, render_policy
from .resource_interpolator import interpolate_resource
from .types import POLICY_VERSION, PolicyDocument, Statement
