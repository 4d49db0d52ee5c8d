# This file is boilerplate. Copy it to any new projects you create.
# It calls the launcher that exists as part of `kinesis_thunder`.
# From there, the module to run is picked from the stack name, so the `kinesis` stack runs the kinesis module.
from kinesis_thunder.launcher import run_active_stack

run_active_stack("aws")
