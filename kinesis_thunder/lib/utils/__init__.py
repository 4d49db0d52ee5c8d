from .outputs_from_exports import exports_to_dict, outputs_from_exports
