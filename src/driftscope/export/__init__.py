"""Export module — serialize display parameters for the editor."""

from driftscope.export.json_export import export_command, export_params

__all__ = [
    "export_command",
    "export_params",
]
