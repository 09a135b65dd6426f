"""
CLI display modules.
"""

from cli.display.tables import display_keygroup_detail, display_program_info

__all__ = [
    "display_keygroup_detail",
    "display_program_info",
]
