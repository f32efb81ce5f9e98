"""
MCP tool implementations.

Tools are organized by domain:
- progression - Templates, generation, resolving and voicing
- playback - Transport control
- export - MIDI export
"""

from chord_studio.tools.export import register_export_tools
from chord_studio.tools.playback import register_playback_tools
from chord_studio.tools.progression import register_progression_tools

__all__ = [
    "register_export_tools",
    "register_playback_tools",
    "register_progression_tools",
]
