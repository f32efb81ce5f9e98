"""
Export tools - MCP tools for MIDI export.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chord_studio.compiler.midi import build_track
from chord_studio.constants import MIDI_CONTENT_TYPE, MIDI_FILENAME, SuccessMessages
from chord_studio.studio import ChordStudio

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(mcp: ChukMCPServer, studio: ChordStudio) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        studio: The chord studio session

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_export_midi(output_name: str | None = None) -> str:
        """
        Export the current progression to a MIDI file.

        One second per chord, single track.

        Args:
            output_name: Optional filename without .mid extension
                (default: chord-progression)

        Returns:
            JSON string with the file path

        Example:
            chords_export_midi()
        """
        try:
            filename = f"{output_name}.mid" if output_name else MIDI_FILENAME
            path = studio.save_midi(filename)
            count = len(
                build_track(
                    studio.require_progression(),
                    studio.config.chord_seconds,
                    studio.config.octave,
                )
            )
            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "content_type": MIDI_CONTENT_TYPE,
                    "events": count,
                    "message": SuccessMessages.MIDI_EXPORTED.format(count=count, path=path),
                }
            )
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_export_midi"] = chords_export_midi

    return tools
