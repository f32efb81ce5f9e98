"""
Playback tools - MCP tools for transport control.

Playback runs on the server's event loop; these tools return immediately.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chord_studio.constants import SuccessMessages
from chord_studio.studio import ChordStudio

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_playback_tools(mcp: ChukMCPServer, studio: ChordStudio) -> dict[str, Any]:
    """
    Register playback tools with the MCP server.

    Args:
        mcp: The MCP server instance
        studio: The chord studio session

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def _state() -> dict[str, Any]:
        state = studio.playback_state
        return {"is_playing": state.is_playing, "current_index": state.current_index}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_play() -> str:
        """
        Start playing the current progression, one chord per beat.

        Ignored if already playing.

        Returns:
            JSON string with whether playback started and the playback state
        """
        try:
            started = studio.play()
            count = len(studio.require_progression())
            return json.dumps(
                {
                    "status": "success",
                    "started": started,
                    "playback": _state(),
                    "message": SuccessMessages.PLAYBACK_STARTED.format(
                        count=count, tempo=studio.scheduler.tempo_bpm
                    )
                    if started
                    else "Already playing.",
                }
            )
        except Exception as e:
            logger.exception("Failed to start playback")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_play"] = chords_play

    @mcp.tool  # type: ignore[arg-type]
    async def chords_stop() -> str:
        """
        Stop playback. Safe to call when nothing is playing.

        Returns:
            JSON string with whether a session was stopped
        """
        try:
            stopped = studio.stop()
            return json.dumps(
                {
                    "status": "success",
                    "stopped": stopped,
                    "playback": _state(),
                    "message": SuccessMessages.PLAYBACK_STOPPED,
                }
            )
        except Exception as e:
            logger.exception("Failed to stop playback")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_stop"] = chords_stop

    @mcp.tool  # type: ignore[arg-type]
    async def chords_playback_status() -> str:
        """
        Get the playback state.

        Returns:
            JSON string with is_playing, current_index (-1 when idle) and
            the backend error that ended the last session, if any
        """
        error = studio.scheduler.last_error
        return json.dumps(
            {
                "status": "success",
                "playback": _state(),
                "error": str(error) if error is not None else None,
            }
        )

    tools["chords_playback_status"] = chords_playback_status

    return tools
