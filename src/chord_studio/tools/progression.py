"""
Progression tools - MCP tools for generating and inspecting progressions.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chord_studio.constants import SuccessMessages
from chord_studio.harmony import resolve, voice
from chord_studio.studio import ChordStudio

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_progression_tools(mcp: ChukMCPServer, studio: ChordStudio) -> dict[str, Any]:
    """
    Register progression tools with the MCP server.

    Args:
        mcp: The MCP server instance
        studio: The chord studio session

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_list_templates() -> str:
        """
        List available progression templates.

        Returns:
            JSON string with template names and scale degrees (0 = I)

        Example:
            chords_list_templates()
        """
        try:
            templates = studio.templates
            return json.dumps(
                {
                    "status": "success",
                    "templates": [
                        {
                            "name": t.name,
                            "degrees": list(t.degrees),
                            "description": t.description,
                        }
                        for t in templates
                    ],
                    "count": len(templates),
                }
            )
        except Exception as e:
            logger.exception("Failed to list templates")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_list_templates"] = chords_list_templates

    @mcp.tool  # type: ignore[arg-type]
    async def chords_generate(
        key: str = "C",
        scale: str = "Major",
        template: str | None = None,
    ) -> str:
        """
        Generate a new chord progression.

        Replaces the current progression and stops any playback.

        Args:
            key: Tonic (C, C#, D, ... B)
            scale: 'Major' or 'Minor'
            template: Template name (default: random)

        Returns:
            JSON string with the progression, insights and summary

        Example:
            chords_generate(key="A", scale="Minor")
        """
        try:
            progression = studio.generate(key, scale, template)
            return json.dumps(
                {
                    "status": "success",
                    "progression": progression.to_dict(),
                    "insights": studio.insights(),
                    "summary": studio.summary(),
                    "message": SuccessMessages.PROGRESSION_GENERATED.format(
                        chords=str(progression), template=progression.template_name
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to generate progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_generate"] = chords_generate

    @mcp.tool  # type: ignore[arg-type]
    async def chords_get_progression() -> str:
        """
        Get the current progression with insights.

        Returns:
            JSON string with the progression and playback state
        """
        try:
            progression = studio.require_progression()
            state = studio.playback_state
            return json.dumps(
                {
                    "status": "success",
                    "progression": progression.to_dict(),
                    "insights": studio.insights(),
                    "summary": studio.summary(),
                    "playback": {
                        "is_playing": state.is_playing,
                        "current_index": state.current_index,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to get progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_get_progression"] = chords_get_progression

    @mcp.tool  # type: ignore[arg-type]
    async def chords_resolve(
        key: str, scale: str, degrees: list[int], chromatic: bool | None = None
    ) -> str:
        """
        Resolve scale degrees to chord symbols without changing the session.

        Args:
            key: Tonic (C, C#, D, ... B)
            scale: 'Major' or 'Minor'
            degrees: Scale degrees 0-6
            chromatic: Offset roots by semitones instead of scale steps
                (default: the session setting)

        Returns:
            JSON string with chord symbols

        Example:
            chords_resolve(key="C", scale="Major", degrees=[1, 4, 0])
        """
        try:
            if chromatic is None:
                chromatic = studio.generator.chromatic
            chords = resolve(key, scale, degrees, chromatic)
            return json.dumps({"status": "success", "chords": [str(c) for c in chords]})
        except Exception as e:
            logger.exception("Failed to resolve degrees")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_resolve"] = chords_resolve

    @mcp.tool  # type: ignore[arg-type]
    async def chords_voice(chord: str) -> str:
        """
        Get the pitches of a chord symbol.

        Args:
            chord: Chord symbol like 'C', 'Am', 'Bdim'

        Returns:
            JSON string with pitch names and MIDI numbers

        Example:
            chords_voice(chord="Am")
        """
        try:
            voiced = voice(chord, studio.config.octave)
            return json.dumps(
                {
                    "status": "success",
                    "chord": str(voiced.chord),
                    "notes": voiced.names,
                    "midi": voiced.midi_notes,
                }
            )
        except Exception as e:
            logger.exception("Failed to voice chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_voice"] = chords_voice

    return tools
