#!/usr/bin/env python3
"""
Async Chord Studio MCP Server using chuk-mcp-server

The server provides tools for:
- Listing progression templates
- Generating progressions in a key and scale, with per-chord insights
- Resolving scale degrees and voicing chord symbols
- Playing the progression (one chord per beat) with start/stop control
- Exporting the progression to a MIDI file
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_mcp_server import ChukMCPServer

from chord_studio.config import StudioConfig
from chord_studio.playback import AudioBackend, LoggingBackend, MidiOutputBackend
from chord_studio.studio import ChordStudio
from chord_studio.tools import (
    register_export_tools,
    register_playback_tools,
    register_progression_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_backend(config: StudioConfig) -> AudioBackend:
    """MIDI port backend when a port is configured, logging backend otherwise."""
    if config.midi_port:
        return MidiOutputBackend(config.midi_port, velocity=config.velocity)
    return LoggingBackend()


def create_server(config: StudioConfig | None = None) -> tuple[ChukMCPServer, dict[str, Any]]:
    """
    Build the MCP server and register all tools.

    Args:
        config: Studio settings (default: StudioConfig())

    Returns:
        The server and a dictionary of all registered tool functions
    """
    config = config or StudioConfig()
    mcp = ChukMCPServer("chord-studio")
    studio = ChordStudio(config, backend=create_backend(config))

    tools: dict[str, Any] = {}
    tools.update(register_progression_tools(mcp, studio))
    tools.update(register_playback_tools(mcp, studio))
    tools.update(register_export_tools(mcp, studio))

    logger.info("Chord Studio MCP Server initialized")
    logger.info(f"  Templates: {len(studio.templates)}")
    logger.info(f"  Output dir: {config.output_dir}")
    logger.info(f"  MIDI port: {config.midi_port or 'none (logging backend)'}")
    return mcp, tools
