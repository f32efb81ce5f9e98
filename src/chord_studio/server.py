#!/usr/bin/env python3
"""
Command line entry point for the Chord Studio MCP server.

Settings come from chord-studio.yaml; --tempo, --midi-port and --seed
override the file for a single run.
"""

import argparse
import asyncio
import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chord-studio",
        description="Serve chord progression tools over MCP",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument("--port", type=int, default=8000, help="Port for the http transport")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config YAML (default: ./chord-studio.yaml if present)",
    )
    parser.add_argument("--tempo", type=int, default=None, help="Playback tempo in BPM")
    parser.add_argument("--midi-port", default=None, help="MIDI output port for playback")
    parser.add_argument("--seed", type=int, default=None, help="Seed for template selection")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Deferred so --help works without the MCP stack
    from chord_studio.async_server import create_server
    from chord_studio.config import StudioConfig, load_config

    config = load_config(args.config)
    overrides = {
        field: value
        for field, value in (
            ("tempo_bpm", args.tempo),
            ("midi_port", args.midi_port),
            ("seed", args.seed),
        )
        if value is not None
    }
    if overrides:
        config = StudioConfig.model_validate({**config.model_dump(), **overrides})

    mcp, tools = create_server(config)
    logger.info(f"Serving {len(tools)} tools over {args.transport}")

    if args.transport == "stdio":
        asyncio.run(mcp.run_stdio())
    else:
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
