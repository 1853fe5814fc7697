"""
Tuning tools - MCP tools for tuning discovery.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.models import TuningMetadata
from chuk_mcp_harmony.tunings import TuningLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_tuning_tools(
    mcp: ChukMCPServer,
    tuning_loader: TuningLoader,
) -> dict[str, Any]:
    """
    Register tuning tools with the MCP server.

    Args:
        mcp: The MCP server instance
        tuning_loader: The tuning loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_list_tunings() -> str:
        """
        List available tunings.

        Returns:
            JSON string with tuning names, references and descriptions

        Example:
            harmony_list_tunings()
        """
        try:
            tunings = tuning_loader.list_tunings()

            return json.dumps(
                {
                    "status": "success",
                    "tunings": [TuningMetadata.from_tuning(t).model_dump() for t in tunings],
                    "total": len(tunings),
                }
            )
        except Exception as e:
            logger.exception("Failed to list tunings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_list_tunings"] = harmony_list_tunings

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_describe_tuning(name: str) -> str:
        """
        Get full details of a tuning.

        Args:
            name: Tuning name (e.g. 'standard', 'baroque', 'verdi')

        Returns:
            JSON string with the complete tuning configuration

        Example:
            harmony_describe_tuning(name="baroque")
        """
        try:
            tuning = tuning_loader.require_tuning(name)

            return json.dumps(
                {
                    "status": "success",
                    "tuning": tuning.model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to describe tuning")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_describe_tuning"] = harmony_describe_tuning

    return tools
