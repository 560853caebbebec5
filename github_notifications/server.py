# server.py
"""
GitHub Notifications MCP Server
Exposes GitHub notification and subscription endpoints as MCP tools
"""

import inspect
import logging
import sys
from typing import Annotated, Any, Awaitable, Callable, Dict, Optional, Protocol, Type

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field

from .auth.credentials import GitHubCredentials
from .config.settings import Settings
from .tools.github import TOOLS, ToolContext, ToolResponse
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Dict[str, Any]], Awaitable[ToolResponse]]


class ToolRegistrar(Protocol):
    """Anything that can expose a tool to MCP clients"""

    def register_tool(self, name: str, description: str, schema: Type[BaseModel], handler: ToolHandler) -> None:
        ...


def signature_from_schema(schema: Type[BaseModel]) -> inspect.Signature:
    """Keyword-only signature mirroring the schema, so FastMCP publishes the same input schema"""
    parameters = []
    for name, field in schema.model_fields.items():
        annotation = Annotated[(field.annotation, Field(description=field.description), *field.metadata)]
        default = inspect.Parameter.empty if field.is_required() else field.default
        parameters.append(
            inspect.Parameter(name, inspect.Parameter.KEYWORD_ONLY, default=default, annotation=annotation)
        )
    return inspect.Signature(parameters)


class FastMCPRegistrar:
    """Registers tools on a FastMCP server"""

    def __init__(self, mcp: FastMCP):
        self.mcp = mcp

    def register_tool(self, name: str, description: str, schema: Type[BaseModel], handler: ToolHandler) -> None:
        async def tool_function(**arguments: Any) -> str:
            response = await handler(arguments)
            if response.is_error:
                # FastMCP answers with isError: true
                raise ToolError(response.text)
            return response.text

        tool_function.__signature__ = signature_from_schema(schema)
        tool_function.__name__ = name.replace("-", "_")
        tool_function.__doc__ = description
        self.mcp.add_tool(tool_function, name=name, description=description)


def register_tools(registrar: ToolRegistrar, context: ToolContext) -> None:
    """Bind every GitHub tool to the context and hand it to the registrar"""
    for definition in TOOLS.values():
        registrar.register_tool(definition.name, definition.description, definition.schema, definition.bind(context))
        logger.debug("Registered tool %s", definition.name)


def create_server(context: ToolContext, settings: Optional[Settings] = None) -> FastMCP:
    """Create the MCP server with all GitHub notification tools"""
    settings = settings or context.settings
    mcp = FastMCP(
        name=settings.server_name,
        host=settings.server_host,
        port=settings.server_port
    )
    register_tools(FastMCPRegistrar(mcp), context)
    return mcp


def main() -> None:
    load_dotenv(".env")
    settings = Settings()
    configure_logging(settings.log_level)

    if not settings.github_token and settings.require_token:
        logger.error("GITHUB_TOKEN environment variable is required")
        logger.error("Create a GitHub Personal Access Token with 'notifications' or 'repo' scope "
                     "and set it in the environment or .env file")
        sys.exit(1)

    context = ToolContext(GitHubCredentials(settings.github_token), settings)
    mcp = create_server(context, settings)

    logger.info("Starting %s", settings.server_name)
    logger.info("Transport: %s", settings.transport)

    if settings.transport == "stdio":
        mcp.run(transport="stdio")
    elif settings.transport in ("sse", "streamable-http"):
        logger.info("Listening on http://%s:%s", settings.server_host, settings.server_port)
        mcp.run(transport=settings.transport)
    else:
        logger.error("Invalid transport: %s", settings.transport)
        sys.exit(1)


# Run the server
if __name__ == "__main__":
    main()
