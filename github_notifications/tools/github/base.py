"""
Shared plumbing for the GitHub notification tools

Every tool runs through run_tool: validate the arguments against the tool's
schema, let the handler make its single GitHub call and build the text, then
wrap the result (or the error) in a response envelope. Nothing raised by a
handler escapes run_tool.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ValidationError

from ...auth.credentials import GitHubCredentials
from ...config.settings import Settings, settings as default_settings
from .client import GitHubClient
from .errors import AuthenticationError, GitHubToolError, ToolValidationError
from .formatters import format_error

logger = logging.getLogger(__name__)


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Response envelope: text content, flagged when it describes a failure"""

    content: List[TextContent]
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def failure(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)], is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)

    def to_dict(self) -> Dict[str, Any]:
        """
        Wire shape of the envelope: {"content": [{"type": "text", "text": ...}], "isError": true}

        FastMCPRegistrar only needs the text and the error flag. Registrars for
        servers that take the raw MCP result return this dict as is.
        """
        payload: Dict[str, Any] = {"content": [item.model_dump() for item in self.content]}
        if self.is_error:
            payload["isError"] = True
        return payload


class ToolContext:
    """What a handler needs besides its arguments: credentials, settings and a client factory"""

    def __init__(
        self,
        credentials: GitHubCredentials,
        settings: Optional[Settings] = None,
        client_factory: Callable[..., GitHubClient] = GitHubClient
    ):
        self.credentials = credentials
        self.settings = settings or default_settings
        self.client_factory = client_factory

    @property
    def timezone(self) -> str:
        return self.settings.display_timezone

    def github(self) -> GitHubClient:
        """Build a client for the configured token, or fail with AuthenticationError"""
        if not self.credentials.is_configured:
            raise AuthenticationError()
        return self.client_factory(
            self.credentials.token,
            base_url=self.settings.github_api_url,
            api_version=self.settings.github_api_version,
            user_agent=self.settings.user_agent,
        )


Handler = Callable[[Any, ToolContext], Awaitable[str]]


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    schema: Type[BaseModel]
    handler: Handler
    failure: str  # str.format template over the validated arguments

    def bind(self, context: ToolContext) -> Callable[[Dict[str, Any]], Awaitable[ToolResponse]]:
        async def invoke(arguments: Dict[str, Any]) -> ToolResponse:
            return await run_tool(self, arguments, context)
        invoke.__name__ = self.name.replace("-", "_")
        return invoke


# Populated by the github_tool decorator when the tool modules are imported
TOOLS: Dict[str, ToolDefinition] = {}


def github_tool(name: str, description: str, schema: Type[BaseModel], failure: str):
    """Register a handler under a tool name"""
    def decorator(func: Handler) -> Handler:
        if name in TOOLS:
            raise ValueError(f"Tool {name} is already registered")
        TOOLS[name] = ToolDefinition(name, description, schema, func, failure)
        return func
    return decorator


def validate_arguments(schema: Type[BaseModel], arguments: Optional[Dict[str, Any]]) -> BaseModel:
    try:
        return schema.model_validate(arguments or {})
    except ValidationError as e:
        problems = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "arguments"
            problems.append(f"{location}: {error['msg']}")
        raise ToolValidationError("; ".join(problems)) from e


async def run_tool(
    definition: ToolDefinition,
    arguments: Optional[Dict[str, Any]],
    context: ToolContext
) -> ToolResponse:
    """Validate, dispatch, format and respond. Always returns exactly one envelope."""
    try:
        args = validate_arguments(definition.schema, arguments)
    except ToolValidationError as e:
        logger.info("Rejected %s call: %s", definition.name, e)
        return ToolResponse.failure(format_error(f"Invalid arguments for {definition.name}", e))

    failure_context = definition.failure.format(**dict(args))
    logger.info("Running %s", definition.name)

    try:
        text = await definition.handler(args, context)
    except GitHubToolError as e:
        return ToolResponse.failure(format_error(failure_context, e))
    except Exception as e:
        logger.exception("Unexpected error in %s", definition.name)
        return ToolResponse.failure(format_error(failure_context, e))

    return ToolResponse.success(text)


def format_page_hint(count: int, page: int, per_page: int) -> str:
    """Suggest the next page when the page came back full. Best effort only."""
    if count < per_page:
        return ""
    return (
        f"\n\nMore notifications may be available. "
        f"You can view the next page by specifying 'page: {page + 1}' in the request."
    )
