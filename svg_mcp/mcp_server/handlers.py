"""
MCP Server Message Handlers
===========================

Tool dispatch for MCP requests: validates untyped argument bags against each
tool's request model, runs the conversion service and maps the outcome into a
uniform response envelope. Also answers tool discovery and JSON-RPC style
messages.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from dataclasses import dataclass, field
from enum import IntEnum

from pydantic import ValidationError

from svg_mcp import __version__
from svg_mcp.config.logging import get_logger
from svg_mcp.config.settings import Settings, get_settings
from svg_mcp.core.conversion.service import SvgConverter
from svg_mcp.core.errors import ConversionError
from svg_mcp.mcp_server.tools import TOOL_CLASSES, TOOL_DESCRIPTORS, ConversionTool, ToolDescriptor

logger = get_logger(__name__)


class ErrorKind(IntEnum):
    """JSON-RPC error codes used by the dispatcher."""

    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class ToolError(Exception):
    """Dispatcher-level failure with a JSON-RPC error kind."""

    def __init__(self, kind: ErrorKind, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.data = data

    def to_dict(self) -> Dict[str, Any]:
        error: Dict[str, Any] = {"code": int(self.kind), "message": self.message}
        if self.data:
            error["data"] = self.data
        return error


@dataclass
class ToolResponse:
    """Uniform response envelope of a tool call."""

    success: bool
    result: Optional[Dict[str, Any]] = None
    error: Optional[ToolError] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "result": self.result}
        assert self.error is not None
        return {"success": False, "error": self.error.to_dict()}


@dataclass
class ToolListing:
    """Result of tool discovery. There is no pagination."""

    tools: List[ToolDescriptor]
    next_cursor: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tools": [tool.to_dict() for tool in self.tools],
            "nextCursor": self.next_cursor,
        }


@dataclass
class MCPMessage:
    """MCP protocol message structure."""

    method: str
    params: Dict[str, Any] = field(default_factory=dict)
    id: Optional[Union[str, int]] = None
    jsonrpc: str = "2.0"


@dataclass
class MCPResponse:
    """MCP protocol response structure."""

    result: Optional[Any] = None
    error: Optional[Dict[str, Any]] = None
    id: Optional[Union[str, int]] = None
    jsonrpc: str = "2.0"


def describe_validation_error(exc: ValidationError) -> Tuple[str, List[str]]:
    """Turn a pydantic validation error into a message naming the offending fields."""
    problems = []
    fields = []
    for error in exc.errors():
        name = ".".join(str(part) for part in error.get("loc", ())) or "arguments"
        fields.append(name)
        if error.get("type") == "missing":
            problems.append(f"Missing {name}")
        else:
            problems.append(f"Invalid {name}: {error.get('msg')}")
    return "; ".join(problems), fields


class ToolDispatcher:
    """Maps tool calls onto the conversion service."""

    def __init__(self, converter: Optional[SvgConverter] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.converter = converter or SvgConverter(self.settings)
        self.logger: Any = logger.bind(component="tool_dispatcher")  # structlog.BoundLoggerBase
        self._tools: Dict[str, ConversionTool] = {
            cls.name: cls(self.converter) for cls in TOOL_CLASSES
        }

    @property
    def tool_names(self) -> List[str]:
        return list(self._tools)

    def list_tools(self) -> ToolListing:
        """Static descriptors of every tool."""
        return ToolListing(tools=list(TOOL_DESCRIPTORS))

    def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResponse:
        """
        Validate and execute a tool call.

        Args:
            name: Tool name
            arguments: Untyped argument bag supplied by the caller

        Returns:
            ToolResponse with the serialized ConversionResult or a ToolError.
            Never raises.
        """
        try:
            tool = self._lookup(name)
            request = self._validate(tool, arguments)
        except ToolError as e:
            self.logger.info("Tool call rejected", tool=name, code=int(e.kind), error=e.message)
            return ToolResponse(success=False, error=e)

        self.logger.info(
            "Tool called",
            tool=name,
            svg_length=len(request.svg_content),
            width=request.width,
            height=request.height,
        )

        try:
            result = tool.execute(request)
        except ConversionError as e:
            error = ToolError(
                ErrorKind.INTERNAL_ERROR,
                f"{tool.image_format.label} conversion failed: {e}",
                {"kind": e.kind},
            )
            self.logger.error("Tool execution error", tool=name, error=error.message)
            return ToolResponse(success=False, error=error)
        except Exception as e:
            data: Dict[str, Any] = {"kind": "unexpected_error"}
            if self.settings.debug:
                data["exception"] = type(e).__name__
            error = ToolError(
                ErrorKind.INTERNAL_ERROR, f"{tool.image_format.label} conversion failed: {e}", data
            )
            self.logger.exception("Unexpected tool execution error", tool=name)
            return ToolResponse(success=False, error=error)

        return ToolResponse(success=True, result=result.to_payload())

    def _lookup(self, name: Any) -> ConversionTool:
        if not isinstance(name, str):
            raise ToolError(ErrorKind.METHOD_NOT_FOUND, f"Unknown tool: {name!r}")
        tool = self._tools.get(name)
        if tool is None:
            raise ToolError(ErrorKind.METHOD_NOT_FOUND, f"Unknown tool: {name}")
        return tool

    def _validate(self, tool: ConversionTool, arguments: Optional[Mapping[str, Any]]) -> Any:
        if not arguments or not isinstance(arguments, Mapping):
            raise ToolError(ErrorKind.INVALID_PARAMS, "Missing arguments")
        try:
            return tool.request_model.model_validate(dict(arguments))
        except ValidationError as e:
            message, fields = describe_validation_error(e)
            raise ToolError(ErrorKind.INVALID_PARAMS, message, {"fields": fields}) from e

    def handle_message(self, message: Union[Dict[str, Any], MCPMessage]) -> MCPResponse:
        """
        Handle a JSON-RPC style message.

        Supports tools/list, tools/call and initialize.
        """
        try:
            msg = message if isinstance(message, MCPMessage) else MCPMessage(**message)
        except TypeError as e:
            return MCPResponse(
                error={"code": int(ErrorKind.INVALID_PARAMS), "message": f"Invalid message: {e}"},
                id=message.get("id") if isinstance(message, dict) else None,
            )

        self.logger.debug("Processing message", method=msg.method, id=msg.id)

        if msg.method == "tools/list":
            return MCPResponse(result=self.list_tools().to_dict(), id=msg.id)
        elif msg.method == "tools/call":
            params = msg.params or {}
            if not isinstance(params, Mapping):
                return MCPResponse(
                    error={
                        "code": int(ErrorKind.INVALID_PARAMS),
                        "message": "Invalid params: expected an object",
                    },
                    id=msg.id,
                )
            response = self.call_tool(params.get("name", ""), params.get("arguments"))
            if response.success:
                return MCPResponse(result=response.result, id=msg.id)
            assert response.error is not None
            return MCPResponse(error=response.error.to_dict(), id=msg.id)
        elif msg.method == "initialize":
            return MCPResponse(
                result={
                    "capabilities": {"tools": {}},
                    "serverInfo": {"name": self.settings.server_name, "version": __version__},
                    "instructions": self.settings.instructions,
                },
                id=msg.id,
            )
        return MCPResponse(
            error={
                "code": int(ErrorKind.METHOD_NOT_FOUND),
                "message": f"Method not found: {msg.method}",
            },
            id=msg.id,
        )
