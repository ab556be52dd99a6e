"""Pydantic models for the operation catalog."""

from collections.abc import Mapping
from typing import Any, Literal
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Constants
# =============================================================================

HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]

# How the dispatcher executes an operation:
#   request - one templated HTTP call
#   login   - credential exchange, returns the token
#   upload  - optional fetch of the source file, then one multipart POST
#   config  - local introspection, no network
OperationKind = Literal["request", "login", "upload", "config"]

ArgumentType = Literal["string", "object"]


# =============================================================================
# Argument and Operation Specs
# =============================================================================


class ArgumentSpec(BaseModel):
    """One named argument of an operation, as advertised to the agent."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: ArgumentType = "string"
    description: str
    required: bool = False
    # Characters left unescaped when substituted into the path
    path_safe: str = ""

    def json_schema(self) -> dict[str, Any]:
        return {"type": self.type, "description": self.description}


class OutboundRequest(BaseModel):
    """Descriptor of a single HTTP call built from an operation spec."""

    method: HttpMethod
    url: str
    params: dict[str, Any] | None = None
    json_body: Any = None
    token: str


class OperationSpec(BaseModel):
    """Static description of one exposed operation.

    Required fields:
        name: Unique operation name (e.g., 'getItems')
        description: Human-readable description shown to the agent

    Optional fields:
        kind: Execution strategy (default: 'request')
        method: HTTP verb for 'request' operations
        path: Path template; `{arg}` placeholders are filled from arguments
        path_suffix_arg: Optional argument appended as a trailing path segment
        query_arg: Argument holding a query-parameter mapping
        body_arg: Argument sent as the JSON body
        arguments: Ordered argument specs, including url/token overrides
        success_message: Fixed text returned instead of the response body
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    kind: OperationKind = "request"
    method: HttpMethod = "GET"
    path: str = ""
    path_suffix_arg: str | None = None
    query_arg: str | None = None
    body_arg: str | None = None
    arguments: tuple[ArgumentSpec, ...] = Field(default_factory=tuple)
    success_message: str | None = None

    @property
    def required_args(self) -> frozenset[str]:
        return frozenset(arg.name for arg in self.arguments if arg.required)

    @property
    def optional_args(self) -> frozenset[str]:
        return frozenset(arg.name for arg in self.arguments if not arg.required)

    def missing_args(self, args: Mapping[str, Any]) -> list[str]:
        """Required argument names absent (or None) in `args`, in declared order."""
        return [
            arg.name
            for arg in self.arguments
            if arg.required and args.get(arg.name) is None
        ]

    def input_schema(self) -> dict[str, Any]:
        """JSON schema for the operation's arguments."""
        return {
            "type": "object",
            "properties": {arg.name: arg.json_schema() for arg in self.arguments},
            "required": [arg.name for arg in self.arguments if arg.required],
        }

    def build_path(self, args: Mapping[str, Any]) -> str:
        """Fill the path template, percent-encoding each substituted segment."""
        safe = {arg.name: arg.path_safe for arg in self.arguments}
        segments = {
            name: quote(str(value), safe=safe.get(name, ""))
            for name, value in args.items()
            if value is not None and f"{{{name}}}" in self.path
        }
        path = self.path.format(**segments)
        if self.path_suffix_arg and args.get(self.path_suffix_arg):
            path += "/" + quote(
                str(args[self.path_suffix_arg]), safe=safe.get(self.path_suffix_arg, "")
            )
        return path

    def build_request(
        self, base_url: str, token: str, args: Mapping[str, Any]
    ) -> OutboundRequest:
        """Build the HTTP call for a 'request' operation."""
        params = args.get(self.query_arg) if self.query_arg else None
        body = args.get(self.body_arg) if self.body_arg else None
        return OutboundRequest(
            method=self.method,
            url=base_url.rstrip("/") + self.build_path(args),
            params=params or None,
            json_body=body,
            token=token,
        )
