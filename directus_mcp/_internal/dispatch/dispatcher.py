"""Dispatcher mapping operation calls to Directus HTTP requests."""

import base64
import binascii
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from directus_mcp._internal import auth
from directus_mcp._internal.dispatch.models import (
    CallContext,
    ResponseEnvelope,
    render_json,
)
from directus_mcp._internal.dispatch.redaction import redact_args, redact_payload
from directus_mcp._internal.http import (
    build_headers,
    create_http_client,
    encode_query,
    parse_body,
    raise_for_status,
)
from directus_mcp._internal.operations import OperationSpec, OutboundRequest, registry
from directus_mcp.config import FIELDS, SECRET_ARG_PREFIXES, EffectiveConfig
from directus_mcp.exceptions import (
    AuthenticationError,
    DirectusAPIError,
    DirectusError,
    InvalidArgumentError,
    MissingPayloadError,
    RemoteCallError,
)

logger = logging.getLogger(__name__)


class Dispatcher:
    """Stateless translator from operation calls to Directus API calls.

    Every invocation resolves its own CallContext from the arguments and the
    effective configuration, performs at most one outbound call (two for an
    upload from a URL), and returns a ResponseEnvelope. `handle` never raises:
    every failure becomes an envelope whose text starts with "Error: ".

    Tokens obtained through `login` are returned to the caller only; they do
    not replace the configured token for later calls.
    """

    def __init__(self, config: EffectiveConfig) -> None:
        """Initialize the dispatcher.

        Args:
            config: The effective configuration resolved at startup.
        """
        self._config = config

    @property
    def config(self) -> EffectiveConfig:
        return self._config

    def context_for(self, args: Mapping[str, Any]) -> CallContext:
        """Resolve url and token: argument value if present, else config."""
        return CallContext(
            url=args.get("url") or self._config.base_url,
            token=args.get("token") or self._config.access_token,
        )

    async def handle(self, name: str, args: Mapping[str, Any] | None = None) -> ResponseEnvelope:
        """Execute the named operation and normalize the outcome.

        Args:
            name: Operation name (e.g., 'getItems').
            args: Operation arguments.

        Returns:
            A single-block envelope with the pretty-printed response body, or
            an error envelope.
        """
        args = dict(args or {})
        logger.debug("Calling %s with %s", name, redact_payload(args))

        try:
            spec = registry.lookup(name)
            self._validate(spec, args)
            context = self.context_for(args)

            if spec.kind == "config":
                return self._get_config()
            if spec.kind == "login":
                return await self._login(context, args)
            if spec.kind == "upload":
                return await self._upload(spec, context, args)
            return await self._request(spec, spec.build_request(context.url, context.token, args))

        except DirectusAPIError as e:
            logger.warning("%s failed: %s", name, e)
            if e.errors and not isinstance(e, AuthenticationError):
                return ResponseEnvelope.from_error(render_json(e.errors))
            return ResponseEnvelope.from_error(str(e))
        except DirectusError as e:
            logger.warning("%s failed: %s", name, e)
            return ResponseEnvelope.from_error(str(e))
        except Exception as e:
            logger.exception("Unexpected error in %s", name)
            return ResponseEnvelope.from_error(str(e) or type(e).__name__)

    # =========================================================================
    # Validation
    # =========================================================================

    def _validate(self, spec: OperationSpec, args: Mapping[str, Any]) -> None:
        missing = spec.missing_args(args)
        if missing:
            raise InvalidArgumentError(
                f"Missing required argument: {missing[0]}", argument=missing[0]
            )
        if spec.query_arg:
            query = args.get(spec.query_arg)
            if query is not None and not isinstance(query, dict):
                raise InvalidArgumentError(
                    f"Argument {spec.query_arg} must be an object", argument=spec.query_arg
                )

    # =========================================================================
    # Execution
    # =========================================================================

    async def _send(self, client: httpx.AsyncClient, request: OutboundRequest) -> httpx.Response:
        try:
            return await client.request(
                request.method,
                request.url,
                params=encode_query(request.params),
                json=request.json_body,
                headers=build_headers(request.token),
            )
        except httpx.HTTPError as e:
            raise RemoteCallError(str(e) or type(e).__name__) from e

    async def _request(self, spec: OperationSpec, request: OutboundRequest) -> ResponseEnvelope:
        logger.debug("%s %s", request.method, request.url)
        async with create_http_client() as client:
            response = await self._send(client, request)
        raise_for_status(response, RemoteCallError)

        if spec.success_message is not None:
            return ResponseEnvelope.from_text(spec.success_message)
        return ResponseEnvelope.from_data(parse_body(response))

    async def _login(self, context: CallContext, args: Mapping[str, Any]) -> ResponseEnvelope:
        email = args.get("email") or self._config.email
        password = args.get("password") or self._config.password
        token = await auth.login(context.url, email, password)
        return ResponseEnvelope.from_data({"access_token": token})

    async def _upload(
        self, spec: OperationSpec, context: CallContext, args: Mapping[str, Any]
    ) -> ResponseEnvelope:
        file_url = args.get("fileUrl")
        file_data = args.get("fileData")
        # fileUrl takes precedence when both are given
        if not file_url and not file_data:
            raise MissingPayloadError()

        async with create_http_client() as client:
            if file_url:
                content = await self._fetch_file(client, file_url)
            else:
                content = _decode_file_data(file_data)

            form: dict[str, str] = {}
            if args.get("storage"):
                form["storage"] = args["storage"]
            if args.get("title"):
                form["title"] = args["title"]

            url = context.url.rstrip("/") + spec.build_path(args)
            logger.debug("%s %s (%d bytes)", spec.method, url, len(content))
            try:
                response = await client.post(
                    url,
                    data=form,
                    files={"file": (args["fileName"], content, args.get("mimeType"))},
                    headers=build_headers(context.token, json_body=False),
                )
            except httpx.HTTPError as e:
                raise RemoteCallError(str(e) or type(e).__name__) from e

        raise_for_status(response, RemoteCallError)
        return ResponseEnvelope.from_data(parse_body(response))

    async def _fetch_file(self, client: httpx.AsyncClient, file_url: str) -> bytes:
        logger.debug("Fetching upload source %s", file_url)
        try:
            response = await client.get(file_url)
        except httpx.HTTPError as e:
            raise RemoteCallError(str(e) or type(e).__name__) from e
        raise_for_status(response, RemoteCallError)
        return response.content

    def _get_config(self) -> ResponseEnvelope:
        config = self._config
        return ResponseEnvelope.from_data({
            "directus_url": config.base_url,
            "using_token": bool(config.access_token),
            "using_email": bool(config.email),
            "environment_variables": {
                spec.env_var: config.from_env(spec.field) for spec in FIELDS
            },
            "server_args": redact_args(config.server_args, SECRET_ARG_PREFIXES),
        })


def _decode_file_data(file_data: Any) -> bytes:
    if not isinstance(file_data, str):
        raise InvalidArgumentError("fileData must be a base64 string", argument="fileData")
    try:
        return base64.b64decode(file_data)
    except (binascii.Error, ValueError) as e:
        raise InvalidArgumentError(
            f"fileData is not valid base64: {e}", argument="fileData"
        ) from e
