"""Route a tool call through validation, credential resolution and the HTTP request."""

from typing import Any, Callable, Optional

from .client import WordPressClient, build_request
from .config import WordPressSettings
from .credentials import CredentialOverrides, resolve_credentials
from .exceptions import InternalToolError, UnknownToolError, WordPressToolError
from .logger import get_logger
from .tools import ToolCallRequest, ToolName, ToolRegistry, default_registry

logger = get_logger(__name__)

_CREDENTIAL_ARGS = frozenset({"siteUrl", "site_url", "username", "password"})


class Dispatcher:
    """
    Executes tool calls against the WordPress REST API.

    Each call goes through the same strictly sequential steps: look up the tool,
    validate its arguments, resolve credentials, then issue exactly one HTTP
    request. Nothing is retried and nothing is kept between calls.
    """

    def __init__(
        self,
        client: WordPressClient,
        registry: Optional[ToolRegistry] = None,
        settings_provider: Callable[[], WordPressSettings] = WordPressSettings.from_env,
    ):
        """Initialize the dispatcher.

        Args:
            client: Transport used for the outbound request.
            registry: Catalog of tools. Defaults to the built-in WordPress tools.
            settings_provider: Called once per call to obtain the default credentials.
        """
        self.client = client
        self.registry = registry or default_registry()
        self.settings_provider = settings_provider

    async def dispatch(self, call: ToolCallRequest) -> Any:
        """Execute one tool call.

        Args:
            call: The tool name and raw arguments sent by the caller.

        Returns:
            The JSON payload returned by WordPress, unmodified.

        Raises:
            UnknownToolError: If the tool is not in the registry.
            InvalidArgumentsError: If required arguments are missing or malformed.
            MissingCredentialsError: If site URL, username or password cannot be resolved.
            RemoteAPIError: If WordPress answers with an error.
            TransportError: If WordPress cannot be reached.
            InternalToolError: For any other failure.
        """
        logger.info("Dispatching tool '%s'.", call.name)
        logger.debug(
            "Tool '%s' argument keys: %s",
            call.name,
            sorted(k for k in call.arguments if k not in _CREDENTIAL_ARGS),
        )
        try:
            return await self._dispatch(call)
        except WordPressToolError as e:
            logger.warning("Tool '%s' failed (%s): %s", call.name, e.category, e.message)
            raise
        except Exception as e:
            msg = f"Tool '{call.name}' failed unexpectedly: {type(e).__name__}"
            logger.error(msg, exc_info=True)
            raise InternalToolError(msg) from e

    async def _dispatch(self, call: ToolCallRequest) -> Any:
        definition = self.registry.get(call.name)
        try:
            tool = ToolName(definition.name)
        except ValueError:
            raise UnknownToolError(f"Unknown method: {call.name}") from None

        args = self.registry.validate(definition.name, call.arguments)
        if not isinstance(args, CredentialOverrides):
            raise InternalToolError(f"Tool '{call.name}' does not accept connection arguments.")

        try:
            settings = self.settings_provider()
        except ValueError as e:
            raise InternalToolError(f"Invalid server configuration: {e}") from e
        credentials = resolve_credentials(args, settings)

        request = build_request(tool, args)
        result = await self.client.send(credentials, request, timeout=settings.timeout)
        logger.info("Tool '%s' succeeded.", call.name)
        return result
