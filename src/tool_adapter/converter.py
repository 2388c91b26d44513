# src/tool_adapter/converter.py

import logging
from collections.abc import Iterable
from time import monotonic
from typing import Any

from .errors import UnknownProviderError
from .observability import names
from .observability.base import MetricsHook, NoOpMetricsHook
from .registry import get_adapter
from .types import Adapter, Provider, UniversalTool

logger = logging.getLogger(__name__)


def adapt(
    tool: UniversalTool,
    provider: Provider | str,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> dict[str, Any]:
    """Convert a tool definition to a provider's format.

    Args:
        tool: Provider-neutral tool definition.
        provider: Target provider identifier, e.g. "openai".
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Provider-specific tool dict, ready to pass to the provider's client.

    Raises:
        UnknownProviderError: If provider is not supported.

    Example:
        >>> tool = UniversalTool(
        ...     name="get_weather",
        ...     description="Get current weather",
        ...     params={"location": ToolParam(type="string", required=True)},
        ... )
        >>> adapt(tool, "anthropic")["input_schema"]["required"]
        ['location']
    """
    adapter = _resolve(provider, metrics_hook)
    return _run(adapter, tool, provider, metrics_hook)


def adapt_all(
    tools: Iterable[UniversalTool],
    provider: Provider | str,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[dict[str, Any]]:
    """Convert several tool definitions to a provider's format.

    The provider is resolved once, before any tool is converted. Output
    order matches input order.

    Raises:
        UnknownProviderError: If provider is not supported.
    """
    adapter = _resolve(provider, metrics_hook)
    batch = list(tools)
    metrics_hook.record_gauge(
        names.TOOL_ADAPT_BATCH_SIZE, len(batch), labels={"provider": provider}
    )
    logger.debug("Adapting %d tools for provider=%s", len(batch), provider)
    return [_run(adapter, tool, provider, metrics_hook) for tool in batch]


def _resolve(provider: str, metrics_hook: MetricsHook) -> Adapter:
    try:
        return get_adapter(provider)
    except UnknownProviderError:
        metrics_hook.increment(
            names.TOOL_ADAPT_ERRORS_TOTAL, labels={"provider": provider}
        )
        raise


def _run(
    adapter: Adapter,
    tool: UniversalTool,
    provider: Provider | str,
    metrics_hook: MetricsHook,
) -> dict[str, Any]:
    logger.debug("Adapting tool %s for provider=%s", tool.name, provider)
    start = monotonic()
    result = adapter(tool)
    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(
        names.TOOL_ADAPT_DURATION, elapsed_ms, labels={"provider": provider}
    )
    metrics_hook.increment(names.TOOL_ADAPT_TOTAL, labels={"provider": provider})
    return result
