# src/tool_adapter/errors.py


class UnknownProviderError(ValueError):
    """Raised when a provider identifier has no registered adapter."""

    def __init__(self, provider: str, supported: tuple[str, ...]) -> None:
        self.provider = provider
        self.supported = supported
        super().__init__(
            f"Unknown provider: {provider}. "
            f"Supported providers: {', '.join(supported)}"
        )
