from .anthropic import anthropic_adapter
from .gemini import gemini_adapter
from .mistral import mistral_adapter
from .openai import openai_adapter

__all__ = [
    "anthropic_adapter",
    "gemini_adapter",
    "mistral_adapter",
    "openai_adapter",
]
