"""terminai - LLM suggestions for commands the shell cannot find."""

__version__ = "0.1.0"

# Public API - lazy imports to keep startup fast
def __getattr__(name: str):
    """Lazy import of the public API."""
    if name == "TerminAI":
        from terminai.core import TerminAI
        return TerminAI
    elif name == "CommandProber":
        from terminai.probe import CommandProber
        return CommandProber
    elif name == "Config":
        from terminai.config import Config
        return Config
    elif name == "load_config":
        from terminai.config import load_config
        return load_config
    elif name == "create_provider":
        from terminai.providers import create_provider
        return create_provider
    elif name == "build_prompt":
        from terminai.prompt import build_prompt
        return build_prompt
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "TerminAI",
    "CommandProber",
    "Config",
    "load_config",
    "create_provider",
    "build_prompt",
]
