# Client registry
import logging
from collections.abc import Sequence

from nia_wizard.clients.amazon_q import AmazonQClient
from nia_wizard.clients.amp import AmpClient
from nia_wizard.clients.antigravity import AntigravityClient
from nia_wizard.clients.augment import AugmentClient
from nia_wizard.clients.base import CLIClient, ConfigFileClient, HybridCLIClient, MCPClient
from nia_wizard.clients.bolt_ai import BoltAIClient
from nia_wizard.clients.claude_code import ClaudeCodeClient
from nia_wizard.clients.claude_desktop import ClaudeDesktopClient
from nia_wizard.clients.cline import ClineClient
from nia_wizard.clients.codex import CodexAppClient, CodexCLIClient
from nia_wizard.clients.continue_dev import ContinueClient
from nia_wizard.clients.copilot import CopilotAgentClient, CopilotCLIClient
from nia_wizard.clients.crush import CrushClient
from nia_wizard.clients.cursor import CursorClient
from nia_wizard.clients.factory import FactoryClient
from nia_wizard.clients.gemini import GeminiCLIClient
from nia_wizard.clients.jetbrains import JetBrainsClient
from nia_wizard.clients.kilo import KiloCodeClient
from nia_wizard.clients.kiro import KiroClient
from nia_wizard.clients.lm_studio import LMStudioClient
from nia_wizard.clients.opencode import OpencodeClient
from nia_wizard.clients.perplexity import PerplexityClient
from nia_wizard.clients.qodo import QodoGenClient
from nia_wizard.clients.qwen import QwenCoderClient
from nia_wizard.clients.roo import RooCodeClient
from nia_wizard.clients.trae import TraeClient
from nia_wizard.clients.vibe import VibeClient
from nia_wizard.clients.visual_studio import VisualStudioClient
from nia_wizard.clients.vscode import VSCodeClient
from nia_wizard.clients.warp import WarpClient
from nia_wizard.clients.windsurf import WindsurfClient
from nia_wizard.clients.zed import ZedClient
from nia_wizard.config import Settings
from nia_wizard.models import ClientDescriptor

# Registry of all clients, popular ones first (display and selection order)
ALL_CLIENTS: list[type[MCPClient]] = [
    CursorClient,
    ClaudeCodeClient,
    ClaudeDesktopClient,
    VSCodeClient,
    WindsurfClient,
    ClineClient,
    ContinueClient,
    ZedClient,
    JetBrainsClient,
    AntigravityClient,
    TraeClient,
    RooCodeClient,
    KiloCodeClient,
    GeminiCLIClient,
    OpencodeClient,
    QodoGenClient,
    QwenCoderClient,
    VisualStudioClient,
    CrushClient,
    CopilotCLIClient,
    CopilotAgentClient,
    AugmentClient,
    KiroClient,
    LMStudioClient,
    BoltAIClient,
    PerplexityClient,
    WarpClient,
    AmazonQClient,
    CodexCLIClient,
    CodexAppClient,
    FactoryClient,
    AmpClient,
    VibeClient,
]

__all__ = [
    "MCPClient",
    "ConfigFileClient",
    "CLIClient",
    "HybridCLIClient",
    "ALL_CLIENTS",
    "get_all_clients",
    "find_clients",
]


def get_all_clients(
    settings: Settings | None = None,
    logger: logging.Logger | None = None,
) -> list[MCPClient]:
    """Instantiate and return every client.

    ABOUTME: Fresh instances per call; nothing is shared between invocations
    """
    return [client_cls(settings=settings, logger=logger) for client_cls in ALL_CLIENTS]


def find_clients(names: list[str], clients: Sequence[ClientDescriptor]) -> list[ClientDescriptor]:
    """Look up clients by name, keeping the order of `names`.

    Raises:
        KeyError: If a name matches no client
    """
    by_name = {client.name: client for client in clients}
    unknown = [name for name in names if name not in by_name]
    if unknown:
        raise KeyError(f"Unknown client(s): {', '.join(unknown)}")
    return [by_name[name] for name in names]
