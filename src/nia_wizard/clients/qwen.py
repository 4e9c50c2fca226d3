# Qwen Coder client
from nia_wizard.clients.gemini import GeminiCLIClient


class QwenCoderClient(GeminiCLIClient):
    """Qwen Code (~/.qwen/settings.json), a Gemini CLI fork with the same schema."""

    name = "Qwen Coder"
    docs_url = "https://qwenlm.github.io/qwen-code-docs/en/tools/mcp-server/"
    dot_dir = ".qwen"
