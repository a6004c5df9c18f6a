from .echo_dev_client import EchoDevClient
from .ollama_client import OllamaClient

__all__ = ["EchoDevClient", "OllamaClient"]
