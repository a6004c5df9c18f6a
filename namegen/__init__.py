# NPC name generation probe for a local Ollama server.

__version__ = "0.3.0"
