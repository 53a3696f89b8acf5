from .messaging import MessageBus, Renderer, bus
from .messages import MESSAGES
from .adapters.yaml_adapter import YamlAdapter

__all__ = ["MessageBus", "Renderer", "bus", "MESSAGES", "YamlAdapter"]
