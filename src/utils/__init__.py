"""
Utility modules for the catalogue assistant
"""
from .config_loader import AssistantConfig, load_assistant_config

__all__ = [
    'AssistantConfig',
    'load_assistant_config',
]
