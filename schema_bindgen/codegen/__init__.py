"""
Bindings generation package.

Turns host schema types into source modules for TypeScript or Python.
"""

from .core.config import ConfigManager, GeneratorConfig, load_config
from .core.emitter import BindingsEmitter, generate_bindings
from .core.errors import GeneratorError
from .core.generator import GenerationContext, GenerationResult, TargetGenerator
from .registry import (
    RegistryError,
    TargetRegistry,
    create_registry,
    get_generator,
    get_target_info,
    list_supported_targets,
)

__all__ = [
    "TargetRegistry",
    "RegistryError",
    "TargetGenerator",
    "GenerationContext",
    "GenerationResult",
    "GeneratorError",
    "GeneratorConfig",
    "ConfigManager",
    "BindingsEmitter",
    "create_registry",
    "generate_bindings",
    "get_generator",
    "get_target_info",
    "list_supported_targets",
    "load_config",
]
