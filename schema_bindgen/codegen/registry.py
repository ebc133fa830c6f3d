"""
Target registry for managing available bindings generators.

Provides registration, alias lookup and instantiation of target generators.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.errors import GeneratorError
from .core.generator import GenerationContext, TargetGenerator

logger = get_logger(__name__)

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path]


class RegistryError(GeneratorError):
    """Exception raised for registry-related errors."""

    pass


class TargetRegistry:
    """Registry for managing available target generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[TargetGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        target: str,
        generator_class: Type[TargetGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a target.

        Args:
            target: Primary target name (e.g., 'typescript', 'python')
            generator_class: Class implementing TargetGenerator
            aliases: Alternative names for this target
            replace: If True, replace an existing registration. If False,
                keep the existing one.

        Raises:
            RegistryError: If generator class is invalid or an alias conflicts
        """
        if not (
            isinstance(generator_class, type)
            and issubclass(generator_class, TargetGenerator)
        ):
            raise RegistryError("Generator class must inherit from TargetGenerator")

        target_key = target.lower()

        if target_key in self._generators and not replace:
            logger.debug("Target %s already registered", target_key)
            return

        alias_pairs = [(a, a.lower()) for a in aliases or [] if a.lower() != target_key]

        if not replace:
            for alias, alias_key in alias_pairs:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary target"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != target_key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

        self._generators[target_key] = generator_class
        for _, alias_key in alias_pairs:
            self._aliases[alias_key] = target_key

    def resolve_name(self, target: str) -> str:
        """
        Resolve a target name or alias to its primary name.

        Raises:
            RegistryError: If the target is not registered
        """
        target_key = target.lower()
        if target_key in self._generators:
            return target_key
        if target_key in self._aliases:
            return self._aliases[target_key]

        raise RegistryError(
            f"No generator registered for target: {target}. "
            f"Available: {', '.join(self.list_targets())}"
        )

    def create_generator(
        self,
        target: str,
        config: Optional[ConfigSource] = None,
        context: Optional[GenerationContext] = None,
    ) -> TargetGenerator:
        """
        Create generator instance for a target.

        Args:
            target: Target name or alias
            config: Configuration as GeneratorConfig, override dict, or file path
            context: Run context shared with other generators of the same run

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If the target is unknown or the config type invalid
            ConfigError: If the configuration cannot be loaded
        """
        primary = self.resolve_name(target)
        generator_class = self._generators[primary]

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(primary, config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(primary, custom_config=config)
        elif config is None:
            final_config = load_config(primary)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return generator_class(final_config, context)

    def list_targets(self) -> List[str]:
        """Get list of registered primary target names."""
        return sorted(self._generators.keys())

    def get_aliases_for_target(self, target: str) -> List[str]:
        """Get all aliases of a primary target."""
        target_key = target.lower()
        return sorted(alias for alias, t in self._aliases.items() if t == target_key)

    def list_all_names(self) -> Dict[str, List[str]]:
        """Map each primary target to its name followed by its aliases."""
        return {
            target: [target] + self.get_aliases_for_target(target)
            for target in self._generators
        }

    def is_supported(self, target: str) -> bool:
        """Check if a target name or alias is registered."""
        target_key = target.lower()
        return target_key in self._generators or target_key in self._aliases

    def get_target_info(self, target: str) -> Dict[str, Any]:
        """
        Get information about a registered target.

        Raises:
            RegistryError: If target not found
        """
        primary = self.resolve_name(target)
        generator = self.create_generator(primary)

        return {
            "name": generator.language_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "index_file": generator.index_file_name,
            "import_style": generator.import_style.value,
            "supports_interfaces": generator.supports_interfaces,
            "aliases": self.get_aliases_for_target(primary),
            "module": type(generator).__module__,
        }


def create_registry() -> TargetRegistry:
    """
    Create a registry holding every built-in target.

    This is the single source of truth for target registration.
    """
    from .languages.python import PythonGenerator
    from .languages.typescript import TypescriptGenerator

    registry = TargetRegistry()
    registry.register("typescript", TypescriptGenerator, aliases=["ts"])
    registry.register("python", PythonGenerator, aliases=["py"])
    return registry


# Public API functions using a default registry


def get_generator(
    target: str,
    config: Optional[ConfigSource] = None,
    context: Optional[GenerationContext] = None,
) -> TargetGenerator:
    """
    Get a generator instance for a built-in target.

    Args:
        target: Target name or alias
        config: Configuration
        context: Run context

    Returns:
        Generator instance
    """
    return create_registry().create_generator(target, config, context)


def list_supported_targets() -> List[str]:
    """List all built-in targets."""
    return create_registry().list_targets()


def get_target_info(target: str) -> Dict[str, Any]:
    """Get information about a built-in target."""
    return create_registry().get_target_info(target)
