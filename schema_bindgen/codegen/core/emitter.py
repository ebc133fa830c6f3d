"""
Bindings emission.

Drives one generation run: checks the output directory against the
overwrite policy, extracts and renders every candidate type of every
configured package, writes the files, then writes one index file per
output directory.
"""

import sys
import time
from pathlib import Path, PurePosixPath
from typing import List, Optional, TextIO

from ...logging_config import get_logger
from .config import OverwriteType
from .descriptors import BarrelDescriptor, BarrelEntry
from .errors import IOFailure, OutputStateConflict
from .generator import GenerationResult, TargetGenerator
from .types import TypeSource

logger = get_logger(__name__)

_IGNORED_DIRECTORIES = ("__pycache__",)


class BindingsEmitter:
    """Runs extraction, rendering and file output for one target."""

    def __init__(
        self,
        generator: TargetGenerator,
        type_source: TypeSource,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize emitter.

        Args:
            generator: Configured target generator
            type_source: Discovers candidate types per package
            stream: Destination when no output directory is configured
        """
        self.generator = generator
        self.config = generator.config
        self.context = generator.context
        self.type_source = type_source
        self.stream = stream
        self.extractor = generator.create_extractor()

    @property
    def output_dir(self) -> Optional[Path]:
        return self.config.output_path

    def generate(self) -> GenerationResult:
        """
        Generate bindings for every configured package.

        Returns:
            GenerationResult listing written files and warnings

        Raises:
            OutputStateConflict: Output directory not empty under policy NONE
            InputKindMismatch: A type was extracted with the wrong kind
            UnresolvedReference: A referenced type has no module location
            NameCollision: Two different types map to the same output file
            IOFailure: Reading, writing or deleting output failed
        """
        start = time.perf_counter()
        result = GenerationResult(warnings=self.generator.validate())

        self.validate_output_state()
        for package in self.config.packages:
            self._create_bindings_for_package(package, result)
        result.barrels = self.create_barrels()

        elapsed_ms = (time.perf_counter() - start) * 1000
        result.metadata = {
            "target": self.generator.language_name,
            "file_extension": self.generator.file_extension,
            "packages": len(self.config.packages),
            "files_written": len(result.files),
            "barrels_written": len(result.barrels),
            "empty_packages": len(result.empty_packages),
            "elapsed_ms": round(elapsed_ms),
        }
        logger.info("Complete in %d ms", elapsed_ms)
        return result

    def validate_output_state(self) -> None:
        """Apply the overwrite policy before anything is written."""
        output_dir = self.output_dir
        if output_dir is None or not output_dir.exists():
            return

        try:
            empty = not any(output_dir.iterdir())
        except OSError as e:
            raise IOFailure(f"Failed to read output directory {output_dir}: {e}") from e

        if empty:
            return

        if self.config.overwrite == OverwriteType.NONE:
            logger.error(
                "Directory %s is not empty. Aborting code generation. "
                "To overwrite the directory, specify --overwrite option.",
                output_dir.resolve(),
            )
            raise OutputStateConflict(
                f"Output directory {output_dir} is not empty and overwrite is 'none'"
            )

        if self.config.overwrite == OverwriteType.FULL:
            logger.info(
                "Overwrite 'full' specified. Deleting current content of %s",
                output_dir.resolve(),
            )
            self._delete_tree_contents(output_dir)

    def _delete_tree_contents(self, root: Path) -> None:
        # Deepest entries first so directories are empty when removed
        try:
            entries = sorted(root.rglob("*"), key=lambda p: len(p.parts), reverse=True)
            for entry in entries:
                if entry.is_dir() and not entry.is_symlink():
                    entry.rmdir()
                else:
                    entry.unlink()
        except OSError as e:
            raise IOFailure(f"Failed to clear output directory {root}: {e}") from e

    def _create_bindings_for_package(
        self, package: str, result: GenerationResult
    ) -> None:
        logger.info(
            "Creating %s bindings for package %s", self.generator.language_name, package
        )
        types = self.type_source.find_candidate_types(package)

        if not types:
            logger.warning("Package %s contains no bindable classes", package)
            result.empty_packages.append(package)
            result.warnings.append(f"Package {package} contains no bindable classes")
            return

        for info in types:
            relative_path = self.generator.output_path(info)
            if not self.context.mark_emitted(relative_path, info.name, info.module_path):
                logger.debug("Skipping %s, %s already emitted", info.name, relative_path)
                continue

            descriptor = self.extractor.extract(info)
            logger.debug("Adding %s to package %s", info.name, package)
            written = self._write(relative_path, self.generator.render(descriptor))
            if written is not None:
                result.files.append(written)

    def collect_barrels(self) -> List[BarrelDescriptor]:
        """
        Build one barrel per directory of the output tree.

        Each barrel lists the target-language modules in the directory
        (without extension) and its child packages; the index file itself
        is never listed.
        """
        root = self.output_dir
        if root is None or not root.exists():
            return []

        barrels = []
        try:
            directories = [root] + sorted(
                p for p in root.rglob("*") if p.is_dir() and not self._ignored(root, p)
            )
            for directory in directories:
                barrels.append(self._barrel_for(root, directory))
        except OSError as e:
            raise IOFailure(f"Failed to scan output directory {root}: {e}") from e

        return barrels

    def create_barrels(self) -> List[Path]:
        """Render and write the index file of every output directory."""
        if self.output_dir is None:
            logger.debug("No output directory specified. Skipping barrel creation.")
            return []

        written = []
        for barrel in self.collect_barrels():
            path = self._write(
                self.generator.index_path(barrel.directory),
                self.generator.render_barrel(barrel),
            )
            if path is not None:
                written.append(path)
        return written

    def _barrel_for(self, root: Path, directory: Path) -> BarrelDescriptor:
        relative_dir = PurePosixPath(directory.relative_to(root).as_posix())
        entries = []
        for child in sorted(directory.iterdir()):
            if child.is_dir():
                if not self._ignored(root, child):
                    entries.append(BarrelEntry(child.name, is_package=True))
            elif (
                child.suffix == self.generator.file_extension
                and child.name != self.generator.index_file_name
            ):
                relative_file = (relative_dir / child.name).as_posix()
                entries.append(
                    BarrelEntry(
                        child.stem, exported_symbol=self.context.emitted.get(relative_file)
                    )
                )
        return BarrelDescriptor(relative_dir, tuple(entries))

    @staticmethod
    def _ignored(root: Path, directory: Path) -> bool:
        parts = directory.relative_to(root).parts
        return any(p.startswith(".") or p in _IGNORED_DIRECTORIES for p in parts)

    def _write(self, relative_path: PurePosixPath, text: str) -> Optional[Path]:
        if self.output_dir is None:
            stream = self.stream or sys.stdout
            stream.write(text)
            stream.flush()
            return None

        path = self.output_dir.joinpath(*relative_path.parts)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise IOFailure(f"Failed to write {path}: {e}") from e
        return path


def generate_bindings(
    generator: TargetGenerator,
    type_source: TypeSource,
    stream: Optional[TextIO] = None,
) -> GenerationResult:
    """
    Generate bindings using the specified generator.

    Args:
        generator: Configured target generator
        type_source: Discovers candidate types per package
        stream: Destination when no output directory is configured

    Returns:
        GenerationResult with written files, warnings and metadata
    """
    return BindingsEmitter(generator, type_source, stream).generate()
