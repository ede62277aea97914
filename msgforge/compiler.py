"""Pipeline orchestration for compile and check runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .aggregator import aggregate, find_duplicate_paths
from .codegen import AccessorEmitter
from .codegen.constants import (
    GROUP_MODULE,
    INDEX_RESERVED_NAMES,
    MESSAGES_PACKAGE,
    MODULE_RESERVED_NAMES,
    RUNTIME_MODULE,
)
from .config import MsgForgeConfig, load_config
from .flattener import flatten
from .identifiers import assign_identifiers, find_collisions, group_identifier, module_segments
from .loader import load_document
from .logging import get_logger
from .models import (
    Branch,
    CompileResult,
    ExportEntry,
    GroupOutput,
    MessageData,
    MessageRecord,
)
from .namespace import build_namespace
from .scanner import LocaleFileScanner
from .validators import (
    CompletenessValidator,
    DuplicatePathError,
    IdentifierCollisionError,
    IdentifierCollisionValidator,
    ValidationContext,
)

ROOT_GROUP_LABEL = "(root)"

_PACKAGE_INIT = '"""Generated message group package."""\n'


@dataclass
class GroupBuild:
    """Validated, named and arranged messages of one group, ready to render."""

    group: str
    label: str
    records: Dict[str, List[MessageRecord]]
    messages: Dict[str, MessageData]
    identifiers: Dict[str, str]
    namespace: Optional[Branch]


class Compiler:
    """Coordinates flattening, validation and code generation for every message group."""

    def __init__(
        self,
        scanner: LocaleFileScanner | None = None,
        emitter: AccessorEmitter | None = None,
        completeness: CompletenessValidator | None = None,
        collisions: IdentifierCollisionValidator | None = None,
    ) -> None:
        self._scanner = scanner
        self.emitter = emitter or AccessorEmitter()
        self.completeness = completeness or CompletenessValidator()
        self.collisions = collisions or IdentifierCollisionValidator(reserved=MODULE_RESERVED_NAMES)
        self.logger = get_logger("compiler")

    def run_compile(self, config: MsgForgeConfig) -> CompileResult:
        """Compile every message group and write the generated package."""
        self.logger.info(
            "Config loaded: %s (default: %s)", ", ".join(config.locales), config.default_locale
        )
        if not config.validate_translations:
            self.logger.warning(
                "Translation validation is disabled; missing values fall back to %s",
                config.default_locale,
            )

        built = self._build_all(config, validate=config.validate_translations)
        outputs = [output for _, output in built]
        exports = [output.export for output in outputs]

        output_dir = config.output_dir
        runtime_path = output_dir / f"{RUNTIME_MODULE}.py"
        index_path = output_dir / "__init__.py"

        self._write(runtime_path, self.emitter.render_runtime(config.locales, config.default_locale))
        self._write(output_dir / MESSAGES_PACKAGE / "__init__.py", _PACKAGE_INIT)
        for output in outputs:
            self._write_package_inits(output_dir, output.group)
            self._write(output.module_path, output.source)
            self.logger.info("Generated %s", _relativize(output.module_path, config.root))
        self._write(index_path, self.emitter.render_index(exports))
        self.logger.info("Generated %s", _relativize(index_path, config.root))
        self.logger.info("Compilation complete: %d group(s)", len(outputs))

        return CompileResult(
            output_dir=output_dir,
            groups=outputs,
            exports=exports,
            runtime_path=runtime_path,
            index_path=index_path,
        )

    def run_check(self, config: MsgForgeConfig) -> Dict[str, int]:
        """Validate every group without writing output; return message counts per group."""
        built = self._build_all(config, validate=True)
        return {build.label: len(build.messages) for build, _ in built}

    def _build_all(
        self, config: MsgForgeConfig, *, validate: bool
    ) -> List[Tuple[GroupBuild, GroupOutput]]:
        """Build and render every group, then check that they fit in one output package."""
        groups = self._discover(config)
        built: List[Tuple[GroupBuild, GroupOutput]] = []
        for group in sorted(groups):
            build = self.build_group(config, group, groups[group], validate=validate)
            built.append((build, self._render_group(config, build)))

        self._check_layout([build.group for build, _ in built])
        self._check_exports([output.export for _, output in built])
        return built

    def build_group(
        self,
        config: MsgForgeConfig,
        group: str,
        locale_files: Mapping[str, Path],
        *,
        validate: bool = True,
    ) -> GroupBuild:
        """Load, flatten, merge, validate and arrange the messages of ``group``."""
        label = group or ROOT_GROUP_LABEL
        self.logger.info("Processing %s...", label)

        records: Dict[str, List[MessageRecord]] = {}
        for locale in config.locales:
            path = locale_files.get(locale)
            if path is None:
                continue
            records[locale] = flatten(load_document(path))
            self.logger.info("   Loaded %s: %d messages", locale, len(records[locale]))
        for locale in locale_files:
            if locale not in records:
                self.logger.warning(
                    "   Skipping %s in %s: locale is not configured",
                    locale_files[locale].name,
                    label,
                )

        duplicates = find_duplicate_paths(records)
        if duplicates:
            raise DuplicatePathError(label, duplicates)

        messages = aggregate(records)
        context = ValidationContext(
            group=label,
            locales=config.locales,
            default_locale=config.default_locale,
            loaded_locales=list(records),
            messages=messages,
        )
        if validate:
            self.completeness.enforce(context)

        identifiers = assign_identifiers(messages, group)
        context.identifiers = identifiers
        self.collisions.enforce(context)
        self.logger.debug("   Assigned %d accessor names", len(identifiers))

        namespace = None
        if config.generate_namespaces:
            namespace = build_namespace(messages, group, config.default_locale)

        return GroupBuild(
            group=group,
            label=label,
            records=records,
            messages=messages,
            identifiers=identifiers,
            namespace=namespace,
        )

    def _discover(self, config: MsgForgeConfig) -> Dict[str, Dict[str, Path]]:
        scanner = self._scanner or LocaleFileScanner(config.exclude_paths)
        groups = scanner.scan(config.messages_dir)
        self.logger.info("Found %d message group(s)", len(groups))
        for group in sorted(groups):
            self.logger.info("    %s: [%s]", group or ROOT_GROUP_LABEL, ", ".join(groups[group]))
        return groups

    def _render_group(self, config: MsgForgeConfig, build: GroupBuild) -> GroupOutput:
        segments = module_segments(build.group)
        module_path = config.output_dir.joinpath(
            MESSAGES_PACKAGE, *segments, f"{GROUP_MODULE}.py"
        )
        # The module sits two packages plus one per segment below the output package.
        runtime_import = "." * (2 + len(segments))
        source = self.emitter.render_group_module(
            group=build.label,
            messages=build.messages,
            identifiers=build.identifiers,
            runtime_import=runtime_import,
            namespace=build.namespace,
        )
        export = ExportEntry(
            group=build.label,
            import_path="." + ".".join([MESSAGES_PACKAGE, *segments, GROUP_MODULE]),
            functions=list(build.identifiers.values()),
            namespace=group_identifier(build.group) if build.namespace is not None else None,
        )
        return GroupOutput(group=build.group, module_path=module_path, source=source, export=export)

    def _check_exports(self, exports: Sequence[ExportEntry]) -> None:
        claims: Dict[str, str] = {}
        for entry in exports:
            for name in entry.functions:
                claims[f"{entry.group}: {name}"] = name
            if entry.namespace:
                claims[f"{entry.group}: namespace"] = entry.namespace
        collisions = find_collisions(claims, INDEX_RESERVED_NAMES)
        if collisions:
            raise IdentifierCollisionError("entry point", collisions)

    def _check_layout(self, groups: Sequence[str]) -> None:
        modules: Dict[Tuple[str, ...], List[str]] = {}
        packages: Dict[Tuple[str, ...], str] = {}
        for group in groups:
            segments = tuple(module_segments(group))
            modules.setdefault(segments + (GROUP_MODULE,), []).append(group or ROOT_GROUP_LABEL)
            for depth in range(1, len(segments) + 1):
                packages.setdefault(segments[:depth], group)

        conflicts: Dict[str, List[str]] = {}
        for module, owners in modules.items():
            dotted = ".".join((MESSAGES_PACKAGE,) + module)
            if len(owners) > 1:
                conflicts[dotted] = owners
            elif module in packages:
                conflicts[dotted] = owners + [packages[module]]
        if conflicts:
            raise IdentifierCollisionError("output layout", conflicts)

    def _write_package_inits(self, output_dir: Path, group: str) -> None:
        package_dir = output_dir / MESSAGES_PACKAGE
        for segment in module_segments(group):
            package_dir = package_dir / segment
            self._write(package_dir / "__init__.py", _PACKAGE_INIT)

    @staticmethod
    def _write(path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def compile_messages(
    config_path: Path | str = ".", overrides: Mapping[str, Any] | None = None
) -> CompileResult:
    """Load configuration from ``config_path`` and run a full compile."""
    config = load_config(Path(config_path), overrides)
    return Compiler().run_compile(config)


def _relativize(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


__all__ = ["Compiler", "GroupBuild", "ROOT_GROUP_LABEL", "compile_messages"]
