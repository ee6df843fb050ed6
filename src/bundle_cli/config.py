"""Build configuration for bundle-hooks."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import yaml

from .artifacts.models import EntryPoint, EntryPointSpec
from .artifacts.paths import trailing_slash
from .errors import ConfigurationError
from .utils.console import _rich_warning


DEFAULT_CONFIG_FILE = "build.yml"
SOURCEMAP_MODES = ('none', 'inline', 'linked', 'external', 'both')
IMPORT_ARG_SEPARATOR = '|'


@dataclass
class ImportGlobal:
    """A module supplied at runtime by a separately loaded script."""
    name: str  # Global identifier the script defines
    src: str = ''  # URL of the script providing it


ImportTable = Dict[str, ImportGlobal]


@dataclass
class BuildConfig:
    """Bundler options plus the settings of the plugin pipeline."""
    entry_points: Optional[Union[List[EntryPointSpec], Dict[str, EntryPointSpec]]] = None
    outbase: str = "src/"
    outdir: str = "out/"
    outfile: Optional[str] = None
    sourcemap: Union[bool, str, None] = True
    bundle: bool = True
    minify: bool = True
    log_level: str = "warning"
    legal_comments: str = "none"
    inject: Optional[List[str]] = None  # None means "<outbase>inject.ts" when present
    check_types: bool = True
    extern: bool = False
    imports: ImportTable = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.sourcemap, (bool, type(None))) and self.sourcemap not in SOURCEMAP_MODES:
            raise ConfigurationError(
                f"Invalid sourcemap mode '{self.sourcemap}'. "
                f"Expected a boolean or one of: {', '.join(SOURCEMAP_MODES)}"
            )

    def _outbase_dir(self) -> str:
        return trailing_slash(self.outbase) if self.outbase else ''

    def resolved_entry_points(self) -> Union[List[EntryPointSpec], Dict[str, EntryPointSpec]]:
        """Configured entry points, defaulting to ``<outbase>index.ts``."""
        if self.entry_points is not None:
            return self.entry_points
        return [self._outbase_dir() + 'index.ts']

    def resolved_inject(self) -> List[str]:
        """Files the bundler injects into every entry point."""
        if self.inject is not None:
            return list(self.inject)
        candidate = self._outbase_dir() + 'inject.ts'
        return [candidate] if os.path.isfile(candidate) else []

    @classmethod
    def from_build_yml(cls, path: str = DEFAULT_CONFIG_FILE, **overrides) -> 'BuildConfig':
        """Create configuration from build.yml with command-line overrides.

        A missing file yields the defaults. Overrides that are None are ignored.

        Args:
            path: Location of the YAML configuration file.
            **overrides: Command-line values that take precedence over the file.

        Returns:
            BuildConfig: Configuration with file values and overrides applied.

        Raises:
            ConfigurationError: If the file cannot be parsed or holds invalid values.
        """
        values = {}
        config_path = Path(path)
        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Failed to parse {path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigurationError(f"Failed to parse {path}: expected a mapping")
            values = _values_from_yml(data)

        for key, value in overrides.items():
            if value is not None:
                values[key] = value

        return cls(**values)


def _values_from_yml(data: dict) -> dict:
    build_section = data.get('build', {}) or {}
    values = {}

    for key in ('outbase', 'outdir', 'outfile', 'sourcemap', 'bundle', 'minify',
                'log_level', 'legal_comments', 'inject', 'check_types'):
        if key in build_section:
            values[key] = build_section[key]

    if 'entry_points' in build_section:
        values['entry_points'] = _parse_entry_points(build_section['entry_points'])
    if 'extern' in data:
        values['extern'] = bool(data['extern'])
    if 'imports' in data:
        values['imports'] = parse_import_table(data['imports'] or {})
    return values


def _parse_entry_point(value) -> EntryPointSpec:
    if isinstance(value, dict):
        try:
            return EntryPoint.from_dict(value)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
    return str(value)


def _parse_entry_points(value) -> Union[List[EntryPointSpec], Dict[str, EntryPointSpec]]:
    if isinstance(value, dict):
        return {str(key): _parse_entry_point(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_parse_entry_point(item) for item in value]
    return [_parse_entry_point(value)]


def parse_import_table(data: dict) -> ImportTable:
    """Parse the ``imports`` section of build.yml.

    Raises:
        ConfigurationError: If an entry is not a mapping with a ``name``.
    """
    table: ImportTable = {}
    for key, entry in data.items():
        if not isinstance(entry, dict) or not entry.get('name'):
            raise ConfigurationError(f"Import '{key}' needs a mapping with a 'name'")
        table[str(key)] = ImportGlobal(name=str(entry['name']), src=str(entry.get('src', '')))
    return table


def parse_import_args(args: Iterable[str]) -> ImportTable:
    """Parse ``key|name|src`` command-line triples into an import table.

    Triples that do not have exactly three fields are reported and skipped.
    """
    table: ImportTable = {}
    for arg in args:
        split = arg.split(IMPORT_ARG_SEPARATOR)
        if len(split) != 3:
            _rich_warning(f"Invalid argument: {arg}", symbol="warning")
            continue
        key, name, src = split
        table[key] = ImportGlobal(name=name, src=src)
    return table
