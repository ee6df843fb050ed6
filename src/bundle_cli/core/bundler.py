"""esbuild invocation for one build cycle."""

import subprocess
import tempfile
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from ..artifacts.models import EntryPoint
from ..config import BuildConfig
from ..errors import BundleError, ConfigurationError
from ..plugins.base import FILE_NAMESPACE, PluginBuild
from ..utils.helpers import resolve_tool_command


class EsbuildBundler:
    """Runs the esbuild executable with options derived from a BuildConfig.

    esbuild cannot call back into Python, so modules served by resolve and
    load hooks are materialized as shim files before the run and wired in
    with ``--alias``.
    """

    def __init__(self, command: Optional[List[str]] = None):
        """Initialize the bundler.

        Args:
            command: Command prefix running esbuild. Looked up on PATH (or via
                npx) when omitted.
        """
        self.command = command

    def _entry_point_args(self, config: BuildConfig) -> List[str]:
        entry_points = config.resolved_entry_points()
        args = []
        if isinstance(entry_points, Mapping):
            for out, entry_point in entry_points.items():
                in_path = entry_point.in_path if isinstance(entry_point, EntryPoint) else entry_point
                args.append(f"{out}={in_path}")
        else:
            for entry_point in entry_points:
                if isinstance(entry_point, EntryPoint):
                    args.append(f"{entry_point.out}={entry_point.in_path}")
                else:
                    args.append(entry_point)
        return args

    def build_args(self, config: BuildConfig, aliases: Optional[Dict[str, str]] = None) -> List[str]:
        """Translate the configuration into esbuild command-line arguments."""
        args = self._entry_point_args(config)

        if config.bundle:
            args.append("--bundle")
        if config.minify:
            args.append("--minify")
        if config.sourcemap is True:
            args.append("--sourcemap")
        elif isinstance(config.sourcemap, str) and config.sourcemap != "none":
            args.append(f"--sourcemap={config.sourcemap}")

        if config.outdir:
            args.append(f"--outdir={config.outdir}")
            if config.outbase:
                args.append(f"--outbase={config.outbase}")
        elif config.outfile:
            args.append(f"--outfile={config.outfile}")

        args.append(f"--log-level={config.log_level}")
        args.append(f"--legal-comments={config.legal_comments}")
        for inject in config.resolved_inject():
            args.append(f"--inject:{inject}")
        for specifier, shim in (aliases or {}).items():
            args.append(f"--alias:{specifier}={shim}")
        return args

    def write_virtual_modules(self, config: BuildConfig, build: PluginBuild, shim_dir: Path) -> Dict[str, str]:
        """Write shim modules for every import the hooks serve from a virtual namespace.

        Returns:
            Dict[str, str]: Import specifier to shim file path.
        """
        aliases = {}
        for index, specifier in enumerate(config.imports):
            resolved = build.resolve(specifier)
            if resolved is None or resolved.namespace == FILE_NAMESPACE:
                continue
            loaded = build.load(resolved.path, resolved.namespace)
            if loaded is None:
                continue
            shim = shim_dir / f"virtual-{index}.{loaded.loader}"
            shim.write_text(loaded.contents, encoding="utf-8")
            aliases[specifier] = str(shim)
        return aliases

    def bundle(self, config: BuildConfig, build: PluginBuild) -> List[str]:
        """Bundle once.

        Returns:
            List[str]: Warnings printed by esbuild.

        Raises:
            ConfigurationError: If esbuild cannot be found.
            BundleError: If esbuild exits with a non-zero status.
        """
        command = self.command or resolve_tool_command("esbuild")
        if command is None:
            raise ConfigurationError("esbuild not found. Install it with: npm install --save-dev esbuild")

        with tempfile.TemporaryDirectory(prefix="bundle-hooks-") as shim_dir:
            aliases = self.write_virtual_modules(config, build, Path(shim_dir))
            result = subprocess.run(
                [*command, *self.build_args(config, aliases)],
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False
            )

        if result.returncode != 0:
            raise BundleError(result.stderr.strip() or f"esbuild exited with code {result.returncode}")
        return [line for line in result.stderr.splitlines() if line.strip()]
