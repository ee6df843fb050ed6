"""Type checking of the TypeScript sources before anything is emitted."""

import json
import re
import subprocess
from pathlib import Path
from typing import List, Optional

from ..errors import ConfigurationError, TypeCheckError
from ..utils.helpers import find_upwards, resolve_tool_command
from .base import BuildPlugin, PluginBuild

TSCONFIG_FILE = "tsconfig.json"

# tsconfig.json is JSON with comments and trailing commas. String literals are
# matched first so that "//" or "/*" inside them is kept.
_JSONC_COMMENT = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.DOTALL)
_JSONC_TRAILING_COMMA = re.compile(r'("(?:\\.|[^"\\])*")|,(\s*[}\]])')

# TS5xxx are compiler option errors; TS1xxx reported against tsconfig.json are syntax errors in it
_CONFIG_DIAGNOSTIC = re.compile(r'TS5\d{3}:')
_SYNTAX_DIAGNOSTIC = re.compile(r'TS1\d{3}:')


def parse_jsonc(text: str):
    """Parse JSON that may contain comments and trailing commas."""
    text = _JSONC_COMMENT.sub(lambda m: m.group(1) or '', text)
    text = _JSONC_TRAILING_COMMA.sub(lambda m: m.group(1) or m.group(2), text)
    return json.loads(text)


def load_tsconfig(start: str = ".") -> Path:
    """Locate and validate the closest tsconfig.json.

    Raises:
        ConfigurationError: If no tsconfig.json is found or it cannot be parsed.
    """
    config_file = find_upwards(TSCONFIG_FILE, start)
    if config_file is None:
        raise ConfigurationError(f"Failed to find {TSCONFIG_FILE}")
    try:
        parse_jsonc(config_file.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Failed to parse {TSCONFIG_FILE}") from e
    return config_file


def is_config_diagnostic(output: str) -> bool:
    """Whether compiler output reports a problem with tsconfig.json itself."""
    for line in output.splitlines():
        if _CONFIG_DIAGNOSTIC.search(line):
            return True
        if TSCONFIG_FILE in line and _SYNTAX_DIAGNOSTIC.search(line):
            return True
    return False


class CheckTypesPlugin(BuildPlugin):
    """Fails the build when the TypeScript compiler reports any diagnostic."""

    name = "check-types"

    def __init__(self, enabled: bool = True, cwd: str = ".", command: Optional[List[str]] = None):
        self.enabled = enabled
        self.cwd = cwd
        self.command = command

    def check(self) -> None:
        if not self.enabled:
            return
        config_file = load_tsconfig(self.cwd)
        command = self.command or resolve_tool_command("tsc")
        if command is None:
            raise ConfigurationError("TypeScript compiler 'tsc' not found. Install it with: npm install --save-dev typescript")

        result = subprocess.run(
            [*command, "--noEmit", "--pretty", "-p", str(config_file)],
            cwd=self.cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False
        )
        if result.returncode != 0:
            output = (result.stdout + result.stderr).rstrip()
            if is_config_diagnostic(output):
                raise ConfigurationError(f"Invalid {TSCONFIG_FILE}:\n{output}")
            raise TypeCheckError(output)

    def setup(self, build: PluginBuild) -> None:
        build.on_start(self.check)
