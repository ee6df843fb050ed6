"""Data models for build artifacts."""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass
class BuildFile:
    """One output file flowing through the plugin pipeline.

    ``src_path`` and ``dst_path`` are fixed when the artifact set is derived;
    ``content`` is filled by the read stage and rewritten by later stages.
    """
    src_path: str
    dst_path: str
    content: str = ''

    @property
    def is_html(self) -> bool:
        return self.dst_path.endswith('.html')

    @property
    def is_script(self) -> bool:
        return self.dst_path.endswith('.js')

    @property
    def basename(self) -> str:
        """File name of the destination, used as a relative script src."""
        return self.dst_path.rsplit('/', 1)[-1]


@dataclass
class EntryPoint:
    """Object form of an entry point (``{in: ..., out: ...}``)."""
    in_path: str
    out: str

    @classmethod
    def from_dict(cls, data: dict) -> 'EntryPoint':
        """Create an entry point from its YAML mapping form.

        Raises:
            ValueError: If the mapping has no ``out`` key.
        """
        if 'out' not in data:
            raise ValueError(f"Entry point is missing 'out': {data}")
        return cls(in_path=data.get('in', ''), out=data['out'])


EntryPointSpec = Union[str, EntryPoint]


@dataclass
class BuildState:
    """Artifacts of the current build cycle, shared by all plugins.

    The list is replaced (not mutated) on every refresh so that files of a
    previous cycle are never handed to the next one.
    """
    files: List[BuildFile] = field(default_factory=list)

    def html_files(self) -> List[BuildFile]:
        return [file for file in self.files if file.is_html]

    def script_files(self) -> List[BuildFile]:
        return [file for file in self.files if file.is_script]
