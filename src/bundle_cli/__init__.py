"""bundle-hooks: build pipeline plugins around the esbuild bundler."""

from .version import __version__
