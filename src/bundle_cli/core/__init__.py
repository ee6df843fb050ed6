"""Host side of the build: bundler invocation, build cycles and serve mode."""

from .bundler import EsbuildBundler
from .context import BuildContext
from .server import DevServer, report_result, DEFAULT_HOST, DEFAULT_PORT

__all__ = [
    'EsbuildBundler',
    'BuildContext',
    'DevServer',
    'report_result',
    'DEFAULT_HOST',
    'DEFAULT_PORT'
]
