"""
Namespace Seeding

Builds the initial tree a fresh terminal session starts from.

Author: YSNRFD
Version: 1.0.0
"""

import time
from typing import Optional

from .namespace import Namespace
from .path_resolver import PathResolver
from pyterm import codec
from pyterm.core.config_loader import Config, get_config
from pyterm.logger import get_logger


SAMPLE_FILES = {
    'projects.txt': "1. WASM Terminal (Rust)\n2. Encrypted Portfolio",
    'contact.txt': "GitHub: @sangeeth\nEmail: hello@sangeeth.dev",
}


def seed_namespace(namespace: Namespace, config: Optional[Config] = None) -> Namespace:
    """
    Populate a namespace with the standard directories and sample files.

    Directories are created parent-first; a configured directory whose
    parent is missing has its ancestors created too. Sample files are
    stored obfuscated under the home directory, and the cursor is left
    at home.

    Args:
        namespace: Namespace to populate
        config: Configuration (defaults to the global one)

    Returns:
        The same namespace
    """
    config = config or get_config()
    logger = get_logger('seed')
    now = time.time()

    home = PathResolver.normalize(config.namespace.home_path)
    directories = [PathResolver.normalize(d) for d in config.namespace.seed_directories]
    if home not in directories:
        directories.insert(0, home)

    for directory in directories:
        _make_dirs(namespace, directory, now)

    if config.namespace.seed_sample_files:
        for name, text in SAMPLE_FILES.items():
            path = PathResolver.join(home, name)
            if not namespace.exists(path):
                namespace.create_file(path, codec.encode(text), now)

    namespace.set_current_path(home)

    logger.info(
        "Seeded namespace",
        context={'entries': len(namespace), 'home': home}
    )
    return namespace


def _make_dirs(namespace: Namespace, path: str, created_at: float) -> None:
    components = PathResolver.parse(path).components
    current = '/'
    for component in components:
        current = PathResolver.join(current, component)
        if not namespace.exists(current):
            namespace.create_directory(current, created_at)


def create_namespace(config: Optional[Config] = None) -> Namespace:
    """Factory: a new, independently owned, seeded namespace."""
    return seed_namespace(Namespace(), config)
