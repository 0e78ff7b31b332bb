import os

from ddlforge.config import config
from .utils.logger import setup_logger

__version__ = "1.0.0"

_init_logger = setup_logger('ddlforge_init')

# Ensure the directory structure defined in settings.yaml exists at import
# time so that any service can safely assume the folders are present.
for key, path in config.get('base_dirs', {}).items():
    if key == 'app':
        continue
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        _init_logger.warning("Could not create '%s' directory %s: %s", key, path, e)

# Log once during package import so we know the package was initialised.
_init_logger.debug('ddlforge package initialised.')
