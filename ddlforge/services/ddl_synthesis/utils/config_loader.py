import json
from pathlib import Path
from typing import Dict, Any, Optional
from ddlforge.config import config as app_global_config # To get package base directory
import logging

def load_json_from_dialect_config(
    logger: Any,
    dialect: Optional[str],
    config_filename: str
) -> Dict:
    """
    Loads a JSON rule file from the structured synthesis config directory.
    Expected path structure: app_base_dir/config/dialects/{dialect}/{config_filename}.
    When *dialect* is None the file is read from app_base_dir/config/{config_filename}.
    """
    effective_logger = logger if logger is not None else logging.getLogger(__name__)
    full_config_path = "an unspecified path"
    try:
        app_base_dir = app_global_config.get('base_dirs', {}).get('app')
        if not app_base_dir:
            effective_logger.error("App base directory ('base_dirs'['app']) not found in global app_config.")
            return {}

        base_path = Path(app_base_dir) / 'config'
        if dialect is not None:
            d_type = dialect.lower().strip()
            if not d_type:
                effective_logger.error(f"Dialect is empty, cannot construct config path for {config_filename}.")
                return {}
            base_path = base_path / 'dialects' / d_type

        full_config_path = base_path / config_filename

        if not full_config_path.exists():
            effective_logger.info(f"Configuration file not found (this may be expected): {full_config_path}")
            return {}

        with open(full_config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
            effective_logger.debug(f"Successfully loaded configuration from {full_config_path}")
            return data
    except json.JSONDecodeError as jde:
        effective_logger.error(f"Error decoding JSON from {str(full_config_path)}: {jde}", exc_info=True)
        return {}
    except (IOError, OSError) as ioe:
        effective_logger.error(f"File system error loading configuration file {str(full_config_path)}: {ioe}", exc_info=True)
        return {}
