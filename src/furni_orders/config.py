"""
Configuration module for Furni Orders
Loads environment variables (and a local .env file when present)
and exposes plain module-level settings.
"""
import os
import tempfile
from pathlib import Path
from dotenv import load_dotenv

# Project root (two levels up from this file: src/furni_orders/config.py)
PACKAGE_ROOT = Path(__file__).parent
PROJECT_ROOT = PACKAGE_ROOT.parent.parent

# Load environment variables from .env file (if exists - local dev only)
env_file = PROJECT_ROOT / '.env'
if env_file.exists():
    load_dotenv(env_file)


# ═══════════════════════════════════════════════════════════════════
# WRITABLE PATHS
# ═══════════════════════════════════════════════════════════════════

def get_writable_path(folder_name: str, env_var: str = None) -> str:
    """Get a writable folder path, falling back to the temp directory"""
    env_path = os.getenv(env_var or folder_name.upper() + '_FOLDER')
    if env_path:
        if os.path.isabs(env_path):
            path = Path(env_path)
        else:
            path = PROJECT_ROOT / env_path
    else:
        path = PROJECT_ROOT / folder_name

    if not path.exists():
        try:
            path.mkdir(parents=True, exist_ok=True)
        except (PermissionError, OSError):
            path = Path(tempfile.gettempdir()) / 'furni_orders' / folder_name
            path.mkdir(parents=True, exist_ok=True)

    return str(path)


# ═══════════════════════════════════════════════════════════════════
# CONFIGURATION VALUES
# ═══════════════════════════════════════════════════════════════════

# REST backend
API_BASE_URL = os.getenv('FURNI_API_BASE_URL', 'http://localhost:8000').rstrip('/')
API_TIMEOUT = float(os.getenv('FURNI_API_TIMEOUT', '15'))

# Branding for the production sheet
BRAND_NAME = os.getenv('BRAND_NAME', 'JAIPUR')
BRAND_LOGO_URL = os.getenv(
    'BRAND_LOGO_URL',
    'https://customer-assets.emergentagent.com/job_furnipdf-maker/artifacts/'
    'mdh71t2g_WhatsApp%20Image%202025-12-22%20at%202.24.36%20PM.jpeg',
)

# Sharing
WHATSAPP_BASE_URL = os.getenv('WHATSAPP_BASE_URL', 'https://wa.me/')

# Printing
PRINT_DELAY_MS = int(os.getenv('PRINT_DELAY_MS', '500'))
SHEET_OUTPUT_FOLDER = get_writable_path('sheets', env_var='SHEET_OUTPUT_FOLDER')

# Navigation routes
ORDERS_ROUTE = '/orders'

# Monitoring Configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_DIR = os.getenv('LOG_DIR', str(PROJECT_ROOT / 'logs'))
LOG_FILE_MAX_MB = int(os.getenv('LOG_FILE_MAX_MB', '10'))
LOG_FILE_BACKUP_COUNT = int(os.getenv('LOG_FILE_BACKUP_COUNT', '5'))


def validate_config():
    """Validate that all required configuration is present"""
    errors = []

    if not API_BASE_URL.startswith(('http://', 'https://')):
        errors.append(f"FURNI_API_BASE_URL must be an http(s) URL: {API_BASE_URL}")

    if API_TIMEOUT <= 0:
        errors.append("FURNI_API_TIMEOUT must be positive")

    if PRINT_DELAY_MS < 0:
        errors.append("PRINT_DELAY_MS must not be negative")

    if LOG_LEVEL.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        errors.append(f"LOG_LEVEL is not a valid logging level: {LOG_LEVEL}")

    if errors:
        raise ValueError("Configuration errors:\n" + "\n".join(errors))

    return True
