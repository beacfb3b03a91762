import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DASHBOARD_ADDR = "localhost:18087"
DEFAULT_CONFIG_FILE = "config.ini"
DEFAULT_HTTP_TIMEOUT = 30.0

CODIS_DASHBOARD_ADDR = os.environ.get("CODIS_DASHBOARD_ADDR")
CODIS_CONFIG_FILE = os.environ.get("CODIS_CONFIG_FILE", DEFAULT_CONFIG_FILE)
CODIS_HTTP_TIMEOUT = os.environ.get("CODIS_HTTP_TIMEOUT")
