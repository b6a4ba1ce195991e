import os

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Application Constants
APPLICATION_NAME = os.getenv("DIRECTUS_PAGES_APPLICATION_NAME", "directus-pages")
APP_HOST = str(os.getenv("DIRECTUS_PAGES_HTTP_HOST", "localhost"))
APP_PORT = int(os.getenv("DIRECTUS_PAGES_HTTP_PORT", "8000"))

# Directus Constants
DEFAULT_DIRECTUS_URL = "http://localhost:8055"

# Rendering Constants
DATE_LOCALE = os.getenv("DIRECTUS_PAGES_DATE_LOCALE", "en-US")
TEMPLATES_PATH = os.path.join(os.path.dirname(__file__), "templates")
STATIC_ASSETS_PATH = os.path.join(os.path.dirname(__file__), "static")

# Static Build Constants
SSG_EXPORT_PATH = os.getenv("DIRECTUS_PAGES_SSG_EXPORT_PATH", "dist")
SSG_BUILD_ON_STARTUP: bool = (
    os.getenv("DIRECTUS_PAGES_SSG_BUILD_ON_STARTUP", "true").lower() == "true"
)

# Logger Constants
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
