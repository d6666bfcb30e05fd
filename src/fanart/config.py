import os

# Base URL for the fanart.tv music endpoints
FANART_BASE_URL = os.getenv("FANART_BASE_URL", "https://webservice.fanart.tv/v3/music")

# Request timeout in seconds
REQUEST_TIMEOUT_SECONDS = int(os.getenv("FANART_REQUEST_TIMEOUT_SECONDS", 10))

# Secret name under which the fanart.tv API key is resolved
FANART_SECRET_NAME = "fanarttv"

# Environment variable read by EnvSecretProvider for the fanart.tv key
FANART_API_KEY_ENV = "FANART_API_KEY"

# Optional key server the API keys can be fetched from
KEY_SERVER_URL = os.getenv("FANART_KEY_SERVER_URL")
KEY_SERVER_API_KEY = os.getenv("FANART_KEY_SERVER_API_KEY")
KEY_SERVER_SUBSCRIPTION_KEY = os.getenv("FANART_KEY_SERVER_SUBSCRIPTION_KEY")
