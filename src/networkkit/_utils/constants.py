# URL
URL_SCHEME = "https"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Environment variables
ENV_USER_AGENT = "NETWORKKIT_USER_AGENT"
ENV_DEBUG = "NETWORKKIT_DEBUG"

# Logging
LOGGER_NAME = "networkkit"

USER_AGENT_PREFIX = "NetworkKit.Python"
