import logging

from servers.config import settings

logging.basicConfig(level=getattr(logging, settings.log_level))
logger = logging.getLogger("netsuite_mcp")
