"""
Server Configuration - Single Source of Truth

All server parameters defined here. Do not duplicate elsewhere.
"""

import os
from pathlib import Path

from models import Router

# Package root (where this file lives)
_PACKAGE_ROOT = Path(__file__).parent

# Name and version announced during the MCP handshake
SERVER_NAME = 'react-native-expo-mcp'
SERVER_VERSION = '2.0.0'

# Packaged markdown catalog (patterns, setup steps, practices, templates)
CONTENT_DIR = _PACKAGE_ROOT / 'content' / 'data'

# Router used when a tool call doesn't name one
DEFAULT_ROUTER = Router.EXPO_ROUTER

# Log level for the stderr handler (DEBUG logs every tool call)
LOG_LEVEL = os.environ.get('EXPO_MCP_LOG_LEVEL', 'INFO')

# Resource URI scheme for self-documenting resources
RESOURCE_SCHEME = 'expo'
