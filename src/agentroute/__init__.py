"""agentroute: route coding requests to specialist agents and resolve their models."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("agentroute")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
