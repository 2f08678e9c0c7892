"""env2tf - generate Terraform variable files from .env files."""

__version__ = "0.1.0"
