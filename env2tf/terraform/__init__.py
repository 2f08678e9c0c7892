"""Terraform artifact generation."""

from .emitter import DescriptionFallback, TerraformEmitter

__all__ = [
    "DescriptionFallback",
    "TerraformEmitter",
]
