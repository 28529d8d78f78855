# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - TYPE GENERATION
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the type generator.
"""

from core.config.defaults import (
    ConfigurationError,
    CaseStyle,
    GeneratorOptions,
    PrinterOptions,
    ENV_PREFIX,
)

__all__ = [
    "ConfigurationError",
    "CaseStyle",
    "GeneratorOptions",
    "PrinterOptions",
    "ENV_PREFIX",
]
