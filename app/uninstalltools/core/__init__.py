"""Core configuration, paths and theming for uninstalltools."""
