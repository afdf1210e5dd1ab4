"""Image viewer support: UTF-16 option files, extensions, messages, sizing and wallpaper settings."""

__version__ = "0.9.0"