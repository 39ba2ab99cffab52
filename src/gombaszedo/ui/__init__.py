"""PyQt6 user interface: board window, settings dialog and locales."""
