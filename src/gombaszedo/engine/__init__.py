"""Qt worker bridge running path generation off the UI thread."""

from gombaszedo.engine.qt_bridge import GeneratorWorker

__all__ = ["GeneratorWorker"]
