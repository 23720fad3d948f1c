from pyemitter.lib.events import EventEmitter, Listener, Registry
from pyemitter.lib.logger import configure_logger
from pyemitter.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    "Registry",
    EventEmitter.__name__,
    Listener.__name__,
    configure_logger.__name__,
]
