from eventhub.lib.events import EventHub
from eventhub.lib.get_platform import get_platform
from eventhub.lib.logger import setup_logging
from eventhub.lib.preference_manager import HubPreferences
from eventhub.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    EventHub.__name__,
    HubPreferences.__name__,
    get_platform.__name__,
    setup_logging.__name__,
]
