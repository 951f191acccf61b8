"""smartfridge - Inventory tracking and low-stock reporting for a smart fridge."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("smartfridge")
except PackageNotFoundError:
    __version__ = "0+local"
from smartfridge.config import DuplicatePolicy, FridgeConfig
from smartfridge.exceptions import FridgeConfigError, FridgeError, InvalidArgumentError
from smartfridge.manager import FridgeManager
from smartfridge.models import Item, ReportEntry
from smartfridge.repository import InventoryRepository
from smartfridge.state.events import InventoryEvent, ItemAdded, ItemRemoved
from smartfridge.state.group import TypeGroup
from smartfridge.state.store import InventoryStore

__all__ = [
    "__version__",
    "DuplicatePolicy",
    "FridgeConfig",
    "FridgeConfigError",
    "FridgeError",
    "FridgeManager",
    "InvalidArgumentError",
    "InventoryEvent",
    "InventoryRepository",
    "InventoryStore",
    "Item",
    "ItemAdded",
    "ItemRemoved",
    "ReportEntry",
    "TypeGroup",
]
