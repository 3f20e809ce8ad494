"""This package defines styled border overlays for tabular text."""

import logging

__app_name__ = "gridstyle"
__version__ = "0.1.0"
__strapline__ = "Cell-scoped border colors for text tables"
__license__ = "MIT"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from gridstyle.border_color import BorderColor, InvalidBorderTransition  # noqa: E402
from gridstyle.color import Color  # noqa: E402
from gridstyle.config import ColoredConfig, ConfigValidationError  # noqa: E402
from gridstyle.data_structures import Border, Position  # noqa: E402
from gridstyle.locator import Locator  # noqa: E402
from gridstyle.modify import Modify  # noqa: E402
from gridstyle.table import Table  # noqa: E402

__all__ = [
    "Border",
    "BorderColor",
    "Color",
    "ColoredConfig",
    "ConfigValidationError",
    "InvalidBorderTransition",
    "Locator",
    "Modify",
    "Position",
    "Table",
]
