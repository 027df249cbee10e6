"""Core configuration, errors and component wiring.

The factory lives in ``i18n_extractor.core.factory``; it is not
re-exported here because the extraction modules import from this
package.
"""

from i18n_extractor.core.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
