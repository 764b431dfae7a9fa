"""Routing configuration.

RoutingConfig is a frozen dataclass, immutable after creation and passed to
every entry point that accepts ``config=``.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RoutingConfig:
    """Routing configuration. Immutable after creation.

    Defaults keep the permissive behavior: any string is a route template.
    Override what you need::

        config = RoutingConfig(strict=True)
    """

    # Validate templates eagerly, raising InvalidRouteError on malformed input
    strict: bool = False

    # Percent-decode extracted parameter values
    decode_params: bool = True


DEFAULT_CONFIG = RoutingConfig()
