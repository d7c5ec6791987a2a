"""Bootstrap (composition root) for ROA.

Wires concrete adapters to service-layer handlers: builds the unit of work
from configuration, injects it (with the resource registry and other
dependencies) into the handlers and returns the message bus.

Import rules:
- Entry points get their message bus from *this* package, never by wiring
  adapters themselves.
- Inner layers must not import `roa.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus

__all__ = ["AppContainer", "bootstrap", "build_message_bus"]
