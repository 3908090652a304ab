"""
Logger adapter bound to an owning component

Templates use positional placeholders ("User with id {0} retrieved in {1}ms")
and are rendered with str.format before reaching the stdlib logger.
"""

import logging
from typing import Any, Union


class LoggerAdapter:
    """Thin wrapper over logging.Logger that the service layer depends on"""

    def __init__(self, owner: Union[type, str]):
        if isinstance(owner, type):
            name = f"{owner.__module__}.{owner.__qualname__}"
        else:
            name = owner
        self.name = name
        self._logger = logging.getLogger(name)

    def log_information(self, template: str, *args: Any) -> None:
        if self._logger.isEnabledFor(logging.INFO):
            self._logger.info(_render(template, args))

    def log_error(self, exception: BaseException, template: str, *args: Any) -> None:
        self._logger.error(_render(template, args), exc_info=exception)


def _render(template: str, args: tuple) -> str:
    if not args:
        return template
    try:
        return template.format(*args)
    except (IndexError, KeyError, ValueError):
        # Malformed template: keep the raw text and the arguments
        return f"{template} {list(args)}"
