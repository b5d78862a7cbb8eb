"""Yes/no confirmation asked before following a page or opening an ad"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from olx_crawler.config.core import config
from olx_crawler.utils import logger


class Prompter(ABC):
    """Decides whether a costly crawl step should go ahead."""

    @abstractmethod
    def confirm(self, question: str) -> bool:
        ...


class ConsolePrompter(Prompter):
    """
    Asks the operator on the console.

    An empty answer or exactly ``y`` means yes, anything else means no.
    In automatic mode nothing is read and every question is answered yes.
    """

    SUFFIX = " y/n(default y)"

    def __init__(
        self,
        automatic: Optional[bool] = None,
        input_func: Callable[[str], str] = input,
    ):
        self._automatic = config.automatic if automatic is None else automatic
        self._input = input_func

    def __repr__(self):
        return f"ConsolePrompter(automatic={self._automatic})"

    @property
    def automatic(self) -> bool:
        return self._automatic

    def confirm(self, question: str) -> bool:
        if self._automatic:
            logger.info(f"{question} y (automatic)")
            return True

        answer = self._input(question + self.SUFFIX)
        return not answer or answer == "y"
