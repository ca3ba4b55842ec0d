import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class AssignmentObserver(ABC):
    @abstractmethod
    def update(self, vehicle, capability, provider):
        pass


class LoggingAssignmentObserver(AssignmentObserver):
    """Registra cada atribuição de provider no log"""

    def __init__(self, log: logging.Logger = None):
        self._logger = log or logger

    def update(self, vehicle, capability, provider):
        self._logger.debug(
            "[%s] %s -> %s", vehicle.name, capability.value, type(provider).__name__
        )


class HistoryAssignmentObserver(AssignmentObserver):
    """Guarda o histórico de atribuições em memória"""

    def __init__(self):
        self.history = []

    def update(self, vehicle, capability, provider):
        self.history.append((vehicle.name, capability, provider))
