"""
Padrão Strategy generalizado: despacho de capacidades por tipo de veículo

Cada veículo guarda no máximo um provider por capacidade. A chamada é
encaminhada ao provider atribuído, sem if/elif por tipo no ponto de uso.
"""
import enum
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

from .exceptions import CapabilityNotAssigned


class Capability(enum.Enum):
    TIRE_SERVICE = "tire_service"
    TRANSPORT_SERVICE = "transport_service"
    REPAIR_SERVICE = "repair_service"


# Interfaces Strategy

class TireService(ABC):
    """Interface Strategy para troca de pneus"""

    @abstractmethod
    def replace_tires(self) -> str:
        pass

    def replace_tires_for(self, vehicle):
        """Forma com o veículo como argumento; no-op por padrão"""
        return None


class TransportService(ABC):
    """Interface Strategy para transporte"""

    @abstractmethod
    def transport(self) -> str:
        pass

    def transport_for(self, vehicle):
        return None


class RepairService(ABC):
    """Interface Strategy para reparo"""

    @abstractmethod
    def repair(self) -> str:
        pass

    def repair_for(self, vehicle):
        return None


# capacidade -> (interface, nome da operação)
CAPABILITY_OPERATIONS: Dict[Capability, Tuple[type, str]] = {
    Capability.TIRE_SERVICE: (TireService, "replace_tires"),
    Capability.TRANSPORT_SERVICE: (TransportService, "transport"),
    Capability.REPAIR_SERVICE: (RepairService, "repair"),
}


def get_operation_name(capability: Capability) -> str:
    """Retorna o nome do método que implementa a capacidade"""
    return CAPABILITY_OPERATIONS[Capability(capability)][1]


# Strategies concretas

class TruckTireProvider(TireService):
    def replace_tires(self) -> str:
        return "Replace tires in the truck"

    def replace_tires_for(self, vehicle) -> str:
        return f"Replace tires in the truck '{vehicle.name}'"


class CarTireProvider(TireService):
    def replace_tires(self) -> str:
        return "Replace tires in the car"

    def replace_tires_for(self, vehicle) -> str:
        return f"Replace tires in the car '{vehicle.name}'"


class BusTireProvider(TireService):
    def replace_tires(self) -> str:
        return "Replace tires in the bus"

    def replace_tires_for(self, vehicle) -> str:
        return f"Replace tires in the bus '{vehicle.name}'"


class TruckTransportProvider(TransportService):
    def transport(self) -> str:
        return "Transport heavy cargo with the truck"


class CarTransportProvider(TransportService):
    def transport(self) -> str:
        return "Transport up to 5 passengers with the car"


class BusTransportProvider(TransportService):
    def transport(self) -> str:
        return "Transport up to 50 passengers with the bus"


class TruckRepairProvider(RepairService):
    def repair(self) -> str:
        return "Repair the truck at a heavy vehicle workshop"


class CarRepairProvider(RepairService):
    def repair(self) -> str:
        return "Repair the car at a car workshop"


class BusRepairProvider(RepairService):
    def repair(self) -> str:
        return "Repair the bus at a bus garage"


class Vehicle:
    """Contexto do padrão Strategy (entidade tipada)

    Os providers são trocados sob lock; ``invoke`` lê o provider sob o lock
    e executa a chamada fora dele.
    """

    def __init__(self, name: str, vehicle_type: str):
        self._name = name
        self._type = vehicle_type
        self._providers: Dict[Capability, object] = {}
        self._observers: List = []
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> str:
        return self._type

    def __repr__(self) -> str:
        return f"Vehicle(name={self._name!r}, type={self._type!r})"

    # Observers de atribuição

    def add_observer(self, observer):
        self._observers.append(observer)

    def remove_observer(self, observer):
        self._observers.remove(observer)

    def _notify_observers(self, capability: Capability, provider):
        for observer in list(self._observers):
            observer.update(self, capability, provider)

    # Atribuição

    def assign(self, capability: Capability, provider):
        """Define o provider da capacidade, sobrescrevendo o anterior"""
        capability = Capability(capability)
        operation = get_operation_name(capability)
        if not callable(getattr(provider, operation, None)):
            raise TypeError(
                f"{type(provider).__name__} não implementa '{operation}' "
                f"exigido por {capability.value}"
            )

        with self._lock:
            self._providers[capability] = provider

        self._notify_observers(capability, provider)

    def unassign(self, capability: Capability):
        """Remove o provider atribuído à capacidade"""
        capability = Capability(capability)
        with self._lock:
            if capability not in self._providers:
                raise CapabilityNotAssigned(self._name, capability)
            del self._providers[capability]

    def get_provider(self, capability: Capability):
        capability = Capability(capability)
        with self._lock:
            provider = self._providers.get(capability)
        if provider is None:
            raise CapabilityNotAssigned(self._name, capability)
        return provider

    def has_capability(self, capability: Capability) -> bool:
        with self._lock:
            return Capability(capability) in self._providers

    def capabilities(self) -> List[Capability]:
        """Capacidades atribuídas, na ordem do enum"""
        with self._lock:
            return [c for c in Capability if c in self._providers]

    # Despacho

    def invoke(self, capability: Capability, *args, **kwargs):
        """Encaminha a chamada ao provider e devolve o resultado sem alteração"""
        capability = Capability(capability)
        provider = self.get_provider(capability)
        return getattr(provider, get_operation_name(capability))(*args, **kwargs)

    def invoke_with_entity(self, capability: Capability, *args, **kwargs):
        """Encaminha a chamada passando o próprio veículo ao provider

        Providers sem a forma ``<operação>_for`` respondem com no-op (None).
        """
        capability = Capability(capability)
        provider = self.get_provider(capability)
        method = getattr(provider, get_operation_name(capability) + "_for", None)
        if method is None:
            return None
        return method(self, *args, **kwargs)


def assign(entity: Vehicle, capability_kind: Capability, provider):
    """Associa um provider à entidade para uma capacidade"""
    entity.assign(capability_kind, provider)


def invoke(entity: Vehicle, capability_kind: Capability, *args, **kwargs):
    """Executa a capacidade na entidade; CapabilityNotAssigned se não houver provider"""
    return entity.invoke(capability_kind, *args, **kwargs)


def invoke_with_entity(entity: Vehicle, capability_kind: Capability, *args, **kwargs):
    return entity.invoke_with_entity(capability_kind, *args, **kwargs)
