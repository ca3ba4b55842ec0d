"""
Padrões Static Factory e Singleton para providers e veículos
"""
import logging
import threading
from typing import Dict, List, Optional, Type

from .config import get_default_discriminants
from .exceptions import UnknownDiscriminant
from .strategy import (
    Capability, Vehicle,
    TruckTireProvider, CarTireProvider, BusTireProvider,
    TruckTransportProvider, CarTransportProvider, BusTransportProvider,
    TruckRepairProvider, CarRepairProvider, BusRepairProvider,
)

logger = logging.getLogger(__name__)


# tipo -> capacidade -> classe do provider
BUILTIN_PROVIDERS: Dict[str, Dict[Capability, Type]] = {
    "truck": {
        Capability.TIRE_SERVICE: TruckTireProvider,
        Capability.TRANSPORT_SERVICE: TruckTransportProvider,
        Capability.REPAIR_SERVICE: TruckRepairProvider,
    },
    "car": {
        Capability.TIRE_SERVICE: CarTireProvider,
        Capability.TRANSPORT_SERVICE: CarTransportProvider,
        Capability.REPAIR_SERVICE: CarRepairProvider,
    },
    "bus": {
        Capability.TIRE_SERVICE: BusTireProvider,
        Capability.TRANSPORT_SERVICE: BusTransportProvider,
        Capability.REPAIR_SERVICE: BusRepairProvider,
    },
}


def _normalize(discriminant: str) -> str:
    return discriminant.strip().lower()


class ProviderFactory:
    """Static factory: tipo + capacidade -> provider concreto"""

    @staticmethod
    def create(discriminant: str, capability: Capability):
        """Cria o provider da capacidade para o tipo informado"""
        providers = BUILTIN_PROVIDERS.get(_normalize(discriminant))
        if providers is None:
            raise UnknownDiscriminant(discriminant, BUILTIN_PROVIDERS.keys())
        return providers[Capability(capability)]()


class VehicleFactory:
    """Factory para criar veículos com as capacidades já resolvidas"""

    def __init__(self, discriminants: Optional[List[str]] = None):
        self._providers: Dict[str, Dict[Capability, object]] = {}
        enabled = None
        if discriminants:
            enabled = [_normalize(d) for d in discriminants]
            for original, key in zip(discriminants, enabled):
                if key not in BUILTIN_PROVIDERS:
                    raise UnknownDiscriminant(original, BUILTIN_PROVIDERS.keys())

        for discriminant, classes in BUILTIN_PROVIDERS.items():
            if enabled and discriminant not in enabled:
                continue
            # providers não têm estado: uma instância por tipo é compartilhada
            self._providers[discriminant] = {
                capability: provider_class()
                for capability, provider_class in classes.items()
            }

    def register(self, discriminant: str, providers: Dict[Capability, object]):
        """Registra (ou substitui) um tipo de veículo"""
        key = _normalize(discriminant)
        self._providers[key] = {
            Capability(capability): provider
            for capability, provider in providers.items()
        }
        logger.debug("Tipo de veículo '%s' registrado com %d capacidades", key, len(providers))

    def discriminants(self) -> List[str]:
        """Retorna os tipos disponíveis"""
        return list(self._providers.keys())

    def providers_for(self, discriminant: str) -> Dict[Capability, object]:
        providers = self._providers.get(_normalize(discriminant))
        if providers is None:
            raise UnknownDiscriminant(discriminant, self._providers.keys())
        return dict(providers)

    def create(self, name: str, discriminant: str) -> Vehicle:
        """Cria o veículo e atribui todos os providers do tipo"""
        providers = self.providers_for(discriminant)
        vehicle = Vehicle(name, _normalize(discriminant))
        for capability, provider in providers.items():
            vehicle.assign(capability, provider)
        return vehicle


_default_factory: Optional[VehicleFactory] = None
_default_factory_lock = threading.Lock()


def get_default_factory() -> VehicleFactory:
    """Retorna a factory padrão do processo, criada uma única vez"""
    global _default_factory
    if _default_factory is None:
        with _default_factory_lock:
            if _default_factory is None:
                discriminants = get_default_discriminants() or None
                _default_factory = VehicleFactory(discriminants)
                logger.info(
                    "Factory padrão inicializada com os tipos: %s",
                    ", ".join(_default_factory.discriminants()),
                )
    return _default_factory


def reset_default_factory():
    """Descarta a factory padrão (usado nos testes)"""
    global _default_factory
    with _default_factory_lock:
        _default_factory = None
