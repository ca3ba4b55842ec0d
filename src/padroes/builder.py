"""
Padrão Builder para montar veículos passo a passo
"""
from typing import Dict, Optional

from .factory import get_default_factory
from .strategy import Capability, Vehicle


class VehicleBuilder:
    """Builder fluente de Vehicle"""

    def __init__(self):
        self._name: Optional[str] = None
        self._type: Optional[str] = None
        self._providers: Dict[Capability, object] = {}
        self._observers = []
        self._use_defaults = False
        self._factory = None

    def named(self, name: str) -> "VehicleBuilder":
        self._name = name
        return self

    def of_type(self, vehicle_type: str) -> "VehicleBuilder":
        self._type = vehicle_type
        return self

    def with_capability(self, capability: Capability, provider) -> "VehicleBuilder":
        """Atribuição explícita; tem precedência sobre as padrão"""
        self._providers[Capability(capability)] = provider
        return self

    def with_default_capabilities(self, factory=None) -> "VehicleBuilder":
        """Usa os providers registrados para o tipo na factory"""
        self._use_defaults = True
        self._factory = factory
        return self

    def with_observer(self, observer) -> "VehicleBuilder":
        self._observers.append(observer)
        return self

    def build(self) -> Vehicle:
        if not self._name:
            raise ValueError("Nome do veículo é obrigatório")
        if not self._type:
            raise ValueError("Tipo do veículo é obrigatório")

        providers: Dict[Capability, object] = {}
        if self._use_defaults:
            factory = self._factory or get_default_factory()
            providers.update(factory.providers_for(self._type))
        providers.update(self._providers)

        vehicle = Vehicle(self._name, self._type.strip().lower())
        for observer in self._observers:
            vehicle.add_observer(observer)
        for capability in Capability:
            if capability in providers:
                vehicle.assign(capability, providers[capability])
        return vehicle
