"""
Padrão Facade: ponto único para cadastrar veículos e executar serviços
"""
import logging
from typing import Dict, List, Optional

from .factory import VehicleFactory, get_default_factory
from .strategy import Capability, Vehicle

logger = logging.getLogger(__name__)


class ServiceCenter:
    """Facade sobre factory e despacho de capacidades"""

    def __init__(self, factory: Optional[VehicleFactory] = None):
        self._factory = factory or get_default_factory()
        self._vehicles: List[Vehicle] = []

    @property
    def vehicles(self) -> List[Vehicle]:
        return list(self._vehicles)

    def register_vehicle(self, name: str, discriminant: str) -> Vehicle:
        """Cria o veículo pela factory e o mantém na lista da oficina"""
        vehicle = self._factory.create(name, discriminant)
        self._vehicles.append(vehicle)
        logger.info("Veículo '%s' cadastrado como %s", name, vehicle.type)
        return vehicle

    def full_service(self, vehicle: Vehicle) -> Dict[str, str]:
        """Executa todas as capacidades atribuídas, na ordem do enum"""
        return {
            capability.value: vehicle.invoke(capability)
            for capability in vehicle.capabilities()
        }

    def service_all(self) -> Dict[str, Dict[str, str]]:
        return {vehicle.name: self.full_service(vehicle) for vehicle in self._vehicles}

    def find(self, name: str) -> Optional[Vehicle]:
        return next((v for v in self._vehicles if v.name == name), None)

    def vehicles_with(self, capability: Capability) -> List[Vehicle]:
        return [v for v in self._vehicles if v.has_capability(capability)]
