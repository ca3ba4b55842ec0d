"""
Padrões GoF: despacho de capacidades (Strategy) e cadeia de ingredientes (Decorator)
"""
from .exceptions import PadroesError, CapabilityNotAssigned, UnknownDiscriminant
from .config import configure_logging
from .strategy import (
    Capability, TireService, TransportService, RepairService, Vehicle,
    TruckTireProvider, CarTireProvider, BusTireProvider,
    TruckTransportProvider, CarTransportProvider, BusTransportProvider,
    TruckRepairProvider, CarRepairProvider, BusRepairProvider,
    assign, invoke, invoke_with_entity,
)
from .decorator import (
    ChainDescription, Component, Base, Decorated,
    Coffee, Carmel, Milk, Sugar,
    wrap, describe, describe_structured, ingredients, price, apply_ingredients,
)
from .factory import ProviderFactory, VehicleFactory, get_default_factory, reset_default_factory
from .builder import VehicleBuilder
from .observer import AssignmentObserver, LoggingAssignmentObserver, HistoryAssignmentObserver
from .facade import ServiceCenter

__all__ = [
    # Erros
    'PadroesError',
    'CapabilityNotAssigned',
    'UnknownDiscriminant',
    'configure_logging',

    # Strategy Pattern
    'Capability',
    'TireService',
    'TransportService',
    'RepairService',
    'Vehicle',
    'TruckTireProvider',
    'CarTireProvider',
    'BusTireProvider',
    'TruckTransportProvider',
    'CarTransportProvider',
    'BusTransportProvider',
    'TruckRepairProvider',
    'CarRepairProvider',
    'BusRepairProvider',
    'assign',
    'invoke',
    'invoke_with_entity',

    # Decorator Pattern
    'ChainDescription',
    'Component',
    'Base',
    'Decorated',
    'Coffee',
    'Carmel',
    'Milk',
    'Sugar',
    'wrap',
    'describe',
    'describe_structured',
    'ingredients',
    'price',
    'apply_ingredients',

    # Static Factory / Singleton
    'ProviderFactory',
    'VehicleFactory',
    'get_default_factory',
    'reset_default_factory',

    # Builder Pattern
    'VehicleBuilder',

    # Observer Pattern
    'AssignmentObserver',
    'LoggingAssignmentObserver',
    'HistoryAssignmentObserver',

    # Facade Pattern
    'ServiceCenter',
]
