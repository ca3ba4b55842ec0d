"""
Exceções da biblioteca de padrões
"""
from typing import Iterable, Optional


class PadroesError(Exception):
    """Erro base da biblioteca"""


class CapabilityNotAssigned(PadroesError):
    """Capacidade invocada sem provider atribuído à entidade"""

    def __init__(self, entity_name: str, capability):
        self.entity_name = entity_name
        self.capability = capability
        nome = getattr(capability, "value", capability)
        super().__init__(
            f"Veículo '{entity_name}' não tem provider atribuído para '{nome}'"
        )


class UnknownDiscriminant(PadroesError):
    """Discriminante fora do conjunto reconhecido pela factory"""

    def __init__(self, discriminant: str, known: Optional[Iterable[str]] = None):
        self.discriminant = discriminant
        self.known = sorted(known) if known else []
        message = f"Tipo desconhecido '{discriminant}'"
        if self.known:
            message += f" (esperado um de: {', '.join(self.known)})"
        super().__init__(message)
