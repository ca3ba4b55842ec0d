"""
Padrão Decorator generalizado: cadeia de ingredientes sobre uma base

A cadeia é uma lista ligada imutável de dois tipos de nó, Base e Decorated.
A descrição é montada da base para fora, então os rótulos mais internos
aparecem primeiro no texto.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List

from pydantic import BaseModel

SEPARATOR = " with "


class ChainDescription(BaseModel):
    """Forma estruturada da descrição de uma cadeia"""
    base: str
    ingredients: List[str]
    text: str
    price: float


class Component(ABC):
    """Interface Component do padrão Decorator"""

    __slots__ = ()

    @abstractmethod
    def get_descricao(self) -> str:
        pass

    @abstractmethod
    def get_preco(self) -> float:
        pass


class Base(Component):
    """Nó mais interno da cadeia"""

    __slots__ = ("_description", "_price")

    def __init__(self, description: str, price: float = 0.0):
        if not isinstance(description, str):
            raise TypeError(
                f"Descrição da base deve ser str, recebido {type(description).__name__}"
            )
        self._description = description
        self._price = price

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> float:
        return self._price

    def get_descricao(self) -> str:
        return self._description

    def get_preco(self) -> float:
        return self._price

    def __repr__(self) -> str:
        return f"Base({self._description!r})"


class Decorated(Component):
    """Camada que contribui com um único ingrediente"""

    __slots__ = ("_inner", "_ingredient_label", "_price")

    def __init__(self, inner: Component, ingredient_label: str, price: float = 0.0):
        if not isinstance(inner, Component):
            raise TypeError(
                f"Não é possível decorar {type(inner).__name__}: esperado um componente da cadeia"
            )
        if not isinstance(ingredient_label, str):
            raise TypeError(
                f"Rótulo do ingrediente deve ser str, recebido {type(ingredient_label).__name__}"
            )
        self._inner = inner
        self._ingredient_label = ingredient_label
        self._price = price

    @property
    def inner(self) -> Component:
        return self._inner

    @property
    def ingredient_label(self) -> str:
        return self._ingredient_label

    @property
    def price(self) -> float:
        return self._price

    def get_descricao(self) -> str:
        return describe(self)

    def get_preco(self) -> float:
        return price(self)

    def __repr__(self) -> str:
        return f"Decorated({self._inner!r}, {self._ingredient_label!r})"


# Catálogo concreto

class Coffee(Base):
    __slots__ = ()

    def __init__(self, description: str = "Coffee", price: float = 2.00):
        super().__init__(description, price)


class Carmel(Decorated):
    __slots__ = ()

    def __init__(self, inner: Component, price: float = 0.50):
        super().__init__(inner, "carmel", price)


class Milk(Decorated):
    __slots__ = ()

    def __init__(self, inner: Component, price: float = 0.30):
        super().__init__(inner, "milk", price)


class Sugar(Decorated):
    __slots__ = ()

    def __init__(self, inner: Component, price: float = 0.10):
        super().__init__(inner, "sugar", price)


INGREDIENTS = {
    "carmel": Carmel,
    "milk": Milk,
    "sugar": Sugar,
}


def _unwrap(node: Component):
    """Percorre a cadeia; retorna o nó terminal e as camadas de fora para dentro"""
    layers = []
    current = node
    while isinstance(current, Decorated):
        layers.append(current)
        current = current.inner
    return current, layers


def wrap(inner: Component, ingredient_label: str, price: float = 0.0) -> Decorated:
    """Cria uma nova camada sobre ``inner``"""
    return Decorated(inner, ingredient_label, price)


def ingredients(node: Component) -> List[str]:
    """Rótulos da cadeia, do mais interno para o mais externo"""
    _, layers = _unwrap(node)
    return [layer.ingredient_label for layer in reversed(layers)]


def describe(node: Component) -> str:
    """Descrição composta: base seguida dos ingredientes"""
    terminal, layers = _unwrap(node)
    parts = [terminal.get_descricao()]
    parts.extend(layer.ingredient_label for layer in reversed(layers))
    return SEPARATOR.join(parts)


def price(node: Component) -> float:
    """Preço da base somado ao de cada camada"""
    terminal, layers = _unwrap(node)
    return terminal.get_preco() + sum(layer.price for layer in layers)


def describe_structured(node: Component) -> ChainDescription:
    terminal, layers = _unwrap(node)
    base = terminal.get_descricao()
    labels = [layer.ingredient_label for layer in reversed(layers)]
    return ChainDescription(
        base=base,
        ingredients=labels,
        text=SEPARATOR.join([base] + labels),
        price=terminal.get_preco() + sum(layer.price for layer in layers),
    )


def apply_ingredients(node: Component, labels: Iterable[str]) -> Component:
    """Aplica os ingredientes na ordem dada

    Rótulos conhecidos usam a classe do catálogo; os demais viram uma
    camada genérica com o próprio rótulo.
    """
    for label in labels:
        decorator_class = INGREDIENTS.get(label.strip().lower())
        if decorator_class:
            node = decorator_class(node)
        else:
            node = Decorated(node, label)
    return node
