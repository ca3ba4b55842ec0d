"""Testes da cadeia de ingredientes (Decorator)."""

import pytest

from padroes.decorator import (
    Base, Carmel, ChainDescription, Coffee, Decorated, Milk, Sugar,
    apply_ingredients, describe, describe_structured, ingredients, price, wrap,
)


class TestDescribe:
    """Casos de descrição composta."""

    def test_depth_zero_returns_base_description(self):
        """Base sozinha não tem separador no final."""
        assert describe(Base("Coffee")) == "Coffee"

    def test_nested_wraps_render_innermost_first(self):
        chain = wrap(wrap(wrap(Base("Coffee"), "carmel"), "milk"), "sugar")
        assert describe(chain) == "Coffee with carmel with milk with sugar"

    def test_catalogue_classes_match_generic_wrap(self):
        chain = Sugar(Milk(Carmel(Coffee())))
        assert describe(chain) == "Coffee with carmel with milk with sugar"
        assert chain.get_descricao() == "Coffee with carmel with milk with sugar"

    def test_describe_is_idempotent(self):
        chain = wrap(wrap(Base("Tea"), "lemon"), "honey")
        assert describe(chain) == describe(chain)

    def test_inner_node_describes_like_standalone(self):
        inner = wrap(Base("Coffee"), "carmel")
        outer = wrap(wrap(inner, "milk"), "sugar")

        assert describe(outer) == "Coffee with carmel with milk with sugar"
        assert describe(inner) == "Coffee with carmel"
        assert describe(outer.inner.inner) == describe(wrap(Base("Coffee"), "carmel"))

    def test_shared_inner_node_is_not_mutated(self):
        base = Base("Coffee")
        with_milk = wrap(base, "milk")
        with_sugar = wrap(base, "sugar")

        assert describe(with_milk) == "Coffee with milk"
        assert describe(with_sugar) == "Coffee with sugar"
        assert describe(base) == "Coffee"

    def test_n_labels_reconstructed_in_applied_order(self):
        labels = [f"l{i}" for i in range(1, 8)]
        node = Base("B")
        for label in labels:
            node = wrap(node, label)

        assert describe(node) == "B with " + " with ".join(labels)
        assert ingredients(node) == labels

    def test_deep_chain_beyond_recursion_limit(self):
        """Cadeias profundas não estouram a pilha."""
        node = Base("Coffee")
        for _ in range(5000):
            node = wrap(node, "milk")

        text = describe(node)
        assert text.startswith("Coffee with milk")
        assert text.count(" with ") == 5000


class TestWrap:
    """Construção de camadas."""

    def test_wrap_exposes_inner_and_label(self):
        base = Base("Coffee")
        node = wrap(base, "milk")

        assert isinstance(node, Decorated)
        assert node.inner is base
        assert node.ingredient_label == "milk"

    def test_wrap_rejects_non_component(self):
        with pytest.raises(TypeError):
            wrap("Coffee", "milk")

    @pytest.mark.parametrize("label", [42, None, b"milk"])
    def test_wrap_rejects_non_str_label(self, label):
        """O rótulo é validado na construção, não em describe."""
        with pytest.raises(TypeError):
            wrap(Base("Coffee"), label)

    def test_base_rejects_non_str_description(self):
        with pytest.raises(TypeError):
            Base(42)

    def test_nodes_have_no_instance_dict(self):
        node = wrap(Base("Coffee"), "milk")
        with pytest.raises(AttributeError):
            node.extra = "x"


class TestPriceAndStructure:
    """Preço acumulado e descrição estruturada."""

    def test_price_accumulates_every_layer(self):
        chain = Sugar(Milk(Carmel(Coffee())))
        assert price(chain) == pytest.approx(2.90)
        assert chain.get_preco() == pytest.approx(2.90)

    def test_generic_layer_defaults_to_zero_price(self):
        assert price(wrap(Base("Coffee", 1.5), "ice")) == pytest.approx(1.5)

    def test_describe_structured(self):
        chain = Milk(Carmel(Coffee()))
        result = describe_structured(chain)

        assert isinstance(result, ChainDescription)
        assert result.base == "Coffee"
        assert result.ingredients == ["carmel", "milk"]
        assert result.text == "Coffee with carmel with milk"
        assert result.price == pytest.approx(2.80)

    def test_describe_structured_agrees_with_single_queries(self):
        chain = wrap(Sugar(Milk(Carmel(Coffee()))), "ice", 0.25)
        result = describe_structured(chain)

        assert result.text == describe(chain)
        assert result.ingredients == ingredients(chain)
        assert result.price == pytest.approx(price(chain))

    def test_describe_structured_depth_zero(self):
        result = describe_structured(Base("Coffee"))
        assert result.ingredients == []
        assert result.text == "Coffee"


class TestApplyIngredients:
    """Aplicação de ingredientes por nome."""

    def test_known_labels_use_catalogue_classes(self):
        node = apply_ingredients(Coffee(), ["carmel", "Milk ", "sugar"])

        assert isinstance(node, Sugar)
        assert isinstance(node.inner, Milk)
        assert describe(node) == "Coffee with carmel with milk with sugar"

    def test_unknown_label_becomes_generic_layer(self):
        node = apply_ingredients(Coffee(), ["cinnamon"])

        assert type(node) is Decorated
        assert describe(node) == "Coffee with cinnamon"

    def test_empty_labels_returns_same_node(self):
        coffee = Coffee()
        assert apply_ingredients(coffee, []) is coffee
