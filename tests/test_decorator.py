import pytest

from patternkit.decorator import (
    BigTrouser,
    Component,
    ConcreteComponent,
    ConcreteDecoratorA,
    ConcreteDecoratorB,
    Decorator,
    Finery,
    Person,
    Sneakers,
    Suit,
    TShirt,
    main,
)


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component()


def test_concrete_component_operation(capsys):
    ConcreteComponent().operation()
    assert _lines(capsys) == ["ConcreteComponent Operation()"]


def test_empty_decorator_prints_nothing(capsys):
    Decorator().operation()
    assert capsys.readouterr().out == ""


def test_decorator_chain_order(capsys):
    component = ConcreteComponent()
    first = ConcreteDecoratorA()
    second = ConcreteDecoratorB()
    first.set_component(component)
    second.set_component(first)
    second.operation()
    assert _lines(capsys) == [
        "ConcreteComponent Operation()",
        "ConcreteDecorator_1::New State",
        "ConcreteDecorator_1::Operation()",
        "ConcreteDecorator_2::Operation()",
    ]
    assert first.added_state == "ConcreteDecorator_1::New State"


def test_set_component_replaces(capsys):
    decorator = ConcreteDecoratorB()
    decorator.set_component(ConcreteComponent())
    other = ConcreteComponent()
    decorator.set_component(other)
    assert decorator.component is other


def test_person_default_name(capsys):
    Person().show()
    assert _lines(capsys) == ["Person: unknown"]


def test_person_named(capsys):
    Person("Ann").show()
    assert _lines(capsys) == ["Person: Ann"]


def test_bare_finery_shows_nothing(capsys):
    Finery().show()
    TShirt().show()
    assert _lines(capsys) == ["Wear T-Shirt "]


def test_finery_chain(capsys):
    person = Person("Tom")
    t_shirt = TShirt()
    big_trouser = BigTrouser()
    sneakers = Sneakers()
    suit = Suit()
    t_shirt.decorate(person)
    big_trouser.decorate(t_shirt)
    sneakers.decorate(big_trouser)
    suit.decorate(sneakers)
    suit.show()
    assert _lines(capsys) == [
        "Wear Suit ",
        "Wear Sneakers ",
        "Wear Big Trouser ",
        "Wear T-Shirt ",
        "Person: Tom",
    ]


def test_main_default(capsys):
    assert main([]) == 0
    lines = _lines(capsys)
    assert lines[0] == "Wear Suit "
    assert lines[-1] == "Person: Tom"
    assert len(lines) == 5


def test_main_with_name(capsys):
    assert main(["Ann"]) == 0
    assert _lines(capsys)[-1] == "Person: Ann"