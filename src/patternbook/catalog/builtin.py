# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Built-in design pattern definitions."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from textwrap import dedent
from typing import Final

from .model_catalog import PatternCatalog


def _definition(
    category: str,
    name: str,
    description: str,
    snippet: str,
    expected_output: tuple[str, ...] = (),
) -> Mapping[str, object]:
    return {
        "category": category,
        "name": name,
        "description": description,
        "snippet": dedent(snippet).strip("\n"),
        "expectedOutput": list(expected_output),
    }


# ============================================================
# CREATIONAL
# ============================================================

_CREATIONAL: Final[tuple[Mapping[str, object], ...]] = (
    _definition(
        "Creational",
        "Singleton",
        "Ensure a class has only one instance and provide a global point of access to it.",
        """
        class Config:
            _instance = None

            def __new__(cls):
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                return cls._instance


        print(Config() is Config())
        """,
        ("True",),
    ),
    _definition(
        "Creational",
        "Factory Method",
        "Define an interface for creating an object but let subclasses decide which class to instantiate.",
        """
        class Car:
            def describe(self):
                return "car with 4 doors"


        class Truck:
            def describe(self):
                return "truck with 2 doors"


        def vehicle_factory(kind):
            return {"car": Car, "truck": Truck}[kind]()


        print(vehicle_factory("car").describe())
        print(vehicle_factory("truck").describe())
        """,
        ("car with 4 doors", "truck with 2 doors"),
    ),
    _definition(
        "Creational",
        "Abstract Factory",
        "Provide an interface for creating families of related objects without specifying their concrete classes.",
        """
        class LightTheme:
            def button(self):
                return "light button"

            def checkbox(self):
                return "light checkbox"


        class DarkTheme:
            def button(self):
                return "dark button"

            def checkbox(self):
                return "dark checkbox"


        def render(theme):
            print(theme.button(), "+", theme.checkbox())


        render(LightTheme())
        render(DarkTheme())
        """,
        ("light button + light checkbox", "dark button + dark checkbox"),
    ),
    _definition(
        "Creational",
        "Builder",
        "Separate the construction of a complex object from its representation so the same process can build different representations.",
        """
        class RequestBuilder:
            def __init__(self):
                self._parts = []

            def method(self, verb):
                self._parts.append(verb)
                return self

            def path(self, path):
                self._parts.append(path)
                return self

            def build(self):
                return " ".join(self._parts)


        print(RequestBuilder().method("GET").path("/users").build())
        """,
        ("GET /users",),
    ),
    _definition(
        "Creational",
        "Prototype",
        "Create new objects by copying an existing instance that serves as a prototype.",
        """
        import copy


        class Sheep:
            def __init__(self, name):
                self.name = name


        original = Sheep("Dolly")
        clone = copy.deepcopy(original)
        clone.name = "Dolly II"
        """,
    ),
)


# ============================================================
# STRUCTURAL
# ============================================================

_STRUCTURAL: Final[tuple[Mapping[str, object], ...]] = (
    _definition(
        "Structural",
        "Adapter",
        "Convert the interface of a class into another interface that clients expect.",
        """
        class LegacyPrinter:
            def print_text(self, text):
                print(f"legacy: {text}")


        class PrinterAdapter:
            def __init__(self, legacy):
                self._legacy = legacy

            def write(self, text):
                self._legacy.print_text(text)


        PrinterAdapter(LegacyPrinter()).write("hello")
        """,
        ("legacy: hello",),
    ),
    _definition(
        "Structural",
        "Bridge",
        "Decouple an abstraction from its implementation so that the two can vary independently.",
        """
        class Renderer:
            def circle(self, radius): ...


        class Shape:
            def __init__(self, renderer):
                self.renderer = renderer


        class Circle(Shape):
            def __init__(self, renderer, radius):
                super().__init__(renderer)
                self.radius = radius

            def draw(self):
                self.renderer.circle(self.radius)
        """,
    ),
    _definition(
        "Structural",
        "Composite",
        "Compose objects into tree structures and let clients treat individual objects and compositions uniformly.",
        """
        class File:
            def __init__(self, size):
                self.size = size

            def total(self):
                return self.size


        class Folder:
            def __init__(self, *children):
                self.children = children

            def total(self):
                return sum(child.total() for child in self.children)


        print(Folder(File(10), Folder(File(5), File(7))).total())
        """,
        ("22",),
    ),
    _definition(
        "Structural",
        "Decorator",
        "Attach additional responsibilities to an object dynamically without changing its class.",
        """
        class Coffee:
            def cost(self):
                return 5


        class WithMilk:
            def __init__(self, drink):
                self._drink = drink

            def cost(self):
                return self._drink.cost() + 2


        print(Coffee().cost())
        print(WithMilk(Coffee()).cost())
        """,
        ("5", "7"),
    ),
    _definition(
        "Structural",
        "Facade",
        "Provide a unified, simplified interface to a set of interfaces in a subsystem.",
        """
        class Cpu:
            def boot(self):
                print("cpu: boot")


        class Disk:
            def load(self):
                print("disk: load")


        class Computer:
            def start(self):
                Cpu().boot()
                Disk().load()


        Computer().start()
        """,
        ("cpu: boot", "disk: load"),
    ),
    _definition(
        "Structural",
        "Proxy",
        "Provide a surrogate or placeholder for another object to control access to it.",
        """
        class Image:
            def __init__(self, path):
                print(f"loading {path}")
                self.path = path


        class LazyImage:
            def __init__(self, path):
                self.path = path
                self._image = None

            def show(self):
                if self._image is None:
                    self._image = Image(self.path)
                print(f"showing {self.path}")


        image = LazyImage("cat.png")
        image.show()
        image.show()
        """,
        ("loading cat.png", "showing cat.png", "showing cat.png"),
    ),
)


# ============================================================
# BEHAVIORAL
# ============================================================

_BEHAVIORAL: Final[tuple[Mapping[str, object], ...]] = (
    _definition(
        "Behavioral",
        "Observer",
        "Define a one-to-many dependency so that when one object changes state, its dependents are notified.",
        """
        class Subject:
            def __init__(self):
                self._observers = []

            def subscribe(self, callback):
                self._observers.append(callback)

            def notify(self, message):
                for callback in self._observers:
                    callback(message)


        subject = Subject()
        subject.subscribe(lambda message: print(f"first got {message}"))
        subject.subscribe(lambda message: print(f"second got {message}"))
        subject.notify("update")
        """,
        ("first got update", "second got update"),
    ),
    _definition(
        "Behavioral",
        "Strategy",
        "Define a family of interchangeable algorithms and select one at runtime.",
        """
        def add(a, b):
            return a + b


        def multiply(a, b):
            return a * b


        class Calculator:
            def __init__(self, strategy):
                self.strategy = strategy

            def run(self, a, b):
                return self.strategy(a, b)


        print(Calculator(add).run(3, 4))
        print(Calculator(multiply).run(3, 4))
        """,
        ("7", "12"),
    ),
    _definition(
        "Behavioral",
        "Command",
        "Encapsulate a request as an object so it can be queued, logged, or undone.",
        """
        class Light:
            def on(self):
                print("light on")

            def off(self):
                print("light off")


        class Switch:
            def __init__(self):
                self.history = []

            def execute(self, command):
                self.history.append(command)
                command()


        light = Light()
        switch = Switch()
        switch.execute(light.on)
        switch.execute(light.off)
        """,
        ("light on", "light off"),
    ),
    _definition(
        "Behavioral",
        "Iterator",
        "Provide a way to access the elements of a collection sequentially without exposing its representation.",
        """
        class Countdown:
            def __init__(self, start):
                self.start = start

            def __iter__(self):
                current = self.start
                while current > 0:
                    yield current
                    current -= 1


        for value in Countdown(3):
            print(value)
        """,
        ("3", "2", "1"),
    ),
    _definition(
        "Behavioral",
        "State",
        "Allow an object to alter its behavior when its internal state changes.",
        """
        class TrafficLight:
            transitions = {"green": "yellow", "yellow": "red", "red": "green"}

            def __init__(self):
                self.state = "green"

            def advance(self):
                self.state = self.transitions[self.state]
                print(self.state)


        light = TrafficLight()
        light.advance()
        light.advance()
        light.advance()
        """,
        ("yellow", "red", "green"),
    ),
)


BUILTIN_DEFINITIONS: Final[tuple[Mapping[str, object], ...]] = _CREATIONAL + _STRUCTURAL + _BEHAVIORAL


@lru_cache(maxsize=1)
def default_catalog() -> PatternCatalog:
    """Return the catalog built from the built-in definitions.

    Returns:
        PatternCatalog: Immutable catalog shared by every caller.
    """

    return PatternCatalog.build(BUILTIN_DEFINITIONS)


__all__ = ["BUILTIN_DEFINITIONS", "default_catalog"]
