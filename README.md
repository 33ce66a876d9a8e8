# patternkit

A compact collection of classic object-oriented design patterns, each in
its own module with a small demonstration you can run from the command line.

| Module | Pattern | What it models |
| --- | --- | --- |
| `patternkit.calculator` | Simple factory | A four-operation calculator; `create_operation` picks `Add`, `Sub`, `Mul` or `Div` from an operator symbol |
| `patternkit.cashier` | Strategy (with a simple factory) | A till that charges full price, a discount, or "money back over a threshold" |
| `patternkit.decorator` | Decorator | Components wrapped by decorators, and a `Person` dressed in layers of `Finery` |
| `patternkit.proxy` | Proxy | A `Proxy` that runs work before and after forwarding to a `RealSubject` |
| `patternkit.factory_method` | Factory method | One factory class per operation (`AddFactory`, `SubFactory`, `MulFactory`, `DivFactory`) |

The package has no dependencies beyond the Python standard library and
supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demonstrations

Each module has a short command that prints its result. All arguments are
optional; without them each command runs its default example.

```
patternkit-calculator [A] [OP] [B]          # default: 2 + 3 -> 5
patternkit-cashier [MODE] [MONEY]           # default: normal 100 -> 100
patternkit-factory-method [A] [B] [--operator OP]   # default: 1 + 2 -> 3
patternkit-decorator [NAME]                 # default: Tom
patternkit-proxy [NAME]                     # default: "Proxy Pattern"
```

`OP` is one of `+`, `-`, `*`, `/` (quote `*` in most shells), and `MODE`
is one of `normal`, `rebate`, `return`. For example:

```
patternkit-calculator 6 "*" 7        # 42
patternkit-cashier return 100        # 85
patternkit-factory-method 1 0 --operator /   # error: divisor cannot be zero
```

## Using the library

### Strategy: pricing at the till

`CashContext` picks a pricing strategy by name and applies it:

```python
from patternkit.cashier import CashContext

CashContext("normal").accept(100)   # 100, full price
CashContext("rebate").accept(100)   # 80.0, everything at 80 %
CashContext("return").accept(100)   # 85, 5 back for every full 30 spent
```

The strategies themselves (`CashNormal`, `CashRebate`, `CashReturn`) share
the `CashStrategy` interface and its `accept_cash` method, and
`create_cash_strategy(mode)` builds one from the same names. `CashRebate`
takes a `rebate` fraction and `CashReturn` takes `condition` and
`return_amount`, so other rates can be built directly. An unknown mode
raises `ValueError`.

### Simple factory and factory method

`patternkit.calculator.create_operation` takes one of `"+"`, `"-"`, `"*"`
or `"/"` and returns the matching operation; set its `number_a` and
`number_b` and call `result()`. An unknown operator raises `ValueError`.
Dividing by zero here follows floating-point rules and gives an infinity
or NaN rather than raising.

```python
from patternkit.calculator import create_operation

op = create_operation("/")
op.number_a, op.number_b = 1, 4
op.result()   # 0.25
```

In `patternkit.factory_method` the choice moves into the factories: each of
`AddFactory`, `SubFactory`, `MulFactory` and `DivFactory` has a
`create_operation()` method that returns its own kind of operation.
Dividing by zero there raises `ZeroDivisionError`.

### Decorator

`Decorator` wraps any `Component` through `set_component`;
`ConcreteDecoratorA` and `ConcreteDecoratorB` print their own messages
after the wrapped component's `operation()`.

`Finery` items (`TShirt`, `BigTrouser`, `Sneakers`, `Suit`) wrap a `Person`
or another item with `decorate`; calling `show()` on the outermost item
prints every layer from the outside in and ends with the person.

### Proxy

`Proxy` wraps a `RealSubject` (a default one if none is given); its
`request()` calls `pre_request()`, forwards to the real subject, then calls
`post_request()`. `pre_request()` and `post_request()` print and return
their announcements, and the proxy keeps `requests_started`,
`requests_completed` and `requests_in_flight` counts.

## What it does not do

The modules print to standard output and keep no state between runs; there
is no interactive calculator or till, and no way to save results.