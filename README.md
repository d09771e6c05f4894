# lldpatterns

Small, self-contained examples of object-oriented principles, the SOLID
principles and common design patterns. Most topics come in two versions: a
poor design (`bad_*`) and a better design (`good_*`). Each one prints what it
does, so you can run them and compare the output.

## Topics

Object-oriented principles:

- `lldpatterns.encapsulation`: `BadBankAccount` lets anyone set the balance.
  `BankAccount` has a read-only `balance` and rejects non-positive amounts and
  overdrafts with `ValueError`.
- `lldpatterns.abstraction`: `SendEmail` makes the caller run `connect`,
  `authenticate`, `send_gmail` and `disconnect`. `MailSender.send_gmail()` runs
  all those steps itself.
- `lldpatterns.inheritance`: `Car` and `Bike` share the fields and the
  `start`/`stop` behaviour of `GoodVehicle`.
- `lldpatterns.polymorphism`: `bad_polymorphism` checks each vehicle's concrete
  type and raises `TypeError` on anything it does not know. `good_polymorphism`
  uses `Car`, `Bike` and `Plane` through the abstract `Vehicle`. Both take an
  optional iterable of vehicles.

SOLID:

- `lldpatterns.single_responsibility`: `BadUser` saves itself and sends its own
  mail. `UserRepository` and `EmailService` each do one job for a plain `User`.
- `lldpatterns.open_closed`: `calculate_discount` switches on a `BadInvoice`'s
  type string. `RegularDiscount`, `PremiumDiscount` and `VipDiscount` implement
  `Discount.calculate`.
- `lldpatterns.liskov_substitution`: `Ostrich.fly()` raises `CannotFlyError`.
  With `Bird` and `FlyingBird`, `Kiwi` only walks and `Eagle` walks and flies.
- `lldpatterns.interface_segregation`: `Robot.eat()` raises `CannotEatError`.
  With separate `Workable` and `Eatable` interfaces, `Robo` only works.
- `lldpatterns.dependency_inversion`: `UserService` is tied to `EmailNotifier`.
  `UserServices` takes any `Notifier`, such as `GmailNotifier` or `SMSNotifier`.

Creational patterns:

- `lldpatterns.singleton`: `bad_get_logger()` creates its instance without a
  guard. `get_logger()` creates exactly one `Logger`, even across threads.
- `lldpatterns.factory`: `get_notifier("Email")` and `get_notifier("SMS")`
  return notifiers. Any other name raises `ValueError`.
- `lldpatterns.builder`: `BadComputer` takes four positional parts.
  `GamingBuilder` sets the parts through chained `set_cpu`, `set_gpu`,
  `set_ram` and `set_ssd` calls, then `build()` returns the result.
- `lldpatterns.prototype`: `Document.clone()` returns a shallow copy.

Behavioural patterns:

- `lldpatterns.observer`: `BadPublisher` is wired to fixed subscribers.
  `NewsPublisher` has `register`, `unregister` and `notify_all` for any
  `Observer`, such as `EmailSubscriber` and `SMSSubscriber`.
- `lldpatterns.strategy`: `BadCart` switches on a user-type string. `Cart`
  prices its checkout with a `DiscountStrategy`: `RegularDiscount`,
  `PremiumDiscount` or `VIPDiscount`.

Structural patterns:

- `lldpatterns.adapter`: `LegacyPrinterAdapter` makes a `LegacyPrinter` usable
  as a `Printer`.
- `lldpatterns.decorator`: `BadCoffee` uses flags for its add-ons.
  `MilkDecorator` and `SugarDecorator` wrap any `Coffee`.

## Installation

```
pip install .
```

## Running every example

```
lldpatterns
```

This runs the examples in a fixed order, printing the output of each topic.
`python -m lldpatterns.cli` does the same.

Two examples are left out of the run because they raise on purpose:
`liskov_substitution.bad_liskov()` raises `CannotFlyError` and
`interface_segregation.bad_interface_segregation()` raises `CannotEatError`.
You can call them yourself.

## Using the examples from code

```python
from lldpatterns.encapsulation import BankAccount
from lldpatterns.decorator import SimpleCoffee, MilkDecorator, SugarDecorator
from lldpatterns.observer import NewsPublisher, EmailSubscriber

account = BankAccount()
account.deposit(45)
account.withdraw(40)
print(account.balance)            # 5.0

coffee = SugarDecorator(MilkDecorator(SimpleCoffee()))
print(coffee.description(), "=", coffee.cost())   # Simple Coffee, Milk, Sugar = 7.0

publisher = NewsPublisher()
publisher.register(EmailSubscriber("user@example.com"))
publisher.notify_all("New article published")
# Email to user@example.com received: New article published
```

## What it does not do

Nothing here talks to the outside world. The mail senders, notifiers, the
database `save` methods and the printers only print a line describing what
they would do. No mail or text message is sent and nothing is stored.

## Tests

```
pip install .[test]
pytest
```